"""Send one payment-intent request to a running deployment and print the result.

Use with Stripe test-mode keys only.
"""

import argparse
import asyncio
import time
from uuid import uuid4

import httpx


async def send_one(client: httpx.AsyncClient, url: str, payload: dict):
    """POST one request and return (status_code, latency_ms, body_text)."""

    started = time.perf_counter()
    resp = await client.post(url, json=payload, headers={"x-correlation-id": str(uuid4())})
    latency = (time.perf_counter() - started) * 1000
    return resp.status_code, latency, resp.text


async def run(base_url: str, path: str, amount: float, email: str, name: str, description: str):
    """Run the smoke request plus a method-gate check."""

    url = f"{base_url.rstrip('/')}{path}"
    payload = {
        "amount": amount,
        "customerEmail": email,
        "customerName": name,
        "description": description,
    }
    async with httpx.AsyncClient(timeout=10.0) as client:
        status, latency, body = await send_one(client, url, payload)
        gate = await client.get(url)

    print(f"status={status}")
    print(f"latency_ms={latency:.2f}")
    print(f"body={body}")
    print(f"method_gate_status={gate.status_code} allow={gate.headers.get('allow')}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--path", default="/create-payment-intent")
    parser.add_argument("--amount", type=float, default=25.00)
    parser.add_argument("--email", default="smoke@example.com")
    parser.add_argument("--name", default="Smoke Test")
    parser.add_argument("--description", default="Smoke test order")
    args = parser.parse_args()
    asyncio.run(run(args.base_url, args.path, args.amount, args.email, args.name, args.description))
