"""Startup-time helpers for safe config logging."""

import os

from intentpay.common.logging import logger

SECRET_MARKERS = ("KEY", "SECRET", "PASSWORD", "TOKEN")
STRIPE_KEY_MODES = {
    "sk_test_": "test",
    "rk_test_": "test",
    "sk_live_": "live",
    "rk_live_": "live",
}


def _safe_env(name: str) -> str:
    """Return env value, redacted when the variable name looks secret."""

    value = os.getenv(name)
    if value is None:
        return "<unset>"
    if any(marker in name for marker in SECRET_MARKERS):
        return "<redacted>"
    return value


def stripe_key_mode(api_key: str) -> str:
    """Classify a Stripe secret or restricted key by prefix without exposing it."""

    for prefix, mode in STRIPE_KEY_MODES.items():
        if api_key.startswith(prefix):
            return mode
    return "unknown"


def log_startup_config(service_name: str, keys: list[str], stripe_key: str | None = None) -> None:
    """Log selected env keys plus the Stripe key mode for quick troubleshooting."""

    config = {"service": service_name}
    for key in keys:
        config[key] = _safe_env(key)
    if stripe_key is not None:
        config["stripe_mode"] = stripe_key_mode(stripe_key)
        if config["stripe_mode"] == "unknown":
            logger.warning("stripe secret key has an unrecognized prefix")
    logger.info("startup_config=%s", config)
