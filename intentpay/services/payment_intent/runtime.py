"""Process bootstrap shared by the HTTP and serverless entrypoints."""

from intentpay.common.config import settings
from intentpay.common.logging import configure_logging
from intentpay.common.startup import log_startup_config
from intentpay.common.tracing import setup_tracing
from intentpay.services.payment_intent.gateway import StripeGateway
from intentpay.services.payment_intent.service import PaymentIntentService


def bootstrap() -> PaymentIntentService:
    """Configure logging and tracing, then build the process-wide handler."""

    configure_logging()
    setup_tracing(settings.service_name)
    log_startup_config(
        settings.service_name,
        ["SERVICE_NAME", "STRIPE_SECRET_KEY", "STRIPE_API_VERSION", "TRACING_ENABLED"],
        stripe_key=settings.stripe_secret_key,
    )
    gateway = StripeGateway(settings.stripe_secret_key, settings.stripe_api_version)
    return PaymentIntentService(gateway, service_name=settings.service_name)
