"""
Payment providers - abstraction for payment gateways.

Usage:
    from paycash.payments import get_payment_provider

    provider = get_payment_provider(http_client)
    result = await provider.create_checkout(amount=500, description="Recharge via YAS", ...)
"""

from typing import Optional

import httpx

from paycash.core.config import Settings, get_settings
from paycash.payments.base import (
    CheckoutResult,
    DisbursementResult,
    InvoiceStatus,
    PaymentProvider,
    WebhookEvent,
)
from paycash.payments.paydunya_provider import (
    PayDunyaProvider,
    extract_checkout_url,
    withdraw_mode_for,
)


def get_payment_provider(client: httpx.AsyncClient, settings: Optional[Settings] = None) -> PaymentProvider:
    """Return the PayDunya provider bound to the shared client."""
    return PayDunyaProvider(client, settings or get_settings())


__all__ = [
    "get_payment_provider",
    "PaymentProvider",
    "PayDunyaProvider",
    "CheckoutResult",
    "DisbursementResult",
    "InvoiceStatus",
    "WebhookEvent",
    "extract_checkout_url",
    "withdraw_mode_for",
]
