"""
Webhooks Router - PayDunya Instant Payment Notifications.

The notification body is never trusted: only its token is read, and the invoice
status is fetched again from PayDunya before answering.
"""

import logging
import re
from typing import Any, Dict, Iterable, Tuple

from fastapi import APIRouter, Depends, Request

from paycash.api.deps import get_provider
from paycash.api.schemas.payments import IPNResponse
from paycash.payments import PaymentProvider
from paycash.utils.enums import ResponseStatus

logger = logging.getLogger(__name__)

router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

_BRACKET_KEY = re.compile(r"[^\[\]]+")


def nest_form_fields(items: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    """Turn ``data[invoice][token]=abc`` style fields into nested dicts."""
    nested: Dict[str, Any] = {}
    for key, value in items:
        parts = _BRACKET_KEY.findall(key)
        if not parts:
            continue
        node = nested
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value
    return nested


async def _read_notification(request: Request) -> Any:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return nest_form_fields(form.multi_items())
    try:
        return await request.json()
    except ValueError:
        return None


@router.post("/ipn", response_model=IPNResponse)
async def paydunya_ipn(
    request: Request,
    provider: PaymentProvider = Depends(get_provider),
):
    """Receive an IPN, re-verify the invoice and always acknowledge with 200."""
    payload = await _read_notification(request)
    event = provider.handle_webhook(payload)

    invoice = await provider.verify_payment(event.token)
    if invoice.is_completed:
        logger.info(f"Payment confirmed: token={invoice.token}")
        status = ResponseStatus.SUCCESS
    else:
        logger.warning(f"Payment not confirmed: token={invoice.token} status={invoice.status}")
        status = ResponseStatus.FAILED

    return IPNResponse(
        status=status,
        token=invoice.token,
        invoice_status=invoice.status,
        data=invoice.raw,
    )
