"""
Invoices Router - hosted checkout creation and status lookup.
"""

import logging
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query

from paycash.api.deps import get_provider
from paycash.api.schemas.payments import InvoiceStatusResponse, RechargeRequest, RechargeResponse
from paycash.core.config import Settings, get_settings
from paycash.payments import PaymentProvider
from paycash.utils.enums import ResponseStatus
from paycash.utils.validation import parse_amount, require_fields

logger = logging.getLogger(__name__)

router = APIRouter()


def _callback_page_url(settings: Settings, user_id: str, cancelled: bool = False) -> str:
    params = {"userId": user_id}
    if cancelled:
        params["cancelled"] = "1"
    return f"{settings.base_url}/paydunya_callback?{urlencode(params)}"


@router.post("/recharge", response_model=RechargeResponse)
async def create_recharge(
    payload: RechargeRequest,
    provider: PaymentProvider = Depends(get_provider),
    settings: Settings = Depends(get_settings),
):
    """Create a checkout invoice and return the hosted payment link."""
    require_fields(payload.model_dump(), ("amount", "userId", "operator"))
    amount = parse_amount(payload.amount)
    operator = payload.operator.strip()
    user_id = payload.userId.strip()

    result = await provider.create_checkout(
        amount=amount,
        description=f"Recharge via {operator}",
        callback_url=f"{settings.base_url}/ipn",
        return_url=_callback_page_url(settings, user_id),
        cancel_url=_callback_page_url(settings, user_id, cancelled=True),
        metadata={"user_id": user_id, "operator": operator},
    )
    logger.info(f"Recharge invoice for user {user_id}: token={result.token}")
    return RechargeResponse(
        status=ResponseStatus.SUCCESS,
        message="Invoice created",
        token=result.token,
        payment_url=result.checkout_url,
        raw=result.raw,
    )


@router.get("/invoice_status", response_model=InvoiceStatusResponse)
async def get_invoice_status(
    token: Optional[str] = Query(None, description="Invoice token returned by /recharge"),
    provider: PaymentProvider = Depends(get_provider),
):
    """Ask PayDunya for the current status of an invoice."""
    require_fields({"token": token}, ("token",))
    invoice = await provider.verify_payment(token.strip())
    return InvoiceStatusResponse(status=ResponseStatus.SUCCESS, data=invoice.raw)
