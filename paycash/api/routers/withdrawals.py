"""
Withdrawals Router - mobile-money payouts.
"""

import logging

from fastapi import APIRouter, Depends

from paycash.api.deps import get_provider
from paycash.api.schemas.payments import WithdrawRequest, WithdrawResponse
from paycash.payments import PaymentProvider, withdraw_mode_for
from paycash.utils.enums import ResponseStatus
from paycash.utils.validation import parse_amount, require_fields

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/withdraw", response_model=WithdrawResponse)
async def withdraw(
    payload: WithdrawRequest,
    provider: PaymentProvider = Depends(get_provider),
):
    """Send funds to the given phone number through the operator's withdraw mode."""
    require_fields(payload.model_dump(), ("amount", "phone", "operator"))
    amount = parse_amount(payload.amount)
    mode = withdraw_mode_for(payload.operator)

    result = await provider.disburse(amount=amount, account_alias=payload.phone.strip(), withdraw_mode=mode)
    if result.success:
        return WithdrawResponse(
            status=ResponseStatus.SUCCESS,
            message="Withdrawal completed",
            data=result.raw,
        )
    return WithdrawResponse(
        status=ResponseStatus.ERROR,
        message=result.message or "Withdrawal failed",
        data=result.raw,
    )
