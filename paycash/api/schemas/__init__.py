from paycash.api.schemas.payments import (
    RechargeRequest,
    RechargeResponse,
    InvoiceStatusResponse,
    IPNResponse,
    WithdrawRequest,
    WithdrawResponse,
)
