from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

# Request fields are optional on purpose: presence is checked in the routers so a
# missing field answers 400 with a readable message instead of a 422.
AmountField = Optional[Any]


class RechargeRequest(BaseModel):
    amount: AmountField = Field(None, description="Amount to charge, positive")
    userId: Optional[str] = Field(None, description="Caller's user identifier")
    operator: Optional[str] = Field(None, description="Mobile operator, e.g. YAS or MOOV")
    model_config = ConfigDict(coerce_numbers_to_str=True)


class WithdrawRequest(BaseModel):
    amount: AmountField = Field(None, description="Amount to pay out, positive")
    phone: Optional[str] = Field(None, description="Recipient mobile-money account")
    operator: Optional[str] = Field(None, description="Mobile operator, e.g. YAS or MOOV")
    model_config = ConfigDict(coerce_numbers_to_str=True)


class RechargeResponse(BaseModel):
    status: str
    message: str
    token: Optional[str] = None
    payment_url: Optional[str] = None
    raw: Dict[str, Any] = Field(default_factory=dict)


class InvoiceStatusResponse(BaseModel):
    status: str
    data: Dict[str, Any]


class IPNResponse(BaseModel):
    status: str
    token: str
    invoice_status: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)


class WithdrawResponse(BaseModel):
    status: str
    message: str
    data: Dict[str, Any] = Field(default_factory=dict)
