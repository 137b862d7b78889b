"""
String constants for PayDunya fields.
Using plain strings (not Enums) so values go straight into JSON payloads.
"""


class Operator:
    YAS = "YAS"
    MOOV = "MOOV"


class WithdrawMode:
    TMONEY = "tmoney"
    FLOOZ = "flooz"


class InvoiceState:
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


class ResponseStatus:
    SUCCESS = "success"
    ERROR = "error"
    FAILED = "failed"


OPERATOR_WITHDRAW_MODES = {
    Operator.YAS: WithdrawMode.TMONEY,
    Operator.MOOV: WithdrawMode.FLOOZ,
}

DEFAULT_WITHDRAW_MODE = WithdrawMode.FLOOZ

# PayDunya "response_code" for a successful call
PAYDUNYA_OK_CODE = "00"
