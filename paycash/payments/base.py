"""
Payment Provider - Abstract base for payment gateways.

Implementations: PayDunyaProvider. Every method performs at most one outbound
call and raises UpstreamError when the gateway cannot be reached or refuses it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from paycash.utils.enums import InvoiceState

Amount = Union[int, float]


@dataclass
class CheckoutResult:
    """Result of creating a hosted checkout invoice."""
    token: Optional[str]
    checkout_url: Optional[str]
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass
class InvoiceStatus:
    """Invoice status as reported by the gateway's confirm endpoint."""
    token: str
    status: Optional[str]  # pending, completed, cancelled, failed
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_completed(self) -> bool:
        return (self.status or "").lower() == InvoiceState.COMPLETED


@dataclass
class DisbursementResult:
    """Result of a payout request."""
    success: bool
    status: Optional[str] = None
    message: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass
class WebhookEvent:
    """Parsed IPN notification. Only the token is used; the rest is informational."""
    token: str
    payload: Dict[str, Any]


class PaymentProvider(ABC):
    """Abstract payment provider."""

    @abstractmethod
    def get_name(self) -> str:
        """Provider display name."""
        pass

    @abstractmethod
    async def create_checkout(
        self,
        amount: Amount,
        description: str,
        callback_url: str,
        return_url: str,
        cancel_url: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> CheckoutResult:
        """Create a checkout invoice and return its token and payment page URL."""
        pass

    @abstractmethod
    async def verify_payment(self, token: str) -> InvoiceStatus:
        """Verify invoice status by token."""
        pass

    @abstractmethod
    async def disburse(self, amount: Amount, account_alias: str, withdraw_mode: str) -> DisbursementResult:
        """Pay funds out to a mobile-money account."""
        pass

    @abstractmethod
    def handle_webhook(self, payload: Any) -> WebhookEvent:
        """Extract the invoice token from a notification body. Raises InvalidWebhookError."""
        pass
