"""
PayDunya Payment Provider.

Talks to the PayDunya REST API (https://app.paydunya.com/api/v1):
- POST checkout-invoice/create        -> hosted checkout invoice
- GET  checkout-invoice/confirm/{tok} -> invoice status
- POST disburse                       -> mobile-money payout

Authentication is three static key headers (see Settings.paydunya_headers).
Nothing is retried: a failed call raises UpstreamError and the router answers 500.
"""

import logging
from typing import Any, Dict, Iterator, Mapping, Optional
from urllib.parse import quote

import httpx

from paycash.core.config import Settings
from paycash.core.exceptions import GatewayError, InvalidWebhookError, UpstreamError
from paycash.payments.base import (
    Amount,
    CheckoutResult,
    DisbursementResult,
    InvoiceStatus,
    PaymentProvider,
    WebhookEvent,
)
from paycash.utils.enums import (
    DEFAULT_WITHDRAW_MODE,
    OPERATOR_WITHDRAW_MODES,
    PAYDUNYA_OK_CODE,
    ResponseStatus,
)

logger = logging.getLogger(__name__)

# Known fields holding the hosted checkout link, in lookup order
CHECKOUT_URL_FIELDS = ("checkout_url", "payment_url", "invoice_url", "url")


def _iter_strings(data: Mapping[str, Any]) -> Iterator[str]:
    # Top-level strings first, then nested dicts depth-first
    nested = []
    for value in data.values():
        if isinstance(value, str):
            yield value
        elif isinstance(value, Mapping):
            nested.append(value)
    for child in nested:
        yield from _iter_strings(child)


def extract_checkout_url(data: Any) -> Optional[str]:
    """
    Best-effort search for the payment page link in an invoice-create response.

    Known field names win (a nested ``checkout_url.payment_url`` counts); PayDunya
    itself returns the link in ``response_text``, which the fallback scan for any
    string starting with "http" picks up.
    """
    if not isinstance(data, Mapping):
        return None

    for name in CHECKOUT_URL_FIELDS:
        value = data.get(name)
        if isinstance(value, str) and value.strip():
            return value
        if isinstance(value, Mapping):
            nested = value.get("payment_url")
            if isinstance(nested, str) and nested.strip():
                return nested

    for value in _iter_strings(data):
        if value.startswith("http"):
            return value
    return None


def extract_invoice_token(data: Any) -> Optional[str]:
    if not isinstance(data, Mapping):
        return None
    token = data.get("token")
    if not token and isinstance(data.get("invoice"), Mapping):
        token = data["invoice"].get("token")
    return str(token) if token else None


def withdraw_mode_for(operator: str) -> str:
    """Map a mobile operator to PayDunya's withdraw_mode. Exact match only; anything else falls back to flooz."""
    mode = OPERATOR_WITHDRAW_MODES.get(operator)
    if mode is None:
        logger.warning(f"Unknown operator '{operator}', using withdraw mode '{DEFAULT_WITHDRAW_MODE}'")
        return DEFAULT_WITHDRAW_MODE
    return mode


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class PayDunyaProvider(PaymentProvider):
    """PayDunya checkout invoices and disbursements over a shared httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self.client = client
        self.settings = settings
        self.base_url = settings.paydunya_base_url.rstrip("/")
        self.timeout = httpx.Timeout(settings.paydunya_timeout)

    def get_name(self) -> str:
        return "paydunya"

    async def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug(f"PayDunya {method} {url}")
        try:
            response = await self.client.request(
                method,
                url,
                json=payload,
                headers=self.settings.paydunya_headers(),
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            raise UpstreamError(f"PayDunya request timed out after {self.settings.paydunya_timeout}s") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"PayDunya request failed: {e}") from e

        body = _response_body(response)
        if response.is_error:
            raise UpstreamError(
                f"PayDunya returned HTTP {response.status_code}",
                status_code=response.status_code,
                payload=body,
            )
        if not isinstance(body, dict):
            raise UpstreamError(
                "PayDunya returned an unexpected response",
                status_code=response.status_code,
                payload=body,
            )
        logger.debug(f"PayDunya {method} {url} -> {response.status_code}")
        return body

    @staticmethod
    def _check_response_code(body: Dict[str, Any]) -> None:
        code = body.get("response_code")
        if code is not None and str(code) != PAYDUNYA_OK_CODE:
            raise UpstreamError(
                body.get("response_text") or f"PayDunya error code {code}",
                payload=body,
            )

    async def create_checkout(
        self,
        amount: Amount,
        description: str,
        callback_url: str,
        return_url: str,
        cancel_url: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> CheckoutResult:
        quantity = 1
        total = quantity * amount
        payload = {
            "invoice": {
                "items": {
                    "item_0": {
                        "name": description,
                        "quantity": quantity,
                        "unit_price": amount,
                        "total_price": total,
                    }
                },
                "total_amount": total,
                "description": description,
            },
            "store": {"name": self.settings.paydunya_store_name},
            "actions": {
                "callback_url": callback_url,
                "return_url": return_url,
                "cancel_url": cancel_url,
            },
            "custom_data": dict(metadata or {}),
        }
        body = await self._request("POST", "checkout-invoice/create", payload)
        self._check_response_code(body)

        result = CheckoutResult(
            token=extract_invoice_token(body),
            checkout_url=extract_checkout_url(body),
            raw=body,
        )
        if result.checkout_url is None:
            logger.warning(f"No checkout URL found in PayDunya response for token {result.token}")
        logger.info(f"Invoice created: token={result.token} total={total}")
        return result

    async def verify_payment(self, token: str) -> InvoiceStatus:
        # Token is one path segment; "/" and dot segments must not reach other endpoints
        if token in (".", ".."):
            raise GatewayError("Invalid invoice token")
        body = await self._request("GET", f"checkout-invoice/confirm/{quote(token, safe='')}")
        self._check_response_code(body)
        status = body.get("status")
        return InvoiceStatus(token=token, status=str(status) if status is not None else None, raw=body)

    async def disburse(self, amount: Amount, account_alias: str, withdraw_mode: str) -> DisbursementResult:
        payload = {
            "account_alias": account_alias,
            "amount": amount,
            "withdraw_mode": withdraw_mode,
        }
        body = await self._request("POST", "disburse", payload)
        status = body.get("status")
        success = str(status or "").lower() == ResponseStatus.SUCCESS
        message = body.get("message") or body.get("response_text")
        if message is not None:
            message = str(message)
        if success:
            logger.info(f"Disbursement accepted: {amount} to {account_alias} via {withdraw_mode}")
        else:
            logger.warning(f"Disbursement refused: {message or status}")
        return DisbursementResult(success=success, status=status, message=message, raw=body)

    def handle_webhook(self, payload: Any) -> WebhookEvent:
        """
        Read the invoice token from an IPN body.

        PayDunya posts form fields ``data[invoice][token]`` (unflattened by the
        router into ``{"data": {"invoice": {...}}}``); a plain JSON
        ``{"invoice": {...}}`` body is accepted as well.
        """
        if not isinstance(payload, Mapping):
            raise InvalidWebhookError("NO_INVOICE")
        invoice = payload.get("invoice")
        if invoice is None and isinstance(payload.get("data"), Mapping):
            invoice = payload["data"].get("invoice")
        if not isinstance(invoice, Mapping):
            raise InvalidWebhookError("NO_INVOICE")
        token = invoice.get("token")
        if token is None or not str(token).strip():
            raise InvalidWebhookError("NO_TOKEN")
        return WebhookEvent(token=str(token).strip(), payload=dict(payload))
