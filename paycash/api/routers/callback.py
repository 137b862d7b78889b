"""
Callback Router - page the customer lands on after the PayDunya checkout.

Purely informational: payment state is only trusted from /ipn and /invoice_status.
"""

import html
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

router = APIRouter()

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>PayCash - {title}</title>
</head>
<body>
  <h1>{title}</h1>
  <p>{message}</p>
  <ul>
    <li>Token: <strong id="token">{token}</strong></li>
    <li>User: <strong id="user-id">{user_id}</strong></li>
  </ul>
  <p>You can close this page and return to the application.</p>
</body>
</html>
"""


def render_callback_page(token: str, user_id: str, cancelled: bool = False) -> str:
    if cancelled:
        title = "Payment cancelled"
        message = "The payment was cancelled. No amount has been charged."
    else:
        title = "Payment received"
        message = "Your payment is being confirmed. Your balance will be updated shortly."
    return PAGE_TEMPLATE.format(
        title=title,
        message=message,
        token=html.escape(token, quote=True),
        user_id=html.escape(user_id, quote=True),
    )


@router.get("/paydunya_callback", response_class=HTMLResponse)
async def paydunya_callback(
    token: Optional[str] = Query(None),
    userId: Optional[str] = Query(None),
    cancelled: bool = Query(False),
):
    return HTMLResponse(render_callback_page(token or "", userId or "", cancelled=cancelled))
