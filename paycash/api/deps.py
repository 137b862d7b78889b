"""
FastAPI dependencies shared by the routers.
"""

import httpx
from fastapi import Depends, Request

from paycash.core.config import Settings, get_settings
from paycash.payments import PaymentProvider, get_payment_provider


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared outbound client created by the lifespan."""
    return request.app.state.http_client


def get_provider(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> PaymentProvider:
    return get_payment_provider(client, settings)
