"""
Gateway configuration.

All values come from environment variables (a .env file in the project root is
loaded by python-dotenv when the API module is imported).

Usage:
    from paycash.core.config import get_settings

    settings = get_settings()
    settings.paydunya_headers()
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List

DEFAULT_PAYDUNYA_BASE_URL = "https://app.paydunya.com/api/v1"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Static configuration shared by every request."""
    port: int = 3000
    base_url: str = "http://localhost:3000"
    paydunya_base_url: str = DEFAULT_PAYDUNYA_BASE_URL
    paydunya_master_key: str = ""
    paydunya_private_key: str = ""
    paydunya_token: str = ""
    paydunya_store_name: str = "PayCash"
    paydunya_timeout: float = 15.0
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            port=int(os.getenv("PORT", "3000")),
            base_url=os.getenv("BASE_URL", "http://localhost:3000").rstrip("/"),
            paydunya_base_url=os.getenv("PAYDUNYA_BASE_URL", DEFAULT_PAYDUNYA_BASE_URL).rstrip("/"),
            paydunya_master_key=os.getenv("PAYDUNYA_MASTER_KEY", ""),
            paydunya_private_key=os.getenv("PAYDUNYA_PRIVATE_KEY", ""),
            paydunya_token=os.getenv("PAYDUNYA_TOKEN", ""),
            paydunya_store_name=os.getenv("PAYDUNYA_STORE_NAME", "PayCash"),
            paydunya_timeout=float(os.getenv("PAYDUNYA_TIMEOUT", "15")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")) or ["*"],
        )

    @property
    def has_credentials(self) -> bool:
        return all((self.paydunya_master_key, self.paydunya_private_key, self.paydunya_token))

    def paydunya_headers(self) -> Dict[str, str]:
        """Static key headers PayDunya expects on every call."""
        return {
            "PAYDUNYA-MASTER-KEY": self.paydunya_master_key,
            "PAYDUNYA-PRIVATE-KEY": self.paydunya_private_key,
            "PAYDUNYA-TOKEN": self.paydunya_token,
            "Content-Type": "application/json",
        }


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
