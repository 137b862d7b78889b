"""
Run the gateway with uvicorn on $PORT.

Usage:
    python -m paycash
"""

import uvicorn
from dotenv import load_dotenv


def main() -> None:
    load_dotenv()
    from paycash.core.config import get_settings

    settings = get_settings()
    uvicorn.run("paycash.api.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
