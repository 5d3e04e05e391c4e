"""Run the auctionauth API with uvicorn."""

from __future__ import annotations

import os

import uvicorn

from auctionauth.api import create_app
from auctionauth.config import Settings
from auctionauth.logging import setup_logging


def main() -> None:
    """Start the server. Host and port come from AUCTIONAUTH_HOST / AUCTIONAUTH_PORT."""
    setup_logging()
    settings = Settings.from_env()
    uvicorn.run(
        create_app(settings),
        host=os.environ.get("AUCTIONAUTH_HOST", "127.0.0.1"),
        port=int(os.environ.get("AUCTIONAUTH_PORT", "8000")),
        log_level="info",
    )


if __name__ == "__main__":
    main()
