"""Run the quote API under uvicorn, honouring the PORT environment variable."""

from __future__ import annotations

import logging
import os

import uvicorn

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8000


def resolve_port(raw: str | None) -> int:
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid PORT value '{raw}', using default {DEFAULT_PORT}")
        return DEFAULT_PORT


def main() -> None:
    uvicorn.run(
        "src.app.main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=resolve_port(os.environ.get("PORT")),
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
