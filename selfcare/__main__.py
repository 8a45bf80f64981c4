"""
Run the self-care recommendation server.

Usage:
    python -m selfcare
"""
from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv

from .dataset.config import ENV_FILE, env


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    load_dotenv(ENV_FILE)
    uvicorn.run(
        "selfcare.app:app",
        host=env("SELFCARE_HOST", "127.0.0.1"),
        port=int(env("SELFCARE_PORT", "8000")),
    )


if __name__ == "__main__":
    main()
