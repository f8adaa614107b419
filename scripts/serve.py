#!/usr/bin/env python3
"""
Run the proverbs app with uvicorn, using HOST/PORT from the environment.

Usage:
  PORT=3000 python scripts/serve.py [--reload]
"""
from __future__ import annotations

import argparse

import uvicorn

from proverbs.core.config import get_settings


def main() -> None:
    ap = argparse.ArgumentParser(description="Run the proverbs web app")
    ap.add_argument("--reload", action="store_true", help="Reload on code changes (dev only)")
    args = ap.parse_args()

    settings = get_settings()
    uvicorn.run(
        "proverbs.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
