#!/usr/bin/env python3
"""
Run the storefront API locally with uvicorn.

Reads SQUARE_* settings from .env / the environment. Without a payment
application id and location id, checkouts are simulated (flagged simulated=true).
Use --mock-catalog to serve the local seed menu instead of Square.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn
from dotenv import load_dotenv

load_dotenv()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the storefront menu & order API")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", 8000)))
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.add_argument("--mock-catalog", action="store_true", help="Serve the local seed catalog (INTEGRATIONS_MODE=mock)")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    setup_logging(args.verbose)
    if args.mock_catalog:
        os.environ["INTEGRATIONS_MODE"] = "mock"

    uvicorn.run("storefront.api.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
