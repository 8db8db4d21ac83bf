#!/usr/bin/env python3
"""Startup script for the NGO Report Review API.

Created: 2026-10-12
Version: 1.0.0
License: MIT

Example:
    Run on the configured host and port::

        python -m report_api.run_api

    Or choose a port::

        python -m report_api.run_api --port 8300
"""

import argparse
import uvicorn

from agents.report_reviewer import ConfigurationError
from utils.config import config
from utils.logging_config import setup_logging
from .api import app
from .api_utils import initialize_reviewer


def main():
    """Main entry point for running the API server."""
    parser = argparse.ArgumentParser(
        description="NGO Report Review API Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run on the default port
  python -m report_api.run_api

  # Run on port 8300 with auto-reload
  python -m report_api.run_api --port 8300 --reload
        """
    )

    parser.add_argument(
        "--host",
        type=str,
        default=config.API_HOST,
        help=f"Host to bind to (default: {config.API_HOST})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.API_PORT,
        help=f"Port to bind to (default: {config.API_PORT})"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )

    args = parser.parse_args()

    setup_logging()

    print(f"Server will run on: http://{args.host}:{args.port}")
    print(f"API documentation: http://{args.host}:{args.port}/docs")
    print()

    try:
        initialize_reviewer()
        print("✓ Report reviewer initialized successfully")
        print()
    except ConfigurationError as e:
        print(f"✗ Failed to initialize report reviewer: {e}")
        return 1

    if args.reload:
        # Reload needs an import string; the worker re-initializes in lifespan
        uvicorn.run("report_api.api:app", host=args.host, port=args.port, reload=True)
    else:
        uvicorn.run(app, host=args.host, port=args.port)

    return 0


if __name__ == "__main__":
    exit(main())
