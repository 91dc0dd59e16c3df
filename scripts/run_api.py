#!/usr/bin/env python
"""
Start the Movies API server.

Usage:
    # Listen on PORT (default 1234)
    python scripts/run_api.py

    # Override the port and write logs/api.log as well
    python scripts/run_api.py --port 8080 --log-file api.log
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from app.api.config import get_api_host, get_api_port, get_log_level
from app.utils.logging_config import configure_api_logging, get_logger

logger = get_logger("run_api")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the Movies API")
    parser.add_argument("--host", default=get_api_host(), help="Bind host (default: API_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=get_api_port(), help="Listen port (default: PORT or 1234)")
    parser.add_argument("--log-level", default=get_log_level(), help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument("--log-file", default=None, help="Also log to logs/<LOG_FILE>")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_api_logging(level=args.log_level, log_file=args.log_file)

    logger.info("Server listening on http://localhost:%d", args.port)
    uvicorn.run(
        "app.api.main:app",
        host=args.host,
        port=args.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
