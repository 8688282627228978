#!/usr/bin/env python
"""
Run the Yoga Master API server.

Usage:
    python run_api.py
    python run_api.py --reload           # Development mode
    python run_api.py --port 8080 --debug
"""

import argparse
import uvicorn

from shared.config import get_settings


def main():
    parser = argparse.ArgumentParser(description="Serve the Yoga Master API with uvicorn")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--debug", action="store_true", help="Log at debug level")
    parser.add_argument("--host", type=str, help="Interface to bind (default from YOGA_HOST)")
    parser.add_argument("--port", type=int, help="Port to listen on (default from YOGA_PORT)")
    args = parser.parse_args()

    settings = get_settings()
    debug = args.debug or settings.debug

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level="debug" if debug else "info",
    )


if __name__ == "__main__":
    main()
