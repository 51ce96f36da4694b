"""HTTP server runner for the drink ordering service.

Configures logging, initialises the ordering domain, creates the single
OrderLedger for this process and serves the application with uvicorn.

Usage:
    python src/server.py                    # listens on $PORT, default 8080
    python src/server.py --port 9090        # explicit port wins over $PORT
"""

import argparse
import os

import structlog
import uvicorn

DEFAULT_PORT = 8080

logger = structlog.get_logger(__name__)


def resolve_port(cli_port=None, environ=None):
    """Pick the listen port: command line, then $PORT, then the default."""
    if cli_port is not None:
        return cli_port
    environ = os.environ if environ is None else environ
    return int(environ.get("PORT", DEFAULT_PORT))


def build_app():
    from app import create_app
    from ordering.domain import ordering
    from ordering.order.ledger import OrderLedger

    ordering.init()
    return create_app(OrderLedger())


def main():
    parser = argparse.ArgumentParser(description="Drink ordering HTTP server")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, help=f"Port to listen on (default: $PORT or {DEFAULT_PORT})")
    args = parser.parse_args()

    from ordering.utils.logging import configure_logging

    configure_logging()

    port = resolve_port(args.port)
    app = build_app()
    logger.info("Starting drink ordering server", host=args.host, port=port)
    uvicorn.run(app, host=args.host, port=port, log_config=None)


if __name__ == "__main__":
    main()
