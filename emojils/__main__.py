"""
Main entry point for the Emoji Language Server.

This file is executed when running: python -m emojils

By default the server communicates with editors via stdin/stdout using
JSON-RPC. Use --tcp to listen on a socket instead (handy for debugging).
"""
import argparse
import logging

from emojils.config import Settings
from emojils.lsp.server import SERVER_NAME, create_server

logger = logging.getLogger(SERVER_NAME)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Translation and emoji language server",
        prog=SERVER_NAME,
    )
    parser.add_argument(
        "--tcp",
        action="store_true",
        help="Start server in TCP mode instead of stdio",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to in TCP mode (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=2087,
        help="Port to listen on in TCP mode (default: 2087)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Logging level (default: info)",
    )
    return parser.parse_args(argv)


def wait_for_debugger() -> None:
    logger.info("Waiting for debugger to attach on port 5678...")
    try:
        import debugpy  # type: ignore
    except ImportError:
        logger.warning("debugpy not available - install with: pip install debugpy")
        return
    debugpy.listen(("127.0.0.1", 5678))
    debugpy.wait_for_client()
    logger.info("Debugger attached, continuing")


def main(argv: list[str] | None = None) -> None:
    """Start the language server."""
    args = parse_args(argv)

    # stdout carries JSON-RPC, so logging goes to stderr
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    settings = Settings.from_env()
    if settings.debug:
        wait_for_debugger()

    server = create_server(settings)

    if args.tcp:
        logger.info(f"Starting {SERVER_NAME} in TCP mode on {args.host}:{args.port}")
        server.start_tcp(args.host, args.port)
    else:
        logger.info(f"Starting {SERVER_NAME} in stdio mode")
        server.start_io()


if __name__ == "__main__":
    main()
