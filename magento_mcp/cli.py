"""CLI entrypoint for the Magento MCP server."""

import argparse
import sys

import uvicorn

from .config import load_settings
from .server import setup_logging


def main(argv=None) -> None:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Serve Magento store tools over MCP (streamable HTTP at /mcp).")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host}).")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port}).")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (default: LOG_LEVEL or INFO).",
    )
    args = parser.parse_args(argv)

    logger = setup_logging(args.log_level)
    logger.info(f"Starting Magento MCP Server on http://{args.host}:{args.port}/mcp")

    try:
        uvicorn.run(
            "magento_mcp.server:app",
            host=args.host,
            port=args.port,
            log_level=args.log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Server shutting down...")
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
