"""Main entry point for the n8n MCP server.

This module provides the run_server function that starts the MCP server
with stdio transport. It loads the n8n configuration, attaches the API
client and installs signal handlers for graceful shutdown.
"""

import logging
import signal
import sys
from collections.abc import Mapping
from types import FrameType
from typing import Optional

from n8n_mcp.client import N8nClient
from n8n_mcp.core.config import load_config
from n8n_mcp.core.exceptions import ConfigurationError

from .server import mcp, register_tools

# Configure logging to stderr (stdout is reserved for protocol messages)
logger = logging.getLogger(__name__)


def run_server(environ: Optional[Mapping[str, str]] = None) -> None:
    """Run the n8n MCP server with stdio transport.

    This function:
    1. Loads N8N_API_URL / N8N_API_KEY (exits with status 1 if missing)
    2. Attaches an n8n client built from that configuration
    3. Registers all tools with the server
    4. Sets up signal handlers for graceful shutdown
    5. Runs the server with stdio transport

    Note: This function is synchronous because FastMCP manages
    its own event loop when using stdio transport.
    """
    try:
        config = load_config(environ)
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    mcp.attach_client(N8nClient(config))
    register_tools()

    def handle_shutdown(signum: int, frame: FrameType | None) -> None:
        """Handle shutdown signals gracefully."""
        logger.info(f"Received signal {signum}, shutting down gracefully...")
        sys.exit(0)

    signal.signal(signal.SIGTERM, handle_shutdown)
    signal.signal(signal.SIGINT, handle_shutdown)

    logger.info(f"n8n MCP server running on stdio (API: {config.api_url})")

    try:
        # Blocking call that runs until the server shuts down
        mcp.run("stdio")
    except KeyboardInterrupt:
        logger.info("Server interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"MCP server error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        mcp.detach_client()
        logger.info("MCP server shutdown complete")


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the MCP server.

    All logs go to stderr to keep stdout clean for protocol messages.

    Args:
        debug: Enable debug logging if True
    """
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from some verbose libraries
    if not debug:
        logging.getLogger("asyncio").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        logging.getLogger("mcp").setLevel(logging.WARNING)


def main(debug: bool = False) -> None:
    """Main entry point for running the server.

    Args:
        debug: Enable debug logging if True
    """
    configure_logging(debug)
    run_server()


__all__ = ["configure_logging", "main", "run_server"]
