"""API Reference MCP Server - versioned API reference entries exposed over MCP."""

import argparse
import logging

from fastmcp import FastMCP

from apiref_mcp import __version__
from apiref_mcp.config import get_reference_config
from apiref_mcp.tools import browse_versions, render_entry, switch_version

mcp = FastMCP(
    "API Reference MCP Server",
    instructions=(
        "Versioned API reference server. "
        "Renders documentation entries (functions, classes, methods, properties) "
        "of a library at a requested version, and computes where the reader "
        "navigates when switching to another version."
    ),
)

logger = logging.getLogger("apiref-mcp.server")

# Register reference tools
browse_versions.register(mcp)
render_entry.register(mcp)
switch_version.register(mcp)


def main():
    """Entry point for the API reference MCP server."""
    parser = argparse.ArgumentParser(
        prog="apiref-mcp",
        description="API Reference MCP Server - versioned API reference entries exposed over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"apiref-mcp {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    args = parser.parse_args()

    config = get_reference_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Serving reference content from %s", config.content_path)

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
