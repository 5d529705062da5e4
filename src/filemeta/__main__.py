"""Main entry point for the filemeta MCP server."""

from .logging_config import setup_logging
from .server import mcp


def main() -> None:
    """Entry point for the filemeta MCP server."""
    setup_logging()
    mcp.run()


if __name__ == "__main__":
    main()
