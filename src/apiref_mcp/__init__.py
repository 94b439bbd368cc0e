"""API reference MCP server - versioned API entries rendered for doc sites."""

__version__ = "0.1.0"
