"""API reference MCP tool implementations."""

from . import browse_versions, render_entry, switch_version

__all__ = [
    "browse_versions",
    "render_entry",
    "switch_version",
]
