"""Reference Browse Tool - List versions and the symbols documented at each."""

import logging
from typing import Any, Dict, List

from fastmcp import FastMCP

from apiref_mcp.config import get_reference_config
from apiref_mcp.contracts import build_error, build_ok, build_reference_data
from apiref_mcp.formatting import build_content_error
from apiref_mcp.reference import ReferenceContent, ReferenceLoader, RenderOptions
from apiref_mcp.reference.versions import is_namespaced_version, latest_in_family, latest_version
from apiref_mcp.reference.view import version_label
from apiref_mcp.utils import OptionalVersionId

logger = logging.getLogger("apiref-mcp.tools")


def register(mcp: FastMCP) -> None:
    """Register apiref_browse_versions tool with the MCP server."""

    @mcp.tool()
    def apiref_browse_versions(version: OptionalVersionId = None) -> dict[str, Any]:
        """Browse documented library versions (like ls).

        Navigation levels:
        - No version: All versions, newest first, with labels and release line
        - Version (e.g., "1.30.0", "SiS"): Symbols documented at that version
        """
        config = get_reference_config()
        try:
            content = ReferenceLoader.load_content(config.content_path)
        except (OSError, ValueError) as exc:
            logger.warning("Cannot load reference content: %s", exc)
            return build_content_error(exc, content_path=config.content_path)

        options = RenderOptions.from_config(config)
        if not version:
            return build_ok(_browse_root(content, options))

        if version not in content.versions:
            return build_error(
                code="version_not_found",
                message=f"Version '{version}' not found.",
                details={
                    "input": {"version": version},
                    "available_versions": list(reversed(content.versions)),
                },
            )
        return build_ok(_browse_version(content, version))


def _browse_root(content: ReferenceContent, options: RenderOptions) -> Dict[str, Any]:
    prefix = options.namespace_prefix
    entries: List[Dict[str, Any]] = []
    for version in reversed(content.versions):
        namespaced = is_namespaced_version(version, prefix)
        entries.append(
            {
                "version": version,
                "label": version_label(version, options),
                "family": "namespaced" if namespaced else "main",
                "is_latest": version == latest_in_family(content.versions, version, prefix),
                "symbol_count": len(content.table_for(version)),
            }
        )

    return build_reference_data(
        action="browse",
        entries=entries,
        summary={
            "count": len(entries),
            "latest": latest_version(content.versions, prefix),
        },
    )


def _browse_version(content: ReferenceContent, version: str) -> Dict[str, Any]:
    table = content.table_for(version)
    entries = [
        {
            "symbol": name,
            "name": descriptor.name,
            "is_class": descriptor.is_class,
            "signature": descriptor.signature,
        }
        for name, descriptor in sorted(table.items())
    ]
    return build_reference_data(
        action="browse",
        entries=entries,
        summary={"version": version, "count": len(entries)},
    )
