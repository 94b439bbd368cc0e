"""Reference Version Switch Tool - Compute where a version change navigates to."""

import logging
from typing import Any

from fastmcp import FastMCP

from apiref_mcp.config import get_reference_config
from apiref_mcp.contracts import build_ok, build_reference_data
from apiref_mcp.formatting import build_content_error
from apiref_mcp.reference import EntrySession, ReferenceLoader, RenderOptions
from apiref_mcp.utils import OptionalVersionId, SlugPath, SymbolName, VersionId, normalize_slug

logger = logging.getLogger("apiref-mcp.tools")


def register(mcp: FastMCP) -> None:
    """Register apiref_switch_version tool with the MCP server."""

    @mcp.tool()
    def apiref_switch_version(
        symbol: SymbolName,
        requested_version: VersionId,
        slug: SlugPath = None,
        current_version: OptionalVersionId = None,
    ) -> dict[str, Any]:
        """Switch an API entry to another version.

        Returns the navigation target (new slug, anchor, route) and the
        rebuilt view model. The latest version has no version segment in
        its route. Selecting the already-current version is a no-op:
        `changed` is false and `navigation` is null.
        """
        config = get_reference_config()
        try:
            content = ReferenceLoader.load_content(config.content_path)
        except (OSError, ValueError) as exc:
            logger.warning("Cannot load reference content: %s", exc)
            return build_content_error(exc, content_path=config.content_path)

        session = EntrySession(
            symbol,
            content,
            normalize_slug(slug),
            version=current_version,
            options=RenderOptions.from_config(config),
        )
        session.load()
        target = session.select_version(requested_version)
        view = session.view

        payload = build_reference_data(
            action="switch",
            entries=[view.model_dump(mode="json")],
            summary={
                "symbol": view.symbol,
                "version": view.version,
                "status": view.state.value,
                "changed": target is not None,
                "navigation": target.to_dict() if target is not None else None,
            },
        )
        return build_ok(payload)
