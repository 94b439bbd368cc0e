"""Reference Render Tool - Build the view model of one API entry at a version."""

import logging
from typing import Any

from fastmcp import FastMCP

from apiref_mcp.config import get_reference_config
from apiref_mcp.contracts import build_ok, build_reference_data
from apiref_mcp.formatting import build_content_error
from apiref_mcp.reference import ReferenceLoader, RenderOptions, render_entry
from apiref_mcp.reference.versions import version_from_slug
from apiref_mcp.utils import (
    Deprecated,
    DeprecatedText,
    HideHeader,
    OptionalVersionId,
    SlugPath,
    SymbolName,
    normalize_slug,
)

logger = logging.getLogger("apiref-mcp.tools")


def register(mcp: FastMCP) -> None:
    """Register apiref_render_entry tool with the MCP server."""

    @mcp.tool()
    def apiref_render_entry(
        symbol: SymbolName,
        version: OptionalVersionId = None,
        slug: SlugPath = None,
        hide_header: HideHeader = False,
        deprecated: Deprecated = False,
        deprecated_text: DeprecatedText = None,
    ) -> dict[str, Any]:
        """Render an API reference entry (function or class) at a library version.

        Returns the render-ready view model: header with version selector,
        ordered sections (signature, parameters, keyword-only parameters,
        methods, returns, attributes, examples/notes) and a render signal.
        A symbol missing at the version yields a "not available" view, not an error.

        Related tools:
        - apiref_switch_version: Navigation target when the reader picks another version
        - apiref_browse_versions: Versions and the symbols available at each
        """
        config = get_reference_config()
        try:
            content = ReferenceLoader.load_content(config.content_path)
        except (OSError, ValueError) as exc:
            logger.warning("Cannot load reference content: %s", exc)
            return build_content_error(exc, content_path=config.content_path)

        options = RenderOptions.from_config(
            config,
            hide_header=hide_header,
            deprecated=deprecated,
            deprecated_text=deprecated_text,
        )
        slug_segments = normalize_slug(slug)
        version = version or version_from_slug(slug_segments, options.namespace_prefix)
        view = render_entry(symbol, content, version, slug_segments, options)

        payload = build_reference_data(
            action="render",
            entries=[view.model_dump(mode="json")],
            summary={
                "symbol": view.symbol,
                "version": view.version,
                "status": view.state.value,
                "sections": view.section_titles,
            },
        )
        return build_ok(payload)
