"""Error rendering helpers for reference tool outputs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from apiref_mcp.contracts import build_error


def _summarize_content_error(exc: Exception) -> str:
    if isinstance(exc, FileNotFoundError):
        return "content file not found"
    if isinstance(exc, json.JSONDecodeError):
        return f"invalid JSON at line {exc.lineno}"
    if isinstance(exc, ValidationError):
        return f"invalid descriptor ({exc.error_count()} validation errors)"
    text = str(exc).strip()
    if not text:
        return "unknown content error"
    return text.splitlines()[0]


def build_content_error(exc: Exception, *, content_path: Path | str) -> dict[str, Any]:
    """Build a unified error envelope for content loading failures."""
    details: dict[str, Any] = {
        "content_path": str(content_path),
        "reason": _summarize_content_error(exc),
        "action": "set APIREF_MCP_CONTENT_PATH to a valid reference JSON file, then retry",
    }
    return build_error("content_unavailable", "Reference content unavailable", details)
