"""Data loading layer for versioned API reference content.

This module loads the version list and every version's symbol table from a
JSON file, validating descriptors on the way in and caching the result to
avoid repeated I/O.

Accepted file shapes:

    {"versions": ["1.20.0", "1.30.0"],
     "symbols": {"1.30.0": {"streamlit.button": {...}}}}

or a bare mapping of version -> symbol table, whose key order is taken as
the version order.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from apiref_mcp.reference.models import ReferenceContent, SymbolDescriptor, SymbolTable

logger = logging.getLogger("apiref-mcp.reference")


class ReferenceLoader:
    """Loads and caches API reference content."""

    @staticmethod
    def load_content(path: str | Path) -> ReferenceContent:
        """Load reference content from a JSON file with caching.

        Args:
            path: Path of the content JSON file

        Returns:
            Validated ReferenceContent

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file doesn't hold a JSON object, or a
                descriptor fails validation

        Example:
            >>> content = ReferenceLoader.load_content("reference.json")
            >>> content.versions[-1]
            '1.30.0'
            >>> "streamlit.button" in content.table_for("1.30.0")
            True
        """
        return ReferenceLoader._load_cached(str(Path(path).resolve()))

    @staticmethod
    @lru_cache(maxsize=8)
    def _load_cached(path: str) -> ReferenceContent:
        content_path = Path(path)
        if not content_path.exists():
            raise FileNotFoundError(f"Reference content not found: {content_path}")

        with open(content_path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        content = ReferenceLoader.parse_content(raw)
        logger.info(
            "Loaded reference content from %s (%d versions)", content_path, len(content.versions)
        )
        return content

    @staticmethod
    def parse_content(raw: Any) -> ReferenceContent:
        """Validate raw JSON data into ReferenceContent."""
        if not isinstance(raw, dict):
            raise ValueError("Reference content must be a JSON object")

        if "symbols" in raw:
            symbols = raw.get("symbols") or {}
            if not isinstance(symbols, dict):
                raise ValueError("Reference content \"symbols\" must be a JSON object")
            versions: List[str] = list(raw.get("versions") or symbols.keys())
        else:
            symbols = raw
            versions = list(raw.keys())

        tables: Dict[str, SymbolTable] = {}
        for version in versions:
            tables[version] = ReferenceLoader._parse_table(symbols.get(version) or {})

        return ReferenceContent(versions=versions, tables=tables)

    @staticmethod
    def _parse_table(raw_table: Dict[str, Any]) -> SymbolTable:
        if not isinstance(raw_table, dict):
            raise ValueError("A version's symbol table must be a JSON object")
        table: SymbolTable = {}
        for symbol_name, raw_descriptor in raw_table.items():
            # Descriptors without a name take the last segment of their key
            if isinstance(raw_descriptor, dict) and "name" not in raw_descriptor:
                raw_descriptor = {**raw_descriptor, "name": symbol_name.rsplit(".", 1)[-1]}
            table[symbol_name] = SymbolDescriptor.model_validate(raw_descriptor)
        return table

    @staticmethod
    def clear_cache():
        """Clear cached content.

        Useful for testing or when content files are updated.
        """
        ReferenceLoader._load_cached.cache_clear()
