"""Validation models and utilities for reference MCP tools."""

from typing import Annotated, List, Optional, Union

from pydantic import Field
from pydantic.functional_validators import AfterValidator


def normalize_slug(value: Union[str, List[str], None]) -> List[str]:
    """Split a slug path into segments, dropping empty ones.

    Accepts "1.20.0/button", "/button/" or ["1.20.0", "button"].
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split("/")
    return [segment.strip() for segment in value if segment and segment.strip()]


def validate_non_empty_string(value: str) -> str:
    """Validate that a string is not empty after stripping whitespace."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("Value cannot be empty or whitespace only")
    return stripped


def validate_optional_string(value: Optional[str]) -> Optional[str]:
    """Strip an optional string; blank values become None."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


SymbolName = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(
        ...,
        min_length=1,
        description=(
            "Symbol table key of the documented function or class. Examples: "
            "'streamlit.button', 'streamlit.connections.SQLConnection'."
        ),
    ),
]

VersionId = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(..., min_length=1, description="Version identifier, e.g. '1.30.0', 'SiS' or 'SiS.3.0'"),
]

OptionalVersionId = Annotated[
    Optional[str],
    AfterValidator(validate_optional_string),
    Field(default=None, description="Version identifier; null selects the latest version"),
]

SlugPath = Annotated[
    Union[str, List[str], None],
    Field(
        default=None,
        description=(
            "Current page slug, as a '/'-separated string or a list of segments. "
            "Examples: 'button', '1.20.0/button', ['SiS', 'button']."
        ),
    ),
]

HideHeader = Annotated[
    bool,
    Field(default=False, description="Omit the header (title, version selector, description)"),
]

Deprecated = Annotated[
    bool,
    Field(default=False, description="Show a deprecation notice in the header"),
]

DeprecatedText = Annotated[
    Optional[str],
    Field(default=None, description="HTML text of the deprecation notice"),
]
