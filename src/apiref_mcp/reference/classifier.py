"""Parameter classification for API reference entries.

Each documented argument of a symbol lands in exactly one bucket:

1. Class symbols: every argument goes to `properties_from_args`. Class
   docstrings document instance attributes under "Parameters", because
   only that heading is parsed into individual entries; they render in the
   Attributes section together with the explicit `properties`.
2. Keyword-only arguments go to `kwargs`.
3. Everything else goes to `args`.

Declared order is call-signature order and is preserved in every bucket.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from apiref_mcp.reference.models import ParameterDescriptor, Row, SymbolDescriptor

NO_DESCRIPTION = "<p>No description</p>"


@dataclass
class ClassifiedParameters:
    """Argument rows split by display section."""

    args: List[Row] = field(default_factory=list)
    kwargs: List[Row] = field(default_factory=list)
    properties_from_args: List[Row] = field(default_factory=list)


def describe(description: str | None) -> str:
    """Return the description, or the placeholder when it is missing."""
    return description if description else NO_DESCRIPTION


def _type_span(type_name: str) -> str:
    if not type_name:
        return ""
    return f" <span class='italic code'>({type_name})</span>"


def parameter_row(param: ParameterDescriptor) -> Row:
    """Render one argument row.

    Required parameters show their name in bold; optional ones do not.
    """
    if param.is_optional:
        name = param.name
    else:
        name = f"<span class='bold'>{param.name}</span>"
    title = f"<p>{name}{_type_span(param.type_name)}</p>"
    return Row(title=title, body=describe(param.description))


def classify(descriptor: SymbolDescriptor) -> ClassifiedParameters:
    """Split a symbol's arguments into args, kwargs and class attributes."""
    classified = ClassifiedParameters()

    for param in descriptor.args:
        row = parameter_row(param)
        if descriptor.is_class:
            classified.properties_from_args.append(row)
        elif param.is_kwarg_only:
            classified.kwargs.append(row)
        else:
            classified.args.append(row)

    return classified
