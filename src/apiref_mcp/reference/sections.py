"""Display sections of a resolved API reference entry.

Section order is fixed:

    head    Function signature | Class description
    body    Parameters
    foot    Keyword-only parameters, Methods, Returns, Attributes
    footer  Example, Examples, Notes, Warning

Sections without rows are omitted, never rendered empty.
"""

from __future__ import annotations

import logging
import re
from typing import List, Sequence

from apiref_mcp.reference.classifier import ClassifiedParameters, describe
from apiref_mcp.reference.models import (
    MethodDescriptor,
    PropertyDescriptor,
    Row,
    Section,
    SourceLink,
    SymbolDescriptor,
)
from apiref_mcp.reference.slugs import alias_module, anchor_id

logger = logging.getLogger("apiref-mcp.reference")

# Free-text blocks, in the order they are declared on the descriptor
FOOTER_FIELDS = (
    ("example", "Example"),
    ("examples", "Examples"),
    ("notes", "Notes"),
    ("warning", "Warning"),
)

_OUTER_PARENS = re.compile(r"\((.*)\)", re.DOTALL)


def signature_arguments(signature: str | None) -> str:
    """Return the text between the outermost parentheses of a signature.

    A missing signature, or one without parentheses, yields "".

    Example:
        >>> signature_arguments("SQLConnection.query(sql, *, ttl=None)")
        'sql, *, ttl=None'
    """
    if not signature:
        return ""
    match = _OUTER_PARENS.search(signature)
    if match is None:
        logger.debug("Signature without parentheses: %r", signature)
        return ""
    return match.group(1)


def member_anchor(symbol_name: str, member_name: str, module: str = "streamlit", alias: str = "st") -> str:
    """Anchor of a method or property row (e.g., "slider.value" -> "slidervalue")."""
    return anchor_id(alias_module(f"{symbol_name}.{member_name}", module, alias))


def _member_href(slug: Sequence[str], anchor: str) -> str:
    return f"/{'/'.join(slug)}#{anchor}"


def method_row(
    descriptor: SymbolDescriptor,
    method: MethodDescriptor,
    slug: Sequence[str],
    module: str = "streamlit",
    alias: str = "st",
) -> Row:
    anchor = member_anchor(descriptor.name, method.name, module, alias)
    type_text = signature_arguments(method.signature)
    title = (
        f"<p><a href=\"{_member_href(slug, anchor)}\"><span class='bold'>{method.name}</span></a>"
        f"<span class='italic code'>({type_text})</span></p>"
    )
    return Row(title=title, body=describe(method.description))


def property_row(
    descriptor: SymbolDescriptor,
    prop: PropertyDescriptor,
    slug: Sequence[str],
    module: str = "streamlit",
    alias: str = "st",
) -> Row:
    anchor = member_anchor(descriptor.name, prop.name, module, alias)
    title = f"<p><a href=\"{_member_href(slug, anchor)}\"><span class='bold'>{prop.name}</span></a></p>"
    return Row(title=title, body=describe(prop.description))


def return_rows(descriptor: SymbolDescriptor) -> List[Row]:
    """Return rows carry no name, only the type."""
    return [
        Row(
            title=f"<p><span class='italic code'>({ret.type_name})</span></p>",
            body=describe(ret.description),
        )
        for ret in descriptor.returns
    ]


def lead_section(descriptor: SymbolDescriptor, alias: str = "st") -> Section:
    source = None
    if descriptor.source:
        source = SourceLink(
            href=descriptor.source,
            title=f"View {alias}.{descriptor.name} source code on GitHub",
        )
    return Section(
        title="Class description" if descriptor.is_class else "Function signature",
        kind="head",
        content=f"<p class='code'>{descriptor.signature}</p>",
        source=source,
    )


def build_sections(
    descriptor: SymbolDescriptor,
    classified: ClassifiedParameters,
    slug: Sequence[str],
    *,
    module: str = "streamlit",
    alias: str = "st",
) -> List[Section]:
    """Assemble the ordered display sections of one entry.

    Args:
        descriptor: Resolved symbol descriptor
        classified: Output of `classifier.classify(descriptor)`
        slug: Current slug path, used for member links
        module: Library module name replaced in member anchors
        alias: Display alias of the library module

    Returns:
        Sections in fixed order, empty ones omitted
    """
    sections = [lead_section(descriptor, alias)]

    if classified.args:
        sections.append(Section(title="Parameters", kind="body", rows=list(classified.args)))

    methods = [method_row(descriptor, m, slug, module, alias) for m in descriptor.methods]
    attributes = list(classified.properties_from_args)
    attributes.extend(property_row(descriptor, p, slug, module, alias) for p in descriptor.properties)

    foot = (
        ("Keyword-only parameters", list(classified.kwargs)),
        ("Methods", methods),
        ("Returns", return_rows(descriptor)),
        ("Attributes", attributes),
    )
    for title, rows in foot:
        if rows:
            sections.append(Section(title=title, kind="foot", rows=rows))

    for field_name, title in FOOTER_FIELDS:
        body = getattr(descriptor, field_name)
        if body:
            sections.append(Section(title=title, kind="footer", content=body))

    return sections
