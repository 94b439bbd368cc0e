"""View model construction for API reference entries.

Turns a resolution (found or not found) into the render-ready `ViewModel`:
header with version selector, ordered sections, deprecation notice and the
render signal for the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from apiref_mcp.config import ReferenceConfig
from apiref_mcp.reference.classifier import classify
from apiref_mcp.reference.models import (
    DeprecationNotice,
    Header,
    ReferenceContent,
    RenderSignal,
    ResolutionState,
    Section,
    SymbolDescriptor,
    VersionOption,
    VersionSelector,
    ViewModel,
)
from apiref_mcp.reference.sections import build_sections
from apiref_mcp.reference.slugs import alias_module, clean_href
from apiref_mcp.reference.versions import NotFound, Resolution, resolve

# Symbols documented under the components namespace instead of their signature name
COMPONENT_SYMBOLS = ("html", "iframe")


@dataclass(frozen=True)
class RenderOptions:
    """Display settings and per-entry flags for one render."""

    module: str = "streamlit"
    alias: str = "st"
    library_label: str = "Streamlit"
    namespace_prefix: str = "SiS"
    namespace_label: str = "Streamlit in Snowflake"
    hide_header: bool = False
    deprecated: bool = False
    deprecated_text: str | None = None

    @classmethod
    def from_config(cls, config: ReferenceConfig, **overrides) -> "RenderOptions":
        return cls(
            module=config.library_module,
            alias=config.library_alias,
            library_label=config.library_label,
            namespace_prefix=config.namespace_prefix,
            namespace_label=config.namespace_label,
            **overrides,
        )


def version_label(version: str, options: RenderOptions = RenderOptions()) -> str:
    """Selector label of a version.

    Example:
        >>> version_label("SiS"), version_label("SiS.3.0"), version_label("1.30.0")
        ('Streamlit in Snowflake', 'Streamlit in Snowflake 3.0', 'Version 1.30.0')
    """
    prefix = options.namespace_prefix
    if version == prefix:
        return options.namespace_label
    if version.startswith(prefix + "."):
        return version.replace(prefix + ".", options.namespace_label + " ", 1)
    return f"Version {version}"


def selector_class(is_namespaced: bool, is_latest: bool) -> str:
    if is_namespaced:
        return "version-select sis-version"
    if not is_latest:
        return "version-select old-version"
    return "version-select"


def version_selector(resolution: Resolution, options: RenderOptions = RenderOptions()) -> VersionSelector:
    return VersionSelector(
        current=resolution.version,
        options=[VersionOption(value=v, label=version_label(v, options)) for v in resolution.versions_desc],
        is_latest=resolution.is_latest,
        is_namespaced=resolution.is_namespaced,
        css_class=selector_class(resolution.is_namespaced, resolution.is_latest),
    )


def display_name(descriptor: SymbolDescriptor, options: RenderOptions = RenderOptions()) -> str:
    """Header title: the aliased signature name (e.g., "st.button")."""
    if descriptor.name.startswith(COMPONENT_SYMBOLS):
        return f"{options.alias}.components.v1.{descriptor.name}"
    if descriptor.signature:
        return alias_module(descriptor.signature.split("(")[0], options.module, options.alias)
    return f"{options.alias}.{descriptor.name}"


def navigation_anchor(descriptor: SymbolDescriptor, options: RenderOptions = RenderOptions()) -> str:
    """Anchor of the entry header used when routing to another version."""
    return clean_href(f"{options.alias}.{descriptor.name}")


def not_available_message(resolution: NotFound, options: RenderOptions = RenderOptions()) -> str:
    if resolution.is_namespaced:
        return f"This method does not exist in {options.namespace_label}."
    return (
        f"This method did not exist in version <code>{resolution.version}</code> "
        f"of {options.library_label}."
    )


def _fragments(view_parts: Iterable[str | None]) -> str:
    return "".join(part for part in view_parts if part)


def render_signal(header: Header | None, sections: Sequence[Section]) -> RenderSignal:
    parts = [header.description if header else None]
    for section in sections:
        parts.append(section.content)
        for row in section.rows:
            parts.extend((row.title, row.body))
    html = _fragments(parts)
    return RenderSignal(highlight_code="<pre" in html, refresh_iframes="<iframe" in html)


def build_not_found_view(resolution: NotFound, options: RenderOptions = RenderOptions()) -> ViewModel:
    """Minimal view: header, version selector and a not-available notice."""
    title = alias_module(resolution.symbol_name, options.module, options.alias)
    header = Header(
        title=title,
        anchor=clean_href(title),
        selector=version_selector(resolution, options),
    )
    return ViewModel(
        state=ResolutionState.NOT_FOUND_AT_VERSION,
        symbol=resolution.symbol_name,
        version=resolution.version,
        header=header,
        notice=not_available_message(resolution, options),
    )


def build_view_model(
    resolution: Resolution,
    slug: Sequence[str],
    options: RenderOptions = RenderOptions(),
) -> ViewModel:
    """Build the view model for a resolution result."""
    if isinstance(resolution, NotFound):
        return build_not_found_view(resolution, options)

    descriptor = resolution.descriptor
    sections = build_sections(
        descriptor,
        classify(descriptor),
        slug,
        module=options.module,
        alias=options.alias,
    )

    header = None
    deprecation = None
    if not options.hide_header:
        title = display_name(descriptor, options)
        header = Header(
            title=title,
            anchor=clean_href(title),
            selector=version_selector(resolution, options),
            description=descriptor.description or None,
        )
        if options.deprecated:
            deprecation = DeprecationNotice(text=options.deprecated_text or "")

    return ViewModel(
        state=ResolutionState.RESOLVED,
        symbol=resolution.symbol_name,
        version=resolution.version,
        header=header,
        sections=sections,
        deprecation=deprecation,
        signal=render_signal(header, sections),
    )


def render_entry(
    symbol_name: str,
    content: ReferenceContent,
    version: str | None,
    slug: Sequence[str],
    options: RenderOptions = RenderOptions(),
) -> ViewModel:
    """Resolve a symbol at a version and build its view model."""
    resolution = resolve(
        symbol_name,
        content.versions,
        version,
        content.tables,
        prefix=options.namespace_prefix,
    )
    return build_view_model(resolution, slug, options)
