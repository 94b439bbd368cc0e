"""Resolution state of one displayed entry across version switches.

    UNRESOLVED --load()--> RESOLVED | NOT_FOUND_AT_VERSION
    any state --select_version(v != current)--> RESOLVED | NOT_FOUND_AT_VERSION

Every load rebuilds the whole view model from the immutable content; the
previous view is replaced, never patched. Selecting the current version
again changes nothing.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from apiref_mcp.reference.models import (
    NavigationTarget,
    ReferenceContent,
    ResolutionState,
    ViewModel,
)
from apiref_mcp.reference.versions import (
    ResolvedSymbol,
    Resolution,
    compute_switch_target,
    latest_version,
    resolve,
    version_from_slug,
)
from apiref_mcp.reference.view import RenderOptions, build_view_model, navigation_anchor

logger = logging.getLogger("apiref-mcp.reference")


class EntrySession:
    """Holds the current version, slug and view model of one entry."""

    def __init__(
        self,
        symbol_name: str,
        content: ReferenceContent,
        slug: Sequence[str],
        version: Optional[str] = None,
        options: RenderOptions = RenderOptions(),
    ):
        self.symbol_name = symbol_name
        self.content = content
        self.options = options
        self.slug = list(slug)
        self.current_version = (
            version
            or version_from_slug(self.slug, options.namespace_prefix)
            or self.latest
            or ""
        )
        self.state = ResolutionState.UNRESOLVED
        self.resolution: Optional[Resolution] = None
        self.view: Optional[ViewModel] = None

    @property
    def latest(self) -> Optional[str]:
        return latest_version(self.content.versions, self.options.namespace_prefix)

    def load(self) -> ViewModel:
        """Resolve the symbol at the current version and rebuild the view."""
        self.resolution = resolve(
            self.symbol_name,
            self.content.versions,
            self.current_version,
            self.content.tables,
            prefix=self.options.namespace_prefix,
        )
        self.view = build_view_model(self.resolution, self.slug, self.options)
        self.state = self.view.state
        return self.view

    def select_version(self, requested_version: str) -> Optional[NavigationTarget]:
        """Switch to another version.

        Returns:
            The navigation target for the routing layer, or None when
            `requested_version` is already the current version.
        """
        if requested_version == self.current_version:
            logger.debug("Version %s already selected for %s", requested_version, self.symbol_name)
            return None

        self.slug = compute_switch_target(
            self.slug,
            requested_version,
            self.latest,
            prefix=self.options.namespace_prefix,
        )
        self.current_version = requested_version
        self.load()

        anchor = None
        if isinstance(self.resolution, ResolvedSymbol):
            anchor = navigation_anchor(self.resolution.descriptor, self.options)
        return NavigationTarget(slug=list(self.slug), anchor=anchor)
