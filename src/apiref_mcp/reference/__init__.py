"""API reference rendering core - direct access interface.

Usage:
    from apiref_mcp.reference import EntrySession, ReferenceLoader

    content = ReferenceLoader.load_content("reference.json")
    session = EntrySession("streamlit.button", content, slug=["button"])
    view = session.load()
    target = session.select_version("1.20.0")
    target.route  # "/1.20.0/button#stbutton"

Core Components:
    - versions: version families, resolution and switch targets
    - classifier: parameter classification into display buckets
    - sections: ordered display sections
    - view: view model construction
    - session: resolution state across version switches
    - loader: cached JSON content loading
"""

from apiref_mcp.reference.classifier import ClassifiedParameters, classify
from apiref_mcp.reference.loader import ReferenceLoader
from apiref_mcp.reference.models import (
    NavigationTarget,
    ReferenceContent,
    ResolutionState,
    Row,
    Section,
    SymbolDescriptor,
    ViewModel,
)
from apiref_mcp.reference.sections import build_sections
from apiref_mcp.reference.session import EntrySession
from apiref_mcp.reference.slugs import anchor_id, clean_href
from apiref_mcp.reference.versions import (
    NotFound,
    ResolvedSymbol,
    compute_switch_target,
    resolve,
)
from apiref_mcp.reference.view import RenderOptions, build_view_model, render_entry

__all__ = [
    # Core components
    "ReferenceLoader",
    "EntrySession",
    "RenderOptions",
    "resolve",
    "compute_switch_target",
    "classify",
    "build_sections",
    "build_view_model",
    "render_entry",
    "anchor_id",
    "clean_href",
    # Data models
    "ClassifiedParameters",
    "NavigationTarget",
    "NotFound",
    "ReferenceContent",
    "ResolutionState",
    "ResolvedSymbol",
    "Row",
    "Section",
    "SymbolDescriptor",
    "ViewModel",
]
