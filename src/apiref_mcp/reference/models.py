"""Data models for the API reference rendering core.

Two groups of models live here:

- Descriptors: the pre-parsed structured documentation of one symbol, as
  supplied by the content layer. They are validated on load and treated as
  immutable input for every render request.
- View models: the render-ready output handed to a presentation layer
  (header, version selector state, ordered sections of rows).

All models are frozen pydantic models, so two view models built from the
same inputs compare equal field by field.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


def _none_to_empty(value, empty):
    return empty if value is None else value


# =============================================================================
# Descriptors (input)
# =============================================================================


class ParameterDescriptor(_Frozen):
    """A single documented parameter or return value.

    Return values reuse this shape; they usually carry only `type_name`
    and `description`.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    type_name: str = ""
    description: str | None = None
    default: str | None = None
    is_optional: bool = False
    is_kwarg_only: bool = False

    @field_validator("name", "type_name", mode="before")
    @classmethod
    def _null_text(cls, value):
        return _none_to_empty(value, "")

    @field_validator("is_optional", "is_kwarg_only", mode="before")
    @classmethod
    def _null_flag(cls, value):
        return _none_to_empty(value, False)


class MethodDescriptor(_Frozen):
    """A documented method of a class symbol."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    signature: str | None = None
    description: str | None = None


class PropertyDescriptor(_Frozen):
    """A documented property (attribute) of a class symbol."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    description: str | None = None


class SymbolDescriptor(_Frozen):
    """Structured documentation of one function or class.

    Attributes:
        name: Symbol name without the library module (e.g., "button")
        signature: Full call signature text
        description: Rich-text (HTML) description
        source: URL of the symbol's source code
        is_class: True for classes; their `args` document attributes
        args: Parameters in call-signature order
        returns: Return values in declared order
        methods: Methods of a class symbol
        properties: Properties of a class symbol
        example, examples, notes, warning: Optional free-text blocks
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    signature: str = ""
    description: str | None = None
    source: str | None = None
    is_class: bool = False
    args: list[ParameterDescriptor] = Field(default_factory=list)
    returns: list[ParameterDescriptor] = Field(default_factory=list)
    methods: list[MethodDescriptor] = Field(default_factory=list)
    properties: list[PropertyDescriptor] = Field(default_factory=list)
    example: str | None = None
    examples: str | None = None
    notes: str | None = None
    warning: str | None = None

    @field_validator("signature", mode="before")
    @classmethod
    def _null_signature(cls, value):
        return _none_to_empty(value, "")

    @field_validator("is_class", mode="before")
    @classmethod
    def _null_is_class(cls, value):
        return _none_to_empty(value, False)

    @field_validator("args", "returns", "methods", "properties", mode="before")
    @classmethod
    def _null_members(cls, value):
        return _none_to_empty(value, [])


# Symbol name -> descriptor, for one version
SymbolTable = dict[str, SymbolDescriptor]


class ReferenceContent(_Frozen):
    """Every version's symbol table, plus the ordered version list.

    Attributes:
        versions: Version identifiers, oldest first (newest last)
        tables: Version identifier -> SymbolTable
    """

    versions: list[str]
    tables: dict[str, SymbolTable] = Field(default_factory=dict)

    def table_for(self, version: str) -> SymbolTable:
        return self.tables.get(version, {})


# =============================================================================
# View models (output)
# =============================================================================


class ResolutionState(str, Enum):
    """Resolution state of one rendered entry."""

    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"
    NOT_FOUND_AT_VERSION = "not_found_at_version"


class Row(_Frozen):
    """One table row; both fragments are author-trusted HTML."""

    title: str
    body: str


SectionKind = Literal["head", "body", "foot", "footer"]


class SourceLink(_Frozen):
    href: str
    label: str = "[source]"
    title: str = ""


class Section(_Frozen):
    """One display section.

    `content` holds free rich text (lead signature, footers); `rows` holds
    table rows (parameters, methods, returns, attributes). `kind` tells the
    table renderer where the section goes: the lead `head`, the `body`
    parameter table, `foot` tables, or trailing free-text `footer` blocks.
    """

    title: str
    kind: SectionKind
    content: str | None = None
    rows: list[Row] = Field(default_factory=list)
    source: SourceLink | None = None


class VersionOption(_Frozen):
    value: str
    label: str


class VersionSelector(_Frozen):
    """State of the version selector shown next to the entry title."""

    current: str
    options: list[VersionOption]
    is_latest: bool
    is_namespaced: bool
    css_class: str


class Header(_Frozen):
    title: str
    anchor: str
    selector: VersionSelector
    description: str | None = None


class DeprecationNotice(_Frozen):
    text: str


class RenderSignal(_Frozen):
    """Tells the presentation layer what to refresh after a render."""

    highlight_code: bool = False
    refresh_iframes: bool = False


class ViewModel(_Frozen):
    """Fully resolved, render-ready documentation entry."""

    state: ResolutionState
    symbol: str
    version: str
    header: Header | None = None
    sections: list[Section] = Field(default_factory=list)
    deprecation: DeprecationNotice | None = None
    notice: str | None = None
    signal: RenderSignal = Field(default_factory=RenderSignal)

    @property
    def section_titles(self) -> list[str]:
        return [section.title for section in self.sections]


class NavigationTarget(_Frozen):
    """Route handed to the routing layer after a version switch."""

    slug: list[str]
    anchor: str | None = None

    @property
    def route(self) -> str:
        path = "/" + "/".join(self.slug)
        if self.anchor:
            return f"{path}#{self.anchor}"
        return path

    def to_dict(self) -> dict[str, object]:
        return {"slug": list(self.slug), "anchor": self.anchor, "route": self.route}
