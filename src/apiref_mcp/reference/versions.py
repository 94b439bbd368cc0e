"""Version resolution for API reference entries.

A version list holds two independent release lines:

- the main line of numeric dotted versions ("1.20.0", "1.30.0")
- a namespaced platform line ("SiS", "SiS.3.0") with its own ordering

Canonical (unversioned) routes always point at the latest main-line
version; every other version carries an explicit first slug segment.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Sequence, Union

from apiref_mcp.reference.models import SymbolDescriptor, SymbolTable

logger = logging.getLogger("apiref-mcp.reference")

DEFAULT_NAMESPACE_PREFIX = "SiS"

_NUMERIC_VERSION = re.compile(r"[\d.]+")


def is_numeric_version(token: str) -> bool:
    """True for tokens made only of digits and dots ("1.30.0")."""
    return bool(_NUMERIC_VERSION.fullmatch(token))


def is_namespaced_version(token: str, prefix: str = DEFAULT_NAMESPACE_PREFIX) -> bool:
    """True for the namespaced line: the bare prefix or prefix + digits/dots.

    Example:
        >>> is_namespaced_version("SiS"), is_namespaced_version("SiS.3.0")
        (True, True)
        >>> is_namespaced_version("1.30.0")
        False
    """
    return bool(re.fullmatch(re.escape(prefix) + r"[\d.]*", token))


def is_version_token(token: str, prefix: str = DEFAULT_NAMESPACE_PREFIX) -> bool:
    """True when a slug segment names a version rather than a page."""
    return is_numeric_version(token) or is_namespaced_version(token, prefix)


def version_from_slug(slug: Sequence[str], prefix: str = DEFAULT_NAMESPACE_PREFIX) -> str | None:
    """Return the version named by the first slug segment, if any.

    Example:
        >>> version_from_slug(["1.20.0", "button"]), version_from_slug(["button"])
        ('1.20.0', None)
    """
    if slug and is_version_token(slug[0], prefix):
        return slug[0]
    return None


def latest_version(versions: Sequence[str], prefix: str = DEFAULT_NAMESPACE_PREFIX) -> str | None:
    """Return the latest main-line version.

    Falls back to the last entry when the list only holds namespaced versions.
    """
    main_line = [v for v in versions if not is_namespaced_version(v, prefix)]
    if main_line:
        return main_line[-1]
    return versions[-1] if versions else None


def latest_in_family(
    versions: Sequence[str], version: str, prefix: str = DEFAULT_NAMESPACE_PREFIX
) -> str | None:
    """Return the newest version of the same release line as `version`."""
    namespaced = is_namespaced_version(version, prefix)
    family = [v for v in versions if is_namespaced_version(v, prefix) == namespaced]
    return family[-1] if family else None


@dataclass(frozen=True)
class ResolvedSymbol:
    """A symbol found in the table bound to the requested version.

    Attributes:
        symbol_name: Symbol table key (e.g., "streamlit.button")
        version: Version the symbol was resolved against
        descriptor: The symbol's descriptor at that version
        versions_desc: Full version list, newest first (selector order)
        is_latest: Whether `version` is the newest of its release line
        is_namespaced: Whether `version` belongs to the namespaced line
    """

    symbol_name: str
    version: str
    descriptor: SymbolDescriptor
    versions_desc: tuple[str, ...]
    is_latest: bool
    is_namespaced: bool


@dataclass(frozen=True)
class NotFound:
    """The symbol does not exist at the requested version."""

    symbol_name: str
    version: str
    versions_desc: tuple[str, ...]
    is_latest: bool
    is_namespaced: bool


Resolution = Union[ResolvedSymbol, NotFound]


def resolve(
    symbol_name: str,
    versions: Sequence[str],
    current_version: str | None,
    tables: Mapping[str, SymbolTable],
    *,
    prefix: str = DEFAULT_NAMESPACE_PREFIX,
) -> Resolution:
    """Resolve a symbol against the table of the current version.

    Args:
        symbol_name: Symbol table key
        versions: Version list, newest last
        current_version: Requested version; None selects the latest version
        tables: Version -> SymbolTable
        prefix: Namespaced-version prefix

    Returns:
        ResolvedSymbol on success, NotFound when the version has no table
        or its table has no entry for the symbol.
    """
    version = current_version or latest_version(versions, prefix) or ""
    versions_desc = tuple(reversed(list(versions)))
    is_namespaced = is_namespaced_version(version, prefix)
    is_latest = bool(version) and version == latest_in_family(versions, version, prefix)

    descriptor = tables.get(version, {}).get(symbol_name)
    if descriptor is None:
        logger.debug("Symbol %s not available at version %s", symbol_name, version)
        return NotFound(
            symbol_name=symbol_name,
            version=version,
            versions_desc=versions_desc,
            is_latest=is_latest,
            is_namespaced=is_namespaced,
        )

    return ResolvedSymbol(
        symbol_name=symbol_name,
        version=version,
        descriptor=descriptor,
        versions_desc=versions_desc,
        is_latest=is_latest,
        is_namespaced=is_namespaced,
    )


def compute_switch_target(
    slug: Sequence[str],
    requested_version: str,
    latest: str | None,
    *,
    prefix: str = DEFAULT_NAMESPACE_PREFIX,
) -> list[str]:
    """Compute the slug path for viewing the same page at another version.

    The latest version has no version segment, so switching to it drops an
    existing one. Any other version replaces an existing version segment or
    is prepended when the slug has none. The input slug is never mutated.

    Example:
        >>> compute_switch_target(["button"], "1.20.0", "1.30.0")
        ['1.20.0', 'button']
        >>> compute_switch_target(["1.20.0", "button"], "1.30.0", "1.30.0")
        ['button']
        >>> compute_switch_target(["SiS", "button"], "1.20.0", "1.30.0")
        ['1.20.0', 'button']
    """
    segments = list(slug)
    has_version = bool(segments) and is_version_token(segments[0], prefix)

    if requested_version == latest:
        return segments[1:] if has_version else segments

    if has_version:
        segments[0] = requested_version
    else:
        segments.insert(0, requested_version)
    return segments
