"""Anchor and href identifiers for rendered entries.

Two distinct rules are used, and they are deliberately separate functions:

- `anchor_id`: member anchors (methods, properties). Lowercased, with
  punctuation stripped.
- `clean_href`: symbol header anchors. Only dots are stripped; case is
  preserved.

Both collapse runs of whitespace into a single hyphen.
"""

import re

# Characters removed from member anchors: . , / # ! $ % ^ & * ; : { } = - ` ~ ( )
_ANCHOR_PUNCTUATION = re.compile(r"[.,/#!$%^&*;:{}=\-`~()]")
_WHITESPACE = re.compile(r"\s+")


def anchor_id(text: str) -> str:
    """Build a member anchor identifier.

    Example:
        >>> anchor_id("slider.value")
        'slidervalue'
        >>> anchor_id("st.connection.SQLConnection.query")
        'stconnectionsqlconnectionquery'
    """
    stripped = _ANCHOR_PUNCTUATION.sub("", str(text).lower())
    return _WHITESPACE.sub("-", stripped)


def clean_href(text: str) -> str:
    """Build a header anchor identifier, keeping the original case.

    Example:
        >>> clean_href("st.column_config.TextColumn")
        'stcolumn_configTextColumn'
    """
    return _WHITESPACE.sub("-", str(text).replace(".", ""))


def alias_module(name: str, module: str = "streamlit", alias: str = "st") -> str:
    """Replace the first occurrence of the library module with its alias.

    Example:
        >>> alias_module("streamlit.button")
        'st.button'
    """
    if not module:
        return name
    return name.replace(module, alias, 1)
