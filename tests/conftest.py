"""Shared fixtures for reference tests."""

import pytest

from apiref_mcp.reference import ReferenceLoader


RAW_CONTENT = {
    "versions": ["SiS", "SiS.3.0", "1.20.0", "1.30.0"],
    "symbols": {
        "SiS": {
            "streamlit.button": {
                "name": "button",
                "signature": "st.button(label)",
                "args": [{"name": "label", "type_name": "str", "is_optional": False}],
                "returns": [{"type_name": "bool"}],
            },
        },
        "SiS.3.0": {
            "streamlit.button": {
                "name": "button",
                "signature": "st.button(label)",
                "args": [{"name": "label", "type_name": "str", "is_optional": False}],
                "returns": [{"type_name": "bool"}],
            },
            "streamlit.chat_input": {
                "name": "chat_input",
                "signature": "st.chat_input(placeholder=None)",
            },
        },
        "1.20.0": {
            "streamlit.button": {
                "name": "button",
                "signature": "st.button(label)",
                "source": "https://example.com/button.py",
                "args": [{"name": "label", "type_name": "str", "is_optional": False}],
                "returns": [{"type_name": "bool"}],
            },
        },
        "1.30.0": {
            "streamlit.button": {
                "name": "button",
                "signature": "st.button(label)",
                "description": "<p>Display a button widget.</p>",
                "source": "https://example.com/button.py",
                "is_class": False,
                "args": [{"name": "label", "type_name": "str", "is_optional": False}],
                "returns": [{"type_name": "bool"}],
            },
            "streamlit.chat_input": {
                "name": "chat_input",
                "signature": "st.chat_input(placeholder=None)",
            },
        },
    },
}


@pytest.fixture
def content():
    return ReferenceLoader.parse_content(RAW_CONTENT)


@pytest.fixture(autouse=True)
def _default_reference_env(monkeypatch):
    for name in (
        "APIREF_MCP_CONTENT_PATH",
        "APIREF_MCP_LIBRARY_MODULE",
        "APIREF_MCP_LIBRARY_ALIAS",
        "APIREF_MCP_LIBRARY_LABEL",
        "APIREF_MCP_NAMESPACE_PREFIX",
        "APIREF_MCP_NAMESPACE_LABEL",
        "APIREF_MCP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    ReferenceLoader.clear_cache()
