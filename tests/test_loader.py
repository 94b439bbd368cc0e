"""Tests for reference content loading."""

import json

import pytest

from apiref_mcp.config import DEFAULT_CONTENT_PATH
from apiref_mcp.reference import ReferenceLoader


def test_bundled_content_loads():
    content = ReferenceLoader.load_content(DEFAULT_CONTENT_PATH)

    assert content.versions[-1] == "1.30.0"
    assert "streamlit.button" in content.table_for("1.30.0")
    assert "streamlit.chat_input" not in content.table_for("1.20.0")
    sql = content.table_for("1.30.0")["streamlit.connections.SQLConnection"]
    assert sql.is_class is True
    assert [m.name for m in sql.methods] == ["query", "reset"]


def test_content_is_cached(tmp_path):
    path = tmp_path / "reference.json"
    path.write_text(json.dumps({"1.0.0": {}}), encoding="utf-8")

    first = ReferenceLoader.load_content(path)
    assert ReferenceLoader.load_content(str(path)) is first

    ReferenceLoader.clear_cache()
    assert ReferenceLoader.load_content(path) is not first


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ReferenceLoader.load_content(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "reference.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError):
        ReferenceLoader.load_content(path)


class TestParseContent:
    def test_bare_version_mapping(self):
        content = ReferenceLoader.parse_content(
            {
                "1.20.0": {"streamlit.button": {"name": "button"}},
                "1.30.0": {"streamlit.button": {"name": "button"}},
            }
        )

        assert content.versions == ["1.20.0", "1.30.0"]
        assert content.table_for("1.20.0")["streamlit.button"].name == "button"

    def test_name_defaults_to_last_key_segment(self):
        content = ReferenceLoader.parse_content({"1.0.0": {"streamlit.slider": {"signature": "st.slider()"}}})

        assert content.table_for("1.0.0")["streamlit.slider"].name == "slider"

    def test_listed_version_without_table(self):
        content = ReferenceLoader.parse_content({"versions": ["SiS", "1.0.0"], "symbols": {"1.0.0": {}}})

        assert content.versions == ["SiS", "1.0.0"]
        assert content.table_for("SiS") == {}

    def test_descriptor_defaults(self):
        content = ReferenceLoader.parse_content({"1.0.0": {"streamlit.x": {"name": "x", "extra_field": 1}}})
        descriptor = content.table_for("1.0.0")["streamlit.x"]

        assert descriptor.args == []
        assert descriptor.methods == []
        assert descriptor.is_class is False
        assert descriptor.example is None

    def test_rejects_non_object(self):
        with pytest.raises(ValueError):
            ReferenceLoader.parse_content(["1.0.0"])

    def test_rejects_invalid_descriptor(self):
        with pytest.raises(ValueError):
            ReferenceLoader.parse_content({"1.0.0": {"streamlit.x": {"name": "x", "args": "label"}}})

    def test_null_fields_take_defaults(self):
        raw = {
            "1.0.0": {
                "streamlit.x": {
                    "name": "x",
                    "signature": None,
                    "is_class": None,
                    "args": [{"name": "label", "type_name": None, "is_optional": None}],
                    "methods": None,
                }
            }
        }
        descriptor = ReferenceLoader.parse_content(raw).table_for("1.0.0")["streamlit.x"]

        assert descriptor.signature == ""
        assert descriptor.is_class is False
        assert descriptor.args[0].type_name == ""
        assert descriptor.args[0].is_optional is False
        assert descriptor.methods == []

    @pytest.mark.parametrize(
        "raw",
        [
            {"1.0.0": ["streamlit.x"]},
            {"symbols": ["streamlit.x"]},
            {"versions": ["1.0.0"], "symbols": {"1.0.0": "streamlit.x"}},
        ],
    )
    def test_rejects_non_object_tables(self, raw):
        with pytest.raises(ValueError):
            ReferenceLoader.parse_content(raw)
