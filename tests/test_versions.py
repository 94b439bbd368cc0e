"""Tests for version families, symbol resolution and switch targets."""

import pytest

from apiref_mcp.reference.versions import (
    NotFound,
    ResolvedSymbol,
    compute_switch_target,
    is_namespaced_version,
    is_numeric_version,
    is_version_token,
    latest_in_family,
    latest_version,
    resolve,
    version_from_slug,
)

VERSIONS = ["SiS", "SiS.3.0", "1.20.0", "1.30.0"]


class TestVersionFamilies:
    def test_numeric(self):
        assert is_numeric_version("1.30.0")
        assert is_numeric_version("2")
        assert not is_numeric_version("SiS")
        assert not is_numeric_version("button")
        assert not is_numeric_version("1.30.0rc1")

    def test_namespaced(self):
        assert is_namespaced_version("SiS")
        assert is_namespaced_version("SiS.3.0")
        assert not is_namespaced_version("SiSx")
        assert not is_namespaced_version("1.30.0")
        assert is_namespaced_version("Edge.1.0", prefix="Edge")

    def test_version_token(self):
        assert is_version_token("1.20.0")
        assert is_version_token("SiS.3.0")
        assert not is_version_token("button")
        assert not is_version_token("library")

    def test_version_from_slug(self):
        assert version_from_slug(["1.20.0", "button"]) == "1.20.0"
        assert version_from_slug(["SiS.3.0", "button"]) == "SiS.3.0"
        assert version_from_slug(["button"]) is None
        assert version_from_slug([]) is None

    def test_latest_version_is_last_main_line_version(self):
        assert latest_version(VERSIONS) == "1.30.0"
        assert latest_version(["1.20.0", "1.30.0", "SiS", "SiS.3.0"]) == "1.30.0"

    def test_latest_version_namespaced_only(self):
        assert latest_version(["SiS", "SiS.3.0"]) == "SiS.3.0"
        assert latest_version([]) is None

    def test_latest_in_family(self):
        assert latest_in_family(VERSIONS, "1.20.0") == "1.30.0"
        assert latest_in_family(VERSIONS, "SiS") == "SiS.3.0"


class TestResolve:
    def test_resolved_symbol(self, content):
        result = resolve("streamlit.button", content.versions, "1.30.0", content.tables)

        assert isinstance(result, ResolvedSymbol)
        assert result.descriptor.name == "button"
        assert result.versions_desc == ("1.30.0", "1.20.0", "SiS.3.0", "SiS")
        assert result.is_latest is True
        assert result.is_namespaced is False

    def test_old_version_is_not_latest(self, content):
        result = resolve("streamlit.button", content.versions, "1.20.0", content.tables)

        assert isinstance(result, ResolvedSymbol)
        assert result.is_latest is False

    def test_namespaced_latest_in_its_own_line(self, content):
        newest = resolve("streamlit.button", content.versions, "SiS.3.0", content.tables)
        oldest = resolve("streamlit.button", content.versions, "SiS", content.tables)

        assert newest.is_namespaced and newest.is_latest
        assert oldest.is_namespaced and not oldest.is_latest

    def test_no_version_selects_latest(self, content):
        result = resolve("streamlit.button", content.versions, None, content.tables)

        assert result.version == "1.30.0"

    def test_absent_symbol_is_not_found(self, content):
        result = resolve("streamlit.chat_input", content.versions, "1.20.0", content.tables)

        assert isinstance(result, NotFound)
        assert result.is_namespaced is False
        assert result.version == "1.20.0"

    def test_absent_symbol_in_namespaced_version(self, content):
        result = resolve("streamlit.chat_input", content.versions, "SiS", content.tables)

        assert isinstance(result, NotFound)
        assert result.is_namespaced is True

    def test_unknown_version_is_not_found(self, content):
        result = resolve("streamlit.button", content.versions, "0.1.0", content.tables)

        assert isinstance(result, NotFound)

    def test_every_version_without_the_symbol_is_not_found(self, content):
        for version in content.versions:
            result = resolve("streamlit.chat_input", content.versions, version, content.tables)
            if "streamlit.chat_input" in content.table_for(version):
                assert isinstance(result, ResolvedSymbol)
            else:
                assert isinstance(result, NotFound)
                assert not hasattr(result, "descriptor")


class TestComputeSwitchTarget:
    def test_prepends_version_to_unversioned_slug(self):
        assert compute_switch_target(["button"], "1.20.0", "1.30.0") == ["1.20.0", "button"]

    def test_drops_version_segment_when_switching_to_latest(self):
        assert compute_switch_target(["1.20.0", "button"], "1.30.0", "1.30.0") == ["button"]

    def test_latest_on_unversioned_slug_is_unchanged(self):
        assert compute_switch_target(["library", "button"], "1.30.0", "1.30.0") == ["library", "button"]

    def test_replaces_existing_numeric_segment(self):
        result = compute_switch_target(["1.20.0", "library", "button"], "1.25.0", "1.30.0")
        assert result == ["1.25.0", "library", "button"]

    @pytest.mark.parametrize("segment", ["SiS", "SiS.3.0"])
    def test_replaces_existing_namespaced_segment(self, segment):
        assert compute_switch_target([segment, "button"], "1.20.0", "1.30.0") == ["1.20.0", "button"]

    def test_switch_into_namespaced_line(self):
        assert compute_switch_target(["button"], "SiS.3.0", "1.30.0") == ["SiS.3.0", "button"]

    def test_empty_slug(self):
        assert compute_switch_target([], "1.20.0", "1.30.0") == ["1.20.0"]
        assert compute_switch_target([], "1.30.0", "1.30.0") == []

    def test_input_slug_is_not_mutated(self):
        """Only the working copy changes; the caller's slug stays intact."""
        slug = ["1.20.0", "button"]
        compute_switch_target(slug, "1.25.0", "1.30.0")
        compute_switch_target(slug, "1.30.0", "1.30.0")
        unversioned = ["button"]
        compute_switch_target(unversioned, "1.20.0", "1.30.0")

        assert slug == ["1.20.0", "button"]
        assert unversioned == ["button"]
