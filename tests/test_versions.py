"""Tests for xtr/versions.py — xpm version directory parsing."""

from __future__ import annotations

import pytest

from xtr.versions import ToolVersion, compare_versions, is_real_version, parse_version


class TestParseVersion:
    def test_full_name(self):
        v = parse_version("13.2.1-1.1.2")
        assert v.tool_version == (13, 2, 1)
        assert v.xpm_version == (1, 1, 2)
        assert v.source_name == "13.2.1-1.1.2"

    def test_missing_segments_default_to_zero(self):
        v = parse_version("0.12-3")
        assert v.tool_version == (0, 12, 0)
        assert v.xpm_version == (3, 0, 0)

    def test_no_dash(self):
        v = parse_version("1.2.3")
        assert v.tool_version == (1, 2, 3)
        assert v.xpm_version == (0, 0, 0)

    def test_non_numeric_segments(self):
        v = parse_version("a.2.b-x.y.4")
        assert v.tool_version == (0, 2, 0)
        assert v.xpm_version == (0, 0, 4)

    def test_numeric_prefix_kept(self):
        assert parse_version("12rc1.0.1-1").tool_version == (12, 0, 1)

    def test_extra_segments_ignored(self):
        v = parse_version("1.2.3.4-5.6.7.8")
        assert v.tool_version == (1, 2, 3)
        assert v.xpm_version == (5, 6, 7)

    def test_splits_on_first_dash_only(self):
        v = parse_version("0.12.0-3-rc")
        assert v.tool_version == (0, 12, 0)
        assert v.xpm_version == (3, 0, 0)

    @pytest.mark.parametrize("name", ["", "-", "readme.txt", "...---", "latest"])
    def test_garbage_is_all_zero(self, name):
        v = parse_version(name)
        assert v.tool_version == (0, 0, 0)
        assert v.source_name == name


class TestIsRealVersion:
    def test_zero_tool_version(self):
        assert not is_real_version(parse_version("0.0.0-1.0.0"))

    def test_any_nonzero_component(self):
        assert is_real_version(parse_version("0.0.1"))
        assert is_real_version(parse_version("0.1.0"))
        assert is_real_version(parse_version("1.0.0"))


class TestCompareVersions:
    def test_none_returns_candidate(self):
        v = parse_version("1.0.0-1")
        assert compare_versions(None, v) is v

    def test_self_comparison(self):
        v = parse_version("1.2.3-4.5.6")
        assert compare_versions(v, v) is v

    def test_tool_version_wins(self):
        old = parse_version("1.9.9-9.9.9")
        new = parse_version("2.0.0-0.0.1")
        assert compare_versions(old, new) is new
        assert compare_versions(new, old) is new

    def test_component_order(self):
        a = parse_version("1.10.0-1")
        b = parse_version("1.9.20-1")
        assert compare_versions(a, b) is a
        assert compare_versions(b, a) is a

    def test_xpm_version_breaks_tie(self):
        a = parse_version("13.2.1-1.1")
        b = parse_version("13.2.1-1.2")
        assert compare_versions(a, b) is b
        assert compare_versions(b, a) is b

    def test_full_tie_keeps_current(self):
        a = ToolVersion((1, 0, 0), (1, 0, 0), "1.0.0-1")
        b = ToolVersion((1, 0, 0), (1, 0, 0), "1.0-1.0.0")
        assert compare_versions(a, b) is a
