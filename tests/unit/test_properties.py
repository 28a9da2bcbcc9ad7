"""Unit tests for lxcnative.conf: reading LXC configuration text."""
from __future__ import annotations

import pytest

from lxcnative.conf import ConfReader, Property, PropertyStore, read_properties
from lxcnative.errors import ConfSyntaxError, MalformedInputError


# ---------------------------------------------------------------------------
# Empty and comment-only inputs
# ---------------------------------------------------------------------------


class TestEmptyInputs:
    def test_empty_string_produces_empty_store(self) -> None:
        store = read_properties("")
        assert len(store) == 0
        assert list(store) == []

    def test_blank_lines_are_ignored(self) -> None:
        store = read_properties("\n   \n\t\n")
        assert len(store) == 0

    def test_comment_lines_are_ignored(self) -> None:
        store = read_properties("# a comment\n   # indented comment\n")
        assert len(store) == 0


# ---------------------------------------------------------------------------
# Assignments
# ---------------------------------------------------------------------------


class TestAssignments:
    def test_simple_assignment(self) -> None:
        store = read_properties("lxc.utsname = c1\n")
        assert store.get("lxc.utsname") == "c1"

    def test_assignment_without_blanks(self) -> None:
        store = read_properties("lxc.utsname=c1")
        assert store.get("lxc.utsname") == "c1"

    def test_value_keeps_inner_blanks(self) -> None:
        store = read_properties("lxc.mount.entry = /a  b\tnone bind 0 0\n")
        assert store.get("lxc.mount.entry") == "/a  b\tnone bind 0 0"

    def test_trailing_blanks_are_stripped(self) -> None:
        store = read_properties("lxc.utsname = c1   \t\n")
        assert store.get("lxc.utsname") == "c1"

    def test_hash_inside_value_is_not_a_comment(self) -> None:
        store = read_properties("lxc.utsname = c1 # not a comment\n")
        assert store.get("lxc.utsname") == "c1 # not a comment"

    def test_empty_value_is_empty_string(self) -> None:
        store = read_properties("lxc.network.type =\n")
        assert store.get("lxc.network.type") == ""

    def test_crlf_line_endings(self) -> None:
        store = read_properties("a = 1\r\nb = 2\r\n")
        assert list(store.items()) == [("a", "1"), ("b", "2")]

    def test_missing_key_returns_none(self) -> None:
        store = read_properties("a = 1\n")
        assert store.get("b") is None
        assert store.lookup("b") is None
        assert "b" not in store

    def test_line_numbers_are_recorded(self) -> None:
        store = read_properties("# header\n\na = 1\nb = 2\n")
        assert [p.line for p in store] == [3, 4]


# ---------------------------------------------------------------------------
# Repeated keys
# ---------------------------------------------------------------------------


class TestRepeatedKeys:
    SOURCE = (
        "lxc.network.type = veth\n"
        "lxc.network.link = br0\n"
        "lxc.network.type = macvlan\n"
    )

    def test_get_returns_first_value(self) -> None:
        store = read_properties(self.SOURCE)
        assert store.get("lxc.network.type") == "veth"

    def test_get_all_preserves_order(self) -> None:
        store = read_properties(self.SOURCE)
        assert store.get_all("lxc.network.type") == ["veth", "macvlan"]

    def test_iteration_preserves_file_order(self) -> None:
        store = read_properties(self.SOURCE)
        assert [p.key for p in store] == [
            "lxc.network.type",
            "lxc.network.link",
            "lxc.network.type",
        ]

    def test_contains(self) -> None:
        store = read_properties(self.SOURCE)
        assert "lxc.network.link" in store


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    @pytest.mark.parametrize("source", [
        "= value\n",
        "1abc = value\n",
        "-x = value\n",
    ])
    def test_invalid_name_raises(self, source: str) -> None:
        with pytest.raises(ConfSyntaxError, match="expecting a name"):
            read_properties(source)

    def test_missing_assignment_raises(self) -> None:
        with pytest.raises(ConfSyntaxError, match="expecting an assignment"):
            read_properties("lxc.utsname c1\n")

    def test_error_carries_line_number(self) -> None:
        with pytest.raises(ConfSyntaxError) as exc_info:
            read_properties("a = 1\n\nbroken\n")
        assert exc_info.value.line == 3
        assert "line 3" in str(exc_info.value)

    def test_syntax_error_is_malformed_input(self) -> None:
        assert issubclass(ConfSyntaxError, MalformedInputError)


# ---------------------------------------------------------------------------
# PropertyStore construction
# ---------------------------------------------------------------------------


def test_store_can_be_built_directly() -> None:
    store = PropertyStore([Property("a", None), Property("a", "x")])
    assert store.get("a") is None
    assert store.get_all("a") == [None, "x"]


def test_reader_class_matches_convenience_function() -> None:
    source = "a = 1\nb = 2\n"
    assert list(ConfReader(source).read()) == list(read_properties(source))
