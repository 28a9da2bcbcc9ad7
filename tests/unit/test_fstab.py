"""Unit tests for lxcnative.fstab: parsing lxc.mount.entry values."""
from __future__ import annotations

import pytest

from lxcnative.errors import FstabParseError, MalformedInputError
from lxcnative.fstab import FstabLine, parse_fstab_line, split_fields


class TestSplitFields:
    def test_single_spaces(self) -> None:
        assert split_fields("a b c d") == ["a", "b", "c", "d"]

    def test_runs_of_blanks_collapse(self) -> None:
        assert split_fields("  a   b\t\tc \t d  ") == ["a", "b", "c", "d"]

    def test_empty_value(self) -> None:
        assert split_fields("") == []


class TestParseFstabLine:
    def test_four_fields(self) -> None:
        line = parse_fstab_line("/data /mnt/data none bind,ro")
        assert line == FstabLine(
            source="/data",
            destination="/mnt/data",
            fs_type="none",
            options="bind,ro",
        )

    def test_dump_and_pass_are_ignored(self) -> None:
        line = parse_fstab_line("proc proc proc nodev,noexec,nosuid 0 0")
        assert line.options == "nodev,noexec,nosuid"

    def test_options_are_not_rejoined(self) -> None:
        line = parse_fstab_line("/a /b none bind ro extra")
        assert line.options == "bind"

    def test_tab_separated(self) -> None:
        line = parse_fstab_line("tmpfs\trun\ttmpfs\tsize=10M")
        assert line.destination == "run"
        assert line.fs_type == "tmpfs"

    def test_option_list(self) -> None:
        line = parse_fstab_line("/a /b none bind,ro,nosuid")
        assert line.option_list == ["bind", "ro", "nosuid"]

    @pytest.mark.parametrize("value", [
        "",
        "   ",
        "/data",
        "/data /mnt/data",
        "/data /mnt/data none",
        "/data\t\t/mnt/data   none  ",
    ])
    def test_fewer_than_four_fields_raise(self, value: str) -> None:
        with pytest.raises(FstabParseError) as exc_info:
            parse_fstab_line(value)
        assert exc_info.value.value == value
        assert exc_info.value.key == "lxc.mount.entry"

    def test_missing_value_raises(self) -> None:
        with pytest.raises(FstabParseError):
            parse_fstab_line(None)

    def test_parse_error_is_malformed_input(self) -> None:
        assert issubclass(FstabParseError, MalformedInputError)

    def test_line_is_frozen(self) -> None:
        line = parse_fstab_line("/a /b none bind")
        with pytest.raises((AttributeError, TypeError)):
            line.source = "/c"  # type: ignore[misc]
