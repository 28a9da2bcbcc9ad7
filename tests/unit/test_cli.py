"""Unit tests for lxcnative.cli: the lxc-native command line."""
from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from lxcnative.cli.main import cli


def _make_runner() -> CliRunner:
    return CliRunner()


class TestImportCommand:
    def test_json_to_file(self, config_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "c1.json"
        result = _make_runner().invoke(cli, ["import", str(config_file), "-o", str(out)])
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["name"] == "c1"
        assert [fs["destination"] for fs in data["filesystems"]] == ["/", "/mnt/data", "/run"]
        assert data["features"] == ["privnet"]

    def test_yaml_to_file(self, config_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "c1.yaml"
        result = _make_runner().invoke(
            cli, ["import", str(config_file), "--format", "yaml", "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        data = yaml.safe_load(out.read_text(encoding="utf-8"))
        assert data["filesystems"][2]["kind"] == "ram"

    def test_stdout(self, config_file: Path) -> None:
        result = _make_runner().invoke(cli, ["import", str(config_file)])
        assert result.exit_code == 0, result.output
        assert "/mnt/data" in result.output

    def test_missing_file_exits_1(self, tmp_path: Path) -> None:
        result = _make_runner().invoke(cli, ["import", str(tmp_path / "nope.conf")])
        assert result.exit_code == 1

    def test_import_error_exits_1(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.conf"
        path.write_text("lxc.utsname = c1\nlxc.rootfs = /r\nlxc.mount = /f\n", encoding="utf-8")
        result = _make_runner().invoke(cli, ["import", str(path)])
        assert result.exit_code == 1

    def test_bracketed_entry_in_error_is_printed_verbatim(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.conf"
        path.write_text(
            "lxc.utsname = c1\nlxc.rootfs = /r\nlxc.mount.entry = [/x] y\n", encoding="utf-8"
        )
        result = _make_runner().invoke(cli, ["import", str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Import error" in result.output


class TestInspectCommand:
    def test_prints_summary(self, config_file: Path) -> None:
        result = _make_runner().invoke(cli, ["inspect", str(config_file)])
        assert result.exit_code == 0, result.output
        assert "512 MiB" in result.output
        assert "privnet" in result.output

    def test_bracketed_name_is_printed_verbatim(self, tmp_path: Path) -> None:
        path = tmp_path / "web.conf"
        path.write_text("lxc.utsname = web[/x]\nlxc.rootfs = /r\n", encoding="utf-8")
        result = _make_runner().invoke(cli, ["inspect", str(path)])
        assert result.exit_code == 0, result.output
        assert "web[/x]" in result.output

    def test_verbose_flag(self, config_file: Path) -> None:
        result = _make_runner().invoke(cli, ["--verbose", "inspect", str(config_file)])
        assert result.exit_code == 0, result.output


def test_version_command() -> None:
    result = _make_runner().invoke(cli, ["version"])
    assert result.exit_code == 0
    assert "lxc-native-import" in result.output
