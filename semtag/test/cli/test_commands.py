"""Tests for the semtag command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from semtag import __version__
from semtag.cli.app import app
from semtag.cli.commands.parse_cmd import describe
from semtag.cli.context import build_context
from semtag.core.config import Config
from semtag.output.console import MockConsole
from semtag.version.dialects import CANONICAL
from semtag.version.model import Dirty, PreRelease, Release

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SEMTAG_CONFIG", raising=False)
    return tmp_path


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


class TestParse:
    def test_release(self) -> None:
        result = runner.invoke(app, ["parse", "v1.2.3"])
        assert result.exit_code == 0
        assert "release" in result.output

    def test_dirty_pre_release_canonical(self) -> None:
        result = runner.invoke(
            app, ["parse", "--dialect", "canonical", "1.0.0-alpha105+aabbccz.dirty"]
        )
        assert result.exit_code == 0
        assert "aabbccz" in result.output
        assert "105" in result.output

    def test_illegal_text(self) -> None:
        result = runner.invoke(app, ["parse", "1.2.3"])
        assert result.exit_code == 1
        assert "Unable to parse version string" in result.output

    def test_unknown_dialect(self) -> None:
        result = runner.invoke(app, ["parse", "--dialect", "svn", "v1.2.3"])
        assert result.exit_code == 1
        assert "unknown dialect" in result.output


class TestConvert:
    def test_describe_to_build_version(self) -> None:
        result = runner.invoke(app, ["convert", "v1.4.2-3-g1a2b3c4.dirty"])
        assert result.exit_code == 0
        assert "1.4.2-alpha3+1a2b3c4.dirty" in result.output

    def test_trailing_newline_is_ignored(self) -> None:
        result = runner.invoke(app, ["convert", "v1.4.2\n"])
        assert result.exit_code == 0
        assert "1.4.2" in result.output

    def test_explicit_dialects(self) -> None:
        result = runner.invoke(app, ["convert", "--from", "canonical", "--to", "git", "2.0.0"])
        assert result.exit_code == 0
        assert "v2.0.0" in result.output

    def test_no_tag_uses_initial_release(self) -> None:
        result = runner.invoke(app, ["convert"])
        assert result.exit_code == 0
        assert "0.0.1" in result.output

    def test_illegal_text(self) -> None:
        result = runner.invoke(app, ["convert", "1.4.2"])
        assert result.exit_code == 1
        assert "v1.2.3-4-gabcdef0" in result.output


class TestNext:
    def test_default_patch(self) -> None:
        result = runner.invoke(app, ["next", "v1.2.3"])
        assert result.exit_code == 0
        assert "v1.2.4" in result.output
        assert "Release version: v1.2.4" in result.output

    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            (["--major"], "v2.0.0"),
            (["--minor"], "v1.3.0"),
            (["--patch"], "v1.2.4"),
            (["--bump", "minor"], "v1.3.0"),
            (["--minor", "--major"], "v2.0.0"),
        ],
    )
    def test_increment_kinds(self, args: list[str], expected: str) -> None:
        result = runner.invoke(app, ["next", *args, "v1.2.3-5-gabcdef0"])
        assert result.exit_code == 0
        assert expected in result.output

    def test_dirty_warns(self) -> None:
        result = runner.invoke(app, ["next", "v1.2.3-5-gabcdef0.dirty"])
        assert result.exit_code == 0
        assert "v1.2.4" in result.output
        assert "uncommitted changes" in result.output

    def test_no_tag_increments_initial_release(self) -> None:
        result = runner.invoke(app, ["next"])
        assert result.exit_code == 0
        assert "v0.0.2" in result.output

    def test_custom_message(self) -> None:
        result = runner.invoke(app, ["next", "-m", "Ship it", "v1.2.3"])
        assert result.exit_code == 0
        assert "Ship it" in result.output

    def test_unknown_bump(self) -> None:
        result = runner.invoke(app, ["next", "--bump", "micro", "v1.2.3"])
        assert result.exit_code == 1
        assert "unknown increment" in result.output

    def test_config_file(self, _isolated_cwd: Path) -> None:
        (_isolated_cwd / "semtag.toml").write_text(
            'default_bump = "minor"\ntag_message = "Release {tag} (auto)"\n',
            encoding="utf-8",
        )
        result = runner.invoke(app, ["next", "v1.2.3"])
        assert result.exit_code == 0
        assert "v1.3.0" in result.output
        assert "Release v1.3.0 (auto)" in result.output

    def test_explicit_config_option(self, tmp_path: Path) -> None:
        path = tmp_path / "release.toml"
        path.write_text('tag_dialect = "canonical"\n', encoding="utf-8")
        result = runner.invoke(app, ["--config", str(path), "next", "--major", "1.2.3"])
        assert result.exit_code == 0
        assert "2.0.0" in result.output

    def test_invalid_config(self, _isolated_cwd: Path) -> None:
        (_isolated_cwd / "semtag.toml").write_text('tag_dialect = "svn"\n', encoding="utf-8")
        result = runner.invoke(app, ["next", "v1.2.3"])
        assert result.exit_code == 2
        assert "Invalid config structure" in result.output


class TestDescribe:
    def test_release(self) -> None:
        assert describe(Release(1, 2, 3)) == [
            ("kind", "release"),
            ("major", "1"),
            ("minor", "2"),
            ("patch", "3"),
            ("dirty", "no"),
        ]

    def test_dirty_pre_release(self) -> None:
        rows = dict(describe(Dirty(PreRelease(Release(1, 0, 0), 105, "aabbccz"))))
        assert rows == {
            "kind": "pre-release",
            "major": "1",
            "minor": "0",
            "patch": "0",
            "distance": "105",
            "commit": "aabbccz",
            "dirty": "yes",
        }


class TestBuildContext:
    def test_defaults_without_config(self) -> None:
        ctx = build_context(console=MockConsole())
        assert ctx.config == Config()
        assert ctx.config_path is None

    def test_discovers_pyproject(self, _isolated_cwd: Path) -> None:
        (_isolated_cwd / "pyproject.toml").write_text(
            '[tool.semtag]\nbuild_dialect = "git"\n', encoding="utf-8"
        )
        ctx = build_context(console=MockConsole())
        assert ctx.config_path == _isolated_cwd / "pyproject.toml"
        assert ctx.config.build_dialect.name == "git"
        assert ctx.config.tag_dialect is not CANONICAL

    def test_missing_explicit_config_exits(self, tmp_path: Path) -> None:
        import typer

        console = MockConsole()
        with pytest.raises(typer.Exit) as excinfo:
            build_context(tmp_path / "missing.toml", console=console)
        assert excinfo.value.exit_code == 2
        assert console.find("not found")
