"""CLI parser and entrypoint tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tsdocgen import cli
from tsdocgen.cli import _build_parser


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "build"])
    assert args.verbose is True
    assert args.command == "build"
    assert args.path == "."


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["check", "--verbose", "some/project"])
    assert args.verbose is True
    assert args.command == "check"
    assert args.path == "some/project"


def test_cli_requires_a_command() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args([])


def test_main_exits_with_error_message(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["build", str(tmp_path)])

    assert excinfo.value.code == 1
    assert "Unable to read package.json" in capsys.readouterr().err


def test_main_reports_module_count(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    class FakeOrchestrator:
        async def check(self, path: str) -> list:
            assert path == "proj"
            return ["a", "b"]

    monkeypatch.setattr(cli, "Orchestrator", FakeOrchestrator)

    cli.main(["check", "proj"])

    assert "Documented 2 modules" in capsys.readouterr().out
