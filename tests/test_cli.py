"""End-to-end tests for the command-line entry point."""
from __future__ import annotations

import logging
import re
import runpy
import sys
from pathlib import Path

import pytest

from tick_countdown.cli import main, parse_args
from tick_countdown.config import CountdownConfig


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestParseArgs:
    def test_no_arguments(self) -> None:
        args = parse_args([])
        assert args.words == []
        assert args.verbose is False

    def test_verbose_before_command(self) -> None:
        args = parse_args(["-v", "add", "tea", "4m"])
        assert args.verbose is True
        assert args.words == ["add", "tea", "4m"]

    def test_words_after_command_pass_through(self) -> None:
        args = parse_args(["add", "tea", "-v", "4m"])
        assert args.verbose is False
        assert args.words == ["add", "tea", "-v", "4m"]

    def test_unknown_option_becomes_a_word(self) -> None:
        args = parse_args(["--list"])
        assert args.verbose is False
        assert args.words == ["--list"]

    def test_defaults_to_sys_argv(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "argv", ["tick-countdown", "-v", "cancel", "tea"])
        args = parse_args()
        assert args.verbose is True
        assert args.words == ["cancel", "tea"]


class TestMain:
    def test_add_writes_timer_file(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["add", "tea", "4m"]) == 0
        assert capsys.readouterr().out == "Added Timer: tea"
        assert (workdir / "tea.timer").is_file()

    def test_add_then_display(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["add", "timer", "30s"])
        capsys.readouterr()
        assert main([]) == 0
        assert re.fullmatch(r"timer: 00:00:(29|30)", capsys.readouterr().out)

    def test_unknown_verb_displays(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["add", "tea", "1h"])
        capsys.readouterr()
        assert main(["status"]) == 0
        assert capsys.readouterr().out.startswith("tea: ")

    def test_display_sorted(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["add", "b", "2h"])
        main(["add", "a", "1h"])
        capsys.readouterr()
        main([])
        lines = capsys.readouterr().out.split("\n")
        assert [line.split(":")[0] for line in lines] == ["a", "b"]

    def test_cancel(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["add", "morning", "run", "1h"])
        capsys.readouterr()
        assert main(["cancel", "morning", "run"]) == 0
        assert capsys.readouterr().out == "Canceled timer morning run"
        assert list(workdir.iterdir()) == []

    def test_cancel_missing_reports_error(
        self, workdir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["cancel", "tea"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error: tea was not found" in captured.err

    def test_add_without_arguments_reports_error(
        self, workdir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["add"]) == 1
        assert "add requires a name and a duration" in capsys.readouterr().err

    def test_invalid_name_reports_save_error(
        self, workdir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["add", "a/b", "5m"]) == 1
        assert "Failed to save a/b" in capsys.readouterr().err

    def test_malformed_file_reports_io_error(
        self, workdir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (workdir / "tea.timer").write_text("whenever", encoding="utf-8")
        assert main([]) == 1
        assert "error: IO Error:" in capsys.readouterr().err

    def test_explicit_config_directory(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = CountdownConfig(directory=tmp_path, suffix=".cd")
        assert main(["add", "tea", "4m"], config=config) == 0
        assert (tmp_path / "tea.cd").is_file()

    def test_unknown_option_displays(
        self, workdir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["add", "tea", "1h"])
        capsys.readouterr()
        assert main(["--list"]) == 0
        assert capsys.readouterr().out.startswith("tea: ")

    def test_oversized_duration_reports_error(
        self, workdir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["add", "tea", "9" * 400 + "h"]) == 1
        assert "error: duration is too large" in capsys.readouterr().err
        assert list(workdir.iterdir()) == []

    def test_non_utf8_file_reports_io_error(
        self, workdir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (workdir / "tea.timer").write_bytes(b"\xff\xfe12")
        assert main([]) == 1
        assert "error: IO Error:" in capsys.readouterr().err


class TestLogging:
    def test_verbose_logs_debug(self, workdir: Path, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG)
        assert main(["--verbose", "add", "tea", "4m"]) == 0
        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("running AddNew(") for m in messages)
        assert any(m.startswith("saved tea to ") for m in messages)

    def test_quiet_by_default(self, workdir: Path, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG)
        assert main(["add", "tea", "4m"]) == 0
        assert [r for r in caplog.records if r.name.startswith("tick_countdown")] == []


class TestModuleEntryPoint:
    def test_python_dash_m(
        self,
        workdir: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["tick_countdown", "add", "tea", "4m"])
        with pytest.raises(SystemExit) as info:
            runpy.run_module("tick_countdown", run_name="__main__")
        assert info.value.code == 0
        assert capsys.readouterr().out == "Added Timer: tea"
        assert (workdir / "tea.timer").is_file()
