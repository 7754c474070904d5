from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from aiden_terminal.command_executor import CommandExecutor
from aiden_terminal.command_types import ERROR, INFO
from aiden_terminal.modes import PHYSICS_RESEARCH, SECURITY_ASSESSMENT
from aiden_terminal.terminal_shell import TerminalShell, main


def _shell(mode: str = "general-purpose") -> TerminalShell:
    return TerminalShell(CommandExecutor(), mode)


def test_banner_and_prompt_follow_mode() -> None:
    shell = _shell(SECURITY_ASSESSMENT)

    assert shell.banner() == (
        "Welcome to AIDEN Terminal v1.0.0 - security assessment Mode\n"
        "Type 'help' to see available commands."
    )
    assert shell.banner(cleared=True) == "Terminal cleared. AIDEN Terminal v1.0.0 - security assessment Mode"
    assert shell.prompt() == "aiden-sec@terminal:~$ "


def test_unknown_mode_uses_general_prompt() -> None:
    assert _shell("mystery").prompt() == "aiden@terminal:~$ "


def test_mode_directive_switches_registry() -> None:
    shell = _shell()

    switched = asyncio.run(shell.run_line(":mode physics-research"))
    result = asyncio.run(shell.run_line("convert 5 eV J"))

    assert switched.status == INFO
    assert shell.mode == PHYSICS_RESEARCH
    assert "8.01088e-19" in result.output


def test_mode_directive_requires_argument() -> None:
    result = asyncio.run(_shell().run_line(":mode"))

    assert result.status == ERROR
    assert "Known modes:" in result.output


def test_unknown_directive_is_error() -> None:
    result = asyncio.run(_shell().run_line(":teleport"))

    assert result.status == ERROR
    assert result.output == "Unknown shell directive: :teleport"


def test_render_routes_errors_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    shell = _shell()
    error = asyncio.run(shell.run_line("bogus"))
    ok = asyncio.run(shell.run_line("echo hi"))

    shell.render("bogus", error)
    shell.render("echo hi", ok)

    captured = capsys.readouterr()
    assert "Command not found: bogus" in captured.err
    assert captured.out == "hi\n"


def test_render_clear_prints_cleared_banner(capsys: pytest.CaptureFixture[str]) -> None:
    shell = _shell()
    result = asyncio.run(shell.run_line("clear"))

    shell.render("clear", result)

    assert "Terminal cleared." in capsys.readouterr().out


def test_main_runs_single_command(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    audit_path = tmp_path / "audit.jsonl"
    monkeypatch.delenv("AIDEN_TERMINAL_AUDIT_URL", raising=False)
    monkeypatch.delenv("AIDEN_TERMINAL_AUDIT_SIGNING_KEY", raising=False)
    monkeypatch.setenv("AIDEN_TERMINAL_AUDIT_PATH", str(audit_path))

    code = main(["--mode", "red-teaming", "scan", "10.0.0.1"])

    assert code == 0
    assert "Scan results for 10.0.0.1" in capsys.readouterr().out
    records = [json.loads(line) for line in audit_path.read_text(encoding="utf-8").splitlines()]
    assert [record["command"] for record in records] == ["scan 10.0.0.1"]
    assert records[0]["mode"] == "red-teaming"


def test_main_returns_one_on_error(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.delenv("AIDEN_TERMINAL_AUDIT_URL", raising=False)
    monkeypatch.delenv("AIDEN_TERMINAL_AUDIT_PATH", raising=False)
    monkeypatch.delenv("AIDEN_TERMINAL_AUDIT_SIGNING_KEY", raising=False)

    assert main(["nonexistent-command"]) == 1
    assert "Type 'help'" in capsys.readouterr().err


def test_main_rejects_bad_signing_key(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("AIDEN_TERMINAL_AUDIT_SIGNING_KEY", "not-a-key")

    assert main(["echo", "hi"]) == 2
    assert "AUDIT_SIGNING_KEY" in capsys.readouterr().err


def test_main_rejects_unusable_audit_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.delenv("AIDEN_TERMINAL_AUDIT_URL", raising=False)
    monkeypatch.delenv("AIDEN_TERMINAL_AUDIT_SIGNING_KEY", raising=False)
    monkeypatch.setenv("AIDEN_TERMINAL_AUDIT_PATH", str(blocker / "audit.jsonl"))

    assert main(["echo", "hi"]) == 2
    assert "AUDIT_PATH" in capsys.readouterr().err


def test_main_keeps_argument_quoting(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.delenv("AIDEN_TERMINAL_AUDIT_URL", raising=False)
    monkeypatch.delenv("AIDEN_TERMINAL_AUDIT_PATH", raising=False)
    monkeypatch.delenv("AIDEN_TERMINAL_AUDIT_SIGNING_KEY", raising=False)

    assert main(["echo", "a  b", "it's"]) == 0
    assert capsys.readouterr().out == "a  b it's\n"
