from __future__ import annotations

from pathlib import Path

import pytest

from aiden_terminal.audit_log import HttpAuditSink, JsonlAuditSink
from aiden_terminal.command_executor import CommandExecutor
from aiden_terminal.config import ConfigError, TerminalConfig, build_audit_logger, build_audit_signer
from aiden_terminal.modes import GENERAL_PURPOSE


def test_defaults_with_empty_environment() -> None:
    config = TerminalConfig.from_env({})

    assert config.default_mode == GENERAL_PURPOSE
    assert config.audit_url is None
    assert config.audit_path is None
    assert config.audit_timeout == 5.0
    assert config.audit_signing_key is None
    assert config.handler_timeout is None
    assert config.log_level == "INFO"


def test_values_are_read_from_prefixed_variables(tmp_path: Path) -> None:
    env = {
        "AIDEN_TERMINAL_MODE": "red-teaming",
        "AIDEN_TERMINAL_AUDIT_URL": "https://example.test/api/terminal",
        "AIDEN_TERMINAL_AUDIT_PATH": str(tmp_path / "audit.jsonl"),
        "AIDEN_TERMINAL_AUDIT_TIMEOUT": "2.5",
        "AIDEN_TERMINAL_HANDLER_TIMEOUT": "30",
        "AIDEN_TERMINAL_LOG_LEVEL": "debug",
    }

    config = TerminalConfig.from_env(env)

    assert config.default_mode == "red-teaming"
    assert config.audit_url == "https://example.test/api/terminal"
    assert config.audit_path == tmp_path / "audit.jsonl"
    assert config.audit_timeout == 2.5
    assert config.handler_timeout == 30.0
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["soon", "-1", "0", "   "])
def test_invalid_timeouts_fall_back_to_defaults(raw: str) -> None:
    config = TerminalConfig.from_env(
        {"AIDEN_TERMINAL_AUDIT_TIMEOUT": raw, "AIDEN_TERMINAL_HANDLER_TIMEOUT": raw}
    )

    assert config.audit_timeout == 5.0
    assert config.handler_timeout is None


def test_unknown_log_level_falls_back_to_info() -> None:
    config = TerminalConfig.from_env({"AIDEN_TERMINAL_LOG_LEVEL": "chatty"})

    assert config.log_level == "INFO"


def test_audit_logger_built_from_configured_sinks(tmp_path: Path) -> None:
    config = TerminalConfig(audit_url="https://example.test/api/terminal", audit_path=tmp_path / "audit.jsonl")

    audit = build_audit_logger(config)

    assert audit.enabled
    kinds = [type(sink) for sink in audit._sinks]
    assert kinds == [HttpAuditSink, JsonlAuditSink]


def test_audit_logger_disabled_without_sinks() -> None:
    assert not build_audit_logger(TerminalConfig()).enabled


def test_signing_key_is_loaded() -> None:
    signer = build_audit_signer(TerminalConfig(audit_signing_key="22" * 32))

    assert signer is not None
    assert len(signer.public_key_hex()) == 64


def test_invalid_signing_key_is_a_config_error() -> None:
    with pytest.raises(ConfigError, match="AIDEN_TERMINAL_AUDIT_SIGNING_KEY"):
        build_audit_signer(TerminalConfig(audit_signing_key="zz"))


def test_executor_from_config_carries_timeout() -> None:
    executor = CommandExecutor.from_config(TerminalConfig(handler_timeout=1.5))

    assert executor.handler_timeout == 1.5
    assert not executor.audit_logger.enabled


def test_unusable_audit_path_is_a_config_error(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(ConfigError, match="AIDEN_TERMINAL_AUDIT_PATH"):
        build_audit_logger(TerminalConfig(audit_path=blocker / "nested" / "audit.jsonl"))
