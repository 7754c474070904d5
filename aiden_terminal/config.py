"""Environment-driven configuration for the terminal interpreter."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional

from aiden_terminal.audit_log import AuditLogger, AuditSigner, AuditSink, HttpAuditSink, JsonlAuditSink
from aiden_terminal.modes import GENERAL_PURPOSE

ENV_PREFIX = "AIDEN_TERMINAL_"


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""


def _positive_float(raw: Optional[str], default: Optional[float]) -> Optional[float]:
    if not raw:
        return default
    try:
        parsed = float(raw)
    except ValueError:
        return default
    if parsed <= 0:
        return default
    return parsed


@dataclass
class TerminalConfig:
    default_mode: str = GENERAL_PURPOSE
    audit_url: Optional[str] = None
    audit_path: Optional[Path] = None
    audit_timeout: float = 5.0
    audit_signing_key: Optional[str] = None
    handler_timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TerminalConfig":
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            value = env.get(ENV_PREFIX + name)
            if value is None:
                return None
            value = value.strip()
            return value or None

        audit_path = get("AUDIT_PATH")
        log_level = (get("LOG_LEVEL") or "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = "INFO"
        return cls(
            default_mode=get("MODE") or GENERAL_PURPOSE,
            audit_url=get("AUDIT_URL"),
            audit_path=Path(audit_path) if audit_path else None,
            audit_timeout=_positive_float(get("AUDIT_TIMEOUT"), 5.0),
            audit_signing_key=get("AUDIT_SIGNING_KEY"),
            handler_timeout=_positive_float(get("HANDLER_TIMEOUT"), None),
            log_level=log_level,
        )


def build_audit_signer(config: TerminalConfig) -> Optional[AuditSigner]:
    if not config.audit_signing_key:
        return None
    try:
        return AuditSigner.from_seed_hex(config.audit_signing_key)
    except ValueError as exc:
        raise ConfigError(f"Invalid {ENV_PREFIX}AUDIT_SIGNING_KEY: {exc}") from exc


def build_audit_logger(config: TerminalConfig) -> AuditLogger:
    sinks: List[AuditSink] = []
    if config.audit_url:
        sinks.append(HttpAuditSink(config.audit_url, timeout=config.audit_timeout))
    if config.audit_path is not None:
        try:
            sinks.append(JsonlAuditSink(config.audit_path))
        except OSError as exc:
            raise ConfigError(f"Invalid {ENV_PREFIX}AUDIT_PATH {config.audit_path}: {exc}") from exc
    return AuditLogger(sinks, signer=build_audit_signer(config))


__all__ = [
    "ConfigError",
    "ENV_PREFIX",
    "TerminalConfig",
    "build_audit_logger",
    "build_audit_signer",
]
