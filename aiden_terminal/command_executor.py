"""Command dispatch: tokenize, resolve, invoke, normalise, audit."""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import List, Optional

from aiden_terminal.audit_log import AuditLogger, AuditRecord
from aiden_terminal.command_parser import ParsedCommand, tokenize
from aiden_terminal.command_registry import CapabilityRegistry, RegistryCache
from aiden_terminal.command_types import ERROR, INFO, CommandDescriptor, CommandResult
from aiden_terminal.config import TerminalConfig, build_audit_logger
from aiden_terminal.modes import display_name, mode_profile

logger = logging.getLogger("aiden.terminal.executor")

HELP = "help"
CLEAR = "clear"
MODE = "mode"
RESERVED_COMMANDS = (HELP, CLEAR, MODE)

UNKNOWN_ERROR = "An unknown error occurred"


class CommandHandlerError(RuntimeError):
    """Raised when a handler breaks the descriptor contract."""


class CommandTimeoutError(CommandHandlerError):
    """Raised when a handler exceeds the configured timeout."""


def format_command_list(registry: CapabilityRegistry, mode: str) -> str:
    lines = [f"Available commands for {display_name(mode)} mode:"]
    for name in registry.names():
        lines.append(f"  {name:<15} - {registry[name].summary}")
    lines.append("")
    lines.append("Type 'help <command>' for more information about a specific command.")
    return "\n".join(lines)


class CommandExecutor:
    """Execute terminal lines against the capability registry of a mode.

    ``execute`` never raises for command failures: unknown commands, handler
    exceptions and timeouts all come back as error results. Each dispatched
    result is then handed to the audit logger without waiting on delivery.
    """

    def __init__(
        self,
        *,
        registry_cache: Optional[RegistryCache] = None,
        audit_logger: Optional[AuditLogger] = None,
        handler_timeout: Optional[float] = None,
    ) -> None:
        self.registry_cache = registry_cache or RegistryCache()
        self.audit_logger = audit_logger or AuditLogger()
        self.handler_timeout = handler_timeout

    @classmethod
    def from_config(cls, config: TerminalConfig) -> "CommandExecutor":
        return cls(
            audit_logger=build_audit_logger(config),
            handler_timeout=config.handler_timeout,
        )

    # -------------------- execution ---------------------------
    async def execute(self, line: str, mode: str) -> CommandResult:
        parsed = tokenize(line)
        if not parsed.command:
            return CommandResult(output="")

        try:
            result = await self._dispatch(parsed, mode)
        except Exception as exc:
            logger.exception("Command execution error: %s", parsed.command)
            result = CommandResult(output=str(exc) or UNKNOWN_ERROR, status=ERROR)

        self._audit(line, result, mode)
        return result

    async def _dispatch(self, parsed: ParsedCommand, mode: str) -> CommandResult:
        registry = await self.registry_cache.resolve(mode)
        name = parsed.command

        if name == HELP:
            return self._help(registry, parsed.args, mode)
        if name == CLEAR:
            return CommandResult(output="")
        if name == MODE:
            return CommandResult(
                output=f"Current mode: {display_name(mode)}",
                status=INFO,
                data=mode_profile(mode).to_dict(),
            )

        descriptor = registry.get(name)
        if descriptor is None:
            return CommandResult(
                output=f"Command not found: {name}. Type 'help' to see available commands.",
                status=ERROR,
            )
        return await self._invoke(descriptor, parsed)

    async def _invoke(self, descriptor: CommandDescriptor, parsed: ParsedCommand) -> CommandResult:
        outcome = descriptor.handler(list(parsed.args), dict(parsed.options))
        if inspect.isawaitable(outcome):
            if self.handler_timeout is not None:
                try:
                    outcome = await asyncio.wait_for(outcome, timeout=self.handler_timeout)
                except asyncio.TimeoutError as exc:
                    raise CommandTimeoutError(
                        f"Command timed out after {self.handler_timeout:g}s: {descriptor.name}"
                    ) from exc
            else:
                outcome = await outcome
        if not isinstance(outcome, CommandResult):
            raise CommandHandlerError(
                f"Command {descriptor.name} returned {type(outcome).__name__} instead of a result"
            )
        return outcome

    def _help(self, registry: CapabilityRegistry, args: List[str], mode: str) -> CommandResult:
        if args and args[0] in registry:
            return CommandResult(output=registry[args[0]].format_help(), status=INFO)
        return CommandResult(output=format_command_list(registry, mode), status=INFO)

    def _audit(self, line: str, result: CommandResult, mode: str) -> None:
        try:
            self.audit_logger.emit(AuditRecord(command=line, output=result.output, mode=mode))
        except Exception as exc:
            logger.error("Failed to log command: %s", exc)

    # -------------------- introspection -----------------------
    def command_names(self, mode: str) -> List[str]:
        """Registered names for *mode* plus the reserved meta-commands."""

        registry = self.registry_cache.get_or_build(mode)
        return sorted(set(registry.names()) | set(RESERVED_COMMANDS))


_default_executor: Optional[CommandExecutor] = None


def get_default_executor() -> CommandExecutor:
    global _default_executor
    if _default_executor is None:
        _default_executor = CommandExecutor.from_config(TerminalConfig.from_env())
    return _default_executor


async def execute_command(line: str, mode: str) -> CommandResult:
    """Execute *line* in *mode* with the process-wide executor."""

    return await get_default_executor().execute(line, mode)


__all__ = [
    "CommandExecutor",
    "CommandHandlerError",
    "CommandTimeoutError",
    "RESERVED_COMMANDS",
    "UNKNOWN_ERROR",
    "execute_command",
    "format_command_list",
    "get_default_executor",
]
