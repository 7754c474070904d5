#!/usr/bin/env python3
"""Interactive AIDEN Terminal shell and command-line entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
import readline
import shlex
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from aiden_terminal.command_executor import CLEAR, CommandExecutor
from aiden_terminal.command_parser import tokenize
from aiden_terminal.command_types import ERROR, INFO, CommandResult
from aiden_terminal.config import ConfigError, TerminalConfig
from aiden_terminal.general_commands import TERMINAL_NAME, TERMINAL_VERSION
from aiden_terminal.modes import canonical_mode, display_name, known_modes, mode_profile

logger = logging.getLogger("aiden.terminal.shell")

_CLEAR_SCREEN = "\033[2J\033[H"
_DIRECTIVE_PREFIX = ":"


class Completer:
    def __init__(self, shell: "TerminalShell") -> None:
        self.shell = shell

    def complete(self, text: str, state: int) -> Optional[str]:
        buffer = readline.get_line_buffer().lstrip()
        if " " in buffer:
            options: List[str] = []
        else:
            options = [name for name in self.shell.executor.command_names(self.shell.mode) if name.startswith(text)]
        if state < len(options):
            return options[state]
        return None


class TerminalShell:
    def __init__(
        self,
        executor: CommandExecutor,
        mode: str,
        *,
        history_path: Optional[Path] = None,
    ) -> None:
        self.executor = executor
        self.mode = mode
        self.history_path = history_path

    def banner(self, *, cleared: bool = False) -> str:
        title = f"{TERMINAL_NAME} v{TERMINAL_VERSION} - {display_name(self.mode)} Mode"
        if cleared:
            return f"Terminal cleared. {title}"
        return f"Welcome to {title}\nType 'help' to see available commands."

    def prompt(self) -> str:
        return f"{mode_profile(self.mode).prompt}@terminal:~$ "

    # -------------------- line handling -----------------------
    async def run_line(self, line: str) -> CommandResult:
        stripped = line.strip()
        if stripped.startswith(_DIRECTIVE_PREFIX):
            return self._directive(stripped[len(_DIRECTIVE_PREFIX):])
        return await self.executor.execute(line, self.mode)

    def _directive(self, text: str) -> CommandResult:
        parsed = tokenize(text)
        if parsed.command != "mode":
            return CommandResult(output=f"Unknown shell directive: :{parsed.command}", status=ERROR)
        if not parsed.args:
            modes = ", ".join(known_modes())
            return CommandResult(output=f"Usage: :mode <mode>\nKnown modes: {modes}", status=ERROR)
        requested = parsed.args[0]
        if canonical_mode(requested) is None:
            logger.warning("Unknown mode %s; only base commands will be available", requested)
        self.mode = requested
        return CommandResult(output=self.banner(), status=INFO)

    def render(self, line: str, result: CommandResult) -> None:
        if tokenize(line).command == CLEAR and not line.strip().startswith(_DIRECTIVE_PREFIX):
            print(_CLEAR_SCREEN + self.banner(cleared=True))
            return
        if not result.output:
            return
        stream = sys.stderr if result.status == ERROR else sys.stdout
        print(result.output, file=stream)

    # -------------------- REPL loop ---------------------------
    def _load_history(self) -> None:
        readline.set_completer(Completer(self).complete)
        readline.parse_and_bind("tab: complete")
        if self.history_path is None:
            return
        try:
            readline.read_history_file(self.history_path)
        except FileNotFoundError:
            pass

    def _save_history(self) -> None:
        if self.history_path is None:
            return
        try:
            readline.write_history_file(self.history_path)
        except OSError as exc:
            logger.error("Failed to write shell history: %s", exc)

    def run(self) -> None:
        self._load_history()
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        print(self.banner())
        try:
            while True:
                try:
                    line = input(self.prompt())
                except EOFError:
                    print()
                    break
                except KeyboardInterrupt:
                    print()
                    continue
                if not line.strip():
                    continue
                if line.strip() in (":quit", ":exit"):
                    break
                result = loop.run_until_complete(self.run_line(line))
                self.render(line, result)
        finally:
            try:
                loop.run_until_complete(self.executor.audit_logger.drain())
            finally:
                asyncio.set_event_loop(None)
                loop.close()
            self._save_history()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


async def _run_once(shell: TerminalShell, line: str) -> CommandResult:
    result = await shell.run_line(line)
    await shell.executor.audit_logger.drain()
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    args_list = list(sys.argv[1:] if argv is None else argv)
    parser = argparse.ArgumentParser(prog="aiden-terminal", add_help=True)
    parser.add_argument("--mode", dest="mode", default=None, help="Operating mode (default: AIDEN_TERMINAL_MODE or general-purpose)")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="Command to execute non-interactively")
    parsed = parser.parse_args(args_list)

    config = TerminalConfig.from_env()
    logging.basicConfig(level=config.log_level, format="[%(asctime)s] %(levelname)s: %(message)s")
    try:
        executor = CommandExecutor.from_config(config)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    mode = parsed.mode or config.default_mode
    shell = TerminalShell(executor, mode, history_path=Path.home() / ".aiden_terminal_history")

    if parsed.command:
        line = shlex.join(parsed.command)
        result = asyncio.run(_run_once(shell, line))
        shell.render(line, result)
        return 0 if result.ok else 1

    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
