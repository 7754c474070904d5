"""Base commands available in every mode."""

from __future__ import annotations

import datetime as _dt
from typing import Dict, List

from aiden_terminal.command_types import INFO, CommandResult, collect_descriptors, command

TERMINAL_NAME = "AIDEN Terminal"
TERMINAL_VERSION = "1.0.0"

_SIMULATED_LISTING = ("documents/", "projects/", "tools/", "README.md", "config.json")


@command(
    name="echo",
    summary="Display a line of text",
    usage="echo [text...]",
    examples=["echo Hello, world!", 'echo "This is a quoted string"'],
)
async def echo(args: List[str], options: Dict[str, str]) -> CommandResult:
    return CommandResult(output=" ".join(args))


@command(
    name="date",
    summary="Display the current date and time",
    usage="date",
    examples=["date"],
)
async def date(args: List[str], options: Dict[str, str]) -> CommandResult:
    now = _dt.datetime.now().astimezone()
    return CommandResult(output=now.strftime("%a %b %d %Y %H:%M:%S %Z"))


@command(
    name="whoami",
    summary="Display the current user",
    usage="whoami",
    examples=["whoami"],
)
async def whoami(args: List[str], options: Dict[str, str]) -> CommandResult:
    return CommandResult(output=f"{TERMINAL_NAME} User")


@command(
    name="ls",
    summary="List directory contents",
    usage="ls",
    examples=["ls"],
)
async def ls(args: List[str], options: Dict[str, str]) -> CommandResult:
    return CommandResult(output="\n".join(_SIMULATED_LISTING))


@command(
    name="pwd",
    summary="Print working directory",
    usage="pwd",
    examples=["pwd"],
)
async def pwd(args: List[str], options: Dict[str, str]) -> CommandResult:
    return CommandResult(output="/home/aiden")


@command(
    name="version",
    summary="Display terminal version",
    usage="version",
    examples=["version"],
)
async def version(args: List[str], options: Dict[str, str]) -> CommandResult:
    return CommandResult(output=f"{TERMINAL_NAME} v{TERMINAL_VERSION}")


@command(
    name="about",
    summary="Display information about the terminal",
    usage="about",
    examples=["about"],
)
async def about(args: List[str], options: Dict[str, str]) -> CommandResult:
    body = (
        f"{TERMINAL_NAME}\n"
        f"Version: {TERMINAL_VERSION}\n"
        "A sophisticated terminal interface for executing specialized functions\n"
        "tailored to different operational modes."
    )
    return CommandResult(output=body, status=INFO)


COMMANDS = collect_descriptors(globals())


__all__ = ["COMMANDS", "TERMINAL_NAME", "TERMINAL_VERSION"]
