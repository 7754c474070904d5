"""Command result and descriptor types shared by every command table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Sequence, Union

SUCCESS = "success"
ERROR = "error"
WARNING = "warning"
INFO = "info"

STATUSES = (SUCCESS, ERROR, WARNING, INFO)


class CommandDefinitionError(ValueError):
    """Raised when a command table declares an invalid descriptor."""


@dataclass
class CommandResult:
    output: str = ""
    status: str = SUCCESS
    data: Optional[Any] = None

    def __post_init__(self) -> None:
        if self.status not in STATUSES:
            raise ValueError(f"Unknown command status: {self.status}")

    @property
    def ok(self) -> bool:
        return self.status != ERROR

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"output": self.output, "status": self.status}
        if self.data is not None:
            payload["data"] = self.data
        return payload


def usage_error(message: str) -> CommandResult:
    return CommandResult(output=message, status=ERROR)


Handler = Callable[
    [List[str], Dict[str, str]],
    Union[CommandResult, Awaitable[CommandResult]],
]


@dataclass(frozen=True)
class CommandDescriptor:
    """A leaf command: its handler plus help metadata."""

    name: str
    handler: Handler
    summary: str
    usage: str
    examples: Sequence[str] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name:
            raise CommandDefinitionError("Command name is required")
        if not self.examples:
            raise CommandDefinitionError(f"Command {self.name} must list at least one example")
        object.__setattr__(self, "examples", tuple(self.examples))

    def format_help(self) -> str:
        examples = "\n".join(f"  {example}" for example in self.examples)
        return (
            f"Command: {self.name}\n"
            f"Description: {self.summary}\n"
            f"Usage: {self.usage}\n"
            f"Examples:\n{examples}"
        )


def command(
    name: str,
    summary: str,
    usage: str,
    examples: Sequence[str],
) -> Callable[[Handler], Handler]:
    """Attach a :class:`CommandDescriptor` to the decorated handler."""

    def decorator(func: Handler) -> Handler:
        func.__command_descriptor__ = CommandDescriptor(  # type: ignore[attr-defined]
            name=name,
            handler=func,
            summary=summary,
            usage=usage,
            examples=tuple(examples),
        )
        return func

    return decorator


def collect_descriptors(namespace: Mapping[str, Any]) -> Dict[str, CommandDescriptor]:
    """Gather every decorated handler found in *namespace*, keyed by name."""

    table: Dict[str, CommandDescriptor] = {}
    for obj in namespace.values():
        descriptor = getattr(obj, "__command_descriptor__", None)
        if not callable(obj) or not isinstance(descriptor, CommandDescriptor):
            continue
        if descriptor.name in table:
            raise CommandDefinitionError(f"Duplicate command name: {descriptor.name}")
        table[descriptor.name] = descriptor
    return table


__all__ = [
    "CommandDefinitionError",
    "CommandDescriptor",
    "CommandResult",
    "ERROR",
    "Handler",
    "INFO",
    "STATUSES",
    "SUCCESS",
    "WARNING",
    "collect_descriptors",
    "command",
    "usage_error",
]
