"""Per-mode capability registries and the process-wide registry cache."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Mapping, Optional

from aiden_terminal import (
    app_commands,
    binary_commands,
    business_commands,
    general_commands,
    physics_commands,
    security_commands,
    web_commands,
)
from aiden_terminal.command_types import CommandDescriptor
from aiden_terminal.modes import (
    APPLICATION_ENGINEERING,
    BINARY_ANALYSIS,
    BUSINESS_OPERATIONS,
    GENERAL_PURPOSE,
    PHYSICS_RESEARCH,
    SECURITY_ASSESSMENT,
    WEB_ENGINEERING,
    canonical_mode,
)

logger = logging.getLogger("aiden.terminal.registry")

BASE_COMMANDS: Mapping[str, CommandDescriptor] = general_commands.COMMANDS

MODE_COMMANDS: Dict[str, Mapping[str, CommandDescriptor]] = {
    SECURITY_ASSESSMENT: security_commands.COMMANDS,
    BINARY_ANALYSIS: binary_commands.COMMANDS,
    BUSINESS_OPERATIONS: business_commands.COMMANDS,
    WEB_ENGINEERING: web_commands.COMMANDS,
    APPLICATION_ENGINEERING: app_commands.COMMANDS,
    PHYSICS_RESEARCH: physics_commands.COMMANDS,
}


class CapabilityRegistry(Mapping[str, CommandDescriptor]):
    """Read-only view of the commands available in one mode."""

    def __init__(self, mode: str, commands: Mapping[str, CommandDescriptor]) -> None:
        self._mode = mode
        self._commands = MappingProxyType(dict(commands))

    @property
    def mode(self) -> str:
        return self._mode

    def __getitem__(self, name: str) -> CommandDescriptor:
        return self._commands[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def names(self) -> List[str]:
        return sorted(self._commands)

    def __repr__(self) -> str:
        return f"CapabilityRegistry(mode={self._mode!r}, commands={self.names()!r})"


def registry_key(mode: str) -> str:
    """Cache key for *mode*: its canonical id, or the base mode when unknown."""

    return canonical_mode(mode) or GENERAL_PURPOSE


def build_registry(mode: str) -> CapabilityRegistry:
    """Merge the base commands with the table for *mode*; the mode table wins."""

    key = registry_key(mode)
    commands: Dict[str, CommandDescriptor] = dict(BASE_COMMANDS)
    commands.update(MODE_COMMANDS.get(key, {}))
    return CapabilityRegistry(key, commands)


RegistryBuilder = Callable[[str], CapabilityRegistry]


class RegistryCache:
    """Build each mode's registry once and reuse it for the process lifetime."""

    def __init__(self, builder: Optional[RegistryBuilder] = None) -> None:
        self._builder = builder or build_registry
        self._registries: Dict[str, CapabilityRegistry] = {}
        self._lock = threading.RLock()

    def get_or_build(self, mode: str) -> CapabilityRegistry:
        key = registry_key(mode)
        registry = self._registries.get(key)
        if registry is not None:
            return registry
        with self._lock:
            registry = self._registries.get(key)
            if registry is None:
                registry = self._builder(key)
                self._registries[key] = registry
                logger.debug("Built %s registry with %d commands", key, len(registry))
            return registry

    async def resolve(self, mode: str) -> CapabilityRegistry:
        return self.get_or_build(mode)

    def cached_modes(self) -> List[str]:
        with self._lock:
            return sorted(self._registries)

    def invalidate(self, mode: Optional[str] = None) -> None:
        """Drop the cached registry for *mode*, or every registry when omitted."""

        with self._lock:
            if mode is None:
                self._registries.clear()
            else:
                self._registries.pop(registry_key(mode), None)


__all__ = [
    "BASE_COMMANDS",
    "CapabilityRegistry",
    "MODE_COMMANDS",
    "RegistryCache",
    "build_registry",
    "registry_key",
]
