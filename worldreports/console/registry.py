"""Name to command catalog."""

from __future__ import annotations

from dataclasses import dataclass

from .common import Command


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    description: str


class CommandCatalog:
    """Case-insensitive registry of commands.

    Registering a name that is already present replaces the earlier command
    (last write wins) while keeping the position of the original entry, so
    enumeration follows the order in which names were first registered.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> Command:
        self._commands[command.name.lower()] = command
        return command

    def lookup(self, name: str) -> Command | None:
        return self._commands.get(name.lower())

    def contains(self, name: str) -> bool:
        return name.lower() in self._commands

    def iter_commands(self) -> tuple[CommandSpec, ...]:
        return tuple(
            CommandSpec(command.name, command.description)
            for command in self._commands.values()
        )

    def commands(self) -> tuple[Command, ...]:
        return tuple(self._commands.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __len__(self) -> int:
        return len(self._commands)


__all__ = ["CommandCatalog", "CommandSpec"]
