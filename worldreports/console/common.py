"""Shared console types."""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Union

from ..exceptions import CommandDefinitionError


@dataclass(slots=True)
class CommandResult:
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0


CommandOutcome = Union[CommandResult, str, None]


class Command(ABC):
    """A named, invocable unit of work exposed to the console.

    Subclasses set ``name`` (the token typed to run the command, matched
    case-insensitively) and ``description`` (shown by ``help``), and
    implement :meth:`execute`. Instances are built once and never mutated.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""

    def __init__(self) -> None:
        if not self.name or self.name != "".join(self.name.split()):
            raise CommandDefinitionError(
                f"{type(self).__name__} needs a single-token name, got {self.name!r}"
            )
        if not self.description.strip():
            raise CommandDefinitionError(f"Command {self.name!r} has no description")

    @abstractmethod
    def execute(self, connection: sqlite3.Connection, args: list[str]) -> CommandOutcome:
        """Run the command.

        ``args`` holds every token of the input line, the command name as typed
        included at index 0. Failures are raised; the dispatcher reports them.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


__all__ = ["Command", "CommandOutcome", "CommandResult"]
