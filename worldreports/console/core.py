"""Interactive report console."""

from __future__ import annotations

import builtins
import logging
import sqlite3
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from ..exceptions import ReportsError
from .common import Command, CommandOutcome, CommandResult
from .registry import CommandCatalog

logger = logging.getLogger(__name__)

PROMPT = "> "
EXIT_WORD = "exit"
HELP_ALIASES = frozenset({"help", "?"})
FAREWELL = "Goodbye."


@dataclass(slots=True)
class Session:
    catalog: CommandCatalog
    connection: sqlite3.Connection
    running: bool = True


class ReportConsole:
    """Reads lines, resolves them against a catalog and runs the commands.

    The connection is borrowed: the console never opens or closes it.
    """

    def __init__(
        self,
        catalog: CommandCatalog,
        connection: sqlite3.Connection,
        *,
        prompt: str = PROMPT,
        read_line: Callable[[str], str] | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.session = Session(catalog, connection)
        self.prompt = prompt
        self._read_line = read_line
        self._stdout = stdout
        self._stderr = stderr

    @property
    def catalog(self) -> CommandCatalog:
        return self.session.catalog

    @property
    def running(self) -> bool:
        return self.session.running

    # ------------------------------------------------------------------
    # Help output
    # ------------------------------------------------------------------
    def help_text(self) -> str:
        specs = self.catalog.iter_commands()
        if not specs:
            return "No commands are registered."
        width = max(len(name) for name in (*(spec.name for spec in specs), "help", EXIT_WORD))
        lines = ["Available commands:"]
        lines.extend(f"  {spec.name:<{width}}  {spec.description}" for spec in specs)
        lines.append(f"  {'help':<{width}}  Show this list (alias: ?)")
        lines.append(f"  {EXIT_WORD:<{width}}  Leave the console")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------
    def dispatch(self, line: str) -> CommandResult | None:
        """Process one input line. Returns ``None`` for blank input."""
        tokens = line.split()
        if not tokens:
            return None
        name = tokens[0]
        if len(tokens) == 1 and name.lower() == EXIT_WORD:
            self.session.running = False
            return CommandResult(stdout=FAREWELL)
        command = self.catalog.lookup(name)
        if command is None:
            if name.lower() in HELP_ALIASES:
                return CommandResult(stdout=self.help_text())
            return CommandResult(
                stderr=f"Unknown command: {name}. Type 'help' to list available commands.",
                exit_code=127,
            )
        return self._execute(command, tokens)

    def _execute(self, command: Command, tokens: list[str]) -> CommandResult:
        logger.debug("Running %s with %s", command.name, tokens[1:])
        try:
            outcome = command.execute(self.session.connection, list(tokens))
        except ReportsError as exc:
            return CommandResult(stderr=str(exc), exit_code=1)
        except SystemExit as exc:
            # argparse-style exits end the command, not the session.
            return CommandResult(stderr=f"{command.name} exited with status {exc.code}", exit_code=1)
        except Exception as exc:  # unexpected failure path
            logger.debug("Command %s raised", command.name, exc_info=True)
            return CommandResult(stderr=f"{command.name} failed: {exc}", exit_code=1)
        return self._normalise(outcome)

    @staticmethod
    def _normalise(outcome: CommandOutcome) -> CommandResult:
        if isinstance(outcome, CommandResult):
            return outcome
        if outcome is None:
            return CommandResult()
        return CommandResult(stdout=str(outcome))

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------
    def write(self, result: CommandResult) -> None:
        stdout = self._stdout or sys.stdout
        stderr = self._stderr or sys.stderr
        if result.stdout:
            stdout.write(result.stdout if result.stdout.endswith("\n") else result.stdout + "\n")
            stdout.flush()
        if result.stderr:
            stderr.write(result.stderr if result.stderr.endswith("\n") else result.stderr + "\n")
            stderr.flush()

    def run(self) -> None:
        """Loop until ``exit`` or end of input."""
        read_line = self._read_line or builtins.input
        while self.session.running:
            try:
                line = read_line(self.prompt)
            except EOFError:
                self.session.running = False
                self.write(CommandResult(stdout=f"\n{FAREWELL}"))
                break
            result = self.dispatch(line)
            if result is not None:
                self.write(result)


__all__ = ["ReportConsole", "Session", "EXIT_WORD", "HELP_ALIASES"]
