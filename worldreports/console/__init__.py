"""Command catalog, discovery and the interactive console."""

from .common import Command, CommandResult
from .core import ReportConsole, Session
from .discovery import DiscoveryResult, SkippedCandidate, build_catalog, discover_all, register_all
from .registry import CommandCatalog, CommandSpec

__all__ = [
    "Command",
    "CommandResult",
    "CommandCatalog",
    "CommandSpec",
    "DiscoveryResult",
    "SkippedCandidate",
    "ReportConsole",
    "Session",
    "build_catalog",
    "discover_all",
    "register_all",
]
