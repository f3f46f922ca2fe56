"""worldreports package: population reports over the world database."""

from .config import DatabaseSettings, load_settings
from .console import (
    Command,
    CommandCatalog,
    CommandResult,
    DiscoveryResult,
    ReportConsole,
    build_catalog,
    discover_all,
    register_all,
)
from .database import ConnectionProvider, run_connectivity_check
from .layout import repeated_line, separator_width

__all__ = [
    "Command",
    "CommandCatalog",
    "CommandResult",
    "ConnectionProvider",
    "DatabaseSettings",
    "DiscoveryResult",
    "ReportConsole",
    "build_catalog",
    "discover_all",
    "load_settings",
    "register_all",
    "repeated_line",
    "run_connectivity_check",
    "separator_width",
]
