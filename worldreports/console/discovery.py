"""Populate a :class:`CommandCatalog`.

Two strategies are available:

``explicit``
    Call a fixed sequence of command factories in order. This is the default;
    the table lives in :data:`worldreports.reports.REPORT_FACTORIES`.

``discover``
    Import every module below a package and instantiate each concrete
    :class:`Command` subclass defined there. ``pkgutil.walk_packages`` reads
    both plain directories and zip archives on ``sys.path``, so callers see
    the same behaviour regardless of how the package was deployed. Module
    order follows the import system and must not be relied on.

Either way a candidate that cannot be imported or constructed is recorded as
skipped and the rest of the pass carries on.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from types import ModuleType
from typing import Literal

from .common import Command
from .registry import CommandCatalog

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "worldreports.reports"

CommandFactory = Callable[[], Command]
Strategy = Literal["explicit", "discover"]


@dataclass(frozen=True, slots=True)
class SkippedCandidate:
    qualname: str
    reason: str


@dataclass(slots=True)
class DiscoveryResult:
    commands: list[Command] = field(default_factory=list)
    skipped: list[SkippedCandidate] = field(default_factory=list)

    def register_into(self, catalog: CommandCatalog) -> CommandCatalog:
        for command in self.commands:
            catalog.register(command)
        logger.info("Total commands registered: %d", len(catalog))
        return catalog


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


def _skip(result: DiscoveryResult, qualname: str, exc: BaseException) -> None:
    logger.warning("Skipping %s - %s", qualname, _describe(exc))
    result.skipped.append(SkippedCandidate(qualname, _describe(exc)))


def _construct(result: DiscoveryResult, qualname: str, factory: CommandFactory) -> None:
    try:
        command = factory()
    except Exception as exc:
        _skip(result, qualname, exc)
        return
    if not isinstance(command, Command):
        _skip(result, qualname, TypeError(f"factory returned {type(command).__name__}"))
        return
    result.commands.append(command)


def instantiate(factories: Iterable[CommandFactory]) -> DiscoveryResult:
    result = DiscoveryResult()
    for factory in factories:
        qualname = f"{factory.__module__}.{getattr(factory, '__qualname__', factory)}"
        _construct(result, qualname, factory)
    return result


def register_all(catalog: CommandCatalog, factories: Iterable[CommandFactory]) -> DiscoveryResult:
    """Explicit registration: build each factory in order and register it."""
    result = instantiate(factories)
    result.register_into(catalog)
    return result


def _is_eligible(obj: object, module: ModuleType) -> bool:
    return (
        inspect.isclass(obj)
        and issubclass(obj, Command)
        and obj.__module__ == module.__name__
        and not inspect.isabstract(obj)
    )


def _iter_modules(package: ModuleType, result: DiscoveryResult) -> Iterable[ModuleType]:
    yield package
    search_path = getattr(package, "__path__", None)
    if search_path is None:
        return

    broken: set[str] = set()

    def onerror(name: str) -> None:
        # walk_packages calls this when importing a subpackage fails.
        if name in broken:
            return
        logger.warning("Skipping package %s - import failed", name)
        broken.add(name)
        result.skipped.append(SkippedCandidate(name, "package import failed"))

    prefix = f"{package.__name__}."
    for info in pkgutil.walk_packages(search_path, prefix, onerror=onerror):
        if info.name in broken:
            continue
        try:
            yield importlib.import_module(info.name)
        except Exception as exc:
            broken.add(info.name)
            _skip(result, info.name, exc)


def discover_all(namespace: str | ModuleType = DEFAULT_NAMESPACE) -> DiscoveryResult:
    """Instantiate every concrete command defined below ``namespace``.

    Nothing is raised: a namespace that cannot be imported yields an empty
    result with the failure recorded as skipped.
    """
    result = DiscoveryResult()
    if isinstance(namespace, str):
        try:
            package = importlib.import_module(namespace)
        except Exception as exc:
            _skip(result, namespace, exc)
            return result
    else:
        package = namespace
    seen: set[type[Command]] = set()
    for module in _iter_modules(package, result):
        for _, obj in inspect.getmembers(module, lambda member: _is_eligible(member, module)):
            if obj in seen:
                continue
            seen.add(obj)
            _construct(result, f"{obj.__module__}.{obj.__qualname__}", obj)
    logger.debug(
        "Discovered %d commands under %s (%d skipped)",
        len(result.commands),
        package.__name__,
        len(result.skipped),
    )
    return result


def build_catalog(
    strategy: Strategy = "explicit",
    *,
    namespace: str | ModuleType = DEFAULT_NAMESPACE,
    factories: Iterable[CommandFactory] | None = None,
) -> CommandCatalog:
    catalog = CommandCatalog()
    if strategy == "discover":
        discover_all(namespace).register_into(catalog)
    elif strategy == "explicit":
        if factories is None:
            from ..reports import REPORT_FACTORIES

            factories = REPORT_FACTORIES
        register_all(catalog, factories)
    else:
        raise ValueError(f"Unknown discovery strategy: {strategy!r}")
    return catalog


__all__ = [
    "DiscoveryResult",
    "SkippedCandidate",
    "build_catalog",
    "discover_all",
    "instantiate",
    "register_all",
]
