import importlib
import textwrap
import uuid
import zipfile
from pathlib import Path

import pytest

from worldreports.console import CommandCatalog, build_catalog, discover_all, register_all
from worldreports.reports import REPORT_FACTORIES

GOOD = """
from worldreports.console.common import Command


class Alpha(Command):
    name = "alpha"
    description = "first"

    def execute(self, connection, args):
        return "alpha ran"


class Beta(Command):
    name = "beta"
    description = "second"

    def execute(self, connection, args):
        return "beta ran"


class Template(Command):
    name = "template"
    description = "abstract, execute missing"


class Broken(Command):
    name = "broken"
    description = "explodes on construction"

    def __init__(self):
        raise RuntimeError("boom")

    def execute(self, connection, args):
        return None


class Nameless(Command):
    description = "forgot its name"

    def execute(self, connection, args):
        return None
"""

GAMMA = """
from worldreports.console.common import Command
from ..good import Alpha


class Gamma(Command):
    name = "gamma"
    description = "third, in a subpackage"

    def execute(self, connection, args):
        return "gamma ran"
"""

PLUGIN_FILES = {
    "__init__.py": "",
    "good.py": GOOD,
    "bad_import.py": "import worldreports_missing_dependency\n",
    "sub/__init__.py": "",
    "sub/gamma.py": GAMMA,
}


def _package_name() -> str:
    return f"plugins_{uuid.uuid4().hex[:10]}"


def _write_tree(root: Path, package: str) -> None:
    for relative, source in PLUGIN_FILES.items():
        target = root / package / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(textwrap.dedent(source))


def _write_zip(archive: Path, package: str) -> None:
    with zipfile.ZipFile(archive, "w") as bundle:
        for relative, source in PLUGIN_FILES.items():
            bundle.writestr(f"{package}/{relative}", textwrap.dedent(source))


@pytest.fixture
def plugin_tree(tmp_path, monkeypatch):
    package = _package_name()
    _write_tree(tmp_path, package)
    monkeypatch.syspath_prepend(str(tmp_path))
    importlib.invalidate_caches()
    return package


@pytest.fixture
def plugin_zip(tmp_path, monkeypatch):
    package = _package_name()
    archive = tmp_path / "plugins.zip"
    _write_zip(archive, package)
    monkeypatch.syspath_prepend(str(archive))
    importlib.invalidate_caches()
    return package


def _check_result(result) -> None:
    assert sorted(c.name for c in result.commands) == ["alpha", "beta", "gamma"]
    skipped = sorted(s.qualname.rsplit(".", 1)[-1] for s in result.skipped)
    assert skipped == ["Broken", "Nameless", "bad_import"]
    reasons = {s.qualname.rsplit(".", 1)[-1]: s.reason for s in result.skipped}
    assert "boom" in reasons["Broken"]
    assert "CommandDefinitionError" in reasons["Nameless"]
    assert "ModuleNotFoundError" in reasons["bad_import"]


def test_discovers_directory_tree(plugin_tree):
    _check_result(discover_all(plugin_tree))


def test_discovers_zip_archive(plugin_zip):
    _check_result(discover_all(plugin_zip))


def test_discovery_is_idempotent(plugin_tree):
    catalog = CommandCatalog()
    discover_all(plugin_tree).register_into(catalog)
    first = [spec.name for spec in catalog.iter_commands()]
    discover_all(plugin_tree).register_into(catalog)
    assert len(catalog) == 3
    assert sorted(spec.name for spec in catalog.iter_commands()) == sorted(first)


def test_empty_namespace_is_not_fatal(tmp_path, monkeypatch):
    package = _package_name()
    (tmp_path / package).mkdir()
    (tmp_path / package / "__init__.py").write_text("")
    monkeypatch.syspath_prepend(str(tmp_path))
    importlib.invalidate_caches()
    result = discover_all(package)
    assert result.commands == []
    assert result.skipped == []
    assert len(result.register_into(CommandCatalog())) == 0


def test_broken_namespace_is_not_fatal(tmp_path, monkeypatch):
    package = _package_name()
    (tmp_path / package).mkdir()
    (tmp_path / package / "__init__.py").write_text("import missing_dependency_for_reports\n")
    monkeypatch.syspath_prepend(str(tmp_path))
    importlib.invalidate_caches()
    result = discover_all(package)
    assert result.commands == []
    assert [skip.qualname for skip in result.skipped] == [package]
    assert "ModuleNotFoundError" in result.skipped[0].reason
    assert len(build_catalog("discover", namespace=package)) == 0


def test_explicit_registration_keeps_order_and_skips_failures(make_command):
    def broken():
        raise ValueError("cannot build")

    catalog = CommandCatalog()
    result = register_all(
        catalog,
        [lambda: make_command("beta"), broken, lambda: make_command("alpha"), lambda: "nope"],
    )
    assert [spec.name for spec in catalog.iter_commands()] == ["beta", "alpha"]
    assert len(result.skipped) == 2
    assert "cannot build" in result.skipped[0].reason


def test_both_strategies_find_every_report():
    explicit = build_catalog("explicit")
    discovered = build_catalog("discover")
    assert len(explicit) == len(REPORT_FACTORIES)
    assert sorted(s.name for s in discovered.iter_commands()) == sorted(
        s.name for s in explicit.iter_commands()
    )
    assert discover_all().skipped == []


def test_reports_have_names_and_descriptions():
    catalog = build_catalog()
    for name in ("top-countries", "capital-cities-continent", "CAPITAL-CITIES-REGION", "language-dist"):
        assert catalog.contains(name)
    for spec in catalog.iter_commands():
        assert spec.name and spec.description


def test_unknown_strategy_is_rejected():
    with pytest.raises(ValueError):
        build_catalog("classpath")
