from worldreports.console import CommandCatalog, CommandSpec


def test_last_registration_wins(make_command):
    catalog = CommandCatalog()
    first = catalog.register(make_command("Report", "first"))
    second = catalog.register(make_command("REPORT", "second"))
    assert first is not second
    assert catalog.lookup("report") is second
    assert len(catalog) == 1


def test_lookup_ignores_case(make_command):
    catalog = CommandCatalog()
    command = catalog.register(make_command("top-Cities"))
    for name in ("top-cities", "TOP-CITIES", "Top-Cities", "top-Cities"):
        assert catalog.lookup(name) is command
        assert catalog.contains(name)
        assert name in catalog


def test_missing_name_returns_none(make_command):
    catalog = CommandCatalog()
    catalog.register(make_command("alpha"))
    assert catalog.lookup("alph") is None
    assert catalog.lookup("alpha-beta") is None
    assert not catalog.contains("beta")
    assert 42 not in catalog


def test_listing_is_insertion_ordered_snapshot(make_command):
    catalog = CommandCatalog()
    catalog.register(make_command("zeta", "last letter"))
    catalog.register(make_command("alpha", "first letter"))
    catalog.register(make_command("Zeta", "replaced"))
    listing = catalog.iter_commands()
    assert listing == (CommandSpec("Zeta", "replaced"), CommandSpec("alpha", "first letter"))
    catalog.register(make_command("gamma"))
    assert len(listing) == 2
    assert [c.name for c in catalog.commands()] == ["Zeta", "alpha", "gamma"]
