"""Unit tests for directory probing and config file discovery."""
from config_cascade.config.locator import ConfigLocator, discover_config_files, is_directory


def test_is_directory_true_for_directory(tmp_path):
    """Should report existing directories."""
    assert is_directory(tmp_path) is True
    assert is_directory(str(tmp_path)) is True


def test_is_directory_false_for_missing_path(tmp_path):
    """Should return False instead of raising for missing paths."""
    assert is_directory(tmp_path / "does-not-exist") is False


def test_is_directory_false_for_file(tmp_path):
    """Should return False for regular files."""
    path = tmp_path / "settings.py"
    path.write_text("config = {}\n")

    assert is_directory(path) is False


def test_discover_missing_directory_returns_empty(tmp_path):
    """Should return no files for an absent directory."""
    locator = ConfigLocator()

    assert locator.discover(tmp_path / "missing", include_aggregate=True) == []


def test_discover_filters_extension_and_directories(config_tree):
    """Should keep only regular source files."""
    config_tree.python("logging.py", {"enabled": True})
    config_tree.source("README.md", "not config")
    config_tree.source("notes.py.bak", "config = {}")
    config_tree.directory("dummy")
    config_tree.directory("dummy.py")

    paths = ConfigLocator().discover(config_tree.root)

    assert [p.name for p in paths] == ["logging.py"]
    assert all(p.is_absolute() for p in paths)


def test_discover_excludes_aggregate_unless_requested(config_tree):
    """Should leave index.py out when include_aggregate is False."""
    config_tree.python("index.py", {"name": "app"})
    config_tree.python("logging.py", {"enabled": True})

    paths = ConfigLocator().discover(config_tree.root, include_aggregate=False)

    assert [p.name for p in paths] == ["logging.py"]


def test_discover_places_aggregate_first(config_tree):
    """Should load index.py before its siblings."""
    config_tree.python("alpha.py", {})
    config_tree.python("index.py", {})
    config_tree.python("zeta.py", {})

    paths = ConfigLocator().discover(config_tree.root, include_aggregate=True)

    assert [p.name for p in paths] == ["index.py", "alpha.py", "zeta.py"]


def test_discover_without_aggregate_file(config_tree):
    """Should not invent an index entry when none exists."""
    config_tree.python("logging.py", {})

    paths = ConfigLocator().discover(config_tree.root, include_aggregate=True)

    assert [p.name for p in paths] == ["logging.py"]


def test_discover_is_deterministic(config_tree):
    """Should return the same order on repeated calls."""
    for name in ("c.py", "a.py", "b.py", "index.py"):
        config_tree.python(name, {})

    locator = ConfigLocator()
    first = locator.discover(config_tree.root, include_aggregate=True)
    second = locator.discover(config_tree.root, include_aggregate=True)

    assert first == second
    assert [p.name for p in first] == ["index.py", "a.py", "b.py", "c.py"]


def test_discover_yaml_extensions(config_tree):
    """Should honor custom extensions."""
    config_tree.yaml("index.yml", "name: app\n")
    config_tree.yaml("logging.yaml", "enabled: true\n")
    config_tree.python("ignored.py", {})

    paths = discover_config_files(
        config_tree.root,
        include_aggregate=True,
        extensions=(".yaml", ".yml"),
    )

    assert [p.name for p in paths] == ["index.yml", "logging.yaml"]


def test_is_aggregate():
    """Should recognize index files by stem and extension."""
    locator = ConfigLocator()

    assert locator.is_aggregate("/etc/app/index.py")
    assert not locator.is_aggregate("/etc/app/index.yaml")
    assert not locator.is_aggregate("/etc/app/logging.py")


def test_discover_includes_every_aggregate_in_extension_order(config_tree):
    """Should prepend both index.yaml and index.yml when both exist."""
    config_tree.yaml("index.yml", "b: 2\n")
    config_tree.yaml("index.yaml", "a: 1\n")
    config_tree.yaml("logging.yaml", "enabled: true\n")

    locator = ConfigLocator(extensions=(".yaml", ".yml"))

    assert [p.name for p in locator.discover(config_tree.root, include_aggregate=True)] == [
        "index.yaml",
        "index.yml",
        "logging.yaml",
    ]
    assert [p.name for p in locator.find_aggregates(config_tree.root)] == [
        "index.yaml",
        "index.yml",
    ]
