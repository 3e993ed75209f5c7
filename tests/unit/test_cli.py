"""Unit tests for the command line entry point."""
import json

import pytest
import yaml

from config_cascade.__main__ import main, parse_args


@pytest.fixture
def clean_environ(monkeypatch):
    """Unset the variables the cascade reads from the process environment."""
    for name in ("NODE_ENV", "DATABASE_URL", "SPECIAL_URL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_parse_args_defaults():
    """Should default to the current directory and Python sources."""
    args = parse_args([])

    assert args.config_directory is None
    assert args.include_root_index is False
    assert args.yaml is False
    assert args.database_key == "database"
    assert args.database_url_env_key == "DATABASE_URL"
    assert args.format == "json"
    assert args.log_level == "WARNING"


def test_main_prints_resolved_config(config_tree, clean_environ, capsys, restore_logging):
    """Should print the merged config as JSON and exit 0."""
    config_tree.python("logging.py", {"enabled": True})
    config_tree.python("develop/logging.py", {"level": "DEBUG"})

    exit_code = main([str(config_tree.root)])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {
        "logging": {"enabled": True, "level": "DEBUG"}
    }


def test_main_reads_environment(config_tree, clean_environ, capsys, restore_logging):
    """Should honour NODE_ENV and DATABASE_URL from the process environment."""
    config_tree.python("staging/index.py", {"name": "staging"})
    clean_environ.setenv("NODE_ENV", "staging")
    clean_environ.setenv("SPECIAL_URL", "postgres://user:pw@db.local:5432/app")

    exit_code = main(
        [str(config_tree.root), "--database-url-env-key", "SPECIAL_URL", "--database-key", "db"]
    )

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {
        "name": "staging",
        "db": {
            "dialect": "postgres",
            "user": "user",
            "password": "pw",
            "host": "db.local",
            "port": "5432",
            "name": "app",
        },
    }


def test_main_yaml_sources(config_tree, clean_environ, capsys, restore_logging):
    """Should read YAML sources when --yaml is given."""
    config_tree.yaml("index.yaml", "name: root\n")
    config_tree.yaml("email.yml", "enabled: false\n")

    exit_code = main([str(config_tree.root), "--yaml", "--include-root-index"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {
        "name": "root",
        "email": {"enabled": False},
    }


def test_main_missing_directory(tmp_path, clean_environ, capsys, restore_logging):
    """Should report an invalid directory and exit 1."""
    missing = tmp_path / "missing"

    exit_code = main([str(missing)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "is not a valid directory" in captured.err
    assert captured.err.splitlines()[-1] == (
        f"[CONFIG_DIRECTORY_INVALID] {missing.resolve()} is not a valid directory"
    )


def test_main_invalid_database_url(config_tree, clean_environ, capsys, restore_logging):
    """Should exit 1 when DATABASE_URL is malformed."""
    config_tree.directory("")
    clean_environ.setenv("DATABASE_URL", "not-a-url")

    exit_code = main([str(config_tree.root)])

    assert exit_code == 1
    assert "DATABASE_URL" in capsys.readouterr().err


def test_main_yaml_output(config_tree, clean_environ, capsys, restore_logging):
    """Should print YAML when --format yaml is given."""
    config_tree.python("logging.py", {"enabled": True, "handlers": ["console"]})

    exit_code = main([str(config_tree.root), "--format", "yaml"])

    assert exit_code == 0
    assert yaml.safe_load(capsys.readouterr().out) == {
        "logging": {"enabled": True, "handlers": ["console"]}
    }
