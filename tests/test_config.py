"""Tests for configuration loading."""

import json

import pytest

from notes_vault.config import load_configuration, read_config_file
from notes_vault.data_models import DEFAULT_FILE_PATTERN, DEFAULT_MAX_SEARCH_RESULTS
from notes_vault.errors import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point ``~`` at an empty directory so user config files are never read."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


def test_yaml_config_file(tmp_path, vault_root):
    config_file = tmp_path / "vault.yaml"
    config_file.write_text(
        f"vault_path: {vault_root}\n"
        "max_search_results: 10\n"
        "exclude_patterns:\n"
        "  - templates/**\n",
        encoding="utf-8",
    )

    config = load_configuration(config_file, environ={})

    assert config.root == vault_root
    assert config.max_search_results == 10
    assert config.file_pattern == DEFAULT_FILE_PATTERN
    assert config.exclude_patterns == ("templates/**",)


def test_json_config_with_camel_case_keys(tmp_path, vault_root):
    config_file = tmp_path / "config.json"
    config_file.write_text(
        json.dumps(
            {
                "notesDirectory": str(vault_root),
                "maxSearchResults": 7,
                "defaultFilePattern": "**/*.md",
                "excludePatterns": ["node_modules/**", ".trash/**"],
            }
        ),
        encoding="utf-8",
    )

    config = load_configuration(config_file, environ={})

    assert config.root == vault_root
    assert config.max_search_results == 7
    assert config.exclude_patterns == ("node_modules/**", ".trash/**")


def test_environment_only(vault_root):
    config = load_configuration(environ={"VAULT_PATH": str(vault_root)})

    assert config.root == vault_root
    assert config.max_search_results == DEFAULT_MAX_SEARCH_RESULTS
    assert config.exclude_patterns == ()


def test_environment_overrides_file(tmp_path, vault_root):
    other = tmp_path / "other"
    other.mkdir()
    config_file = tmp_path / "vault.yaml"
    config_file.write_text(f"vault_path: {other}\nmax_search_results: 10\n", encoding="utf-8")

    config = load_configuration(
        config_file,
        environ={"VAULT_PATH": str(vault_root), "MAX_SEARCH_RESULTS": "3"},
    )

    assert config.root == vault_root
    assert config.max_search_results == 3


def test_config_path_from_environment(tmp_path, vault_root):
    config_file = tmp_path / "custom.yaml"
    config_file.write_text(f"vault_path: {vault_root}\n", encoding="utf-8")

    config = load_configuration(environ={"NOTES_VAULT_CONFIG": str(config_file)})

    assert config.root == vault_root


def test_missing_explicit_config_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(environ={"NOTES_VAULT_CONFIG": str(tmp_path / "missing.yaml")})


def test_default_config_file_in_home(isolated_home, vault_root):
    config_dir = isolated_home / ".openotes"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(
        json.dumps({"notesDirectory": str(vault_root)}),
        encoding="utf-8",
    )

    assert load_configuration(environ={}).root == vault_root


def test_vault_path_is_expanded(isolated_home):
    (isolated_home / "Notes").mkdir()

    config = load_configuration(environ={"VAULT_PATH": "~/Notes"})

    assert config.root == (isolated_home / "Notes").resolve()


def test_missing_vault_path_setting():
    with pytest.raises(ConfigurationError, match="required"):
        load_configuration(environ={})


def test_vault_path_must_exist(tmp_path):
    with pytest.raises(ConfigurationError, match="does not exist"):
        load_configuration(environ={"VAULT_PATH": str(tmp_path / "missing")})


def test_vault_path_must_be_a_directory(tmp_path):
    not_a_dir = tmp_path / "file.md"
    not_a_dir.write_text("", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="not a directory"):
        load_configuration(environ={"VAULT_PATH": str(not_a_dir)})


@pytest.mark.parametrize("value", ["0", "-4", "many"])
def test_invalid_max_results_from_environment(vault_root, value):
    with pytest.raises(ConfigurationError):
        load_configuration(environ={"VAULT_PATH": str(vault_root), "MAX_SEARCH_RESULTS": value})


def test_boolean_max_results_is_rejected(tmp_path, vault_root):
    config_file = tmp_path / "vault.yaml"
    config_file.write_text(f"vault_path: {vault_root}\nmax_search_results: true\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_configuration(config_file, environ={})


def test_config_file_must_be_a_mapping(tmp_path):
    config_file = tmp_path / "vault.yaml"
    config_file.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="mapping"):
        read_config_file(config_file)


def test_invalid_yaml(tmp_path):
    config_file = tmp_path / "vault.yaml"
    config_file.write_text("vault_path: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        read_config_file(config_file)


def test_configuration_error_is_value_error(tmp_path):
    with pytest.raises(ValueError):
        load_configuration(environ={"VAULT_PATH": str(tmp_path / "missing")})
