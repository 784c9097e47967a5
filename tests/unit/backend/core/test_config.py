"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
Tests run against the real YAML files in config/settings/.
Failure scenarios use tmp_path to create controlled filesystems.
"""

from unittest.mock import MagicMock, patch

import pytest

from notekeeper.backend.core.config import (
    AppConfig,
    Settings,
    find_project_root,
    get_app_config,
    get_database_url,
    get_server_address,
    get_settings,
    load_yaml_config,
)
from notekeeper.backend.core.config_schema import (
    ApplicationSchema,
    DatabaseSchema,
    LoggingSchema,
)


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


def _make_project(tmp_path, files: dict[str, str]):
    """Create a throwaway project root with the given settings files."""
    (tmp_path / ".project_root").touch()
    settings_dir = tmp_path / "config" / "settings"
    settings_dir.mkdir(parents=True)
    for name, body in files.items():
        (settings_dir / name).write_text(body)
    return tmp_path


# =============================================================================
# find_project_root
# =============================================================================


class TestFindProjectRoot:
    """Tests for .project_root marker discovery."""

    def test_finds_root_from_project_directory(self):
        root = find_project_root()
        assert (root / ".project_root").exists()
        assert (root / "config" / "settings").is_dir()

    def test_raises_when_no_marker_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(RuntimeError, match="Project root not found"):
            find_project_root()


# =============================================================================
# YAML loading
# =============================================================================


class TestLoadYamlConfig:
    """Tests for loading raw YAML files."""

    def test_loads_shipped_application_yaml(self):
        raw = load_yaml_config("application.yaml")
        assert raw["api_prefix"] == "/api/v1"

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            load_yaml_config("does_not_exist.yaml")

    def test_empty_file_is_empty_dict(self, tmp_path, monkeypatch):
        monkeypatch.chdir(_make_project(tmp_path, {"empty.yaml": ""}))
        assert load_yaml_config("empty.yaml") == {}


class TestAppConfig:
    """Tests for validated configuration."""

    def test_shipped_files_validate(self):
        config = AppConfig()
        assert isinstance(config.application, ApplicationSchema)
        assert isinstance(config.database, DatabaseSchema)
        assert isinstance(config.logging, LoggingSchema)

    def test_get_app_config_is_cached(self):
        assert get_app_config() is get_app_config()

    def test_unknown_key_is_rejected(self, tmp_path, monkeypatch):
        project = _make_project(
            tmp_path,
            {
                "application.yaml": load_yaml_config_text("application.yaml")
                + "\nunexpected: 1\n",
            },
        )
        monkeypatch.chdir(project)

        with pytest.raises(ValueError, match="application.yaml"):
            AppConfig()


def load_yaml_config_text(filename: str) -> str:
    """Raw text of a shipped settings file."""
    return (find_project_root() / "config" / "settings" / filename).read_text()


# =============================================================================
# Secrets and derived values
# =============================================================================


class TestSettings:
    """Tests for secrets loaded from the environment."""

    def test_reads_db_password_from_environment(self, monkeypatch):
        monkeypatch.setenv("DB_PASSWORD", "s3cret")
        assert Settings().db_password == "s3cret"


class TestDerivedValues:
    """Tests for values built from YAML plus secrets."""

    def test_database_url(self):
        settings = MagicMock()
        settings.db_password = "pw"

        with patch("notekeeper.backend.core.config.get_settings", return_value=settings):
            url = get_database_url()

        db = get_app_config().database
        assert url == f"{db.driver}://{db.user}:pw@{db.host}:{db.port}/{db.name}"

    def test_server_address(self):
        host, port = get_server_address()
        assert host == "127.0.0.1"
        assert port == 8000
