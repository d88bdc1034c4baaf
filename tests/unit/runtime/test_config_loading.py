"""Tests for loading config.yaml with environment substitution."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.bookshelf.runtime.config.config_data import ConfigData
from src.bookshelf.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
)
from src.bookshelf.runtime.context import load_config
from src.bookshelf.runtime.settings import EnvironmentVariables

CONFIG_YAML = """
config:
  app:
    port: ${PORT:-3000}
  logging:
    level: ${LOG_LEVEL:-INFO}
    file: ${LOG_FILE:-}
  database:
    url: ${DATABASE_URL:-sqlite:///./data/books.db}
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path


class TestSubstituteEnvVars:
    def test_default_used_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("url: ${DATABASE_URL:-sqlite://}") == "url: sqlite://"

    def test_value_from_environment(self):
        with patch.dict(os.environ, {"DATABASE_URL": "sqlite:///x.db"}, clear=True):
            assert substitute_env_vars("${DATABASE_URL:-sqlite://}") == "sqlite:///x.db"

    def test_required_variable_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="DATABASE_URL not set"):
                substitute_env_vars("${DATABASE_URL}")

    def test_required_variable_with_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="needed for storage"):
                substitute_env_vars("${DATABASE_URL:?needed for storage}")

    def test_text_without_placeholders_is_unchanged(self):
        assert substitute_env_vars("level: INFO") == "level: INFO"

    def test_several_placeholders_on_one_line(self):
        with patch.dict(os.environ, {"APP_HOST": "0.0.0.0"}, clear=True):
            text = substitute_env_vars("${APP_HOST:-localhost}:${PORT:-3000}")

        assert text == "0.0.0.0:3000"

    def test_empty_value_wins_over_default(self):
        with patch.dict(os.environ, {"LOG_FILE": ""}, clear=True):
            assert substitute_env_vars("file: ${LOG_FILE:-app.log}") == "file: "


class TestLoadTemplatedYaml:
    def test_defaults(self, config_file: Path):
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(config_file, env_mode="development")

        assert isinstance(config, ConfigData)
        assert config.app.port == 3000
        assert config.logging.file is None
        assert config.database.url == "sqlite:///./data/books.db"

    def test_environment_values(self, config_file: Path):
        env = {"PORT": "8080", "DATABASE_URL": "sqlite:///tmp/books.db"}
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(config_file, env_mode="development")

        assert config.app.port == 8080
        assert config.database.url == "sqlite:///tmp/books.db"

    def test_environment_prefixed_override(self, config_file: Path):
        env = {"DATABASE_URL": "sqlite:///dev.db", "TEST_DATABASE_URL": "sqlite://"}
        with patch.dict(os.environ, env, clear=True):
            config = load_templated_yaml(config_file, env_mode="test")

        assert config.database.url == "sqlite://"

    def test_invalid_values(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  app:\n    port: not-a-number\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path, env_mode="development")

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(path, env_mode="development")

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "missing.yaml")


class TestLoadConfig:
    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path):
        with patch.dict(os.environ, {"APP_CONFIG_FILE": str(tmp_path / "nope.yaml")}, clear=True):
            config = load_config(EnvironmentVariables(_env_file=None))

        assert config == ConfigData()

    def test_environment_comes_from_app_environment(self, config_file: Path):
        env = {"APP_CONFIG_FILE": str(config_file), "APP_ENVIRONMENT": "test"}
        with patch.dict(os.environ, env, clear=True):
            config = load_config(EnvironmentVariables(_env_file=None))

        assert config.app.environment == "test"

    def test_repository_config_file_is_valid(self):
        project_root = Path(__file__).resolve().parents[3]
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(project_root / "config.yaml", env_mode="development")

        assert config.app.docs_url == "/api-docs"
        assert config.database.is_sqlite
