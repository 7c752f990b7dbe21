"""Tests for SchemaSettings."""

import pytest
from pydantic import ValidationError

from tf2_schema import SchemaSettings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "STEAM_WEB_API_KEY",
        "TF2_SCHEMA_VERSION",
        "TF2_SCHEMA_LANGUAGE",
        "TF2_SCHEMA_TIMEOUT",
        "TF2_SCHEMA_MAX_PAGES",
    ):
        # setenv first so teardown also removes values loaded from .env
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestSchemaSettings:

    def test_defaults(self):
        settings = SchemaSettings(api_key="test-key")

        assert settings.version == "v0001"
        assert settings.language == "en"
        assert settings.timeout == 30.0
        assert settings.max_pages is None

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            SchemaSettings(api_key="")
        with pytest.raises(ValidationError):
            SchemaSettings(api_key="test-key", timeout=0)
        with pytest.raises(ValidationError):
            SchemaSettings(api_key="test-key", max_pages=0)

    def test_repr_hides_api_key(self):
        assert "test-key" not in repr(SchemaSettings(api_key="test-key"))

    def test_from_env(self, clean_env):
        clean_env.setenv("STEAM_WEB_API_KEY", "env-key")
        clean_env.setenv("TF2_SCHEMA_LANGUAGE", "da")
        clean_env.setenv("TF2_SCHEMA_TIMEOUT", "12.5")
        clean_env.setenv("TF2_SCHEMA_MAX_PAGES", "40")

        settings = SchemaSettings.from_env(dotenv=False)

        assert settings.api_key == "env-key"
        assert settings.version == "v0001"
        assert settings.language == "da"
        assert settings.timeout == 12.5
        assert settings.max_pages == 40

    def test_from_env_without_key(self, clean_env):
        with pytest.raises(ValueError, match="STEAM_WEB_API_KEY"):
            SchemaSettings.from_env(dotenv=False)

    def test_from_env_reads_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("STEAM_WEB_API_KEY=dotenv-key\n")
        clean_env.chdir(tmp_path)

        settings = SchemaSettings.from_env()

        assert settings.api_key == "dotenv-key"
