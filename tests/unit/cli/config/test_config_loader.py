"""Unit tests for config_loader module."""

from pathlib import Path

import pytest
import yaml

from src.cli.config import ConfigData, load_config
from src.cli.config.config_utils import substitute_env_vars

REPO_CONFIG = Path(__file__).resolve().parents[4] / "config.yaml"


class TestLoadConfig:
    def test_missing_file_yields_defaults(self, tmp_path):
        assert load_config(tmp_path / "config.yaml") == ConfigData()

    def test_partial_config_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            yaml.dump({"config": {"database": {"volume": "other_volume"}}})
        )

        config = load_config(path)

        assert config.database.volume == "other_volume"
        assert config.database.user == "lms"
        assert config.services.backend == "astra-learn-back"

    def test_substitutes_env_vars(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LMS_TEST_DELAY", "3")
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  timing:\n    readiness_delay: ${LMS_TEST_DELAY}\n")

        assert load_config(path).timing.readiness_delay == 3

    def test_missing_config_key_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("project_name: x\n")

        with pytest.raises(ValueError, match="missing 'config' key"):
            load_config(path)

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("config: [unclosed\n")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_config(path)

    def test_invalid_types_raise(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  timing:\n    readiness_delay: soon\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(path)

    def test_repository_config_matches_defaults(self, monkeypatch):
        for var in ("LMS_COMPOSE_FILE", "POSTGRES_USER", "POSTGRES_DB", "LMS_SEED_PASSWORD"):
            monkeypatch.delenv(var, raising=False)

        config = load_config(REPO_CONFIG)

        assert config.model_dump(exclude={"compose"}) == ConfigData().model_dump(
            exclude={"compose"}
        )
        assert config.compose.file == "docker-compose.yml"


class TestSubstituteEnvVars:
    def test_default_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("LMS_UNSET_VAR", raising=False)

        assert substitute_env_vars("${LMS_UNSET_VAR:-fallback}") == "fallback"

    def test_required_missing_raises(self, monkeypatch):
        monkeypatch.delenv("LMS_UNSET_VAR", raising=False)

        with pytest.raises(ValueError, match="LMS_UNSET_VAR not set"):
            substitute_env_vars("${LMS_UNSET_VAR}")

    def test_custom_error_message(self, monkeypatch):
        monkeypatch.delenv("LMS_UNSET_VAR", raising=False)

        with pytest.raises(ValueError, match="set me"):
            substitute_env_vars("${LMS_UNSET_VAR:?set me}")


def test_url_helpers():
    urls = ConfigData().urls

    assert urls.admin == "http://localhost:8000/admin"
    assert urls.auth_login == "http://localhost:8001/auth/login"
