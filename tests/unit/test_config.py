"""Unit tests for server configuration loading"""
import pytest

from admindash.server.core.config import ServerConfig, load_config_from


class TestServerConfig:

    def test_defaults(self):
        config = ServerConfig()

        assert config.port == 5000
        assert config.database_url == "sqlite:///admindash.db"
        assert config.cors_origins == ["*"]

    def test_resolved_api_url_defaults_to_own_collection(self):
        config = ServerConfig(host="0.0.0.0", port=8080)

        assert config.resolved_api_url() == "http://127.0.0.1:8080/api/data"

    def test_resolved_api_url_explicit(self):
        config = ServerConfig(api_url="https://dash.example.com/api/data/")

        assert config.resolved_api_url() == "https://dash.example.com/api/data"


class TestLoadConfig:

    def test_no_file_no_env(self, tmp_path):
        config = load_config_from(str(tmp_path / "missing.yaml"), environ={})

        assert config == ServerConfig()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("port: 7000\ndatabase_url: sqlite:///other.db\nlog_level: DEBUG\n")

        config = load_config_from(str(path), environ={})

        assert config.port == 7000
        assert config.database_url == "sqlite:///other.db"
        assert config.log_level == "DEBUG"

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config_from(str(path), environ={}) == ServerConfig()

    def test_environment_overrides_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("port: 7000\n")

        config = load_config_from(str(path), environ={
            "PORT": "9000",
            "DATABASE_URL": "postgresql://u:p@db/dash",
            "DASHBOARD_API_URL": "http://api.internal/api/data",
        })

        assert config.port == 9000
        assert config.database_url == "postgresql://u:p@db/dash"
        assert config.api_url == "http://api.internal/api/data"

    def test_empty_environment_values_are_ignored(self):
        config = load_config_from(None, environ={"PORT": ""})

        assert config.port == 5000

    def test_invalid_port_raises(self):
        with pytest.raises(ValueError):
            load_config_from(None, environ={"PORT": "not-a-port"})
