from __future__ import annotations

import json
import logging

import pytest
from pydantic import ValidationError

from vimeokit.config import ClientConfig, ConfigError, load_config
from vimeokit.logging_utils import JsonFormatter, configure_logging

ENV_KEYS = (
    "VIMEO_ENVIRONMENT",
    "APP_ENV",
    "VIMEO_BASE_URL",
    "VIMEO_ACCESS_TOKEN",
    "VIMEO_TOKEN",
    "VIMEO_TIMEOUT",
    "VIMEO_RETRY_ATTEMPTS",
    "VIMEO_LOG_PATH",
    "VIMEO_RETRY_BACKOFF",
    "VIMEO_USER_AGENT",
    "VIMEO_API_VERSION",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # setenv first so keys written later by load_dotenv are removed on teardown
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_defaults(clean_env):
    config = ClientConfig(_env_file=None)

    assert config.base_url == "https://api.vimeo.com"
    assert config.token is None
    assert config.retry_attempts == 1
    assert config.accept_header == "application/vnd.vimeo.*+json;version=3.4"


def test_base_url_trailing_slash_is_stripped(clean_env):
    assert ClientConfig(_env_file=None, base_url="https://api.example.test/").base_url == "https://api.example.test"


def test_base_url_requires_http_scheme(clean_env):
    with pytest.raises(ValidationError):
        ClientConfig(_env_file=None, base_url="ftp://api.example.test")


def test_load_config_reads_environment(clean_env):
    clean_env.setenv("VIMEO_TOKEN", "  secret  ")
    clean_env.setenv("VIMEO_BASE_URL", "http://localhost:8080/")
    clean_env.setenv("VIMEO_TIMEOUT", "5")

    config = load_config()

    assert config.token == "secret"
    assert config.base_url == "http://localhost:8080"
    assert config.timeout_seconds == 5.0


def test_load_config_reads_env_file(clean_env, tmp_path):
    env_file = tmp_path / "client.env"
    env_file.write_text("VIMEO_ACCESS_TOKEN=from-file\nVIMEO_RETRY_ATTEMPTS=2\n", encoding="utf-8")

    config = load_config(env_file)

    assert config.token == "from-file"
    assert config.retry_attempts == 2


def test_load_config_wraps_validation_errors(clean_env):
    clean_env.setenv("VIMEO_TIMEOUT", "0")

    with pytest.raises(ConfigError):
        load_config()


def test_load_config_creates_log_directory(clean_env, tmp_path):
    clean_env.setenv("VIMEO_LOG_PATH", str(tmp_path / "logs" / "client.log"))

    config = load_config()

    assert config.log_path.parent.is_dir()


def test_token_is_hidden_in_repr(clean_env):
    config = ClientConfig(_env_file=None, access_token="hunter2")

    assert "hunter2" not in repr(config)


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("vimeokit.client", logging.WARNING, __file__, 1, "API call failed", (), None)
    record.event = "http.api_error"
    record.status_code = 404

    payload = json.loads(JsonFormatter().format(record))

    assert payload["event"] == "http.api_error"
    assert payload["status_code"] == 404
    assert payload["level"] == "WARNING"
    assert payload["message"] == "API call failed"


def test_configure_logging_adds_file_handler_only_with_log_path(clean_env, tmp_path):
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        configure_logging(ClientConfig(_env_file=None))
        assert len(root.handlers) == 1

        configure_logging(ClientConfig(_env_file=None, log_path=tmp_path / "client.log"), level=logging.INFO)
        assert len(root.handlers) == 2
        assert root.level == logging.INFO
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved:
            root.addHandler(handler)
