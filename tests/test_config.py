import logging

from interaction_kit.config import Settings
from interaction_kit.log import LOGGER_NAME, configure_logging


def test_defaults(monkeypatch):
    for name in ("DISCORD_API_BASE_URL", "DISCORD_HTTP_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)

    assert settings.discord_api_base_url == "https://discord.com/api/v10"
    assert settings.discord_http_timeout == 15.0
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "abc")
    monkeypatch.setenv("DISCORD_HTTP_TIMEOUT", "3.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.discord_bot_token == "abc"
    assert settings.discord_http_timeout == 3.5
    assert settings.log_level == "debug"


def test_configure_logging_returns_package_logger():
    logger = configure_logging("warning")

    assert logger.name == LOGGER_NAME
    assert logger is logging.getLogger(LOGGER_NAME)
