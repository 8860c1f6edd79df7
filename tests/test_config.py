"""Tests for settings and logging helpers."""

import logging

import pytest
from conftest import make_settings

from ai_providers.config import (
    LOGGER_NAMESPACE,
    ProviderSettings,
    SanitizingFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_package_logger():
    """Undo configure_logging() so other tests keep caplog working."""
    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    saved = (package_logger.handlers[:], package_logger.level, package_logger.propagate)
    yield package_logger
    package_logger.handlers, package_logger.level, package_logger.propagate = saved


class TestProviderSettings:
    """Environment-driven settings."""

    def test_defaults(self):
        settings = make_settings()

        assert settings.GOOGLE_API_KEY is None
        assert settings.OPENAI_API_KEY is None
        assert settings.XAI_API_KEY is None
        assert settings.XAI_BASE_URL == "https://api.x.ai/v1"
        assert settings.LOG_LEVEL == "INFO"

    def test_reads_environment_at_construction(self, clean_env):
        before = ProviderSettings(_env_file=None)
        clean_env.setenv("OPENAI_API_KEY", "sk-late")
        after = ProviderSettings(_env_file=None)

        assert before.OPENAI_API_KEY is None
        assert after.OPENAI_API_KEY == "sk-late"

    def test_reads_dotenv_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("XAI_API_KEY=xai-from-file\n")

        settings = ProviderSettings(_env_file=str(env_file))

        assert settings.XAI_API_KEY == "xai-from-file"

    def test_log_level_uppercased(self):
        assert make_settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize("value, expected", [(None, None), ("", None), ("  ", None), (" k ", "k")])
    def test_credential_normalisation(self, value, expected):
        settings = make_settings(GOOGLE_API_KEY=value)

        assert settings.credential("GOOGLE_API_KEY") == expected


class TestLogging:
    """Logger helpers."""

    def test_get_logger_is_namespaced(self):
        assert get_logger("providers.openai").name == "ai_providers.providers.openai"

    def test_configure_logging_sets_level(self, restore_package_logger):
        configure_logging("debug")

        assert restore_package_logger.level == logging.DEBUG
        assert len(restore_package_logger.handlers) == 1
        assert isinstance(restore_package_logger.handlers[0].formatter, SanitizingFormatter)

    def test_configure_logging_leaves_root_alone(self, restore_package_logger):
        root_handlers = logging.getLogger().handlers[:]

        configure_logging("INFO")

        assert logging.getLogger().handlers == root_handlers

    @pytest.mark.parametrize(
        "message",
        [
            "Authorization: Bearer abc.def.ghi",
            "api_key=sk-supersecretvalue",
            "client built with sk-proj1234567890abcdef",
            "key AIzaSyA1234567890abcdefg rejected",
        ],
    )
    def test_sanitizing_formatter_redacts(self, message):
        formatter = SanitizingFormatter("%(message)s")
        record = logging.LogRecord("t", logging.INFO, __file__, 1, message, None, None)

        output = formatter.format(record)

        assert "[REDACTED]" in output
        assert "supersecret" not in output
        assert "1234567890" not in output
