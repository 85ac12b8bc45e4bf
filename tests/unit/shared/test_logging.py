from __future__ import annotations

import logging
from dataclasses import dataclass

from src.shared.logging import (
    NOISY_LOGGERS,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "insights.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    get_logger(__name__).info("logging.test", answer=42)


def test_http_client_loggers_are_quieted_above_debug() -> None:
    configure_logging(level="INFO", environment="development")

    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    file_path: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level="ERROR"))

    update_logging_from_settings(settings)

    assert logging.getLogger().level == logging.ERROR
