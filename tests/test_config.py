import logging

from lifeatlas.config import DEFAULT_MONTHS, EngineSettings, log_level_from_env, settings_from_env
from lifeatlas.logger import setup_logger


def test_settings_default_without_environment(monkeypatch):
    for name in ("LIFEATLAS_MONTHS", "LIFEATLAS_DEBT_MAX_MONTHS", "LIFEATLAS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    assert settings_from_env() == EngineSettings()
    assert EngineSettings().months == DEFAULT_MONTHS


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("LIFEATLAS_MONTHS", "120")
    monkeypatch.setenv("LIFEATLAS_RED_ZONE_THRESHOLD", " 65 ")
    monkeypatch.setenv("LIFEATLAS_DEBT_MAX_MONTHS", "lots")
    monkeypatch.setenv("LIFEATLAS_LOG_LEVEL", "debug")

    settings = settings_from_env()

    assert settings.months == 120
    assert settings.red_zone_threshold == 65
    assert settings.debt_max_months == 600
    assert settings.log_level == logging.DEBUG


def test_log_level_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("LIFEATLAS_LOG_LEVEL", "chatty")
    assert log_level_from_env() == logging.WARNING

    monkeypatch.setenv("LIFEATLAS_LOG_LEVEL", "15")
    assert log_level_from_env() == 15


def test_setup_logger_writes_to_file(tmp_path):
    log_file = tmp_path / "lifeatlas.log"

    logger = setup_logger("lifeatlas.test_setup", level=logging.INFO, log_file=str(log_file))
    logger.info("projection ready")
    for handler in logger.handlers:
        handler.flush()

    assert "projection ready" in log_file.read_text(encoding="utf-8")
    assert len(logger.handlers) == 2
    assert setup_logger("lifeatlas.test_setup") is logger
    assert len(logger.handlers) == 2
