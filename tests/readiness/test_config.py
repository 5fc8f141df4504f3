import logging
from pathlib import Path

import pytest

from services.readiness_engine.config import DEFAULT_QUESTION_BANK_PATH, ReadinessSettings
from services.readiness_engine.logging_config import CustomJsonFormatter, setup_logging


def test_default_settings(monkeypatch):
    monkeypatch.delenv("READINESS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("READINESS_QUESTION_BANK_PATH", raising=False)
    settings = ReadinessSettings()
    assert settings.log_level == "INFO"
    assert settings.question_bank_path == DEFAULT_QUESTION_BANK_PATH
    assert Path(settings.question_bank_path).is_file()

def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("READINESS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("READINESS_QUESTION_BANK_PATH", "/tmp/questions.yml")
    settings = ReadinessSettings()
    assert settings.log_level == "DEBUG"
    assert settings.question_bank_path == "/tmp/questions.yml"


@pytest.fixture
def clean_root_logger():
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    yield root_logger
    root_logger.handlers = original_handlers
    root_logger.setLevel(original_level)

def _json_handlers(root_logger):
    return [h for h in root_logger.handlers if isinstance(h.formatter, CustomJsonFormatter)]

def test_setup_logging_installs_json_handler_once(clean_root_logger):
    setup_logging("DEBUG")
    setup_logging("DEBUG")
    assert len(_json_handlers(clean_root_logger)) == 1
    assert clean_root_logger.level == logging.DEBUG

def test_setup_logging_unknown_level_falls_back_to_info(clean_root_logger):
    setup_logging("chatty")
    assert clean_root_logger.level == logging.INFO

def test_json_formatter_adds_context_fields():
    formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
    record = logging.LogRecord("services.readiness_engine.scorer", logging.WARNING, __file__, 42, "scored", None, None)
    output = formatter.format(record)
    assert '"level": "WARNING"' in output
    assert '"lineno": 42' in output
    assert '"message": "scored"' in output
