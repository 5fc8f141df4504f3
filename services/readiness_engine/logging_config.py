import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from .config import readiness_settings

class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = record.created
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname

        log_record['module'] = record.module
        log_record['lineno'] = record.lineno


def setup_logging(log_level_str: Optional[str] = None):
    """
    Configures structured JSON logging for applications embedding the engine.

    Falls back to ``READINESS_LOG_LEVEL`` when no level is given. Safe to call
    more than once: the JSON handler is only installed the first time.
    """
    log_level_str = log_level_str or readiness_settings.log_level
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not any(isinstance(h, logging.StreamHandler) and isinstance(h.formatter, CustomJsonFormatter) for h in root_logger.handlers):
        log_handler = logging.StreamHandler(sys.stdout)
        formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(module)s %(lineno)d %(message)s')
        log_handler.setFormatter(formatter)
        root_logger.addHandler(log_handler)
        root_logger.info(f"Structured JSON logging configured with level: {logging.getLevelName(log_level)}")
    else:
        root_logger.info(f"Structured JSON logging already configured. Current level: {logging.getLevelName(root_logger.getEffectiveLevel())}")
