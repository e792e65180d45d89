"""
Logging configuration for the geocoord package.
"""

import logging
import logging.config
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from geocoord.config import Settings, settings as default_settings


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter for structured logging.
    """

    def format(self, record):
        """Format log record with structured information."""
        log_entry = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return str(log_entry)


def get_logging_config(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """
    Get logging configuration based on settings.

    Args:
        settings: Settings to read from, the module singleton by default

    Returns:
        Dict containing logging configuration
    """
    settings = settings or default_settings
    log_level = settings.log_level.upper()
    handlers = ['console']

    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '[{asctime}] {levelname} {name} {message}',
                'style': '{',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'structured': {
                '()': StructuredFormatter,
                'datefmt': '%Y-%m-%d %H:%M:%S'
            }
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': log_level,
                'formatter': settings.log_format,
                'stream': sys.stdout
            }
        },
        'loggers': {
            'geocoord': {
                'level': log_level,
                'handlers': handlers,
                'propagate': False
            }
        }
    }

    if settings.log_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        config['handlers']['file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'level': log_level,
            'formatter': settings.log_format,
            'filename': settings.log_file,
            'maxBytes': 10485760,  # 10MB
            'backupCount': 5,
            'encoding': 'utf8'
        }
        handlers.append('file')

    return config


def setup_logging(settings: Optional[Settings] = None):
    """
    Set up logging configuration for the package.
    """
    config = get_logging_config(settings)
    logging.config.dictConfig(config)

    logger = logging.getLogger('geocoord')
    logger.debug("Logging configuration initialized")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
