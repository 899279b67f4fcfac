# api/utils/logging.py
import logging
import sys
import os
import time

# Determine if we're in production based on environment variable
IS_PRODUCTION = os.environ.get("ENVIRONMENT", "development") == "production"


class TimezoneFormatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):
        # Use local time for log timestamps
        return time.strftime(datefmt or self.default_time_format,
                             time.localtime(record.created))


def setup_logger(name):
    """Set up a logger with proper formatting and a console handler."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO if IS_PRODUCTION else logging.DEBUG)

    if not logger.handlers:
        formatter = TimezoneFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


api_logger = setup_logger("deck_designer.api")
