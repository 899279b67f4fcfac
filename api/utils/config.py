# api/utils/config.py
import os
import logging

logger = logging.getLogger("deck_designer.api")


class Config:
    """Application configuration loaded from environment variables"""

    # API authentication
    API_KEY = os.environ.get("API_KEY", "dev_key")

    # Upper bound on members a single request may generate
    MAX_MEMBERS = int(os.environ.get("MAX_MEMBERS", "5000"))

    # Directory for engine log files
    LOG_DIR = os.environ.get("LOG_DIR", "logs")

    # Application settings
    DEBUG = os.environ.get("DEBUG", "false").lower() == "true"

    @classmethod
    def validate(cls):
        """Validate critical configuration values"""
        if not cls.API_KEY or cls.API_KEY == "dev_key":
            logger.warning("Using development API key - not secure for production!")

        if cls.MAX_MEMBERS <= 0:
            logger.error(f"MAX_MEMBERS must be positive, got {cls.MAX_MEMBERS}")
