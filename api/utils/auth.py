# File: api/utils/auth.py
from fastapi import Header, HTTPException, status
from typing import Optional
from api.utils.config import Config
import logging

logger = logging.getLogger("deck_designer.api")


def _mask(key: str) -> str:
    return key[:4] + "..." + key[-4:] if len(key) > 8 else "***masked***"


async def get_api_key(x_api_key: Optional[str] = Header(None)):
    """Validate API key from header."""
    if x_api_key:
        logger.debug(f"Received API key: {_mask(x_api_key)}")

    if x_api_key == Config.API_KEY:
        return {"key": x_api_key, "environment": "production" if Config.API_KEY != "dev_key" else "development"}

    logger.warning("Invalid API key provided")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid API Key"
    )
