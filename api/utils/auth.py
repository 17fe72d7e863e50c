# File: api/utils/auth.py
from fastapi import Header, HTTPException, status
from typing import Optional
from api.utils.config import Config
import logging

logger = logging.getLogger("roof_layout.api")


def _mask(key: str) -> str:
    return key[:4] + "..." + key[-4:] if len(key) > 8 else "***masked***"


async def get_api_key(x_api_key: Optional[str] = Header(None)):
    """Validate API key from header."""
    if x_api_key is None:
        logger.warning("Request without API key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API Key"
        )

    if x_api_key == Config.API_KEY:
        logger.debug(f"Authentication successful for key {_mask(x_api_key)}")
        return {
            "key": x_api_key,
            "environment": "production" if Config.API_KEY != "dev_key" else "development",
        }

    logger.warning(f"Invalid API key provided: {_mask(x_api_key)}")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid API Key"
    )
