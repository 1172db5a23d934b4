"""
API Security Utilities
"""

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from .. import config

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(api_key: str = Depends(api_key_header)) -> bool:
    """
    Authenticates requests using the 'X-API-Key' header.

    When no API_KEY is configured, authentication is disabled.
    """
    if not config.API_KEY:
        logger.debug("API_KEY is not set. API authentication is disabled.")
        return True

    if api_key and api_key == config.API_KEY:
        return True

    logger.warning("Rejected request with invalid or missing API Key")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API Key",
    )
