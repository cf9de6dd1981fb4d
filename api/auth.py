"""X-API-Key check shared by the metadata, prompt and export routes."""

import logging
import secrets
from typing import Optional

from fastapi import Depends, Header, HTTPException

from api.config import APIConfig
from api.dependencies import get_api_config


logger = logging.getLogger(__name__)


async def verify_api_key(
    x_api_key: Optional[str] = Header(None),
    config: APIConfig = Depends(get_api_config),
) -> Optional[str]:
    """Reject requests whose X-API-Key header does not match the configured key.

    With no key configured (STOCKMETA_API_KEY unset) every request passes.
    """
    if not config.api_key:
        return None
    if not x_api_key or not secrets.compare_digest(x_api_key.encode(), config.api_key.encode()):
        reason = "invalid" if x_api_key else "missing"
        logger.warning(f"Rejected request with {reason} API key")
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
    return x_api_key
