"""API key check for protected routers."""

import logging
import secrets

from fastapi import Request

from orgchart.core.config import get_settings
from orgchart.domain.exceptions import AuthenticationException

logger = logging.getLogger(__name__)


async def require_api_key(request: Request) -> None:
    """Reject the request unless it carries the configured API key.

    No-op when API_KEY_ENABLED is false.
    """
    settings = get_settings()
    if not settings.api_key_enabled or settings.api_key is None:
        return
    provided = request.headers.get(settings.api_key_header)
    if not provided:
        raise AuthenticationException("API key required")
    if not secrets.compare_digest(
        provided.encode(), settings.api_key.get_secret_value().encode()
    ):
        logger.warning(
            "Invalid API key on %s %s", request.method, request.url.path
        )
        raise AuthenticationException("Invalid API key")
