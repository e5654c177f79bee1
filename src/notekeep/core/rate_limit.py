"""Endpoint rate limiting for the unauthenticated auth routes."""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from src.notekeep.core.config import get_settings
from src.notekeep.core.logging import get_logger

logger = get_logger(__name__)


def get_rate_limit_key(request: Request) -> str:
    """Key rate limits by client IP only.

    Never mix user-controlled headers into the key, rotating them would
    create unlimited fresh buckets.
    """
    return get_remote_address(request) or "unknown"


def create_limiter() -> Limiter:
    """Create the in-memory rate limiter. Disabled in the testing environment."""
    settings = get_settings()

    if settings.app_env == "testing":
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)

    return Limiter(key_func=get_rate_limit_key)


# Reads settings at import time
limiter = create_limiter()
