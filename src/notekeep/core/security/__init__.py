"""Security utilities - crypto, validators and headers.

Re-exports all security-related functions for convenience.
"""

from src.notekeep.core.security.crypto import (
    ACCESS_TOKEN_TYPE,
    DUMMY_PASSWORD_HASH,
    create_access_token,
    decode_token,
    hash_password,
    hash_token,
    verify_password,
)
from src.notekeep.core.security.headers import SecurityHeadersMiddleware
from src.notekeep.core.security.validators import (
    MAX_TENANT_SLUG_LENGTH,
    TENANT_SLUG_REGEX,
    derive_slug,
    validate_tenant_slug_format,
    with_random_suffix,
)

__all__ = [
    # Crypto
    "ACCESS_TOKEN_TYPE",
    "DUMMY_PASSWORD_HASH",
    "create_access_token",
    "decode_token",
    "hash_password",
    "hash_token",
    "verify_password",
    # Headers
    "SecurityHeadersMiddleware",
    # Validators
    "MAX_TENANT_SLUG_LENGTH",
    "TENANT_SLUG_REGEX",
    "derive_slug",
    "validate_tenant_slug_format",
    "with_random_suffix",
]
