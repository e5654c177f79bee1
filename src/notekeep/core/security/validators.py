"""Tenant slug derivation and validation."""

import re
import secrets
import string
from typing import Final

MAX_TENANT_SLUG_LENGTH: Final[int] = 63
SLUG_SUFFIX_ALPHABET: Final[str] = string.ascii_lowercase + string.digits
TENANT_SLUG_REGEX: Final[str] = r"^[a-z0-9]+(-[a-z0-9]+)*$"

_TENANT_SLUG_PATTERN: Final[re.Pattern[str]] = re.compile(TENANT_SLUG_REGEX)
_NON_ALNUM_RUN: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9]+")


def derive_slug(name: str, suffix_length: int = 4) -> str:
    """Derive a URL-safe slug from an organization display name.

    Lower-cases the name, collapses every run of characters outside
    ``[a-z0-9]`` into one hyphen and trims hyphens from both ends. The result
    is truncated so that a ``-xxxx`` collision suffix still fits.

    Raises:
        ValueError: If the name contains no usable characters.

    Examples:
        >>> derive_slug("Acme Inc")
        'acme-inc'
        >>> derive_slug("  --Hello,   World!! ")
        'hello-world'
    """
    slug = _NON_ALNUM_RUN.sub("-", name.lower()).strip("-")
    slug = slug[: MAX_TENANT_SLUG_LENGTH - suffix_length - 1].rstrip("-")
    if not slug:
        raise ValueError("Organization name must contain at least one letter or digit")
    return slug


def with_random_suffix(base: str, length: int = 4) -> str:
    """Append a short random ``[a-z0-9]`` suffix: ``acme`` -> ``acme-k3z9``."""
    suffix = "".join(secrets.choice(SLUG_SUFFIX_ALPHABET) for _ in range(length))
    return f"{base}-{suffix}"


def validate_tenant_slug_format(slug: str) -> str:
    """Validate tenant slug format. Length is enforced by Field(max_length=...)."""
    if not _TENANT_SLUG_PATTERN.match(slug):
        raise ValueError(
            "Slug must contain only lowercase letters and numbers, "
            "with single hyphens as separators"
        )
    return slug
