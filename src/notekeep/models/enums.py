"""Shared enums for models."""

from enum import Enum


class Role(str, Enum):
    """User role within its tenant."""

    ADMIN = "admin"
    MEMBER = "member"


class Plan(str, Enum):
    """Tenant subscription plan."""

    FREE = "free"
    PRO = "pro"


class TenantStatus(str, Enum):
    ACTIVE = "active"
