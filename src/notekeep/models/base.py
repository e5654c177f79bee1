from datetime import UTC, datetime
from enum import Enum

import sqlalchemy as sa


def utc_now() -> datetime:
    """Return current UTC time as naive datetime (for PostgreSQL TIMESTAMP).

    Database columns use TIMESTAMP WITHOUT TIME ZONE, so we strip tzinfo.
    All times are stored in UTC by convention.
    """
    return datetime.now(UTC).replace(tzinfo=None)


def enum_column(enum_cls: type[Enum], length: int = 20) -> sa.Enum:
    """VARCHAR-backed enum column that stores member values and loads members."""
    return sa.Enum(
        enum_cls,
        native_enum=False,
        length=length,
        values_callable=lambda members: [m.value for m in members],
    )
