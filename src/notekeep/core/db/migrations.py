"""Reusable migration runner for both production and tests."""

from alembic.config import Config

from alembic import command


def run_migrations_sync(revision: str = "head") -> None:
    """Run Alembic migrations synchronously using ``alembic.ini`` in the CWD."""
    alembic_cfg = Config("alembic.ini")
    command.upgrade(alembic_cfg, revision)
