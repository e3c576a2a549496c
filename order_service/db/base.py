"""
SQLAlchemy declarative base and metadata.
Shared by the ORM models and Alembic autogenerate.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass
