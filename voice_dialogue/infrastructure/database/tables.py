"""
Database Table Definitions.

This module defines the SQL schema using SQLModel.
We use the 'DBModel' suffix to distinguish these persistence models
from the Pydantic domain models (SessionState, Version).
"""

from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import JSON, Column
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

# JSONB on Postgres, plain JSON on other dialects (SQLite for dev/tests)
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


class SessionDBModel(SQLModel, table=True):
    """
    Persistence model for per-user Session State.
    Maps 1-to-1 with the 'sessions' table.
    """

    __tablename__ = "sessions"

    user_id: str = Field(primary_key=True, index=True)

    # Store the entire SessionState (stack, storage, variables) as one JSON document.
    state: Dict[str, Any] = Field(sa_column=Column(JSONDocument, nullable=False))

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class VersionDBModel(SQLModel, table=True):
    """
    Persistence model for published Versions.
    Maps 1-to-1 with the 'versions' table.
    """

    __tablename__ = "versions"

    version_id: str = Field(primary_key=True)
    name: str

    # Store the entire Version definition (settings, slots, variables) as JSON.
    version_data: Dict[str, Any] = Field(sa_column=Column(JSONDocument, nullable=False))

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
