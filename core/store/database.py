"""
Database - Trainer State I/O Operations

Stores the trainer state document with SQLAlchemy. SQLite is the default
backend; any SQLAlchemy URL (e.g. Postgres) works through DATABASE_URL.

This module handles ONLY database I/O.
Scheduling and motivation logic never touch it directly.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from core.schemas import TrainerState
from core.store.base import StateStore
from core.store.models import Base, TrainerStateDocument

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///data/trainer.sqlite"
DEFAULT_STATE_KEY = "default"
TEST_DB_PREFIX = "test_"

EXPECTED_COLUMNS = {"key", "payload", "updated_at"}


# ---- Configuration ----

def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_state_key() -> str:
    """Row key of the state document (one per profile)."""
    return os.getenv("TRAINER_STATE_KEY", DEFAULT_STATE_KEY)


def get_database_url() -> str:
    """
    Get the database URL from environment variables.

    Uses DATABASE_URL, or a local SQLite file when unset. In TEST_MODE the
    database name (or SQLite file name) gets a "test_" prefix, so test runs
    never touch the real progress.

    Returns:
        SQLAlchemy database URL
    """
    base_url = os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL
    if not is_test_mode():
        return base_url

    url = make_url(base_url)
    database = url.database or ""
    if not database or database == ":memory:":
        return base_url

    head, name = os.path.split(database)
    if name.startswith(TEST_DB_PREFIX):
        return base_url
    test_database = os.path.join(head, TEST_DB_PREFIX + name) if head else TEST_DB_PREFIX + name
    return url.set(database=test_database).render_as_string(hide_password=False)


def _ensure_sqlite_directory(db_url: str) -> None:
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite":
        return
    database = url.database or ""
    if not database or database == ":memory:":
        return
    directory = os.path.dirname(database)
    if directory:
        os.makedirs(directory, exist_ok=True)


@lru_cache(maxsize=None)
def _engine_for_url(db_url: str) -> Engine:
    if make_url(db_url).get_backend_name() == "sqlite":
        _ensure_sqlite_directory(db_url)
        return create_engine(db_url, echo=False)

    return create_engine(
        db_url,
        pool_size=5,           # Keep 5 connections open
        max_overflow=10,       # Allow up to 10 extra connections
        pool_pre_ping=True,    # Verify connections before use
        echo=False
    )


def get_engine() -> Engine:
    """
    Get the SQLAlchemy engine for the configured database.

    Engines are cached per URL; server databases use connection pooling.

    Returns:
        SQLAlchemy Engine instance
    """
    return _engine_for_url(get_database_url())


def get_session() -> Session:
    """
    Get a SQLAlchemy session for database operations.

    Returns:
        SQLAlchemy Session instance
    """
    SessionLocal = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return SessionLocal()


# ---- Schema ----

def init_db():
    """
    Initialize database schema if the table doesn't exist.

    Safe to call multiple times - only creates the table if it is missing.

    Raises:
        RuntimeError: if a trainer_state table exists with an unexpected schema
    """
    engine = get_engine()
    inspector = inspect(engine)

    if TrainerStateDocument.__tablename__ not in inspector.get_table_names():
        Base.metadata.create_all(engine)
        logger.info("Created %s table", TrainerStateDocument.__tablename__)
        return

    columns = {col["name"] for col in inspector.get_columns(TrainerStateDocument.__tablename__)}
    missing = EXPECTED_COLUMNS - columns
    if missing:
        raise RuntimeError(
            f"trainer_state table is missing columns {sorted(missing)}. "
            "Please reset the database (scripts/maintenance/reset_learning_db.py)."
        )


def reset_db():
    """
    DANGEROUS: Delete all saved progress and recreate the table.

    Only use this for testing or when you want to start fresh.
    """
    engine = get_engine()
    Base.metadata.drop_all(engine)
    logger.warning("All trainer_state rows dropped")
    init_db()


# ---- Document I/O ----

def load_state(key: Optional[str] = None) -> Optional[TrainerState]:
    """
    Load the state document.

    Args:
        key: Row key (defaults to TRAINER_STATE_KEY)

    Returns:
        TrainerState if found, None if nothing was saved yet

    Raises:
        ValueError: if the stored JSON does not validate
    """
    key = key or get_state_key()
    session = get_session()
    try:
        row = session.get(TrainerStateDocument, key)
        if row is None:
            return None
        return TrainerState.model_validate_json(row.payload)
    finally:
        session.close()


def save_state(state: TrainerState, key: Optional[str] = None) -> None:
    """
    Save the state document (insert or update).

    Args:
        state: TrainerState to save
        key: Row key (defaults to TRAINER_STATE_KEY)
    """
    key = key or get_state_key()
    session = get_session()
    try:
        row = session.get(TrainerStateDocument, key)
        now = datetime.now(timezone.utc)
        if row is None:
            row = TrainerStateDocument(key=key, payload=state.model_dump_json(), updated_at=now)
            session.add(row)
        else:
            row.payload = state.model_dump_json()
            row.updated_at = now
        session.commit()
    finally:
        session.close()


def delete_state(key: Optional[str] = None) -> None:
    """Remove the state document, if any."""
    key = key or get_state_key()
    session = get_session()
    try:
        row = session.get(TrainerStateDocument, key)
        if row is not None:
            session.delete(row)
            session.commit()
    finally:
        session.close()


class SqlStateStore(StateStore):
    """
    StateStore backed by the configured SQLAlchemy database.

    Args:
        key: Row key (defaults to TRAINER_STATE_KEY)
        init_schema: Run init_db() first; pass False when the caller has
            already initialized the schema for this process
    """

    def __init__(self, key: Optional[str] = None, init_schema: bool = True):
        self.key = key or get_state_key()
        if init_schema:
            init_db()

    def load(self) -> Optional[TrainerState]:
        return load_state(self.key)

    def save(self, state: TrainerState) -> None:
        save_state(state, self.key)

    def clear(self) -> None:
        delete_state(self.key)
