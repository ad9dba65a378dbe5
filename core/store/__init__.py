"""
Trainer state persistence.

Quick start:
    from core import store

    backend = store.SqlStateStore()
    state = store.load_state_or_default(backend)
    ...
    backend.save(state)
"""

from core.store.base import (
    StateStore,
    MemoryStateStore,
    load_state_or_default,
)
from core.store.database import (
    SqlStateStore,
    init_db,
    reset_db,
    is_test_mode,
    get_database_url,
    get_state_key,
    load_state,
    save_state,
    delete_state,
)

__all__ = [
    # Interface
    "StateStore",
    "MemoryStateStore",
    "load_state_or_default",

    # SQL backend
    "SqlStateStore",
    "init_db",
    "reset_db",
    "is_test_mode",
    "get_database_url",
    "get_state_key",
    "load_state",
    "save_state",
    "delete_state",
]
