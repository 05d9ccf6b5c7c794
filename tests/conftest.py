"""
Pytest configuration for the gradebook.

Provides fixtures for:
- Fresh and pre-populated record stores (destroyed after each test)
- Settings isolation (cached settings cleared, env overrides removed)
"""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from gradebook.config import get_settings
from gradebook.store import RecordStore

SETTINGS_ENV_VARS = (
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
    "REPORT_STYLE",
    "ROSTER_STUDENTS",
    "ROSTER_COURSES",
    "ROSTER_SEED",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Clear the cached Settings and any env overrides around each test, and undo
    root logging changes made by configure_logging.
    """
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    get_settings.cache_clear()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def store() -> Generator[RecordStore, None, None]:
    """
    Empty record store, destroyed after the test unless the test already did.
    """
    record_store = RecordStore()
    yield record_store
    if not record_store.closed:
        record_store.destroy()


@pytest.fixture
def populated_store(store: RecordStore) -> RecordStore:
    """
    Store with two students: Alice (1) graded Math 85, Physics 92; Bob (2) with no courses.
    """
    store.add_student("Alice", 1)
    store.add_student("Bob", 2)
    store.add_grade("Math", 1, 85)
    store.add_grade("Physics", 1, 92)
    return store
