"""
Shared fixtures: an in-memory MongoDB (mongomock) per test.
"""

import sys
from pathlib import Path

import mongomock
import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from utils.initializer import initialize  # noqa: E402


@pytest.fixture
def db():
    """Empty ai_school_management database"""
    client = mongomock.MongoClient()
    yield client["ai_school_management"]
    client.close()


@pytest.fixture
def initialized_db(db):
    """Database after a full, quiet initializer run"""
    initialize(db, echo=lambda _msg: None)
    return db
