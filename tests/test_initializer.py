"""
End-to-end runs of the initializer against an in-memory database
"""

import pytest
from pymongo.errors import PyMongoError

from utils.bootstrap_indexes import missing_indexes
from utils.initializer import initialize
from utils.schema import COLLECTIONS


class TestInitialize:
    def test_empty_database(self, db):
        messages = []
        summary = initialize(db, echo=messages.append)

        assert summary["database"] == "ai_school_management"
        assert summary["collections_created"] == COLLECTIONS
        assert set(COLLECTIONS) <= set(db.list_collection_names())
        assert missing_indexes(db) == []
        assert len(summary["users_inserted"]) == 3

        users = list(db["users"].find({}, {"email": 1, "roles": 1}))
        assert {u["email"]: u["roles"] for u in users} == {
            "admin@school.edu": ["ADMIN"],
            "sarah.johnson@school.edu": ["TEACHER"],
            "emma.thompson@school.edu": ["STUDENT"],
        }
        assert messages[-1] == "Sample data inserted successfully!"

    def test_skip_seed(self, db):
        summary = initialize(db, seed=False, echo=lambda _m: None)
        assert summary["users_inserted"] == []
        assert db["users"].count_documents({}) == 0
        assert missing_indexes(db) == []

    def test_rerun_fails_on_duplicate_email(self, initialized_db):
        messages = []
        with pytest.raises(PyMongoError):
            initialize(initialized_db, echo=messages.append)
        # collections and indexes were re-applied before the seed step failed
        assert "Database initialization completed!" in messages
        assert "Sample data inserted successfully!" not in messages
        assert initialized_db["users"].count_documents({}) == 3

    def test_rerun_without_seed_is_safe(self, initialized_db):
        summary = initialize(initialized_db, seed=False, echo=lambda _m: None)
        assert summary["collections_created"] == []
        assert initialized_db["users"].count_documents({}) == 3

    def test_index_conflict_aborts_before_seeding(self, db):
        db["users"].insert_many([{"email": "dup@school.edu"}, {"email": "dup@school.edu"}])
        with pytest.raises(PyMongoError):
            initialize(db, echo=lambda _m: None)
        assert db["users"].count_documents({}) == 2

    def test_default_echo_prints(self, db, capsys):
        initialize(db, seed=False)
        out = capsys.readouterr().out
        assert "Creating indexes..." in out
        assert "Collections ready (7 created)." in out
