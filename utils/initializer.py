# utils/initializer.py
"""
One-shot setup of the school store: collections, indexes, then demo users.

There is no rollback. A pymongo error at any step (index conflict with
existing duplicates, duplicate seed email, lost connection) propagates and
the remaining steps do not run.
"""
from __future__ import annotations
from typing import Callable

from utils.bootstrap_indexes import ensure_collections, ensure_indexes
from utils.seed import seed_users


def initialize(db, seed: bool = True, echo: Callable[[str], None] = print) -> dict:
    created = ensure_collections(db)
    echo(f"Collections ready ({len(created)} created).")

    echo("Creating indexes...")
    indexes = ensure_indexes(db)
    echo("Database initialization completed!")

    inserted = []
    if seed:
        echo("Inserting sample data...")
        inserted = seed_users(db)
        echo("Sample data inserted successfully!")

    return {
        "database": db.name,
        "collections_created": created,
        "indexes": indexes,
        "users_inserted": inserted,
    }
