# utils/seed.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Dict, List, Optional

# Same bcrypt hash for all three demo accounts; the plaintexts below are for docs only.
PLACEHOLDER_HASH = "$2a$10$N.zmdr9k7uOCQb376NoUnuTJ8iAt6Z5EHsM8loxzQPqpf6A3xKXK2"

DEMO_CREDENTIALS = {
    "admin@school.edu": "admin123",
    "sarah.johnson@school.edu": "teacher123",
    "emma.thompson@school.edu": "student123",
}

SEED_USERS = [
    {"firstName": "John", "lastName": "Admin", "email": "admin@school.edu",
     "phone": "1234567890", "roles": ["ADMIN"]},
    {"firstName": "Sarah", "lastName": "Johnson", "email": "sarah.johnson@school.edu",
     "phone": "1234567891", "roles": ["TEACHER"]},
    {"firstName": "Emma", "lastName": "Thompson", "email": "emma.thompson@school.edu",
     "phone": "1234567892", "roles": ["STUDENT"]},
]

def _now():
    return datetime.now(tz=timezone.utc)

def build_seed_users(now: Optional[datetime] = None) -> List[dict]:
    now = now or _now()
    return [
        {**u, "roles": list(u["roles"]), "password": PLACEHOLDER_HASH,
         "active": True, "emailVerified": True,
         "createdAt": now, "updatedAt": now}
        for u in SEED_USERS
    ]

def seed_users(db) -> list:
    """Insert the demo users. Raises BulkWriteError if any email is already taken."""
    return db["users"].insert_many(build_seed_users()).inserted_ids

def check_users(db) -> Dict[str, object]:
    users = db["users"]

    def exists(email: str) -> bool:
        return users.find_one({"email": email}, {"_id": 1}) is not None

    return {
        "totalUsers": users.count_documents({}),
        "adminExists": exists("admin@school.edu"),
        "teacherExists": exists("sarah.johnson@school.edu"),
        "studentExists": exists("emma.thompson@school.edu"),
    }
