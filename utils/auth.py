# utils/auth.py
from __future__ import annotations
import re
from datetime import datetime, timezone

import bcrypt
from bson import ObjectId

# ---------------- core helpers ----------------
def _now():
    return datetime.now(tz=timezone.utc)

def _nemail(e: str) -> str:
    return (e or "").strip().lower()

def _hash(pw: str) -> str:
    return bcrypt.hashpw(pw.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")

def verify_password(pw: str, stored) -> bool:
    """Accept string or bytes hashes."""
    if not stored:
        return False
    if isinstance(stored, str):
        stored = stored.encode("utf-8")
    try:
        return bcrypt.checkpw(pw.encode("utf-8"), stored)
    except ValueError:
        # not a bcrypt hash
        return False

def _public(u: dict) -> dict:
    if not u: return {}
    out = dict(u)
    out.pop("password", None)
    if isinstance(out.get("_id"), ObjectId):
        out["_id"] = str(out["_id"])
    return out

# ---------------- admin accounts ----------------
def create_admin(db, email: str, password: str, first_name: str, last_name: str) -> dict:
    email = _nemail(email)
    first_name, last_name = (first_name or "").strip(), (last_name or "").strip()
    if not all([email, (password or "").strip(), first_name, last_name]):
        raise ValueError("All fields are required: email, password, firstName, lastName")
    users = db["users"]
    # seed and app code may store mixed-case emails
    same_email = {"$regex": f"^{re.escape(email)}$", "$options": "i"}
    if users.find_one({"email": same_email}, {"_id": 1}):
        raise ValueError(f"User with this email already exists: {email}")
    now = _now()
    doc = {
        "firstName": first_name, "lastName": last_name,
        "email": email, "password": _hash(password),
        "phone": "0000000000", "roles": ["ADMIN"],
        "active": True, "emailVerified": True,
        "createdAt": now, "updatedAt": now,
    }
    users.insert_one(doc)
    return _public(doc)
