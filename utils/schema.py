# utils/schema.py
"""
Collections and indexes of the ai_school_management store.

Every index is ascending. References (user, teacher, course, student,
assignment) are stored ids only; nothing here cascades.
"""
from __future__ import annotations
from typing import Dict, List, Tuple

from pymongo import ASCENDING

Keys = List[Tuple[str, int]]

COLLECTIONS = [
    "users",
    "students",
    "teachers",
    "courses",
    "assignments",
    "grades",
    "attendance",
]

def _idx(*fields: str, unique: bool = False) -> dict:
    return {"keys": [(f, ASCENDING) for f in fields], "unique": unique}

INDEXES: Dict[str, List[dict]] = {
    "users": [
        _idx("email", unique=True),
        _idx("roles"),
    ],
    "students": [
        _idx("studentId", unique=True),
        _idx("grade"),
        _idx("section"),
        _idx("grade", "section"),
        _idx("user"),
        _idx("aiInsights.riskScore"),
    ],
    "teachers": [
        _idx("employeeId", unique=True),
        _idx("department"),
        _idx("subjects"),
        _idx("user"),
    ],
    "courses": [
        _idx("courseCode", unique=True),
        _idx("department"),
        _idx("grade"),
        _idx("teacher"),
        _idx("status"),
    ],
    "assignments": [
        _idx("course"),
        _idx("type"),
        _idx("dueDate"),
    ],
    "grades": [
        _idx("student"),
        _idx("course"),
        _idx("assignment"),
        _idx("student", "assignment", unique=True),
        _idx("status"),
    ],
    "attendance": [
        _idx("student"),
        _idx("course"),
        _idx("date"),
        _idx("student", "course", "date", unique=True),
        _idx("status"),
    ],
}

def index_name(keys: Keys) -> str:
    """Same name MongoDB gives an index when none is passed: email_1, student_1_assignment_1."""
    return "_".join(f"{field}_{direction}" for field, direction in keys)

def unique_indexes() -> List[Tuple[str, Keys]]:
    return [(c, spec["keys"]) for c in COLLECTIONS for spec in INDEXES[c] if spec["unique"]]
