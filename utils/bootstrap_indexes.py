from __future__ import annotations
from typing import Dict, List

from utils.schema import COLLECTIONS, INDEXES, index_name

def ensure_collections(db) -> List[str]:
    existing = set(db.list_collection_names())
    created = []
    for name in COLLECTIONS:
        if name in existing:
            continue
        db.create_collection(name)
        created.append(name)
    return created

def ensure_indexes(db) -> Dict[str, List[str]]:
    out: Dict[str, List[str]] = {}
    for name in COLLECTIONS:
        c = db[name]
        out[name] = [
            c.create_index(spec["keys"], unique=spec["unique"])
            for spec in INDEXES[name]
        ]
    return out

def describe_indexes(db) -> List[dict]:
    rows = []
    for name in COLLECTIONS:
        for idx_name, info in db[name].index_information().items():
            rows.append({
                "collection": name,
                "name": idx_name,
                "keys": [(k, d) for k, d in info["key"]],
                "unique": bool(info.get("unique", False)),
            })
    return rows

def missing_indexes(db) -> List[dict]:
    """Declared indexes that are absent, or present with the wrong uniqueness."""
    present = {(r["collection"], r["name"]): r["unique"] for r in describe_indexes(db)}
    out = []
    for name in COLLECTIONS:
        for spec in INDEXES[name]:
            key = (name, index_name(spec["keys"]))
            if key not in present or present[key] != spec["unique"]:
                out.append({"collection": name, "name": key[1], "unique": spec["unique"]})
    return out
