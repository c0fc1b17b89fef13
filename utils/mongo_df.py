# utils/mongo_df.py
from bson import ObjectId
import pandas as pd

from utils.bootstrap_indexes import describe_indexes

def _cell(v):
    if isinstance(v, ObjectId):
        return str(v)
    if isinstance(v, (list, tuple)):
        return ", ".join(str(_cell(x)) for x in v)
    return v

def docs_to_df(docs, drop_fields=None):
    drop_fields = set(drop_fields or [])
    rows = [{k: _cell(v) for k, v in d.items() if k not in drop_fields} for d in docs]
    return pd.DataFrame(rows)

def indexes_df(db):
    rows = []
    for r in describe_indexes(db):
        rows.append({**r, "keys": ", ".join(f"{k}:{d}" for k, d in r["keys"])})
    return pd.DataFrame(rows, columns=["collection", "name", "keys", "unique"])

def users_df(db):
    return docs_to_df(db["users"].find({}, {"password": 0}))
