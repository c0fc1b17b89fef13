"""
Tests for DataFrame views
"""

from bson import ObjectId

from utils.mongo_df import docs_to_df, indexes_df, users_df
from utils.schema import INDEXES


def test_docs_to_df_stringifies_ids_and_lists():
    oid = ObjectId()
    df = docs_to_df([{"_id": oid, "roles": ["ADMIN", "TEACHER"], "secret": 1}], drop_fields=["secret"])
    assert list(df.columns) == ["_id", "roles"]
    assert df.loc[0, "_id"] == str(oid)
    assert df.loc[0, "roles"] == "ADMIN, TEACHER"


def test_indexes_df(initialized_db):
    df = indexes_df(initialized_db)
    assert list(df.columns) == ["collection", "name", "keys", "unique"]
    # declared indexes plus one _id_ index per collection
    assert len(df) == sum(len(v) for v in INDEXES.values()) + len(INDEXES)
    row = df[df["name"] == "student_1_course_1_date_1"].iloc[0]
    assert row["keys"] == "student:1, course:1, date:1"
    assert bool(row["unique"]) is True


def test_users_df_hides_password(initialized_db):
    df = users_df(initialized_db)
    assert len(df) == 3
    assert "password" not in df.columns
    assert set(df["roles"]) == {"ADMIN", "TEACHER", "STUDENT"}
