import os
from pymongo import MongoClient
from dotenv import load_dotenv

load_dotenv()
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "ai_school_management")

_db = None

def connect(uri: str | None = None, db_name: str | None = None):
    client = MongoClient(
        uri or MONGODB_URI,
        serverSelectionTimeoutMS=8000,
        appname="AI_SCHOOL_INIT",
    )
    # Fail fast if the server/URI is misconfigured
    client.admin.command("ping")
    return client[db_name or DB_NAME]

def get_db():
    global _db
    if _db is None:
        _db = connect()
    return _db

def col(name: str):
    return get_db()[name]
