# scripts/check_users.py
import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from db import get_db
from utils.bootstrap_indexes import missing_indexes
from utils.seed import check_users

def run(db):
    status = check_users(db)
    print(f"=== {db.name} ===")
    for k, v in status.items():
        print(f"{k:<15} {v}")

    missing = missing_indexes(db)
    if not missing:
        print("\nAll declared indexes present.")
    else:
        print(f"\nMissing indexes: {len(missing)}")
        for m in missing:
            print(f"  {m['collection']}.{m['name']}" + (" (unique)" if m["unique"] else ""))
    return status, missing

if __name__ == "__main__":
    run(get_db())
