# scripts/init_mongo.py
"""
Create the collections and indexes of the school store and insert the demo users.

Usage (from project root):
    python scripts/init_mongo.py
    python scripts/init_mongo.py --uri mongodb://localhost:27017 --db ai_school_management
    python scripts/init_mongo.py --skip-seed      # indexes only, safe to re-run

Seeding is not idempotent: a second run without --skip-seed fails on the
unique email index.
"""
from __future__ import annotations
import os, sys, argparse

# --- bootstrap project root so "from db import connect" works even when run from /scripts
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(THIS_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from db import connect  # noqa: E402
from utils.initializer import initialize  # noqa: E402
from utils.seed import DEMO_CREDENTIALS, SEED_USERS  # noqa: E402

def main(argv=None):
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--uri", help="MongoDB URI (default: $MONGODB_URI)")
    ap.add_argument("--db", help="Database name (default: $DB_NAME or ai_school_management)")
    ap.add_argument("--skip-seed", action="store_true", help="Only create collections and indexes.")
    args = ap.parse_args(argv)

    db = connect(args.uri, args.db)
    summary = initialize(db, seed=not args.skip_seed)

    if not args.skip_seed:
        print("Default credentials:")
        for u in SEED_USERS:
            print(f"{u['roles'][0].title()}: {u['email']} / {DEMO_CREDENTIALS[u['email']]}")
    return summary

if __name__ == "__main__":
    main()
