# scripts/create_admin.py
# --- path bootstrap ---
import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
# ----------------------

import argparse
from db import get_db
from utils.auth import create_admin

def main(argv=None, db=None):
    ap = argparse.ArgumentParser(description="Create an ADMIN user with a bcrypt-hashed password.")
    ap.add_argument("--email", required=True)
    ap.add_argument("--password", required=True)
    ap.add_argument("--first-name", required=True)
    ap.add_argument("--last-name", required=True)
    args = ap.parse_args(argv)

    try:
        admin = create_admin(db if db is not None else get_db(),
                             args.email, args.password, args.first_name, args.last_name)
    except ValueError as e:
        ap.exit(1, f"error: {e}\n")
    print(f"Admin user created: {admin['email']} ({admin['firstName']} {admin['lastName']})")
    return admin

if __name__ == "__main__":
    main()
