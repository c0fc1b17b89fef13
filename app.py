# app.py
# ─────────────────────────────────────────────────────────────────────────────
# AI School Management — Database setup console
# - Shows collections / indexes and flags anything missing
# - Runs the initializer (full, or indexes only)
# - Seed-user status and admin account creation
# ─────────────────────────────────────────────────────────────────────────────

import streamlit as st
from pymongo.errors import PyMongoError

from db import get_db
from utils.auth import create_admin
from utils.bootstrap_indexes import missing_indexes
from utils.initializer import initialize
from utils.mongo_df import indexes_df, users_df
from utils.seed import DEMO_CREDENTIALS, check_users

st.set_page_config(
    page_title="AI School Management — DB Setup",
    page_icon="🗄️",
    layout="wide",
)


# ───────────────────────────── Helpers ──────────────────────────────────────
def _db():
    try:
        return get_db()
    except PyMongoError as e:
        st.error(f"MongoDB connection failed: {e}")
        st.info("Set MONGODB_URI / DB_NAME in .env, or start a local server: "
                "docker run -d -p 27017:27017 --name mongodb mongo:latest")
        st.stop()


def _run(db, seed: bool):
    lines = []
    try:
        summary = initialize(db, seed=seed, echo=lines.append)
    except PyMongoError as e:
        st.code("\n".join(lines) or "(no steps completed)")
        st.error(f"Initialization aborted: {e}")
        return
    st.code("\n".join(lines))
    st.success(f"Done. Collections created: {len(summary['collections_created'])}, "
               f"users inserted: {len(summary['users_inserted'])}.")


# ───────────────────────────── UI ───────────────────────────────────────────
def setup_view(db):
    st.markdown(f"### 🗄️ Database `{db.name}`")

    b1, b2 = st.columns([1, 1])
    with b1:
        if st.button("Initialize (collections, indexes, demo users)", type="primary", use_container_width=True):
            _run(db, seed=True)
    with b2:
        if st.button("Ensure indexes only", use_container_width=True):
            _run(db, seed=False)

    tabs = st.tabs(["Indexes", "Demo users", "Create admin"])

    with tabs[0]:
        missing = missing_indexes(db)
        if missing:
            st.warning(f"{len(missing)} declared index(es) missing.")
            st.dataframe(missing, use_container_width=True)
        else:
            st.success("All declared indexes present.")
        st.dataframe(indexes_df(db), use_container_width=True)

    with tabs[1]:
        status = check_users(db)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Users", status["totalUsers"])
        c2.metric("Admin", "✅" if status["adminExists"] else "—")
        c3.metric("Teacher", "✅" if status["teacherExists"] else "—")
        c4.metric("Student", "✅" if status["studentExists"] else "—")
        st.caption("Demo logins: " + " · ".join(f"{e} / {p}" for e, p in DEMO_CREDENTIALS.items()))
        st.dataframe(users_df(db), use_container_width=True)

    with tabs[2]:
        with st.form("create_admin"):
            f1, f2 = st.columns(2)
            first = f1.text_input("First name")
            last = f2.text_input("Last name")
            email = st.text_input("Email")
            pw = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Create admin")
        if submitted:
            try:
                admin = create_admin(db, email, pw, first, last)
                st.success(f"Admin user created: {admin['email']}")
            except ValueError as e:
                st.error(str(e))
            except PyMongoError as e:
                st.error(f"Failed creating admin: {e}")


# ───────────────────────────── Entry ────────────────────────────────────────
if __name__ == "__main__":
    setup_view(_db())
