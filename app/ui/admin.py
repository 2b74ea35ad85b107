# app/ui/admin.py

import streamlit as st
from app.services.api import (
    create_user,
    delete_user,
    list_users,
    set_admin,
    trigger_backup,
)


def admin_page():
    st.title("🛠️ Administration")

    token = st.session_state["access_token"]
    me = st.session_state["username"]

    result = list_users(token)
    if result.get("error"):
        st.error(result["error"])
        return
    users = result["users"]

    st.subheader("👥 Users")
    for username, info in sorted(users.items()):
        col1, col2, col3, col4 = st.columns([4, 3, 2, 1])
        with col1:
            st.markdown(f"**{username}**" + (" (admin)" if info["isAdmin"] else ""))
        with col2:
            st.caption(info.get("createdAt", ""))
        with col3:
            label = "Revoke admin" if info["isAdmin"] else "Make admin"
            if st.button(label, key=f"admin-{username}"):
                handle_result(set_admin(token, username, not info["isAdmin"]))
        with col4:
            if username != me and st.button("🗑️", key=f"delete-{username}"):
                handle_result(delete_user(token, username))

    st.subheader("➕ New user")
    with st.form("create_user_form", clear_on_submit=True):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        is_admin = st.checkbox("Administrator")
        submitted = st.form_submit_button("Create")
    if submitted:
        handle_result(create_user(token, username, password, is_admin))

    st.subheader("📦 Backup")
    if st.button("Run backup now"):
        with st.spinner("Running backup..."):
            result = trigger_backup(token)
        if result.get("error"):
            st.error(f"❌ {result['error']}")
            if result.get("details"):
                st.code(result["details"])
        else:
            st.success("✅ Backup finished")
            st.code(result.get("output", ""))


def handle_result(result):
    if result.get("error"):
        st.error(result["error"])
    else:
        st.rerun()
