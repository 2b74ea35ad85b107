# app/main.py

import streamlit as st
from dotenv import load_dotenv
from app.services.api import get_me
from app.ui.login import login_page, logout
from app.ui.sheet import sheet_page
from app.ui.admin import admin_page


load_dotenv()


def sign_out():
    logout()
    st.session_state.clear()
    st.rerun()


def main_page():
    st.sidebar.markdown(f"## 👋 {st.session_state['username']}")

    if "is_admin" not in st.session_state:
        me = get_me(st.session_state["access_token"])
        if me.get("status") in (401, 404):
            sign_out()
            return
        st.session_state["is_admin"] = bool(me.get("isAdmin"))

    if st.sidebar.button("📋 My tasks"):
        st.session_state["page"] = "sheet"
    if st.session_state["is_admin"] and st.sidebar.button("🛠️ Administration"):
        st.session_state["page"] = "admin"
    if st.sidebar.button("🔓 Log out"):
        sign_out()

    page = st.session_state.get("page", "sheet")
    if page == "admin" and st.session_state["is_admin"]:
        admin_page()
    else:
        sheet_page(on_unauthorized=sign_out)


if "access_token" not in st.session_state:
    login_page()
else:
    main_page()
