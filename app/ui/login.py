# app/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from app.services.api import login_user, register_user
from app.services.session import restore_session

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD", "please_change_this_cookie_password")

cookies = EncryptedCookieManager(prefix="task-sheet/", password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def logout():
    for key in ("access_token", "username"):
        if key in cookies:
            del cookies[key]
    cookies.save()


def login_page():
    st.title("🔐 Login")

    if "access_token" not in st.session_state:
        if restore_session(cookies, st.session_state):
            st.rerun()

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Log in")

    if submitted:
        with st.spinner("Logging in..."):
            result = login_user(username, password)
            if result.get("error"):
                st.error(f"❌ Login failed: {result['error']}")
            else:
                st.session_state["access_token"] = result["token"]
                st.session_state["username"] = result["username"]
                cookies["access_token"] = result["token"]
                cookies["username"] = result["username"]
                cookies.save()

                st.success("✅ Logged in")
                st.rerun()

    if st.button("Create an account"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Create an account")

    new_user = st.text_input("Username", key="new_user")
    new_pass = st.text_input("Password", type="password", key="new_pass")

    if st.button("Register"):
        with st.spinner("Creating account..."):
            result = register_user(new_user, new_pass)
            if result.get("error"):
                st.error(f"❌ Registration failed: {result['error']}")
            else:
                st.success("🎉 Account created. Please log in.")
                st.session_state["show_register"] = False
                st.rerun()

    if st.button("← Back to login"):
        st.session_state["show_register"] = False
        st.rerun()
