# app/ui/sheet.py

import streamlit as st
from app.services.api import get_sheet, save_sheet
from app.services.table import (
    add_column,
    frame_to_rows,
    remove_column,
    sheet_to_frame,
    stamp_rows,
)


def sheet_page(on_unauthorized):
    st.title("📋 My tasks")

    username = st.session_state["username"]
    token = st.session_state["access_token"]

    if st.session_state.get("sheet_loaded_for") != username:
        result = get_sheet(token, username)
        if result.get("status") == 401:
            on_unauthorized()
            return
        if result.get("error"):
            st.error(result["error"])
            return
        st.session_state["sheet"] = result["sheet"]
        st.session_state["sheet_loaded_for"] = username
        st.session_state["editor_version"] = 0

    sheet = st.session_state["sheet"]
    version = st.session_state.get("editor_version", 0)

    edited = st.data_editor(
        sheet_to_frame(sheet),
        num_rows="dynamic",
        use_container_width=True,
        hide_index=True,
        key=f"sheet_editor_{version}",
    )
    current = {**sheet, "rows": frame_to_rows(edited, sheet["rows"])}

    with st.expander("⚙️ Columns"):
        col1, col2 = st.columns(2)
        with col1:
            new_column = st.text_input("New column", key="new_column")
            if st.button("➕ Add column"):
                update_sheet(add_column(current, new_column))
        with col2:
            if sheet["columns"]:
                doomed = st.selectbox("Column", options=sheet["columns"], key="remove_column")
                if st.button("🗑️ Remove column"):
                    update_sheet(remove_column(current, doomed))

    if st.button("💾 Save"):
        current["rows"] = stamp_rows(current["rows"], current["columns"])
        result = save_sheet(token, username, current)
        if result.get("status") == 401:
            on_unauthorized()
            return
        if result.get("error"):
            st.error(f"❌ Save failed: {result['error']}")
        else:
            st.session_state["sheet"] = current
            st.session_state["editor_version"] = version + 1
            st.success(f"✅ Saved at {result['savedAt']}")

    if st.button("🔄 Reload"):
        st.session_state.pop("sheet_loaded_for", None)
        st.rerun()


def update_sheet(sheet):
    st.session_state["sheet"] = sheet
    st.session_state["editor_version"] = st.session_state.get("editor_version", 0) + 1
    st.rerun()
