# app/services/session.py


def restore_session(cookies, session_state) -> bool:
    """
    Copies a saved login from the cookies into the session state.
    Returns False (and restores nothing) unless both token and username are saved.
    """
    token = cookies.get("access_token")
    username = cookies.get("username")
    if not token or not username:
        return False

    session_state["access_token"] = token
    session_state["username"] = username
    return True
