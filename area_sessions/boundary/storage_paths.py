"""
Persisted path layout for per-user session documents.

users/{uid}/index.json              -> UserSessionIndex
users/{uid}/sessions/{id}.json      -> SessionData
"""


def user_base_path(uid: str) -> str:
    return f"users/{uid}"


def index_path(uid: str) -> str:
    return f"{user_base_path(uid)}/index.json"


def sessions_prefix(uid: str) -> str:
    return f"{user_base_path(uid)}/sessions/"


def session_path(uid: str, session_id: str) -> str:
    return f"{sessions_prefix(uid)}{session_id}.json"
