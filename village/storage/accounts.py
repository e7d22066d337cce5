"""User account and session storage."""

from datetime import datetime
from pathlib import Path

from village.models import Session, User

from .core import data_dir, read_json, user_dir, users_dir, write_json


def _account_path(username: str) -> Path:
    return user_dir(username) / "account.json"


def _sessions_path() -> Path:
    return data_dir() / "sessions.json"


def list_users() -> list[User]:
    results = []
    for path in sorted(users_dir().glob("*/account.json")):
        results.append(User.model_validate_json(path.read_text()))
    return results


def get_user(username: str) -> User | None:
    path = _account_path(username)
    if not path.is_file():
        return None
    return User.model_validate_json(path.read_text())


def save_user(user: User) -> None:
    write_json(_account_path(user.username), user.model_dump(mode="json"))


def get_sessions() -> dict[str, Session]:
    raw = read_json(_sessions_path(), {})
    return {token: Session.model_validate(s) for token, s in raw.items()}


def _save_sessions(sessions: dict[str, Session]) -> None:
    write_json(
        _sessions_path(),
        {token: s.model_dump(mode="json") for token, s in sessions.items()},
    )


def save_session(session: Session) -> None:
    sessions = get_sessions()
    sessions[session.token] = session
    _save_sessions(sessions)


def get_session(token: str) -> Session | None:
    return get_sessions().get(token)


def delete_session(token: str) -> bool:
    sessions = get_sessions()
    if sessions.pop(token, None) is None:
        return False
    _save_sessions(sessions)
    return True


def purge_sessions(now: datetime) -> int:
    """Drop expired sessions. Returns how many were removed."""
    sessions = get_sessions()
    live = {t: s for t, s in sessions.items() if s.expires_at > now}
    removed = len(sessions) - len(live)
    if removed:
        _save_sessions(live)
    return removed
