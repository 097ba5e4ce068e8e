"""Database-backed login sessions and the session cookie."""
import secrets
from datetime import timedelta

from fastapi import Response
from sqlalchemy.orm import Session

from fermentato.config import settings
from fermentato.models import User, UserSession
from fermentato.utils import utcnow


def create_session(db: Session, user: User, data: dict | None = None) -> UserSession:
    """Persist a new session for `user`. Caller commits."""
    row = UserSession(
        sid=secrets.token_urlsafe(32),
        user_id=user.id,
        data=data or {},
        expire=utcnow() + timedelta(days=settings.session_ttl_days),
    )
    db.add(row)
    return row


def load_session(db: Session, sid: str | None) -> UserSession | None:
    """Return the session for `sid` unless it is missing or expired."""
    if not sid:
        return None
    row = db.query(UserSession).filter(UserSession.sid == sid).first()
    if not row or row.expire <= utcnow():
        return None
    return row


def destroy_session(db: Session, sid: str | None) -> None:
    if not sid:
        return
    db.query(UserSession).filter(UserSession.sid == sid).delete()
    db.commit()


def destroy_user_sessions(db: Session, user_id: str) -> None:
    """Drop every session of a user. Caller commits."""
    db.query(UserSession).filter(UserSession.user_id == user_id).delete()


def set_session_cookie(response: Response, sid: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=sid,
        max_age=settings.session_ttl_days * 24 * 3600,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


def set_oauth_state_cookie(response: Response, nonce: str) -> None:
    """Bind an OAuth round trip to the browser that started it."""
    response.set_cookie(
        key=settings.oauth_state_cookie_name,
        value=nonce,
        max_age=settings.oauth_state_ttl_minutes * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )


def clear_oauth_state_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.oauth_state_cookie_name,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
