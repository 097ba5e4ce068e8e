"""Auth dependencies for protected routes."""
from fastapi import Depends, HTTPException, Request, status

from fermentato.config import settings
from fermentato.database import get_db
from fermentato.models import Role, User, UserSession
from fermentato.services.sessions import load_session


def is_admin(user: User) -> bool:
    return user.has_role(Role.admin) or user.active_role == Role.admin.value


def is_pub_owner(user: User) -> bool:
    return user.has_role(Role.pub_owner) or user.has_role(Role.admin)


async def get_current_session(request: Request, db=Depends(get_db)) -> UserSession | None:
    """Session referenced by the cookie, or None if missing or expired."""
    return load_session(db, request.cookies.get(settings.session_cookie_name))


async def get_current_user(
    session: UserSession | None = Depends(get_current_session),
    db=Depends(get_db),
) -> User | None:
    """Get current user from the session cookie. Returns None if not authenticated."""
    if not session:
        return None
    user = db.query(User).filter(User.id == session.user_id).first()
    if not user or not user.is_active:
        return None
    return user


async def get_current_user_required(
    user: User | None = Depends(get_current_user),
) -> User:
    """Require authenticated user. Raises 401 if not logged in."""
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user


async def require_admin(user: User = Depends(get_current_user_required)) -> User:
    if not is_admin(user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


async def require_pub_owner(user: User = Depends(get_current_user_required)) -> User:
    if not is_pub_owner(user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Pub owner access required",
        )
    return user
