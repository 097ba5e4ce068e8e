"""Auth routes."""
import secrets
import urllib.parse

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import RedirectResponse

from fermentato.config import settings
from fermentato.database import get_db
from fermentato.logging_config import get_logger
from fermentato.models import OAuthAccount, PublicanRequest, RequestStatus, Role, User, UserSession
from fermentato.schemas.auth import BecomePublicanRequest, LoginRequest, RegisterRequest, SwitchRoleRequest
from fermentato.serializers import publican_request_to_dict, user_to_dict
from fermentato.services import google_oauth
from fermentato.services.auth import create_state_token, get_password_hash, verify_password, verify_state_token
from fermentato.services.sessions import (
    clear_oauth_state_cookie,
    clear_session_cookie,
    create_session,
    destroy_session,
    set_oauth_state_cookie,
    set_session_cookie,
)
from fermentato.middleware.auth import get_current_session, get_current_user_required
from fermentato.utils import generate_id

logger = get_logger("fermentato.routes.auth")

router = APIRouter(prefix="/auth", tags=["auth"])

INVALID_CREDENTIALS = "Email o password non corretti"
SOCIAL_ONLY_ACCOUNT = "Account creato con social login. Usa Google per accedere."


def _login(db, response: Response, user: User) -> None:
    row = create_session(db, user)
    db.commit()
    set_session_cookie(response, row.sid)


@router.post("/register", status_code=201)
def register(data: RegisterRequest, response: Response, db=Depends(get_db)):
    if db.query(User).filter(User.email == data.email).first():
        raise HTTPException(status_code=400, detail="Email already registered")
    user = User(
        id=generate_id(),
        email=data.email,
        hashed_password=get_password_hash(data.password),
        first_name=data.first_name,
        last_name=data.last_name,
        roles=[Role.customer.value],
        active_role=Role.customer.value,
        is_email_verified=False,
    )
    db.add(user)
    db.flush()
    _login(db, response, user)
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user_to_dict(user)


@router.post("/login")
def login(data: LoginRequest, response: Response, db=Depends(get_db)):
    user = db.query(User).filter(User.email == data.email).first()
    if not user:
        raise HTTPException(status_code=401, detail=INVALID_CREDENTIALS)
    if not user.hashed_password:
        raise HTTPException(status_code=401, detail=SOCIAL_ONLY_ACCOUNT)
    if not verify_password(data.password, user.hashed_password):
        raise HTTPException(status_code=401, detail=INVALID_CREDENTIALS)
    if not user.is_active:
        raise HTTPException(status_code=403, detail="Account suspended")
    _login(db, response, user)
    return user_to_dict(user)


def _logout(response: Response, session: UserSession | None, db) -> None:
    if session:
        destroy_session(db, session.sid)
    clear_session_cookie(response)


@router.post("/logout")
def logout(
    response: Response,
    session: UserSession | None = Depends(get_current_session),
    db=Depends(get_db),
):
    _logout(response, session, db)
    return {"message": "Logged out"}


@router.get("/logout")
def logout_redirect(
    session: UserSession | None = Depends(get_current_session),
    db=Depends(get_db),
):
    """Browser-navigable logout: clears the session and returns to the frontend."""
    response = RedirectResponse(url=settings.frontend_url.rstrip("/") + "/", status_code=302)
    _logout(response, session, db)
    return response


@router.get("/user")
def me(user: User = Depends(get_current_user_required)):
    return user_to_dict(user)


@router.get("/roles")
def get_roles(user: User = Depends(get_current_user_required)):
    return {"roles": list(user.roles or []), "active_role": user.active_role}


@router.post("/switch-role")
def switch_role(
    data: SwitchRoleRequest,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    if not user.has_role(data.role):
        raise HTTPException(status_code=403, detail="Role not assigned to this user")
    user.active_role = data.role.value
    db.commit()
    db.refresh(user)
    return user_to_dict(user)


@router.post("/become-publican", status_code=201)
def become_publican(
    data: BecomePublicanRequest,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    """Ask an admin for the pub_owner role. One pending request per user."""
    if user.has_role(Role.pub_owner):
        raise HTTPException(status_code=400, detail="User is already a pub owner")
    pending = db.query(PublicanRequest).filter(
        PublicanRequest.user_id == user.id,
        PublicanRequest.status == RequestStatus.pending.value,
    ).first()
    if pending:
        raise HTTPException(status_code=400, detail="A request is already pending")
    req = PublicanRequest(
        id=generate_id(),
        user_id=user.id,
        **data.model_dump(mode="json"),
        status=RequestStatus.pending.value,
    )
    db.add(req)
    db.commit()
    db.refresh(req)
    return publican_request_to_dict(req)


def _callback_url(request: Request) -> str:
    return settings.google_callback_url or str(request.url_for("google_callback"))


def _frontend_redirect(path: str) -> RedirectResponse:
    frontend = settings.frontend_url.rstrip("/")
    return RedirectResponse(url=f"{frontend}{path}", status_code=302)


@router.get("/google")
def google_auth(request: Request):
    """Redirect to Google OAuth consent screen."""
    if not google_oauth.is_configured():
        raise HTTPException(status_code=503, detail="Google sign-in is not configured")
    nonce = secrets.token_urlsafe(16)
    state = create_state_token(nonce)
    response = RedirectResponse(url=google_oauth.authorization_url(_callback_url(request), state), status_code=302)
    set_oauth_state_cookie(response, nonce)
    return response


def _user_from_google(db, info: dict, token_data: dict) -> User:
    """Find or create the user for a Google profile and link the account."""
    google_id = str(info.get("sub") or info.get("id"))
    email = (info.get("email") or "").strip().lower()
    account = db.query(OAuthAccount).filter(
        OAuthAccount.provider == "google",
        OAuthAccount.provider_user_id == google_id,
    ).first()
    if account:
        account.access_token = token_data.get("access_token")
        account.refresh_token = token_data.get("refresh_token") or account.refresh_token
        return account.user

    user = db.query(User).filter(User.email == email).first()
    if not user:
        user = User(
            id=generate_id(),
            email=email,
            hashed_password=None,
            first_name=(info.get("given_name") or "").strip() or None,
            last_name=(info.get("family_name") or "").strip() or None,
            profile_image_url=(info.get("picture") or "").strip() or None,
            roles=[Role.customer.value],
            active_role=Role.customer.value,
            is_email_verified=True,
        )
        db.add(user)
        db.flush()
        logger.info("Created user %s from Google sign-in", user.id)
    db.add(OAuthAccount(
        id=generate_id(),
        user_id=user.id,
        provider="google",
        provider_user_id=google_id,
        access_token=token_data.get("access_token"),
        refresh_token=token_data.get("refresh_token"),
    ))
    return user


@router.get("/google/callback", name="google_callback")
def google_callback(
    request: Request,
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
    db=Depends(get_db),
):
    """Exchange code for tokens, fetch user info, create/link user, start a session, redirect to frontend."""
    response = _finish_google_sign_in(request, db, code, state, error)
    clear_oauth_state_cookie(response)
    return response


def _finish_google_sign_in(request: Request, db, code, state, error) -> RedirectResponse:
    if error:
        return _frontend_redirect(f"/login?error={urllib.parse.quote(error)}")
    nonce = verify_state_token(state) if state else None
    expected = request.cookies.get(settings.oauth_state_cookie_name)
    if not nonce or not expected or not secrets.compare_digest(nonce, expected):
        logger.warning("Rejected Google callback with unbound state")
        return _frontend_redirect("/login?error=invalid_state")
    if not code:
        return _frontend_redirect("/login?error=missing_code")

    token_data = google_oauth.exchange_code(code, _callback_url(request))
    if not token_data or not token_data.get("access_token"):
        return _frontend_redirect("/login?error=token_exchange_failed")
    info = google_oauth.fetch_userinfo(token_data["access_token"])
    if not info or not (info.get("sub") or info.get("id")) or not info.get("email"):
        return _frontend_redirect("/login?error=missing_profile")

    user = _user_from_google(db, info, token_data)
    if not user.is_active:
        db.commit()
        return _frontend_redirect("/login?error=account_suspended")
    response = _frontend_redirect("/")
    _login(db, response, user)
    return response
