"""Auth service: password hashing, OAuth state tokens."""
from datetime import datetime, timedelta
import bcrypt
from jose import JWTError, jwt

from fermentato.config import settings

STATE_ALGORITHM = "HS256"


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))


def get_password_hash(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def create_state_token(nonce: str) -> str:
    """Signed, short-lived `state` for the Google OAuth round trip."""
    expire = datetime.utcnow() + timedelta(minutes=settings.oauth_state_ttl_minutes)
    payload = {"nonce": nonce, "purpose": "oauth_state", "exp": expire}
    return jwt.encode(payload, settings.session_secret, algorithm=STATE_ALGORITHM)


def verify_state_token(token: str) -> str | None:
    """Return the nonce carried by a valid state token, else None."""
    try:
        payload = jwt.decode(token, settings.session_secret, algorithms=[STATE_ALGORITHM])
    except JWTError:
        return None
    if payload.get("purpose") != "oauth_state":
        return None
    return payload.get("nonce")
