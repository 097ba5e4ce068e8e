"""Ensure the configured admin account exists on startup."""
from fermentato.config import settings
from fermentato.database import SessionLocal
from fermentato.logging_config import get_logger
from fermentato.models import Role, User
from fermentato.services.auth import get_password_hash
from fermentato.utils import generate_id

logger = get_logger("fermentato.seed_admin")


def seed_admin_user() -> bool:
    """Create the ADMIN_EMAIL user, or grant it the admin role. Returns False if not configured."""
    email = settings.admin_email.strip().lower()
    if not email or not settings.admin_password:
        logger.info("ADMIN_EMAIL/ADMIN_PASSWORD not set, skipping admin seed")
        return False
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email).first()
        if user:
            if not user.has_role(Role.admin):
                user.roles = [*(user.roles or []), Role.admin.value]
                db.commit()
            return True
        user = User(
            id=generate_id(),
            email=email,
            hashed_password=get_password_hash(settings.admin_password),
            first_name="Admin",
            roles=[Role.customer.value, Role.admin.value],
            active_role=Role.admin.value,
            is_email_verified=True,
        )
        db.add(user)
        db.commit()
        return True
    finally:
        db.close()
