"""Pub ownership checks and derived pub state."""
from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from fermentato.middleware.auth import is_admin
from fermentato.models import Pub, PubRating, TapListEntry, User


def get_pub_or_404(db: Session, pub_id: str) -> Pub:
    pub = db.query(Pub).filter(Pub.id == pub_id).first()
    if not pub:
        raise HTTPException(status_code=404, detail="Pub not found")
    return pub


def can_manage_pub(user: User | None, pub: Pub) -> bool:
    if user is None:
        return False
    return pub.owner_id == user.id or is_admin(user)


def get_pub_for_read(db: Session, pub_id: str, user: User | None) -> Pub:
    """Pub visible to `user`. Suspended pubs are 404 except to their managers."""
    pub = get_pub_or_404(db, pub_id)
    if not pub.is_active and not can_manage_pub(user, pub):
        raise HTTPException(status_code=404, detail="Pub not found")
    return pub


def get_pub_for_write(db: Session, pub_id: str, user: User) -> Pub:
    """Pub the user may modify: 404 if missing, 403 if not owner or admin."""
    pub = get_pub_or_404(db, pub_id)
    if not can_manage_pub(user, pub):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not allowed to manage this pub",
        )
    return pub


def ensure_tap_number_free(
    db: Session, pub_id: str, tap_number: int | None, exclude_id: str | None = None
) -> None:
    """Raise 400 if another active entry of the pub already uses `tap_number`."""
    if tap_number is None:
        return
    q = db.query(TapListEntry).filter(
        TapListEntry.pub_id == pub_id,
        TapListEntry.tap_number == tap_number,
        TapListEntry.is_active.is_(True),
    )
    if exclude_id:
        q = q.filter(TapListEntry.id != exclude_id)
    if q.first():
        raise HTTPException(status_code=400, detail=f"Tap number {tap_number} is already in use")


def recompute_pub_rating(db: Session, pub: Pub) -> float:
    """Set pub.rating to the rounded average of its ratings. Caller commits."""
    db.flush()
    avg = db.query(func.avg(PubRating.rating)).filter(PubRating.pub_id == pub.id).scalar()
    pub.rating = round(float(avg), 1) if avg is not None else 0
    return pub.rating
