"""User profile routes."""
from fastapi import APIRouter, Depends, HTTPException

from sqlalchemy import func
from fermentato.database import get_db
from fermentato.models import BeerTasting, Favorite, User
from fermentato.schemas.user import UserUpdate
from fermentato.serializers import user_to_dict
from fermentato.middleware.auth import get_current_user_required

router = APIRouter(prefix="/users", tags=["users"])


def _counts(db, user_id: str) -> dict:
    tastings = db.query(func.count(BeerTasting.id)).filter(BeerTasting.user_id == user_id).scalar() or 0
    favorites = db.query(func.count(Favorite.id)).filter(Favorite.user_id == user_id).scalar() or 0
    return {"tastings_count": tastings, "favorites_count": favorites}


@router.get("/me")
def get_me(user: User = Depends(get_current_user_required), db=Depends(get_db)):
    return {**user_to_dict(user), **_counts(db, user.id)}


@router.patch("/me")
def update_me(
    data: UserUpdate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    if data.nickname is not None:
        taken = db.query(User).filter(
            func.lower(User.nickname) == data.nickname.lower(),
            User.id != user.id,
        ).first()
        if taken:
            raise HTTPException(status_code=400, detail="Nickname already taken")
    for field, value in data.model_dump(exclude_none=True).items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return user_to_dict(user)


@router.get("/{user_id}")
def get_user(user_id: str, db=Depends(get_db)):
    """Public profile: no email, no roles."""
    user = db.query(User).filter(User.id == user_id, User.is_active.is_(True)).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return {
        "id": user.id,
        "nickname": user.nickname,
        "first_name": user.first_name,
        "bio": user.bio,
        "profile_image_url": user.profile_image_url,
        "created_at": user.created_at.isoformat() if user.created_at else None,
        **_counts(db, user.id),
    }
