"""Pub routes: directory, registration, owner dashboard, ratings."""
from fastapi import APIRouter, Depends, Query

from fermentato.database import get_db
from fermentato.logging_config import get_logger
from fermentato.models import Pub, PubRating, Role, User
from fermentato.schemas.pub import PubRatingCreate, PubRegistration, PubUpdate
from fermentato.serializers import pub_to_dict
from fermentato.services.pubs import (
    can_manage_pub,
    get_pub_for_read,
    get_pub_for_write,
    get_pub_or_404,
    recompute_pub_rating,
)
from fermentato.services.search import DEFAULT_LIMIT, MAX_LIMIT, search_pubs
from fermentato.middleware.auth import get_current_user, get_current_user_required
from fermentato.utils import generate_id

logger = get_logger("fermentato.routes.pubs")

router = APIRouter(tags=["pubs"])


@router.get("/pubs")
def list_pubs(
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    random: bool = False,
    db=Depends(get_db),
):
    """Active pubs, best rated first."""
    pubs, total = search_pubs(db, None, limit=limit, offset=offset, random=random)
    return {"data": [pub_to_dict(p) for p in pubs], "total": total, "limit": limit, "offset": offset}


@router.get("/pubs/search")
def search(
    q: str | None = None,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    random: bool = False,
    db=Depends(get_db),
):
    pubs, total = search_pubs(db, q, limit=limit, offset=offset, random=random)
    return {"data": [pub_to_dict(p) for p in pubs], "total": total, "limit": limit, "offset": offset}


@router.get("/my-pubs")
def my_pubs(user: User = Depends(get_current_user_required), db=Depends(get_db)):
    """Pubs owned by the current user, including inactive ones."""
    pubs = db.query(Pub).filter(Pub.owner_id == user.id).order_by(Pub.name).all()
    return [pub_to_dict(p, private=True) for p in pubs]


@router.get("/pubs/{pub_id}")
def get_pub(
    pub_id: str,
    user: User | None = Depends(get_current_user),
    db=Depends(get_db),
):
    pub = get_pub_for_read(db, pub_id, user)
    return pub_to_dict(pub, private=can_manage_pub(user, pub))


@router.post("/pubs", status_code=201)
def register_pub(
    data: PubRegistration,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    """Register a pub owned by the current user, who becomes a pub owner."""
    pub = Pub(
        id=generate_id(),
        owner_id=user.id,
        is_active=True,
        is_verified=False,
        rating=0,
        **data.model_dump(mode="json", exclude_none=True),
    )
    db.add(pub)
    if not user.has_role(Role.pub_owner):
        user.roles = [*(user.roles or []), Role.pub_owner.value]
    db.commit()
    db.refresh(pub)
    logger.info("User %s registered pub %s (%s)", user.id, pub.id, pub.name)
    return pub_to_dict(pub, private=True)


@router.patch("/pubs/{pub_id}")
def update_pub(
    pub_id: str,
    data: PubUpdate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    pub = get_pub_for_write(db, pub_id, user)
    for field, value in data.model_dump(mode="json", exclude_none=True).items():
        setattr(pub, field, value)
    db.commit()
    db.refresh(pub)
    return pub_to_dict(pub, private=True)


@router.post("/pubs/{pub_id}/ratings")
def rate_pub(
    pub_id: str,
    data: PubRatingCreate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    """Upsert the user's rating for the pub and refresh the pub average."""
    pub = get_pub_or_404(db, pub_id)
    row = db.query(PubRating).filter(PubRating.user_id == user.id, PubRating.pub_id == pub.id).first()
    if row:
        row.rating = data.rating
    else:
        db.add(PubRating(id=generate_id(), user_id=user.id, pub_id=pub.id, rating=data.rating))
    recompute_pub_rating(db, pub)
    db.commit()
    return {"pub_id": pub.id, "rating": data.rating, "pub_rating": pub.rating}
