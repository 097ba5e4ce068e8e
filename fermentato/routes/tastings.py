"""Personal beer tasting log routes."""
from fastapi import APIRouter, Depends, HTTPException, Response

from fermentato.database import get_db
from fermentato.models import Beer, BeerTasting, Pub, User
from fermentato.schemas.favorite import TastingCreate, TastingUpdate
from fermentato.serializers import tasting_to_dict
from fermentato.middleware.auth import get_current_user_required
from fermentato.utils import generate_id, utcnow

router = APIRouter(prefix="/tastings", tags=["tastings"])


def _get_own(db, tasting_id: str, user: User) -> BeerTasting:
    t = db.query(BeerTasting).filter(BeerTasting.id == tasting_id).first()
    if not t:
        raise HTTPException(status_code=404, detail="Tasting not found")
    if t.user_id != user.id:
        raise HTTPException(status_code=403, detail="Not your tasting")
    return t


def _apply(t: BeerTasting, values: dict) -> None:
    if "format" in values:
        values["format"] = values["format"].value
    for field, value in values.items():
        setattr(t, field, value)


def _check_pub(db, pub_id: str | None) -> None:
    if pub_id and not db.query(Pub).filter(Pub.id == pub_id).first():
        raise HTTPException(status_code=404, detail="Pub not found")


@router.get("")
def list_tastings(user: User = Depends(get_current_user_required), db=Depends(get_db)):
    tastings = (
        db.query(BeerTasting)
        .filter(BeerTasting.user_id == user.id)
        .order_by(BeerTasting.tasted_at.desc())
        .all()
    )
    return [tasting_to_dict(t) for t in tastings]


@router.post("", status_code=201)
def log_tasting(
    data: TastingCreate,
    response: Response,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    """Log a beer. A beer already in the log has its entry updated (200)."""
    if not db.query(Beer).filter(Beer.id == data.beer_id).first():
        raise HTTPException(status_code=404, detail="Beer not found")
    _check_pub(db, data.pub_id)
    t = db.query(BeerTasting).filter(
        BeerTasting.user_id == user.id,
        BeerTasting.beer_id == data.beer_id,
    ).first()
    if t:
        response.status_code = 200
        _apply(t, data.model_dump(exclude_none=True, exclude={"beer_id"}))
    else:
        t = BeerTasting(
            id=generate_id(),
            user_id=user.id,
            beer_id=data.beer_id,
            pub_id=data.pub_id,
            rating=data.rating,
            format=data.format.value,
            personal_notes=data.personal_notes,
            tasted_at=data.tasted_at or utcnow(),
        )
        db.add(t)
    db.commit()
    db.refresh(t)
    return tasting_to_dict(t)


@router.patch("/{tasting_id}")
def update_tasting(
    tasting_id: str,
    data: TastingUpdate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    t = _get_own(db, tasting_id, user)
    _check_pub(db, data.pub_id)
    _apply(t, data.model_dump(exclude_none=True))
    db.commit()
    db.refresh(t)
    return tasting_to_dict(t)


@router.delete("/{tasting_id}", status_code=204)
def delete_tasting(
    tasting_id: str,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    t = _get_own(db, tasting_id, user)
    db.delete(t)
    db.commit()
    return Response(status_code=204)
