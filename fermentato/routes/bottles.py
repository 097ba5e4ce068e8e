"""Bottle list (cantina) routes, scoped to a pub."""
from fastapi import APIRouter, Depends, HTTPException, Query, Response

from fermentato.database import get_db
from fermentato.models import Beer, BottleListEntry, User
from fermentato.schemas.listing import BottleCreate, BottleUpdate
from fermentato.serializers import bottle_entry_to_dict
from fermentato.services.pricing import normalize_prices
from fermentato.services.pubs import can_manage_pub, get_pub_for_read, get_pub_for_write
from fermentato.middleware.auth import get_current_user, get_current_user_required
from fermentato.utils import generate_id

router = APIRouter(prefix="/pubs/{pub_id}/bottles", tags=["bottles"])


def _get_entry(db, pub_id: str, entry_id: str) -> BottleListEntry:
    entry = db.query(BottleListEntry).filter(
        BottleListEntry.id == entry_id,
        BottleListEntry.pub_id == pub_id,
    ).first()
    if not entry:
        raise HTTPException(status_code=404, detail="Bottle list entry not found")
    return entry


def _bottle_prices(data: BottleUpdate, size: str) -> list[dict]:
    """`price` alone is shorthand for a single price at the bottle size."""
    shorthand = {size: data.price} if data.price is not None else None
    return normalize_prices(data.prices) or normalize_prices(shorthand)


@router.get("")
def get_bottles(
    pub_id: str,
    show_all: bool = Query(False, alias="all"),
    user: User | None = Depends(get_current_user),
    db=Depends(get_db),
):
    pub = get_pub_for_read(db, pub_id, user)
    q = db.query(BottleListEntry).filter(BottleListEntry.pub_id == pub.id, BottleListEntry.is_active.is_(True))
    if show_all:
        if not can_manage_pub(user, pub):
            raise HTTPException(status_code=403, detail="Not allowed to manage this pub")
    else:
        q = q.filter(BottleListEntry.is_visible.is_(True))
    entries = q.order_by(BottleListEntry.added_at).all()
    return [bottle_entry_to_dict(e) for e in entries]


@router.post("", status_code=201)
def add_bottle(
    pub_id: str,
    data: BottleCreate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    pub = get_pub_for_write(db, pub_id, user)
    if not db.query(Beer).filter(Beer.id == data.beer_id).first():
        raise HTTPException(status_code=404, detail="Beer not found")
    entry = BottleListEntry(
        id=generate_id(),
        pub_id=pub.id,
        beer_id=data.beer_id,
        bottle_size=data.bottle_size.value,
        prices=_bottle_prices(data, data.bottle_size.value),
        quantity=data.quantity,
        description=data.description,
        is_active=True if data.is_active is None else data.is_active,
        is_visible=data.is_visible,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return bottle_entry_to_dict(entry)


@router.patch("/{entry_id}")
def update_bottle(
    pub_id: str,
    entry_id: str,
    data: BottleUpdate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    pub = get_pub_for_write(db, pub_id, user)
    entry = _get_entry(db, pub.id, entry_id)
    if data.beer_id is not None:
        if not db.query(Beer).filter(Beer.id == data.beer_id).first():
            raise HTTPException(status_code=404, detail="Beer not found")
        entry.beer_id = data.beer_id
    if data.bottle_size is not None and data.bottle_size.value != entry.bottle_size:
        entry.bottle_size = data.bottle_size.value
        # A single price follows the bottle to its new size
        if len(entry.prices or []) == 1:
            entry.prices = [{"size": entry.bottle_size, "price": entry.prices[0]["price"]}]
    if data.prices is not None or data.price is not None:
        entry.prices = _bottle_prices(data, entry.bottle_size)
    for field in ("quantity", "description", "is_active", "is_visible"):
        value = getattr(data, field)
        if value is not None:
            setattr(entry, field, value)
    db.commit()
    db.refresh(entry)
    return bottle_entry_to_dict(entry)


@router.delete("/{entry_id}", status_code=204)
def remove_bottle(
    pub_id: str,
    entry_id: str,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    pub = get_pub_for_write(db, pub_id, user)
    entry = _get_entry(db, pub.id, entry_id)
    entry.is_active = False
    db.commit()
    return Response(status_code=204)
