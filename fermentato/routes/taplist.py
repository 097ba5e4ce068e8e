"""Tap list routes, scoped to a pub."""
from fastapi import APIRouter, Depends, HTTPException, Query, Response

from fermentato.database import get_db
from fermentato.models import Beer, TapListEntry, User
from fermentato.schemas.listing import TapListCreate, TapListUpdate
from fermentato.serializers import tap_entry_to_dict
from fermentato.services.pricing import normalize_prices
from fermentato.services.pubs import can_manage_pub, ensure_tap_number_free, get_pub_for_read, get_pub_for_write
from fermentato.middleware.auth import get_current_user, get_current_user_required
from fermentato.utils import generate_id

router = APIRouter(prefix="/pubs/{pub_id}/taplist", tags=["taplist"])


def _get_entry(db, pub_id: str, entry_id: str) -> TapListEntry:
    entry = db.query(TapListEntry).filter(
        TapListEntry.id == entry_id,
        TapListEntry.pub_id == pub_id,
    ).first()
    if not entry:
        raise HTTPException(status_code=404, detail="Tap list entry not found")
    return entry


def _require_beer(db, beer_id: str) -> Beer:
    beer = db.query(Beer).filter(Beer.id == beer_id).first()
    if not beer:
        raise HTTPException(status_code=404, detail="Beer not found")
    return beer


@router.get("")
def get_taplist(
    pub_id: str,
    show_all: bool = Query(False, alias="all"),
    user: User | None = Depends(get_current_user),
    db=Depends(get_db),
):
    """Active taps ordered by tap number. `all=true` (owner/admin) adds hidden ones."""
    pub = get_pub_for_read(db, pub_id, user)
    q = db.query(TapListEntry).filter(TapListEntry.pub_id == pub.id, TapListEntry.is_active.is_(True))
    if show_all:
        if not can_manage_pub(user, pub):
            raise HTTPException(status_code=403, detail="Not allowed to manage this pub")
    else:
        q = q.filter(TapListEntry.is_visible.is_(True))
    entries = q.order_by(TapListEntry.tap_number.is_(None), TapListEntry.tap_number, TapListEntry.added_at).all()
    return [tap_entry_to_dict(e) for e in entries]


@router.post("", status_code=201)
def add_to_taplist(
    pub_id: str,
    data: TapListCreate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    pub = get_pub_for_write(db, pub_id, user)
    _require_beer(db, data.beer_id)
    ensure_tap_number_free(db, pub.id, data.tap_number)
    entry = TapListEntry(
        id=generate_id(),
        pub_id=pub.id,
        beer_id=data.beer_id,
        prices=normalize_prices(data.prices, data.legacy_prices()),
        tap_number=data.tap_number,
        description=data.description,
        is_active=True if data.is_active is None else data.is_active,
        is_visible=data.is_visible,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return tap_entry_to_dict(entry)


@router.patch("/{entry_id}")
def update_taplist_entry(
    pub_id: str,
    entry_id: str,
    data: TapListUpdate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    pub = get_pub_for_write(db, pub_id, user)
    entry = _get_entry(db, pub.id, entry_id)
    if data.beer_id is not None:
        _require_beer(db, data.beer_id)
        entry.beer_id = data.beer_id
    tap_number = data.tap_number if data.tap_number is not None else entry.tap_number
    becomes_active = data.is_active if data.is_active is not None else entry.is_active
    if becomes_active:
        ensure_tap_number_free(db, pub.id, tap_number, exclude_id=entry.id)
    if data.has_price_input():
        entry.prices = normalize_prices(data.prices, data.legacy_prices())
    for field in ("tap_number", "description", "is_active", "is_visible"):
        value = getattr(data, field)
        if value is not None:
            setattr(entry, field, value)
    db.commit()
    db.refresh(entry)
    return tap_entry_to_dict(entry)


@router.delete("/{entry_id}", status_code=204)
def remove_from_taplist(
    pub_id: str,
    entry_id: str,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    """Take a beer off tap. The row is kept, deactivated."""
    pub = get_pub_for_write(db, pub_id, user)
    entry = _get_entry(db, pub.id, entry_id)
    entry.is_active = False
    db.commit()
    return Response(status_code=204)
