"""Beer routes."""
from fastapi import APIRouter, Depends, HTTPException, Query

from fermentato.database import get_db
from fermentato.models import Beer, Pub, TapListEntry, User
from fermentato.schemas.catalog import BeerCreate
from fermentato.serializers import beer_to_dict, brewery_to_dict, pub_to_dict
from fermentato.services.catalog import create_beer as create_beer_service
from fermentato.services.search import DEFAULT_LIMIT, MAX_LIMIT, ilike_any, search_beers
from fermentato.middleware.auth import require_pub_owner

router = APIRouter(prefix="/beers", tags=["beers"])


@router.get("")
def list_beers(
    brewery_id: str | None = None,
    style: str | None = None,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    db=Depends(get_db),
):
    qry = db.query(Beer)
    if brewery_id:
        qry = qry.filter(Beer.brewery_id == brewery_id)
    if style:
        qry = qry.filter(ilike_any((Beer.style,), style.strip()))
    total = qry.count()
    beers = qry.order_by(Beer.name).offset(offset).limit(limit).all()
    return {"data": [beer_to_dict(b) for b in beers], "total": total, "limit": limit, "offset": offset}


@router.get("/search")
def search(
    q: str | None = None,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    random: bool = False,
    db=Depends(get_db),
):
    beers, total = search_beers(db, q, limit=limit, offset=offset, random=random)
    return {"data": [beer_to_dict(b) for b in beers], "total": total, "limit": limit, "offset": offset}


@router.get("/{beer_id}")
def get_beer(beer_id: str, db=Depends(get_db)):
    """Beer with its brewery and the pubs currently pouring it."""
    beer = db.query(Beer).filter(Beer.id == beer_id).first()
    if not beer:
        raise HTTPException(status_code=404, detail="Beer not found")
    pubs = (
        db.query(Pub)
        .join(TapListEntry, TapListEntry.pub_id == Pub.id)
        .filter(
            TapListEntry.beer_id == beer.id,
            TapListEntry.is_active.is_(True),
            TapListEntry.is_visible.is_(True),
            Pub.is_active.is_(True),
        )
        .distinct()
        .order_by(Pub.name)
        .all()
    )
    d = beer_to_dict(beer, include_brewery=False)
    d["brewery"] = brewery_to_dict(beer.brewery) if beer.brewery else None
    d["on_tap_at"] = [pub_to_dict(p) for p in pubs]
    return d


@router.post("", status_code=201)
def create_beer(
    data: BeerCreate,
    user: User = Depends(require_pub_owner),
    db=Depends(get_db),
):
    """Create a beer, naming its brewery by id or by name."""
    return beer_to_dict(create_beer_service(db, data))
