"""Brewery routes."""
from fastapi import APIRouter, Depends, HTTPException, Query

from sqlalchemy import func
from fermentato.database import get_db
from fermentato.models import Beer, Brewery, User
from fermentato.schemas.catalog import BreweryCreate
from fermentato.serializers import beer_to_dict, brewery_to_dict
from fermentato.services.catalog import create_brewery as create_brewery_service
from fermentato.services.search import DEFAULT_LIMIT, MAX_LIMIT, search_breweries
from fermentato.middleware.auth import require_pub_owner

router = APIRouter(prefix="/breweries", tags=["breweries"])


def _beer_counts(db, brewery_ids: list[str]) -> dict[str, int]:
    if not brewery_ids:
        return {}
    rows = (
        db.query(Beer.brewery_id, func.count(Beer.id))
        .filter(Beer.brewery_id.in_(brewery_ids))
        .group_by(Beer.brewery_id)
        .all()
    )
    return {bid: n for bid, n in rows}


def _page(db, breweries: list[Brewery], total: int, limit: int, offset: int) -> dict:
    counts = _beer_counts(db, [b.id for b in breweries])
    return {
        "data": [brewery_to_dict(b, beer_count=counts.get(b.id, 0)) for b in breweries],
        "total": total,
        "limit": limit,
        "offset": offset,
    }


@router.get("")
def list_breweries(
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    random: bool = False,
    db=Depends(get_db),
):
    breweries, total = search_breweries(db, None, limit=limit, offset=offset, random=random)
    return _page(db, breweries, total, limit, offset)


@router.get("/all")
def all_breweries(db=Depends(get_db)):
    """Every brewery by name, for pickers."""
    breweries = db.query(Brewery).order_by(Brewery.name).all()
    return [brewery_to_dict(b) for b in breweries]


@router.get("/search")
def search(
    q: str | None = None,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    random: bool = False,
    db=Depends(get_db),
):
    breweries, total = search_breweries(db, q, limit=limit, offset=offset, random=random)
    return _page(db, breweries, total, limit, offset)


@router.get("/{brewery_id}")
def get_brewery(brewery_id: str, db=Depends(get_db)):
    brewery = db.query(Brewery).filter(Brewery.id == brewery_id).first()
    if not brewery:
        raise HTTPException(status_code=404, detail="Brewery not found")
    d = brewery_to_dict(brewery, beer_count=len(brewery.beers))
    d["beers"] = [beer_to_dict(b, include_brewery=False) for b in brewery.beers]
    return d


@router.get("/{brewery_id}/beers")
def get_brewery_beers(brewery_id: str, db=Depends(get_db)):
    brewery = db.query(Brewery).filter(Brewery.id == brewery_id).first()
    if not brewery:
        raise HTTPException(status_code=404, detail="Brewery not found")
    return [beer_to_dict(b, include_brewery=False) for b in brewery.beers]


@router.post("", status_code=201)
def create_brewery(
    data: BreweryCreate,
    user: User = Depends(require_pub_owner),
    db=Depends(get_db),
):
    return brewery_to_dict(create_brewery_service(db, data), beer_count=0)
