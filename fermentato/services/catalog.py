"""Brewery/beer lookups shared by the API and the seeding scripts."""
from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from fermentato.logging_config import get_logger
from fermentato.models import Beer, Brewery
from fermentato.utils import generate_id

logger = get_logger("fermentato.services.catalog")


def find_brewery_by_name(db: Session, name: str) -> Brewery | None:
    return (
        db.query(Brewery)
        .filter(func.lower(Brewery.name) == name.strip().lower())
        .order_by(Brewery.created_at)
        .first()
    )


def find_or_create_brewery(db: Session, name: str, **fields) -> tuple[Brewery, bool]:
    """Return (brewery, created). New rows are flushed, not committed."""
    brewery = find_brewery_by_name(db, name)
    if brewery:
        return brewery, False
    brewery = Brewery(
        id=generate_id(),
        name=name.strip(),
        location=fields.pop("location", None) or "",
        region=fields.pop("region", None) or "",
        **fields,
    )
    db.add(brewery)
    db.flush()
    return brewery, True


def find_beer_by_name(db: Session, name: str, brewery_id: str | None = None) -> Beer | None:
    q = db.query(Beer).filter(func.lower(Beer.name) == name.strip().lower())
    if brewery_id:
        q = q.filter(Beer.brewery_id == brewery_id)
    return q.first()


def create_beer(db: Session, data) -> Beer:
    """Create a beer from a BeerCreate; a new `brewery_name` creates the brewery too.

    Brewery and beer are committed together.
    """
    if data.brewery_id:
        brewery = db.query(Brewery).filter(Brewery.id == data.brewery_id).first()
        if not brewery:
            raise HTTPException(status_code=404, detail="Brewery not found")
    else:
        brewery, created = find_or_create_brewery(db, data.brewery_name)
        if created:
            logger.info("Created brewery %s (%s) for new beer", brewery.id, brewery.name)
    if find_beer_by_name(db, data.name, brewery_id=brewery.id):
        db.rollback()
        raise HTTPException(status_code=400, detail="Beer already exists for this brewery")
    values = data.model_dump(exclude_none=True, exclude={"brewery_id", "brewery_name"})
    beer = Beer(id=generate_id(), brewery_id=brewery.id, **values)
    db.add(beer)
    db.commit()
    db.refresh(beer)
    return beer


def create_brewery(db: Session, data) -> Brewery:
    """Create a brewery from a BreweryCreate. Names are unique, case-insensitively."""
    if find_brewery_by_name(db, data.name):
        raise HTTPException(status_code=400, detail="Brewery already exists")
    values = data.model_dump(exclude_none=True)
    values.setdefault("location", "")
    values.setdefault("region", "")
    brewery = Brewery(id=generate_id(), **values)
    db.add(brewery)
    db.commit()
    db.refresh(brewery)
    return brewery
