"""
Substring search over pubs, breweries and beers.

Case-insensitive ILIKE on the descriptive columns of each entity. Pub search
splits the query into words and requires every word to match one of the
columns, so "birra milano" finds a Milan pub whose description mentions beer.
"""
from sqlalchemy import and_, func, or_
from sqlalchemy.orm import Query, Session

from fermentato.models import Beer, Brewery, Pub

DEFAULT_LIMIT = 20
MAX_LIMIT = 50


def like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def ilike_any(columns, term: str):
    pattern = like_pattern(term)
    return or_(*[c.ilike(pattern, escape="\\") for c in columns])


def _page(qry: Query, limit: int, offset: int, random: bool) -> tuple[list, int]:
    total = qry.count()
    if random:
        qry = qry.order_by(None).order_by(func.random())
        offset = 0
    return qry.offset(offset).limit(limit).all(), total


def search_pubs(
    db: Session, q: str | None, limit: int = DEFAULT_LIMIT, offset: int = 0, random: bool = False
) -> tuple[list[Pub], int]:
    """Active pubs matching every word of `q` (rating desc). Returns (pubs, total_count)."""
    qry = db.query(Pub).filter(Pub.is_active.is_(True))
    terms = (q or "").split()
    if terms:
        columns = (Pub.name, Pub.city, Pub.address, Pub.description)
        qry = qry.filter(and_(*[ilike_any(columns, t) for t in terms]))
    qry = qry.order_by(Pub.rating.desc(), Pub.name)
    return _page(qry, limit, offset, random)


def search_breweries(
    db: Session, q: str | None, limit: int = DEFAULT_LIMIT, offset: int = 0, random: bool = False
) -> tuple[list[Brewery], int]:
    qry = db.query(Brewery)
    q = (q or "").strip()
    if q:
        qry = qry.filter(
            ilike_any((Brewery.name, Brewery.location, Brewery.region, Brewery.description), q)
        )
    qry = qry.order_by(Brewery.rating.desc(), Brewery.name)
    return _page(qry, limit, offset, random)


def search_beers(
    db: Session, q: str | None, limit: int = DEFAULT_LIMIT, offset: int = 0, random: bool = False
) -> tuple[list[Beer], int]:
    qry = db.query(Beer)
    q = (q or "").strip()
    if q:
        qry = qry.filter(ilike_any((Beer.name, Beer.style, Beer.description), q))
    qry = qry.order_by(Beer.name)
    return _page(qry, limit, offset, random)
