"""Global search route."""
from fastapi import APIRouter, Depends, Query

from fermentato.database import get_db
from fermentato.serializers import beer_to_dict, brewery_to_dict, pub_to_dict
from fermentato.services.search import MAX_LIMIT, search_beers, search_breweries, search_pubs

router = APIRouter(prefix="/search", tags=["search"])


@router.get("")
def global_search(
    q: str = Query(""),
    limit: int = Query(5, ge=1, le=MAX_LIMIT),
    db=Depends(get_db),
):
    """Top matches per group for the search bar."""
    q = q.strip()
    if not q:
        return {"pubs": [], "breweries": [], "beers": []}
    pubs, _ = search_pubs(db, q, limit=limit)
    breweries, _ = search_breweries(db, q, limit=limit)
    beers, _ = search_beers(db, q, limit=limit)
    return {
        "pubs": [pub_to_dict(p) for p in pubs],
        "breweries": [brewery_to_dict(b) for b in breweries],
        "beers": [beer_to_dict(b) for b in beers],
    }
