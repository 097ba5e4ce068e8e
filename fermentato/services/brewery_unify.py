"""
Merge breweries whose names differ only by decoration
("Birrificio Baladin", "Baladin (Piozzo)", "Baladin").

The oldest brewery of each group is kept. Beers of the duplicates move to it;
a beer whose name already exists at the kept brewery is merged into that beer
(tap/bottle entries, reviews, tastings and favorites follow) and deleted.
"""
import re
from collections import defaultdict

from sqlalchemy.orm import Session

from fermentato.logging_config import get_logger
from fermentato.models import (
    Beer,
    BeerTasting,
    BottleListEntry,
    Brewery,
    Favorite,
    ItemType,
    Review,
    TapListEntry,
)

logger = get_logger("fermentato.brewery_unify")

_PARENS = re.compile(r"\s*\(.*?\)")
_DECORATION = re.compile(r"\b(birra|birrificio|brewery|brewing)\b")
_SPACES = re.compile(r"\s+")


def normalize_brewery_name(name: str) -> str:
    """'Birrificio Baladin (Piozzo)' -> 'baladin'."""
    value = _PARENS.sub("", (name or "").lower())
    value = _DECORATION.sub(" ", value)
    return _SPACES.sub(" ", value).strip()


def find_duplicate_groups(db: Session) -> list[list[Brewery]]:
    """Groups of 2+ breweries sharing a normalized name, oldest first."""
    groups: dict[str, list[Brewery]] = defaultdict(list)
    for brewery in db.query(Brewery).order_by(Brewery.created_at, Brewery.name).all():
        key = normalize_brewery_name(brewery.name)
        if key:
            groups[key].append(brewery)
    return [g for g in groups.values() if len(g) > 1]


def _move_favorites(db: Session, item_type: ItemType, from_id: str, to_id: str) -> None:
    for fav in db.query(Favorite).filter(Favorite.item_type == item_type.value, Favorite.item_id == from_id).all():
        exists_already = db.query(Favorite).filter(
            Favorite.user_id == fav.user_id,
            Favorite.item_type == item_type.value,
            Favorite.item_id == to_id,
        ).first()
        if exists_already:
            db.delete(fav)
        else:
            fav.item_id = to_id


def _merge_beer(db: Session, dup: Beer, kept: Beer) -> None:
    db.query(TapListEntry).filter(TapListEntry.beer_id == dup.id).update({TapListEntry.beer_id: kept.id})
    db.query(BottleListEntry).filter(BottleListEntry.beer_id == dup.id).update({BottleListEntry.beer_id: kept.id})
    db.query(Review).filter(Review.beer_id == dup.id).update({Review.beer_id: kept.id})
    # One tasting per (user, beer): drop the duplicate's row when the user already logged the kept beer
    for tasting in db.query(BeerTasting).filter(BeerTasting.beer_id == dup.id).all():
        exists_already = db.query(BeerTasting).filter(
            BeerTasting.user_id == tasting.user_id,
            BeerTasting.beer_id == kept.id,
        ).first()
        if exists_already:
            db.delete(tasting)
        else:
            tasting.beer_id = kept.id
    _move_favorites(db, ItemType.beer, dup.id, kept.id)
    db.flush()
    db.delete(dup)


def unify_breweries(db: Session) -> dict:
    """Merge duplicate breweries. Commits once; returns counts."""
    breweries_removed = 0
    beers_moved = 0
    beers_merged = 0
    for group in find_duplicate_groups(db):
        kept, duplicates = group[0], group[1:]
        for dup in duplicates:
            for beer in list(dup.beers):
                same_name = db.query(Beer).filter(
                    Beer.brewery_id == kept.id,
                    Beer.name == beer.name,
                ).first()
                if same_name:
                    _merge_beer(db, beer, same_name)
                    beers_merged += 1
                else:
                    beer.brewery_id = kept.id
                    beers_moved += 1
            db.flush()
            _move_favorites(db, ItemType.brewery, dup.id, kept.id)
            db.expire(dup, ["beers"])
            db.delete(dup)
            breweries_removed += 1
            logger.info("Merged brewery %r into %r", dup.name, kept.name)
    db.commit()
    return {
        "breweries_removed": breweries_removed,
        "beers_moved": beers_moved,
        "beers_merged": beers_merged,
    }
