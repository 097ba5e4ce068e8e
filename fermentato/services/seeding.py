"""
Idempotent importers for the fixed catalogs and the demo pubs.

Every brewery, beer and pub is committed on its own, so a failing record does
not undo the ones before it. Lookups are by name: running a dataset twice
leaves the row counts unchanged.
"""
from sqlalchemy.orm import Session

from fermentato.logging_config import get_logger
from fermentato.models import Beer, BottleListEntry, MenuCategory, MenuItem, Pub, TapListEntry
from fermentato.seed_data import BEER_PLACEHOLDER_IMAGE, DEMO_PUBS, GLOBAL_CATALOG, ITALIAN_CATALOG
from fermentato.services.catalog import find_beer_by_name, find_brewery_by_name, find_or_create_brewery
from fermentato.services.pricing import normalize_prices
from fermentato.utils import generate_id

logger = get_logger("fermentato.seeding")


def _empty_stats(dataset: str) -> dict:
    return {
        "dataset": dataset,
        "breweries_created": 0,
        "beers_created": 0,
        "beers_skipped": 0,
        "pubs_created": 0,
        "pubs_skipped": 0,
        "errors": 0,
    }


def seed_catalog(db: Session, catalog: list[dict], dataset: str = "catalog") -> dict:
    """Insert breweries and beers that are not in the database yet."""
    stats = _empty_stats(dataset)
    for entry in catalog:
        brewery_fields = dict(entry["brewery"])
        name = brewery_fields.pop("name")
        try:
            brewery, created = find_or_create_brewery(db, name, **brewery_fields)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Failed to seed brewery %s", name)
            stats["errors"] += 1
            continue
        if created:
            stats["breweries_created"] += 1

        for beer_fields in entry["beers"]:
            if find_beer_by_name(db, beer_fields["name"], brewery_id=brewery.id):
                stats["beers_skipped"] += 1
                continue
            try:
                db.add(Beer(
                    id=generate_id(),
                    brewery_id=brewery.id,
                    logo_url=BEER_PLACEHOLDER_IMAGE,
                    is_bottled=True,
                    **beer_fields,
                ))
                db.commit()
                stats["beers_created"] += 1
            except Exception:
                db.rollback()
                logger.exception("Failed to seed beer %s (%s)", beer_fields["name"], name)
                stats["errors"] += 1
    logger.info(
        "Seeded %s: %d breweries, %d beers created, %d beers already present",
        dataset,
        stats["breweries_created"],
        stats["beers_created"],
        stats["beers_skipped"],
    )
    return stats


def _resolve_beer(db: Session, brewery_name: str, beer_name: str) -> Beer:
    brewery = find_brewery_by_name(db, brewery_name)
    beer = find_beer_by_name(db, beer_name, brewery_id=brewery.id) if brewery else None
    if beer is None:
        raise LookupError(f"Demo beer {beer_name} ({brewery_name}) is not in the catalog")
    return beer


def _add_demo_pub(db: Session, demo: dict) -> Pub:
    pub = Pub(id=generate_id(), is_active=True, is_verified=True, rating=0, **demo["pub"])
    db.add(pub)
    for tap in demo["taps"]:
        beer = _resolve_beer(db, *tap["beer"])
        db.add(TapListEntry(
            id=generate_id(),
            pub_id=pub.id,
            beer_id=beer.id,
            prices=normalize_prices(tap.get("prices"), tap),
            tap_number=tap["tap_number"],
            description=tap.get("description"),
            is_active=True,
            is_visible=True,
        ))
    for bottle in demo["bottles"]:
        beer = _resolve_beer(db, *bottle["beer"])
        db.add(BottleListEntry(
            id=generate_id(),
            pub_id=pub.id,
            beer_id=beer.id,
            prices=normalize_prices({bottle["bottle_size"]: bottle["price"]}),
            bottle_size=bottle["bottle_size"],
            quantity=bottle.get("quantity"),
            description=bottle.get("description"),
            is_active=True,
            is_visible=True,
        ))
    for position, category_data in enumerate(demo["menu"]):
        category = MenuCategory(
            id=generate_id(),
            pub_id=pub.id,
            name=category_data["name"],
            description=category_data.get("description"),
            is_visible=True,
            order_index=position,
        )
        db.add(category)
        for item_position, item in enumerate(category_data["items"]):
            db.add(MenuItem(
                id=generate_id(),
                category_id=category.id,
                is_visible=True,
                is_available=True,
                order_index=item_position,
                **item,
            ))
    return pub


def seed_demo(db: Session) -> dict:
    """Demo pubs with tap list, bottles and menu. Loads the Italian catalog first."""
    stats = seed_catalog(db, ITALIAN_CATALOG, dataset="demo")
    for demo in DEMO_PUBS:
        name = demo["pub"]["name"]
        if db.query(Pub).filter(Pub.name == name).first():
            stats["pubs_skipped"] += 1
            continue
        try:
            _add_demo_pub(db, demo)
            db.commit()
            stats["pubs_created"] += 1
        except Exception:
            db.rollback()
            logger.exception("Failed to seed demo pub %s", name)
            stats["errors"] += 1
    logger.info("Seeded demo pubs: %d created, %d already present", stats["pubs_created"], stats["pubs_skipped"])
    return stats


DATASETS = {
    "italian": lambda db: seed_catalog(db, ITALIAN_CATALOG, dataset="italian"),
    "global": lambda db: seed_catalog(db, GLOBAL_CATALOG, dataset="global"),
    "demo": seed_demo,
}


def run_dataset(db: Session, dataset: str) -> dict:
    """Run one named dataset. Raises KeyError for an unknown name."""
    return DATASETS[dataset](db)
