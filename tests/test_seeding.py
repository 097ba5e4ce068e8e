import pytest

from fermentato.models import Beer, BottleListEntry, Brewery, MenuItem, Pub, TapListEntry
from fermentato.seed_data import DEMO_PUBS, GLOBAL_CATALOG, ITALIAN_CATALOG
from fermentato.services.seeding import run_dataset


def _counts(db):
    return {
        model.__name__: db.query(model).count()
        for model in (Brewery, Beer, Pub, TapListEntry, BottleListEntry, MenuItem)
    }


@pytest.mark.parametrize("dataset", ["italian", "global", "demo"])
def test_seeding_twice_is_idempotent(db, dataset):
    first = run_dataset(db, dataset)
    assert first["errors"] == 0
    counts = _counts(db)

    second = run_dataset(db, dataset)
    assert second["errors"] == 0
    assert second["breweries_created"] == 0
    assert second["beers_created"] == 0
    assert second["pubs_created"] == 0
    assert _counts(db) == counts


def test_italian_catalog_counts(db):
    stats = run_dataset(db, "italian")
    assert stats["breweries_created"] == len(ITALIAN_CATALOG)
    assert stats["beers_created"] == sum(len(e["beers"]) for e in ITALIAN_CATALOG)


def test_global_catalog_counts(db):
    stats = run_dataset(db, "global")
    assert db.query(Brewery).count() == len(GLOBAL_CATALOG)
    assert stats["beers_created"] == db.query(Beer).count()


def test_demo_seeds_pubs_with_canonical_prices(db):
    stats = run_dataset(db, "demo")
    assert stats["pubs_created"] == len(DEMO_PUBS)
    hop_garden = db.query(Pub).filter(Pub.name == "The Hop Garden").one()
    assert hop_garden.owner_id is None
    assert hop_garden.opening_hours
    taps = db.query(TapListEntry).filter(TapListEntry.pub_id == hop_garden.id).all()
    assert taps
    for tap in taps:
        assert tap.prices
        assert all(p["price"] > 0 for p in tap.prices)
        assert {p["size"] for p in tap.prices} <= {"0.2L", "0.4L", "1L"}


def test_beer_lookup_is_scoped_to_brewery(db):
    # "Pilsner" exists at Weihenstephan in the global catalog; an Italian brewery
    # with a beer of the same name must still get its own row.
    run_dataset(db, "global")
    catalog = [{"brewery": {"name": "Birrificio Test"}, "beers": [{"name": "Pilsner", "style": "Pils"}]}]
    from fermentato.services.seeding import seed_catalog

    stats = seed_catalog(db, catalog, dataset="test")
    assert stats["beers_created"] == 1
    assert db.query(Beer).filter(Beer.name == "Pilsner").count() == 2


def test_unknown_dataset(db):
    with pytest.raises(KeyError):
        run_dataset(db, "martian")
