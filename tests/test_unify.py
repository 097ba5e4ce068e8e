from fermentato.models import Beer, BeerTasting, Brewery, Favorite, TapListEntry, User
from fermentato.services.brewery_unify import find_duplicate_groups, normalize_brewery_name, unify_breweries
from fermentato.utils import generate_id


def _brewery(db, name):
    b = Brewery(id=generate_id(), name=name, location="", region="Piemonte")
    db.add(b)
    db.commit()
    return b


def _beer(db, brewery, name):
    beer = Beer(id=generate_id(), name=name, brewery_id=brewery.id, style="Ale")
    db.add(beer)
    db.commit()
    return beer


def test_normalize_brewery_name():
    assert normalize_brewery_name("Birrificio Baladin (Piozzo)") == "baladin"
    assert normalize_brewery_name("  BALADIN  ") == "baladin"
    assert normalize_brewery_name("Stone Brewing Co") == "stone co"
    assert normalize_brewery_name("Birra   del Borgo") == "del borgo"


def test_unify_moves_and_merges_beers(db):
    kept = _brewery(db, "Baladin")
    dup = _brewery(db, "Birrificio Baladin (Piozzo)")
    unrelated = _brewery(db, "Toccalmatto")
    kept_nora = _beer(db, kept, "Nora")
    dup_nora = _beer(db, dup, "Nora")
    dup_isaac = _beer(db, dup, "Isaac")

    user = User(id=generate_id(), email="taster@example.com")
    db.add(user)
    db.add(BeerTasting(id=generate_id(), user_id=user.id, beer_id=dup_nora.id))
    db.add(Favorite(id=generate_id(), user_id=user.id, item_type="beer", item_id=dup_nora.id))
    db.add(Favorite(id=generate_id(), user_id=user.id, item_type="brewery", item_id=dup.id))
    db.add(TapListEntry(id=generate_id(), pub_id="pub-x", beer_id=dup_nora.id, prices=[]))
    db.commit()

    assert [[b.name for b in g] for g in find_duplicate_groups(db)] == [["Baladin", "Birrificio Baladin (Piozzo)"]]

    kept_id, kept_nora_id, dup_nora_id, dup_isaac_id = kept.id, kept_nora.id, dup_nora.id, dup_isaac.id
    unrelated_id = unrelated.id

    result = unify_breweries(db)
    assert result == {"breweries_removed": 1, "beers_moved": 1, "beers_merged": 1}

    db.expire_all()
    assert {b.name for b in db.query(Brewery).all()} == {"Baladin", "Toccalmatto"}
    assert sorted(b.name for b in db.query(Beer).filter(Beer.brewery_id == kept_id)) == ["Isaac", "Nora"]
    assert db.get(Beer, dup_isaac_id).brewery_id == kept_id
    assert db.get(Beer, dup_nora_id) is None
    assert db.query(BeerTasting).one().beer_id == kept_nora_id
    assert db.query(TapListEntry).one().beer_id == kept_nora_id
    favorites = {(f.item_type, f.item_id) for f in db.query(Favorite).all()}
    assert favorites == {("beer", kept_nora_id), ("brewery", kept_id)}
    assert unrelated_id in {b.id for b in db.query(Brewery).all()}


def test_unify_drops_duplicate_tasting(db):
    kept = _brewery(db, "Baladin")
    dup = _brewery(db, "Birra Baladin")
    kept_nora = _beer(db, kept, "Nora")
    dup_nora = _beer(db, dup, "Nora")
    user = User(id=generate_id(), email="twice@example.com")
    db.add(user)
    db.add(BeerTasting(id=generate_id(), user_id=user.id, beer_id=kept_nora.id, rating=5))
    db.add(BeerTasting(id=generate_id(), user_id=user.id, beer_id=dup_nora.id, rating=2))
    db.commit()

    kept_nora_id = kept_nora.id
    unify_breweries(db)
    db.expire_all()
    tasting = db.query(BeerTasting).one()
    assert tasting.beer_id == kept_nora_id
    assert tasting.rating == 5


def test_unify_without_duplicates_is_noop(db):
    _brewery(db, "Baladin")
    _brewery(db, "Toccalmatto")
    assert unify_breweries(db) == {"breweries_removed": 0, "beers_moved": 0, "beers_merged": 0}
    assert db.query(Brewery).count() == 2
