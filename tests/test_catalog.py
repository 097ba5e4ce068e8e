from fermentato.models import Role


def test_create_beer_with_new_brewery_name(new_user, client):
    owner = new_user(roles=[Role.pub_owner])
    resp = owner.post("/api/beers", json={
        "name": "Tipopils", "style": "Italian Pilsner", "brewery_name": "Birrificio Italiano", "abv": "5.2",
    })
    assert resp.status_code == 201
    beer = resp.json()
    assert beer["abv"] == 5.2
    assert beer["brewery"]["name"] == "Birrificio Italiano"

    breweries = client.get("/api/breweries/all").json()
    assert [b["name"] for b in breweries] == ["Birrificio Italiano"]

    # Same name at the same brewery is a duplicate
    dup = owner.post("/api/beers", json={
        "name": "tipopils", "style": "Pilsner", "brewery_id": beer["brewery_id"],
    })
    assert dup.status_code == 400


def test_create_beer_requires_brewery(new_user):
    owner = new_user(roles=[Role.pub_owner])
    resp = owner.post("/api/beers", json={"name": "Orfana", "style": "Lager"})
    assert resp.status_code == 400
    assert owner.post("/api/beers", json={"name": "Orfana", "style": "Lager", "brewery_id": "nope"}).status_code == 404


def test_duplicate_brewery(new_user):
    owner = new_user(roles=[Role.pub_owner])
    assert owner.post("/api/breweries", json={"name": "Baladin"}).status_code == 201
    assert owner.post("/api/breweries", json={"name": "baladin "}).status_code == 400


def test_brewery_detail_and_beers(make_beer, client):
    make_beer("Tipopils")
    make_beer("Bibock")
    listing = client.get("/api/breweries").json()
    assert listing["total"] == 1
    brewery = listing["data"][0]
    assert brewery["beer_count"] == 2

    detail = client.get(f"/api/breweries/{brewery['id']}").json()
    assert [b["name"] for b in detail["beers"]] == ["Bibock", "Tipopils"]
    assert len(client.get(f"/api/breweries/{brewery['id']}/beers").json()) == 2
    assert client.get("/api/breweries/missing").status_code == 404


def test_beer_list_filters(make_beer, client):
    make_beer("Tipopils", style="Pilsner")
    make_beer("Ghisa", brewery="Birrificio Lambrate", style="Smoked Stout")
    assert client.get("/api/beers").json()["total"] == 2
    stouts = client.get("/api/beers", params={"style": "stout"}).json()
    assert [b["name"] for b in stouts["data"]] == ["Ghisa"]


def test_beer_detail_lists_pubs_pouring_it(owner_client, beer_id, client):
    owner_client.post(f"/api/pubs/{owner_client.pub['id']}/taplist", json={"beer_id": beer_id, "tap_number": 1})
    detail = client.get(f"/api/beers/{beer_id}").json()
    assert detail["brewery"]["name"] == "Birrificio Italiano"
    assert [p["name"] for p in detail["on_tap_at"]] == ["The Hop Garden"]
    assert client.get("/api/beers/missing").status_code == 404
