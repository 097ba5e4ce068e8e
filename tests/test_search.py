def test_search_each_entity(owner_client, make_beer, client):
    make_beer("Tipopils", style="Pilsner")
    make_beer("Ghisa", brewery="Birrificio Lambrate", style="Smoked Stout")

    beers = client.get("/api/beers/search", params={"q": "PILS"}).json()
    assert [b["name"] for b in beers["data"]] == ["Tipopils"]

    breweries = client.get("/api/breweries/search", params={"q": "lambrate"}).json()
    assert [b["name"] for b in breweries["data"]] == ["Birrificio Lambrate"]

    pubs = client.get("/api/pubs/search", params={"q": "garden"}).json()
    assert pubs["total"] == 1


def test_empty_query_returns_unfiltered_page(make_beer, client):
    make_beer("Tipopils")
    make_beer("Bibock")
    assert client.get("/api/beers/search").json()["total"] == 2
    assert len(client.get("/api/beers/search", params={"random": "true", "limit": 1}).json()["data"]) == 1


def test_wildcards_are_literal(make_beer, client):
    make_beer("Tipopils")
    assert client.get("/api/beers/search", params={"q": "%"}).json()["total"] == 0


def test_limit_is_bounded(client):
    assert client.get("/api/beers/search", params={"limit": 51}).status_code == 400
    assert client.get("/api/pubs/search", params={"limit": 0}).status_code == 400


def test_global_search(owner_client, make_beer, client):
    make_beer("Hop Candy", style="IPA")
    result = client.get("/api/search", params={"q": "hop"}).json()
    assert [p["name"] for p in result["pubs"]] == ["The Hop Garden"]
    assert [b["name"] for b in result["beers"]] == ["Hop Candy"]
    assert result["breweries"] == []
    assert client.get("/api/search").json() == {"pubs": [], "breweries": [], "beers": []}
