import pytest


@pytest.fixture
def taplist_url(owner_client):
    return f"/api/pubs/{owner_client.pub['id']}/taplist"


def test_add_tap_with_sized_prices(owner_client, taplist_url, beer_id, client):
    resp = owner_client.post(taplist_url, json={
        "beer_id": beer_id,
        "tap_number": 1,
        "prices": [{"size": "0.2L", "price": 3.5}, {"size": "0.4L", "price": "6,50"}],
    })
    assert resp.status_code == 201
    entry = resp.json()
    assert entry["prices"] == [{"size": "0.2L", "price": 3.5}, {"size": "0.4L", "price": 6.5}]
    assert entry["display_price"] == 3.5
    assert entry["beer"]["name"] == "Tipopils"

    public = client.get(taplist_url).json()
    assert [e["id"] for e in public] == [entry["id"]]


def test_add_tap_with_legacy_prices(owner_client, taplist_url, beer_id):
    resp = owner_client.post(taplist_url, json={
        "beer_id": beer_id,
        "price_small": "3",
        "price_medium": 5.5,
        "price_large": 0,
    })
    assert resp.status_code == 201
    assert resp.json()["prices"] == [{"size": "0.2L", "price": 3.0}, {"size": "0.4L", "price": 5.5}]


def test_tap_number_conflict(owner_client, taplist_url, make_beer):
    first, second = make_beer("Tipopils"), make_beer("Bibock")
    assert owner_client.post(taplist_url, json={"beer_id": first, "tap_number": 1}).status_code == 201
    resp = owner_client.post(taplist_url, json={"beer_id": second, "tap_number": 1})
    assert resp.status_code == 400

    other = owner_client.post(taplist_url, json={"beer_id": second, "tap_number": 2}).json()
    # Moving onto a used tap is rejected too
    assert owner_client.patch(f"{taplist_url}/{other['id']}", json={"tap_number": 1}).status_code == 400


def test_deleted_tap_frees_its_number(owner_client, taplist_url, make_beer, client):
    first, second = make_beer("Tipopils"), make_beer("Bibock")
    entry = owner_client.post(taplist_url, json={"beer_id": first, "tap_number": 3}).json()

    assert owner_client.delete(f"{taplist_url}/{entry['id']}").status_code == 204
    assert client.get(taplist_url).json() == []
    assert owner_client.post(taplist_url, json={"beer_id": second, "tap_number": 3}).status_code == 201


def test_invisible_taps_only_in_owner_view(owner_client, taplist_url, beer_id, client, user_client):
    entry = owner_client.post(taplist_url, json={"beer_id": beer_id, "is_visible": False}).json()
    assert client.get(taplist_url).json() == []
    assert client.get(taplist_url, params={"all": "true"}).status_code == 403
    assert user_client.get(taplist_url, params={"all": "true"}).status_code == 403
    owner_view = owner_client.get(taplist_url, params={"all": "true"}).json()
    assert [e["id"] for e in owner_view] == [entry["id"]]


def test_update_tap_prices_and_ignores_nulls(owner_client, taplist_url, beer_id):
    entry = owner_client.post(taplist_url, json={
        "beer_id": beer_id, "tap_number": 4, "prices": {"0.4L": 6}, "description": "Fresh",
    }).json()
    resp = owner_client.patch(f"{taplist_url}/{entry['id']}", json={
        "prices": {"0.3L": {"price": 5}}, "description": None,
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["prices"] == [{"size": "0.3L", "price": 5.0}]
    assert body["description"] == "Fresh"
    assert body["tap_number"] == 4


def test_non_owner_cannot_write(owner_client, taplist_url, beer_id, user_client, admin_client):
    assert user_client.post(taplist_url, json={"beer_id": beer_id}).status_code == 403
    entry = owner_client.post(taplist_url, json={"beer_id": beer_id}).json()
    assert user_client.delete(f"{taplist_url}/{entry['id']}").status_code == 403
    # Admins may manage any pub
    assert admin_client.patch(f"{taplist_url}/{entry['id']}", json={"tap_number": 9}).status_code == 200


def test_entry_of_other_pub_is_404(owner_client, taplist_url, beer_id, new_user):
    other_owner = new_user()
    other_pub = other_owner.post("/api/pubs", json={
        "name": "Birreria Due", "address": "Via Po 2", "city": "Torino",
        "vat_number": "11111111111", "business_name": "Due S.r.l.",
    }).json()
    entry = other_owner.post(f"/api/pubs/{other_pub['id']}/taplist", json={"beer_id": beer_id}).json()
    resp = owner_client.patch(f"{taplist_url}/{entry['id']}", json={"tap_number": 2})
    assert resp.status_code == 404


def test_unknown_beer_or_pub(owner_client, taplist_url, beer_id):
    assert owner_client.post(taplist_url, json={"beer_id": "missing"}).status_code == 404
    assert owner_client.get("/api/pubs/missing/taplist").status_code == 404
