def test_get_and_update_profile(user_client, beer_id):
    user_client.post("/api/tastings", json={"beer_id": beer_id})
    me = user_client.get("/api/users/me").json()
    assert me["tastings_count"] == 1
    assert me["favorites_count"] == 0

    resp = user_client.patch("/api/users/me", json={"nickname": "hophead", "bio": "IPA lover", "first_name": ""})
    assert resp.status_code == 200
    assert resp.json()["nickname"] == "hophead"
    assert resp.json()["first_name"] == "Test"


def test_nickname_is_unique(user_client, new_user):
    user_client.patch("/api/users/me", json={"nickname": "hophead"})
    assert new_user().patch("/api/users/me", json={"nickname": "HopHead"}).status_code == 400


def test_public_profile_hides_email(user_client, client):
    profile = client.get(f"/api/users/{user_client.user['id']}").json()
    assert profile["first_name"] == "Test"
    assert "email" not in profile
    assert client.get("/api/users/missing").status_code == 404
