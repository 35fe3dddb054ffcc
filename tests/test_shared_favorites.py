def _share(client, place_ids, title="Chiang Mai weekend", description=None):
    body = {"title": title, "placeIds": place_ids}
    if description is not None:
        body["description"] = description
    response = client.post("/api/sharedFavorites/create", json=body)
    assert response.status_code == 200
    return response.json()


def test_create_returns_share_id(user_client, add_place) -> None:
    place = add_place()

    created = _share(user_client, [place.id])

    assert isinstance(created["id"], int)
    assert created["shareId"]
    assert len(created["shareId"]) <= 32


def test_share_ids_are_unique(user_client, add_place) -> None:
    place = add_place()

    ids = {_share(user_client, [place.id])["shareId"] for _ in range(5)}

    assert len(ids) == 5


def test_get_by_share_id_is_public_and_ordered(user_client, anon_client, add_place, regular_user) -> None:
    first = add_place(name="First")
    second = add_place(name="Second")
    created = _share(user_client, [second.id, first.id], description="Two stops")

    shared = anon_client.get("/api/sharedFavorites/getByShareId", params={"shareId": created["shareId"]}).json()

    assert shared["title"] == "Chiang Mai weekend"
    assert shared["description"] == "Two stops"
    assert shared["viewCount"] == 0
    assert [p["name"] for p in shared["places"]] == ["Second", "First"]
    assert shared["creator"] == {"id": regular_user.id, "name": "Regular User", "email": "user@example.com"}


def test_unknown_share_id_returns_null(anon_client) -> None:
    response = anon_client.get("/api/sharedFavorites/getByShareId", params={"shareId": "does-not-exist"})

    assert response.status_code == 200
    assert response.json() is None


def test_increment_view_is_public(user_client, anon_client, add_place) -> None:
    place = add_place()
    share_id = _share(user_client, [place.id])["shareId"]

    for _ in range(3):
        assert anon_client.post("/api/sharedFavorites/incrementView", json={"shareId": share_id}).json() == {
            "success": True
        }

    shared = anon_client.get("/api/sharedFavorites/getByShareId", params={"shareId": share_id}).json()
    assert shared["viewCount"] == 3


def test_list_mine_counts_places(user_client, admin_client, add_place) -> None:
    first = add_place(name="First")
    second = add_place(name="Second")
    _share(user_client, [first.id, second.id], title="Both")
    _share(admin_client, [first.id], title="Admin list")

    mine = user_client.get("/api/sharedFavorites/listMine").json()

    assert [(item["title"], item["placeCount"]) for item in mine] == [("Both", 2)]


def test_create_requires_sign_in_and_places(anon_client, user_client, add_place) -> None:
    place = add_place()

    assert anon_client.post(
        "/api/sharedFavorites/create", json={"title": "x", "placeIds": [place.id]}
    ).status_code == 401
    assert user_client.post("/api/sharedFavorites/create", json={"title": "x", "placeIds": []}).status_code == 422
    assert user_client.post("/api/sharedFavorites/create", json={"title": "", "placeIds": [place.id]}).status_code == 422


def test_long_unknown_share_id_returns_null(anon_client) -> None:
    share_id = "x" * 40

    response = anon_client.get("/api/sharedFavorites/getByShareId", params={"shareId": share_id})

    assert response.status_code == 200
    assert response.json() is None
    assert anon_client.post("/api/sharedFavorites/incrementView", json={"shareId": share_id}).json() == {
        "success": True
    }
