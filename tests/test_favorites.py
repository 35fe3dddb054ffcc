import pytest
from sqlalchemy.exc import IntegrityError

from tourism.services import favorites as favorites_service


def test_add_and_check_favorite(user_client, add_place) -> None:
    place = add_place()

    assert user_client.get("/api/favorites/isFavorite", params={"placeId": place.id}).json() is False
    assert user_client.post("/api/favorites/add", json={"placeId": place.id}).json() == {"success": True}
    assert user_client.get("/api/favorites/isFavorite", params={"placeId": place.id}).json() is True


def test_adding_twice_keeps_one_favorite(user_client, add_place) -> None:
    place = add_place()

    user_client.post("/api/favorites/add", json={"placeId": place.id})
    response = user_client.post("/api/favorites/add", json={"placeId": place.id})

    assert response.status_code == 200
    assert len(user_client.get("/api/favorites/list").json()) == 1


def test_list_includes_place_details(user_client, add_place) -> None:
    first = add_place(name="Doi Suthep")
    second = add_place(name="Wat Chedi Luang")
    user_client.post("/api/favorites/add", json={"placeId": first.id})
    user_client.post("/api/favorites/add", json={"placeId": second.id})

    favorites = user_client.get("/api/favorites/list").json()

    assert {f["placeId"] for f in favorites} == {first.id, second.id}
    by_place = {f["placeId"]: f for f in favorites}
    assert by_place[first.id]["place"]["name"] == "Doi Suthep"
    assert by_place[second.id]["place"]["imageUrl"] == "https://example.com/doi-suthep.jpg"


def test_remove_favorite(user_client, add_place) -> None:
    place = add_place()
    user_client.post("/api/favorites/add", json={"placeId": place.id})

    response = user_client.post("/api/favorites/remove", json={"placeId": place.id})

    assert response.json() == {"success": True}
    assert user_client.get("/api/favorites/list").json() == []
    assert user_client.get("/api/favorites/isFavorite", params={"placeId": place.id}).json() is False


def test_favorites_are_per_user(user_client, admin_client, add_place) -> None:
    place = add_place()
    user_client.post("/api/favorites/add", json={"placeId": place.id})

    assert admin_client.get("/api/favorites/list").json() == []
    assert admin_client.get("/api/favorites/isFavorite", params={"placeId": place.id}).json() is False


def test_favorites_require_sign_in(anon_client, add_place) -> None:
    place = add_place()

    assert anon_client.get("/api/favorites/list").status_code == 401
    assert anon_client.get("/api/favorites/isFavorite", params={"placeId": place.id}).status_code == 401
    assert anon_client.post("/api/favorites/add", json={"placeId": place.id}).status_code == 401
    assert anon_client.post("/api/favorites/remove", json={"placeId": place.id}).status_code == 401


def test_add_favorite_tolerates_concurrent_duplicate(db, add_place, regular_user, monkeypatch) -> None:
    place = add_place()
    assert favorites_service.add_favorite(db, regular_user.id, place.id) is True
    real_is_favorite = favorites_service.is_favorite
    calls = []

    def stale_first_check(*args):
        # the first lookup misses the row, as if the other insert landed right after it
        calls.append(args)
        if len(calls) == 1:
            return False
        return real_is_favorite(*args)

    monkeypatch.setattr(favorites_service, "is_favorite", stale_first_check)

    assert favorites_service.add_favorite(db, regular_user.id, place.id) is False
    assert len(favorites_service.get_user_favorites(db, regular_user.id)) == 1


def test_add_favorite_propagates_other_integrity_errors(db, regular_user, monkeypatch) -> None:
    def failing_commit() -> None:
        raise IntegrityError("INSERT INTO favorites", {}, Exception("foreign key violation"))

    monkeypatch.setattr(db, "commit", failing_commit)

    with pytest.raises(IntegrityError):
        favorites_service.add_favorite(db, regular_user.id, 9999)
