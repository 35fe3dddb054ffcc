import threading

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from tourism.db.init_db import init_db
from tourism.services import places as places_service
from tourism.services.reviews import create_review


def test_list_places_is_public_and_includes_aggregates(anon_client, add_place, db, regular_user, admin) -> None:
    rated = add_place(name="Rated")
    add_place(name="Unrated")
    create_review(db, rated.id, regular_user.id, 5)
    create_review(db, rated.id, admin.id, 2)

    response = anon_client.get("/api/places/list")

    assert response.status_code == 200
    places = {place["name"]: place for place in response.json()}
    assert places["Rated"]["avgRating"] == 3.5
    assert places["Rated"]["reviewCount"] == 2
    assert places["Unrated"]["avgRating"] == 0
    assert places["Unrated"]["reviewCount"] == 0
    assert {"id", "name", "description", "category", "viewCount", "latitude"} <= set(places["Rated"])


def test_list_places_newest_first(anon_client, add_place) -> None:
    first = add_place(name="First")
    second = add_place(name="Second")

    ids = [place["id"] for place in anon_client.get("/api/places/list").json()]

    assert ids == [second.id, first.id]


def test_get_by_id_returns_place(anon_client, add_place) -> None:
    place = add_place()

    response = anon_client.get("/api/places/getById", params={"id": place.id})

    assert response.status_code == 200
    assert response.json()["id"] == place.id
    assert response.json()["name"] == "Doi Suthep"


def test_get_by_id_returns_null_for_unknown_place(anon_client) -> None:
    response = anon_client.get("/api/places/getById", params={"id": 99999})

    assert response.status_code == 200
    assert response.json() is None


def test_increment_view_increases_counter(anon_client, add_place) -> None:
    place = add_place()

    for _ in range(3):
        response = anon_client.post("/api/places/incrementView", json={"placeId": place.id})
        assert response.json() == {"success": True}

    updated = anon_client.get("/api/places/getById", params={"id": place.id}).json()
    assert updated["viewCount"] == 3


def test_concurrent_increments_are_not_lost(tmp_path) -> None:
    engine = create_engine(
        f"sqlite:///{tmp_path / 'views.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )

    # serialize writers up front so concurrent transactions wait instead of failing
    @event.listens_for(engine, "connect")
    def _disable_implicit_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    init_db(engine)
    factory = sessionmaker(bind=engine)
    with factory() as session:
        place = places_service.create_place(
            session,
            {"name": "Busy", "description": "", "category": "Temple", "latitude": "0", "longitude": "0"},
        )
        place_id = place.id

    threads_count, per_thread = 8, 5
    errors: list[Exception] = []

    def visit() -> None:
        try:
            for _ in range(per_thread):
                with factory() as session:
                    places_service.increment_view_count(session, place_id)
        except Exception as exc:  # pragma: no cover - surfaced by the assertion below
            errors.append(exc)

    threads = [threading.Thread(target=visit) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    with factory() as session:
        assert places_service.get_place_by_id(session, place_id)["view_count"] == threads_count * per_thread
    engine.dispose()


def test_admin_can_create_update_and_delete_place(admin_client) -> None:
    created = admin_client.post(
        "/api/places/create",
        json={
            "name": "Place to Delete",
            "description": "This place will be deleted",
            "category": "Test",
            "latitude": "19.0000",
            "longitude": "98.0000",
            "imageUrl": "/images/test.jpg",
            "audioUrl": "/audio/test.mp3",
        },
    )
    assert created.json() == {"success": True}

    place = next(p for p in admin_client.get("/api/places/list").json() if p["name"] == "Place to Delete")
    assert place["audioUrl"] == "/audio/test.mp3"

    updated = admin_client.post("/api/places/update", json={"id": place["id"], "name": "Renamed"})
    assert updated.json() == {"success": True}
    renamed = admin_client.get("/api/places/getById", params={"id": place["id"]}).json()
    assert renamed["name"] == "Renamed"
    assert renamed["description"] == "This place will be deleted"

    deleted = admin_client.post("/api/places/delete", json={"id": place["id"]})
    assert deleted.json() == {"success": True}
    assert admin_client.get("/api/places/getById", params={"id": place["id"]}).json() is None


def test_regular_user_cannot_manage_places(user_client, add_place) -> None:
    place = add_place()
    new_place = {
        "name": "Test Place",
        "description": "This is a test place",
        "category": "Test",
        "latitude": "19.0000",
        "longitude": "98.0000",
    }

    assert user_client.post("/api/places/create", json=new_place).status_code == 403
    assert user_client.post("/api/places/update", json={"id": place.id, "name": "x"}).status_code == 403
    assert user_client.post("/api/places/delete", json={"id": place.id}).status_code == 403


def test_anonymous_cannot_create_place(anon_client) -> None:
    response = anon_client.post(
        "/api/places/create",
        json={"name": "Test", "description": "", "category": "Test", "latitude": "1", "longitude": "2"},
    )

    assert response.status_code == 401


def test_create_place_validates_input(admin_client) -> None:
    response = admin_client.post("/api/places/create", json={"name": "Missing fields"})

    assert response.status_code == 422


def test_update_rejects_null_for_required_fields(admin_client, add_place) -> None:
    place = add_place()

    for field in ("name", "description", "category", "latitude", "longitude"):
        response = admin_client.post("/api/places/update", json={"id": place.id, field: None})
        assert response.status_code == 422, field

    assert admin_client.get("/api/places/getById", params={"id": place.id}).json()["name"] == "Doi Suthep"


def test_update_can_clear_media_urls(admin_client, add_place) -> None:
    place = add_place(video_url="https://example.com/v.mp4")

    response = admin_client.post("/api/places/update", json={"id": place.id, "imageUrl": None, "videoUrl": None})

    assert response.json() == {"success": True}
    updated = admin_client.get("/api/places/getById", params={"id": place.id}).json()
    assert updated["imageUrl"] is None
    assert updated["videoUrl"] is None
    assert updated["name"] == "Doi Suthep"
