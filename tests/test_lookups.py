from fastapi.testclient import TestClient


def _seed(client: TestClient):
    for payload in (
        {"title": "Breath of the Wild", "platform": "Switch", "franchise": "Zelda",
         "status": "Completed", "rating": 10, "playtime_hours": 120, "genres": ["Adventure", "RPG"]},
        {"title": "Diablo IV", "platform": "PC", "franchise": "Diablo",
         "status": "Playing", "rating": 7, "playtime_hours": 30, "genres": ["RPG"]},
        {"title": "Silksong", "platform": "PC", "status": "Wishlist", "genres": ["Metroidvania"]},
    ):
        resp = client.post("/games/", json=payload)
        assert resp.status_code == 200


def test_list_platforms(client: TestClient):
    _seed(client)
    resp = client.get("/platforms/")
    assert resp.status_code == 200
    assert resp.json() == ["PC", "Switch"]


def test_list_franchises(client: TestClient):
    _seed(client)
    resp = client.get("/franchises/")
    assert resp.status_code == 200
    assert resp.json() == ["Diablo", "Zelda"]


def test_list_genres(client: TestClient):
    _seed(client)
    resp = client.get("/genres/")
    assert resp.status_code == 200
    assert resp.json() == ["Adventure", "Metroidvania", "RPG"]


def test_search(client: TestClient):
    _seed(client)
    resp = client.post("/search/", json={"genre": "RPG", "sort_by": "Rating", "sort_asc": False})
    assert resp.status_code == 200
    assert [g["title"] for g in resp.json()] == ["Breath of the Wild", "Diablo IV"]


def test_search_with_empty_body_returns_everything(client: TestClient):
    _seed(client)
    resp = client.post("/search/", json={})
    assert resp.status_code == 200
    assert len(resp.json()) == 3


def test_search_rejects_unknown_sort_field(client: TestClient):
    resp = client.post("/search/", json={"sort_by": "Popularity"})
    assert resp.status_code == 422


def test_stats(client: TestClient):
    _seed(client)
    resp = client.get("/stats/")
    assert resp.status_code == 200
    stats = resp.json()
    assert stats["total_games"] == 3
    assert stats["by_status"]["completed"] == 1
    assert stats["by_status"]["wishlist"] == 1
    assert stats["completion_rate"] == 50.0
    assert stats["average_rating"] == 8.5
    assert stats["total_playtime_hours"] == 150.0
    assert stats["games_by_platform"] == [{"name": "PC", "count": 2}, {"name": "Switch", "count": 1}]
    assert stats["games_by_genre"][0] == {"name": "RPG", "count": 2}
    assert stats["recent_completions"] == ["Breath of the Wild"]


def test_stats_on_empty_catalog(client: TestClient):
    resp = client.get("/stats/")
    assert resp.status_code == 200
    stats = resp.json()
    assert stats["total_games"] == 0
    assert stats["average_rating"] is None
    assert stats["games_by_franchise"] == []


def test_health(client: TestClient):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["ok"] is True
