import requests

from smarttransit.routers import tiles as tiles_router
from smarttransit.services.tiles import tile_in_range, tile_url


def test_tile_range():
    assert tile_in_range(0, 0, 0)
    assert not tile_in_range(2, 4, 0)
    assert not tile_in_range(1, 0, -1)


def test_tile_url_template():
    assert tile_url(3, 2, 1).endswith("/3/2/1.png")


def test_tile_proxy(client, monkeypatch):
    monkeypatch.setattr(tiles_router, "fetch_tile", lambda z, x, y: b"\x89PNG")
    r = client.get("/tiles/3/2/1.png")
    assert r.status_code == 200
    assert r.content == b"\x89PNG"
    assert r.headers["cache-control"] == "public, max-age=86400"


def test_tile_out_of_range(client):
    assert client.get("/tiles/2/4/0.png").status_code == 404
    assert client.get("/tiles/20/0/0.png").status_code == 404


def test_tile_upstream_failure_asks_for_retry(client, monkeypatch):
    def boom(z, x, y):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(tiles_router, "fetch_tile", boom)
    r = client.get("/tiles/1/0/0.png")
    assert r.status_code == 502
    assert r.json() == {"detail": "tile unavailable", "retry": True}
