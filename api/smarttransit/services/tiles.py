import os

import requests

TILE_SERVER_URL = os.getenv("TILE_SERVER_URL", "https://tile.openstreetmap.org/{z}/{x}/{y}.png")
TILE_TIMEOUT_SECONDS = float(os.getenv("TILE_TIMEOUT_SECONDS", "10"))
TILE_USER_AGENT = os.getenv("TILE_USER_AGENT", "smarttransit-demo/0.1")
MAX_ZOOM = 19


def tile_in_range(z: int, x: int, y: int) -> bool:
    if z < 0 or z > MAX_ZOOM:
        return False
    n = 2 ** z
    return 0 <= x < n and 0 <= y < n


def tile_url(z: int, x: int, y: int) -> str:
    return TILE_SERVER_URL.format(z=z, x=x, y=y)


def fetch_tile(z: int, x: int, y: int) -> bytes:
    # OSM's tile policy rejects requests without an identifying User-Agent
    headers = {"User-Agent": TILE_USER_AGENT, "Accept": "image/png"}
    resp = requests.get(tile_url(z, x, y), headers=headers, timeout=TILE_TIMEOUT_SECONDS)
    resp.raise_for_status()
    return resp.content
