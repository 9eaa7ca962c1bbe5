import logging

import requests
from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import JSONResponse

from ..services.tiles import fetch_tile, tile_in_range

log = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{z}/{x}/{y}.png")
def tile(z: int, x: int, y: int):
    if not tile_in_range(z, x, y):
        raise HTTPException(status_code=404, detail="tile out of range")
    try:
        data = fetch_tile(z, x, y)
    except requests.RequestException as e:
        log.warning("tile %s/%s/%s fetch error: %s", z, x, y, e)
        return JSONResponse(status_code=502, content={"detail": "tile unavailable", "retry": True})
    return Response(content=data, media_type="image/png", headers={
        "Cache-Control": "public, max-age=86400"
    })
