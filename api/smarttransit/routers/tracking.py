from fastapi import APIRouter, Depends

from ..deps import get_simulator, get_translator, page
from ..services.fleet import bus_positions
from ..services.i18n import Translator
from ..services.simulation import RouteSimulator

router = APIRouter()

MAP_CENTER = {"lat": 28.6139, "lng": 77.2090}
MAP_ZOOM = 15


@router.get("")
def tracking(sim: RouteSimulator = Depends(get_simulator), t: Translator = Depends(get_translator)):
    routes = sim.get_routes()
    return page(
        t,
        "tracking",
        map={
            "center": MAP_CENTER,
            "zoom": MAP_ZOOM,
            "tileUrl": "/tiles/{z}/{x}/{y}.png",
            "attribution": "© OpenStreetMap contributors",
            "errorMessage": t("tracking.mapError"),
            "retryLabel": t("common.retry"),
        },
        routes=[
            {"id": r.id, "name": r.name, "description": r.description, "buses": r.buses, "status": r.status}
            for r in routes
        ],
        buses=bus_positions(routes),
    )


@router.get("/buses")
def buses(route_id: str | None = None, sim: RouteSimulator = Depends(get_simulator)):
    """Current simulated bus positions, optionally for one route."""
    return bus_positions(sim.get_routes(), route_id=route_id)
