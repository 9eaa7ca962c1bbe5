from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_simulator, get_translator, page
from ..services.i18n import Translator
from ..services.simulation import BusRoute, RouteSimulator
from ..services.time_utils import add_minutes_to_current_time, format_time

router = APIRouter()


def matches_trip(route: BusRoute, origin: str, destination: str) -> bool:
    """True when a stop matching ``origin`` comes before one matching ``destination``."""
    names = [s.name.lower() for s in route.stops]
    origin, destination = origin.strip().lower(), destination.strip().lower()
    if not origin and not destination:
        return True
    if not destination:
        return any(origin in n for n in names)
    if not origin:
        return any(destination in n for n in names)
    for i, name in enumerate(names):
        if origin in name and any(destination in later for later in names[i + 1:]):
            return True
    return False


def _get_or_404(sim: RouteSimulator, route_id: str) -> BusRoute:
    route = sim.get_route(route_id)
    if route is None:
        raise HTTPException(status_code=404, detail=f"unknown route {route_id}")
    return route


@router.get("")
def list_routes(
    origin: str = Query(default="", alias="from"),
    destination: str = Query(default="", alias="to"),
    sim: RouteSimulator = Depends(get_simulator),
    t: Translator = Depends(get_translator),
):
    routes = [r for r in sim.get_routes() if matches_trip(r, origin, destination)]
    return page(
        t,
        "routes",
        search={
            "label": t("routes.searchRoutes"),
            "from": origin,
            "to": destination,
            "placeholders": {"from": t("routes.from"), "to": t("routes.to")},
        },
        routes=[r.to_dict() for r in routes],
        updates={
            "title": t("routes.liveUpdates"),
            "items": [u.to_dict() for u in sim.get_active_updates()],
        },
        lastUpdated=sim.last_notified.isoformat(),
    )


@router.get("/{route_id}")
def get_route(route_id: str, sim: RouteSimulator = Depends(get_simulator)):
    return _get_or_404(sim, route_id).to_dict()


@router.get("/{route_id}/timeline")
def route_timeline(
    route_id: str,
    sim: RouteSimulator = Depends(get_simulator),
    t: Translator = Depends(get_translator),
):
    route = _get_or_404(sim, route_id)
    now = datetime.now()
    # the bus sits at the origin; it is heading to the first stop still ahead of it
    next_stop = None
    if route.status == "active":
        next_stop = next((s for s in route.stops if s.estimated_arrival > 0), None)
    return {
        "language": t.language,
        "title": f"{route.name} - {t('routes.timeline')}",
        "description": route.description,
        "currentTime": {"label": t("routes.currentTime"), "value": format_time(now)},
        "nextStopId": next_stop.id if next_stop else None,
        "stops": [
            {
                **stop.to_dict(),
                "arrivalTime": add_minutes_to_current_time(stop.estimated_arrival, now),
                "isNext": next_stop is not None and stop.id == next_stop.id,
            }
            for stop in route.stops
        ],
    }
