import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..deps import get_simulator, get_translator, page
from ..services.content import FLEET
from ..services.i18n import Translator
from ..services.simulation import BusRoute, RouteSimulator

log = logging.getLogger(__name__)

router = APIRouter()


class DelayRequest(BaseModel):
    minutes: int | None = None


class FareRequest(BaseModel):
    fare: int | None = None


def fleet_stats(buses: list[dict]) -> dict:
    return {
        "totalBuses": len(buses),
        "activeBuses": sum(1 for b in buses if b["status"] == "active"),
        "totalPassengers": sum(b["passengers"] for b in buses),
        "totalRevenue": sum(b["revenue"] for b in buses),
        "averageDelay": sum(b["delay"] for b in buses) / len(buses) if buses else 0,
    }


def filter_fleet(buses: list[dict], search: str = "", status: str = "all", route: str = "all") -> list[dict]:
    q = search.lower()
    return [
        b for b in buses
        if (q in b["number"].lower() or q in b["driver"].lower() or q in b["route"].lower())
        and (status == "all" or b["status"] == status)
        and (route == "all" or b["route"] == route)
    ]


def _applied(route: BusRoute | None, route_id: str) -> dict:
    if route is None:
        raise HTTPException(status_code=404, detail=f"unknown route {route_id}")
    return route.to_dict()


@router.get("")
def dashboard(
    search: str = "",
    status: str = "all",
    route: str = "all",
    sim: RouteSimulator = Depends(get_simulator),
    t: Translator = Depends(get_translator),
):
    return page(
        t,
        "admin",
        stats=fleet_stats(FLEET),
        fleet=filter_fleet(FLEET, search, status, route),
        routes=[r.to_dict() for r in sim.get_routes()],
        updates=[u.to_dict() for u in sim.get_active_updates()],
    )


@router.post("/routes/{route_id}/delay")
def add_delay(route_id: str, body: DelayRequest | None = None, sim: RouteSimulator = Depends(get_simulator)):
    minutes = body.minutes if body and body.minutes is not None else sim.rng.randint(5, 24)
    log.info("manual delay of %s min on %s", minutes, route_id)
    return _applied(sim.add_delay(route_id, minutes), route_id)


@router.post("/routes/{route_id}/suspend")
def suspend_route(route_id: str, sim: RouteSimulator = Depends(get_simulator)):
    log.info("manual suspension of %s", route_id)
    return _applied(sim.suspend_route(route_id), route_id)


@router.post("/routes/{route_id}/fare")
def update_fare(route_id: str, body: FareRequest | None = None, sim: RouteSimulator = Depends(get_simulator)):
    fare = body.fare if body and body.fare is not None else sim.rng.randint(20, 39)
    log.info("manual fare of %s on %s", fare, route_id)
    return _applied(sim.update_fare(route_id, fare), route_id)
