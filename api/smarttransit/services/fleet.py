import math
import time
from typing import Dict, List, Optional

from .simulation import BusRoute

RADIUS_DEG = 0.005
BASE_PERIOD_MS = 50000


def _centroid(route: BusRoute):
    lat = sum(s.lat for s in route.stops) / len(route.stops)
    lng = sum(s.lng for s in route.stops) / len(route.stops)
    return lat, lng


def bus_status(route: BusRoute) -> str:
    if route.status != "active":
        return route.status
    return "delayed" if route.delays > 0 else "active"


def bus_positions(routes: List[BusRoute], now_ms: Optional[float] = None, route_id: Optional[str] = None) -> List[Dict]:
    """Positions for every bus on every route, derived from wall-clock time only.

    Each bus circles its route's stop centroid; phase and period depend on the
    bus's index so that buses on the same route stay apart.
    """
    now_ms = time.time() * 1000 if now_ms is None else now_ms
    out = []
    n = 0
    for route in routes:
        if route_id and route.id != route_id:
            n += route.buses
            continue
        lat0, lng0 = _centroid(route)
        for i in range(route.buses):
            period = BASE_PERIOD_MS + 10000 * n
            phase = n + 2 * math.pi * i / route.buses
            moving = route.status == "active"
            angle = now_ms / period + phase if moving else phase
            out.append(
                {
                    "id": f"bus-{n + 1:03d}",
                    "routeId": route.id,
                    "route": route.name,
                    "lat": lat0 + math.sin(angle) * RADIUS_DEG,
                    "lng": lng0 + math.cos(angle) * RADIUS_DEG,
                    "heading": ((now_ms / (1000 + 200 * n)) + 45 * n) % 360 if moving else 0,
                    "speed": 25 + math.sin(now_ms / 25000 + n) * 5 if moving else 0,
                    "passengers": math.floor(30 + math.sin(now_ms / 40000 + n) * 15) if moving else 0,
                    "status": bus_status(route),
                    "ts": int(now_ms / 1000),
                }
            )
            n += 1
    return out
