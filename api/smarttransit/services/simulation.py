import logging
import os
import random
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional

log = logging.getLogger(__name__)

ROUTE_UPDATE_SECONDS = int(os.getenv("ROUTE_UPDATE_SECONDS", "30"))
STOP_UPDATE_SECONDS = int(os.getenv("STOP_UPDATE_SECONDS", "10"))
MAX_UPDATES = 20

UPDATE_TYPES = ["delay", "cancellation", "route_change", "fare_change"]
SEVERITIES = ["low", "medium", "high"]


@dataclass
class RouteStop:
    id: str
    name: str
    lat: float
    lng: float
    estimated_arrival: float
    status: str = "on-time"
    actual_arrival: Optional[float] = None

    def to_dict(self) -> Dict:
        out = {
            "id": self.id,
            "name": self.name,
            "lat": self.lat,
            "lng": self.lng,
            "estimatedArrival": self.estimated_arrival,
            "status": self.status,
        }
        if self.actual_arrival is not None:
            out["actualArrival"] = self.actual_arrival
        return out


@dataclass
class BusRoute:
    id: str
    name: str
    description: str
    stops: List[RouteStop]
    duration: int
    frequency: int
    fare: int
    buses: int
    status: str
    passenger_load: str
    delays: int = 0
    last_updated: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "stops": [s.to_dict() for s in self.stops],
            "duration": self.duration,
            "frequency": self.frequency,
            "fare": self.fare,
            "buses": self.buses,
            "status": self.status,
            "lastUpdated": self.last_updated.isoformat(),
            "delays": self.delays,
            "passengerLoad": self.passenger_load,
        }


@dataclass
class ScheduleUpdate:
    route_id: str
    type: str
    message: str
    severity: str
    timestamp: datetime
    duration: Optional[int] = None  # minutes

    def is_active(self, now: datetime) -> bool:
        if not self.duration:
            return True
        return now < self.timestamp + timedelta(minutes=self.duration)

    def to_dict(self) -> Dict:
        return {
            "routeId": self.route_id,
            "type": self.type,
            "message": self.message,
            "severity": self.severity,
            "timestamp": self.timestamp.isoformat(),
            "duration": self.duration,
        }


def _stops(first_id: int, rows) -> List[RouteStop]:
    return [
        RouteStop(id=f"stop-{first_id + i}", name=name, lat=lat, lng=lng, estimated_arrival=eta)
        for i, (name, lat, lng, eta) in enumerate(rows)
    ]


def default_routes() -> List[BusRoute]:
    """Seed network: four routes of four stops each around central Delhi."""
    return [
        BusRoute(
            id="route-1",
            name="Route 1",
            description="Central Market - Tech Park",
            stops=_stops(1, [
                ("Central Market", 28.6139, 77.2090, 0),
                ("City Center", 28.6140, 77.2095, 8),
                ("Business District", 28.6145, 77.2100, 18),
                ("Tech Park", 28.6150, 77.2105, 28),
            ]),
            duration=45, frequency=15, fare=25, buses=3,
            status="active", passenger_load="medium",
        ),
        BusRoute(
            id="route-2",
            name="Route 2",
            description="Metro Station - Airport",
            stops=_stops(5, [
                ("Metro Station", 28.6135, 77.2085, 0),
                ("Railway Station", 28.6140, 77.2090, 12),
                ("Shopping Mall", 28.6145, 77.2095, 25),
                ("Airport", 28.6150, 77.2100, 40),
            ]),
            duration=60, frequency=20, fare=35, buses=2,
            status="active", passenger_load="high",
        ),
        BusRoute(
            id="route-3",
            name="Route 3",
            description="University - Mall",
            stops=_stops(9, [
                ("University", 28.6130, 77.2080, 0),
                ("Library", 28.6135, 77.2085, 6),
                ("Hospital", 28.6140, 77.2090, 15),
                ("Mall", 28.6145, 77.2095, 25),
            ]),
            duration=35, frequency=10, fare=20, buses=4,
            status="active", passenger_load="low",
        ),
        BusRoute(
            id="route-4",
            name="Route 4",
            description="Residential Area - Office Complex",
            stops=_stops(13, [
                ("Residential Area", 28.6125, 77.2075, 0),
                ("School", 28.6130, 77.2080, 10),
                ("Market", 28.6135, 77.2085, 20),
                ("Office Complex", 28.6140, 77.2090, 35),
            ]),
            duration=50, frequency=25, fare=30, buses=2,
            status="maintenance", passenger_load="medium",
        ),
    ]


def passenger_load_for_hour(hour: int) -> str:
    if 7 <= hour <= 9 or 17 <= hour <= 19:
        return "high"
    if 10 <= hour <= 16:
        return "medium"
    return "low"


def stop_status_for_delay(delay: float) -> str:
    if delay > 10:
        return "delayed"
    if delay < -2:
        return "early"
    return "on-time"


class RouteSimulator:
    """Mutable mock route state, randomized on timers and pushed to subscribers.

    ``tick`` is the only timer entry point: it runs whichever passes are due
    and is called periodically by the application's background task. Manual
    operations may arrive from request threads, so state changes happen under
    a lock; subscriber callbacks run outside it.
    """

    def __init__(
        self,
        routes: Optional[List[BusRoute]] = None,
        rng: Optional[random.Random] = None,
        route_interval: int = ROUTE_UPDATE_SECONDS,
        stop_interval: int = STOP_UPDATE_SECONDS,
        start: Optional[float] = None,
    ):
        self.rng = rng or random.Random()
        self._routes = routes if routes is not None else default_routes()
        self._updates: List[ScheduleUpdate] = []
        self._subscribers: List[Callable[[Dict], None]] = []
        self._lock = threading.RLock()
        self._intervals = {"routes": route_interval, "stops": stop_interval}
        t0 = time.time() if start is None else start
        self._due = {name: t0 + sec for name, sec in self._intervals.items()}
        self.last_notified = datetime.now()

    # timer driver

    def tick(self, now: Optional[float] = None) -> bool:
        """Run due passes; returns True when subscribers were notified."""
        now = time.time() if now is None else now
        stamp = datetime.fromtimestamp(now)
        ran = False
        with self._lock:
            if now >= self._due["routes"]:
                self._update_routes(stamp)
                self._generate_schedule_update(stamp)
                self._due["routes"] = now + self._intervals["routes"]
                ran = True
            if now >= self._due["stops"]:
                self._update_stop_times()
                self._due["stops"] = now + self._intervals["stops"]
                ran = True
        if ran:
            self._notify(stamp)
        return ran

    def _update_routes(self, now: datetime):
        for route in self._routes:
            chance = self.rng.random()
            if chance < 0.3:
                route.delays = self.rng.randint(1, 15)
                route.status = "active"
            elif chance < 0.35:
                route.status = "maintenance"
                route.delays = 0
            else:
                route.delays = 0
                route.status = "active"
            route.passenger_load = passenger_load_for_hour(now.hour)
            route.last_updated = now

    def _update_stop_times(self):
        for route in self._routes:
            for index, stop in enumerate(route.stops):
                if index == 0:
                    stop.estimated_arrival = 0
                    continue
                base = index * (route.duration / len(route.stops))
                stop.estimated_arrival = max(0, base + route.delays)
                stop.status = stop_status_for_delay(route.delays)

    def _generate_schedule_update(self, now: datetime):
        if self.rng.random() >= 0.2 or not self._routes:
            return
        route = self.rng.choice(self._routes)
        kind = self.rng.choice(UPDATE_TYPES)
        severity = self.rng.choice(SEVERITIES)
        messages = {
            "delay": f"{route.name} experiencing {route.delays} minute delays due to traffic",
            "cancellation": f"{route.name} temporarily suspended due to maintenance",
            "route_change": f"{route.name} temporarily skipping some stops",
            "fare_change": f"New fare structure effective for {route.name}",
        }
        update = ScheduleUpdate(
            route_id=route.id,
            type=kind,
            message=messages[kind],
            severity=severity,
            timestamp=now,
            duration=self.rng.randint(30, 149),
        )
        self._updates.insert(0, update)
        del self._updates[MAX_UPDATES:]
        log.info("schedule update for %s: %s (%s)", route.id, kind, severity)

    # queries

    def get_routes(self) -> List[BusRoute]:
        return self._routes

    def get_route(self, route_id: str) -> Optional[BusRoute]:
        return next((r for r in self._routes if r.id == route_id), None)

    def get_updates(self) -> List[ScheduleUpdate]:
        return self._updates

    def get_active_updates(self, now: Optional[datetime] = None) -> List[ScheduleUpdate]:
        now = now or datetime.now()
        with self._lock:
            return [u for u in self._updates if u.is_active(now)]

    def snapshot(self, now: Optional[datetime] = None) -> Dict:
        with self._lock:
            return {
                "routes": [r.to_dict() for r in self._routes],
                "updates": [u.to_dict() for u in self.get_active_updates(now)],
            }

    # subscribers

    def subscribe(self, callback: Callable[[Dict], None]) -> Callable[[], None]:
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe():
            with self._lock:
                self._subscribers = [s for s in self._subscribers if s is not callback]

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _notify(self, now: Optional[datetime] = None):
        self.last_notified = now or datetime.now()
        data = self.snapshot(now)
        for callback in list(self._subscribers):
            try:
                callback(data)
            except Exception:
                log.exception("route subscriber failed")

    # manual controls

    def _mutate(self, route_id: str, change: Callable[[BusRoute], None]) -> Optional[BusRoute]:
        with self._lock:
            route = self.get_route(route_id)
            if route is None:
                return None
            change(route)
            route.last_updated = datetime.now()
        self._notify()
        return route

    def add_delay(self, route_id: str, minutes: int) -> Optional[BusRoute]:
        return self._mutate(route_id, lambda r: setattr(r, "delays", minutes))

    def suspend_route(self, route_id: str) -> Optional[BusRoute]:
        return self._mutate(route_id, lambda r: setattr(r, "status", "suspended"))

    def update_fare(self, route_id: str, fare: int) -> Optional[BusRoute]:
        return self._mutate(route_id, lambda r: setattr(r, "fare", fare))
