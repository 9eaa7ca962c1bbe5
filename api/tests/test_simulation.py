from datetime import datetime, timedelta

import pytest

from smarttransit.services.simulation import (
    MAX_UPDATES,
    RouteSimulator,
    passenger_load_for_hour,
    stop_status_for_delay,
)


def test_seed_network(t0):
    sim = RouteSimulator(start=t0)
    routes = sim.get_routes()
    assert [r.id for r in routes] == ["route-1", "route-2", "route-3", "route-4"]
    assert sum(r.buses for r in routes) == 11
    assert sim.get_route("route-4").status == "maintenance"
    assert sim.get_route("nope") is None


def test_nothing_due_before_first_interval(sim, t0):
    assert sim.tick(t0 + 5) is False
    assert sim.get_route("route-1").stops[1].estimated_arrival == 8


def test_stop_pass_spreads_duration_over_stops(sim, t0):
    assert sim.tick(t0 + 10) is True
    stops = sim.get_route("route-1").stops
    assert [s.estimated_arrival for s in stops] == [0, 11.25, 22.5, 33.75]
    assert all(s.status == "on-time" for s in stops)


def test_delay_marks_stops_delayed(sim, t0):
    sim.add_delay("route-2", 12)
    sim.tick(t0 + 10)
    stops = sim.get_route("route-2").stops
    assert stops[0].estimated_arrival == 0
    assert stops[1].estimated_arrival == 15 + 12
    assert {s.status for s in stops[1:]} == {"delayed"}


def test_negative_delay_marks_stops_early_and_clamps_at_zero(sim, t0):
    sim.add_delay("route-3", -20)
    sim.tick(t0 + 10)
    stops = sim.get_route("route-3").stops
    assert stops[1].estimated_arrival == 0
    assert stops[1].status == "early"


@pytest.mark.parametrize("value,status,delayed", [(0.1, "active", True), (0.32, "maintenance", False), (0.9, "active", False)])
def test_route_pass_branches(fixed_sim, t0, value, status, delayed):
    sim = fixed_sim(value)
    sim.tick(t0 + 30)
    for route in sim.get_routes():
        assert route.status == status
        assert (1 <= route.delays <= 15) if delayed else route.delays == 0


def test_route_pass_sets_load_from_hour(fixed_sim, t0):
    sim = fixed_sim(0.9)
    sim.tick(t0 + 30)
    expected = passenger_load_for_hour(datetime.fromtimestamp(t0 + 30).hour)
    assert {r.passenger_load for r in sim.get_routes()} == {expected}


def test_passenger_load_for_hour():
    assert passenger_load_for_hour(8) == "high"
    assert passenger_load_for_hour(18) == "high"
    assert passenger_load_for_hour(12) == "medium"
    assert passenger_load_for_hour(22) == "low"
    assert passenger_load_for_hour(6) == "low"


def test_stop_status_thresholds():
    assert stop_status_for_delay(11) == "delayed"
    assert stop_status_for_delay(10) == "on-time"
    assert stop_status_for_delay(-2) == "on-time"
    assert stop_status_for_delay(-3) == "early"


def test_updates_are_newest_first_and_capped(fixed_sim, t0):
    sim = fixed_sim(0.1)
    for i in range(1, MAX_UPDATES + 6):
        sim.tick(t0 + 30 * i)
    updates = sim.get_updates()
    assert len(updates) == MAX_UPDATES
    assert updates[0].timestamp > updates[-1].timestamp
    assert all(30 <= u.duration <= 149 for u in updates)
    assert all(u.route_id in {r.id for r in sim.get_routes()} for u in updates)


def test_no_update_generated_above_threshold(fixed_sim, t0):
    sim = fixed_sim(0.5)
    sim.tick(t0 + 30)
    assert sim.get_updates() == []


def test_active_updates_expire(fixed_sim, t0):
    sim = fixed_sim(0.1)
    sim.tick(t0 + 30)
    update = sim.get_updates()[0]
    assert sim.get_active_updates(update.timestamp + timedelta(minutes=1)) == [update]
    assert sim.get_active_updates(update.timestamp + timedelta(minutes=update.duration)) == []


def test_update_without_duration_never_expires(fixed_sim, t0):
    sim = fixed_sim(0.1)
    sim.tick(t0 + 30)
    sim.get_updates()[0].duration = None
    assert len(sim.get_active_updates(datetime.now() + timedelta(days=365))) == 1


def test_subscribe_and_unsubscribe(sim):
    seen = []
    unsubscribe = sim.subscribe(seen.append)
    sim.update_fare("route-1", 40)
    assert len(seen) == 1
    assert seen[0]["routes"][0]["fare"] == 40
    assert "updates" in seen[0]
    unsubscribe()
    sim.update_fare("route-1", 45)
    assert len(seen) == 1


def test_failing_subscriber_does_not_block_others(sim):
    seen = []

    def broken(data):
        raise RuntimeError("boom")

    sim.subscribe(broken)
    sim.subscribe(seen.append)
    sim.suspend_route("route-2")
    assert len(seen) == 1
    assert sim.get_route("route-2").status == "suspended"


def test_unknown_route_is_ignored(sim):
    seen = []
    sim.subscribe(seen.append)
    assert sim.add_delay("route-99", 5) is None
    assert sim.suspend_route("route-99") is None
    assert sim.update_fare("route-99", 10) is None
    assert seen == []


def test_manual_change_stamps_last_updated(sim):
    before = sim.get_route("route-1").last_updated
    route = sim.add_delay("route-1", 3)
    assert route.delays == 3
    assert route.last_updated >= before


def test_snapshot_is_json_shaped(sim):
    data = sim.snapshot()
    stop = data["routes"][0]["stops"][0]
    assert {"estimatedArrival", "status", "lat", "lng"} <= stop.keys()
    assert isinstance(data["routes"][0]["lastUpdated"], str)


def test_last_notified_moves_only_on_notification(sim, t0):
    initial = sim.last_notified
    assert sim.tick(t0 + 5) is False
    assert sim.last_notified == initial
    sim.tick(t0 + 10)
    assert sim.last_notified == datetime.fromtimestamp(t0 + 10)
