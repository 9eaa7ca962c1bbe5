from prometheus_client import CollectorRegistry, CONTENT_TYPE_LATEST, Counter, Gauge, generate_latest
from starlette.applications import Starlette
from starlette.responses import Response
from starlette.routing import Route

registry = CollectorRegistry()
ACTIVE_ROUTES = Gauge("active_routes", "Routes currently in active status", registry=registry)
ACTIVE_UPDATES = Gauge("active_schedule_updates", "Schedule updates still within their validity window", registry=registry)
STREAM_SUBSCRIBERS = Gauge("stream_subscribers", "Connected route stream clients", registry=registry)
SIMULATION_TICK_DURATION = Gauge("simulation_tick_duration_seconds", "Seconds spent in the last simulator tick", registry=registry)
TRANSLATION_MISSES = Counter(
    "translation_misses", "Translation lookups that fell back to the key", ["language"], registry=registry
)
CONTACT_SUBMISSIONS = Counter("contact_submissions", "Accepted contact form submissions", registry=registry)


def record_snapshot(data: dict):
    ACTIVE_ROUTES.set(sum(1 for r in data["routes"] if r["status"] == "active"))
    ACTIVE_UPDATES.set(len(data["updates"]))


async def metrics_endpoint(request):
    data = generate_latest(registry)
    return Response(data, media_type=CONTENT_TYPE_LATEST)

metrics_app = Starlette(routes=[Route("/", metrics_endpoint)])
