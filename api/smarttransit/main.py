import asyncio
import contextlib
import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .metrics import SIMULATION_TICK_DURATION, metrics_app
from .routers import about, admin, alerts, contact, faq, health, home, language, routes, stream, tiles, tracking, updates
from .services.broadcast import SnapshotBroadcaster
from .services.simulation import RouteSimulator

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
TICK_INTERVAL_SECONDS = float(os.getenv("SIMULATION_TICK_SECONDS", "1"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

log = logging.getLogger(__name__)


async def run_simulation(sim: RouteSimulator, interval: float = TICK_INTERVAL_SECONDS):
    while True:
        t0 = time.time()
        try:
            sim.tick(t0)
        except Exception:
            log.exception("simulation tick error")
        SIMULATION_TICK_DURATION.set(time.time() - t0)
        await asyncio.sleep(interval)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.state.broadcaster.start(asyncio.get_running_loop())
    task = asyncio.create_task(run_simulation(app.state.simulator))
    log.info("route simulation started (%d routes)", len(app.state.simulator.get_routes()))
    try:
        yield
    finally:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        app.state.broadcaster.stop()


def create_app(simulator: RouteSimulator | None = None) -> FastAPI:
    app = FastAPI(title="SmartTransit API", version="0.1.0", lifespan=lifespan)
    app.state.simulator = simulator or RouteSimulator()
    app.state.broadcaster = SnapshotBroadcaster(app.state.simulator)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/healthz", tags=["health"])
    app.include_router(home.router, tags=["home"])
    app.include_router(language.router, tags=["language"])
    app.include_router(routes.router, prefix="/routes", tags=["routes"])
    app.include_router(tracking.router, prefix="/tracking", tags=["tracking"])
    app.include_router(alerts.router, prefix="/alerts", tags=["alerts"])
    app.include_router(admin.router, prefix="/admin", tags=["admin"])
    app.include_router(about.router, prefix="/about", tags=["about"])
    app.include_router(contact.router, prefix="/contact", tags=["contact"])
    app.include_router(faq.router, prefix="/faq", tags=["faq"])
    app.include_router(updates.router, prefix="/updates", tags=["updates"])
    app.include_router(stream.router, prefix="/stream", tags=["stream"])
    app.include_router(tiles.router, prefix="/tiles", tags=["tiles"])

    # Expose Prometheus metrics at /metrics
    app.mount("/metrics", metrics_app)
    return app


app = create_app()
