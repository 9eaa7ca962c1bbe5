from fastapi import APIRouter, Depends

from ..deps import get_simulator
from ..services.simulation import RouteSimulator

router = APIRouter()


@router.get("")
def healthz(sim: RouteSimulator = Depends(get_simulator)):
    return {
        "status": "ok",
        "routes": len(sim.get_routes()),
        "updates": len(sim.get_updates()),
        "subscribers": sim.subscriber_count,
    }
