from fastapi import APIRouter, Depends, Query

from ..deps import get_simulator, get_translator, page
from ..services.content import SERVICE_ALERTS
from ..services.i18n import Translator
from ..services.simulation import RouteSimulator

router = APIRouter()


@router.get("")
def alerts(
    kind: str | None = Query(default=None, alias="type"),
    priority: str | None = None,
    sim: RouteSimulator = Depends(get_simulator),
    t: Translator = Depends(get_translator),
):
    selected = [
        a for a in SERVICE_ALERTS
        if (not kind or a["type"] == kind) and (not priority or a["priority"] == priority)
    ]
    return page(
        t,
        "alerts",
        active=[a for a in selected if a["status"] == "active"],
        resolved=[a for a in selected if a["status"] == "resolved"],
        live=[u.to_dict() for u in sim.get_active_updates()],
    )
