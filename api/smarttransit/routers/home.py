from fastapi import APIRouter, Depends

from ..deps import get_simulator, get_translator, navigation
from ..services.content import HOME_FEATURES
from ..services.i18n import Translator
from ..services.simulation import RouteSimulator

router = APIRouter()


def network_stats(sim: RouteSimulator) -> dict:
    routes = sim.get_routes()
    stops = [s for r in routes for s in r.stops]
    on_time = sum(1 for s in stops if s.status == "on-time")
    return {
        "activeRoutes": sum(1 for r in routes if r.status == "active"),
        "busStops": len(stops),
        "onTimePerformance": round(100 * on_time / len(stops)) if stops else 100,
    }


@router.get("/")
def home(sim: RouteSimulator = Depends(get_simulator), t: Translator = Depends(get_translator)):
    stats = network_stats(sim)
    return {
        "language": t.language,
        "navigation": navigation(t),
        "hero": {
            "title": t("homepage.hero.title"),
            "subtitle": t("homepage.hero.subtitle"),
            "actions": [
                {"label": t("homepage.hero.trackMyBus"), "href": "/tracking"},
                {"label": t("homepage.hero.searchRoute"), "href": "/routes"},
            ],
        },
        "stats": [
            {"label": t("homepage.stats.activeRoutes"), "value": str(stats["activeRoutes"])},
            {"label": t("homepage.stats.busStops"), "value": str(stats["busStops"])},
            {"label": t("homepage.stats.onTimePerformance"), "value": f"{stats['onTimePerformance']}%"},
        ],
        "features": {
            "title": t("homepage.features.title"),
            "subtitle": t("homepage.features.subtitle"),
            "items": [
                {
                    "title": t(f"homepage.features.{key}.title"),
                    "description": t(f"homepage.features.{key}.description"),
                    "cta": t(f"homepage.features.{key}.cta"),
                    "href": href,
                }
                for key, href in HOME_FEATURES
            ],
        },
    }
