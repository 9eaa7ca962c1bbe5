from fastapi import Depends, Query, Request

from .services.content import NAVIGATION
from .services.i18n import DEFAULT_LANGUAGE, LANGUAGE_COOKIE, Translator, normalize_language
from .services.simulation import RouteSimulator


def get_simulator(request: Request) -> RouteSimulator:
    return request.app.state.simulator


def get_language(request: Request, lang: str | None = Query(default=None)) -> str:
    """Query parameter wins, then the preference cookie, then the default."""
    return (
        normalize_language(lang)
        or normalize_language(request.cookies.get(LANGUAGE_COOKIE))
        or DEFAULT_LANGUAGE
    )


def get_translator(language: str = Depends(get_language)) -> Translator:
    return Translator(language)


def navigation(t: Translator) -> list[dict]:
    return [{"name": t(item["key"]), "href": item["href"]} for item in NAVIGATION]


def page(t: Translator, section: str, **body) -> dict:
    return {
        "language": t.language,
        "title": t(f"{section}.title"),
        "subtitle": t(f"{section}.subtitle"),
        "navigation": navigation(t),
        **body,
    }
