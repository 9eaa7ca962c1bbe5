from typing import Literal

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from ..deps import get_language, navigation
from ..services.i18n import LANGUAGE_COOKIE, LANGUAGES, Translator, toggle

router = APIRouter()

COOKIE_MAX_AGE = 365 * 24 * 3600


class LanguageChoice(BaseModel):
    language: Literal["en", "hi"]


def _describe(language: str) -> dict:
    t = Translator(language)
    return {"language": language, "label": t.label, "available": list(LANGUAGES)}


def _remember(response: Response, language: str):
    response.set_cookie(LANGUAGE_COOKIE, language, max_age=COOKIE_MAX_AGE, samesite="lax")


@router.get("/language")
def current_language(language: str = Depends(get_language)):
    return _describe(language)


@router.put("/language")
def set_language(choice: LanguageChoice, response: Response):
    _remember(response, choice.language)
    return _describe(choice.language)


@router.post("/language/toggle")
def toggle_language(response: Response, language: str = Depends(get_language)):
    flipped = toggle(language)
    _remember(response, flipped)
    return _describe(flipped)


@router.get("/navigation")
def navigation_menu(language: str = Depends(get_language)):
    t = Translator(language)
    return {"language": language, "label": t.label, "items": navigation(t)}
