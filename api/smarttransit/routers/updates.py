from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ..deps import get_translator, page
from ..services.content import CHANGELOG
from ..services.i18n import Translator
from .contact import EMAIL_PATTERN

router = APIRouter()


class NewsletterSignup(BaseModel):
    email: str = Field(pattern=EMAIL_PATTERN)


@router.get("")
def updates(t: Translator = Depends(get_translator)):
    entries = sorted(CHANGELOG, key=lambda u: u["date"], reverse=True)
    counts = {kind: sum(1 for u in entries if u["type"] == kind) for kind in ("feature", "improvement", "bugfix")}
    return page(
        t,
        "updates",
        stats=[
            {"label": t("updates.stats.newFeatures"), "value": counts["feature"]},
            {"label": t("updates.stats.improvements"), "value": counts["improvement"]},
            {"label": t("updates.stats.bugFixes"), "value": counts["bugfix"]},
            {"label": t("updates.stats.totalUpdates"), "value": len(entries)},
        ],
        entries=entries,
        newsletter={
            "title": t("updates.newsletter.title"),
            "description": t("updates.newsletter.description"),
            "placeholder": t("updates.newsletter.placeholder"),
            "subscribe": t("updates.newsletter.subscribe"),
            "disclaimer": t("updates.newsletter.disclaimer"),
        },
    )


@router.post("/newsletter")
def subscribe(signup: NewsletterSignup, t: Translator = Depends(get_translator)):
    return {"status": "subscribed", "email": signup.email, "message": t("updates.newsletter.success")}
