import asyncio
import logging
import os
import uuid
from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ..deps import get_translator, page
from ..metrics import CONTACT_SUBMISSIONS
from ..services.content import CONTACT_INFO, INQUIRY_TYPES
from ..services.i18n import Translator

log = logging.getLogger(__name__)

router = APIRouter()

SUBMIT_DELAY_SECONDS = float(os.getenv("CONTACT_SUBMIT_DELAY_SECONDS", "2"))
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ContactForm(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(pattern=EMAIL_PATTERN)
    phone: str | None = None
    category: Literal["general", "support", "feedback", "partnership"] | None = None
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


def form_labels(t: Translator) -> dict:
    fields = ["name", "email", "phone", "subject", "message"]
    return {
        "fields": {
            f: {"label": t(f"contact.form.{f}"), "placeholder": t(f"contact.form.{f}Placeholder")}
            for f in fields
        },
        "required": ["name", "email", "subject", "message"],
        "inquiryType": {
            "label": t("contact.form.inquiryType"),
            "placeholder": t("contact.form.inquiryPlaceholder"),
            "options": [{"value": v, "label": t(f"contact.form.inquiryTypes.{v}")} for v in INQUIRY_TYPES],
        },
        "submit": t("contact.form.submit"),
    }


@router.get("")
def contact(t: Translator = Depends(get_translator)):
    return page(t, "contact", info=CONTACT_INFO, form=form_labels(t))


@router.post("")
async def submit(form: ContactForm, t: Translator = Depends(get_translator)):
    # Nothing is sent anywhere; the delay stands in for a real submission.
    await asyncio.sleep(SUBMIT_DELAY_SECONDS)
    reference = uuid.uuid4().hex[:8]
    CONTACT_SUBMISSIONS.inc()
    log.info("contact form %s accepted (category=%s)", reference, form.category or "none")
    return {"status": "submitted", "reference": reference, "message": t("contact.form.success")}
