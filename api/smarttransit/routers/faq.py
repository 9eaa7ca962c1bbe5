from fastapi import APIRouter, Depends

from ..deps import get_translator, page
from ..services.content import FAQ
from ..services.i18n import Translator

router = APIRouter()


def search_faq(term: str) -> list[dict]:
    term = term.lower()
    out = []
    for category in FAQ:
        questions = [
            q for q in category["questions"]
            if term in q["question"].lower() or term in q["answer"].lower()
        ]
        if questions:
            out.append({**category, "questions": questions})
    return out


@router.get("")
def faq(q: str = "", t: Translator = Depends(get_translator)):
    return page(t, "faq", searchPlaceholder=t("faq.searchPlaceholder"), query=q, categories=search_faq(q))
