from fastapi import APIRouter, Depends

from ..deps import get_translator, page
from ..services.content import ABOUT
from ..services.i18n import Translator

router = APIRouter()


@router.get("")
def about(t: Translator = Depends(get_translator)):
    return page(t, "about", **ABOUT)
