import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from ..metrics import TRANSLATION_MISSES

log = logging.getLogger(__name__)

LANGUAGES = ("en", "hi")
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")
LANGUAGE_COOKIE = "preferred-language"

_TRANSLATIONS_DIR = Path(__file__).resolve().parent.parent / "translations"


def load_translations() -> Dict[str, dict]:
    out = {}
    for lang in LANGUAGES:
        with open(_TRANSLATIONS_DIR / f"{lang}.json", encoding="utf-8") as fh:
            out[lang] = json.load(fh)
    log.debug("translations loaded: %s", {k: len(v) for k, v in out.items()})
    return out


TRANSLATIONS = load_translations()


def _lookup(catalogue: dict, key: str) -> Optional[str]:
    current = catalogue
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current if isinstance(current, str) else None


def normalize_language(lang: Optional[str]) -> Optional[str]:
    if lang and lang in LANGUAGES:
        return lang
    return None


def translate(language: str, key: str) -> str:
    """Resolve a dotted key like ``homepage.hero.title``; missing keys come back unchanged."""
    language = normalize_language(language) or DEFAULT_LANGUAGE
    value = _lookup(TRANSLATIONS[language], key)
    if value is not None:
        return value
    TRANSLATION_MISSES.labels(language=language).inc()
    other = "hi" if language == "en" else "en"
    log.warning(
        "missing translation for %s in %s (present in %s: %s)",
        key, language, other, _lookup(TRANSLATIONS[other], key) is not None,
    )
    return key


def toggle(language: str) -> str:
    return "hi" if language == "en" else "en"


class Translator:
    """Per-request binding of a language to ``translate``."""

    def __init__(self, language: str):
        self.language = normalize_language(language) or DEFAULT_LANGUAGE

    def __call__(self, key: str) -> str:
        return translate(self.language, key)

    @property
    def label(self) -> str:
        return self("language.label")
