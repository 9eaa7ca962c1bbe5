import logging

from smarttransit.metrics import registry
from smarttransit.services.i18n import TRANSLATIONS, Translator, toggle, translate


def _leaf_keys(tree, prefix=""):
    for k, v in tree.items():
        path = f"{prefix}{k}"
        if isinstance(v, dict):
            yield from _leaf_keys(v, path + ".")
        else:
            yield path


def test_nested_lookup():
    assert translate("en", "navigation.home") == "Home"
    assert translate("hi", "navigation.home") == "होम"
    assert translate("en", "contact.form.inquiryTypes.partnership") == "Partnership"


def test_missing_key_falls_back_to_key(caplog):
    with caplog.at_level(logging.WARNING):
        assert translate("hi", "homepage.nothing.here") == "homepage.nothing.here"
    assert "homepage.nothing.here" in caplog.text


def test_branch_key_is_not_a_translation():
    assert translate("en", "homepage.hero") == "homepage.hero"


def test_unknown_language_uses_default():
    assert translate("fr", "navigation.faq") == "FAQ"
    assert Translator("xx").language == "en"


def test_catalogues_have_the_same_keys():
    assert set(_leaf_keys(TRANSLATIONS["en"])) == set(_leaf_keys(TRANSLATIONS["hi"]))


def test_toggle_and_label():
    assert toggle("en") == "hi"
    assert toggle("hi") == "en"
    assert Translator("hi").label == "हिंदी"


def test_missing_key_counts_a_miss():
    def misses():
        return registry.get_sample_value("translation_misses_total", {"language": "hi"}) or 0

    before = misses()
    translate("hi", "homepage.still.missing")
    translate("hi", "navigation.home")
    assert misses() == before + 1
