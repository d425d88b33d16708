from __future__ import annotations

import pytest

from tamilpanchangam.config import DEFAULT_MODEL, load_settings
from tamilpanchangam.i18n import resolve_lang, t
from tamilpanchangam.regions import REGIONS, find_region, region_names


def test_settings_defaults():
    s = load_settings({})
    assert s.api_key is None
    assert s.model == DEFAULT_MODEL
    assert s.max_tokens == 4096
    assert s.default_region == "Chennai"
    assert s.log_level == "INFO"


def test_settings_from_env():
    s = load_settings(
        {
            "ANTHROPIC_API_KEY": "k",
            "PANCHANGAM_MODEL": "claude-other",
            "PANCHANGAM_MAX_TOKENS": "1000",
            "PANCHANGAM_DEFAULT_REGION": "Madurai",
            "PANCHANGAM_LOG_LEVEL": "debug",
        }
    )
    assert (s.api_key, s.model, s.max_tokens, s.default_region, s.log_level) == (
        "k",
        "claude-other",
        1000,
        "Madurai",
        "DEBUG",
    )


def test_settings_rejects_bad_token_count():
    with pytest.raises(ValueError):
        load_settings({"PANCHANGAM_MAX_TOKENS": "lots"})


def test_region_list():
    assert len(REGIONS) == 39
    assert REGIONS[2].name == "Chennai"
    assert len(set(region_names())) == 39
    assert find_region("Puducherry").tamil_name == "புதுச்சேரி"


def test_find_region_fallbacks():
    assert find_region(None).name == "Chennai"
    assert find_region("").name == "Chennai"
    assert find_region("chennai").name == "Chennai"  # identifier match is exact
    assert find_region("Nowhere", default="Salem").name == "Salem"
    assert find_region("Nowhere", default="Nowhere").name == REGIONS[0].name


def test_translation_fallbacks():
    assert resolve_lang(None) == "ta"
    assert resolve_lang("en-IN") == "en"
    assert resolve_lang("fr") == "ta"
    assert t("label_tithi", "en") == "Tithi"
    assert t("label_tithi", "fr") == "திதி"
    assert t("no_such_key", "en") == "no_such_key"
