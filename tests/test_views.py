from __future__ import annotations

from tamilpanchangam.regions import find_region
from tamilpanchangam.renderers.cards import (
    render_festival_cards,
    render_festival_preview,
    render_header_card,
    render_summary,
    render_transits,
)
from tamilpanchangam.schema import parse_payload
from tamilpanchangam.views import attribute_rows, festival_preview, timing_rows


def test_festival_preview_caps_at_three(payload):
    result = parse_payload(payload)
    assert len(result.festivals) == 5
    preview = festival_preview(result)
    assert [f.name for f in preview] == ["வைகாசி விசாகம்", "ஏகாதசி", "அமாவாசை"]


def test_festival_preview_shorter_list(payload):
    payload["panchangam"]["festivals"] = payload["panchangam"]["festivals"][:1]
    assert len(festival_preview(parse_payload(payload))) == 1


def test_rows_follow_panchangam_order(payload):
    result = parse_payload(payload)
    assert [k for k, _ in attribute_rows(result)] == [
        "label_tithi",
        "label_nakshatram",
        "label_yogam",
        "label_karanam",
        "label_rasi",
    ]
    assert [v for _, v, _ in timing_rows(result)] == ["09:00 - 10:30", "13:30 - 15:00", "06:00 - 07:30"]


def test_header_card_shows_values_verbatim(payload):
    result = parse_payload(payload)
    out = render_header_card(result, find_region("Chennai"), "2024-06-15", "ta")
    for value in ("நவமி", "உத்திரம்", "சென்னை", "2024-06-15", "திதி", "ராகு காலம்"):
        assert value in out
    assert "Tithi" in render_header_card(result, find_region("Chennai"), "2024-06-15", "en")


def test_model_text_is_escaped(payload):
    payload["panchangam"]["summary"] = "<script>alert(1)</script>"
    payload["panchangam"]["festivals"][0]["name"] = 'a"b<i>'
    result = parse_payload(payload)
    assert "<script>" not in render_summary(result, "ta")
    assert "&lt;script&gt;" in render_summary(result, "ta")
    assert "<i>" not in render_festival_cards(result.festivals, "ta")


def test_preview_renders_only_what_it_is_given(payload):
    result = parse_payload(payload)
    out = render_festival_preview(festival_preview(result), "ta")
    assert "அமாவாசை" in out
    assert "சஷ்டி" not in out
    assert "பிரதோஷம்" not in out


def test_full_lists_keep_returned_order(payload):
    result = parse_payload(payload)
    cards = render_festival_cards(result.festivals, "ta")
    positions = [cards.index(f.name) for f in result.festivals]
    assert positions == sorted(positions)
    transits = render_transits(result.transits, "ta")
    assert transits.index("குரு") < transits.index("சனி")


def test_empty_lists_render_placeholder():
    assert "தகவல் இல்லை" in render_festival_cards((), "ta")
    assert "Nothing to show" in render_transits((), "en")
