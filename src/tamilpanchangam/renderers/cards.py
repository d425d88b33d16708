"""HTML card renderer for the three Panchangam views.

Every function returns an HTML fragment for st.markdown(..., unsafe_allow_html=True).
All model-supplied text passes through html.escape; the model output is untrusted.
Class names are styled by the stylesheet injected in app.py.
"""

from __future__ import annotations

import html

from tamilpanchangam.i18n import t
from tamilpanchangam.models import Festival, Panchangam, PlanetaryPosition, Region, Transit
from tamilpanchangam.views import attribute_rows, auspicious_rows, timing_rows

_ATTRIBUTE_ICONS: dict[str, str] = {
    "label_tithi": "☀",
    "label_nakshatram": "☾",
    "label_yogam": "✦",
    "label_karanam": "ⓘ",
    "label_rasi": "★",
    "label_chandrashtamam": "ⓘ",
    "label_nalla_neram": "☀",
    "label_gowri_nalla_neram": "☀",
}


def _e(value: str) -> str:
    return html.escape(value, quote=True)


def _item(label_key: str, value: str, lang: str, accent: str = "") -> str:
    cls = f"pc-item pc-item-{accent}" if accent else "pc-item"
    return (
        f'<div class="{cls}">'
        f'<span class="pc-icon">{_ATTRIBUTE_ICONS.get(label_key, "•")}</span>'
        f"<div><p class='pc-label'>{_e(t(label_key, lang))}</p>"
        f"<p class='pc-value'>{_e(value)}</p></div>"
        f"</div>"
    )


def render_header_card(result: Panchangam, region: Region, date_str: str, lang: str) -> str:
    """Daily header: Tamil month/day, year-ayanam-ruthu line, district and date badge,
    then the attribute grid and inauspicious timings."""
    left = "".join(_item(key, value, lang) for key, value in attribute_rows(result))
    right = "".join(
        _item(key, value, lang, accent) for key, value, accent in auspicious_rows(result)
    )
    timings = "".join(
        f'<div class="pc-timing"><span class="pc-timing-label">{_e(t(key, lang))}</span>'
        f'<span class="pc-timing-value" style="color:{color}">{_e(value)}</span></div>'
        for key, value, color in timing_rows(result)
    )
    return (
        '<section class="pc-card">'
        '<div class="pc-card-head">'
        "<div>"
        f'<h2 class="pc-title">🗓️ {_e(result.tamil_month)} {_e(result.tamil_day)}</h2>'
        f'<p class="pc-subtitle">{_e(result.tamil_year)} {_e(t("year_suffix", lang))}'
        f" • {_e(result.ayanam)} • {_e(result.ruthu)}</p>"
        "</div>"
        '<div class="pc-badge">'
        f'<p class="pc-badge-place">📍 {_e(region.tamil_name)}</p>'
        f'<p class="pc-badge-date">{_e(date_str)}</p>'
        "</div>"
        "</div>"
        '<div class="pc-grid">'
        f'<div class="pc-col">{left}</div>'
        f'<div class="pc-col">{right}<div class="pc-timings">{timings}</div></div>'
        "</div>"
        "</section>"
    )


def render_summary(result: Panchangam, lang: str) -> str:
    return (
        '<section class="pc-summary">'
        f'<h3>✦ {_e(t("section_summary", lang))}</h3>'
        f'<p class="pc-summary-text">{_e(result.summary)}</p>'
        "</section>"
    )


def render_planets(positions: tuple[PlanetaryPosition, ...], lang: str) -> str:
    """Grid of planet tiles in returned order."""
    tiles = "".join(
        '<div class="pc-planet">'
        f'<span class="pc-planet-name">{_e(p.planet)}</span>'
        f'<span class="pc-planet-rasi">{_e(p.rasi)}</span>'
        f'<span class="pc-planet-deg">{_e(p.degrees)}</span>'
        "</div>"
        for p in positions
    )
    return (
        '<section class="pc-card">'
        f'<h3>🧭 {_e(t("section_planets", lang))}</h3>'
        f'<div class="pc-planet-grid">{tiles}</div>'
        "</section>"
    )


def render_festival_preview(festivals: tuple[Festival, ...], lang: str) -> str:
    """Sidebar timeline of festivals. The caller decides how many to pass."""
    entries = "".join(
        '<div class="pc-preview-entry">'
        f"<h4>{_e(f.name)}</h4>"
        f'<p class="pc-preview-date">{_e(f.date)}</p>'
        f'<p class="pc-preview-text">{_e(f.significance)}</p>'
        "</div>"
        for f in festivals
    )
    return (
        '<section class="pc-sidebar">'
        f'<h3>📅 {_e(t("section_festival_preview", lang))}</h3>'
        f"{entries}"
        "</section>"
    )


def render_faq(lang: str) -> str:
    items = "".join(
        f'<div class="pc-faq"><p class="pc-faq-q">{_e(t(q, lang))}</p>'
        f'<p class="pc-faq-a">{_e(t(a, lang))}</p></div>'
        for q, a in (
            ("faq_thirukanitham_q", "faq_thirukanitham_a"),
            ("faq_district_q", "faq_district_a"),
        )
    )
    return f'<section class="pc-info"><h3>ⓘ {_e(t("section_info", lang))}</h3>{items}</section>'


def render_festival_cards(festivals: tuple[Festival, ...], lang: str) -> str:
    """Full festival list, one card each, in returned order."""
    if not festivals:
        return f'<p class="pc-empty">{_e(t("empty_list", lang))}</p>'
    cards = "".join(
        '<div class="pc-festival">'
        f'<span class="pc-festival-date">{_e(f.date)}</span>'
        f"<h3>{_e(f.name)}</h3>"
        f"<p>{_e(f.significance)}</p>"
        "</div>"
        for f in festivals
    )
    return f'<div class="pc-festival-grid">{cards}</div>'


def render_transits(transits: tuple[Transit, ...], lang: str) -> str:
    """Heading banner followed by one row per transit, in returned order."""
    head = (
        '<div class="pc-transit-head">'
        f'<h2>{_e(t("transits_title", lang))}</h2>'
        f'<p>{_e(t("transits_subtitle", lang))}</p>'
        "</div>"
    )
    if not transits:
        return head + f'<p class="pc-empty">{_e(t("empty_list", lang))}</p>'
    rows = "".join(
        '<div class="pc-transit">'
        f'<div class="pc-transit-cell"><p class="pc-label">{_e(t("transit_planet", lang))}</p>'
        f'<p class="pc-transit-planet">{_e(tr.planet)}</p></div>'
        f'<div class="pc-transit-cell"><p class="pc-label">{_e(t("transit_from", lang))}</p>'
        f"<p>{_e(tr.from_rasi)}</p></div>"
        '<div class="pc-transit-arrow">➜</div>'
        f'<div class="pc-transit-cell"><p class="pc-label">{_e(t("transit_to", lang))}</p>'
        f'<p class="pc-transit-to">{_e(tr.to_rasi)}</p></div>'
        f'<div class="pc-transit-cell"><p class="pc-label">{_e(t("transit_date", lang))}</p>'
        f'<p class="pc-transit-date">{_e(tr.date)}</p></div>'
        "</div>"
        for tr in transits
    )
    return head + rows
