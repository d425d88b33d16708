"""Tamil Thirukanitha Panchangam — Streamlit app for a district's almanac on a given date.

    uv run streamlit run src/tamilpanchangam/app.py
"""

import html

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from tamilpanchangam.config import configure_logging, load_settings  # noqa: E402
from tamilpanchangam.i18n import resolve_lang, t  # noqa: E402
from tamilpanchangam.panchangam import fetch_panchangam  # noqa: E402
from tamilpanchangam.regions import find_region, region_names  # noqa: E402
from tamilpanchangam.renderers.cards import (  # noqa: E402
    render_faq,
    render_festival_cards,
    render_festival_preview,
    render_header_card,
    render_planets,
    render_summary,
    render_transits,
)
from tamilpanchangam.state import TABS, initial_state, run_request  # noqa: E402
from tamilpanchangam.views import festival_preview  # noqa: E402

_settings = load_settings()
configure_logging(_settings.log_level)

# --- Language: ?lang=en switches the UI chrome; generated content stays Tamil ---
_lang: str = resolve_lang(st.query_params.get("lang"))

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="☀",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---
# The default region and today's date are read once per session.
if "panchangam" not in st.session_state:
    st.session_state.panchangam = initial_state(
        region_name=_settings.default_region,
        default_region=_settings.default_region,
    )
if "mounted" not in st.session_state:
    st.session_state.mounted = False

state = st.session_state.panchangam

# Widget keys are seeded from state so widgets never carry a competing default.
if "region_select" not in st.session_state:
    st.session_state.region_select = state.region.name
if "date_select" not in st.session_state:
    st.session_state.date_select = state.date
if "active_tab" not in st.session_state:
    st.session_state.active_tab = state.active_tab


def _show_festivals() -> None:
    st.session_state.active_tab = "festivals"


# --- Theme CSS (static) ---
st.markdown(
    """
    <style>
    [data-testid="stHeader"], [data-testid="stToolbar"] { display: none !important; }
    [data-testid="stMainBlockContainer"] { padding-top: 1rem !important; max-width: 72rem; }
    .pc-hero {
        background: linear-gradient(135deg, #b45309, #d97706);
        color: #ffffff;
        border-radius: 1.5rem;
        padding: 2rem 2.2rem;
        margin-bottom: 1rem;
        box-shadow: 0 12px 30px rgba(180, 83, 9, 0.25);
    }
    .pc-hero h1 { color: #ffffff; font-size: 2.2rem; font-weight: 800; margin: 0; }
    .pc-hero p { color: #fef3c7; margin: 0.3rem 0 0; font-size: 1.05rem; }
    [data-testid="stButton"] button {
        border-radius: 0.75rem !important;
        font-weight: 700;
    }
    .pc-error {
        background: #fef2f2;
        border: 1px solid #fecaca;
        color: #b91c1c;
        border-radius: 1rem;
        padding: 1rem 1.4rem;
        margin: 0.5rem 0 1.2rem;
        font-weight: 600;
    }
    .pc-card, .pc-info {
        background: #fffdf7;
        border: 1px solid #ffedd5;
        border-radius: 1.5rem;
        padding: 1.6rem 1.8rem;
        margin-bottom: 1.2rem;
        box-shadow: 0 6px 18px rgba(0, 0, 0, 0.05);
    }
    .pc-card-head {
        display: flex; justify-content: space-between; align-items: flex-start;
        border-bottom: 1px solid #ffedd5; padding-bottom: 1rem; margin-bottom: 1.2rem;
    }
    .pc-title { color: #7c2d12; font-weight: 900; margin: 0; }
    .pc-subtitle { color: #c2410c; font-weight: 700; margin: 0; }
    .pc-badge { text-align: right; }
    .pc-badge-place { color: #6b7280; font-weight: 700; margin: 0; }
    .pc-badge-date { color: #9ca3af; font-size: 0.75rem; letter-spacing: 0.15em; margin: 0; }
    .pc-grid { display: grid; grid-template-columns: 1fr 1fr; gap: 1rem 2.5rem; }
    @media (max-width: 768px) { .pc-grid { grid-template-columns: 1fr; } }
    .pc-item { display: flex; gap: 0.9rem; align-items: center; padding: 0.6rem; border-radius: 1rem; }
    .pc-item-highlight { background: #fff7ed; border: 1px solid #ffedd5; }
    .pc-item-success { background: #f0fdf4; border: 1px solid #dcfce7; }
    .pc-icon { font-size: 1.2rem; width: 2.2rem; text-align: center; }
    .pc-label { color: #9ca3af; font-size: 0.65rem; font-weight: 900; letter-spacing: 0.15em; margin: 0; }
    .pc-value { color: #1f2937; font-size: 1.1rem; font-weight: 900; margin: 0; }
    .pc-timings { border-top: 1px solid #ffedd5; margin-top: 0.8rem; padding-top: 0.6rem; }
    .pc-timing { display: flex; justify-content: space-between; padding: 0.5rem; }
    .pc-timing-label { color: #6b7280; font-weight: 700; font-size: 0.85rem; }
    .pc-timing-value { font-weight: 900; }
    .pc-summary {
        background: linear-gradient(90deg, #fff7ed, #fffbeb);
        border: 1px solid #ffedd5; border-radius: 1.5rem;
        padding: 1.6rem 1.8rem; margin-bottom: 1.2rem;
    }
    .pc-summary h3 { color: #7c2d12; }
    .pc-summary-text { color: #9a3412; font-size: 1.1rem; line-height: 1.7; }
    .pc-planet-grid { display: grid; grid-template-columns: repeat(3, 1fr); gap: 0.9rem; }
    .pc-planet { background: #ffffff; border: 1px solid #f3f4f6; border-radius: 1rem; padding: 0.9rem; }
    .pc-planet span { display: block; }
    .pc-planet-name { color: #9ca3af; font-size: 0.75rem; font-weight: 700; }
    .pc-planet-rasi { color: #312e81; font-size: 1.1rem; font-weight: 900; }
    .pc-planet-deg { color: #6b7280; font-size: 0.75rem; }
    .pc-sidebar {
        background: #312e81; color: #ffffff; border-radius: 1.5rem;
        padding: 1.6rem 1.8rem; margin-bottom: 0.6rem;
    }
    .pc-sidebar h3, .pc-sidebar h4 { color: #ffffff; }
    .pc-preview-entry { border-left: 2px solid rgba(129, 140, 248, 0.4); padding-left: 1rem; margin: 1rem 0; }
    .pc-preview-date { color: #a5b4fc; font-weight: 700; font-size: 0.85rem; margin: 0; }
    .pc-preview-text { color: #e0e7ff; font-size: 0.8rem; margin: 0; }
    .pc-faq-q { color: #1f2937; font-weight: 900; font-size: 0.9rem; margin: 0.8rem 0 0.2rem; }
    .pc-faq-a { color: #6b7280; font-size: 0.8rem; margin: 0; }
    .pc-festival-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(18rem, 1fr)); gap: 1.2rem; }
    .pc-festival {
        background: #ffffff; border: 1px solid #e0e7ff; border-radius: 1.5rem; padding: 1.6rem;
    }
    .pc-festival-date {
        background: #e0e7ff; color: #4338ca; font-size: 0.75rem; font-weight: 900;
        border-radius: 999px; padding: 0.2rem 0.8rem;
    }
    .pc-transit-head {
        background: #fff7ed; border: 1px solid #ffedd5; border-radius: 1rem;
        padding: 1.2rem; text-align: center; margin-bottom: 1.2rem;
    }
    .pc-transit-head h2 { color: #7c2d12; margin: 0; }
    .pc-transit-head p { color: #c2410c; margin: 0; }
    .pc-transit {
        display: flex; align-items: center; justify-content: space-around; gap: 1rem;
        background: #ffffff; border: 1px solid #f3f4f6; border-radius: 1.5rem;
        padding: 1.4rem; margin-bottom: 1rem;
    }
    .pc-transit-cell { text-align: center; }
    .pc-transit-cell p { margin: 0; font-weight: 700; }
    .pc-transit-planet { color: #312e81; font-size: 1.6rem; font-weight: 900 !important; }
    .pc-transit-to { color: #4f46e5; }
    .pc-transit-date { color: #ea580c; }
    .pc-transit-arrow { color: #6366f1; font-size: 1.6rem; }
    .pc-empty, .pc-placeholder { color: #9ca3af; text-align: center; padding: 3rem 0; }
    .pc-footer { color: #9ca3af; text-align: center; font-size: 0.85rem; margin-top: 3rem; }
    .pc-footer b { color: #1f2937; }
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Header ---
st.markdown(
    f"<div class='pc-hero'><h1>☀ {html.escape(t('page_title', _lang))}</h1>"
    f"<p>{html.escape(t('page_subtitle', _lang))}</p></div>",
    unsafe_allow_html=True,
)

# --- Selection bar ---
# Changing region or date only updates state; fetching waits for the button.
col1, col2, col3 = st.columns([3, 2, 1.5])
with col1:
    region_name = st.selectbox(
        t("label_district", _lang),
        options=region_names(),
        format_func=lambda name: find_region(name).tamil_name,
        key="region_select",
    )
with col2:
    date_val = st.date_input(t("label_date", _lang), key="date_select")
with col3:
    st.markdown("<div style='height:1.75rem'></div>", unsafe_allow_html=True)
    submitted = st.button(t("btn_compute", _lang), key="compute_btn", use_container_width=True)

state.select_region(region_name)
state.select_date(date_val)

# --- Tabs ---
tab = st.radio(
    "tab",
    options=TABS,
    format_func=lambda key: t(f"tab_{key}", _lang),
    horizontal=True,
    key="active_tab",
    label_visibility="collapsed",
)
state.select_tab(tab)

# --- Request trigger: once on mount, then only on the button ---
# The previous result stays on screen under the spinner until the new one lands.
if submitted or not st.session_state.mounted:
    st.session_state.mounted = True
    with st.spinner(t("loading", _lang)):
        run_request(
            state,
            lambda query: fetch_panchangam(query, settings=_settings),
            t("error_fetch", _lang),
        )
    st.rerun()

# --- Error banner ---
if state.error:
    st.markdown(
        f"<div class='pc-error'>ⓘ {html.escape(state.error)}</div>",
        unsafe_allow_html=True,
    )

# --- Result views ---
result = state.result
if result is None:
    st.markdown(
        f"<div class='pc-placeholder'><h3>📅 {html.escape(t('placeholder_title', _lang))}</h3>"
        f"<p>{html.escape(t('placeholder_body', _lang))}</p></div>",
        unsafe_allow_html=True,
    )
elif state.active_tab == "daily":
    main_col, side_col = st.columns([2, 1])
    with main_col:
        st.markdown(
            render_header_card(
                result, state.result_query.region, state.result_query.date_str, _lang
            ),
            unsafe_allow_html=True,
        )
        st.markdown(render_summary(result, _lang), unsafe_allow_html=True)
        st.markdown(render_planets(result.planetary_positions, _lang), unsafe_allow_html=True)
    with side_col:
        st.markdown(
            render_festival_preview(festival_preview(result), _lang),
            unsafe_allow_html=True,
        )
        st.button(
            t("btn_see_all", _lang),
            key="see_all_btn",
            on_click=_show_festivals,
            use_container_width=True,
        )
        st.markdown(render_faq(_lang), unsafe_allow_html=True)
elif state.active_tab == "festivals":
    st.markdown(render_festival_cards(result.festivals, _lang), unsafe_allow_html=True)
else:
    st.markdown(render_transits(result.transits, _lang), unsafe_allow_html=True)

# --- Footer ---
st.markdown(
    f"<div class='pc-footer'><b>{html.escape(t('footer_copyright', _lang))}</b>"
    f"<p>{html.escape(t('footer_disclaimer', _lang))}</p></div>",
    unsafe_allow_html=True,
)
