"""Simple two-language (ta/en) translation helper for the UI chrome.

Generated almanac content is always Tamil; only labels and messages switch.
"""

DEFAULT_LANG = "ta"

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ta": "தமிழ் திருக்கணித பஞ்சாங்கம்",
        "en": "Tamil Thirukanitha Panchangam",
    },
    "page_subtitle": {
        "ta": "38 மாவட்டங்கள் மற்றும் புதுச்சேரிக்கான ஆன்மீக வழிகாட்டி",
        "en": "A spiritual guide for the 38 districts of Tamil Nadu and Puducherry",
    },
    "label_district": {
        "ta": "மாவட்டம்",
        "en": "District",
    },
    "label_date": {
        "ta": "தேதி",
        "en": "Date",
    },
    "btn_compute": {
        "ta": "⚡ கணித்திடு",
        "en": "⚡ Compute",
    },
    "tab_daily": {
        "ta": "☀ இன்றைய விவரங்கள்",
        "en": "☀ Daily Details",
    },
    "tab_festivals": {
        "ta": "★ பண்டிகைகள்",
        "en": "★ Festivals",
    },
    "tab_transits": {
        "ta": "✧ பெயர்ச்சிகள்",
        "en": "✧ Transits",
    },
    "loading": {
        "ta": "திருக்கணித முறைப்படி கணிக்கப்படுகிறது...",
        "en": "Computing by the Thirukanitha method...",
    },
    "error_fetch": {
        "ta": "பஞ்சாங்கம் விவரங்களைப் பெறுவதில் பிழை ஏற்பட்டது. மீண்டும் முயற்சிக்கவும்.",
        "en": "Could not fetch the Panchangam details. Please try again.",
    },
    "placeholder_title": {
        "ta": "தகவல்கள் தயாராக இல்லை",
        "en": "No details yet",
    },
    "placeholder_body": {
        "ta": "மாவட்டத்தையும் தேதியையும் தேர்ந்தெடுத்து 'கணித்திடு' பொத்தானை அழுத்தவும்.",
        "en": "Choose a district and date, then press 'Compute'.",
    },
    "year_suffix": {
        "ta": "ஆண்டு",
        "en": "year",
    },
    "label_tithi": {"ta": "திதி", "en": "Tithi"},
    "label_nakshatram": {"ta": "நட்சத்திரம்", "en": "Nakshatram"},
    "label_yogam": {"ta": "யோகம்", "en": "Yogam"},
    "label_karanam": {"ta": "கரணம்", "en": "Karanam"},
    "label_rasi": {"ta": "ராசி", "en": "Rasi"},
    "label_chandrashtamam": {"ta": "சந்திராஷ்டமம்", "en": "Chandrashtamam"},
    "label_nalla_neram": {"ta": "நல்ல நேரம்", "en": "Nalla Neram"},
    "label_gowri_nalla_neram": {"ta": "கௌரி நல்ல நேரம்", "en": "Gowri Nalla Neram"},
    "label_rahukalam": {"ta": "ராகு காலம்", "en": "Rahukalam"},
    "label_yamagandam": {"ta": "எமகண்டம்", "en": "Yamagandam"},
    "label_kuligai": {"ta": "குளிகை", "en": "Kuligai"},
    "section_summary": {
        "ta": "இன்றைய ஆன்மீகத் தொகுப்பு",
        "en": "Today's Spiritual Summary",
    },
    "section_planets": {
        "ta": "கிரக நிலைகள் (Planet Positions)",
        "en": "Planet Positions",
    },
    "section_festival_preview": {
        "ta": "முக்கிய விசேஷங்கள்",
        "en": "Key Observances",
    },
    "btn_see_all": {
        "ta": "அனைத்தையும் காண்க ›",
        "en": "See all ›",
    },
    "section_info": {
        "ta": "பஞ்சாங்கத் தகவல்கள்",
        "en": "About the Panchangam",
    },
    "faq_thirukanitham_q": {
        "ta": "திருக்கணிதம் என்றால் என்ன?",
        "en": "What is Thirukanitham?",
    },
    "faq_thirukanitham_a": {
        "ta": "இது நவீன வான்வெளி ஆராய்ச்சியை அடிப்படையாகக் கொண்டு கிரகங்களின் துல்லியமான பாகை நிலைகளை கணிக்கும் முறையாகும்.",
        "en": "A method that computes precise planetary degrees based on modern astronomy.",
    },
    "faq_district_q": {
        "ta": "மாவட்ட வாரியான கணிப்பு?",
        "en": "Why per district?",
    },
    "faq_district_a": {
        "ta": "ஒவ்வொரு மாவட்டத்தின் அட்சரேகை மற்றும் தீர்க்கரேகைக்கு ஏற்ப சூரிய உதயம் மற்றும் திதி முடிவுகள் சில நிமிடங்கள் மாறுபடும்.",
        "en": "Sunrise and tithi end times shift by a few minutes with each district's latitude and longitude.",
    },
    "transits_title": {
        "ta": "முக்கிய கிரக பெயர்ச்சிகள்",
        "en": "Major Planetary Transits",
    },
    "transits_subtitle": {
        "ta": "இந்த ஆண்டில் நிகழும் பிரதான கிரக மாற்றங்கள்",
        "en": "The principal planetary changes of this year",
    },
    "transit_planet": {"ta": "கிரகம்", "en": "Planet"},
    "transit_from": {"ta": "இருந்து", "en": "From"},
    "transit_to": {"ta": "நோக்கி", "en": "To"},
    "transit_date": {"ta": "தேதி", "en": "Date"},
    "empty_list": {
        "ta": "தகவல் இல்லை",
        "en": "Nothing to show",
    },
    "footer_copyright": {
        "ta": "© தமிழ் திருக்கணித பஞ்சாங்கம்",
        "en": "© Tamil Thirukanitha Panchangam",
    },
    "footer_disclaimer": {
        "ta": "இந்த பஞ்சாங்கம் நவீன திருக்கணித முறைப்படி AI தொழில்நுட்பத்தைப் பயன்படுத்தி கணிக்கப்பட்டுள்ளது. விசேஷ காரியங்களுக்கு உள்ளூர் புரோகிதர்களை அணுகுவது சிறந்தது.",
        "en": "This Panchangam is generated with AI following the Thirukanitha method. Consult a local priest for important occasions.",
    },
}


def resolve_lang(value: str | None) -> str:
    """Normalize a requested language code to one we have strings for."""
    if value and value.lower().startswith("en"):
        return "en"
    return DEFAULT_LANG


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'ta', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get(DEFAULT_LANG) or key
