"""Pure projections from a Panchangam to what each tab shows."""

from tamilpanchangam.models import Festival, Panchangam

FESTIVAL_PREVIEW_LIMIT = 3


def attribute_rows(result: Panchangam) -> list[tuple[str, str]]:
    """(i18n label key, value) for the five calendrical attributes."""
    return [
        ("label_tithi", result.tithi),
        ("label_nakshatram", result.nakshatram),
        ("label_yogam", result.yogam),
        ("label_karanam", result.karanam),
        ("label_rasi", result.rasi),
    ]


def auspicious_rows(result: Panchangam) -> list[tuple[str, str, str]]:
    """(label key, value, accent) for chandrashtamam and the good-time windows."""
    return [
        ("label_chandrashtamam", result.chandrashtamam, "highlight"),
        ("label_nalla_neram", result.nalla_neram, "success"),
        ("label_gowri_nalla_neram", result.gowri_nalla_neram, "success"),
    ]


def timing_rows(result: Panchangam) -> list[tuple[str, str, str]]:
    """(label key, value, color) for the inauspicious windows."""
    return [
        ("label_rahukalam", result.rahukalam, "#b91c1c"),
        ("label_yamagandam", result.yamagandam, "#b91c1c"),
        ("label_kuligai", result.kuligai, "#1d4ed8"),
    ]


def festival_preview(
    result: Panchangam, limit: int = FESTIVAL_PREVIEW_LIMIT
) -> tuple[Festival, ...]:
    """First `limit` festivals in returned order, for the daily sidebar."""
    return result.festivals[: max(limit, 0)]
