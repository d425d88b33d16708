"""Response contract for the almanac request — declared to the model and re-checked locally."""

import json
from typing import Any

from jsonschema import Draft7Validator

from tamilpanchangam.models import Festival, Panchangam, PlanetaryPosition, Transit


class PanchangamError(RuntimeError):
    """Fetch-or-parse failure. The only error kind surfaced to the UI."""


# Flat string fields in the order the model is asked to produce them.
DAILY_FIELDS: tuple[str, ...] = (
    "tamilYear",
    "tamilMonth",
    "tamilDay",
    "ayanam",
    "ruthu",
    "tithi",
    "nakshatram",
    "yogam",
    "karanam",
    "rasi",
    "rahukalam",
    "yamagandam",
    "kuligai",
    "nallaNeram",
    "gowriNallaNeram",
    "chandrashtamam",
    "summary",
)


def _object_of_strings(*keys: str) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {k: {"type": "string"} for k in keys},
        "required": list(keys),
    }


def _array_of(*keys: str) -> dict[str, Any]:
    return {"type": "array", "items": _object_of_strings(*keys)}


_PLANET_KEYS = ("planet", "rasi", "degrees")
_FESTIVAL_KEYS = ("name", "date", "significance")
_TRANSIT_KEYS = ("planet", "fromRasi", "toRasi", "date")

PANCHANGAM_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "panchangam": {
            "type": "object",
            "properties": {
                **{k: {"type": "string"} for k in DAILY_FIELDS},
                "planetaryPositions": _array_of(*_PLANET_KEYS),
                "festivals": _array_of(*_FESTIVAL_KEYS),
                "transits": _array_of(*_TRANSIT_KEYS),
            },
            "required": [*DAILY_FIELDS, "planetaryPositions", "festivals", "transits"],
        }
    },
    "required": ["panchangam"],
}

_VALIDATOR = Draft7Validator(PANCHANGAM_SCHEMA)


def validation_errors(payload: Any) -> list[str]:
    """Return human-readable schema violations for payload ("path: message")."""
    return [
        f"{'/'.join(str(p) for p in err.path) or '<root>'}: {err.message}"
        for err in _VALIDATOR.iter_errors(payload)
    ]


def parse_payload(payload: Any) -> Panchangam:
    """Validate a decoded response object and unwrap it into a Panchangam.

    Args:
        payload: The decoded JSON object, wrapping everything under "panchangam".

    Returns:
        The fully populated almanac.

    Raises:
        PanchangamError: If any required field is missing or has the wrong type.
            No partial result is ever produced.
    """
    errors = validation_errors(payload)
    if errors:
        raise PanchangamError("Response failed schema validation: " + "; ".join(errors))

    data = payload["panchangam"]
    return Panchangam(
        tamil_year=data["tamilYear"],
        tamil_month=data["tamilMonth"],
        tamil_day=data["tamilDay"],
        ayanam=data["ayanam"],
        ruthu=data["ruthu"],
        tithi=data["tithi"],
        nakshatram=data["nakshatram"],
        yogam=data["yogam"],
        karanam=data["karanam"],
        rasi=data["rasi"],
        rahukalam=data["rahukalam"],
        yamagandam=data["yamagandam"],
        kuligai=data["kuligai"],
        nalla_neram=data["nallaNeram"],
        gowri_nalla_neram=data["gowriNallaNeram"],
        chandrashtamam=data["chandrashtamam"],
        summary=data["summary"],
        planetary_positions=tuple(
            PlanetaryPosition(planet=p["planet"], rasi=p["rasi"], degrees=p["degrees"])
            for p in data["planetaryPositions"]
        ),
        festivals=tuple(
            Festival(name=f["name"], date=f["date"], significance=f["significance"])
            for f in data["festivals"]
        ),
        transits=tuple(
            Transit(
                planet=t["planet"],
                from_rasi=t["fromRasi"],
                to_rasi=t["toRasi"],
                date=t["date"],
            )
            for t in data["transits"]
        ),
    )


def parse_response_text(text: str) -> Panchangam:
    """Decode raw response text as JSON, then validate and unwrap it."""
    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise PanchangamError(f"Response is not valid JSON: {exc}") from exc
    return parse_payload(payload)


def to_payload(result: Panchangam) -> dict[str, Any]:
    """Inverse of parse_payload: the wire-shaped dict for a Panchangam."""
    return {
        "panchangam": {
            "tamilYear": result.tamil_year,
            "tamilMonth": result.tamil_month,
            "tamilDay": result.tamil_day,
            "ayanam": result.ayanam,
            "ruthu": result.ruthu,
            "tithi": result.tithi,
            "nakshatram": result.nakshatram,
            "yogam": result.yogam,
            "karanam": result.karanam,
            "rasi": result.rasi,
            "rahukalam": result.rahukalam,
            "yamagandam": result.yamagandam,
            "kuligai": result.kuligai,
            "nallaNeram": result.nalla_neram,
            "gowriNallaNeram": result.gowri_nalla_neram,
            "chandrashtamam": result.chandrashtamam,
            "summary": result.summary,
            "planetaryPositions": [
                {"planet": p.planet, "rasi": p.rasi, "degrees": p.degrees}
                for p in result.planetary_positions
            ],
            "festivals": [
                {"name": f.name, "date": f.date, "significance": f.significance}
                for f in result.festivals
            ],
            "transits": [
                {"planet": t.planet, "fromRasi": t.from_rasi, "toRasi": t.to_rasi, "date": t.date}
                for t in result.transits
            ],
        }
    }
