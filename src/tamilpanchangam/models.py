"""Data model definitions — explicit boundaries between selection, request, and render layers."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Region:
    """A selectable district. Loaded once from the static region list."""

    name: str  # English identifier ("Chennai")
    tamil_name: str  # Display name ("சென்னை")
    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees)


@dataclass(frozen=True)
class Query:
    """Region + calendar day. Fully determines one outbound request."""

    region: Region
    date: date  # Calendar day, no time component

    @property
    def date_str(self) -> str:
        """ISO calendar date ("YYYY-MM-DD") as embedded in the prompt."""
        return self.date.isoformat()


@dataclass(frozen=True)
class PlanetaryPosition:
    planet: str  # Body name ("சூரியன்")
    rasi: str  # Zodiac sign
    degrees: str  # Degree string as returned ("24°12'")


@dataclass(frozen=True)
class Festival:
    name: str
    date: str  # Free-form date string as returned by the model
    significance: str


@dataclass(frozen=True)
class Transit:
    planet: str
    from_rasi: str  # Origin sign
    to_rasi: str  # Destination sign
    date: str


@dataclass(frozen=True)
class Panchangam:
    """Parsed almanac for one region and day. The sole input to renderers."""

    tamil_year: str
    tamil_month: str
    tamil_day: str
    ayanam: str
    ruthu: str
    tithi: str
    nakshatram: str
    yogam: str
    karanam: str
    rasi: str
    rahukalam: str  # Inauspicious window, time-range string
    yamagandam: str  # Inauspicious window, time-range string
    kuligai: str  # Inauspicious window, time-range string
    nalla_neram: str
    gowri_nalla_neram: str
    chandrashtamam: str
    summary: str  # Free-text spiritual summary
    planetary_positions: tuple[PlanetaryPosition, ...]
    festivals: tuple[Festival, ...]  # In returned order
    transits: tuple[Transit, ...]  # In returned order
