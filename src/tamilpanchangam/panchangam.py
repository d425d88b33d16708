"""Tamil Thirukanitha Panchangam generation using the Claude API."""

import json
import logging
from typing import Any

import anthropic

from tamilpanchangam.config import Settings, load_settings
from tamilpanchangam.models import Panchangam, Query
from tamilpanchangam.schema import (
    PANCHANGAM_SCHEMA,
    PanchangamError,
    parse_payload,
    parse_response_text,
    to_payload,
)

logger = logging.getLogger(__name__)

TOOL_NAME = "record_panchangam"

PLANETS: tuple[str, ...] = (
    "Sun",
    "Moon",
    "Mars",
    "Mercury",
    "Jupiter",
    "Venus",
    "Saturn",
    "Rahu",
    "Ketu",
)

_SYSTEM_PROMPT = (
    "You are a Tamil almanac (Panchangam) expert following the Thirukanitha system.\n"
    "You always answer by calling the record_panchangam tool exactly once.\n"
    "Every text value you produce is written in Tamil, whatever language the request uses."
)

_TOOL: dict[str, Any] = {
    "name": TOOL_NAME,
    "description": "Record the complete Panchangam for the requested district and date.",
    "input_schema": PANCHANGAM_SCHEMA,
}


def build_prompt(query: Query) -> str:
    """Compose the natural-language instruction for one district and day.

    The region appears under both its English and Tamil names; the date is the
    ISO calendar string.
    """
    region = query.region
    return (
        f"Generate a comprehensive Tamil Thirukanitha Panchangam for "
        f"{region.name} ({region.tamil_name}) on {query.date_str}.\n\n"
        "Requirements:\n"
        "1. Write all text content in Tamil.\n"
        "2. Daily details: Tithi, Nakshatram, Yogam, Karanam, Rasi, Rahukalam, "
        "Yamagandam, Kuligai, Nalla Neram, Gowri Nalla Neram, Chandrashtamam, "
        "along with the Tamil year, month, day, Ayanam and Ruthu.\n"
        f"3. Planetary positions: current Rasi and degrees for {', '.join(PLANETS)}.\n"
        "4. Festivals: 3-5 major festivals or Vratams falling in the Tamil month of "
        "this date, each with its significance.\n"
        "5. Transits: the most significant planetary transits (especially Guru, Sani, "
        "Rahu/Ketu) in the year of this date.\n"
        "6. A concise spiritual summary for the day."
    )


def build_request(query: Query, settings: Settings) -> dict[str, Any]:
    """Keyword arguments for a single client.messages.create call.

    The tool definition (and with it the declared schema) is the same object for
    every query; only the user message varies.
    """
    return {
        "model": settings.model,
        "max_tokens": settings.max_tokens,
        "system": _SYSTEM_PROMPT,
        "tools": [_TOOL],
        "tool_choice": {"type": "tool", "name": TOOL_NAME},
        "messages": [{"role": "user", "content": build_prompt(query)}],
    }


def extract_payload(message: Any) -> Panchangam:
    """Pull the almanac out of a Messages API response.

    The forced tool call carries an already-decoded object; any other reply is
    treated as plain text that must decode as JSON.
    """
    texts: list[str] = []
    for block in message.content:
        if block.type == "tool_use" and block.name == TOOL_NAME:
            return parse_payload(block.input)
        if block.type == "text":
            texts.append(block.text)
    return parse_response_text("".join(texts))


def fetch_panchangam(
    query: Query,
    client: anthropic.Anthropic | None = None,
    settings: Settings | None = None,
) -> Panchangam:
    """Issue exactly one generation call for query and return the parsed almanac.

    Args:
        query: District and calendar day.
        client: Anthropic client. Built from settings.api_key if None.
        settings: Model/token configuration. Read from the environment if None.

    Returns:
        The validated Panchangam.

    Raises:
        PanchangamError: On any failure: missing credential, network error,
            schema violation, or malformed JSON. No retry is attempted.
    """
    settings = settings or load_settings()
    logger.info(
        "panchangam_fetch_started region=%s date=%s model=%s",
        query.region.name,
        query.date_str,
        settings.model,
    )
    try:
        if client is None:
            client = anthropic.Anthropic(api_key=settings.api_key)
        message = client.messages.create(**build_request(query, settings))
        result = extract_payload(message)
    except PanchangamError:
        logger.exception("panchangam_fetch_failed region=%s", query.region.name)
        raise
    except Exception as exc:
        logger.exception("panchangam_fetch_failed region=%s", query.region.name)
        raise PanchangamError(f"Panchangam request failed: {exc}") from exc

    logger.info(
        "panchangam_fetch_succeeded region=%s festivals=%d transits=%d",
        query.region.name,
        len(result.festivals),
        len(result.transits),
    )
    return result


def dumps(result: Panchangam) -> str:
    """Serialize a Panchangam back to its wire JSON (Tamil text kept as-is)."""
    return json.dumps(to_payload(result), ensure_ascii=False, indent=2)
