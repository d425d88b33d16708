from __future__ import annotations

import copy
import json
from types import SimpleNamespace

import pytest

_PAYLOAD = {
    "panchangam": {
        "tamilYear": "குரோதி",
        "tamilMonth": "வைகாசி",
        "tamilDay": "2",
        "ayanam": "உத்தராயணம்",
        "ruthu": "வசந்த ருது",
        "tithi": "நவமி",
        "nakshatram": "உத்திரம்",
        "yogam": "வியாகாதம்",
        "karanam": "பாலவம்",
        "rasi": "கன்னி",
        "rahukalam": "09:00 - 10:30",
        "yamagandam": "13:30 - 15:00",
        "kuligai": "06:00 - 07:30",
        "nallaNeram": "07:45 - 08:45",
        "gowriNallaNeram": "10:45 - 11:45",
        "chandrashtamam": "சதயம், பூரட்டாதி",
        "summary": "இன்று இறை வழிபாட்டிற்கு உகந்த நாள்.",
        "planetaryPositions": [
            {"planet": "சூரியன்", "rasi": "ரிஷபம்", "degrees": "30°12'"},
            {"planet": "சந்திரன்", "rasi": "கன்னி", "degrees": "5°40'"},
        ],
        "festivals": [
            {"name": "வைகாசி விசாகம்", "date": "2024-05-22", "significance": "முருகன் அவதார நாள்"},
            {"name": "ஏகாதசி", "date": "2024-06-02", "significance": "விரத நாள்"},
            {"name": "அமாவாசை", "date": "2024-06-06", "significance": "பித்ரு தர்ப்பணம்"},
            {"name": "சஷ்டி", "date": "2024-06-11", "significance": "முருக வழிபாடு"},
            {"name": "பிரதோஷம்", "date": "2024-06-19", "significance": "சிவ வழிபாடு"},
        ],
        "transits": [
            {"planet": "குரு", "fromRasi": "மேஷம்", "toRasi": "ரிஷபம்", "date": "2024-05-01"},
            {"planet": "சனி", "fromRasi": "கும்பம்", "toRasi": "மீனம்", "date": "2025-03-29"},
        ],
    }
}


@pytest.fixture
def payload() -> dict:
    """A complete, schema-valid response object with five festivals."""
    return copy.deepcopy(_PAYLOAD)


def tool_message(data: object) -> SimpleNamespace:
    """Messages API response carrying a forced tool call."""
    block = SimpleNamespace(type="tool_use", name="record_panchangam", input=data, id="toolu_1")
    return SimpleNamespace(content=[block], stop_reason="tool_use")


def text_message(text: str) -> SimpleNamespace:
    """Messages API response carrying plain text only."""
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)], stop_reason="end_turn")


class FakeMessages:
    def __init__(self, response: object = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class FakeClient:
    """Stands in for anthropic.Anthropic; records every messages.create call."""

    def __init__(self, response: object = None, error: Exception | None = None):
        self.messages = FakeMessages(response, error)


@pytest.fixture
def fake_client(payload):
    return FakeClient(tool_message(payload))


@pytest.fixture
def payload_text(payload) -> str:
    return json.dumps(payload, ensure_ascii=False)
