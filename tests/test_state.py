from __future__ import annotations

from datetime import date

import pytest

from tamilpanchangam.schema import PanchangamError, parse_payload
from tamilpanchangam.state import initial_state, run_request

ERROR = "பிழை"


def test_initial_state_defaults():
    state = initial_state(today=date(2024, 6, 15))
    assert state.region.name == "Chennai"
    assert state.date == date(2024, 6, 15)
    assert state.result is None and state.error is None
    assert state.loading is False
    assert state.active_tab == "daily"
    assert state.request_seq == 0


def test_initial_state_unknown_region_falls_back():
    state = initial_state(region_name="Atlantis", today=date(2024, 1, 1))
    assert state.region.name == "Chennai"
    state = initial_state(region_name="Atlantis", default_region="Madurai", today=date(2024, 1, 1))
    assert state.region.name == "Madurai"


def test_selection_changes_do_not_issue_requests():
    state = initial_state(today=date(2024, 6, 15))
    state.select_region("Salem")
    state.select_date(date(2025, 1, 14))
    state.select_tab("transits")
    assert state.request_seq == 0
    assert state.query.region.name == "Salem"
    assert state.query.date_str == "2025-01-14"


def test_unknown_tab_rejected():
    state = initial_state(today=date(2024, 6, 15))
    with pytest.raises(ValueError):
        state.select_tab("weekly")


def test_successful_cycle(payload):
    state = initial_state(today=date(2024, 6, 15))
    seen = []

    def fetch(query):
        seen.append(query)
        assert state.loading is True
        return parse_payload(payload)

    assert run_request(state, fetch, ERROR) is True
    assert len(seen) == 1
    assert seen[0].date_str == "2024-06-15"
    assert state.loading is False
    assert state.result.tithi == "நவமி"
    assert state.result_query == seen[0]
    assert state.error is None


def test_failure_keeps_last_result_and_sets_error(payload):
    state = initial_state(today=date(2024, 6, 15))
    run_request(state, lambda q: parse_payload(payload), ERROR)
    previous = state.result

    def broken(query):
        raise PanchangamError("boom")

    assert run_request(state, broken, ERROR) is True
    assert state.error == ERROR
    assert state.loading is False
    assert state.result is previous


def test_unexpected_exception_is_still_a_failure():
    state = initial_state(today=date(2024, 6, 15))

    def broken(query):
        raise KeyError("panchangam")

    run_request(state, broken, ERROR)
    assert state.error == ERROR
    assert state.result is None


def test_error_stays_until_next_request_resolves(payload):
    state = initial_state(today=date(2024, 6, 15))
    seq, _ = state.begin_request()
    state.fail(seq, ERROR)

    seq, _ = state.begin_request()
    assert state.loading is True
    assert state.error == ERROR
    state.complete(seq, parse_payload(payload))
    assert state.error is None


def test_only_latest_request_is_observable(payload):
    state = initial_state(today=date(2024, 6, 15))
    first_seq, _ = state.begin_request()
    state.select_region("Madurai")
    second_seq, second_query = state.begin_request()

    newer = parse_payload(payload)
    payload["panchangam"]["tithi"] = "தசமி"
    older = parse_payload(payload)

    assert state.complete(second_seq, newer) is True
    assert state.complete(first_seq, older) is False
    assert state.fail(first_seq, ERROR) is False
    assert state.result is newer
    assert state.result_query == second_query
    assert state.error is None
