"""UI state and its transitions, kept free of Streamlit so it can be driven directly.

Lifecycle: Idle -> Loading -> (Success | Failure) -> Idle, re-entered on each
explicit trigger. Every request is stamped with a sequence number; only the
outcome of the most recently issued request is applied, so an older call that
resolves late can never overwrite a newer one.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from tamilpanchangam.models import Panchangam, Query, Region
from tamilpanchangam.regions import DEFAULT_REGION_NAME, find_region
from tamilpanchangam.schema import PanchangamError

logger = logging.getLogger(__name__)

TABS: tuple[str, ...] = ("daily", "festivals", "transits")


@dataclass
class PanchangamState:
    region: Region
    date: date
    loading: bool = False
    result: Panchangam | None = None
    error: str | None = None
    active_tab: str = "daily"
    request_seq: int = 0  # Last issued request number; 0 = none yet
    result_query: Query | None = None  # The query `result` answers
    pending_query: Query | None = field(default=None, repr=False)
    default_region: str = field(default=DEFAULT_REGION_NAME, repr=False)

    @property
    def query(self) -> Query:
        return Query(region=self.region, date=self.date)

    def select_region(self, name: str | None) -> None:
        """Update the selection only. Unknown names fall back to the default region."""
        self.region = find_region(name, default=self.default_region)

    def select_date(self, value: date) -> None:
        self.date = value

    def select_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab!r}")
        self.active_tab = tab

    def begin_request(self) -> tuple[int, Query]:
        """Enter Loading. The previous result and error stay until this request resolves."""
        self.request_seq += 1
        self.loading = True
        self.pending_query = self.query
        return self.request_seq, self.pending_query

    def complete(self, seq: int, result: Panchangam) -> bool:
        """Apply a successful outcome. Returns False if seq is stale."""
        if seq != self.request_seq:
            logger.info("panchangam_result_stale seq=%d latest=%d", seq, self.request_seq)
            return False
        self.result = result
        self.result_query = self.pending_query
        self.error = None
        self.loading = False
        return True

    def fail(self, seq: int, message: str) -> bool:
        """Apply a failed outcome. The last good result is kept. Returns False if seq is stale."""
        if seq != self.request_seq:
            logger.info("panchangam_result_stale seq=%d latest=%d", seq, self.request_seq)
            return False
        self.error = message
        self.loading = False
        return True


def initial_state(
    region_name: str | None = None,
    today: date | None = None,
    default_region: str = DEFAULT_REGION_NAME,
) -> PanchangamState:
    """Fresh state: given (or default) region, given (or today's) date, no result, daily tab."""
    return PanchangamState(
        region=find_region(region_name, default=default_region),
        date=today or date.today(),
        default_region=default_region,
    )


def run_request(
    state: PanchangamState,
    fetch: Callable[[Query], Panchangam],
    error_message: str,
) -> bool:
    """Drive one full request cycle against state.

    Args:
        state: State to mutate.
        fetch: Performs the outbound call for a Query.
        error_message: Localized text stored on failure.

    Returns:
        True if this request's outcome was applied, False if a newer request
        superseded it while it was in flight.
    """
    seq, query = state.begin_request()
    try:
        result = fetch(query)
    except PanchangamError:
        return state.fail(seq, error_message)
    except Exception:
        logger.exception("panchangam_fetch_unexpected_error seq=%d", seq)
        return state.fail(seq, error_message)
    return state.complete(seq, result)
