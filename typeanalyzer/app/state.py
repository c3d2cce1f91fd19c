"""ABOUTME: Finite state machine for the interactive Pokemon query.
ABOUTME: States are Idle, Loading, Success and Failed; stale results are ignored."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from typeanalyzer.analysis import TypeAnalysis, normalize_query, run_analysis
from typeanalyzer.exceptions import TypeAnalyzerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """Nothing submitted, or the last error was dismissed."""


@dataclass(frozen=True)
class Loading:
    """A query is in flight."""

    query: str
    request_id: int


@dataclass(frozen=True)
class Success:
    """The latest query finished with a report."""

    query: str
    request_id: int
    analysis: TypeAnalysis


@dataclass(frozen=True)
class Failed:
    """The latest query failed with a user-facing message."""

    query: str
    request_id: int
    message: str


QueryState = Idle | Loading | Success | Failed


class QueryMachine:
    """Holds the current query state and applies transitions.

    Every submission gets a new request id. A resolution or rejection for any
    id other than the one currently loading is discarded.
    """

    def __init__(self) -> None:
        self.state: QueryState = Idle()
        self._last_request_id = 0

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    def submit(self, text: str | None) -> Loading | None:
        """Start a new query, clearing any previous report or error.

        Args:
            text: Raw user input.

        Returns:
            The new Loading state, or None if the input was empty (no-op).
        """
        query = normalize_query(text)
        if query is None:
            return None

        self._last_request_id += 1
        loading = Loading(query=query, request_id=self._last_request_id)
        self.state = loading
        return loading

    def resolve(self, request_id: int, analysis: TypeAnalysis) -> bool:
        """Finish the current query with a result.

        Returns:
            True if applied, False if the result was stale.
        """
        loading = self._current(request_id)
        if loading is None:
            logger.debug("Discarding stale result for request %d", request_id)
            return False
        self.state = Success(query=loading.query, request_id=request_id, analysis=analysis)
        return True

    def reject(self, request_id: int, error: Exception) -> bool:
        """Finish the current query with an error.

        Returns:
            True if applied, False if the error was stale.
        """
        loading = self._current(request_id)
        if loading is None:
            logger.debug("Discarding stale error for request %d", request_id)
            return False
        self.state = Failed(query=loading.query, request_id=request_id, message=str(error))
        return True

    def dismiss(self) -> None:
        """Clear a shown error."""
        if isinstance(self.state, Failed):
            self.state = Idle()

    def _current(self, request_id: int) -> Loading | None:
        """Return the Loading state if `request_id` is the query in flight."""
        if isinstance(self.state, Loading) and self.state.request_id == request_id:
            return self.state
        return None


def run_query(
    machine: QueryMachine,
    text: str | None,
    runner: Callable[[str], TypeAnalysis] = run_analysis,
) -> QueryState:
    """Submit `text`, run the analysis and record the outcome.

    Only TypeAnalyzerError is recovered here. Anything else still moves the
    machine to Failed before it propagates, so a crash never leaves it Loading.

    Args:
        machine: The query state machine.
        text: Raw user input.
        runner: Function performing the analysis for a normalized query.

    Returns:
        The machine's state after the query.
    """
    loading = machine.submit(text)
    if loading is None:
        return machine.state

    try:
        analysis = runner(loading.query)
    except TypeAnalyzerError as e:
        machine.reject(loading.request_id, e)
    except Exception as e:
        machine.reject(loading.request_id, e)
        raise
    else:
        machine.resolve(loading.request_id, analysis)
    return machine.state
