"""Empirical Collatz counterexample search over merged integer intervals."""

from .config import SearchConfig, build_searcher
from .domain import U128, IntegerDomain
from .errors import (
    ArithmeticOverflowError,
    ArithmeticUnderflowError,
    CollatzSearchError,
    SearchTerminatedError,
)
from .intervals import Coalesce, Interval, IntervalSet
from .observers import LoggingObserver, SearchObserver
from .searcher import CollatzSearcher, SearchState, StepResult

__all__ = [
    "ArithmeticOverflowError",
    "ArithmeticUnderflowError",
    "Coalesce",
    "CollatzSearchError",
    "CollatzSearcher",
    "IntegerDomain",
    "Interval",
    "IntervalSet",
    "LoggingObserver",
    "SearchConfig",
    "SearchObserver",
    "SearchState",
    "SearchTerminatedError",
    "StepResult",
    "U128",
    "build_searcher",
]
