from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .domain import DEFAULT_BITS, IntegerDomain
from .intervals import Coalesce
from .observers import SearchObserver
from .searcher import REPORT_INTERVAL, CollatzSearcher

DEFAULT_START = 5


@dataclass(frozen=True)
class SearchConfig:
    start: int = DEFAULT_START
    bits: int = DEFAULT_BITS
    report_interval: int = REPORT_INTERVAL
    coalesce: Coalesce = Coalesce.PAIRWISE
    max_steps: Optional[int] = None


def build_searcher(config: SearchConfig, observer: Optional[SearchObserver] = None) -> CollatzSearcher:
    """Create a seeded searcher from ``config``."""
    return CollatzSearcher(
        config.start,
        domain=IntegerDomain(config.bits),
        coalesce=config.coalesce,
        report_interval=config.report_interval,
        observer=observer,
    )
