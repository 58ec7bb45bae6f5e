from __future__ import annotations

import logging
from typing import Sequence

from .intervals import Interval

log = logging.getLogger("collatz_search")


class SearchObserver:
    """Receives search events. Every hook is a no-op by default."""

    def on_checkpoint(self, steps: int, validated: Sequence[Interval]) -> None:
        pass

    def on_base_proven(self, base: int, value: int) -> None:
        pass

    def on_cycle(self, value: int) -> None:
        pass


class LoggingObserver(SearchObserver):
    """Report search events through :mod:`logging`."""

    def __init__(self, logger: logging.Logger = log) -> None:
        self.logger = logger

    def on_checkpoint(self, steps: int, validated: Sequence[Interval]) -> None:
        pairs = [iv.as_tuple() for iv in validated]
        self.logger.info("Step %d", steps)
        self.logger.info("%s", pairs)

    def on_base_proven(self, base: int, value: int) -> None:
        # One line per base; keep it out of the default INFO output.
        self.logger.debug("Conjecture validated for %d at %d", base, value)

    def on_cycle(self, value: int) -> None:
        self.logger.warning("LOOP FOUND, THIS IS NOT A DRILL, LOOP FOUND AT VALUE '%d'", value)
