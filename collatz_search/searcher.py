"""
Step-by-step search for a Collatz counterexample.

The searcher follows the trajectory of ``base_under_test`` one Collatz step at
a time. Values seen on the current trajectory go into ``unvalidated``. As soon
as the trajectory lands in ``validated`` the base and everything visited on the
way are known to reach the trivial cycle, so they are folded into
``validated`` and the next base starts. Landing on a value already in
``unvalidated`` means the trajectory looped without ever reaching known
territory: a non-trivial cycle.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .domain import U128, IntegerDomain
from .errors import SearchTerminatedError
from .intervals import Coalesce, IntervalSet
from .observers import SearchObserver

REPORT_INTERVAL = 10_000
FIRST_BASE = 4
KNOWN_GOOD = (1, 2, 3, 4)


class SearchState(Enum):
    RUNNING = "running"
    CYCLE_DETECTED = "cycle-detected"


class StepResult(Enum):
    CONTINUE = "continue"
    BASE_PROVEN = "base-proven"
    CYCLE_DETECTED = "cycle-detected"

    @property
    def is_terminal(self) -> bool:
        return self is StepResult.CYCLE_DETECTED


class CollatzSearcher:
    def __init__(
        self,
        seed: int,
        *,
        domain: IntegerDomain = U128,
        coalesce: Coalesce = Coalesce.PAIRWISE,
        report_interval: int = REPORT_INTERVAL,
        observer: Optional[SearchObserver] = None,
        seed_validated: bool = True,
    ) -> None:
        if report_interval <= 0:
            raise ValueError(f"report interval must be positive, got {report_interval}")
        self.domain = domain
        self.report_interval = report_interval
        self.observer = observer if observer is not None else SearchObserver()

        self.current_value = domain.check(seed)
        self.base_under_test = FIRST_BASE
        self.steps = 0
        self.state = SearchState.RUNNING
        self.cycle_value: Optional[int] = None

        self.unvalidated = IntervalSet(domain=domain, coalesce=coalesce)
        self.validated = IntervalSet(domain=domain, coalesce=coalesce)
        if seed_validated:
            for value in KNOWN_GOOD:
                self.validated.insert(value)

    @classmethod
    def empty(cls, seed: int, **kwargs) -> CollatzSearcher:
        """A searcher with nothing validated yet; seeding it is up to the caller."""
        return cls(seed, seed_validated=False, **kwargs)

    @property
    def terminated(self) -> bool:
        return self.state is SearchState.CYCLE_DETECTED

    def step(self) -> StepResult:
        """Advance the trajectory by one Collatz step."""
        if self.terminated:
            raise SearchTerminatedError(
                f"cycle already found at {self.cycle_value}; no further steps allowed"
            )

        if self.steps % self.report_interval == 0:
            self.validated.sort()
            self.observer.on_checkpoint(self.steps, self.validated.intervals)

        self.current_value = self.domain.collatz_step(self.current_value)
        self.steps += 1

        if self.unvalidated.insert(self.current_value):
            self.state = SearchState.CYCLE_DETECTED
            self.cycle_value = self.current_value
            self.observer.on_cycle(self.current_value)
            return StepResult.CYCLE_DETECTED

        if not self.validated.contains(self.current_value):
            return StepResult.CONTINUE

        self.observer.on_base_proven(self.base_under_test, self.current_value)
        self.validated.insert(self.base_under_test)
        self.validated.union_from(self.unvalidated)
        self.unvalidated.clear()

        self.base_under_test = self.domain.checked_add(self.base_under_test, 1)
        self.current_value = self.base_under_test
        return StepResult.BASE_PROVEN

    def run(self, max_steps: Optional[int] = None) -> StepResult:
        """Step until a cycle turns up or ``max_steps`` steps have been taken.

        Returns the result of the last step. With ``max_steps=None`` this only
        returns on a cycle, or raises on arithmetic overflow.
        """
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must not be negative, got {max_steps}")

        result = StepResult.CONTINUE
        taken = 0
        while max_steps is None or taken < max_steps:
            result = self.step()
            taken += 1
            if result.is_terminal:
                break
        return result
