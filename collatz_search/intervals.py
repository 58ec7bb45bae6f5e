"""
Sets of closed integer intervals with merge-on-insert.

An ``IntervalSet`` stores disjoint, non-adjacent ranges ``[low, high]`` over a
fixed-width unsigned domain. Points are added one at a time with ``insert``,
which grows or joins neighbouring ranges instead of storing the point on its
own, and whole sets are folded in with ``union_from``.

Ranges are kept in insertion order. ``sort`` orders them for display and never
merges anything.

Every mutation computes the resulting ranges first and then rebuilds the
backing list, so no index is ever read after an earlier removal shifted it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Mapping, Optional, Set, Tuple, Union

from .domain import U128, IntegerDomain


class Coalesce(Enum):
    """How far ``IntervalSet.insert`` goes when joining neighbours.

    ``PAIRWISE`` joins the new point with at most two ranges and stops, which
    is enough while the set keeps its invariants. ``FULL`` keeps absorbing
    touching ranges until none is left, which also repairs sets that were
    built with adjacent ranges already in them.
    """

    PAIRWISE = "pairwise"
    FULL = "full"


@dataclass(frozen=True, order=True)
class Interval:
    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"interval low ({self.low}) must be <= high ({self.high})")

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.low <= value <= self.high

    def __iter__(self) -> Iterator[int]:
        yield self.low
        yield self.high

    def as_tuple(self) -> Tuple[int, int]:
        return (self.low, self.high)

    def span(self, other: Interval) -> Interval:
        """Smallest interval covering both ``self`` and ``other``."""
        return Interval(min(self.low, other.low), max(self.high, other.high))


IntervalLike = Union[Interval, Tuple[int, int]]


class IntervalSet:
    def __init__(
        self,
        intervals: Iterable[IntervalLike] = (),
        *,
        domain: IntegerDomain = U128,
        coalesce: Coalesce = Coalesce.PAIRWISE,
    ) -> None:
        """Build a set from ``intervals`` exactly as given.

        Nothing is merged here, so callers can construct sets that break the
        no-overlap/no-adjacency invariants on purpose.
        """
        self.domain = domain
        self.coalesce = coalesce
        self._intervals: List[Interval] = [self._coerce(iv) for iv in intervals]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def intervals(self) -> Tuple[Interval, ...]:
        return tuple(self._intervals)

    def as_tuples(self) -> List[Tuple[int, int]]:
        return [iv.as_tuple() for iv in self._intervals]

    def contains(self, value: int) -> bool:
        return any(iv.low <= value <= iv.high for iv in self._intervals)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def __iter__(self) -> Iterator[Interval]:
        return iter(tuple(self._intervals))

    def __len__(self) -> int:
        return len(self._intervals)

    def __bool__(self) -> bool:
        return bool(self._intervals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return sorted(self._intervals) == sorted(other._intervals)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.as_tuples())

    def __repr__(self) -> str:
        return f"IntervalSet({self.as_tuples()!r})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, value: int) -> bool:
        """Add a single point.

        Returns True if ``value`` was already covered (the set is left
        untouched) and False if it was new.
        """
        value = self.domain.check(value)
        if self.contains(value):
            return True

        above = self.domain.successor(value)
        below = self.domain.predecessor(value)

        first: Optional[Tuple[int, Interval]] = None
        second: Optional[Tuple[int, Interval]] = None
        for i, iv in enumerate(self._intervals):
            if above is not None and iv.low == above:
                grown = Interval(value, iv.high)
            elif below is not None and iv.high == below:
                grown = Interval(iv.low, value)
            else:
                continue

            if first is None:
                first = (i, grown)
                continue
            second = (i, first[1].span(grown))
            break

        if first is None:
            self._intervals.append(Interval(value, value))
            return False

        if second is None:
            index, merged = first
            self._intervals = self._rebuild({index: merged}, set())
        else:
            index, merged = second
            self._intervals = self._rebuild({index: merged}, {first[0]})
            # the dropped range always sat before the kept one
            index -= 1

        if self.coalesce is Coalesce.FULL:
            self._absorb_touching(index)
        return False

    def union_from(self, other: IntervalSet) -> None:
        """Fold every range of ``other`` into this set.

        Each incoming range is joined with all ranges here that overlap or
        touch it. One of those is replaced by the combined range, the rest are
        dropped. A range that touches nothing is appended as is. Ranges that
        were already adjacent inside this set before the call stay separate.
        """
        for incoming in other.intervals:
            incoming = self._coerce(incoming)
            hits = [i for i, iv in enumerate(self._intervals) if self._touches(iv, incoming)]
            if not hits:
                self._intervals.append(incoming)
                continue

            keep = hits[-1]
            merged = incoming
            for i in hits:
                merged = merged.span(self._intervals[i])
            self._intervals = self._rebuild({keep: merged}, set(hits[:-1]))

    def clear(self) -> None:
        self._intervals = []

    def sort(self) -> None:
        self._intervals.sort()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _coerce(self, interval: IntervalLike) -> Interval:
        low, high = interval
        return Interval(self.domain.check(low), self.domain.check(high))

    def _touches(self, a: Interval, b: Interval) -> bool:
        """True if ``a`` and ``b`` overlap or are merge-adjacent."""
        return self._reaches(a.low, b.high) and self._reaches(b.low, a.high)

    def _reaches(self, low: int, high: int) -> bool:
        # low <= high + 1, without stepping past the ceiling
        nxt = self.domain.successor(high)
        return low <= (high if nxt is None else nxt)

    def _rebuild(self, replace: Mapping[int, Interval], drop: Set[int]) -> List[Interval]:
        return [
            replace.get(i, iv)
            for i, iv in enumerate(self._intervals)
            if i not in drop
        ]

    def _absorb_touching(self, index: int) -> None:
        while True:
            merged = self._intervals[index]
            hits = {
                i
                for i, iv in enumerate(self._intervals)
                if i != index and self._touches(iv, merged)
            }
            if not hits:
                return
            for i in hits:
                merged = merged.span(self._intervals[i])
            self._intervals = self._rebuild({index: merged}, hits)
            index -= sum(1 for i in hits if i < index)
