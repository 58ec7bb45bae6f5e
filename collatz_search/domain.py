from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .errors import ArithmeticOverflowError, ArithmeticUnderflowError

DEFAULT_BITS = 128


@dataclass(frozen=True)
class IntegerDomain:
    """Fixed-width unsigned integers: ``0 ..= 2**bits - 1``.

    Python ints never wrap, so the width is enforced by checking results
    against the bounds instead. Every arithmetic helper here either returns a
    value inside the domain or raises.
    """

    bits: int = DEFAULT_BITS
    minimum: int = field(init=False, default=0)
    maximum: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(f"bit width must be positive, got {self.bits}")
        object.__setattr__(self, "maximum", (1 << self.bits) - 1)

    def check(self, value: int) -> int:
        if value < self.minimum:
            raise ArithmeticUnderflowError(value, self.minimum)
        if value > self.maximum:
            raise ArithmeticOverflowError(value, self.maximum)
        return value

    def checked_add(self, a: int, b: int) -> int:
        return self.check(a + b)

    def checked_mul(self, a: int, b: int) -> int:
        return self.check(a * b)

    def predecessor(self, value: int) -> Optional[int]:
        """Return ``value - 1``, or None when ``value`` is the floor."""
        return None if value <= self.minimum else value - 1

    def successor(self, value: int) -> Optional[int]:
        """Return ``value + 1``, or None when ``value`` is the ceiling."""
        return None if value >= self.maximum else value + 1

    def collatz_step(self, n: int) -> int:
        if n % 2 == 0:
            return n // 2
        return self.checked_add(self.checked_mul(n, 3), 1)


U128 = IntegerDomain()
