"""Positions of objects on the game board."""

from __future__ import annotations

NUMBER_LIMIT = 100


def _two_digits(value: int) -> int:
    """Keep the last two digits of ``value``, preserving its sign."""
    remainder = abs(value) % NUMBER_LIMIT
    return -remainder if value < 0 else remainder


class ObjPos:
    """A board position carrying a number, a prefix character and a symbol.

    The constructor stores ``number`` as given; assigning to ``number``
    afterwards keeps only its last two digits.
    """

    __slots__ = ("x", "y", "_number", "prefix", "symbol")

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        number: int = 0,
        prefix: str = "\0",
        symbol: str = "\0",
    ) -> None:
        self.x = x
        self.y = y
        self._number = number
        self.prefix = prefix
        self.symbol = symbol

    @property
    def number(self) -> int:
        return self._number

    @number.setter
    def number(self, value: int) -> None:
        self._number = _two_digits(value)

    def overlaps(self, other: ObjPos) -> bool:
        """Return True when both positions share the same coordinates."""
        return self.x == other.x and self.y == other.y

    def copy(self) -> ObjPos:
        """Return an independent copy of this position."""
        return ObjPos(self.x, self.y, self._number, self.prefix, self.symbol)

    def _fields(self) -> tuple[int, int, int, str, str]:
        return (self.x, self.y, self._number, self.prefix, self.symbol)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjPos):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"ObjPos(x={self.x!r}, y={self.y!r}, number={self._number!r}, "
            f"prefix={self.prefix!r}, symbol={self.symbol!r})"
        )

    def __str__(self) -> str:
        return f"({self.x},{self.y}), {self.prefix} {self._number} {self.symbol}"