from enum import Enum
from typing import Optional


class Unit(Enum):
    """Size suffix with its decimal exponent."""

    NONE = ""
    KILO = "k"
    MEGA = "m"
    GIGA = "g"

    @property
    def exponent(self) -> int:
        return _EXPONENTS[self]

    @property
    def factor(self) -> int:
        return 10 ** self.exponent

    @property
    def offset(self) -> int:
        # Trailing digit positions the unit implies, e.g. "5k" -> "5___"
        return len(str(self.factor)) - 1

    @classmethod
    def from_suffix(cls, suffix: Optional[str]) -> "Unit":
        if not suffix:
            return cls.NONE
        return cls(suffix.lower())


_EXPONENTS = {
    Unit.NONE: 0,
    Unit.KILO: 3,
    Unit.MEGA: 6,
    Unit.GIGA: 9,
}
