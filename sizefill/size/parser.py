"""
Grammar for magnitude strings such as "123", "5k", "123,4m" or ".456G".

Capture groups of MAGNITUDE for "123.456m":
  1: "123."  (integer part with its dot)
  2: "123"   (integer part)
  3: "456"   (digits right of the dot, or the whole number when there is no dot)
  4: "m"     (unit)
"""

import re
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidFormat
from .units import Unit

MAGNITUDE = re.compile(r"^((\d*)\.)?(\d+)([kmg])?$")


@dataclass(frozen=True)
class ParsedMagnitude:
    integer_part: str
    fraction_part: Optional[str]
    unit: Unit

    @property
    def fraction_length(self) -> int:
        return len(self.fraction_part) if self.fraction_part is not None else 0

    @property
    def digits(self) -> str:
        return self.integer_part + (self.fraction_part or "")


def normalize(raw: str) -> str:
    return raw.replace(",", ".").lower()


def parse_magnitude(raw: str) -> ParsedMagnitude:
    """Split a magnitude string into integer digits, fraction digits and unit.

    Without a dot the single number is the integer part: "123" is 123, never 0.123.
    An empty integer part before the dot counts as "0" (".456m").
    Raises InvalidFormat when the string does not match MAGNITUDE.
    """
    if raw is None:
        raise InvalidFormat("no size given", raw)
    m = MAGNITUDE.fullmatch(normalize(raw))
    if not m:
        raise InvalidFormat(f"'{raw}' is not a number with an optional k/m/g unit", raw)

    unit = Unit.from_suffix(m.group(4))
    if m.group(1) is None:
        return ParsedMagnitude(integer_part=m.group(3), fraction_part=None, unit=unit)
    return ParsedMagnitude(
        integer_part=m.group(2) or "0",
        fraction_part=m.group(3),
        unit=unit,
    )
