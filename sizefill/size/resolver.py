import math
import random
from typing import Optional

from sizefill.core.config import get_settings
from sizefill.core.logging import get_logger
from .errors import FractionTooPrecise, InvalidDeviation, Overflow, ZeroSize
from .parser import ParsedMagnitude, parse_magnitude

log = get_logger("size.resolver")


def validate_deviation(deviation: float) -> float:
    try:
        value = float(deviation)
    except (TypeError, ValueError):
        raise InvalidDeviation(f"deviation must be a number, got {deviation!r}", deviation)
    # NaN fails both comparisons
    if not (0.0 <= value < 1.0):
        raise InvalidDeviation(f"deviation must be in [0, 1), got {deviation}", deviation)
    return value


def base_value(parsed: ParsedMagnitude, max_size: int) -> int:
    """Byte count of the explicit digits with every unspecified position set to zero.

    base_value(("123", "456", MEGA)) == 123456000
    base_value(("123", None, KILO)) == 123000
    """
    offset = parsed.unit.offset
    if parsed.fraction_length > offset:
        raise FractionTooPrecise(
            f"{parsed.fraction_length} fractional digit(s) given but unit "
            f"'{parsed.unit.value or 'none'}' only has {offset}",
            parsed,
        )
    shift = offset - parsed.fraction_length
    # Reject absurdly long digit strings before int() has to convert them
    significant = parsed.digits.lstrip("0") or "0"
    if len(significant) + shift > len(str(max_size)):
        raise Overflow(f"'{parsed.digits}' exceeds the maximum size of {max_size} bytes", parsed)
    value = int(significant) * 10 ** shift
    if value > max_size:
        raise Overflow(f"{value} exceeds the maximum size of {max_size} bytes", value)
    return value


def random_window(parsed: ParsedMagnitude, deviation: float) -> int:
    """Half-width of the randomization window around the base value."""
    adjusted_factor = parsed.unit.factor // 10 ** parsed.fraction_length
    return math.floor(adjusted_factor * deviation)


class SizeResolver:
    def __init__(self, max_size: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.max_size = max_size if max_size is not None else get_settings().max_size
        self.rng = rng

    def resolve(self, raw: str, deviation: float = 0.0) -> int:
        deviation = validate_deviation(deviation)
        parsed = parse_magnitude(raw)

        value = base_value(parsed, self.max_size)
        if value == 0:
            raise ZeroSize(f"'{raw}' resolves to zero bytes", raw)

        window = random_window(parsed, deviation)
        rng = self.rng if self.rng is not None else random.Random()
        delta = rng.randint(-window, window) if window else 0

        size = value + delta
        if size < 0 or size > self.max_size:
            raise Overflow(f"{size} is outside 0..{self.max_size} bytes", size)

        log.debug(f"Resolved '{raw}' to {size} bytes (base {value}, window +/-{window})")
        return size


def resolve(
    raw: str,
    deviation: float = 0.0,
    *,
    rng: Optional[random.Random] = None,
    max_size: Optional[int] = None,
) -> int:
    return SizeResolver(max_size=max_size, rng=rng).resolve(raw, deviation)
