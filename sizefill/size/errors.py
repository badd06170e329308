from enum import Enum


class FailureKind(str, Enum):
    INVALID_FORMAT = "invalid_format"
    FRACTION_TOO_PRECISE = "fraction_too_precise"
    ZERO_SIZE = "zero_size"
    OVERFLOW = "overflow"
    INVALID_DEVIATION = "invalid_deviation"


class ParseFailure(ValueError):
    """Base class for every reason a magnitude string is rejected."""

    kind: FailureKind

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidFormat(ParseFailure):
    kind = FailureKind.INVALID_FORMAT


class FractionTooPrecise(ParseFailure):
    kind = FailureKind.FRACTION_TOO_PRECISE


class ZeroSize(ParseFailure):
    kind = FailureKind.ZERO_SIZE


class Overflow(ParseFailure):
    kind = FailureKind.OVERFLOW


class InvalidDeviation(ParseFailure):
    kind = FailureKind.INVALID_DEVIATION
