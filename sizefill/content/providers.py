import os
import random
from abc import ABC, abstractmethod
from typing import Optional

PRINTABLE_CHARS = (
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890!$/()=?{[]}.:,;-_+\n"
)


class ContentProvider(ABC):
    @abstractmethod
    def fill(self, size: int) -> bytes:
        """Return exactly ``size`` bytes of content."""


class PrintableCharProvider(ContentProvider):
    def __init__(self, rng: Optional[random.Random] = None, charset: str = PRINTABLE_CHARS) -> None:
        self.rng = rng or random.Random()
        self.charset = charset.encode("ascii")

    def fill(self, size: int) -> bytes:
        return bytes(self.rng.choices(self.charset, k=size))


class BinaryProvider(ContentProvider):
    def __init__(self, use_default_rng: bool = False, rng: Optional[random.Random] = None) -> None:
        self.use_default_rng = use_default_rng
        self.rng = rng or random.Random()

    def fill(self, size: int) -> bytes:
        if self.use_default_rng:
            return self.rng.randbytes(size)
        return os.urandom(size)


def get_provider(limit_charset: bool = False, always_use_default: bool = False) -> ContentProvider:
    if limit_charset:
        return PrintableCharProvider()
    return BinaryProvider(use_default_rng=always_use_default)
