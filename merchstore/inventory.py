"""Core records of the store: merchandise, shelves and errors."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

MAX_ALLOWED_STOCK = 10000
MIN_ALLOWED_STOCK = 0

MAX_ALLOWED_PRICE = 100000
MIN_ALLOWED_PRICE = 0

_SHELF_PATTERN = re.compile(r"[A-Z][0-9]{2}")


class WebstoreError(Exception):
    """Base class for errors raised by the store."""


class MerchNotFoundError(WebstoreError, KeyError):
    """The named merchandise does not exist."""


class DuplicateMerchError(WebstoreError):
    """A merchandise name is already in use."""


class InvalidShelfError(WebstoreError, ValueError):
    """A shelf name is not one capital letter followed by two digits."""


def is_shelf(name):
    """Return True if ``name`` is a valid shelf name such as ``A01``."""
    return isinstance(name, str) and _SHELF_PATTERN.fullmatch(name) is not None


@dataclass
class Shelf:
    """A storage location together with the amount stored there."""

    shelf: str
    amount: int = 0

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError("negative stock")
        if not is_shelf(self.shelf):
            raise InvalidShelfError(f"shelf name is incorrectly formatted: {self.shelf!r}")


@dataclass
class Merch:
    """An item of merchandise and the shelves that hold it."""

    name: str
    desc: str
    price: int
    locs: list[Shelf] = field(default_factory=list)
    total_amount: int = 0

    def stock(self):
        """Total amount of this merchandise over all its shelves."""
        return sum(shelf.amount for shelf in self.locs)

    def find_shelf(self, shelf):
        """Return the shelf record named ``shelf``, or None."""
        return next((loc for loc in self.locs if loc.shelf == shelf), None)