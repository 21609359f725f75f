"""Drills on reporting failures: bad names, bad numbers and bad input."""

from __future__ import annotations

import io
from dataclasses import dataclass
from enum import Enum

PROCESSING_FEE = 1
COST_PER_ITEM = 5

_DIGITS = frozenset("0123456789")


class ParseIntError(ValueError):
    """Raised when text is not an integer that fits the target width."""


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of ``bits`` width, rejecting anything but ASCII digits."""
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ParseIntError("invalid digit found in string")
    value = -int(digits) if text[0] == "-" else int(digits)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ParseIntError("number too large to fit in target type")
    if value < -limit:
        raise ParseIntError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the text for a nametag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy ``item_quantity`` items, including the processing fee."""
    quantity = _parse_int(item_quantity, 32)
    return quantity * COST_PER_ITEM + PROCESSING_FEE


def spend_tokens(tokens: int, user_input: str) -> str:
    """Try to buy the typed quantity of items with ``tokens`` and report the outcome."""
    cost = total_cost(user_input)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationReason(Enum):
    """Why a positive non-zero integer could not be made."""

    NEGATIVE = "Negative"
    ZERO = "Zero"


class CreationError(ValueError):
    """Raised when a value is not a positive non-zero integer."""

    def __init__(self, reason: CreationReason) -> None:
        super().__init__(reason.value)
        self.reason = reason


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"expected an integer, got {self.value!r}")
        if self.value == 0:
            raise CreationError(CreationReason.ZERO)
        if self.value < 0:
            raise CreationError(CreationReason.NEGATIVE)


def read_and_validate(stream: io.IOBase) -> PositiveNonzeroInteger:
    """Read one line from ``stream`` and turn it into a positive non-zero integer.

    Read failures, unparsable text and out-of-range values all propagate
    as exceptions.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    return PositiveNonzeroInteger(_parse_int(line.strip(), 64))


def pop_too_much() -> bool:
    """Pop from a one-item list twice, coping with the list running empty."""
    items = [3]

    last = items.pop() if items else None
    if last is None:
        print("The list is empty")
    else:
        print(f"The last item in the list is {last!r}")

    second_to_last = items.pop() if items else None
    if second_to_last is None:
        print("There is no second-to-last item in the list")
    else:
        print(f"The second-to-last item in the list is {second_to_last!r}")
    return True