"""Small drills on functions, conditions, variables and primitive types."""

from __future__ import annotations

from collections.abc import Sequence

BULK_THRESHOLD = 40
BIG_ARRAY_LENGTH = 100


def calculate_price(amount: int) -> int:
    """Price of an order of apples.

    Each apple costs 2, or 1 when more than 40 are bought at once.
    """
    return amount if amount > BULK_THRESHOLD else amount * 2


def times_two(num: int) -> int:
    """Return twice ``num``."""
    return num * 2


def ring_calls(num: int) -> list[str]:
    """Return one ring message for each of ``num`` calls, numbered from 1."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def is_even(num: int) -> bool:
    """Whether ``num`` is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return ``num`` multiplied by itself."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def greeting_for(is_morning: bool, is_evening: bool) -> list[str]:
    """Return the greetings that apply to the time of day."""
    greetings = []
    if is_morning:
        greetings.append("Good morning!")
    if is_evening:
        greetings.append("Good evening!")
    return greetings


def classify_character(ch: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(items: Sequence) -> str:
    """Comment on the size of a sequence."""
    if len(items) >= BIG_ARRAY_LENGTH:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def middle_slice(items: Sequence) -> Sequence:
    """Return the items at positions 1 to 3 inclusive."""
    if len(items) < 4:
        raise IndexError(f"range end index 4 out of range for length {len(items)}")
    return items[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a ``(name, age)`` pair."""
    name, age = cat
    return f"{name} is {age} years old."


def second_number(numbers: Sequence):
    """Return the second element of a sequence."""
    return numbers[1]