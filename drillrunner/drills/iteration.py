"""Drills on iterators, shared data across threads and passing lists around."""

from __future__ import annotations

import math
import threading
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

FILL_VALUES = (22, 44, 66)


def capitalize_first(text: str) -> str:
    """Return ``text`` with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Capitalize the first character of every word."""
    return [capitalize_first(word) for word in words]


def capitalize_joined(words: Iterable[str]) -> str:
    """Capitalize every word and join them into a single string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(Exception):
    """Raised when one integer cannot be divided evenly by another."""


class NotDivisibleError(DivisionError):
    """Raised when the dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """Raised when the divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` when ``a`` is evenly divisible by ``b``."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def divide_all(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number by ``divisor``; the first failure is raised."""
    return [divide(n, divisor) for n in numbers]


def division_results(numbers: Iterable[int], divisor: int) -> list[int | DivisionError]:
    """Divide every number by ``divisor``, keeping each failure in place of its result."""
    results: list[int | DivisionError] = []
    for n in numbers:
        try:
            results.append(divide(n, divisor))
        except DivisionError as exc:
            results.append(exc)
    return results


def factorial(num: int) -> int:
    """Return the factorial of a non-negative integer."""
    if num < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {num}")
    return math.prod(range(1, num + 1))


def offset_sums(numbers: Sequence[int], workers: int = 8, stride: int = 5) -> list[int]:
    """Sum every ``stride``-th number starting at each offset, one thread per offset.

    The numbers are shared between the threads without being copied; the sums
    come back in offset order.
    """
    if stride <= 0:
        raise ValueError(f"stride must be positive, got {stride}")
    if workers <= 0:
        return []
    shared = numbers

    def sum_from(offset: int) -> int:
        return sum(shared[offset::stride])

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_from, range(workers)))


class JobStatus:
    """A count of completed jobs that several threads may update."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._jobs_completed = 0

    def complete_one(self) -> None:
        """Record one more completed job."""
        with self._lock:
            self._jobs_completed += 1

    def completed(self) -> int:
        """Return the number of jobs completed so far."""
        with self._lock:
            return self._jobs_completed


def run_jobs(
    total: int = 10, work_interval: float = 0.25, poll_interval: float = 0.5
) -> JobStatus:
    """Complete ``total`` jobs in a worker thread while the caller watches progress.

    Prints "waiting... " each time the jobs are found unfinished.
    """
    status = JobStatus()

    def work() -> None:
        for _ in range(total):
            time.sleep(work_interval)
            status.complete_one()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    while status.completed() < total:
        print("waiting... ")
        time.sleep(poll_interval)
    worker.join()
    return status


def fill_vec(vec: Iterable[int] | None = None) -> list[int]:
    """Return a new list holding ``vec`` followed by 22, 44 and 66.

    The given list is left untouched; with no argument a fresh list is filled.
    """
    filled = list(vec) if vec is not None else []
    filled.extend(FILL_VALUES)
    return filled