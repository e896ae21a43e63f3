"""
Chunked batch execution for statements with a bound parameter ceiling.
"""
from typing import Callable, Iterator, List, Sequence, TypeVar

T = TypeVar("T")


def chunked(items: Sequence[T], size: int) -> Iterator[List[T]]:
    """Yield consecutive windows of at most ``size`` items."""
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield list(items[start:start + size])


def execute_in_chunks(items: Sequence[T], size: int, execute: Callable[[List[T]], None]) -> int:
    """
    Run ``execute`` once per window, in order, on the calling thread.

    Stops at the first failing window; windows already executed stay
    executed. Empty input never calls ``execute``.

    Returns:
        Number of windows executed
    """
    executed = 0
    for chunk in chunked(items, size):
        execute(chunk)
        executed += 1
    return executed
