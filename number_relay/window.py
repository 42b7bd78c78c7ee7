import math
from fractions import Fraction
from typing import Iterable, List, Set, Tuple

from .models import Number

WINDOW_SIZE = 10


def update_window(
    window: List[Number],
    members: Set[Number],
    incoming: Iterable[Number],
    capacity: int = WINDOW_SIZE,
) -> Tuple[List[Number], Set[Number]]:
    """Merge incoming values into a bounded, duplicate-free window.

    Values already present are skipped without moving them. When the window
    is full the oldest value is evicted from both the window and the set
    before the new value is appended. The inputs are left untouched.
    """
    if capacity < 1:
        raise ValueError("capacity must be positive")
    new_window = list(window)
    new_members = set(members)
    for value in incoming:
        if value in new_members:
            continue
        while len(new_window) >= capacity:
            evicted = new_window.pop(0)
            new_members.discard(evicted)
        new_window.append(value)
        new_members.add(value)
    return new_window, new_members


def _mean(window: List[Number]) -> float:
    specials = [v for v in window if isinstance(v, float) and not math.isfinite(v)]
    if specials:
        return sum(specials)
    # ints may be too large for a float, so sum exactly and round once
    exact = sum(map(Fraction, window)) / len(window)
    try:
        return float(exact)
    except OverflowError:
        return math.inf if exact > 0 else -math.inf


def average(window: List[Number]) -> str:
    if not window:
        return "0.00"
    mean = _mean(window)
    if math.isnan(mean):
        return "NaN"
    if math.isinf(mean):
        return "Infinity" if mean > 0 else "-Infinity"
    return f"{mean:.2f}"
