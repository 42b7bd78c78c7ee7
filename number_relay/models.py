import math
from dataclasses import dataclass, field
from typing import Dict, List, Set, Union

Number = Union[int, float]


def is_number(value: object) -> bool:
    """Ints of any size and finite floats; bools are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


@dataclass
class WindowState:
    window: List[Number] = field(default_factory=list)
    members: Set[Number] = field(default_factory=set)

    def to_dict(self) -> Dict[str, List[Number]]:
        return {"numberWindow": list(self.window), "numberSet": list(self.members)}


@dataclass
class RelayResult:
    window_prev: List[Number]
    window_curr: List[Number]
    numbers: List[Number]
    avg: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "windowPrevState": self.window_prev,
            "windowCurrState": self.window_curr,
            "numbers": self.numbers,
            "avg": self.avg,
        }
