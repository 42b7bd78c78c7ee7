import json
import logging
import os
from typing import Any, List

from .models import Number, WindowState, is_number

DEFAULT_STATE_PATH = "localStorage.json"


def _parse_numbers(raw: Any) -> List[Number]:
    if not isinstance(raw, list) or not all(is_number(v) for v in raw):
        raise ValueError("expected a list of numbers")
    return raw


class StateStore:
    """Persists the number window and its membership set as one JSON document."""

    def __init__(self, path: str = DEFAULT_STATE_PATH) -> None:
        self.path = path
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def load(self) -> WindowState:
        if not os.path.exists(self.path):
            return WindowState()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("state root is not an object")
            window = _parse_numbers(data.get("numberWindow", []))
            members = set(_parse_numbers(data.get("numberSet", [])))
        except (OSError, ValueError) as e:
            logging.warning("Error reading state from %s: %s", self.path, e)
            return WindowState()

        if len(set(window)) != len(window):
            logging.warning("Persisted window in %s has duplicates; starting empty", self.path)
            return WindowState()
        if members != set(window):
            # the window is authoritative, the set only mirrors it
            logging.warning("Persisted set in %s does not match window; rebuilding", self.path)
            members = set(window)
        return WindowState(window=window, members=members)

    def save(self, state: WindowState) -> bool:
        tmp_path = self.path + ".tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(state.to_dict(), f)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            logging.error("Error writing state to %s: %s", self.path, e)
            try:
                os.remove(tmp_path)
            except OSError:
                pass
            return False
        return True
