import logging
import threading
from typing import AbstractSet

from .config import VALID_SERIES_IDS
from .gate import CacheGate
from .models import RelayResult, WindowState
from .numbers_client import NumbersClient
from .state_store import StateStore
from .window import WINDOW_SIZE, average, update_window


class InvalidSeriesError(ValueError):
    pass


class NumberRelay:
    """Serves one request: gate check, fetch, window update and persistence.

    A single window is shared by every series id. Load, update and save run
    under one lock so concurrent admitted requests cannot lose updates; the
    upstream fetch happens outside it.
    """

    def __init__(
        self,
        store: StateStore,
        client: NumbersClient,
        gate: CacheGate,
        window_size: int = WINDOW_SIZE,
        series_ids: AbstractSet[str] = VALID_SERIES_IDS,
    ) -> None:
        self.store = store
        self.client = client
        self.gate = gate
        self.window_size = window_size
        self.series_ids = series_ids
        self._state_lock = threading.Lock()

    def handle(self, series_id: str) -> RelayResult:
        if series_id not in self.series_ids:
            raise InvalidSeriesError(series_id)

        if not self.gate.admit():
            logging.debug("Serving cached window for %s", series_id)
            with self._state_lock:
                state = self.store.load()
            return RelayResult(
                window_prev=list(state.window),
                window_curr=list(state.window),
                numbers=[],
                avg=average(state.window),
            )

        numbers = self.client.fetch(series_id)

        with self._state_lock:
            prev = self.store.load()
            window, members = update_window(prev.window, prev.members, numbers, self.window_size)
            if not self.store.save(WindowState(window=window, members=members)):
                logging.warning("Window update for %s was not persisted", series_id)

        return RelayResult(
            window_prev=list(prev.window),
            window_curr=window,
            numbers=list(numbers),
            avg=average(window),
        )
