import random

import pytest

from number_relay.window import WINDOW_SIZE, average, update_window


class TestUpdateWindow:
    def test_appends_in_arrival_order(self):
        window, members = update_window([], set(), [3, 1, 2])
        assert window == [3, 1, 2]
        assert members == {1, 2, 3}

    def test_duplicate_in_same_call_is_noop(self):
        window, members = update_window([], set(), [5, 5, 7, 5])
        assert window == [5, 7]
        assert members == {5, 7}

    def test_duplicate_across_calls_does_not_refresh_position(self):
        window, members = update_window([], set(), [1, 2, 3])
        window, members = update_window(window, members, [1])
        assert window == [1, 2, 3]

    def test_fifo_eviction(self):
        full = list(range(1, 11))
        window, members = update_window(full, set(full), [11])
        assert window == list(range(2, 12))
        assert members == set(range(2, 12))

    def test_evicted_value_can_return(self):
        full = list(range(1, 11))
        window, members = update_window(full, set(full), [11, 1])
        assert window == [3, 4, 5, 6, 7, 8, 9, 10, 11, 1]
        assert 2 not in members

    def test_inputs_not_mutated(self):
        window = [1, 2]
        members = {1, 2}
        update_window(window, members, [3])
        assert window == [1, 2]
        assert members == {1, 2}

    def test_int_and_float_are_equal_members(self):
        window, _ = update_window([2], {2}, [2.0, 4.5])
        assert window == [2, 4.5]

    def test_oversized_window_is_trimmed_to_capacity(self):
        window, members = update_window([1, 2, 3, 4], {1, 2, 3, 4}, [5], capacity=3)
        assert window == [3, 4, 5]
        assert members == {3, 4, 5}

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            update_window([], set(), [1], capacity=0)

    def test_invariants_hold_for_random_streams(self):
        rng = random.Random(1234)
        window, members = [], set()
        for _ in range(200):
            incoming = [rng.randint(0, 30) for _ in range(rng.randint(0, 15))]
            window, members = update_window(window, members, incoming)
            assert len(window) <= WINDOW_SIZE
            assert len(set(window)) == len(window)
            assert members == set(window)


class TestAverage:
    def test_empty(self):
        assert average([]) == "0.00"

    def test_two_decimals(self):
        assert average([1, 2, 3]) == "2.00"
        assert average([1, 2]) == "1.50"
        assert average([1, 1, 2]) == "1.33"

    def test_int_beyond_float_range(self):
        assert average([10 ** 400]) == "Infinity"
        assert average([-(10 ** 400), 1]) == "-Infinity"

    def test_huge_ints_that_cancel(self):
        assert average([10 ** 400, -(10 ** 400), 3]) == "1.00"

    def test_non_finite_floats(self):
        assert average([float("inf"), 1]) == "Infinity"
        assert average([float("inf"), float("-inf")]) == "NaN"
