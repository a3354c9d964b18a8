import threading
import time
from unittest.mock import MagicMock

import pytest

from minihouse.engine.batching import chunk, run_batched


def test_chunk_splits_with_short_tail():
    assert chunk([1, 2, 3, 4, 5, 6, 7], 3) == [[1, 2, 3], [4, 5, 6], [7]]
    assert chunk([], 3) == []


def test_results_keep_input_order_regardless_of_latency():
    # Earlier calls finish last within each batch
    delays = [0.06, 0.03, 0.0, 0.05, 0.01, 0.02, 0.0]

    def make_op(i, delay):
        def op():
            time.sleep(delay)
            return i
        return op

    ops = [make_op(i, d) for i, d in enumerate(delays)]

    assert run_batched(ops, 3) == list(range(len(delays)))


@pytest.mark.parametrize("batch_size", [1, 2, 3, 5])
def test_concurrency_never_exceeds_batch_size(batch_size):
    lock = threading.Lock()
    in_flight = 0
    peak = 0

    def op():
        nonlocal in_flight, peak
        with lock:
            in_flight += 1
            peak = max(peak, in_flight)
        time.sleep(0.02)
        with lock:
            in_flight -= 1
        return True

    results = run_batched([op] * 7, batch_size)

    assert results == [True] * 7
    assert 1 <= peak <= batch_size


def test_batches_run_strictly_in_sequence():
    lock = threading.Lock()
    events = []

    def make_op(i):
        def op():
            with lock:
                events.append(("start", i))
            time.sleep(0.01 * (3 - i % 3))
            with lock:
                events.append(("end", i))
            return i
        return op

    run_batched([make_op(i) for i in range(6)], 3)

    last_end_first_batch = max(events.index(("end", i)) for i in range(3))
    first_start_second_batch = min(events.index(("start", i)) for i in range(3, 6))
    assert last_end_first_batch < first_start_second_batch


def test_failure_aborts_without_partial_results():
    later = MagicMock(return_value="never")

    def boom():
        raise RuntimeError("image service down")

    with pytest.raises(RuntimeError, match="image service down"):
        run_batched([lambda: "a", boom, later], 2)

    later.assert_not_called()


def test_failure_waits_for_rest_of_batch():
    finished = threading.Event()

    def slow():
        time.sleep(0.05)
        finished.set()
        return "slow"

    def boom():
        raise ValueError("bad prompt")

    with pytest.raises(ValueError):
        run_batched([boom, slow], 2)

    assert finished.is_set()


def test_empty_input_returns_empty_list():
    assert run_batched([], 3) == []


@pytest.mark.parametrize("batch_size", [0, -1, 1.5])
def test_rejects_invalid_batch_size(batch_size):
    with pytest.raises(ValueError):
        run_batched([lambda: 1], batch_size)
