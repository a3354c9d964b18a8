"""Run deferred calls in fixed-size concurrent batches."""

from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> list[Sequence[T]]:
    """Split items into consecutive chunks of `size` (last may be shorter)."""
    return [items[i : i + size] for i in range(0, len(items), size)]


def run_batched(operations: Sequence[Callable[[], T]], batch_size: int) -> list[T]:
    """
    Run zero-argument callables in batches, returning results in input order.

    All calls in a batch start together; the next batch starts only after
    every call in the current one has finished. If any call raises, the
    error of the first failing call (in input order) is re-raised once its
    batch has settled, and no results are returned.

    Args:
        operations: Deferred calls to run.
        batch_size: Max calls in flight at once.

    Returns:
        List of results, same length and order as `operations`.
    """
    if not isinstance(batch_size, int) or batch_size < 1:
        raise ValueError(f"batch_size must be a positive integer, got {batch_size!r}")

    results: list[T] = []
    if not operations:
        return results

    batches = chunk(list(operations), batch_size)
    with ThreadPoolExecutor(max_workers=batch_size) as executor:
        for batch_num, batch in enumerate(batches, start=1):
            print(f"  Running batch {batch_num}/{len(batches)} ({len(batch)} calls)...", flush=True)
            futures = [executor.submit(op) for op in batch]
            wait(futures)
            # .result() re-raises the call's own exception
            results.extend(future.result() for future in futures)

    return results
