"""
Utility decorators and context managers.
"""

import time
from contextlib import contextmanager
from typing import Dict, Iterator


@contextmanager
def timer() -> Iterator[Dict[str, int]]:
    """
    Measure wall time of a block in milliseconds.

    The yielded dict gets its "ms" key when the block exits, so read it after
    the ``with`` statement:

        with timer() as t:
            work()
        elapsed = t["ms"]
    """
    result: Dict[str, int] = {"ms": 0}
    start = time.perf_counter()
    try:
        yield result
    finally:
        result["ms"] = max(1, int((time.perf_counter() - start) * 1000))
