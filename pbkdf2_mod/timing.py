from __future__ import annotations
import time
from typing import Any, Callable, Tuple, TypeVar

T = TypeVar("T")


def measure(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Tuple[T, float]:
    """Call fn once and return (result, elapsed seconds). Exceptions propagate untimed."""
    start = time.perf_counter()
    result = fn(*args, **kwargs)
    elapsed = time.perf_counter() - start
    return result, max(elapsed, 0.0)
