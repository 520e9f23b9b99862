import time
from contextlib import contextmanager


class Timer:
    """Collects per-phase durations of one validation run in whole milliseconds."""

    def __init__(self) -> None:
        self.durations_ms: dict[str, int] = {}

    @contextmanager
    def phase(self, name: str):
        start = time.perf_counter()
        try:
            yield
        finally:
            self.durations_ms[f"{name}_ms"] = int(round((time.perf_counter() - start) * 1000))
