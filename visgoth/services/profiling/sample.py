"""Sample - a single named measurement series.

Instrumentation call sites create a Sample, mark its timing window and record
values into it, then hand it to a VisgothRegistry. Values are append-only.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from visgoth.core.logging_config import get_logger
from .labels import MetricName, metric_key

logger = get_logger(__name__)


def now_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.monotonic_ns() / 1_000_000.0


@dataclass
class Sample:
    """Measurement series with start/end markers and recorded values.

    ``start`` and ``end`` default to 0; an elapsed value recorded without a
    prior ``mark_start()`` is therefore the raw clock reading.
    """
    name: Union[MetricName, str]
    sample_id: Optional[str] = None
    start: float = 0.0
    end: float = 0.0
    values: List[float] = field(default_factory=list)
    clock: Callable[[], float] = field(default=now_ms, repr=False, compare=False)
    _started: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self):
        self.name = metric_key(self.name)

    @property
    def has_started(self) -> bool:
        return self._started

    def mark_start(self) -> None:
        self.start = self.clock()
        self._started = True

    def mark_end(self) -> None:
        self.end = self.clock()

    def record(self, value: float) -> None:
        self.values.append(value)

    def record_elapsed(self, auto_mark_end: bool = True) -> float:
        """Append ``end - start`` to the values.

        Args:
            auto_mark_end: Call ``mark_end()`` first (default). Pass False when
                the end marker was already set by the caller.

        Returns:
            The elapsed value that was recorded
        """
        if auto_mark_end:
            self.mark_end()
        if not self._started:
            logger.debug(f"Sample '{self.name}' recorded elapsed time without mark_start()")
        elapsed = self.end - self.start
        self.values.append(elapsed)
        return elapsed
