"""Context managers that time a block of code into a registered Sample.

Usage example:
```python
with sample_timer(MetricName.BUFFER_LOAD_TIME):
    load_buffer()

async with async_sample_timer(MetricName.NETWORK_LATENCY, sample_id="tile-3"):
    await fetch_tile()
```
"""

from contextlib import asynccontextmanager, contextmanager
from typing import AsyncGenerator, Generator, Optional, Union

from visgoth.core.logging_config import get_logger
from .instance import AnyRegistry, get_visgoth
from .labels import MetricName
from .sample import Sample

logger = get_logger(__name__)


def _start(name, sample_id: Optional[str], registry: Optional[AnyRegistry]) -> Sample:
    registry = registry if registry is not None else get_visgoth()
    sample = registry.create_sample(name, sample_id=sample_id)
    sample.mark_start()
    return sample


def _finish(sample: Sample) -> None:
    try:
        elapsed = sample.record_elapsed()
        logger.debug(f"Sample timer: {sample.name} took {elapsed:.2f}ms")
    except Exception as e:
        # Never let profiling errors affect the timed block
        logger.debug(f"Error recording sample {sample.name}: {e}")


@contextmanager
def sample_timer(
    name: Union[MetricName, str],
    sample_id: Optional[str] = None,
    registry: Optional[AnyRegistry] = None,
) -> Generator[Sample, None, None]:
    """Time the enclosed block into a new registered sample.

    Args:
        name: Metric bucket the sample belongs to
        sample_id: Optional label for the sample
        registry: Registry to register with (defaults to the active one)

    Yields:
        The sample being timed
    """
    sample = _start(name, sample_id, registry)
    try:
        yield sample
    finally:
        _finish(sample)


@asynccontextmanager
async def async_sample_timer(
    name: Union[MetricName, str],
    sample_id: Optional[str] = None,
    registry: Optional[AnyRegistry] = None,
) -> AsyncGenerator[Sample, None]:
    """Async counterpart of ``sample_timer``."""
    sample = _start(name, sample_id, registry)
    try:
        yield sample
    finally:
        _finish(sample)
