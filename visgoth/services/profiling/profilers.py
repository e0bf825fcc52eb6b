"""Profiler formulas that reduce the sample table to derived metrics.

Each Profiler is a plain (name, compute) record. Compute functions read any
bucket of the table, return a float and never raise: missing data degrades to
0, inf or nan instead of an error.
"""

import math
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Dict, Iterable, List, Mapping, Sequence

from .labels import MetricName, metric_key
from .sample import Sample

SampleTable = Mapping[str, Sequence[Sample]]


@dataclass(frozen=True)
class Profiler:
    name: MetricName
    compute: Callable[[SampleTable], float]


def as_float(value) -> float:
    """Convert to float, saturating ints too large for a double to +-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def sum_values(values: Iterable[float]) -> float:
    return reduce(lambda x, y: x + as_float(y), values, 0)


def avg_values(values: Sequence[float]) -> float:
    """Arithmetic mean, 0 for an empty sequence."""
    if len(values) == 0:
        return 0
    return sum_values(values) / len(values)


def flatten_bucket(table: SampleTable, name) -> List[float]:
    """Concatenate the values of every sample in a bucket, in registration order."""
    flattened: List[float] = []
    for sample in table.get(metric_key(name), ()):
        flattened.extend(sample.values)
    return flattened


def _divide(numerator: float, denominator: float) -> float:
    # IEEE division: x/0 -> +-inf, 0/0 -> nan
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def network_latency(table: SampleTable) -> float:
    return float(avg_values(flatten_bucket(table, MetricName.NETWORK_LATENCY)))


def bandwidth(table: SampleTable) -> float:
    # Ratio of independent averages; only meaningful when size and latency
    # samples are recorded pairwise.
    buffer_size = avg_values(flatten_bucket(table, MetricName.NETWORK_BUFFER_SIZE))
    latency = avg_values(flatten_bucket(table, MetricName.NETWORK_LATENCY))
    return _divide(buffer_size, latency)


def fps(table: SampleTable) -> float:
    """Frames per second from the average inter-frame interval in ms."""
    return _divide(1000, avg_values(flatten_bucket(table, MetricName.FPS)))


def mock_extent(table: SampleTable) -> float:
    """Last value of the first sample registered under ``extent``."""
    samples = table.get(MetricName.EXTENT.value, ())
    if not samples or not samples[0].values:
        return 0.0
    return as_float(samples[0].values[-1])


NetworkLatencyProfiler = Profiler(MetricName.NETWORK_LATENCY, network_latency)
BandwidthProfiler = Profiler(MetricName.BANDWIDTH, bandwidth)
FpsProfiler = Profiler(MetricName.FPS, fps)
MockExtentProfiler = Profiler(MetricName.EXTENT, mock_extent)

DEFAULT_PROFILERS = (
    BandwidthProfiler,
    NetworkLatencyProfiler,
    FpsProfiler,
    MockExtentProfiler,
)


def compute_profile(profilers: Iterable[Profiler], table: SampleTable) -> Dict[str, float]:
    return {metric_key(profiler.name): profiler.compute(table) for profiler in profilers}
