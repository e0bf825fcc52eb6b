"""Metric names used as sample bucket keys and profiler output keys."""

from enum import Enum
from typing import Union


class MetricName(str, Enum):
    BANDWIDTH = "bandwidth"
    NETWORK_LATENCY = "networkLatency"
    FPS = "fps"
    BUFFER_LOAD_TIME = "bufferLoadTime"
    NETWORK_BUFFER_SIZE = "networkBufferSize"
    EXTENT = "extent"


def metric_key(name: Union[MetricName, str]) -> str:
    """Normalise a metric name to the plain string used as a bucket key.

    Unknown strings pass through unchanged so ad-hoc buckets still work.
    """
    if isinstance(name, MetricName):
        return name.value
    return str(name)
