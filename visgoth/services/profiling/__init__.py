"""Client-side performance profiling.

Samples are recorded by instrumentation call sites, bucketed by metric name
in a VisgothRegistry, and reduced by profiler formulas into a snapshot that
travels with outgoing messages.
"""

from .labels import MetricName
from .sample import Sample
from .profilers import (
    Profiler,
    DEFAULT_PROFILERS,
    avg_values,
    flatten_bucket,
    sum_values,
)
from .session import SessionContext, guid
from .registry import VisgothRegistry
from .null_registry import NullVisgothRegistry
from .instance import get_visgoth, set_visgoth

__all__ = [
    "MetricName",
    "Sample",
    "Profiler",
    "DEFAULT_PROFILERS",
    "avg_values",
    "flatten_bucket",
    "sum_values",
    "SessionContext",
    "guid",
    "VisgothRegistry",
    "NullVisgothRegistry",
    "get_visgoth",
    "set_visgoth",
]
