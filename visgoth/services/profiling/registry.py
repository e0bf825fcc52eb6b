"""VisgothRegistry - in-memory sample table and snapshot builder.

Samples are bucketed by metric name in registration order. Snapshots run
every profiler over the whole table; nothing is cleared between snapshots,
so aggregates are cumulative since construction (or the last ``reset()``).
"""

from typing import Callable, Dict, List, Optional, Sequence, Union, TYPE_CHECKING

from .labels import MetricName
from .profilers import DEFAULT_PROFILERS, Profiler, compute_profile
from .sample import Sample, now_ms
from .session import SessionContext

if TYPE_CHECKING:
    from .models import BucketSummaryModel, VisgothSnapshotModel


class VisgothRegistry:
    """Collector of all samples for one profiling session.

    Pure in-memory state, mutated synchronously by instrumentation call
    sites. No locking: register and snapshot run on a single thread of
    control.
    """

    def __init__(
        self,
        session: Optional[SessionContext] = None,
        profilers: Optional[Sequence[Profiler]] = None,
        sample_clock: Callable[[], float] = now_ms,
    ):
        self.session = session if session is not None else SessionContext()
        self.profilers = tuple(profilers) if profilers is not None else DEFAULT_PROFILERS
        self.sample_clock = sample_clock

        # One bucket per known metric so profilers never see a missing key
        self.stats: Dict[str, List[Sample]] = {name.value: [] for name in MetricName}

    @property
    def client_id(self) -> str:
        return self.session.session_id

    def register(self, sample: Sample) -> Sample:
        """Append a sample to its bucket. The same object may be registered twice."""
        if sample.name not in self.stats:
            self.stats[sample.name] = []
        self.stats[sample.name].append(sample)
        return sample

    def create_sample(self, name: Union[MetricName, str], sample_id: Optional[str] = None) -> Sample:
        """Build a sample on the registry clock and register it."""
        return self.register(Sample(name=name, sample_id=sample_id, clock=self.sample_clock))

    def get_profile_data(self) -> Dict[str, float]:
        return compute_profile(self.profilers, self.stats)

    def get_metadata(self) -> Dict[str, Union[str, int]]:
        return self.session.metadata()

    def snapshot(self) -> "VisgothSnapshotModel":
        """Run every profiler against the current table and attach session metadata."""
        # Import here to avoid circular imports
        from .models import VisgothMetadataModel, VisgothSnapshotModel

        return VisgothSnapshotModel(
            metadata=VisgothMetadataModel(**self.get_metadata()),
            profile=self.get_profile_data(),
        )

    def bucket_summary(self) -> List["BucketSummaryModel"]:
        from .models import BucketSummaryModel

        return [
            BucketSummaryModel(
                name=name,
                sample_count=len(samples),
                value_count=sum(len(sample.values) for sample in samples),
            )
            for name, samples in self.stats.items()
        ]

    def reset(self) -> None:
        """Drop every recorded sample, keeping one empty bucket per known metric."""
        self.stats = {name.value: [] for name in MetricName}

    def is_enabled(self) -> bool:
        return True
