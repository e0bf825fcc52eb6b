"""NullVisgothRegistry - No-op implementation for disabled profiling.

Instrumentation call sites keep working unchanged while nothing is stored.
"""

from typing import List, Optional, TYPE_CHECKING

from .sample import Sample

if TYPE_CHECKING:
    from .models import BucketSummaryModel, VisgothSnapshotModel


class NullVisgothRegistry:
    """No-op registry for when profiling is disabled.

    Samples are handed back to the caller untouched so timing code still
    runs; snapshot() returns a valid empty model.
    """

    client_id: Optional[str] = None

    def register(self, sample: Sample) -> Sample:
        """No-op: the sample is not stored."""
        return sample

    def create_sample(self, name, sample_id: Optional[str] = None) -> Sample:
        """Return an unregistered sample."""
        return Sample(name=name, sample_id=sample_id)

    def snapshot(self) -> "VisgothSnapshotModel":
        """Return valid empty VisgothSnapshotModel."""
        from .models import VisgothMetadataModel, VisgothSnapshotModel

        return VisgothSnapshotModel(
            metadata=VisgothMetadataModel(client_id="", timestamp=0),
            profile={},
        )

    def bucket_summary(self) -> List["BucketSummaryModel"]:
        return []

    def reset(self) -> None:
        pass

    def is_enabled(self) -> bool:
        """Always returns False for null registry."""
        return False
