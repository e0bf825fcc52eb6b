"""Pydantic V2 models for profile snapshots and outbound messages.

These models are used both for REST responses and for the payload attached
to profiled WebSocket messages.
"""

import math
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict


class VisgothMetadataModel(BaseModel):
    """Session metadata attached to every snapshot"""
    model_config = ConfigDict(from_attributes=True)

    client_id: str
    timestamp: int


class VisgothSnapshotModel(BaseModel):
    """Snapshot of all derived metrics plus session metadata.

    Profile values may be non-finite (``fps`` with no data is ``inf``).
    Use ``to_payload()`` for anything that goes over the wire.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    metadata: VisgothMetadataModel
    profile: Dict[str, float]

    def to_payload(self) -> Dict[str, Any]:
        """JSON-safe dict; non-finite profile values become None."""
        return {
            "metadata": self.metadata.model_dump(),
            "profile": {
                name: (value if math.isfinite(value) else None)
                for name, value in self.profile.items()
            },
        }


class VisgothPayloadModel(BaseModel):
    """Wire form of a snapshot"""
    model_config = ConfigDict(from_attributes=True)

    metadata: VisgothMetadataModel
    profile: Dict[str, Optional[float]]


class ProfiledMessageModel(BaseModel):
    """Outbound message envelope carrying a profile payload"""
    type: str
    content: Any = None
    visgoth: VisgothPayloadModel


class BucketSummaryModel(BaseModel):
    """Raw sample counts for a single bucket"""
    model_config = ConfigDict(from_attributes=True)

    name: str
    sample_count: int
    value_count: int


class ProfilingHealthModel(BaseModel):
    """Lightweight health check response"""
    model_config = ConfigDict(from_attributes=True)

    profiling_enabled: bool
    broadcaster_running: bool
    client_id: Optional[str]
    version: str
