"""Per-session identity and wall-clock timestamps attached to every snapshot."""

import random
import time
from typing import Callable, Dict, Optional, Union


def _s4() -> str:
    return format(random.randrange(0x10000), "04x")


def guid() -> str:
    """Random 8-4-4-4-12 hex label.

    Built from the non-cryptographic ``random`` module; good enough for an
    opaque session label, not for security or global deduplication.
    """
    return (
        _s4() + _s4() + "-" + _s4() + "-" + _s4() + "-" +
        _s4() + "-" + _s4() + _s4() + _s4()
    )


def epoch_ms() -> int:
    """Milliseconds since the Unix epoch."""
    return int(time.time() * 1000)


class SessionContext:
    """Opaque session id plus a timestamp generator.

    The session id is fixed at construction for the life of the session.
    """

    def __init__(self, session_id: Optional[str] = None, clock: Callable[[], int] = epoch_ms):
        self._session_id = session_id if session_id is not None else guid()
        self.clock = clock

    @property
    def session_id(self) -> str:
        return self._session_id

    def metadata(self) -> Dict[str, Union[str, int]]:
        return {
            "client_id": self._session_id,
            "timestamp": self.clock(),
        }
