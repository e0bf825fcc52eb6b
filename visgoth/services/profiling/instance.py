"""Module-level singleton accessor for the active profiling registry.

The application lifespan installs a real VisgothRegistry or keeps the
NullVisgothRegistry depending on configuration.
"""

from typing import Union

from .null_registry import NullVisgothRegistry
from .registry import VisgothRegistry

AnyRegistry = Union[VisgothRegistry, NullVisgothRegistry]

# Module-level singleton instance - starts as null registry
_registry: AnyRegistry = NullVisgothRegistry()


def get_visgoth() -> AnyRegistry:
    """Get the currently active registry (real or null)."""
    return _registry


def set_visgoth(registry: AnyRegistry) -> None:
    """Replace the active registry.

    Args:
        registry: The registry instance to use
    """
    global _registry
    _registry = registry
