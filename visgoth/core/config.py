import math
import os

DEFAULT_BROADCAST_HZ = 1.0


def positive_float_env(name: str, default: float) -> float:
    """Read a strictly positive, finite float; anything else falls back to ``default``."""
    try:
        value = float(os.getenv(name, default))
    except ValueError:
        return default
    if not math.isfinite(value) or value <= 0:
        return default
    return value


class Settings:
    # API Settings
    PROJECT_NAME: str = "Visgoth Profiler API"
    VERSION: str = "0.3.0"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", 8080))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Profiling Settings
    VISGOTH_ENABLE_PROFILING: bool = os.getenv("VISGOTH_ENABLE_PROFILING", "true").lower() == "true"
    VISGOTH_BROADCAST_HZ: float = positive_float_env("VISGOTH_BROADCAST_HZ", DEFAULT_BROADCAST_HZ)
    VISGOTH_PROFILE_TOPIC: str = os.getenv("VISGOTH_PROFILE_TOPIC", "visgoth_profile")


settings = Settings()
