"""
Visgoth Profiler API Server

Serves the current performance profile over REST and pushes profile
snapshots to WebSocket subscribers.

Environment Variables:
    VISGOTH_ENABLE_PROFILING: Enable sample collection (default: true)
    VISGOTH_BROADCAST_HZ: Profile broadcast frequency in Hz (default: 1)
    VISGOTH_PROFILE_TOPIC: WebSocket topic for profile snapshots (default: visgoth_profile)
    VISGOTH_LOG_DIR: Directory for the rotating log file
    HOST: Server host address (default: 0.0.0.0)
    PORT: Server port (default: 8080)
    DEBUG: Enable debug mode with auto-reload (default: false)

CLI Usage:
    python main.py

    # Disable profiling
    VISGOTH_ENABLE_PROFILING=false python main.py
"""

import uvicorn

from visgoth.core.config import settings

if __name__ == "__main__":
    port = settings.PORT
    host = settings.HOST

    print(f"Starting {settings.PROJECT_NAME} on {host}:{port}")
    print(f"Profiling: {'enabled' if settings.VISGOTH_ENABLE_PROFILING else 'disabled'}")

    reload_enabled = bool(settings.DEBUG)
    reload_dirs = None
    if reload_enabled:
        from pathlib import Path

        reload_dirs = [str(Path(__file__).resolve().parent / "visgoth")]

    uvicorn.run(
        "visgoth.app:app",
        host=host,
        port=port,
        reload=reload_enabled,
        reload_dirs=reload_dirs,
    )
