"""Visgoth client-side performance profiler."""
