"""Runtime helpers shared across the card store."""

from .runtime import new_id, now_ms, sleep_ms

__all__ = ["new_id", "now_ms", "sleep_ms"]
