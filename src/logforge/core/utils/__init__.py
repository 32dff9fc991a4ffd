"""
Core utilities module.

Provides shared utility functions used across all layers.
"""

from logforge.core.utils.time import ensure_aware, format_iso_millis, to_utc, utc_now

__all__ = ["ensure_aware", "format_iso_millis", "to_utc", "utc_now"]
