"""Wall-clock timestamps in nanoseconds."""

from __future__ import annotations

import time


def get_nanoseconds() -> int:
    """Return the current time as nanoseconds since the Unix epoch.

    Wall-clock based, so successive calls are not guaranteed to be monotonic.
    """
    return time.time_ns()


__all__ = ["get_nanoseconds"]
