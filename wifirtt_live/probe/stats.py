from __future__ import annotations
from typing import Iterable, Optional

from ..models import LatencySummary, Technique

MIN_SAMPLES_FOR_TRIM = 4

def trimmed(sorted_values: list[float]) -> list[float]:
    # drop one sample from each tail, but only once there are enough to spare
    if len(sorted_values) >= MIN_SAMPLES_FOR_TRIM:
        return sorted_values[1:-1]
    return sorted_values

def summarize(values: Iterable[float], technique: Technique,
              jitter: Optional[float] = None) -> Optional[LatencySummary]:
    """Reduce raw durations (ms) to a summary; no samples means no summary.

    avg comes from the trimmed subset, min/max from the full sorted set.
    """
    full = sorted(values)
    if not full:
        return None
    robust = trimmed(full)
    return LatencySummary(
        technique=technique,
        avg=sum(robust) / len(robust),
        min=full[0],
        max=full[-1],
        sample_count=len(full),
        jitter=jitter,
        all_values=tuple(full),
    )
