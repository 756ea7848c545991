"""
Progress analytics helpers for dashboards and reporting.

Provides:
- Mastery histograms and band grouping
- Summary statistics (mean, median, min, max, std_dev)
- Weakest-category ranking

All helpers accept the sparse ``category_mastery`` mapping from
``UserProgress`` (keys may be Category members or plain strings).
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict, List, Mapping, Sequence, Tuple

DEFAULT_BANDS: Dict[str, Tuple[float, float]] = {
    "needs_focus": (0.0, 60.0),
    "developing": (60.0, 85.0),
    "strong": (85.0, 100.0),
}


def _key(category) -> str:
    return getattr(category, "value", category)


def _median(ordered: Sequence[float]) -> float:
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2.0


def mastery_histogram(mastery: Mapping, bin_size: int = 10) -> List[Tuple[str, int]]:
    """
    Count mastery values per fixed-width bin.

    Values are clamped to 0-100; exactly 100 falls in the top bin.

    Example:
        >>> mastery_histogram({"savings": 85, "credit": 72, "taxation": 45})
        [('40-49', 1), ('70-79', 1), ('80-89', 1)]
    """
    top_bin = 100 - bin_size
    starts = Counter(
        min(int(max(0.0, min(100.0, float(value))) // bin_size) * bin_size, top_bin)
        for value in mastery.values()
    )
    return [(f"{start}-{start + bin_size - 1}", starts[start]) for start in sorted(starts)]


def mastery_summary(mastery: Mapping) -> Dict[str, float]:
    """
    Mean, median, min, max and population std_dev of mastery values.

    An empty mapping gives all zeros.
    """
    values = sorted(float(v) for v in mastery.values())
    if not values:
        return dict.fromkeys(("mean", "median", "min", "max", "std_dev"), 0.0) | {"count": 0}

    mean = sum(values) / len(values)
    spread = math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))

    return {
        "mean": round(mean, 2),
        "median": round(_median(values), 2),
        "min": round(values[0], 2),
        "max": round(values[-1], 2),
        "std_dev": round(spread, 2),
        "count": len(values),
    }


def mastery_by_band(
    mastery: Mapping,
    bands: Dict[str, Tuple[float, float]] = None,
) -> Dict[str, List[str]]:
    """
    Group categories by mastery band.

    Bands are half-open ``[low, high)``; the last band also includes its
    upper bound, and values above every band land in the last one.

    Example:
        >>> mastery_by_band({"savings": 90, "credit": 30})["needs_focus"]
        ['credit']
    """
    if bands is None:
        bands = DEFAULT_BANDS

    grouped: Dict[str, List[str]] = {band: [] for band in bands}
    last_band = list(bands)[-1]

    for category, value in mastery.items():
        for band, (low, high) in bands.items():
            if low <= value < high or (band == last_band and value >= high):
                grouped[band].append(_key(category))
                break

    return grouped


def weakest_categories(mastery: Mapping, k: int = 3) -> List[str]:
    """
    Categories with the lowest mastery, lowest first.

    Ties are broken by category name for a stable order.
    """
    ranked = sorted(mastery.items(), key=lambda kv: (kv[1], _key(kv[0])))
    return [_key(category) for category, _ in ranked[:k]]
