"""
flight_atlas/metrics/ranking.py - Top-K ordering for presentation.

Scores are sorted descending, with ties broken by ascending name so output is
deterministic regardless of dict iteration order. A NaN score has no place in
a total order, so ranking refuses it outright rather than silently reordering.
"""

from collections.abc import Mapping

import numpy as np


def top_k(
    scores: Mapping[str, int | float],
    k: int = 10,
) -> list[tuple[str, int | float]]:
    """
    Return the k highest-scoring (name, score) pairs.

    Args:
        scores: Dict mapping name → numeric score.
        k:      Number of entries to keep. Fewer are returned if scores is
                shorter. k <= 0 returns an empty list.

    Raises:
        ValueError: if any score is NaN.
    """
    if not scores:
        return []

    names = list(scores.keys())
    values = np.asarray(list(scores.values()), dtype=float)
    nan_mask = np.isnan(values)
    if nan_mask.any():
        bad = sorted(name for name, is_nan in zip(names, nan_mask) if is_nan)
        raise ValueError(f"Cannot rank scores: NaN value for {', '.join(bad[:5])}")

    ranked = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    return ranked[: max(k, 0)]
