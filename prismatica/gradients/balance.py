from typing import List, Optional, Sequence


def balance_positions(positions: Sequence[Optional[float]]) -> List[float]:
    """
    Fill in missing stop positions the way CSS ``linear-gradient`` does.

    A missing first position becomes 0.0 and a missing last one 1.0. Each run
    of ``n`` missing positions between anchors ``p0`` and ``p1`` is spread
    evenly: the ``k``-th (1-based) gets ``p0 + (p1 - p0) * k / (n + 1)``.

    Args:
        positions: one entry per stop, ``None`` where unspecified

    Returns:
        A new list with every position set.

    >>> balance_positions([None, 0.25, None, None])
    [0.0, 0.25, 0.625, 1.0]
    """
    filled: List[Optional[float]] = [None if p is None else float(p) for p in positions]
    if not filled:
        return []
    if filled[0] is None:
        filled[0] = 0.0
    if filled[-1] is None:
        filled[-1] = 1.0

    anchor = 0
    for index in range(1, len(filled)):
        if filled[index] is None:
            continue
        run = index - anchor - 1
        if run:
            start, end = filled[anchor], filled[index]
            for k in range(1, run + 1):
                filled[anchor + k] = start + (end - start) * k / (run + 1)
        anchor = index
    return filled
