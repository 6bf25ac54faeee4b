"""Stepping through the ways to share a number of photons among cavities."""

from __future__ import annotations

from collections.abc import Sequence


def next_permutation(values: Sequence[int], max_num: int) -> list[int]:
    """Return the distribution of ``max_num`` quanta that follows ``values``.

    Starting from ``[max_num, 0, ..., 0]`` repeated calls visit every way to
    split ``max_num`` among ``len(values)`` places; after ``[0, ..., 0, max_num]``
    the sequence starts over. The input is not modified.
    """
    v = list(values)
    if not v:
        raise ValueError("cannot step an empty distribution")

    if v[-1] == max_num:
        v[-1] = 0
        v[0] = max_num
        return v

    for i in range(len(v) - 1):
        if v[i] == max_num:
            v[i] = 0
            v[0] = max_num - 1
            v[i + 1] = 1
            return v

    if v[0] == 0:
        for i in range(1, len(v)):
            if v[i] != 0:
                if i + 1 >= len(v):
                    raise ValueError(f"{values} has no next distribution of {max_num}")
                v[0] = v[i] - 1
                v[i + 1] += 1
                v[i] = 0
                return v
        raise ValueError(f"{values} has no next distribution of {max_num}")

    if len(v) < 2:
        raise ValueError(f"{values} has no next distribution of {max_num}")
    v[0] -= 1
    v[1] += 1
    return v