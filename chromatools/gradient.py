"""Discrete gradient of a sequence."""

from __future__ import annotations

from typing import Iterable


def gradient(values: Iterable[float]) -> list[float]:
    """Return the gradient of ``values``.

    Inner points use central differences, the ends use one-sided
    differences. A single value has gradient zero.
    """
    data = list(values)
    if not data:
        return []
    if len(data) == 1:
        return [0.0]
    first = data[1] - data[0]
    if len(data) == 2:
        return [first, first]
    inner = [(after - before) / 2 for before, after in zip(data, data[2:])]
    return [first, *inner, data[-1] - data[-2]]