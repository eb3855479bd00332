"""Box and approximate Gaussian smoothing with reflected boundaries."""

from __future__ import annotations

import math
from typing import Sequence


class ReflectIterator:
    """A cursor over ``size`` positions that bounces off both ends.

    At an edge the cursor turns around and stays on the edge position for
    one step, so the sequence is mirrored with the edge sample repeated.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self.pos = 0
        self.forward = True

    def move_forward(self) -> None:
        """Advance one step in the current logical direction."""
        if self.forward:
            if self.pos + 1 == self.size:
                self.forward = False
            else:
                self.pos += 1
        elif self.pos == 0:
            self.forward = True
        else:
            self.pos -= 1

    def move_back(self) -> None:
        """Step back one position, undoing :meth:`move_forward`."""
        if self.forward:
            if self.pos == 0:
                self.forward = False
            else:
                self.pos -= 1
        elif self.pos + 1 == self.size:
            self.forward = True
        else:
            self.pos += 1

    def safe_forward_distance(self) -> int:
        """Return how many forward steps can be taken without reflecting."""
        if self.forward:
            return self.size - self.pos - 1
        return 0


def box_filter(values: Sequence[float], width: int) -> list[float]:
    """Return the moving average of ``values`` over a window of ``width``.

    The window for output ``i`` starts ``width // 2`` samples before ``i``;
    samples beyond either end are mirrored. A width of zero yields zeros.
    """
    size = len(values)
    if width == 0 or size == 0:
        return [0.0] * size

    wl = width // 2
    wr = width - wl
    out: list[float] = []

    it1 = ReflectIterator(size)
    it2 = ReflectIterator(size)
    for _ in range(wl):
        it1.move_back()
        it2.move_back()

    total = 0.0
    for _ in range(width):
        total += values[it2.pos]
        it2.move_forward()

    def reflected_step(count: int) -> None:
        nonlocal total
        for _ in range(count):
            out.append(total / width)
            total += values[it2.pos] - values[it1.pos]
            it1.move_forward()
            it2.move_forward()

    if size > width:
        reflected_step(wl)
        for _ in range(size - width - 1):
            out.append(total / width)
            total += values[it2.pos] - values[it1.pos]
            it2.pos += 1
            it1.pos += 1
        reflected_step(wr + 1)
    else:
        reflected_step(size)
    return out


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def gaussian_filter(values: Sequence[float], sigma: float, n: int) -> list[float]:
    """Approximate a Gaussian blur of width ``sigma`` with ``n`` box passes."""
    if n < 1:
        raise ValueError("number of passes must be at least 1")
    w = math.floor(math.sqrt(12 * sigma * sigma / n + 1))
    wl = w - (1 if w % 2 == 0 else 0)
    wu = wl + 2
    m = _round_half_away(
        (12 * sigma * sigma - n * wl * wl - 4 * n * wl - 3 * n) / (-4 * wl - 4)
    )

    small_passes = max(m, 0)
    large_passes = max(n - small_passes, 0)

    data = [float(v) for v in values]
    for width in [wl] * small_passes + [wu] * large_passes:
        data = box_filter(data, width)
    return data