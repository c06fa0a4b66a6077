"""Scales mapping data domains onto pixel ranges."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Hashable, Sequence

E10 = math.sqrt(50)
E5 = math.sqrt(10)
E2 = math.sqrt(2)


def _tick_spec(start: float, stop: float, count: float) -> tuple[int, int, float]:
    step = (stop - start) / max(0.0, count)
    power = math.floor(math.log10(step))
    error = step / math.pow(10, power)
    if error >= E10:
        factor = 10
    elif error >= E5:
        factor = 5
    elif error >= E2:
        factor = 2
    else:
        factor = 1
    if power < 0:
        inc = math.pow(10, -power) / factor
        i1 = round(start * inc)
        i2 = round(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = math.pow(10, power) * factor
        i1 = round(start / inc)
        i2 = round(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1
    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def nice_ticks(start: float, stop: float, count: int = 10) -> list[float]:
    """
    Return roughly ``count`` evenly spaced round values covering [start, stop].

    Steps are 1, 2 or 5 times a power of ten.
    """

    if count <= 0:
        return []
    if start == stop:
        return [float(start)]
    reverse = stop < start
    if reverse:
        start, stop = stop, start
    i1, i2, inc = _tick_spec(start, stop, count)
    if i2 < i1:
        return []
    if inc < 0:
        ticks = [(i1 + i) / -inc for i in range(i2 - i1 + 1)]
    else:
        ticks = [float((i1 + i) * inc) for i in range(i2 - i1 + 1)]
    return ticks[::-1] if reverse else ticks


def tick_step(start: float, stop: float, count: int = 10) -> float:
    if start == stop or count <= 0:
        return 0.0
    lo, hi = min(start, stop), max(start, stop)
    _, _, inc = _tick_spec(lo, hi, count)
    return 1.0 / -inc if inc < 0 else inc


@dataclass(frozen=True)
class LinearScale:
    """Affine map from a numeric domain onto a pixel range."""

    domain: tuple[float, float]
    range: tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2.0
        t = (value - d0) / (d1 - d0)
        return r0 + t * (r1 - r0)

    def ticks(self, count: int = 10) -> list[float]:
        return nice_ticks(self.domain[0], self.domain[1], count)

    def tick_format(self, count: int = 10):
        """Return a formatter with precision matching the tick step."""

        step = tick_step(self.domain[0], self.domain[1], count)
        decimals = 0
        if 0 < step < 1:
            decimals = max(0, -math.floor(math.log10(step) + 1e-12))

        def _format(value: float) -> str:
            text = f"{value:,.{decimals}f}"
            # no "-0"
            return text[1:] if text.startswith("-") and float(value) == 0 else text

        return _format


@dataclass(frozen=True)
class BandScale:
    """Map discrete keys onto evenly spaced bands of a pixel range."""

    domain: tuple[Hashable, ...]
    range: tuple[float, float]
    padding_inner: float = 0.0
    padding_outer: float = 0.0
    align: float = 0.5
    _positions: dict = field(init=False, repr=False, compare=False)
    _step: float = field(init=False, repr=False, compare=False)
    _bandwidth: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain", tuple(dict.fromkeys(self.domain)))
        r0, r1 = self.range
        n = len(self.domain)
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)
        step = (stop - start) / max(1.0, n - self.padding_inner + self.padding_outer * 2)
        start += (stop - start - step * (n - self.padding_inner)) * self.align
        positions = [start + step * i for i in range(n)]
        if reverse:
            positions.reverse()
        object.__setattr__(self, "_step", step)
        object.__setattr__(self, "_bandwidth", step * (1 - self.padding_inner))
        object.__setattr__(self, "_positions", dict(zip(self.domain, positions)))

    @classmethod
    def padded(cls, domain: Sequence[Hashable], range: tuple[float, float], padding: float) -> "BandScale":
        """Build a band scale with equal inner and outer padding."""

        return cls(tuple(domain), range, padding_inner=padding, padding_outer=padding)

    def __call__(self, key: Hashable) -> float:
        try:
            return self._positions[key]
        except KeyError:
            raise KeyError(f"{key!r} is not in the band scale domain") from None

    def center(self, key: Hashable) -> float:
        return self(key) + self.bandwidth / 2.0

    @property
    def bandwidth(self) -> float:
        return self._bandwidth

    @property
    def step(self) -> float:
        return self._step


@dataclass(frozen=True)
class OrdinalScale:
    """Assign range values to keys, cycling when the range runs out."""

    domain: tuple[Hashable, ...]
    range: tuple[str, ...]

    def __call__(self, key: Hashable) -> str:
        if not self.range:
            raise ValueError("OrdinalScale has an empty range.")
        if key in self.domain:
            index = self.domain.index(key)
        else:
            index = len(self.domain)
        return self.range[index % len(self.range)]


def unique(values) -> tuple:
    """Distinct values in first-appearance order."""

    return tuple(dict.fromkeys(values))
