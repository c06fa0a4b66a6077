"""Path generators for line charts."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def _control_points(values: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Solve the tridiagonal system for natural cubic spline control points.

    Returns the first and second Bézier control coordinate of every segment.
    The forward sweep and back substitution run element by element because
    each step reads the value computed just before it.
    """

    n = len(values) - 1
    a = np.zeros(n)
    b = np.zeros(n)
    r = np.zeros(n)
    a[0], b[0], r[0] = 0.0, 2.0, values[0] + 2 * values[1]
    for i in range(1, n - 1):
        a[i], b[i], r[i] = 1.0, 4.0, 4 * values[i] + 2 * values[i + 1]
    a[n - 1], b[n - 1], r[n - 1] = 2.0, 7.0, 8 * values[n - 1] + values[n]
    for i in range(1, n):
        m = a[i] / b[i - 1]
        b[i] -= m
        r[i] -= m * r[i - 1]
    a[n - 1] = r[n - 1] / b[n - 1]
    for i in range(n - 2, -1, -1):
        a[i] = (r[i] - a[i + 1]) / b[i]
    b[n - 1] = (values[n] + a[n - 1]) / 2
    for i in range(n - 1):
        b[i] = 2 * values[i + 1] - a[i + 1]
    return a, b


def natural_curve(xs: Sequence[float], ys: Sequence[float]) -> tuple[tuple, ...]:
    """
    Path segments for a natural cubic spline through the given points.

    One point yields a bare move and two points a straight segment.
    """

    if len(xs) != len(ys):
        raise ValueError("x and y must have the same length.")
    n = len(xs)
    if n == 0:
        return ()
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    segments: list[tuple] = [("M", float(x[0]), float(y[0]))]
    if n == 1:
        return tuple(segments)
    if n == 2:
        segments.append(("L", float(x[1]), float(y[1])))
        return tuple(segments)
    px0, px1 = _control_points(x)
    py0, py1 = _control_points(y)
    for i in range(n - 1):
        segments.append(
            (
                "C",
                float(px0[i]),
                float(py0[i]),
                float(px1[i]),
                float(py1[i]),
                float(x[i + 1]),
                float(y[i + 1]),
            )
        )
    return tuple(segments)


def linear_curve(xs: Sequence[float], ys: Sequence[float]) -> tuple[tuple, ...]:
    if len(xs) != len(ys):
        raise ValueError("x and y must have the same length.")
    return tuple(
        ("M" if i == 0 else "L", float(x), float(y)) for i, (x, y) in enumerate(zip(xs, ys))
    )
