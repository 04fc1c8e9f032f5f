"""
Interval arithmetic on closed intervals.

Every binary function also accepts a plain number for either operand; the
number k is treated as the degenerate interval [k, k].

.. note::
    **Academic Note:** The rules follow the standard (Moore) interval
    arithmetic. Multiplication and division are not monotonic in the sign of
    the operands, so their bounds are the minimum and maximum over all four
    combinations of operand bounds. See e.g. Example 4.7.2 at
    https://web.mit.edu/hyperbook/Patrikalakis-Maekawa-Cho/node45.html
"""
from __future__ import annotations
import numpy as np
from .types import Interval, IntervalOperand, _is_real_number


def _as_interval(value: IntervalOperand) -> Interval:
    """Helper to treat a plain number as a degenerate interval."""
    if isinstance(value, Interval):
        return value
    if _is_real_number(value):
        return Interval.point(value)
    raise TypeError(f"Expected an Interval or a number, not {type(value).__name__}.")


def _hull_of_corners(corners: np.ndarray) -> Interval:
    return Interval(float(np.min(corners)), float(np.max(corners)))


def add(a: IntervalOperand, b: IntervalOperand) -> Interval:
    """Adds two intervals: [a.min + b.min, a.max + b.max]."""
    a, b = _as_interval(a), _as_interval(b)
    return Interval(a.min + b.min, a.max + b.max)


def subtract(a: IntervalOperand, b: IntervalOperand) -> Interval:
    """Subtracts two intervals: [a.min - b.max, a.max - b.min]."""
    a, b = _as_interval(a), _as_interval(b)
    return Interval(a.min - b.max, a.max - b.min)


def multiply(a: IntervalOperand, b: IntervalOperand) -> Interval:
    """Multiplies two intervals."""
    a, b = _as_interval(a), _as_interval(b)
    corners = np.array([
        a.min * b.min,
        a.min * b.max,
        a.max * b.min,
        a.max * b.max,
    ])
    return _hull_of_corners(corners)


def divide(a: IntervalOperand, b: IntervalOperand) -> Interval:
    """
    Divides two intervals.

    Raises:
        ZeroDivisionError: The divisor (the second interval) contains zero.
    """
    a, b = _as_interval(a), _as_interval(b)
    if b.contains(0.0):
        raise ZeroDivisionError(f"The divisor {b} cannot contain zero.")
    corners = np.array([
        a.min / b.min,
        a.min / b.max,
        a.max / b.min,
        a.max / b.max,
    ])
    return _hull_of_corners(corners)


def negation(x: IntervalOperand) -> Interval:
    """Negation of an interval (the sign of both bounds is changed)."""
    x = _as_interval(x)
    return Interval(-x.max, -x.min)


def reciprocal(x: IntervalOperand) -> Interval:
    """
    For interval x, it returns 1/x.

    Raises:
        ZeroDivisionError: The interval contains zero.
    """
    return divide(Interval(1.0, 1.0), x)
