from __future__ import annotations
import math
from typing import List, Sequence
from .types import Interval
from .validation import Validation


class BreakPointsConverter:
    """
    Converts between the break-point and the alpha-cut representations of
    fuzzy numbers.

    Break points are a non-decreasing sequence of numbers, suitable for
    presenting fuzzy numbers to a user or for reading user input:

    - ``5`` is a crisp number,
    - ``1, 2`` is an interval,
    - ``1, 2, 3`` is a triangular fuzzy number,
    - ``1, 2, 3, 4`` is a trapezoidal fuzzy number.

    Longer sequences list the lower bounds of the alpha-cuts followed by their
    upper bounds in reverse: ``1, 2, 3, 4, 5, 6`` has the alpha-cuts [1, 6],
    [2, 5], [3, 4]. A single-point kernel is written only once, so
    ``1, 2, 3, 4, 5`` is the same as ``1, 2, 3, 3, 4, 5``.
    """

    @staticmethod
    def convert_to_alpha_cuts(break_points: Sequence[float]) -> List[Interval]:
        """
        Returns the alpha-cuts described by `break_points`, the support first.

        Raises:
            ValueError: The list is empty or decreasing somewhere.
        """
        break_points = [float(point) for point in break_points]
        errors = Validation.validate_break_points(break_points)
        if errors:
            raise ValueError(" ".join(errors))

        if len(break_points) in (1, 2):
            first, last = break_points[0], break_points[-1]
            return BreakPointsConverter.convert_to_alpha_cuts([first, first, last, last])

        count = len(break_points)
        alpha_cuts_count = math.ceil(count / 2.0)
        return [Interval(break_points[i], break_points[count - i - 1]) for i in range(alpha_cuts_count)]

    @staticmethod
    def convert_from_alpha_cuts(alpha_cuts: Sequence[Interval]) -> List[float]:
        """
        Returns the break points of the alpha-cuts, in the shortest notation.
        """
        if len(alpha_cuts) == 2 and alpha_cuts[0] == alpha_cuts[1]:
            # Crisp number or interval
            if alpha_cuts[0].size == 0:
                return [alpha_cuts[0].min]
            return [alpha_cuts[0].min, alpha_cuts[0].max]

        break_points_count = len(alpha_cuts) * 2
        if alpha_cuts[-1].size == 0:
            break_points_count -= 1

        break_points = [0.0] * break_points_count
        for i, alpha_cut in enumerate(alpha_cuts):
            break_points[i] = alpha_cut.min
            break_points[break_points_count - i - 1] = alpha_cut.max
        return break_points
