from __future__ import annotations
from typing import List, Dict, Sequence, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from fuzzyMathPy.types import Interval

class Validation:
    """
    A class containing static methods to validate the building blocks of
    intervals and fuzzy numbers.

    Every method returns a list of error strings. An empty list means the
    input is valid; raising is left to the callers (see ``alpha_cuts.py``).
    """

    @staticmethod
    def validate_interval_bounds(min_value: float, max_value: float) -> List[str]:
        """
        Validates the bounds of a closed interval [min_value, max_value].

        Args:
            min_value: The lower bound (infimum).
            max_value: The upper bound (supremum).

        Returns:
            A list of error strings. An empty list means the bounds are valid.
        """
        errors = []
        if np.isnan(min_value) or np.isnan(max_value):
            errors.append(f"Interval bounds cannot be NaN. Found: [{min_value}, {max_value}]")
            return errors # Comparisons with NaN are meaningless
        if max_value < min_value:
            errors.append(f"The max parameter ({max_value}) cannot have a lower value than the min parameter ({min_value}).")
        return errors

    @staticmethod
    def validate_alpha(alpha: float) -> List[str]:
        """Validates that alpha is a number in [0, 1]."""
        if np.isnan(alpha) or not (0 <= alpha <= 1):
            return [f"Alpha must be a number between 0 and 1. Found: {alpha}"]
        return []

    @staticmethod
    def validate_alpha_cuts_count(alpha_cuts_count: int) -> List[str]:
        """Validates a requested number of alpha-cuts (at least the support and the kernel)."""
        errors = []
        if isinstance(alpha_cuts_count, bool) or not isinstance(alpha_cuts_count, (int, np.integer)):
            errors.append(f"The number of alpha-cuts must be an integer. Found: {type(alpha_cuts_count).__name__}")
            return errors
        if alpha_cuts_count < 2:
            errors.append(f"The number of alpha-cuts must be at least 2. Found: {alpha_cuts_count}")
        return errors

    @staticmethod
    def validate_alpha_cut_types(alpha_cuts: Sequence) -> List[str]:
        """Validates that every element of an alpha-cut list is an Interval."""
        from .types import Interval
        errors = []
        for i, alpha_cut in enumerate(alpha_cuts):
            if not isinstance(alpha_cut, Interval):
                errors.append(f"Alpha-cut at index {i} must be an Interval, not {type(alpha_cut).__name__}.")
        return errors

    @staticmethod
    def validate_alpha_cuts_nesting(alpha_cuts: Sequence[Interval], tolerance: float = 0.0) -> List[str]:
        """
        Validates that each alpha-cut is a subset of the previous one.

        Args:
            alpha_cuts: The alpha-cuts, from the support to the kernel.
            tolerance: Tolerance for the subset checks.

        Returns:
            A list of error strings, one per violating alpha-cut.
        """
        errors = []
        for i in range(1, len(alpha_cuts)):
            if not alpha_cuts[i - 1].contains(alpha_cuts[i], tolerance=tolerance):
                errors.append(f"Invalid alpha-cut value ({alpha_cuts[i]}) at index {i}. "
                              f"Each alpha-cut must be a subset of the previous one ({alpha_cuts[i - 1]} in this case).")
        return errors

    @staticmethod
    def run_all_alpha_cut_validations(alpha_cuts: Sequence, tolerance: float = 0.0) -> Dict[str, List[str]]:
        """
        Runs a complete suite of validations on an alpha-cut list.

        Args:
            alpha_cuts: The alpha-cuts to validate.
            tolerance: Tolerance for the nesting checks.

        Returns:
            A dictionary containing lists of errors for each validation category.
        """
        all_errors = {"types": [], "count": [], "nesting": []}
        all_errors["types"] = Validation.validate_alpha_cut_types(alpha_cuts)

        # Only run further checks if every element is an Interval
        if not all_errors["types"]:
            if len(alpha_cuts) < 2:
                all_errors["count"].append("Alpha-cuts list must contain at least 2 elements (the support and the kernel).")
            all_errors["nesting"] = Validation.validate_alpha_cuts_nesting(alpha_cuts, tolerance)
        return all_errors

    @staticmethod
    def validate_break_points(break_points: Sequence[float]) -> List[str]:
        """Validates that break points form a non-empty, non-decreasing sequence of numbers."""
        errors = []
        if len(break_points) == 0:
            errors.append("Break points list cannot be empty.")
            return errors
        values = np.asarray(break_points, dtype=float)
        if np.any(np.isnan(values)):
            errors.append("Break points cannot contain NaN.")
            return errors
        decreasing = np.flatnonzero(np.diff(values) < 0)
        for i in decreasing:
            errors.append(f"Break points must be non-decreasing, but {values[i]} at index {i} "
                          f"is followed by {values[i + 1]}.")
        return errors
