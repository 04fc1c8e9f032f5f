from __future__ import annotations
from typing import List, Sequence, TYPE_CHECKING
import numpy as np
from .validation import Validation

if TYPE_CHECKING:
    from .types import Interval


class AlphaCutsHelper:
    """
    Utilities shared by FuzzyNumber for validating alpha-cut lists and for
    mapping between alpha-cut indices and alpha values.

    The alpha-cuts of a fuzzy number with N cuts are evenly spaced: the cut at
    index i belongs to alpha = i / (N - 1), so index 0 is the support and
    index N - 1 is the kernel.
    """

    @staticmethod
    def raise_if_alpha_cuts_are_invalid(
        alpha_cuts: Sequence,
        error_message_for_not_enough_alpha_cuts: str | None = None,
        error_message_template_for_invalid_alpha_cut: str | None = None
    ):
        """
        Raises if the list doesn't define a valid fuzzy number.

        Args:
            alpha_cuts: The alpha-cuts, from the support to the kernel.
            error_message_for_not_enough_alpha_cuts: Replaces the default message
                raised for lists with fewer than 2 alpha-cuts.
            error_message_template_for_invalid_alpha_cut: Replaces the default message
                raised for a nesting violation. Formatted with the offending
                alpha-cut and its predecessor.

        Raises:
            TypeError: An element is not an Interval.
            ValueError: Fewer than 2 alpha-cuts, or an alpha-cut is not a
                subset of the previous one.
        """
        if alpha_cuts is None:
            raise TypeError("Alpha-cuts list cannot be None.")

        errors = Validation.run_all_alpha_cut_validations(alpha_cuts, tolerance=0.0)
        if errors["types"]:
            raise TypeError(" ".join(errors["types"]))

        if errors["count"]:
            raise ValueError(error_message_for_not_enough_alpha_cuts or errors["count"][0])

        if errors["nesting"]:
            if error_message_template_for_invalid_alpha_cut is None:
                raise ValueError(errors["nesting"][0])
            for i in range(1, len(alpha_cuts)):
                if not alpha_cuts[i - 1].contains(alpha_cuts[i]):
                    raise ValueError(error_message_template_for_invalid_alpha_cut.format(alpha_cuts[i], alpha_cuts[i - 1]))

    @staticmethod
    def raise_if_alpha_is_invalid(alpha: float):
        """Raises a ValueError (alpha out of range) unless 0 <= alpha <= 1."""
        errors = Validation.validate_alpha(alpha)
        if errors:
            raise ValueError(errors[0])

    @staticmethod
    def raise_if_alpha_cuts_count_is_invalid(alpha_cuts_count: int):
        """Raises a ValueError (count out of range) if fewer than 2 alpha-cuts are requested."""
        errors = Validation.validate_alpha_cuts_count(alpha_cuts_count)
        if errors:
            raise ValueError(errors[0])

    @staticmethod
    def get_alpha_for_alpha_cut_index(index: int, alpha_cuts_count: int) -> float:
        """Returns the alpha value of the alpha-cut at `index` in a list of `alpha_cuts_count` cuts."""
        return index / (alpha_cuts_count - 1)

    @staticmethod
    def get_alpha_levels(alpha_cuts_count: int) -> np.ndarray:
        """Returns the alpha values of all alpha-cuts, from 0 (support) to 1 (kernel)."""
        return np.arange(alpha_cuts_count) / (alpha_cuts_count - 1)

    @staticmethod
    def get_highest_alpha_cut_index_containing_value(alpha_cuts: Sequence[Interval], value: float) -> int:
        """
        Returns the index of the narrowest alpha-cut that still contains `value`.

        The cuts are scanned from the support inward; since they are nested,
        the first cut that doesn't contain the value ends the search.

        Raises:
            RuntimeError: Not even the support contains the value.
        """
        if not alpha_cuts[0].contains(value):
            raise RuntimeError(f"No alpha-cut contains the value {value}.")

        for i in range(1, len(alpha_cuts)):
            if not alpha_cuts[i].contains(value):
                return i - 1

        return len(alpha_cuts) - 1

    @staticmethod
    def adjust_alpha_cuts_to_satisfy_subinterval_condition(alpha_cuts: Sequence[Interval]) -> List[Interval]:
        """
        Returns a copy of the list in which every alpha-cut that is not a
        subset of its predecessor is restricted to it.

        Operations evaluated independently on each alpha level can break the
        nesting by a few ulps; the restriction removes exactly that excess.
        """
        adjusted = list(alpha_cuts)
        for i in range(1, len(adjusted)):
            this_alpha_cut = adjusted[i]
            previous_alpha_cut = adjusted[i - 1]
            if not previous_alpha_cut.contains(this_alpha_cut, tolerance=0.0):
                adjusted[i] = this_alpha_cut.restrict_to(previous_alpha_cut)
        return adjusted
