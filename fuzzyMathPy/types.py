from __future__ import annotations
import numpy as np
from dataclasses import dataclass
from typing import Union, Tuple, List, Sequence, Callable, Iterator, Any
from .alpha_cuts import AlphaCutsHelper
from .validation import Validation
from .config import configure_parameters

try:
    import pandas as pd
    _PANDAS_AVAILABLE = True
except ImportError:
    _PANDAS_AVAILABLE = False

def _check_pandas_availability():
    if not _PANDAS_AVAILABLE:
        raise ImportError("This feature requires the 'pandas' library. Please install it using: pip install pandas")


def _is_real_number(value: Any) -> bool:
    """True for plain numbers (Python or NumPy scalars), False for bools and everything else."""
    return isinstance(value, (int, float, np.number)) and not isinstance(value, (bool, np.bool_))


# ==============================================================================
# 1. INTERVAL
# ==============================================================================

@dataclass(frozen=True, repr=False)
class Interval:
    """
    A closed interval [min, max] of real numbers.

    Intervals are immutable values: two intervals with the same bounds are
    equal and hash alike. Arithmetic operators are defined both between
    intervals and between an interval and a plain number, which is treated
    as the degenerate interval [k, k].
    """
    min: float
    max: float

    def __post_init__(self):
        min_value, max_value = float(self.min), float(self.max)
        errors = Validation.validate_interval_bounds(min_value, max_value)
        if errors:
            raise ValueError(errors[0])
        object.__setattr__(self, 'min', min_value)
        object.__setattr__(self, 'max', max_value)

    def __repr__(self) -> str:
        return f"Interval({self.min:.4f}, {self.max:.4f})"

    def __str__(self) -> str:
        return f"[{self.min}, {self.max}]"

    def __iter__(self) -> Iterator[float]:
        """Allows unpacking: ``lo, hi = interval``."""
        yield self.min
        yield self.max

    @classmethod
    def point(cls, x: float) -> Interval:
        """Creates the degenerate interval [x, x]."""
        return cls(x, x)

    @property
    def size(self) -> float:
        return self.max - self.min

    @property
    def center(self) -> float:
        return (self.max + self.min) / 2.0

    def contains(self, x: Union[Interval, float], tolerance: float = 0.0) -> bool:
        """
        Verifies if a number or another interval lies inside this interval.

        Args:
            x: A real number or an Interval.
            tolerance: An optional tolerance used for the comparison.
        """
        if isinstance(x, Interval):
            return (x.min + tolerance >= self.min) and (x.max - tolerance <= self.max)
        return (x + tolerance >= self.min) and (x - tolerance <= self.max)

    def contains_zero(self) -> bool:
        return self.contains(0.0)

    def is_equal_to(self, other: Interval, tolerance: float = 0.0) -> bool:
        """Verifies if both bounds of `other` are within `tolerance` of this interval's bounds."""
        return abs(self.min - other.min) <= tolerance and abs(self.max - other.max) <= tolerance

    def restrict_to(self, universe: Interval) -> Interval:
        """
        Returns the interval modified so that it lies inside `universe`.

        Each bound is clamped independently, so an interval lying completely
        outside the universe collapses to the nearest boundary point of the
        universe, e.g. [8, 9] restricted to [-1, 2] gives [2, 2].
        """
        restricted_min = min(max(self.min, universe.min), universe.max)
        restricted_max = max(min(self.max, universe.max), universe.min)
        return Interval(restricted_min, restricted_max)

    def to_array(self) -> np.ndarray:
        """Convert to NumPy array."""
        return np.array([self.min, self.max])

    # --- Operators (see interval_arithmetic.py) ---

    @staticmethod
    def _is_operand(other: Any) -> bool:
        return isinstance(other, Interval) or _is_real_number(other)

    def __add__(self, other: Union[Interval, float]) -> Interval:
        from .interval_arithmetic import add
        return add(self, other) if self._is_operand(other) else NotImplemented

    def __radd__(self, other: float) -> Interval:
        from .interval_arithmetic import add
        return add(other, self) if self._is_operand(other) else NotImplemented

    def __sub__(self, other: Union[Interval, float]) -> Interval:
        from .interval_arithmetic import subtract
        return subtract(self, other) if self._is_operand(other) else NotImplemented

    def __rsub__(self, other: float) -> Interval:
        from .interval_arithmetic import subtract
        return subtract(other, self) if self._is_operand(other) else NotImplemented

    def __mul__(self, other: Union[Interval, float]) -> Interval:
        from .interval_arithmetic import multiply
        return multiply(self, other) if self._is_operand(other) else NotImplemented

    def __rmul__(self, other: float) -> Interval:
        from .interval_arithmetic import multiply
        return multiply(other, self) if self._is_operand(other) else NotImplemented

    def __truediv__(self, other: Union[Interval, float]) -> Interval:
        from .interval_arithmetic import divide
        return divide(self, other) if self._is_operand(other) else NotImplemented

    def __rtruediv__(self, other: float) -> Interval:
        from .interval_arithmetic import divide
        return divide(other, self) if self._is_operand(other) else NotImplemented

    def __neg__(self) -> Interval:
        from .interval_arithmetic import negation
        return negation(self)


# ==============================================================================
# 2. PIECEWISE-LINEAR FUZZY NUMBER
# ==============================================================================

class FuzzyNumber:
    """
    A piecewise-linear fuzzy number, stored as a list of nested alpha-cuts.

    The first alpha-cut is the support (alpha = 0), the last one is the
    kernel (alpha = 1), and the cuts in between are evenly spaced in alpha.
    Between two stored cuts the membership function is linear.

    The constructor accepts the usual shapes:

    >>> FuzzyNumber(3)              # crisp number
    >>> FuzzyNumber(2, 3)           # interval [2, 3]
    >>> FuzzyNumber(1, 2, 3)        # triangular
    >>> FuzzyNumber(1, 2, 3, 5)     # trapezoidal
    >>> FuzzyNumber([Interval(1, 5), Interval(1.5, 4), Interval(2, 3)])

    .. note::
        Instances are immutable. Every operation (resampling, arithmetic)
        returns a new FuzzyNumber.
    """
    __slots__ = ('_alpha_cuts',)

    def __init__(self, *args):
        """
        Initializes a fuzzy number from a shape or from a list of alpha-cuts.
        This constructor is idempotent: FuzzyNumber(FuzzyNumber(1, 2, 3)) is valid.
        """
        if len(args) == 1 and isinstance(args[0], FuzzyNumber):
            alpha_cuts = args[0].alpha_cuts
        elif len(args) == 1 and isinstance(args[0], Interval):
            alpha_cuts = (args[0], args[0])
        elif len(args) == 1 and not _is_real_number(args[0]):
            alpha_cuts = tuple(args[0])
            AlphaCutsHelper.raise_if_alpha_cuts_are_invalid(alpha_cuts)
        elif 1 <= len(args) <= 4 and all(_is_real_number(arg) for arg in args):
            alpha_cuts = FuzzyNumber._shape_to_alpha_cuts(*args)
        else:
            raise TypeError(
                "FuzzyNumber expects 1 to 4 numbers (crisp, interval, triangular, trapezoidal) "
                f"or a list of Interval alpha-cuts, but got {args!r}"
            )
        object.__setattr__(self, '_alpha_cuts', alpha_cuts)

    @staticmethod
    def _shape_to_alpha_cuts(*params: float) -> Tuple[Interval, Interval]:
        """Expands (x), (a, b), (a, b, c) or (a, b, c, d) to the trapezoidal (support, kernel) pair."""
        if len(params) == 1:
            support_min = kernel_min = kernel_max = support_max = params[0]
        elif len(params) == 2:
            support_min = kernel_min = params[0]
            kernel_max = support_max = params[1]
        elif len(params) == 3:
            support_min, kernel_min, support_max = params
            kernel_max = kernel_min
        else:
            support_min, kernel_min, kernel_max, support_max = params

        if kernel_max < kernel_min:
            raise ValueError(
                f"The constructor parameters don't define a valid fuzzy number. "
                f"Kernel min ({kernel_min}) cannot be greater than kernel max ({kernel_max})."
            )
        if support_max < support_min:
            raise ValueError(
                f"The constructor parameters don't define a valid fuzzy number. "
                f"Support min ({support_min}) cannot be greater than support max ({support_max})."
            )
        support = Interval(support_min, support_max)
        kernel = Interval(kernel_min, kernel_max)
        alpha_cuts = (support, kernel)
        AlphaCutsHelper.raise_if_alpha_cuts_are_invalid(
            alpha_cuts,
            error_message_template_for_invalid_alpha_cut="The constructor parameters don't define a valid fuzzy number. "
                                                         "Kernel {0} must be a subset of the support {1}")
        return alpha_cuts

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # copy/deepcopy/pickle go through the validating constructor
        return (FuzzyNumber, (list(self._alpha_cuts),))

    def __repr__(self) -> str:
        return f"FuzzyNumber({', '.join(str(alpha_cut) for alpha_cut in self._alpha_cuts)})"

    # --- Factories ---

    @classmethod
    def from_crisp(cls, value: float) -> FuzzyNumber:
        return cls(value)

    @classmethod
    def from_interval(cls, min_value: Union[Interval, float], max_value: float | None = None) -> FuzzyNumber:
        """Creates a fuzzy number whose support and kernel are both the given interval."""
        if isinstance(min_value, Interval):
            return cls(min_value)
        if max_value is None:
            raise TypeError("from_interval() needs an Interval or both min_value and max_value.")
        return cls(min_value, max_value)

    @classmethod
    def triangular(cls, support_min: float, kernel: float, support_max: float) -> FuzzyNumber:
        return cls(support_min, kernel, support_max)

    @classmethod
    def trapezoidal(cls, support_min: float, kernel_min: float, kernel_max: float, support_max: float) -> FuzzyNumber:
        return cls(support_min, kernel_min, kernel_max, support_max)

    @classmethod
    def from_alpha_cuts(cls, alpha_cuts: Sequence[Interval]) -> FuzzyNumber:
        """Creates a fuzzy number from its alpha-cuts, the support first and the kernel last."""
        return cls(list(alpha_cuts))

    @classmethod
    def from_break_points(cls, break_points: Sequence[float]) -> FuzzyNumber:
        """Creates a fuzzy number from its break-point notation, e.g. (1, 2, 3) for a triangular number."""
        from .breakpoints import BreakPointsConverter
        return cls(BreakPointsConverter.convert_to_alpha_cuts(break_points))

    # --- Properties ---

    @property
    def alpha_cuts(self) -> Tuple[Interval, ...]:
        return self._alpha_cuts

    @property
    def alpha_cuts_count(self) -> int:
        return len(self._alpha_cuts)

    @property
    def support(self) -> Interval:
        return self._alpha_cuts[0]

    @property
    def kernel(self) -> Interval:
        return self._alpha_cuts[-1]

    def is_crisp(self) -> bool:
        return self.support.size == 0

    # --- Alpha-cuts and membership ---

    def get_alpha_cut(self, alpha: float) -> Interval:
        """
        Returns the alpha-cut for any alpha in [0, 1], interpolating linearly
        between the two stored alpha-cuts that surround it.

        Raises:
            ValueError: alpha is outside [0, 1] or NaN.
        """
        if alpha == 0:
            return self.support
        if alpha == 1:
            return self.kernel
        AlphaCutsHelper.raise_if_alpha_is_invalid(alpha)

        last_index = len(self._alpha_cuts) - 1
        position = alpha * last_index
        # alpha just below 1 may round up to the last index
        lower_index = min(int(np.floor(position)), last_index - 1)
        ratio = position - lower_index

        lower_alpha_cut = self._alpha_cuts[lower_index]
        higher_alpha_cut = self._alpha_cuts[lower_index + 1]

        result_min = lower_alpha_cut.min + ratio * (higher_alpha_cut.min - lower_alpha_cut.min)
        result_max = lower_alpha_cut.max - ratio * (lower_alpha_cut.max - higher_alpha_cut.max)

        # Rounding can cross the bounds of a single-point kernel
        if result_min > result_max:
            result_min = result_max = (result_min + result_max) / 2.0

        return Interval(result_min, result_max)

    def alpha_cut(self, alpha: float) -> tuple[float, float]:
        """The alpha-cut as a plain (lower, upper) tuple."""
        alpha_cut = self.get_alpha_cut(alpha)
        return alpha_cut.min, alpha_cut.max

    def get_membership(self, x: float) -> float:
        """
        Returns the membership degree of the element x (a number between 0 and 1).
        It is the inverse of get_alpha_cut on both edges of the fuzzy number.
        """
        if not self.support.contains(x):
            return 0.0
        if self.kernel.contains(x):
            return 1.0

        lower_index = AlphaCutsHelper.get_highest_alpha_cut_index_containing_value(self._alpha_cuts, x)
        lower_alpha_cut = self._alpha_cuts[lower_index]
        higher_alpha_cut = self._alpha_cuts[lower_index + 1]

        alpha_step = 1.0 / (len(self._alpha_cuts) - 1)
        lower_alpha = lower_index * alpha_step

        if x < higher_alpha_cut.min:
            ratio = (x - lower_alpha_cut.min) / (higher_alpha_cut.min - lower_alpha_cut.min)
        else:
            ratio = (lower_alpha_cut.max - x) / (lower_alpha_cut.max - higher_alpha_cut.max)

        return lower_alpha + ratio * alpha_step

    def __call__(self, x: float) -> float:
        return self.get_membership(x)

    def with_alpha_cuts_count(self, new_alpha_cuts_count: int) -> FuzzyNumber:
        """
        Creates a copy of this fuzzy number with a different number of alpha-cuts.

        This is useful before operating on several fuzzy numbers that should
        share the same alpha levels.

        Raises:
            ValueError: The new number of alpha-cuts is less than 2.
        """
        AlphaCutsHelper.raise_if_alpha_cuts_count_is_invalid(new_alpha_cuts_count)
        return FuzzyNumber.from_alpha_cut_function(self.get_alpha_cut, new_alpha_cuts_count)

    def is_equal_to(self, other: FuzzyNumber, tolerance: float | None = None) -> bool:
        """
        Compares the membership functions of two fuzzy numbers, which may have
        different numbers of alpha-cuts.
        """
        if not isinstance(other, FuzzyNumber):
            return False
        final_tolerance = tolerance if tolerance is not None else configure_parameters.FLOAT_TOLERANCE

        count = len(self._alpha_cuts)
        for i, alpha_cut in enumerate(self._alpha_cuts):
            alpha = AlphaCutsHelper.get_alpha_for_alpha_cut_index(i, count)
            if not alpha_cut.is_equal_to(other.get_alpha_cut(alpha), final_tolerance):
                return False

        # The support and the kernel have already been checked
        other_count = len(other.alpha_cuts)
        if other_count != count:
            for i in range(1, other_count - 1):
                alpha = AlphaCutsHelper.get_alpha_for_alpha_cut_index(i, other_count)
                if not other.alpha_cuts[i].is_equal_to(self.get_alpha_cut(alpha), final_tolerance):
                    return False

        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FuzzyNumber):
            return self._alpha_cuts == other.alpha_cuts
        return False

    def __hash__(self) -> int:
        return hash(self._alpha_cuts)

    # --- Conversions ---

    def to_array(self) -> np.ndarray:
        """Convert to an (N, 2) NumPy array of [min, max] rows, support first."""
        return np.array([[alpha_cut.min, alpha_cut.max] for alpha_cut in self._alpha_cuts])

    def to_break_points(self) -> List[float]:
        from .breakpoints import BreakPointsConverter
        return BreakPointsConverter.convert_from_alpha_cuts(self._alpha_cuts)

    def to_dataframe(self) -> "pd.DataFrame":
        """Returns the alpha-cuts as a table with 'alpha', 'min' and 'max' columns."""
        _check_pandas_availability()
        data = self.to_array()
        return pd.DataFrame({
            "alpha": AlphaCutsHelper.get_alpha_levels(len(self._alpha_cuts)),
            "min": data[:, 0],
            "max": data[:, 1],
        })

    # --- Operation lifting ---

    @staticmethod
    def _from_indexed_alpha_cut_function(get_alpha_cut_function: Callable[[int, float], Interval], alpha_cuts_count: int) -> FuzzyNumber:
        AlphaCutsHelper.raise_if_alpha_cuts_count_is_invalid(alpha_cuts_count)

        alpha_cuts = [
            get_alpha_cut_function(i, AlphaCutsHelper.get_alpha_for_alpha_cut_index(i, alpha_cuts_count))
            for i in range(alpha_cuts_count)
        ]
        type_errors = Validation.validate_alpha_cut_types(alpha_cuts)
        if type_errors:
            raise TypeError(" ".join(type_errors))

        alpha_cuts = AlphaCutsHelper.adjust_alpha_cuts_to_satisfy_subinterval_condition(alpha_cuts)
        return FuzzyNumber(alpha_cuts)

    @staticmethod
    def from_alpha_cut_function(get_alpha_cut_function: Callable[[float], Interval], alpha_cuts_count: int) -> FuzzyNumber:
        """
        Creates a new fuzzy number from a function that generates its alpha-cuts.

        Args:
            get_alpha_cut_function: Returns the alpha-cut for a given alpha (from 0 to 1).
                If a returned alpha-cut is not a subinterval of the previous one, which can
                happen because of the limited accuracy of floating-point operations, it is
                restricted to the previous one.
            alpha_cuts_count: The number of alpha-cuts of the resulting fuzzy number.
        """
        return FuzzyNumber._from_indexed_alpha_cut_function(
            lambda _, alpha: get_alpha_cut_function(alpha),
            alpha_cuts_count)

    @staticmethod
    def get_common_alpha_cuts_count(*inputs: FuzzyNumber) -> int:
        """
        Returns the alpha-cut count an operation on `inputs` produces by default:
        their shared count, or DEFAULT_ALPHA_CUTS_COUNT if the counts differ.

        Raises:
            ValueError: The counts differ and STRICT_ALPHA_CUTS_COUNT is set.
        """
        counts = {fuzzy_number.alpha_cuts_count for fuzzy_number in inputs}
        if len(counts) == 1:
            return counts.pop()
        if configure_parameters.STRICT_ALPHA_CUTS_COUNT:
            raise ValueError(
                f"The input fuzzy numbers must have the same number of alpha-cuts (found {sorted(counts)}). "
                "If you want to apply the operation on fuzzy numbers with a different number of alpha-cuts, "
                "specify the number of alpha-cuts for the result."
            )
        return configure_parameters.DEFAULT_ALPHA_CUTS_COUNT

    @staticmethod
    def from_fuzzy_number_operation(
        operation: Callable[..., Interval],
        *inputs: FuzzyNumber,
        alpha_cuts_count: int | None = None
    ) -> FuzzyNumber:
        """
        Lifts an interval operation to fuzzy numbers by applying it to the
        corresponding alpha-cuts of the inputs.

        Args:
            operation: Takes one alpha-cut per input (a unary operation for one
                input, a binary one for two, ...) and returns the resulting alpha-cut.
            *inputs: The input fuzzy numbers.
            alpha_cuts_count: The number of alpha-cuts of the result. Defaults to the
                count shared by the inputs (see get_common_alpha_cuts_count).

        .. note::
            Inputs whose count differs from the result's are resampled first, so the
            operation always sees the alpha-cuts of one alpha level together.
        """
        if not inputs:
            raise TypeError("from_fuzzy_number_operation() needs at least one input fuzzy number.")
        for fuzzy_number in inputs:
            if not isinstance(fuzzy_number, FuzzyNumber):
                raise TypeError(f"Inputs must be FuzzyNumber instances, not {type(fuzzy_number).__name__}.")

        if alpha_cuts_count is None:
            alpha_cuts_count = FuzzyNumber.get_common_alpha_cuts_count(*inputs)
        AlphaCutsHelper.raise_if_alpha_cuts_count_is_invalid(alpha_cuts_count)

        aligned = [
            fuzzy_number if fuzzy_number.alpha_cuts_count == alpha_cuts_count
            else fuzzy_number.with_alpha_cuts_count(alpha_cuts_count)
            for fuzzy_number in inputs
        ]
        return FuzzyNumber._from_indexed_alpha_cut_function(
            lambda index, _: operation(*(fuzzy_number.alpha_cuts[index] for fuzzy_number in aligned)),
            alpha_cuts_count)

    # --- Operators (see arithmetic.py) ---

    @staticmethod
    def _is_operand(other: Any) -> bool:
        return isinstance(other, (FuzzyNumber, Interval)) or _is_real_number(other)

    def __add__(self, other: Union[FuzzyNumber, Interval, float]) -> FuzzyNumber:
        from .arithmetic import add
        return add(self, other) if self._is_operand(other) else NotImplemented

    def __radd__(self, other: Union[Interval, float]) -> FuzzyNumber:
        from .arithmetic import add
        return add(other, self) if self._is_operand(other) else NotImplemented

    def __sub__(self, other: Union[FuzzyNumber, Interval, float]) -> FuzzyNumber:
        from .arithmetic import subtract
        return subtract(self, other) if self._is_operand(other) else NotImplemented

    def __rsub__(self, other: Union[Interval, float]) -> FuzzyNumber:
        from .arithmetic import subtract
        return subtract(other, self) if self._is_operand(other) else NotImplemented

    def __mul__(self, other: Union[FuzzyNumber, Interval, float]) -> FuzzyNumber:
        from .arithmetic import multiply
        return multiply(self, other) if self._is_operand(other) else NotImplemented

    def __rmul__(self, other: Union[Interval, float]) -> FuzzyNumber:
        from .arithmetic import multiply
        return multiply(other, self) if self._is_operand(other) else NotImplemented

    def __truediv__(self, other: Union[FuzzyNumber, Interval, float]) -> FuzzyNumber:
        from .arithmetic import divide
        return divide(self, other) if self._is_operand(other) else NotImplemented

    def __rtruediv__(self, other: Union[Interval, float]) -> FuzzyNumber:
        from .arithmetic import divide
        return divide(other, self) if self._is_operand(other) else NotImplemented

    def __neg__(self) -> FuzzyNumber:
        from .arithmetic import negation
        return negation(self)


# ==============================================================================
# 3. TYPE ALIASES
# ==============================================================================

IntervalOperand = Union[Interval, float]
FuzzyOperand = Union[FuzzyNumber, Interval, float]
