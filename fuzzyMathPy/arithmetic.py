from __future__ import annotations
from typing import Dict, List, Any, Callable, Sequence
from . import interval_arithmetic
from .types import FuzzyNumber, Interval, FuzzyOperand, _is_real_number


# ==============================================================================
# 1. REGISTRY FOR CUSTOMIZATION
# ==============================================================================

OPERATION_REGISTRY: Dict[str, Dict[str, Any]] = {}

def register_operation(name: str, arity: int):
    """
    A decorator to register an interval operation that can then be applied to
    fuzzy numbers by name with `apply_operation`.

    Args:
        name: The name of the operation (e.g., 'add').
        arity: The number of interval arguments the operation takes.

    Example:
    >>> @register_operation('square', arity=1)
    ... def interval_square(x: Interval) -> Interval:
    ...     return interval_arithmetic.multiply(x, x)
    >>> apply_operation('square', FuzzyNumber(1, 2, 3))
    """
    if arity < 1:
        raise ValueError(f"Operation '{name}' must take at least one argument, got arity={arity}.")

    def decorator(func: Callable[..., Interval]) -> Callable[..., Interval]:
        if not callable(func):
            raise TypeError(
                f"Attempted to register a non-callable object of type '{type(func).__name__}' "
                f"for the operation '{name}'. Only functions or methods can be registered."
            )
        if name in OPERATION_REGISTRY:
            print(f"Warning: Overwriting operation '{name}'")
        OPERATION_REGISTRY[name] = {"function": func, "arity": arity}
        return func
    return decorator

def get_available_operations() -> List[str]:
    return list(OPERATION_REGISTRY.keys())


register_operation('add', arity=2)(interval_arithmetic.add)
register_operation('subtract', arity=2)(interval_arithmetic.subtract)
register_operation('multiply', arity=2)(interval_arithmetic.multiply)
register_operation('divide', arity=2)(interval_arithmetic.divide)
register_operation('negation', arity=1)(interval_arithmetic.negation)
register_operation('reciprocal', arity=1)(interval_arithmetic.reciprocal)


# ==============================================================================
# 2. OPERAND COERCION AND LIFTING
# ==============================================================================

def _as_fuzzy_number(value: FuzzyOperand, alpha_cuts_count: int) -> FuzzyNumber:
    """Wraps an Interval or a plain number as a fuzzy number with `alpha_cuts_count` identical alpha-cuts."""
    if isinstance(value, FuzzyNumber):
        return value
    if isinstance(value, Interval):
        alpha_cut = value
    elif _is_real_number(value):
        alpha_cut = Interval.point(value)
    else:
        raise TypeError(f"Expected a FuzzyNumber, an Interval or a number, not {type(value).__name__}.")
    return FuzzyNumber([alpha_cut] * alpha_cuts_count)

def _coerce_operands(operands: Sequence[FuzzyOperand]) -> List[FuzzyNumber]:
    # Non-fuzzy operands get the alpha-cut count of the first fuzzy operand,
    # so they never force a resampling of it.
    reference = next((operand for operand in operands if isinstance(operand, FuzzyNumber)), None)
    alpha_cuts_count = reference.alpha_cuts_count if reference is not None else 2
    return [_as_fuzzy_number(operand, alpha_cuts_count) for operand in operands]

def _lift(operation: Callable[..., Interval], *operands: FuzzyOperand, alpha_cuts_count: int | None = None) -> FuzzyNumber:
    fuzzy_operands = _coerce_operands(operands)
    return FuzzyNumber.from_fuzzy_number_operation(operation, *fuzzy_operands, alpha_cuts_count=alpha_cuts_count)

def apply_operation(name: str, *operands: FuzzyOperand, alpha_cuts_count: int | None = None) -> FuzzyNumber:
    """
    Applies a registered interval operation to fuzzy numbers, alpha-cut by alpha-cut.

    Args:
        name: The name of a registered operation (see get_available_operations).
        *operands: FuzzyNumbers, Intervals or plain numbers, one per argument of the operation.
        alpha_cuts_count: The number of alpha-cuts of the result.
    """
    entry = OPERATION_REGISTRY.get(name)
    if entry is None:
        raise ValueError(f"Operation '{name}' not found. Available: {get_available_operations()}")
    if len(operands) != entry["arity"]:
        raise TypeError(f"Operation '{name}' takes {entry['arity']} operand(s), but {len(operands)} were given.")
    return _lift(entry["function"], *operands, alpha_cuts_count=alpha_cuts_count)


# ==============================================================================
# 3. FUZZY NUMBER ARITHMETIC
# ==============================================================================

def add(a: FuzzyOperand, b: FuzzyOperand, alpha_cuts_count: int | None = None) -> FuzzyNumber:
    """
    Adds two fuzzy numbers.

    Args:
        a, b: FuzzyNumbers, Intervals or plain numbers.
        alpha_cuts_count: The number of alpha-cuts of the result.
    """
    return _lift(interval_arithmetic.add, a, b, alpha_cuts_count=alpha_cuts_count)

def subtract(a: FuzzyOperand, b: FuzzyOperand, alpha_cuts_count: int | None = None) -> FuzzyNumber:
    """Subtracts two fuzzy numbers."""
    return _lift(interval_arithmetic.subtract, a, b, alpha_cuts_count=alpha_cuts_count)

def multiply(a: FuzzyOperand, b: FuzzyOperand, alpha_cuts_count: int | None = None) -> FuzzyNumber:
    """Multiplies two fuzzy numbers."""
    return _lift(interval_arithmetic.multiply, a, b, alpha_cuts_count=alpha_cuts_count)

def divide(a: FuzzyOperand, b: FuzzyOperand, alpha_cuts_count: int | None = None) -> FuzzyNumber:
    """
    Divides two fuzzy numbers.

    Raises:
        ZeroDivisionError: An alpha-cut of the divisor (the second fuzzy number) contains zero.
    """
    return _lift(interval_arithmetic.divide, a, b, alpha_cuts_count=alpha_cuts_count)

def negation(a: FuzzyOperand, alpha_cuts_count: int | None = None) -> FuzzyNumber:
    """Negation of a fuzzy number (the sign is changed)."""
    return _lift(interval_arithmetic.negation, a, alpha_cuts_count=alpha_cuts_count)

def reciprocal(a: FuzzyOperand, alpha_cuts_count: int | None = None) -> FuzzyNumber:
    """
    For a fuzzy number A, it returns 1/A.

    Raises:
        ZeroDivisionError: The support of the fuzzy number contains zero.
    """
    return _lift(interval_arithmetic.reciprocal, a, alpha_cuts_count=alpha_cuts_count)
