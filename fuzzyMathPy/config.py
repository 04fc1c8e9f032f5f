from typing import Dict, Any


class Configuration:
    """
    A singleton-like class to hold all configurable parameters for the fuzzyMathPy library.

    Users can modify these attributes directly to customize how fuzzy numbers
    with different alpha-cut counts are combined and how loosely they are compared.

    Example:
    >>> from fuzzyMathPy.config import configure_parameters
    >>> # Resample mismatched operands to a finer grid
    >>> configure_parameters.DEFAULT_ALPHA_CUTS_COUNT = 101
    >>> # Refuse to combine fuzzy numbers with different alpha-cut counts
    >>> configure_parameters.STRICT_ALPHA_CUTS_COUNT = True
    """

    def __init__(self):
        self.reset_to_defaults()

    def reset_to_defaults(self):
        """Resets all configuration parameters to their original default values."""

        # --- Alpha-cut Parameters (from types.py / arithmetic.py) ---

        # Number of alpha-cuts used for the result of an operation on fuzzy
        # numbers with different alpha-cut counts, when no count is given.
        self.DEFAULT_ALPHA_CUTS_COUNT: int = 60

        # If True, operations on fuzzy numbers with different alpha-cut counts
        # raise a ValueError unless the caller gives an explicit count.
        self.STRICT_ALPHA_CUTS_COUNT: bool = False

        # --- General Numerical Parameters ---

        # Default tolerance for FuzzyNumber.is_equal_to
        self.FLOAT_TOLERANCE: float = 1e-9

    def as_dict(self) -> Dict[str, Any]:
        """Returns the current parameters as a plain dictionary."""
        return {key: value for key, value in vars(self).items() if key.isupper()}

configure_parameters = Configuration()



class ConfigurationContextManager:
    """
    A context manager to temporarily change configuration parameters.

    Usage:
    >>> with ConfigurationContextManager(DEFAULT_ALPHA_CUTS_COUNT=11):
    >>>     # Mismatched operands are resampled to 11 alpha-cuts here
    >>>     ...
    >>> # The count reverts to its original value outside the block
    """
    def __init__(self, **kwargs):
        self.changes = kwargs
        self.original_values = {}

    def __enter__(self):
        for key in self.changes:
            if not hasattr(configure_parameters, key):
                raise AttributeError(f"Configuration object has no attribute '{key}'")
        for key, value in self.changes.items():
            self.original_values[key] = getattr(configure_parameters, key)
            setattr(configure_parameters, key, value)
        return configure_parameters

    def __exit__(self, exc_type, exc_val, exc_tb):
        for key, value in self.original_values.items():
            setattr(configure_parameters, key, value)
