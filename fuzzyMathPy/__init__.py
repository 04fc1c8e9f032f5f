__version__ = "0.1.0"

from fuzzyMathPy import interval_arithmetic
from fuzzyMathPy import arithmetic
from .config import configure_parameters, ConfigurationContextManager
from .types import Interval, FuzzyNumber
from .alpha_cuts import AlphaCutsHelper
from .breakpoints import BreakPointsConverter
from .validation import Validation

from .arithmetic import register_operation, apply_operation, get_available_operations
