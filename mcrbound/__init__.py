"""mcrbound - multivariate confidence region bounds for dissolution profile comparison."""

__version__ = "0.1.0"

from .boundary import (
    MAX_ITERATIONS,
    TOLERANCE,
    MsdBounds,
    Problem,
    Solution,
    constraint_value,
    msd_bounds,
    rounding_digits,
    solve_boundary,
    verify_boundary_point,
)
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled
from .errors import (
    InvalidInputError,
    MalformedHandoffError,
    McrBoundError,
    NonConvergenceWarning,
    SingularMatrixError,
)
from .hotelling import HotellingParameters, get_t2_two
from .linalg import invert, quadratic_form
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Boundary search
    "MAX_ITERATIONS",
    "TOLERANCE",
    "Problem",
    "Solution",
    "MsdBounds",
    "solve_boundary",
    "verify_boundary_point",
    "constraint_value",
    "rounding_digits",
    "msd_bounds",
    # Upstream statistics
    "HotellingParameters",
    "get_t2_two",
    # Linear algebra
    "invert",
    "quadratic_form",
    # Errors
    "McrBoundError",
    "InvalidInputError",
    "SingularMatrixError",
    "MalformedHandoffError",
    "NonConvergenceWarning",
    # Logging / debug
    "get_logger",
    "set_log_level",
    "configure_logging",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
