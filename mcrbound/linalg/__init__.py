"""Linear-algebra kernel shared by the boundary solver and verifier."""

from .utils import (
    COND_LIMIT,
    condition_number,
    invert,
    is_pos_def,
    quadratic_form,
    solve,
    symmetrize,
)

__all__ = [
    "COND_LIMIT",
    "condition_number",
    "invert",
    "is_pos_def",
    "quadratic_form",
    "solve",
    "symmetrize",
]
