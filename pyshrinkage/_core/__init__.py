"""
Core algorithms (backend-agnostic).
"""

from .standardize import standardize, StandardizedData
from .ridge_solver import solve_ridge
from .lasso_solver import solve_lasso, lasso_coordinate_descent, soft_threshold
from .grid import make_lambda_grid
from .path import compute_path, EstimatorKind, Path, PathPoint

__all__ = [
    "standardize",
    "StandardizedData",
    "solve_ridge",
    "solve_lasso",
    "lasso_coordinate_descent",
    "soft_threshold",
    "make_lambda_grid",
    "compute_path",
    "EstimatorKind",
    "Path",
    "PathPoint",
]
