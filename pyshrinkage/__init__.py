"""
PyShrinkage: Ridge and Lasso coefficient paths over a penalty grid.

Licensed under GPL-3.0
"""

__version__ = "1.0.0"

# Import main user-facing API
from .paths import fit_paths, ShrinkageModel
from .datasets import make_sparse_regression, RegressionDataset

# Numerical core
from ._core import (
    standardize,
    StandardizedData,
    solve_ridge,
    solve_lasso,
    lasso_coordinate_descent,
    soft_threshold,
    make_lambda_grid,
    compute_path,
    EstimatorKind,
    Path,
    PathPoint,
)
from ._backends import get_backend, list_available_backends, LassoResult
from ._utils import InvalidShapeError, SingularSystemWarning

__all__ = [
    'fit_paths',
    'ShrinkageModel',
    'make_sparse_regression',
    'RegressionDataset',
    'standardize',
    'StandardizedData',
    'solve_ridge',
    'solve_lasso',
    'lasso_coordinate_descent',
    'soft_threshold',
    'make_lambda_grid',
    'compute_path',
    'EstimatorKind',
    'Path',
    'PathPoint',
    'LassoResult',
    'get_backend',
    'list_available_backends',
    'InvalidShapeError',
    'SingularSystemWarning',
]
