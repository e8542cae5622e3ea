"""
Lasso solver.

Validates inputs and delegates coordinate descent to a backend.

Penalty scale
-------------
The objective is ||y - Xβ||² + λ||β||₁ with no 1/(2n) averaging, so the
soft-threshold level is λ/2. Packages that minimize
(1/(2n))||y - Xβ||² + α||β||₁ (e.g. scikit-learn) correspond to λ = 2nα.
"""

import numpy as np

from .._utils import check_X_y, check_lambda
from .._backends.base import LassoResult
from .._backends.cpu_fp64_backend import soft_threshold


DEFAULT_MAX_ITER = 1000
DEFAULT_TOL = 1e-4


def lasso_coordinate_descent(
    X,
    y,
    lam: float,
    max_iter: int = DEFAULT_MAX_ITER,
    tol: float = DEFAULT_TOL,
    method: str = 'naive',
    backend=None,
) -> LassoResult:
    """
    Lasso by cyclic coordinate descent, with convergence diagnostics.

    Parameters
    ----------
    X : array, shape (n, p)
        Design matrix
    y : array, shape (n,)
        Response vector
    lam : float
        Penalty strength, >= 0 (unnormalized, see module docstring)
    max_iter : int, default=1000
        Maximum number of full passes over the coordinates
    tol : float, default=1e-4
        Stop once a pass changes no coefficient by ``tol`` or more
    method : {'naive', 'residual'}
        'naive' recomputes the leave-one-out prediction for every
        coordinate; 'residual' updates a running residual. Both converge to
        the same fixed point.
    backend : str or Backend, optional
        Computational backend (default: CPU)

    Returns
    -------
    LassoResult
        Coefficients plus iteration count and convergence flag
    """
    X, y = check_X_y(X, y)
    lam = check_lambda(lam)

    if not np.isfinite(max_iter) or int(max_iter) != max_iter or max_iter < 1:
        raise ValueError(f"max_iter must be a positive integer, got {max_iter}")
    if not tol > 0:
        raise ValueError(f"tol must be positive, got {tol}")

    from .._backends import get_backend
    backend = get_backend('cpu' if backend is None else backend)

    return backend.lasso_coef(X, y, lam, int(max_iter), float(tol), method)


def solve_lasso(
    X,
    y,
    lam: float,
    max_iter: int = DEFAULT_MAX_ITER,
    tol: float = DEFAULT_TOL,
    method: str = 'naive',
    backend=None,
) -> np.ndarray:
    """
    Lasso regression coefficients for a single penalty.

    Minimizes ||y - Xβ||² + λ||β||₁. The result is best-effort: hitting
    ``max_iter`` is not an error and is not reported. Use
    ``lasso_coordinate_descent`` to see whether the solve converged.

    Returns
    -------
    ndarray, shape (p,)
    """
    return lasso_coordinate_descent(
        X, y, lam,
        max_iter=max_iter,
        tol=tol,
        method=method,
        backend=backend
    ).coef


__all__ = [
    'solve_lasso',
    'lasso_coordinate_descent',
    'soft_threshold',
    'DEFAULT_MAX_ITER',
    'DEFAULT_TOL',
]
