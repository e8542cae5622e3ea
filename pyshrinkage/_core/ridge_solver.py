"""
Ridge solver.

Validates inputs, delegates the linear algebra to a backend, and recovers
from singular systems.
"""

import warnings
import numpy as np

from .._utils import check_X_y, check_lambda, SingularSystemWarning


def solve_ridge(X, y, lam: float, backend=None) -> np.ndarray:
    """
    Ridge regression coefficients for a single penalty.

    Minimizes ||y - Xβ||² + λ||β||² exactly:

        β = (X'X + λI)⁻¹ X'y

    No intercept is fitted; pass centered data (see ``standardize``).

    Parameters
    ----------
    X : array, shape (n, p)
        Design matrix
    y : array, shape (n,)
        Response vector
    lam : float
        Penalty strength, >= 0
    backend : str or Backend, optional
        Computational backend (default: CPU)

    Returns
    -------
    ndarray, shape (p,)
        Coefficients. If X'X + λI is singular, a vector of zeros is returned
        and a ``SingularSystemWarning`` is emitted instead of raising.
    """
    X, y = check_X_y(X, y)
    lam = check_lambda(lam)

    from .._backends import get_backend
    backend = get_backend('cpu' if backend is None else backend)

    try:
        return backend.ridge_coef(X, y, lam)
    except np.linalg.LinAlgError as e:
        warnings.warn(
            f"Singular system in ridge solve at λ = {lam:g}: {e}. "
            f"Returning zero coefficients.",
            SingularSystemWarning,
            stacklevel=2
        )
        return np.zeros(X.shape[1], dtype=np.float64)
