"""
Utility functions.
"""

import numpy as np


class InvalidShapeError(ValueError):
    """Input arrays have degenerate or inconsistent dimensions."""


class SingularSystemWarning(UserWarning):
    """Regularized Gram matrix could not be inverted; zeros were returned."""


def check_array(X, name='X', dtype=np.float64):
    """Validate array input."""
    if isinstance(X, (list, tuple)) and len(X) > 0:
        widths = {len(row) if hasattr(row, '__len__') else -1 for row in X}
        if len(widths) > 1:
            raise InvalidShapeError(f"{name} has rows of different lengths")
    X = np.asarray(X, dtype=dtype)
    if X.ndim != 2:
        raise InvalidShapeError(f"{name} must be 2-dimensional")
    if X.shape[0] == 0 or X.shape[1] == 0:
        raise InvalidShapeError(
            f"{name} must have at least one row and one column, got shape {X.shape}"
        )
    if not np.all(np.isfinite(X)):
        raise ValueError(f"{name} contains NaN or Inf")
    return X


def check_vector(y, name='y', dtype=np.float64):
    """Validate vector input."""
    y = np.asarray(y, dtype=dtype)
    if y.ndim != 1:
        raise InvalidShapeError(f"{name} must be 1-dimensional")
    if y.shape[0] == 0:
        raise InvalidShapeError(f"{name} must not be empty")
    if not np.all(np.isfinite(y)):
        raise ValueError(f"{name} contains NaN or Inf")
    return y


def check_X_y(X, y):
    """Validate a design matrix and response vector as a pair."""
    X = check_array(X)
    y = check_vector(y)
    if X.shape[0] != y.shape[0]:
        raise InvalidShapeError(
            f"X has {X.shape[0]} rows but y has {y.shape[0]} entries"
        )
    return X, y


def check_lambda(lam, name='lam'):
    """Validate a regularization strength."""
    lam = float(lam)
    if not np.isfinite(lam) or lam < 0:
        raise ValueError(f"{name} must be a finite non-negative number, got {lam}")
    return lam
