"""
Synthetic regression data for demonstrations.
"""

import numpy as np
from typing import Optional
from dataclasses import dataclass


@dataclass
class RegressionDataset:
    """Feature matrix, response and the coefficients that generated it."""
    X: np.ndarray          # (n, p)
    y: np.ndarray          # (n,)
    true_coef: np.ndarray  # (p,)


def make_sparse_regression(
    n_samples: int = 50,
    n_features: int = 5,
    noise: float = 5.0,
    random_state: Optional[int] = None
) -> RegressionDataset:
    """
    Linear data whose true coefficients are zero at every odd index.

    - ``X`` is uniform on [0, 10)
    - ``true_coef[j]`` is uniform on [-10, 10) for even j, exactly 0 for odd j
    - ``y = X @ true_coef + e`` with ``e`` uniform on [-noise/2, noise/2)

    Parameters
    ----------
    n_samples : int, default=50
    n_features : int, default=5
    noise : float, default=5.0
        Width of the uniform noise interval
    random_state : int, optional
        Seed for ``numpy.random.default_rng``

    Examples
    --------
    >>> data = make_sparse_regression(100, 10, noise=10, random_state=0)
    >>> data.X.shape
    (100, 10)
    """
    if n_samples < 1 or n_features < 1:
        raise ValueError(
            f"Need n_samples >= 1 and n_features >= 1, got {n_samples} and {n_features}"
        )
    if noise < 0:
        raise ValueError(f"noise must be non-negative, got {noise}")

    rng = np.random.default_rng(random_state)

    true_coef = np.zeros(n_features)
    true_coef[::2] = (rng.random(len(true_coef[::2])) - 0.5) * 20

    X = rng.random((n_samples, n_features)) * 10
    y = X @ true_coef + (rng.random(n_samples) - 0.5) * noise

    return RegressionDataset(X=X, y=y, true_coef=true_coef)
