"""
Feature and target standardization.

Centers and scales the columns of X and centers y so that penalties act
comparably across features and no intercept needs to be fitted.
"""

import numpy as np
from typing import Tuple
from dataclasses import dataclass

from .._utils import check_X_y


@dataclass(frozen=True)
class StandardizedData:
    """Standardized design and centered response, with the statistics used."""
    X: np.ndarray              # (n, p), each column mean 0
    y: np.ndarray              # (n,), mean 0
    column_means: np.ndarray   # (p,)
    column_scales: np.ndarray  # (p,), population std, 1 where std was 0
    target_mean: float

    @property
    def n_samples(self) -> int:
        return self.X.shape[0]

    @property
    def n_features(self) -> int:
        return self.X.shape[1]

    def to_original_scale(self, coef) -> Tuple[float, np.ndarray]:
        """
        Map standardized-space coefficients back to raw feature units.

        Parameters
        ----------
        coef : array, shape (p,)
            Coefficients fitted on ``self.X`` and ``self.y``

        Returns
        -------
        intercept : float
        coef_raw : ndarray, shape (p,)
            Such that ``intercept + X_raw @ coef_raw`` equals
            ``target_mean + self.X @ coef``.
        """
        coef = np.asarray(coef, dtype=np.float64)
        if coef.shape != (self.n_features,):
            raise ValueError(
                f"coef must have shape ({self.n_features},), got {coef.shape}"
            )
        coef_raw = coef / self.column_scales
        intercept = self.target_mean - self.column_means @ coef_raw
        return float(intercept), coef_raw


def standardize(X, y) -> StandardizedData:
    """
    Standardize the columns of X and center y.

    Statistics are computed fresh from the data passed in; nothing is cached.

    Parameters
    ----------
    X : array, shape (n, p)
        Feature matrix, n >= 1 and p >= 1
    y : array, shape (n,)
        Target vector

    Returns
    -------
    StandardizedData
        ``X[i, j] = (X[i, j] - m_j) / s_j`` where ``s_j`` is the population
        standard deviation (divides by n). A column with ``s_j == 0`` gets
        scale 1 and comes out as all zeros.

    Raises
    ------
    InvalidShapeError
        If X is not a non-empty rectangular matrix or y does not match it.
    """
    X, y = check_X_y(X, y)

    means = X.mean(axis=0)
    scales = X.std(axis=0, ddof=0)

    # Rounding in the mean can leave a constant column with a tiny nonzero std
    constant = np.all(X == X[0], axis=0)
    means = np.where(constant, X[0], means)
    scales = np.where(constant | (scales == 0), 1.0, scales)

    X_std = (X - means) / scales
    target_mean = float(y.mean())
    y_centered = y - target_mean

    for arr in (X_std, y_centered, means, scales):
        arr.flags.writeable = False

    return StandardizedData(
        X=X_std,
        y=y_centered,
        column_means=means,
        column_scales=scales,
        target_mean=target_mean
    )
