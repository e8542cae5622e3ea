"""
Abstract base classes for backends.

Defines the interface all backends must implement.
"""

from abc import ABC, abstractmethod
import numpy as np
from dataclasses import dataclass


@dataclass
class LassoResult:
    """Result of a coordinate-descent Lasso solve."""
    coef: np.ndarray     # Coefficients, length p
    n_iter: int          # Full passes over the coordinates
    converged: bool      # Last pass changed no coefficient by tol or more
    max_change: float    # Largest |Δβ_j| in the last pass


class BackendBase(ABC):
    """Abstract base class for all backends."""

    @abstractmethod
    def ridge_coef(
        self,
        X: np.ndarray,
        y: np.ndarray,
        lam: float
    ) -> np.ndarray:
        """
        Closed-form ridge coefficients.

        Parameters
        ----------
        X : ndarray, shape (n, p)
            Design matrix (no intercept column)
        y : ndarray, shape (n,)
            Response vector
        lam : float
            Penalty strength, >= 0

        Returns
        -------
        ndarray, shape (p,)
            (X'X + λI)⁻¹ X'y

        Raises
        ------
        numpy.linalg.LinAlgError
            If X'X + λI is not invertible. Callers decide how to recover.
        """
        pass

    @abstractmethod
    def lasso_coef(
        self,
        X: np.ndarray,
        y: np.ndarray,
        lam: float,
        max_iter: int,
        tol: float,
        method: str
    ) -> LassoResult:
        """
        Lasso coefficients by cyclic coordinate descent.

        Minimizes ||y - Xβ||² + λ||β||₁ starting from β = 0.
        """
        pass

    @abstractmethod
    def get_device_info(self) -> dict:
        """Get backend information."""
        pass


class CPUBackend(BackendBase):
    """CPU backend base class (always FP64)."""
    pass
