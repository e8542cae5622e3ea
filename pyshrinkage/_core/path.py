"""
Regularization paths.

Re-solves an estimator at every penalty of a grid and collects the
per-feature coefficient trajectories.
"""

import numpy as np
import pandas as pd
from enum import Enum
from typing import Iterator, Optional
from dataclasses import dataclass
from joblib import Parallel, delayed

from .._utils import check_X_y
from .ridge_solver import solve_ridge
from .lasso_solver import solve_lasso


class EstimatorKind(Enum):
    """Which penalized estimator a path is computed for."""
    RIDGE = "ridge"
    LASSO = "lasso"

    @classmethod
    def parse(cls, kind) -> "EstimatorKind":
        if isinstance(kind, cls):
            return kind
        try:
            return cls(str(kind).lower())
        except ValueError:
            raise ValueError(
                f"Unknown estimator kind: '{kind}'\n"
                f"Valid options: 'ridge', 'lasso'"
            ) from None


@dataclass(frozen=True)
class PathPoint:
    """Coefficients at one penalty value."""
    lam: float
    coef: np.ndarray


@dataclass
class Path:
    """Coefficient trajectories over a penalty grid, ascending in λ."""
    kind: EstimatorKind
    lambdas: np.ndarray   # (m,)
    coefs: np.ndarray     # (m, p), row k solved at lambdas[k]

    def __len__(self) -> int:
        return len(self.lambdas)

    def __getitem__(self, k):
        """PathPoint for an integer index, sub-Path for a slice."""
        if isinstance(k, slice):
            return Path(kind=self.kind, lambdas=self.lambdas[k], coefs=self.coefs[k])
        return PathPoint(lam=float(self.lambdas[k]), coef=self.coefs[k])

    def __iter__(self) -> Iterator[PathPoint]:
        for k in range(len(self)):
            yield self[k]

    @property
    def n_features(self) -> int:
        return self.coefs.shape[1]

    def to_frame(self, feature_names=None) -> pd.DataFrame:
        """
        One row per λ: a ``lambda`` column followed by one column per feature.

        Feature columns default to ``c0, c1, ...``.
        """
        if feature_names is None:
            feature_names = [f'c{j}' for j in range(self.n_features)]
        df = pd.DataFrame(self.coefs, columns=list(feature_names))
        df.insert(0, 'lambda', self.lambdas)
        return df

    def __repr__(self):
        return (f"Path(kind={self.kind.value}, n_lambdas={len(self)}, "
                f"n_features={self.n_features})")


def _check_grid(grid) -> np.ndarray:
    grid = np.asarray(grid, dtype=np.float64)
    if grid.ndim != 1 or grid.size == 0:
        raise ValueError("grid must be a non-empty 1-dimensional sequence")
    if not np.all(np.isfinite(grid)) or np.any(grid < 0):
        raise ValueError("grid values must be finite and non-negative")
    return grid


def compute_path(
    X,
    y,
    grid,
    kind,
    n_jobs: Optional[int] = None,
    backend=None,
    **solver_kwargs
) -> Path:
    """
    Solve one estimator at every penalty in ``grid``.

    Every solve starts cold (no warm start from the neighbouring λ) and the
    solves are independent, so they may run concurrently.

    Parameters
    ----------
    X : array, shape (n, p)
        Design matrix, usually ``standardize(X, y).X``
    y : array, shape (n,)
        Response vector
    grid : sequence of float
        Penalty values, e.g. ``make_lambda_grid()``
    kind : EstimatorKind or {'ridge', 'lasso'}
        Estimator to sweep
    n_jobs : int, optional
        If given, solves are dispatched to joblib worker threads.
        Output order always follows ``grid``.
    backend : str or Backend, optional
        Computational backend (default: CPU)
    **solver_kwargs
        Passed to the lasso solver (``max_iter``, ``tol``, ``method``)

    Returns
    -------
    Path
        ``len(path) == len(grid)`` and ``path.lambdas`` equals ``grid``
    """
    kind = EstimatorKind.parse(kind)
    X, y = check_X_y(X, y)
    grid = _check_grid(grid)

    if kind is EstimatorKind.RIDGE:
        if solver_kwargs:
            raise TypeError(
                f"Unexpected arguments for ridge: {', '.join(sorted(solver_kwargs))}"
            )

        def solve(lam):
            return solve_ridge(X, y, lam, backend=backend)
    else:
        def solve(lam):
            return solve_lasso(X, y, lam, backend=backend, **solver_kwargs)

    if n_jobs is None or n_jobs == 1:
        coefs = [solve(lam) for lam in grid]
    else:
        coefs = Parallel(n_jobs=n_jobs, prefer="threads")(
            delayed(solve)(lam) for lam in grid
        )

    return Path(
        kind=kind,
        lambdas=grid.copy(),
        coefs=np.vstack(coefs)
    )
