"""
Ridge and Lasso regularization paths with a pandas interface.

This is the user-facing API for exploring how the two penalties shrink
coefficients.
"""

import numpy as np
import pandas as pd
from typing import Optional, Union, List

from ._backends import get_backend
from ._core.standardize import standardize
from ._core.ridge_solver import solve_ridge
from ._core.lasso_solver import solve_lasso, DEFAULT_MAX_ITER, DEFAULT_TOL
from ._core.grid import make_lambda_grid
from ._core.path import compute_path, EstimatorKind, Path


class ShrinkageModel:
    """
    Ridge and Lasso paths over a common penalty grid.

    Data are standardized once (population std, centered target) and both
    estimators are solved on the standardized data at every grid value.

    Penalty scale: Lasso minimizes ||y - Xβ||² + λ||β||₁ and Ridge
    minimizes ||y - Xβ||² + λ||β||², both without 1/(2n) averaging.
    Compare with mean-squared-error conventions by rescaling λ.

    Examples
    --------
    >>> from pyshrinkage import fit_paths, make_sparse_regression
    >>>
    >>> data = make_sparse_regression(100, 10, noise=10, random_state=0)
    >>> model = fit_paths(data.X, data.y)
    >>> model.summary()
    >>>
    >>> model.path_frame('lasso')   # lambda, c0, ..., c9
    >>> model.coef_at(100.0)        # both estimators at one λ
    >>> model.n_zero('lasso')       # sparsity along the path
    """

    def __init__(
        self,
        X: Union[np.ndarray, pd.DataFrame],
        y: Union[np.ndarray, pd.Series],
        grid=None,
        max_iter: int = DEFAULT_MAX_ITER,
        tol: float = DEFAULT_TOL,
        n_jobs: Optional[int] = None,
        backend: str = 'auto',
        feature_names: Optional[List[str]] = None,
        true_coef=None
    ):
        """
        Standardize the data and compute both paths.

        Parameters
        ----------
        X : array or DataFrame, shape (n, p)
            Features. DataFrame column names become feature names.
        y : array or Series, shape (n,)
            Response
        grid : sequence of float, optional
            Penalty values (default: ``make_lambda_grid()``, 0.01 to 10000)
        max_iter, tol : Lasso stopping rule
        n_jobs : int, optional
            Solve the grid values concurrently
        backend : str
            Computational backend: 'auto', 'cpu'
        feature_names : list of str, optional
            Overrides the names taken from a DataFrame
        true_coef : array, shape (p,), optional
            Generating coefficients in raw feature units (e.g.
            ``make_sparse_regression(...).true_coef``). Shown next to the
            estimates by ``coef_at``, converted to standardized units.
        """
        if isinstance(X, pd.DataFrame):
            names = [str(c) for c in X.columns]
            X = X.values
        else:
            X = np.asarray(X)
            names = None

        if isinstance(y, pd.Series):
            self.y_name = str(y.name) if y.name is not None else 'y'
            y = y.values
        else:
            self.y_name = 'y'

        self.data = standardize(X, y)
        self.n_obs = self.data.n_samples
        self.n_features = self.data.n_features

        if feature_names is not None:
            names = list(feature_names)
            if len(names) != self.n_features:
                raise ValueError(
                    f"Got {len(names)} feature names for {self.n_features} features"
                )
        self.feature_names = names or [f'c{j}' for j in range(self.n_features)]

        if true_coef is not None:
            true_coef = np.asarray(true_coef, dtype=np.float64)
            if true_coef.shape != (self.n_features,):
                raise ValueError(
                    f"true_coef must have shape ({self.n_features},), got {true_coef.shape}"
                )
            # β_std = β_raw * s_j, the coefficient on the standardized column
            self.true_coef = true_coef * self.data.column_scales
        else:
            self.true_coef = None

        self.grid = make_lambda_grid() if grid is None else np.asarray(grid, dtype=np.float64)
        self.max_iter = max_iter
        self.tol = tol
        self.backend = get_backend(backend)

        self.ridge_path = compute_path(
            self.data.X, self.data.y, self.grid, EstimatorKind.RIDGE,
            n_jobs=n_jobs, backend=self.backend
        )
        self.lasso_path = compute_path(
            self.data.X, self.data.y, self.grid, EstimatorKind.LASSO,
            n_jobs=n_jobs, backend=self.backend,
            max_iter=max_iter, tol=tol
        )

    def path(self, kind) -> Path:
        """The Path for 'ridge' or 'lasso'."""
        kind = EstimatorKind.parse(kind)
        return self.ridge_path if kind is EstimatorKind.RIDGE else self.lasso_path

    def path_frame(self, kind) -> pd.DataFrame:
        """Path as a DataFrame: ``lambda`` plus one column per feature."""
        return self.path(kind).to_frame(self.feature_names)

    def n_zero(self, kind, atol: float = 0.0) -> pd.Series:
        """Number of coefficients with |β| <= atol at each λ."""
        path = self.path(kind)
        counts = np.sum(np.abs(path.coefs) <= atol, axis=1)
        return pd.Series(counts, index=pd.Index(path.lambdas, name='lambda'),
                         name=f'{path.kind.value}_zeros')

    def coef_at(self, lam: float) -> pd.DataFrame:
        """
        Fresh Ridge and Lasso solves at a single penalty.

        Returns
        -------
        DataFrame
            Columns 'ridge' and 'lasso', indexed by feature name, preceded
            by 'true' (standardized units) when ``true_coef`` was given
        """
        ridge = solve_ridge(self.data.X, self.data.y, lam, backend=self.backend)
        lasso = solve_lasso(self.data.X, self.data.y, lam,
                            max_iter=self.max_iter, tol=self.tol,
                            backend=self.backend)
        columns = {'ridge': ridge, 'lasso': lasso}
        if self.true_coef is not None:
            columns = {'true': self.true_coef, **columns}
        return pd.DataFrame(columns, index=self.feature_names)

    def summary(self):
        """Print the coefficients at the ends and middle of the grid."""
        print()
        print("=" * 80)
        print("RIDGE / LASSO REGULARIZATION PATHS")
        print("=" * 80)
        print()

        print(f"Dependent variable: {self.y_name}")
        print(f"Number of observations: {self.n_obs}")
        print(f"Number of features: {self.n_features}")
        print(f"Penalty grid: {len(self.grid)} values from "
              f"{self.grid.min():.4g} to {self.grid.max():.4g}")
        print()

        picks = sorted({0, len(self.grid) // 2, len(self.grid) - 1})

        for path in (self.ridge_path, self.lasso_path):
            print(f"{path.kind.value.capitalize()} coefficients:")
            print("-" * 80)
            header = f"{'Variable':<20}" + "".join(
                f"{'λ=' + format(path.lambdas[k], '.3g'):>14}" for k in picks
            )
            print(header)
            print("-" * 80)
            for j, name in enumerate(self.feature_names):
                row = f"{name:<20}" + "".join(
                    f"{path.coefs[k, j]:>14.4f}" for k in picks
                )
                print(row)
            zeros = self.n_zero(path.kind).values
            print(f"{'(zeros)':<20}" + "".join(f"{zeros[k]:>14d}" for k in picks))
            print()

        print(f"Backend: {self.backend.name}")
        print("=" * 80)
        print()

    def __repr__(self):
        return (f"ShrinkageModel(n={self.n_obs}, p={self.n_features}, "
                f"n_lambdas={len(self.grid)})")


def fit_paths(X, y, grid=None, **kwargs):
    """
    Compute Ridge and Lasso paths (convenience function).

    Parameters
    ----------
    X : array or DataFrame
        Features
    y : array or Series
        Response
    grid : sequence of float, optional
        Penalty values (default: 31 log-spaced values, 0.01 to 10000)
    **kwargs
        Additional arguments passed to ShrinkageModel

    Returns
    -------
    ShrinkageModel
    """
    return ShrinkageModel(X=X, y=y, grid=grid, **kwargs)
