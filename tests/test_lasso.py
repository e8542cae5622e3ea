"""
Test the coordinate-descent lasso solver.
"""

import pytest
import numpy as np

from pyshrinkage import (
    solve_lasso,
    solve_ridge,
    lasso_coordinate_descent,
    soft_threshold,
    standardize,
    make_sparse_regression,
    InvalidShapeError,
)


LASSO_METHODS = ['naive', 'residual']


@pytest.fixture
def gaussian_data():
    """Well-conditioned standardized design, alternating true coefficients."""
    np.random.seed(42)
    n, p = 100, 10
    X = np.random.randn(n, p)
    beta_true = np.where(np.arange(p) % 2 == 0, 1.5, 0.0)
    y = X @ beta_true + np.random.randn(n)
    return standardize(X, y)


class TestSoftThreshold:
    """Test the soft-thresholding operator."""

    def test_inside_band(self):
        assert soft_threshold(0.3, 0.5) == 0.0
        assert soft_threshold(-0.5, 0.5) == 0.0
        assert soft_threshold(0.5, 0.5) == 0.0

    def test_outside_band(self):
        assert soft_threshold(2.0, 0.5) == pytest.approx(1.5)
        assert soft_threshold(-2.0, 0.5) == pytest.approx(-1.5)

    def test_zero_threshold(self):
        assert soft_threshold(-1.25, 0.0) == -1.25

    def test_elementwise_on_arrays(self):
        """Test arrays are thresholded entry by entry."""
        out = soft_threshold(np.array([2.0, -0.1, -3.0, 0.5]), 0.5)
        np.testing.assert_allclose(out, [1.5, 0.0, -2.5, 0.0])

    def test_scalar_returns_float(self):
        assert isinstance(soft_threshold(np.float64(2.0), 0.5), float)


class TestLassoSolver:
    """Test lasso coefficients."""

    @pytest.mark.parametrize("method", LASSO_METHODS)
    def test_output_length(self, gaussian_data, method):
        """Test the coefficient vector has length p."""
        coef = solve_lasso(gaussian_data.X, gaussian_data.y, 1.0, method=method)
        assert coef.shape == (10,)

    def test_single_feature_closed_form(self):
        """Test p = 1 against soft(x'y, λ/2) / x'x."""
        np.random.seed(42)
        x = np.random.randn(30)
        y = 2.0 * x + 0.1 * np.random.randn(30)
        lam = 4.0

        expected = soft_threshold(x @ y, lam / 2) / (x @ x)
        coef = solve_lasso(x[:, None], y, lam)

        assert coef[0] == pytest.approx(expected, rel=1e-12)

    def test_threshold_uses_half_lambda(self):
        """Test the coefficient is exactly 0 once λ/2 >= |x'y|."""
        x = np.array([1.0, -1.0, 2.0, 0.0])
        y = np.array([1.0, 0.0, 1.0, -1.0])
        rho = x @ y  # 3.0

        assert solve_lasso(x[:, None], y, 2 * rho)[0] == 0.0
        assert solve_lasso(x[:, None], y, 2 * rho - 0.2)[0] > 0.0

    def test_large_penalty_all_zero(self, gaussian_data):
        """Test λ = 10000 zeroes every coefficient."""
        coef = solve_lasso(gaussian_data.X, gaussian_data.y, 10000.0)
        assert np.all(coef == 0.0)

    def test_lambda_max_all_zero(self):
        """Test λ >= 2 max|X'y| gives the all-zero solution exactly."""
        data = make_sparse_regression(100, 10, noise=10, random_state=3)
        std = standardize(data.X, data.y)
        lam_max = 2 * np.max(np.abs(std.X.T @ std.y))

        coef = solve_lasso(std.X, std.y, lam_max * 1.001)
        assert np.all(coef == 0.0)

        coef = solve_lasso(std.X, std.y, lam_max * 0.9)
        assert np.any(coef != 0.0)

    def test_zero_penalty_converges_to_ols(self, gaussian_data):
        """Test λ = 0 approaches the least-squares solution."""
        X, y = gaussian_data.X, gaussian_data.y

        ols, *_ = np.linalg.lstsq(X, y, rcond=None)
        coef = solve_lasso(X, y, 0.0, max_iter=10000, tol=1e-10)

        np.testing.assert_allclose(coef, ols, atol=1e-6)

    def test_default_tolerance_near_ols(self, gaussian_data):
        """Test default settings land close to OLS at λ = 0."""
        X, y = gaussian_data.X, gaussian_data.y

        ols, *_ = np.linalg.lstsq(X, y, rcond=None)
        coef = solve_lasso(X, y, 0.0)

        np.testing.assert_allclose(coef, ols, atol=1e-2)

    def test_methods_agree(self, gaussian_data):
        """Test naive and residual updates reach the same fixed point."""
        X, y = gaussian_data.X, gaussian_data.y

        for lam in [0.0, 1.0, 30.0, 200.0]:
            naive = solve_lasso(X, y, lam, tol=1e-10, method='naive')
            residual = solve_lasso(X, y, lam, tol=1e-10, method='residual')
            np.testing.assert_allclose(naive, residual, atol=1e-8)

    @pytest.mark.parametrize("method", LASSO_METHODS)
    def test_zero_variance_column(self, method):
        """Test a constant feature neither divides by zero nor gets weight."""
        np.random.seed(42)
        X = np.random.randn(50, 4)
        X[:, 1] = 3.0
        y = X[:, 0] - X[:, 2] + 0.1 * np.random.randn(50)
        data = standardize(X, y)

        with np.errstate(divide='raise', invalid='raise'):
            coef = solve_lasso(data.X, data.y, 0.5, method=method)

        assert coef[1] == 0.0
        assert np.all(np.isfinite(coef))

    def test_sparser_than_ridge(self):
        """Test lasso zeroes more coefficients than ridge at λ = 1000."""
        data = make_sparse_regression(100, 10, noise=10, random_state=0)
        std = standardize(data.X, data.y)

        lasso = solve_lasso(std.X, std.y, 1000.0)
        ridge = solve_ridge(std.X, std.y, 1000.0)

        assert np.sum(lasso == 0.0) > np.sum(ridge == 0.0)

    def test_inputs_not_mutated(self, gaussian_data):
        """Test the solver does not write to its inputs."""
        X = np.array(gaussian_data.X)
        y = np.array(gaussian_data.y)
        X_copy, y_copy = X.copy(), y.copy()

        solve_lasso(X, y, 5.0, method='residual')

        np.testing.assert_array_equal(X, X_copy)
        np.testing.assert_array_equal(y, y_copy)


class TestLassoDiagnostics:
    """Test the converged / iteration diagnostics."""

    def test_converged(self, gaussian_data):
        """Test a normal solve reports convergence."""
        result = lasso_coordinate_descent(gaussian_data.X, gaussian_data.y, 10.0)

        assert result.converged
        assert 1 <= result.n_iter <= 1000
        assert result.max_change < 1e-4

    def test_exhausted_iterations(self, gaussian_data):
        """Test a one-pass budget is reported as not converged."""
        result = lasso_coordinate_descent(
            gaussian_data.X, gaussian_data.y, 0.1, max_iter=1
        )

        assert not result.converged
        assert result.n_iter == 1
        assert result.coef.shape == (10,)

    def test_solve_lasso_matches_diagnostic(self, gaussian_data):
        """Test solve_lasso returns the same coefficients."""
        X, y = gaussian_data.X, gaussian_data.y

        np.testing.assert_array_equal(
            solve_lasso(X, y, 7.0),
            lasso_coordinate_descent(X, y, 7.0).coef
        )


class TestLassoErrors:
    """Test input validation."""

    def test_negative_penalty(self):
        with pytest.raises(ValueError, match="non-negative"):
            solve_lasso(np.random.randn(5, 2), np.random.randn(5), -0.1)

    def test_bad_max_iter(self):
        with pytest.raises(ValueError, match="max_iter"):
            solve_lasso(np.random.randn(5, 2), np.random.randn(5), 1.0, max_iter=0)

    def test_infinite_max_iter(self):
        with pytest.raises(ValueError, match="max_iter"):
            solve_lasso(np.random.randn(5, 2), np.random.randn(5), 1.0,
                        max_iter=float('inf'))

    def test_bad_tol(self):
        with pytest.raises(ValueError, match="tol"):
            solve_lasso(np.random.randn(5, 2), np.random.randn(5), 1.0, tol=0.0)

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown lasso method"):
            solve_lasso(np.random.randn(5, 2), np.random.randn(5), 1.0,
                        method='lars')

    def test_shape_mismatch(self):
        with pytest.raises(InvalidShapeError):
            solve_lasso(np.random.randn(5, 2), np.random.randn(4), 1.0)
