"""
Test the user-facing fit_paths / ShrinkageModel interface.
"""

import pytest
import numpy as np
import pandas as pd

from pyshrinkage import fit_paths, ShrinkageModel, make_sparse_regression


@pytest.fixture(scope="module")
def dataset():
    return make_sparse_regression(100, 10, noise=10, random_state=11)


@pytest.fixture(scope="module")
def model(dataset):
    return fit_paths(dataset.X, dataset.y)


class TestShrinkageModel:
    """Test path bundling and pandas output."""

    def test_default_grid(self, model):
        assert isinstance(model, ShrinkageModel)
        assert len(model.grid) == 31
        assert len(model.ridge_path) == 31
        assert len(model.lasso_path) == 31

    def test_standardized_once(self, model, dataset):
        assert model.n_obs == 100
        assert model.n_features == 10
        np.testing.assert_allclose(model.data.X.mean(axis=0), 0.0, atol=1e-9)

    def test_path_frame(self, model):
        df = model.path_frame('lasso')

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ['lambda'] + [f'c{j}' for j in range(10)]
        np.testing.assert_array_equal(df['lambda'].values, model.grid)

    def test_coef_at(self, model):
        """Test both estimators at one λ, indexed by feature."""
        df = model.coef_at(1000.0)

        assert list(df.columns) == ['ridge', 'lasso']
        assert list(df.index) == model.feature_names
        assert (df['lasso'] == 0).sum() > (df['ridge'] == 0).sum()

    def test_n_zero(self, model):
        """Test lasso sparsity grows to all features at the top of the grid."""
        zeros = model.n_zero('lasso')

        assert isinstance(zeros, pd.Series)
        assert len(zeros) == 31
        assert zeros.iloc[-1] == 10
        assert zeros.iloc[-1] >= zeros.iloc[0]
        assert model.n_zero('ridge').iloc[0] == 0

    def test_summary(self, model, capsys):
        model.summary()
        out = capsys.readouterr().out

        assert 'REGULARIZATION PATHS' in out
        assert 'Ridge coefficients' in out
        assert 'Lasso coefficients' in out
        assert 'cpu_fp64' in out

    def test_repr(self, model):
        assert repr(model) == "ShrinkageModel(n=100, p=10, n_lambdas=31)"


class TestShrinkageModelInputs:
    """Test pandas inputs and options."""

    def test_dataframe_names(self, dataset):
        """Test DataFrame columns become feature names."""
        names = [f'x{j}' for j in range(10)]
        X = pd.DataFrame(dataset.X, columns=names)
        y = pd.Series(dataset.y, name='target')

        model = fit_paths(X, y, grid=[0.1, 10.0, 1000.0])

        assert model.feature_names == names
        assert model.y_name == 'target'
        assert list(model.path_frame('ridge').columns) == ['lambda'] + names

    def test_feature_names_length(self, dataset):
        with pytest.raises(ValueError, match="feature names"):
            fit_paths(dataset.X, dataset.y, grid=[1.0], feature_names=['a', 'b'])

    def test_custom_grid_and_jobs(self, dataset):
        grid = [0.5, 5.0, 50.0]
        serial = fit_paths(dataset.X, dataset.y, grid=grid)
        parallel = fit_paths(dataset.X, dataset.y, grid=grid, n_jobs=2)

        np.testing.assert_array_equal(serial.lasso_path.coefs, parallel.lasso_path.coefs)
        np.testing.assert_array_equal(serial.ridge_path.lambdas, grid)

    def test_true_coef_column(self, dataset):
        """Test generating coefficients appear in standardized units."""
        model = fit_paths(dataset.X, dataset.y, grid=[1.0],
                          true_coef=dataset.true_coef)
        df = model.coef_at(1000.0)

        assert list(df.columns) == ['true', 'ridge', 'lasso']
        np.testing.assert_allclose(
            df['true'].values, dataset.true_coef * model.data.column_scales
        )
        assert np.all(df['true'].values[1::2] == 0.0)

    def test_true_coef_length(self, dataset):
        with pytest.raises(ValueError, match="true_coef"):
            fit_paths(dataset.X, dataset.y, grid=[1.0], true_coef=[1.0, 2.0])

    def test_unknown_kind(self, model):
        with pytest.raises(ValueError, match="Unknown estimator kind"):
            model.path_frame('lars')
