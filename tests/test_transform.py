"""
tests/test_transform
~~~~~~~~~~~~~~~~~~~~
"""

import numpy as np
import pandas as pd
import pytest

from clusterstrips import minmax_standardize


@pytest.mark.api
def test_rows_scaled_to_unit_range():
    """
    Ensures each row spans [0, 1] by default.
    """
    data = np.array([[1.0, 2.0, 3.0], [10.0, 0.0, 5.0]])
    out = minmax_standardize(data)
    np.testing.assert_allclose(out, [[0.0, 0.5, 1.0], [1.0, 0.0, 0.5]])


@pytest.mark.api
def test_columns_scaled_to_unit_range():
    """
    Ensures column-wise scaling uses each column's range.
    """
    data = np.array([[1.0, 2.0], [3.0, 6.0]])
    out = minmax_standardize(data, by="column")
    np.testing.assert_allclose(out, [[0.0, 0.0], [1.0, 1.0]])


@pytest.mark.api
def test_vector_scaled_as_whole():
    """
    Ensures 1-D input is scaled as a whole regardless of `by`.
    """
    out = minmax_standardize(np.array([2.0, 4.0, 6.0]), by="column")
    np.testing.assert_allclose(out, [0.0, 0.5, 1.0])


@pytest.mark.api
def test_nan_ignored_and_preserved():
    """
    Ensures NaN values are skipped for the range and kept in the output.
    """
    out = minmax_standardize(np.array([[0.0, np.nan, 4.0]]))
    assert np.isnan(out[0, 1])
    np.testing.assert_allclose(out[0, [0, 2]], [0.0, 1.0])


@pytest.mark.api
def test_constant_row_maps_to_zero():
    """
    Ensures constant rows become zeros rather than NaN.
    """
    out = minmax_standardize(np.array([[5.0, 5.0], [0.0, 2.0]]))
    np.testing.assert_allclose(out, [[0.0, 0.0], [0.0, 1.0]])


@pytest.mark.api
def test_dataframe_keeps_labels():
    """
    Ensures DataFrames come back as DataFrames with the same labels.
    """
    df = pd.DataFrame([[1.0, 3.0], [2.0, 4.0]], index=["g1", "g2"], columns=["s1", "s2"])
    out = minmax_standardize(df)
    assert isinstance(out, pd.DataFrame)
    assert out.index.tolist() == ["g1", "g2"]
    assert out.loc["g1", "s2"] == 1.0


@pytest.mark.api
def test_invalid_axis_raises():
    """
    Ensures an unknown `by` raises ValueError.
    """
    with pytest.raises(ValueError):
        minmax_standardize(np.ones((2, 2)), by="diagonal")
