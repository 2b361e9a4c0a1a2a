"""
clusterstrips/core/transform
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Union

import numpy as np
import pandas as pd

ArrayLike = Union[np.ndarray, pd.DataFrame, pd.Series]


def _scale(values: np.ndarray, axis: int) -> np.ndarray:
    """
    Min-max scales `values` along `axis`, ignoring NaN. Constant slices map to 0.

    Args:
        values (np.ndarray): 2-D float array.
        axis (int): Axis along which min and max are taken.

    Returns:
        np.ndarray: Scaled array of the same shape.
    """
    lo = np.nanmin(values, axis=axis, keepdims=True)
    span = np.nanmax(values, axis=axis, keepdims=True) - lo
    with np.errstate(divide="ignore", invalid="ignore"):
        out = (values - lo) / span
    # Constant slices have zero span; keep NaN cells as NaN
    flat = np.broadcast_to(span == 0, values.shape)
    out[flat & ~np.isnan(values)] = 0.0
    return out


def minmax_standardize(data: ArrayLike, by: str = "row") -> ArrayLike:
    """
    Applies min-max standardization so every row (or column) spans [0, 1].

    A 1-D input is scaled as a whole regardless of `by`. NaN values are ignored
    when computing the range and are preserved in the output.

    Args:
        data (ArrayLike): Numeric matrix or vector (numpy array, DataFrame or Series).
        by (str): "row" to scale each row across columns, "column" to scale each column
            across rows. Defaults to "row".

    Returns:
        ArrayLike: Standardized data of the same type, shape, and labels as `data`.

    Raises:
        ValueError: If `by` is not "row" or "column", or data is not 1-D or 2-D.
    """
    if by not in {"row", "column"}:
        raise ValueError("by must be 'row' or 'column'")
    values = np.asarray(data, dtype=float)
    if values.ndim not in {1, 2}:
        raise ValueError("minmax_standardize expects 1-D or 2-D data")
    if values.ndim == 1 or min(values.shape) == 1:
        scaled = _scale(values.reshape(1, -1), axis=1).reshape(values.shape)
    else:
        scaled = _scale(values, axis=1 if by == "row" else 0)

    if isinstance(data, pd.DataFrame):
        return pd.DataFrame(scaled, index=data.index, columns=data.columns)
    if isinstance(data, pd.Series):
        return pd.Series(scaled, index=data.index, name=data.name)
    return scaled
