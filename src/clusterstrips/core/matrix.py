"""
clusterstrips/core/matrix
~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import numpy as np
import pandas as pd


class Matrix:
    """
    Immutable container for a feature-by-sample data matrix.

    Rows are features (e.g. genes) and columns are samples. Clustering and the
    clustergram assume matrix contents are frozen.
    """

    def __init__(self, df: pd.DataFrame) -> None:
        """
        Initializes Matrix.

        Args:
            df (pd.DataFrame): DataFrame holding matrix contents with feature labels as
                index and sample labels as columns.
        """
        self.df = df.copy()
        self._validate()
        self.values = self.df.to_numpy(dtype=float)
        self.row_labels = self.df.index.astype(str).to_numpy(dtype=object)
        self.column_labels = self.df.columns.astype(str).to_numpy(dtype=object)

    @property
    def shape(self) -> tuple[int, int]:
        """(n_features, n_samples)."""
        return self.df.shape

    def _validate(self) -> None:
        """
        Validates matrix contents.

        Raises:
            ValueError: If matrix is empty, has duplicate row labels, or holds
                non-numeric or non-finite values.
        """
        if self.df.shape[0] == 0 or self.df.shape[1] == 0:
            raise ValueError("Matrix must have at least one row and one column")
        if self.df.index.has_duplicates:
            raise ValueError("Matrix row labels must be unique")
        try:
            values = self.df.to_numpy(dtype=float)
        except (TypeError, ValueError) as exc:
            raise ValueError("Matrix values must be numeric") from exc
        if not np.all(np.isfinite(values)):
            raise ValueError("Matrix values must be finite (no NaN or inf)")
