"""
clusterstrips/core/clustering
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from scipy.cluster.hierarchy import leaves_list, linkage

from .matrix import Matrix


@dataclass(frozen=True)
class ClusterOrder:
    """
    Data class for storing row and column linkages and their dendrogram leaf orders.

    A linkage is None when that axis is left unclustered (a single row or column);
    its leaf order is then the identity.
    """

    row_linkage: Optional[np.ndarray]
    col_linkage: Optional[np.ndarray]
    row_order: np.ndarray
    col_order: np.ndarray


def compute_linkage(
    values: np.ndarray,
    *,
    linkage_method: str = "average",
    linkage_metric: str = "euclidean",
    optimal_ordering: bool = True,
) -> Optional[np.ndarray]:
    """
    Computes a SciPy linkage matrix over the rows of `values`.

    Args:
        values (np.ndarray): 2-D observations-by-features array.

    Kwargs:
        linkage_method (str): Linkage method for hierarchical clustering. Defaults to "average".
        linkage_metric (str): Distance metric for hierarchical clustering. Defaults to "euclidean".
        optimal_ordering (bool): Whether to optimize leaf ordering. Defaults to True.

    Returns:
        Optional[np.ndarray]: Linkage matrix, or None when fewer than two observations exist.
    """
    values = np.asarray(values, dtype=float)
    if values.shape[0] < 2:
        return None
    return linkage(
        values,
        method=linkage_method,
        metric=linkage_metric,
        optimal_ordering=optimal_ordering,
    )


def _leaf_order(Z: Optional[np.ndarray], n: int) -> np.ndarray:
    """Leaf order for a linkage, or the identity when unclustered."""
    if Z is None:
        return np.arange(n, dtype=int)
    return leaves_list(Z).astype(int)


def cluster_matrix(
    matrix: Matrix,
    *,
    linkage_method: str = "average",
    linkage_metric: str = "euclidean",
    optimal_ordering: bool = True,
) -> ClusterOrder:
    """
    Clusters matrix rows (features) and columns (samples) independently.

    Args:
        matrix (Matrix): Matrix to cluster.

    Kwargs:
        linkage_method (str): Linkage method. Defaults to "average".
        linkage_metric (str): Distance metric. Defaults to "euclidean".
        optimal_ordering (bool): Whether to optimize leaf ordering. Defaults to True.

    Returns:
        ClusterOrder: Linkages and leaf orders for both axes.
    """
    n_rows, n_cols = matrix.shape
    opts = {
        "linkage_method": linkage_method,
        "linkage_metric": linkage_metric,
        "optimal_ordering": optimal_ordering,
    }
    row_Z = compute_linkage(matrix.values, **opts)
    col_Z = compute_linkage(matrix.values.T, **opts)
    return ClusterOrder(
        row_linkage=row_Z,
        col_linkage=col_Z,
        row_order=_leaf_order(row_Z, n_rows),
        col_order=_leaf_order(col_Z, n_cols),
    )
