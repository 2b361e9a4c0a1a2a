"""
clusterstrips/plot/renderers/dendrogram
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection
from scipy.cluster.hierarchy import dendrogram

if TYPE_CHECKING:
    from ..style import StyleConfig

# SciPy places leaf i at coordinate 10 * i + 5
_LEAF_SPACING = 10.0
_LEAF_OFFSET = 5.0


def _resolve_dendrogram_config(
    renderer: "DendrogramRenderer",
    style: StyleConfig,
) -> Dict[str, Any]:
    """
    Resolves dendrogram rendering configuration.

    Args:
        renderer (DendrogramRenderer): Renderer instance holding optional overrides.
        style (StyleConfig): Style configuration.

    Returns:
        Dict[str, Any]: Normalized configuration values.
    """
    return {
        "color": renderer.color if renderer.color is not None else style["dendro_color"],
        "linewidth": renderer.linewidth if renderer.linewidth is not None else style["dendro_lw"],
        "data_pad": renderer.data_pad if renderer.data_pad is not None else style["dendro_data_pad"],
    }


def _leaf_segments(
    dendro: Dict[str, Any],
    orientation: str,
) -> List[Tuple[Tuple[float, float], ...]]:
    """
    Converts SciPy dendrogram coordinates into line segments in leaf space.

    Leaf k (in dendrogram order) is placed at coordinate k, matching the cell
    centres of the heatmap drawn with extent (-0.5, n - 0.5).

    Args:
        dendro (Dict[str, Any]): SciPy dendrogram output with "icoord" and "dcoord".
        orientation (str): "left" (leaves along y) or "top" (leaves along x).

    Returns:
        List[Tuple[Tuple[float, float], ...]]: Polyline vertices per merge.
    """
    segments = []
    for icoord, dcoord in zip(dendro["icoord"], dendro["dcoord"]):
        leaf = [(i - _LEAF_OFFSET) / _LEAF_SPACING for i in icoord]
        if orientation == "left":
            segments.append(tuple(zip(dcoord, leaf)))
        else:
            segments.append(tuple(zip(leaf, dcoord)))
    return segments


def _finalize_dendrogram_axis(
    ax: plt.Axes,
    *,
    orientation: str,
    n_leaves: int,
    max_height: float,
    data_pad: float,
) -> None:
    """
    Finalizes dendrogram axis limits and visibility.

    Args:
        ax (plt.Axes): Dendrogram axis.

    Kwargs:
        orientation (str): "left" or "top".
        n_leaves (int): Number of leaves.
        max_height (float): Height of the root merge.
        data_pad (float): Fractional padding beyond the root merge.
    """
    top = max_height * (1.0 + data_pad) if max_height > 0 else 1.0
    if orientation == "left":
        # Root on the left, first leaf at the top (matches the heatmap row order)
        ax.set_xlim(top, 0.0)
        ax.set_ylim(n_leaves - 0.5, -0.5)
    else:
        ax.set_xlim(-0.5, n_leaves - 0.5)
        ax.set_ylim(0.0, top)
    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)


class DendrogramRenderer:
    """
    Class for rendering a dendrogram aligned to heatmap rows ("left") or columns ("top").
    """

    def __init__(
        self,
        orientation: str = "left",
        *,
        color: Optional[str] = None,
        linewidth: Optional[float] = None,
        data_pad: Optional[float] = None,
    ) -> None:
        """
        Initializes the DendrogramRenderer instance.

        Args:
            orientation (str): "left" for a row dendrogram, "top" for a column dendrogram.
                Defaults to "left".

        Kwargs:
            color (Optional[str]): Dendrogram line color. Defaults to None.
            linewidth (Optional[float]): Dendrogram line width. Defaults to None.
            data_pad (Optional[float]): Fractional padding beyond the root merge. Defaults to None.
        """
        if orientation not in {"left", "top"}:
            raise ValueError("orientation must be 'left' or 'top'")
        self.orientation = orientation
        self.color = color
        self.linewidth = linewidth
        self.data_pad = data_pad

    def render(
        self,
        ax: plt.Axes,
        linkage_matrix: np.ndarray,
        style: StyleConfig,
    ) -> LineCollection:
        """
        Renders the dendrogram of `linkage_matrix` into `ax`.

        Args:
            ax (plt.Axes): Target axis.
            linkage_matrix (np.ndarray): SciPy linkage matrix.
            style (StyleConfig): Style configuration.

        Returns:
            LineCollection: The dendrogram line artist.
        """
        cfg = _resolve_dendrogram_config(self, style)
        dendro = dendrogram(
            linkage_matrix,
            no_labels=True,
            color_threshold=-1,
            distance_sort=False,
            count_sort=False,
            no_plot=True,
        )
        lines = LineCollection(
            _leaf_segments(dendro, self.orientation),
            colors=cfg["color"],
            linewidths=cfg["linewidth"],
        )
        ax.add_collection(lines)
        _finalize_dendrogram_axis(
            ax,
            orientation=self.orientation,
            n_leaves=len(dendro["leaves"]),
            max_height=float(np.max(linkage_matrix[:, 2])),
            data_pad=cfg["data_pad"],
        )
        return lines
