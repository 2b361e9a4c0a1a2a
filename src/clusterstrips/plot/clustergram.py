"""
clusterstrips/plot/clustergram
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.colors import Colormap

from ..core.clustering import cluster_matrix
from ..core.matrix import Matrix
from ..core.transform import minmax_standardize
from .renderers import AxesRenderer, ColorbarRenderer, DendrogramRenderer, MatrixRenderer
from .style import StyleConfig, StyleValue, resolve_style

DENDROGRAM_MODES = ("both", "row", "column", "off")


def _default_labels(n: int) -> List[str]:
    """Consecutive integer labels "1".."n"."""
    return [str(i) for i in range(1, n + 1)]


def _as_frame(
    data: Union[Matrix, pd.DataFrame, np.ndarray],
    row_labels: Optional[Sequence[Any]],
    column_labels: Optional[Sequence[Any]],
) -> pd.DataFrame:
    """
    Converts clustergram input to a DataFrame with string labels.

    Arrays get integer labels "1".."n" on both axes unless labels are supplied.

    Raises:
        ValueError: If supplied labels do not match the data shape.
    """
    if isinstance(data, Matrix):
        df = data.df.copy()
    elif isinstance(data, pd.DataFrame):
        df = data.copy()
    else:
        values = np.asarray(data, dtype=float)
        if values.ndim != 2:
            raise ValueError("Clustergram data must be 2-D")
        df = pd.DataFrame(
            values,
            index=_default_labels(values.shape[0]),
            columns=_default_labels(values.shape[1]),
        )
    if row_labels is not None:
        if len(row_labels) != df.shape[0]:
            raise ValueError(f"Expected {df.shape[0]} row labels, got {len(row_labels)}")
        df.index = [str(v) for v in row_labels]
    if column_labels is not None:
        if len(column_labels) != df.shape[1]:
            raise ValueError(f"Expected {df.shape[1]} column labels, got {len(column_labels)}")
        df.columns = [str(v) for v in column_labels]
    return df


class Clustergram:
    """
    Matplotlib clustergram: a hierarchically clustered heatmap with optional row and
    column dendrograms, a title and a toggleable colour bar.

    Rows and columns are clustered once at construction; `row_labels` and
    `column_labels` expose the labels in clustering (display) order.
    """

    def __init__(
        self,
        data: Union[Matrix, pd.DataFrame, np.ndarray],
        *,
        row_labels: Optional[Sequence[Any]] = None,
        column_labels: Optional[Sequence[Any]] = None,
        title: Optional[str] = None,
        show_dendrogram: str = "both",
        standardize: Optional[str] = None,
        cmap: Optional[Union[str, Colormap]] = None,
        center: Optional[float] = None,
        linkage_method: str = "average",
        linkage_metric: str = "euclidean",
        optimal_ordering: bool = True,
        style: Union[StyleConfig, Mapping[str, StyleValue], None] = None,
    ) -> None:
        """
        Initializes the Clustergram instance and draws it.

        Args:
            data (Union[Matrix, pd.DataFrame, np.ndarray]): Feature-by-sample matrix.

        Kwargs:
            row_labels (Optional[Sequence[Any]]): Row labels overriding the data's. Defaults to None.
            column_labels (Optional[Sequence[Any]]): Column labels overriding the data's.
                Defaults to None.
            title (Optional[str]): Figure title. Defaults to None.
            show_dendrogram (str): "both", "row", "column" or "off". Defaults to "both".
            standardize (Optional[str]): Min-max standardize by "row" or "column" before
                clustering. Defaults to None.
            cmap (Optional[Union[str, Colormap]]): Heatmap colormap. Defaults to None.
            center (Optional[float]): Centre of a diverging colour scale. Defaults to None.
            linkage_method (str): Linkage method. Defaults to "average".
            linkage_metric (str): Distance metric. Defaults to "euclidean".
            optimal_ordering (bool): Whether to optimize leaf ordering. Defaults to True.
            style (Union[StyleConfig, Mapping[str, StyleValue], None]): Style or overrides.
                Defaults to None.

        Raises:
            ValueError: If `show_dendrogram` or `standardize` is not recognized, or labels do
                not match the data shape.
        """
        if show_dendrogram not in DENDROGRAM_MODES:
            raise ValueError(f"show_dendrogram must be one of {DENDROGRAM_MODES}")
        if standardize not in {None, "row", "column"}:
            raise ValueError("standardize must be None, 'row' or 'column'")

        df = _as_frame(data, row_labels, column_labels)
        if standardize is not None:
            df = minmax_standardize(df, by=standardize)
        self.matrix = Matrix(df)
        self.style = resolve_style(style)
        self.title = title
        self.title_fontsize = self.style["title_fontsize"]
        self.show_dendrogram = show_dendrogram

        self.cluster_order = cluster_matrix(
            self.matrix,
            linkage_method=linkage_method,
            linkage_metric=linkage_metric,
            optimal_ordering=optimal_ordering,
        )
        self.row_labels: List[str] = list(self.matrix.row_labels[self.cluster_order.row_order])
        self.column_labels: List[str] = list(
            self.matrix.column_labels[self.cluster_order.col_order]
        )

        self.figure = plt.figure(figsize=self.style["figsize"])
        self.title_ax = self.figure.add_axes(self.style["title_axes"], frameon=False)
        AxesRenderer("title", title=title, fontsize=self.title_fontsize).render(
            self.title_ax, self.style
        )
        self.col_dendrogram_ax = self._draw_dendrogram("top")
        self.row_dendrogram_ax = self._draw_dendrogram("left")

        self.heatmap_ax = self.figure.add_axes(self.style["heatmap_axes"])
        ordered = self.matrix.values[np.ix_(self.cluster_order.row_order, self.cluster_order.col_order)]
        self.image = MatrixRenderer(cmap=cmap, center=center).render(
            self.heatmap_ax, ordered, self.style
        )
        AxesRenderer("row_ticks", labels=self.row_labels).render(self.heatmap_ax, self.style)
        AxesRenderer("col_ticks", labels=self.column_labels).render(self.heatmap_ax, self.style)
        self.colorbar_ax: Optional[plt.Axes] = None

    def _draw_dendrogram(self, orientation: str) -> Optional[plt.Axes]:
        """
        Draws the row ("left") or column ("top") dendrogram if it is shown and the axis
        was clustered.

        Returns:
            Optional[plt.Axes]: Dendrogram axis, or None if hidden.
        """
        if orientation == "top":
            shown = self.show_dendrogram in {"both", "column"}
            linkage_matrix = self.cluster_order.col_linkage
            box = self.style["col_dendro_axes"]
        else:
            shown = self.show_dendrogram in {"both", "row"}
            linkage_matrix = self.cluster_order.row_linkage
            box = self.style["row_dendro_axes"]
        if not shown or linkage_matrix is None:
            return None
        ax = self.figure.add_axes(box, frameon=False)
        DendrogramRenderer(orientation).render(ax, linkage_matrix, self.style)
        return ax

    def set_dendrogram_linewidth(self, linewidth: float) -> None:
        """Sets the stroke width of every visible dendrogram."""
        for ax in (self.row_dendrogram_ax, self.col_dendrogram_ax):
            if ax is None:
                continue
            for collection in ax.collections:
                collection.set_linewidth(linewidth)

    def set_row_labels(
        self,
        labels: Sequence[str],
        *,
        fontsize: Optional[float] = None,
        italic: bool = False,
    ) -> None:
        """
        Replaces the heatmap row labels (given in clustering order).

        Args:
            labels (Sequence[str]): One label per heatmap row, top to bottom.

        Kwargs:
            fontsize (Optional[float]): Label font size. Defaults to the style tick_fontsize.
            italic (bool): Whether to italicize labels. Defaults to False.

        Raises:
            ValueError: If the label count does not match the row count.
        """
        if len(labels) != len(self.row_labels):
            raise ValueError(f"Expected {len(self.row_labels)} row labels, got {len(labels)}")
        self.row_labels = [str(label) for label in labels]
        kwargs = {"labels": self.row_labels, "italic": italic}
        if fontsize is not None:
            kwargs["fontsize"] = fontsize
        AxesRenderer("row_ticks", **kwargs).render(self.heatmap_ax, self.style)

    def insert_colorbar(self, *, fontsize: Optional[float] = None) -> plt.Axes:
        """
        Adds the heatmap colour bar, replacing any existing one. The bar is sized from the
        heatmap's current position, so call this after moving the heatmap.

        Kwargs:
            fontsize (Optional[float]): Tick label font size. Defaults to None.

        Returns:
            plt.Axes: The colour bar axis.
        """
        self.remove_colorbar()
        self.colorbar_ax = ColorbarRenderer(fontsize=fontsize).render(
            self.figure, self.heatmap_ax, self.image, self.style
        )
        return self.colorbar_ax

    def remove_colorbar(self) -> None:
        """Removes the colour bar if present."""
        if self.colorbar_ax is not None:
            self.colorbar_ax.remove()
            self.colorbar_ax = None

    def save(self, path: str, **kwargs: Any) -> None:
        """
        Saves the figure to a file.

        Args:
            path (str): Output file path.

        Kwargs:
            **kwargs: Passed to `Figure.savefig`.
        """
        kwargs.setdefault("facecolor", self.figure.get_facecolor())
        self.figure.savefig(path, **kwargs)

    def close(self) -> None:
        """Closes the figure."""
        plt.close(self.figure)
