"""
clusterstrips/core/geometry
~~~~~~~~~~~~~~~~~~~~~~~~~~~

Panel planning for a clustergram with annotation strips. All values are fractions of
the figure (canvas) size. The figure is partitioned as::

    +-----------------------------------------------+
    |                     title                     |
    |        |     column dendrogram    |           |
    |  left  |          heatmap         |   right   |  mid row
    |  descr |     annotation strips    |  legend   |  low row
    +-----------------------------------------------+

with `outer_pad` at the figure edges and `inner_pad` between panels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .layers import AnnotationLayer

# Rows of legend text overlap slightly; reserve 90% of a text line per entry
LEGEND_ROW_FACTOR = 0.9
# The colour bar is drawn next to the row dendrogram after layout; reserve its width
COLORBAR_RESERVE_FACTOR = 2.0


@dataclass(frozen=True)
class PanelGeometry:
    """
    Normalized panel sizes for one clustergram modification. Recomputed on every call.
    """

    title_height: float
    top_height: float
    mid_height: float
    low_height: float
    left_width: float
    mid_width: float
    right_width: float
    outer_pad: float
    inner_pad: float
    line_height: float = 0.0
    left_dendrogram_width: float = 0.0

    @property
    def total_height(self) -> float:
        """Sum of heights and paddings; at most 1 unless the legend alone overflows."""
        return (
            self.title_height
            + self.top_height
            + self.mid_height
            + self.low_height
            + 2 * self.outer_pad
            + self.inner_pad
        )

    @property
    def total_width(self) -> float:
        """Sum of widths and paddings; at most 1 unless side panels alone overflow."""
        return self.left_width + self.mid_width + self.right_width + 2 * self.outer_pad

    @property
    def body_x(self) -> float:
        """Left edge of the heatmap column (heatmap, column dendrogram, strips)."""
        return self.left_width + self.outer_pad + self.inner_pad

    @property
    def body_y(self) -> float:
        """Bottom edge of the heatmap row (heatmap, row dendrogram)."""
        return self.low_height + self.outer_pad + self.inner_pad


def legend_entry_count(layers: Sequence[AnnotationLayer]) -> int:
    """
    Counts legend rows over all layers, skipping categories excluded from the legend.

    Args:
        layers (Sequence[AnnotationLayer]): Annotation layers.

    Returns:
        int: Number of legend entries.
    """
    return sum(len(layer.legend_categories()) for layer in layers)


def plan_heights(
    legend_entries: int,
    line_height: float,
    title_height: float,
    top_dendrogram_height: float,
    outer_pad: float,
    inner_pad: float,
) -> Tuple[float, float]:
    """
    Computes the annotation (low) and heatmap (mid) panel heights.

    The legend rows get exactly the space they need; the heatmap takes whatever
    remains after the title, column dendrogram and paddings, clamped at zero.

    Args:
        legend_entries (int): Number of legend rows.
        line_height (float): Height of one line of legend text.
        title_height (float): Height of the title text (0 without a title).
        top_dendrogram_height (float): Height of the column dendrogram (0 if hidden).
        outer_pad (float): Figure-edge padding.
        inner_pad (float): Padding between panels.

    Returns:
        Tuple[float, float]: (low_height, mid_height).
    """
    low = legend_entries * line_height * LEGEND_ROW_FACTOR
    mid = max(
        0.0,
        1 - (low + outer_pad + inner_pad) - top_dendrogram_height - (title_height + outer_pad),
    )
    return low, mid


def plan_widths(
    left_dendrogram_width: float,
    description_width: float,
    legend_width: float,
    row_label_width: float,
    outer_pad: float,
    inner_pad: float,
) -> Tuple[float, float, float]:
    """
    Computes the left (descriptions, row dendrogram, colour bar), mid (heatmap) and
    right (legend, row labels) panel widths.

    Args:
        left_dendrogram_width (float): Width of the row dendrogram (0 if hidden).
        description_width (float): Width of the longest description line.
        legend_width (float): Width of the longest legend entry.
        row_label_width (float): Width of the longest heatmap row label.
        outer_pad (float): Figure-edge padding.
        inner_pad (float): Padding between panels.

    Returns:
        Tuple[float, float, float]: (left_width, mid_width, right_width).
    """
    left = max(description_width + inner_pad, COLORBAR_RESERVE_FACTOR * left_dendrogram_width)
    right = max(legend_width + inner_pad, row_label_width)
    mid = max(0.0, 1 - (right + outer_pad) - (left + outer_pad))
    return left, mid, right


def plan_geometry(
    *,
    legend_entries: int,
    line_height: float,
    title_height: float,
    top_dendrogram_height: float,
    left_dendrogram_width: float,
    description_width: float,
    legend_width: float,
    row_label_width: float,
    outer_pad: float,
    inner_pad: float,
) -> PanelGeometry:
    """
    Plans all panel sizes from measured text extents and the current dendrogram sizes.

    Kwargs:
        legend_entries (int): Number of legend rows.
        line_height (float): Height of one line of legend text.
        title_height (float): Title text height.
        top_dendrogram_height (float): Column dendrogram height.
        left_dendrogram_width (float): Row dendrogram width.
        description_width (float): Longest description line width.
        legend_width (float): Longest legend entry width.
        row_label_width (float): Longest row label width.
        outer_pad (float): Figure-edge padding.
        inner_pad (float): Padding between panels.

    Returns:
        PanelGeometry: Planned geometry.
    """
    low, mid_h = plan_heights(
        legend_entries,
        line_height,
        title_height,
        top_dendrogram_height,
        outer_pad,
        inner_pad,
    )
    left, mid_w, right = plan_widths(
        left_dendrogram_width,
        description_width,
        legend_width,
        row_label_width,
        outer_pad,
        inner_pad,
    )
    return PanelGeometry(
        title_height=title_height,
        top_height=top_dendrogram_height,
        mid_height=mid_h,
        low_height=low,
        left_width=left,
        mid_width=mid_w,
        right_width=right,
        outer_pad=outer_pad,
        inner_pad=inner_pad,
        line_height=line_height,
        left_dendrogram_width=left_dendrogram_width,
    )
