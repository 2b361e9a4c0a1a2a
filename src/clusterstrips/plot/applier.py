"""
clusterstrips/plot/applier
~~~~~~~~~~~~~~~~~~~~~~~~~~

Applies a planned PanelGeometry to a live clustergram: moves the existing panels,
adds the annotation strip, legend and description regions, draws their content and
inserts the colour bar last.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Protocol, Sequence, Tuple, Union

import matplotlib.pyplot as plt

from ..core.config import LayoutConfig
from ..core.geometry import PanelGeometry
from ..core.layers import AnnotationLayer
from ..core.palette import ColorPalette
from .renderers import LegendRenderer, StripRenderer
from .style import StyleConfig, StyleValue, resolve_style

# Upper bound on the strip half height, in legend lines
MAX_BAR_LINES = 5.0


class ClustergramLike(Protocol):
    """
    The parts of a clustergram widget that layout application reads and mutates.
    """

    figure: plt.Figure
    title_ax: plt.Axes
    heatmap_ax: plt.Axes
    row_dendrogram_ax: Optional[plt.Axes]
    col_dendrogram_ax: Optional[plt.Axes]
    colorbar_ax: Optional[plt.Axes]
    title: Optional[str]
    title_fontsize: float
    row_labels: List[str]
    column_labels: List[str]

    def set_row_labels(
        self,
        labels: Sequence[str],
        *,
        fontsize: Optional[float] = None,
        italic: bool = False,
    ) -> None: ...

    def set_dendrogram_linewidth(self, linewidth: float) -> None: ...

    def insert_colorbar(self, *, fontsize: Optional[float] = None) -> plt.Axes: ...


@dataclass(frozen=True)
class LegendBlock:
    """
    Vertical placement of one layer's legend rows (legend-axis data coordinates).
    """

    y_positions: Tuple[float, ...]
    midpoint: float

    @property
    def first(self) -> float:
        return self.y_positions[0] if self.y_positions else self.midpoint

    @property
    def last(self) -> float:
        return self.y_positions[-1] if self.y_positions else self.midpoint


@dataclass(frozen=True)
class AnnotationRegions:
    """
    Axes created for the annotation strips, their legends and their descriptions.
    """

    strip_ax: plt.Axes
    legend_ax: plt.Axes
    description_ax: plt.Axes

    def __iter__(self):
        return iter((self.strip_ax, self.legend_ax, self.description_ax))


def legend_blocks(layers: Sequence[AnnotationLayer], line_height: float) -> Tuple[LegendBlock, ...]:
    """
    Places legend rows top-down from y = 1, one line apart, with an extra half line
    between consecutive layers.

    Row `c` (0-based over all layers) of layer `i` sits at
    `1 - c * line_height - (i + 1) * line_height / 2`. A layer's midpoint is halfway
    between its first and last row; a layer with no legend rows is centred where its
    next row would have been.

    Args:
        layers (Sequence[AnnotationLayer]): Layers in display order.
        line_height (float): Height of one legend line.

    Returns:
        Tuple[LegendBlock, ...]: One block per layer.
    """
    blocks = []
    count = 0
    for i, layer in enumerate(layers):
        offset = (i + 1) * line_height / 2
        n_rows = len(layer.legend_categories())
        ys = tuple(1 - line_height * (count + j) - offset for j in range(n_rows))
        midpoint = (ys[0] + ys[-1]) / 2 if ys else 1 - line_height * count - offset
        blocks.append(LegendBlock(y_positions=ys, midpoint=midpoint))
        count += n_rows
    return tuple(blocks)


def bar_half_extent(blocks: Sequence[LegendBlock], line_height: float) -> float:
    """
    Half height of every annotation strip.

    The strip fits inside a quarter of the span between a layer's first and last legend
    row. The span formula alone gives 0 for a layer with fewer than two rows, which
    collapses every strip; such layers instead count as spanning one line and limit
    the half extent to `line_height / 4`. The result is capped at `MAX_BAR_LINES` lines
    so adjacent strips never overlap.

    Args:
        blocks (Sequence[LegendBlock]): Legend blocks from `legend_blocks`.
        line_height (float): Height of one legend line.

    Returns:
        float: Half extent, in legend-axis data units.
    """
    extent = MAX_BAR_LINES * line_height
    for block in blocks:
        if len(block.y_positions) >= 2:
            extent = min(extent, (block.first - block.midpoint) / 2)
        else:
            extent = min(extent, line_height / 4)
    return extent


class LayoutApplier:
    """
    Class for applying a planned geometry and annotation layers to a clustergram.

    Mutations are not rolled back if a later step fails.
    """

    def __init__(
        self,
        clustergram: ClustergramLike,
        geometry: PanelGeometry,
        config: LayoutConfig,
        style: Union[StyleConfig, Mapping[str, StyleValue], None] = None,
    ) -> None:
        """
        Initializes the LayoutApplier instance.

        Args:
            clustergram (ClustergramLike): Widget to mutate.
            geometry (PanelGeometry): Planned panel geometry.
            config (LayoutConfig): Validated layout configuration.
            style (Union[StyleConfig, Mapping[str, StyleValue], None]): Style or overrides.
                Defaults to the clustergram's style if it has one.
        """
        self.clustergram = clustergram
        self.geometry = geometry
        self.config = config
        if style is None:
            style = getattr(clustergram, "style", None)
        self.style = resolve_style(style)
        self.regions: Optional[AnnotationRegions] = None

    def reposition_existing(self) -> None:
        """
        Moves the row dendrogram, heatmap and column dendrogram into the planned panels and
        sets the dendrogram line width. The title panel keeps its position.
        """
        g = self.geometry
        cg = self.clustergram
        if cg.row_dendrogram_ax is not None:
            pos = cg.row_dendrogram_ax.get_position()
            cg.row_dendrogram_ax.set_position(
                [
                    g.left_width - g.left_dendrogram_width + g.outer_pad + g.inner_pad,
                    g.body_y,
                    pos.width,
                    g.mid_height,
                ]
            )
        cg.heatmap_ax.set_position([g.body_x, g.body_y, g.mid_width, g.mid_height])
        if cg.col_dendrogram_ax is not None:
            pos = cg.col_dendrogram_ax.get_position()
            cg.col_dendrogram_ax.set_position(
                [g.body_x, g.body_y + g.mid_height, g.mid_width, pos.height]
            )
        cg.set_dendrogram_linewidth(self.config.dendrogram_linewidth)

    def create_annotation_regions(self) -> AnnotationRegions:
        """
        Adds the strip (below the heatmap), legend (right) and description (left) axes,
        all without axis decoration.

        Returns:
            AnnotationRegions: The new axes.
        """
        g = self.geometry
        fig = self.clustergram.figure
        boxes = (
            [g.body_x, g.outer_pad, g.mid_width, g.low_height],
            [
                g.left_width + g.mid_width + g.outer_pad + 2 * g.inner_pad,
                g.outer_pad,
                g.right_width,
                g.low_height,
            ],
            [g.outer_pad, g.outer_pad, g.left_width, g.low_height],
        )
        axes = []
        for box in boxes:
            ax = fig.add_axes(box, frameon=False)
            ax.set_axis_off()
            axes.append(ax)
        self.regions = AnnotationRegions(*axes)
        return self.regions

    def render_legends_and_descriptions(
        self,
        layers: Sequence[AnnotationLayer],
        palette: ColorPalette,
    ) -> Tuple[LegendBlock, ...]:
        """
        Draws each layer's legend rows and its description at the legend midpoint.

        Args:
            layers (Sequence[AnnotationLayer]): Formatted layers in display order.
            palette (ColorPalette): Assigned colours.

        Returns:
            Tuple[LegendBlock, ...]: Legend placement per layer.
        """
        regions = self._require_regions()
        blocks = legend_blocks(layers, self.geometry.line_height)
        renderer = LegendRenderer(self.config.legend_fontsize)
        for layer, colors, block in zip(layers, palette.layers, blocks):
            shown = layer.legend_categories()
            rgb = [palette.colors[colors.index_for(layer, c)] for c in shown]
            renderer.render_entries(regions.legend_ax, shown, rgb, block.y_positions, self.style)
            renderer.render_description(
                regions.description_ax,
                layer.description_text,
                block.midpoint,
                self.style,
            )
        return blocks

    def render_strips(
        self,
        layers: Sequence[AnnotationLayer],
        palette: ColorPalette,
        blocks: Sequence[LegendBlock],
    ) -> float:
        """
        Draws every layer's per-sample palette indices as a strip at its legend midpoint.

        Args:
            layers (Sequence[AnnotationLayer]): Formatted layers in display order.
            palette (ColorPalette): Assigned colours.
            blocks (Sequence[LegendBlock]): Legend placement per layer.

        Returns:
            float: The strip half extent used.
        """
        regions = self._require_regions()
        half = bar_half_extent(blocks, self.geometry.line_height)
        renderer = StripRenderer(palette.colors)
        for colors, block in zip(palette.layers, blocks):
            renderer.render(regions.strip_ax, colors.sample_indices, block.midpoint, half)
        return half

    def finalize(self, blocks: Sequence[LegendBlock]) -> plt.Axes:
        """
        Aligns the annotation regions, restyles the heatmap and inserts the colour bar.

        Args:
            blocks (Sequence[LegendBlock]): Legend placement per layer (may be empty).

        Returns:
            plt.Axes: The colour bar axis.
        """
        cg = self.clustergram
        if self.regions is not None and blocks:
            bottom = blocks[-1].midpoint - self.geometry.line_height
            for ax in self.regions:
                ax.set_ylim(bottom, 1.0)
            self.regions.legend_ax.set_xlim(*self.style["legend_xlim"])
            # Strips replace the column labels
            cg.heatmap_ax.set_xticks([])
        cg.heatmap_ax.tick_params(labelsize=self.config.fontsize)

        # Last, so the bar is sized from the final heatmap position
        cb_ax = cg.insert_colorbar(fontsize=self.config.fontsize)
        pos = cb_ax.get_position(original=True)
        cb_ax.set_position([pos.x0 + self.geometry.outer_pad, pos.y0, pos.width, pos.height])
        cg.figure.patch.set_facecolor(self.style["background"])
        return cb_ax

    def apply(
        self,
        layers: Sequence[AnnotationLayer],
        palette: ColorPalette,
    ) -> Tuple[LegendBlock, ...]:
        """
        Runs every step in order. Annotation regions are only created when there are layers.

        Args:
            layers (Sequence[AnnotationLayer]): Formatted layers in display order.
            palette (ColorPalette): Assigned colours.

        Returns:
            Tuple[LegendBlock, ...]: Legend placement per layer.
        """
        self.reposition_existing()
        blocks: Tuple[LegendBlock, ...] = ()
        if layers:
            self.create_annotation_regions()
            blocks = self.render_legends_and_descriptions(layers, palette)
            self.render_strips(layers, palette, blocks)
        self.finalize(blocks)
        return blocks

    def _require_regions(self) -> AnnotationRegions:
        if self.regions is None:
            raise RuntimeError("create_annotation_regions() must be called first")
        return self.regions
