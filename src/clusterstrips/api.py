"""
clusterstrips/api
~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from .core.config import LayoutConfig
from .core.geometry import PanelGeometry, legend_entry_count, plan_geometry
from .core.layers import AnnotationLayer
from .core.palette import ColorPalette, assign_colors
from .core.validation import (
    LayersInput,
    validate_column_order,
    validate_layers,
    validate_sample_count,
)
from .plot.applier import ClustergramLike, LayoutApplier, LegendBlock
from .plot.metrics import FigureTextMetrics, TextMetrics
from .plot.style import StyleConfig, StyleValue
from .text.formatting import (
    format_layer,
    longest_line,
    longest_text,
    to_mathtext,
    truncate_row_labels,
    visible_text,
)


@dataclass(frozen=True)
class ModificationResult:
    """
    Everything computed for one clustergram modification.
    """

    geometry: PanelGeometry
    palette: ColorPalette
    layers: Tuple[AnnotationLayer, ...]
    sample_order: np.ndarray
    legend_blocks: Tuple[LegendBlock, ...]


def _resolve_config(config: Optional[LayoutConfig], options: Mapping[str, Any]) -> LayoutConfig:
    """
    Merges keyword options into the config and validates it.

    Raises:
        ValueError: If an option is unknown or out of range.
    """
    config = config if config is not None else LayoutConfig()
    if options:
        try:
            config = replace(config, **options)
        except TypeError as exc:
            raise ValueError(f"Unknown layout option: {exc}") from exc
    return config.validate()


def _dendrogram_extent(ax: Any, attr: str) -> float:
    """Width or height of a dendrogram axis in figure fractions; 0 when hidden."""
    if ax is None:
        return 0.0
    return float(getattr(ax.get_position(), attr))


def plan_layout(
    clustergram: ClustergramLike,
    layers: Sequence[AnnotationLayer],
    row_labels: Sequence[str],
    config: LayoutConfig,
    metrics: TextMetrics,
) -> PanelGeometry:
    """
    Measures the texts that drive the layout and plans the panel geometry.

    The legend line height and width come from the longest legend category; the left
    panel from the longest description line, measured as drawn (italic runs as
    mathtext); the right panel also from the longest row label at the body font size
    and style.

    Args:
        clustergram (ClustergramLike): Clustergram (read only).
        layers (Sequence[AnnotationLayer]): Formatted layers.
        row_labels (Sequence[str]): Row labels as they will be displayed.
        config (LayoutConfig): Validated configuration.
        metrics (TextMetrics): Text measurement capability.

    Returns:
        PanelGeometry: Planned geometry.
    """
    category = longest_text(c for layer in layers for c in layer.categories)
    description = max(
        (longest_line(layer.description_text, keep_markup=True) for layer in layers),
        key=lambda line: len(visible_text(line)),
        default="",
    )
    legend_extent = metrics.measure(category, config.legend_fontsize)
    description_extent = metrics.measure(to_mathtext(description), config.legend_fontsize)
    row_label_extent = metrics.measure(
        longest_text(row_labels),
        config.fontsize,
        fontstyle="italic" if config.italicize_row_labels else "normal",
    )
    title_height = (
        metrics.measure(clustergram.title, clustergram.title_fontsize).height
        if clustergram.title
        else 0.0
    )
    return plan_geometry(
        legend_entries=legend_entry_count(layers),
        line_height=legend_extent.height,
        title_height=title_height,
        top_dendrogram_height=_dendrogram_extent(clustergram.col_dendrogram_ax, "height"),
        left_dendrogram_width=_dendrogram_extent(clustergram.row_dendrogram_ax, "width"),
        description_width=description_extent.width,
        legend_width=legend_extent.width,
        row_label_width=row_label_extent.width,
        outer_pad=config.outer_padding,
        inner_pad=config.inner_padding,
    )


def modify_clustergram(
    clustergram: ClustergramLike,
    layers: LayersInput = (),
    config: Optional[LayoutConfig] = None,
    *,
    metrics: Optional[TextMetrics] = None,
    style: Union[StyleConfig, Mapping[str, StyleValue], None] = None,
    **options: Any,
) -> ModificationResult:
    """
    Adds categorical annotation strips under a clustergram and re-lays out the figure.

    All inputs are validated before the clustergram is touched; a failure after the
    first mutation leaves earlier mutations in place. With no layers only the panels,
    fonts and colour bar are adjusted.

    Args:
        clustergram (ClustergramLike): Clustergram to modify.
        layers (LayersInput): Annotation layers (or field records) in display order, or an
            ordered name -> layer mapping. Defaults to ().
        config (Optional[LayoutConfig]): Layout configuration. Defaults to LayoutConfig().

    Kwargs:
        metrics (Optional[TextMetrics]): Text measurement. Defaults to measuring on the
            clustergram figure.
        style (Union[StyleConfig, Mapping[str, StyleValue], None]): Style or overrides.
            Defaults to None.
        **options: LayoutConfig fields overriding `config` (e.g. fontsize=10).

    Returns:
        ModificationResult: Geometry, palette, formatted layers and sample order.

    Raises:
        ValueError: If an option is unknown or out of range.
        SchemaError: If a layer record misses a field.
        ColorFormatError: If a layer's colours are malformed.
        CardinalityError: If counts of colours, categories, labels or descriptions disagree.
        LabelMismatchError: If categories and labels do not correspond.
        OrderRequiredError: If column labels are needed to order the samples.
        OrderMismatchError: If column labels do not match the clustergram.
    """
    config = _resolve_config(config, options)
    validated = validate_layers(layers)
    validate_sample_count(validated, len(clustergram.column_labels))
    if validated or config.column_labels:
        sample_order = validate_column_order(config.column_labels, clustergram.column_labels)
    else:
        sample_order = np.arange(len(clustergram.column_labels), dtype=int)
    formatted = tuple(format_layer(layer) for layer in validated)
    palette = assign_colors(formatted, sample_order)

    # Mutation starts here
    if config.resize:
        clustergram.figure.set_size_inches(*config.figsize, forward=True)
    row_labels = truncate_row_labels(clustergram.row_labels)
    clustergram.set_row_labels(
        row_labels,
        fontsize=config.fontsize,
        italic=config.italicize_row_labels,
    )
    if metrics is None:
        metrics = FigureTextMetrics(clustergram.figure)
    geometry = plan_layout(clustergram, formatted, row_labels, config, metrics)
    blocks = LayoutApplier(clustergram, geometry, config, style).apply(formatted, palette)
    return ModificationResult(
        geometry=geometry,
        palette=palette,
        layers=formatted,
        sample_order=sample_order,
        legend_blocks=blocks,
    )
