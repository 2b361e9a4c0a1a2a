"""
tests/test_applier
~~~~~~~~~~~~~~~~~~
"""

import matplotlib.colors as mcolors
import numpy as np
import pytest

from clusterstrips import AnnotationLayer, LayoutConfig
from clusterstrips.api import plan_layout
from clusterstrips.core.palette import assign_colors
from clusterstrips.core.validation import validate_column_order, validate_layers
from clusterstrips.plot.applier import LayoutApplier, bar_half_extent, legend_blocks
from clusterstrips.plot.style import DEFAULT_STYLE
from clusterstrips.text.formatting import format_layer


def _prepare(clustergram, layers, metrics, config=None):
    config = config or LayoutConfig()
    layers = tuple(format_layer(layer) for layer in validate_layers(layers))
    order = validate_column_order((), clustergram.column_labels)
    palette = assign_colors(layers, order)
    geometry = plan_layout(clustergram, layers, clustergram.row_labels, config, metrics)
    return LayoutApplier(clustergram, geometry, config), layers, palette


@pytest.mark.unit
def test_legend_blocks_stack_layers(subtype_layer, batch_layer):
    """
    Ensures legend rows are one line apart with an extra half line between layers.
    """
    blocks = legend_blocks([subtype_layer, batch_layer], 0.1)
    assert blocks[0].y_positions == pytest.approx((0.95, 0.85))
    assert blocks[0].midpoint == pytest.approx(0.9)
    assert blocks[1].y_positions == pytest.approx((0.7, 0.6))
    assert blocks[1].midpoint == pytest.approx(0.65)


@pytest.mark.unit
def test_layer_without_legend_rows_gets_midpoint(subtype_layer):
    """
    Ensures a layer whose categories are all excluded is centred at its next row slot.
    """
    hidden = subtype_layer.evolve(exclude_from_legend=("A", "B"))
    blocks = legend_blocks([subtype_layer, hidden], 0.1)
    assert blocks[1].y_positions == ()
    assert blocks[1].midpoint == pytest.approx(1 - 0.2 - 0.1)


@pytest.mark.unit
def test_bar_half_extent_keeps_strips_apart(subtype_layer, batch_layer):
    """
    Ensures the strip half height is a quarter of the tightest legend span and never
    exceeds five lines.
    """
    blocks = legend_blocks([subtype_layer, batch_layer], 0.1)
    half = bar_half_extent(blocks, 0.1)
    assert half == pytest.approx(0.025)
    assert blocks[0].midpoint - half > blocks[1].midpoint + half
    assert bar_half_extent((), 0.1) == pytest.approx(0.5)


@pytest.mark.unit
def test_bar_half_extent_single_entry_layers():
    """
    Ensures single-entry layers limit the strip to a quarter line.
    """
    layer = AnnotationLayer(["a"], ["a"], [[1, 0, 0]], "d")
    blocks = legend_blocks([layer, layer], 0.08)
    assert bar_half_extent(blocks, 0.08) == pytest.approx(0.02)


@pytest.mark.api
def test_reposition_existing(clustergram, subtype_layer, fake_metrics):
    """
    Ensures the heatmap and dendrograms move into the planned panels.
    """
    applier, _, _ = _prepare(clustergram, [subtype_layer], fake_metrics)
    g = applier.geometry
    row_width = clustergram.row_dendrogram_ax.get_position().width
    col_height = clustergram.col_dendrogram_ax.get_position().height
    title_pos = clustergram.title_ax.get_position().bounds
    applier.reposition_existing()

    heat = clustergram.heatmap_ax.get_position()
    assert heat.bounds == pytest.approx((g.body_x, g.body_y, g.mid_width, g.mid_height))
    col = clustergram.col_dendrogram_ax.get_position()
    assert col.bounds == pytest.approx((g.body_x, g.body_y + g.mid_height, g.mid_width, col_height))
    row = clustergram.row_dendrogram_ax.get_position()
    assert row.x1 == pytest.approx(g.body_x)
    assert row.width == pytest.approx(row_width)
    assert clustergram.title_ax.get_position().bounds == pytest.approx(title_pos)
    lw = clustergram.row_dendrogram_ax.collections[0].get_linewidth()
    assert lw[0] == pytest.approx(2.0)


@pytest.mark.api
def test_annotation_regions_positions(clustergram, subtype_layer, fake_metrics):
    """
    Ensures the strip, legend, and description regions sit in the low panel row.
    """
    applier, _, _ = _prepare(clustergram, [subtype_layer], fake_metrics)
    g = applier.geometry
    regions = applier.create_annotation_regions()
    assert regions.strip_ax.get_position().bounds == pytest.approx(
        (g.body_x, g.outer_pad, g.mid_width, g.low_height)
    )
    assert regions.legend_ax.get_position().x0 == pytest.approx(
        g.left_width + g.mid_width + g.outer_pad + 2 * g.inner_pad
    )
    assert regions.description_ax.get_position().bounds == pytest.approx(
        (g.outer_pad, g.outer_pad, g.left_width, g.low_height)
    )
    assert not regions.legend_ax.axison


@pytest.mark.api
def test_apply_renders_strips_legends_and_colorbar(
    clustergram, subtype_layer, batch_layer, fake_metrics
):
    """
    Ensures a full application draws one strip per layer, one legend row per shown
    category, one description per layer, and a shifted colour bar.
    """
    batch = batch_layer.evolve(exclude_from_legend=("y",))
    applier, layers, palette = _prepare(clustergram, [subtype_layer, batch], fake_metrics)
    blocks = applier.apply(layers, palette)
    regions = applier.regions

    assert len(regions.strip_ax.images) == 2
    strip = regions.strip_ax.images[0]
    np.testing.assert_array_equal(strip.get_array()[0], palette.layers[0].sample_indices)
    legend_texts = [t.get_text() for t in regions.legend_ax.texts]
    assert legend_texts == ["A", "B", "x"]
    assert [t.get_text() for t in regions.description_ax.texts] == ["Subtype", "Batch"]

    bottom = blocks[-1].midpoint - applier.geometry.line_height
    for ax in regions:
        assert ax.get_ylim() == pytest.approx((bottom, 1.0))
    assert len(clustergram.heatmap_ax.get_xticks()) == 0

    cb = clustergram.colorbar_ax.get_position(original=True)
    assert cb.x0 == pytest.approx(DEFAULT_STYLE["colorbar_x"] + applier.geometry.outer_pad)
    assert mcolors.to_hex(clustergram.figure.get_facecolor()) == "#ffffff"


@pytest.mark.api
def test_legend_markers_use_palette_colors(clustergram, subtype_layer, fake_metrics):
    """
    Ensures legend markers are drawn in the category colours.
    """
    applier, layers, palette = _prepare(clustergram, [subtype_layer], fake_metrics)
    applier.apply(layers, palette)
    markers = applier.regions.legend_ax.lines
    assert [mcolors.to_hex(m.get_markerfacecolor()) for m in markers] == ["#ff0000", "#00ff00"]


@pytest.mark.unit
def test_render_before_regions_raises(clustergram, subtype_layer, fake_metrics):
    """
    Ensures drawing content without annotation regions fails clearly.
    """
    applier, layers, palette = _prepare(clustergram, [subtype_layer], fake_metrics)
    with pytest.raises(RuntimeError):
        applier.render_legends_and_descriptions(layers, palette)
