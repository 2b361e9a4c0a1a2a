"""
tests/test_geometry
~~~~~~~~~~~~~~~~~~~
"""

import itertools

import pytest

from clusterstrips import AnnotationLayer
from clusterstrips.core.geometry import (
    legend_entry_count,
    plan_geometry,
    plan_heights,
    plan_widths,
)


@pytest.mark.api
def test_heights_worked_example():
    """
    Ensures two legend rows of height 0.05 with the default paddings give low 0.09 and
    mid 0.66.
    """
    low, mid = plan_heights(
        legend_entries=2,
        line_height=0.05,
        title_height=0.0,
        top_dendrogram_height=0.10,
        outer_pad=0.07,
        inner_pad=0.01,
    )
    assert low == pytest.approx(0.09)
    assert mid == pytest.approx(0.66)


@pytest.mark.api
def test_widths_reserve_colorbar_room():
    """
    Ensures the left panel is at least twice the row dendrogram width.
    """
    left, mid, right = plan_widths(
        left_dendrogram_width=0.15,
        description_width=0.05,
        legend_width=0.10,
        row_label_width=0.08,
        outer_pad=0.07,
        inner_pad=0.01,
    )
    assert left == pytest.approx(0.30)
    assert right == pytest.approx(0.11)
    assert mid == pytest.approx(1 - (0.11 + 0.07) - (0.30 + 0.07))


@pytest.mark.api
def test_widths_follow_long_descriptions_and_row_labels():
    """
    Ensures long descriptions widen the left panel and long row labels the right panel.
    """
    left, _, right = plan_widths(0.05, 0.2, 0.05, 0.25, 0.07, 0.01)
    assert left == pytest.approx(0.21)
    assert right == pytest.approx(0.25)


@pytest.mark.api
@pytest.mark.parametrize(
    "outer_pad,inner_pad",
    list(itertools.product([0.0, 0.07, 0.5, 0.99], [0.0, 0.01, 0.5, 0.99])),
)
def test_panels_never_negative(outer_pad, inner_pad):
    """
    Ensures heights and widths are non-negative for any padding in [0, 1).
    """
    low, mid_h = plan_heights(30, 0.05, 0.05, 0.2, outer_pad, inner_pad)
    left, mid_w, right = plan_widths(0.3, 0.4, 0.3, 0.2, outer_pad, inner_pad)
    assert min(low, mid_h, left, mid_w, right) >= 0.0


@pytest.mark.api
def test_geometry_sums_fit_canvas():
    """
    Ensures planned heights and widths with paddings fit within the canvas.
    """
    geometry = plan_geometry(
        legend_entries=4,
        line_height=0.03,
        title_height=0.04,
        top_dendrogram_height=0.12,
        left_dendrogram_width=0.1,
        description_width=0.08,
        legend_width=0.09,
        row_label_width=0.06,
        outer_pad=0.07,
        inner_pad=0.01,
    )
    assert geometry.total_height == pytest.approx(1.0)
    assert geometry.total_width == pytest.approx(1.0)
    assert geometry.body_x == pytest.approx(geometry.left_width + 0.08)
    assert geometry.body_y == pytest.approx(geometry.low_height + 0.08)


@pytest.mark.api
def test_zero_area_panels_are_valid():
    """
    Ensures oversized side panels clamp the heatmap width to zero instead of failing.
    """
    geometry = plan_geometry(
        legend_entries=0,
        line_height=0.0,
        title_height=0.0,
        top_dendrogram_height=0.0,
        left_dendrogram_width=0.4,
        description_width=0.0,
        legend_width=0.3,
        row_label_width=0.0,
        outer_pad=0.07,
        inner_pad=0.01,
    )
    assert geometry.mid_width == 0.0
    assert geometry.low_height == 0.0


@pytest.mark.unit
def test_legend_entry_count_skips_excluded():
    """
    Ensures categories excluded from the legend are not counted.
    """
    layers = [
        AnnotationLayer(["a", "b", "c"], ["a", "b", "c"], [[1, 0, 0]] * 3, "d", ("c",)),
        AnnotationLayer(["x"], ["x"], [[0, 0, 1]], "e"),
    ]
    assert legend_entry_count(layers) == 3
