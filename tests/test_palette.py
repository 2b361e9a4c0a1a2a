"""
tests/test_palette
~~~~~~~~~~~~~~~~~~
"""

import numpy as np
import pytest

from clusterstrips import AnnotationLayer, UnknownColorError
from clusterstrips.core.palette import (
    assign_colors,
    build_palette,
    category_index,
    sample_index_vector,
)
from clusterstrips.core.validation import validate_layers


@pytest.mark.api
def test_palette_deduplicates_in_first_seen_order(subtype_layer, batch_layer):
    """
    Ensures a colour shared by two layers appears once, in first-seen order.
    """
    palette = build_palette(validate_layers([subtype_layer, batch_layer]))
    np.testing.assert_array_equal(palette, [[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    assert len(np.unique(palette, axis=0)) == len(palette)
    assert len(palette) <= 4


@pytest.mark.api
def test_category_index_is_left_inverse(subtype_layer, batch_layer):
    """
    Ensures the palette row at each category index is that category's colour.
    """
    layers = validate_layers([subtype_layer, batch_layer])
    palette = build_palette(layers)
    for layer in layers:
        for color in layer.color_array:
            np.testing.assert_array_equal(palette[category_index(palette, color)], color)


@pytest.mark.api
def test_sample_index_vector_worked_example(subtype_layer):
    """
    Ensures the identity order maps every sample to the palette row of its colour.
    """
    (layer,) = validate_layers([subtype_layer])
    palette = build_palette([layer])
    p_a = category_index(palette, [1, 0, 0])
    p_b = category_index(palette, [0, 1, 0])
    vector = sample_index_vector(layer, np.arange(10), palette)
    assert vector.tolist() == [p_a, p_a, p_b, p_b, p_b, p_a, p_a, p_b, p_b, p_a]


@pytest.mark.api
def test_sample_index_vector_follows_clustering_order(subtype_layer):
    """
    Ensures samples are permuted into clustering order.
    """
    (layer,) = validate_layers([subtype_layer])
    palette = build_palette([layer])
    order = np.array([2, 0, 9, 4, 1, 3, 5, 6, 7, 8])
    vector = sample_index_vector(layer, order, palette)
    expected = [0 if layer.labels[i] == "A" else 1 for i in order]
    assert vector.tolist() == expected


@pytest.mark.api
def test_unknown_color_raises():
    """
    Ensures looking up a colour outside the palette raises UnknownColorError.
    """
    palette = np.array([[1.0, 0.0, 0.0]])
    with pytest.raises(UnknownColorError):
        category_index(palette, [0.5, 0.5, 0.5], layer=3)


@pytest.mark.api
def test_assign_colors_per_layer_indices(subtype_layer, batch_layer):
    """
    Ensures assigned category indices point to the shared palette rows.
    """
    layers = validate_layers([subtype_layer, batch_layer])
    result = assign_colors(layers, np.arange(10))
    assert len(result) == 3
    assert result.layers[0].category_indices.tolist() == [0, 1]
    assert result.layers[1].category_indices.tolist() == [1, 2]
    assert result.layers[1].index_for(layers[1], "y") == 2
    assert result.layers[1].sample_indices.tolist() == [1, 2] * 5


@pytest.mark.unit
def test_case_insensitive_labels_map_to_category():
    """
    Ensures labels differing from their category only by case get its colour.
    """
    layer = AnnotationLayer(["pos", "NEG", "Pos"], ["POS", "neg"], [[1, 0, 0], [0, 0, 1]], "d")
    (layer,) = validate_layers([layer])
    palette = build_palette([layer])
    assert sample_index_vector(layer, [0, 1, 2], palette).tolist() == [0, 1, 0]


@pytest.mark.unit
def test_empty_layers_give_empty_palette():
    """
    Ensures no layers produce an empty (0, 3) palette.
    """
    result = assign_colors((), np.arange(4))
    assert result.colors.shape == (0, 3)
    assert result.layers == ()
