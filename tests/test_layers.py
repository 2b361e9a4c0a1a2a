"""
tests/test_layers
~~~~~~~~~~~~~~~~~
"""

import numpy as np
import pandas as pd
import pytest

from clusterstrips import AnnotationLayer, SchemaError


@pytest.mark.api
def test_from_mapping_reads_record():
    """
    Ensures a record of fields builds a layer, including legend exclusions.
    """
    layer = AnnotationLayer.from_mapping(
        {
            "labels": ["a", "b"],
            "categories": ["a", "b"],
            "colors": [[1, 0, 0], [0, 1, 0]],
            "description": "desc",
            "exclude_from_legend": "b",
        },
        name="lyr",
    )
    assert layer.labels == ("a", "b")
    assert layer.exclude_from_legend == ("b",)
    assert layer.legend_categories() == ("a",)
    assert layer.display_name == "lyr"


@pytest.mark.api
def test_from_mapping_missing_fields_raise():
    """
    Ensures a record missing required fields raises SchemaError.
    """
    with pytest.raises(SchemaError, match="colors"):
        AnnotationLayer.from_mapping({"labels": ["a"], "categories": ["a"], "description": ""})


@pytest.mark.api
def test_from_series_uses_mapping_order():
    """
    Ensures a Series and an ordered colour mapping build a layer in legend order.
    """
    series = pd.Series(["neg", "pos", "neg"], name="status")
    layer = AnnotationLayer.from_series(
        series,
        {"pos": (1.0, 0.0, 0.0), "neg": (0.0, 0.0, 1.0)},
        "Status",
    )
    assert layer.categories == ("pos", "neg")
    assert layer.name == "status"
    np.testing.assert_array_equal(layer.color_array, [[1, 0, 0], [0, 0, 1]])


@pytest.mark.unit
def test_description_text_from_sequence():
    """
    Ensures a one-element description sequence is read as its string.
    """
    layer = AnnotationLayer(["a"], ["a"], [[0, 0, 0]], ["only"])
    assert layer.description_text == "only"


@pytest.mark.unit
def test_unnamed_layer_display_name():
    """
    Ensures layers without a name still have a display name for notices.
    """
    assert AnnotationLayer(["a"], ["a"], [[0, 0, 0]]).display_name == "<unnamed>"
