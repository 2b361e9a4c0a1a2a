"""
clusterstrips/core/validation
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

import numpy as np

from .errors import (
    CardinalityError,
    ColorFormatError,
    LabelMismatchError,
    OrderMismatchError,
    OrderRequiredError,
    SchemaError,
)
from .layers import AnnotationLayer

LayerInput = Union[AnnotationLayer, Mapping[str, Any]]
LayersInput = Union[Sequence[LayerInput], Mapping[str, LayerInput]]


def _distinct_casefold(values: Sequence[str]) -> List[str]:
    """Distinct case-folded values in first-seen order."""
    seen: Dict[str, None] = {}
    for value in values:
        seen.setdefault(value.casefold(), None)
    return list(seen)


def coerce_layers(layers: LayersInput) -> Tuple[AnnotationLayer, ...]:
    """
    Converts caller input into an ordered tuple of AnnotationLayer objects.

    A mapping of name -> record keeps its iteration order and uses the keys as layer
    names. Records may be AnnotationLayer instances or field mappings.

    Args:
        layers (LayersInput): Sequence of layers/records, or a name -> layer/record mapping.

    Returns:
        Tuple[AnnotationLayer, ...]: Layers in caller order.

    Raises:
        SchemaError: If a record is not a layer or mapping, or misses a required field.
    """
    if layers is None:
        return ()
    if isinstance(layers, Mapping):
        items = [(str(name), record) for name, record in layers.items()]
    else:
        items = [(None, record) for record in layers]

    out = []
    for i, (name, record) in enumerate(items):
        if isinstance(record, AnnotationLayer):
            out.append(record if name is None or record.name is not None else record.evolve(name=name))
        elif isinstance(record, Mapping):
            out.append(AnnotationLayer.from_mapping(record, name=name, layer=i))
        else:
            raise SchemaError(
                f"Annotation layers must be AnnotationLayer or mapping records, "
                f"got {type(record).__name__}",
                layer=i,
            )
    return tuple(out)


def _validate_colors(layer: AnnotationLayer, index: int) -> np.ndarray:
    """
    Checks that colours form a numeric (K, 3) matrix with values in [0, 1].

    Args:
        layer (AnnotationLayer): Layer to check.
        index (int): Layer index for error reporting.

    Returns:
        np.ndarray: Colours as a float (K, 3) array.

    Raises:
        ColorFormatError: If colours are non-numeric, wrongly shaped, or out of range.
    """
    try:
        colors = np.asarray(layer.colors, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ColorFormatError("Colours must be numeric RGB triples", layer=index) from exc
    # A single triple is accepted for one-category layers
    if colors.ndim == 1 and colors.size == 3:
        colors = colors.reshape(1, 3)
    if colors.ndim != 2 or colors.shape[1] != 3:
        raise ColorFormatError(
            f"Colours must be an n x 3 numeric matrix, got shape {colors.shape}",
            layer=index,
        )
    if not np.all(np.isfinite(colors)) or np.any(colors < 0) or np.any(colors > 1):
        raise ColorFormatError("Colour components must lie within [0, 1]", layer=index)
    return colors


def _description_count(description: Any) -> int:
    """Number of description strings supplied."""
    if isinstance(description, str):
        return 1
    if description is None:
        return 0
    try:
        return len(description)
    except TypeError:
        return 1


def validate_layer(layer: AnnotationLayer, index: int = 0) -> AnnotationLayer:
    """
    Validates a single annotation layer.

    Args:
        layer (AnnotationLayer): Layer to check.
        index (int): Layer index for error reporting. Defaults to 0.

    Returns:
        AnnotationLayer: The layer, with colours normalized to a float (K, 3) array and
            the description to a single string.

    Raises:
        ColorFormatError: If colours are malformed.
        CardinalityError: If colour, category, label, or description counts disagree.
        LabelMismatchError: If categories and distinct labels differ.
    """
    colors = _validate_colors(layer, index)

    n_descriptions = _description_count(layer.description)
    if n_descriptions != 1:
        raise CardinalityError(
            f"Exactly one description is required, got {n_descriptions}",
            layer=index,
        )

    if layer.n_samples == 0:
        raise CardinalityError("Layer has no per-sample labels", layer=index)
    distinct = _distinct_casefold(layer.labels)
    if colors.shape[0] != len(layer.categories) or colors.shape[0] != len(distinct):
        raise CardinalityError(
            f"Expected one colour per category and per distinct label; got "
            f"{colors.shape[0]} colours, {len(layer.categories)} categories, "
            f"{len(distinct)} distinct labels",
            layer=index,
        )

    categories = [c.casefold() for c in layer.categories]
    if len(set(categories)) != len(categories):
        raise LabelMismatchError("Categories must be distinct (case-insensitive)", layer=index)
    if set(categories) != set(distinct):
        missing = sorted(set(distinct) - set(categories))
        unused = sorted(set(categories) - set(distinct))
        raise LabelMismatchError(
            "Mismatch between per-sample labels and categories: labels without a category "
            f"{missing}, categories without samples {unused}",
            layer=index,
        )
    unknown = [c for c in layer.exclude_from_legend if c not in layer.categories]
    if unknown:
        raise LabelMismatchError(
            f"Categories excluded from the legend are not categories of the layer: {unknown}",
            layer=index,
        )

    return layer.evolve(colors=colors, description=layer.description_text)


def validate_layers(layers: LayersInput) -> Tuple[AnnotationLayer, ...]:
    """
    Validates all annotation layers, in order, before any figure mutation.

    Args:
        layers (LayersInput): Layers or layer records.

    Returns:
        Tuple[AnnotationLayer, ...]: Validated layers in caller order.
    """
    return tuple(validate_layer(layer, i) for i, layer in enumerate(coerce_layers(layers)))


def validate_sample_count(layers: Sequence[AnnotationLayer], n_columns: int) -> None:
    """
    Checks that every layer labels exactly one sample per heatmap column.

    Args:
        layers (Sequence[AnnotationLayer]): Validated layers.
        n_columns (int): Number of heatmap columns.

    Raises:
        CardinalityError: If a layer's label count differs from `n_columns`.
    """
    for i, layer in enumerate(layers):
        if layer.n_samples != n_columns:
            raise CardinalityError(
                f"Layer has {layer.n_samples} labels but the clustergram has {n_columns} columns",
                layer=i,
            )


def validate_column_order(
    provided_labels: Sequence[str],
    widget_labels: Sequence[str],
) -> np.ndarray:
    """
    Resolves the sample order implied by the clustergram's current column labels.

    With no `provided_labels`, the clustergram must carry its default labels "1".."N";
    these are the 1-based sample positions. Otherwise `provided_labels` list the column
    labels in layer sample order and are matched against the clustergram's labels.

    Args:
        provided_labels (Sequence[str]): Column labels in layer sample order, or empty.
        widget_labels (Sequence[str]): Column labels in current clustering order.

    Returns:
        np.ndarray: Sample index for each clustering position.

    Raises:
        OrderRequiredError: If labels are needed but not provided.
        OrderMismatchError: If provided labels differ from the clustergram's labels.
    """
    current = [str(label).strip() for label in widget_labels]

    if len(provided_labels) == 0:
        try:
            positions = [int(label) for label in current]
        except ValueError:
            positions = None
        if positions is None or sorted(positions) != list(range(1, len(current) + 1)):
            raise OrderRequiredError(
                "column_labels must be provided: the clustergram has custom column labels, "
                "pass the same labels in the sample order of the annotation layers"
            )
        return np.asarray(positions, dtype=int) - 1

    expected = [str(label).strip() for label in provided_labels]
    if len(set(expected)) != len(expected):
        raise OrderMismatchError("column_labels must be unique")
    if sorted(expected) != sorted(current):
        raise OrderMismatchError(
            "column_labels do not match the column labels of the clustergram"
        )
    position = {label: i for i, label in enumerate(expected)}
    return np.asarray([position[label] for label in current], dtype=int)
