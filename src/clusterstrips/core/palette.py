"""
clusterstrips/core/palette
~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .errors import UnknownColorError
from .layers import AnnotationLayer


@dataclass(frozen=True)
class LayerColors:
    """
    Palette indices for one layer: one per category (legend order) and one per sample
    (clustering order).
    """

    category_indices: np.ndarray
    sample_indices: np.ndarray

    def index_for(self, layer: AnnotationLayer, category: str) -> int:
        """Palette index of `category` in `layer`."""
        return int(self.category_indices[layer.categories.index(category)])


@dataclass(frozen=True)
class ColorPalette:
    """
    Deduplicated colours spanning all annotation layers, plus per-layer index vectors.
    """

    colors: np.ndarray
    layers: Tuple[LayerColors, ...]

    def __len__(self) -> int:
        return int(self.colors.shape[0])


def build_palette(layers: Sequence[AnnotationLayer]) -> np.ndarray:
    """
    Combines the category colours of all layers into one palette.

    Layers are processed in order and a colour is appended only if no identical
    colour is already present, so the palette keeps first-seen order and holds no
    duplicate rows.

    Args:
        layers (Sequence[AnnotationLayer]): Validated layers.

    Returns:
        np.ndarray: (P, 3) float array of distinct colours.
    """
    seen: Dict[Tuple[float, ...], None] = {}
    for layer in layers:
        for color in layer.color_array:
            seen.setdefault(tuple(float(c) for c in color), None)
    if not seen:
        return np.empty((0, 3), dtype=float)
    return np.asarray(list(seen), dtype=float)


def category_index(palette: np.ndarray, color: Sequence[float], *, layer: Optional[int] = None) -> int:
    """
    Looks up the palette row equal to `color`.

    Args:
        palette (np.ndarray): (P, 3) palette from `build_palette`.
        color (Sequence[float]): RGB triple.

    Kwargs:
        layer (Optional[int]): Layer index reported on failure. Defaults to None.

    Returns:
        int: Row index into `palette`.

    Raises:
        UnknownColorError: If the colour is not in the palette.
    """
    matches = np.flatnonzero(np.all(palette == np.asarray(color, dtype=float), axis=1))
    if matches.size == 0:
        raise UnknownColorError(f"Colour {tuple(color)} is not in the palette", layer=layer)
    return int(matches[0])


def sample_index_vector(
    layer: AnnotationLayer,
    sample_order: Sequence[int],
    palette: np.ndarray,
    *,
    layer_index: Optional[int] = None,
) -> np.ndarray:
    """
    Maps every sample, permuted into clustering order, to its category's palette index.

    Args:
        layer (AnnotationLayer): Validated layer.
        sample_order (Sequence[int]): Sample index at each clustering position.
        palette (np.ndarray): (P, 3) palette.

    Kwargs:
        layer_index (Optional[int]): Layer index reported on failure. Defaults to None.

    Returns:
        np.ndarray: Palette index per clustering position.
    """
    colors = layer.color_array
    lookup = {
        category.casefold(): category_index(palette, colors[j], layer=layer_index)
        for j, category in enumerate(layer.categories)
    }
    labels = [layer.labels[int(i)] for i in sample_order]
    return np.asarray([lookup[label.casefold()] for label in labels], dtype=int)


def assign_colors(
    layers: Sequence[AnnotationLayer],
    sample_order: Sequence[int],
) -> ColorPalette:
    """
    Builds the global palette and every layer's category and sample index vectors.

    Args:
        layers (Sequence[AnnotationLayer]): Validated layers, in display order.
        sample_order (Sequence[int]): Sample index at each clustering position.

    Returns:
        ColorPalette: Palette and per-layer indices.
    """
    palette = build_palette(layers)
    per_layer: List[LayerColors] = []
    for i, layer in enumerate(layers):
        category_indices = np.asarray(
            [category_index(palette, c, layer=i) for c in layer.color_array],
            dtype=int,
        )
        per_layer.append(
            LayerColors(
                category_indices=category_indices,
                sample_indices=sample_index_vector(layer, sample_order, palette, layer_index=i),
            )
        )
    return ColorPalette(colors=palette, layers=tuple(per_layer))
