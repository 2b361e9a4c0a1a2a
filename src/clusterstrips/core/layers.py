"""
clusterstrips/core/layers
~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .errors import SchemaError

REQUIRED_FIELDS = ("labels", "categories", "colors", "description")


def as_text_labels(values: Any) -> Tuple[str, ...]:
    """
    Converts labels to a tuple of strings. Numeric labels become their plain text form
    (1 -> "1", 2.0 -> "2").

    Args:
        values (Any): Iterable of labels, or a scalar.

    Returns:
        Tuple[str, ...]: Labels as strings.
    """
    if values is None:
        return ()
    if isinstance(values, (str, bytes)) or np.isscalar(values):
        values = [values]
    out = []
    for value in values:
        if isinstance(value, (float, np.floating)) and float(value).is_integer():
            value = int(value)
        out.append(str(value))
    return tuple(out)


@dataclass(frozen=True)
class AnnotationLayer:
    """
    One row of categorical colour-coding shown under the heatmap.

    `labels` holds one category per sample, in the sample order of the caller
    (not the clustering order). `categories` lists the distinct categories in
    legend order, with one RGB row per category in `colors`.
    """

    labels: Tuple[str, ...]
    categories: Tuple[str, ...]
    colors: Any
    description: Any = ""
    exclude_from_legend: Tuple[str, ...] = field(default_factory=tuple)
    name: Optional[str] = None

    def __post_init__(self) -> None:
        # Normalize text fields; colour checks are left to validation
        object.__setattr__(self, "labels", as_text_labels(self.labels))
        object.__setattr__(self, "categories", as_text_labels(self.categories))
        object.__setattr__(self, "exclude_from_legend", as_text_labels(self.exclude_from_legend))

    @classmethod
    def from_mapping(
        cls,
        record: Mapping[str, Any],
        name: Optional[str] = None,
        *,
        layer: Optional[int] = None,
    ) -> AnnotationLayer:
        """
        Builds a layer from a record of fields.

        Args:
            record (Mapping[str, Any]): Mapping with keys "labels", "categories", "colors",
                "description", and optionally "exclude_from_legend".
            name (Optional[str]): Display name for notices and errors. Defaults to None.

        Kwargs:
            layer (Optional[int]): Layer index reported in errors. Defaults to None.

        Returns:
            AnnotationLayer: The layer.

        Raises:
            SchemaError: If a required field is missing.
        """
        missing = [key for key in REQUIRED_FIELDS if key not in record]
        if missing:
            raise SchemaError(
                f"Annotation layer record is missing required fields {missing}; "
                f"expected {list(REQUIRED_FIELDS)}",
                layer=layer,
            )
        return cls(
            labels=record["labels"],
            categories=record["categories"],
            colors=record["colors"],
            description=record["description"],
            exclude_from_legend=record.get("exclude_from_legend", ()),
            name=name,
        )

    @classmethod
    def from_series(
        cls,
        series: pd.Series,
        colors: Mapping[Any, Sequence[float]],
        description: str = "",
        *,
        exclude_from_legend: Iterable[Any] = (),
        name: Optional[str] = None,
    ) -> AnnotationLayer:
        """
        Builds a layer from per-sample values and an ordered category-to-colour mapping.

        Args:
            series (pd.Series): Category per sample, in sample order.
            colors (Mapping[Any, Sequence[float]]): Category -> RGB triple; iteration order is
                the legend order.
            description (str): Strip description. Defaults to "".

        Kwargs:
            exclude_from_legend (Iterable[Any]): Categories hidden from the legend. Defaults to ().
            name (Optional[str]): Display name. Defaults to the series name.

        Returns:
            AnnotationLayer: The layer.
        """
        return cls(
            labels=series.tolist(),
            categories=list(colors.keys()),
            colors=[list(c) for c in colors.values()],
            description=description,
            exclude_from_legend=tuple(exclude_from_legend),
            name=name if name is not None else (None if series.name is None else str(series.name)),
        )

    @property
    def n_samples(self) -> int:
        """Number of per-sample labels."""
        return len(self.labels)

    @property
    def display_name(self) -> str:
        """Name used in notices."""
        return self.name if self.name is not None else "<unnamed>"

    @property
    def color_array(self) -> np.ndarray:
        """Colours as a float (K, 3) array; assumes the layer was validated."""
        return np.asarray(self.colors, dtype=float).reshape(-1, 3)

    @property
    def description_text(self) -> str:
        """The single description string (descriptions may be given as a 1-element sequence)."""
        if isinstance(self.description, str):
            return self.description
        return str(list(self.description)[0])

    def legend_categories(self) -> Tuple[str, ...]:
        """Categories shown in the legend, in legend order."""
        excluded = set(self.exclude_from_legend)
        return tuple(c for c in self.categories if c not in excluded)

    def evolve(self, **changes: Any) -> AnnotationLayer:
        """Returns a copy with `changes` applied."""
        return replace(self, **changes)
