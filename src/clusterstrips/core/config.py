"""
clusterstrips/core/config
~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple


@dataclass(frozen=True)
class LayoutConfig:
    """
    Immutable configuration for a clustergram modification.

    Attributes:
        fontsize (float): Font size for heatmap row labels and the colour bar (6..24).
        legend_fontsize (float): Font size for legends and descriptions (6..11).
        dendrogram_linewidth (float): Line width applied to both dendrograms.
        outer_padding (float): Figure-edge padding as a fraction of the canvas, in [0, 1).
        inner_padding (float): Padding between panels as a fraction of the canvas, in [0, 1).
        resize (bool): Whether to resize the figure to `figsize` before measuring text.
        figsize (Tuple[float, float]): Target figure size in inches, used when `resize` is set.
            Resizing changes the rendered size of row and column labels, so set it here
            rather than after the modification.
        italicize_row_labels (bool): Render heatmap row labels in italics (e.g. gene names).
        column_labels (Tuple[str, ...]): Column labels in the sample order of the annotation
            layers. Only needed when the clustergram was given explicit column labels.
    """

    fontsize: float = 12
    legend_fontsize: float = 9
    dendrogram_linewidth: float = 2.0
    outer_padding: float = 0.07
    inner_padding: float = 0.01
    resize: bool = False
    figsize: Tuple[float, float] = (5.5, 4.5)
    italicize_row_labels: bool = False
    column_labels: Sequence[str] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "column_labels", tuple(str(c) for c in self.column_labels))
        object.__setattr__(self, "figsize", tuple(float(v) for v in self.figsize))

    def validate(self) -> LayoutConfig:
        """
        Checks every option against its allowed range.

        Returns:
            LayoutConfig: This config, unchanged.

        Raises:
            ValueError: If an option is out of range.
        """
        if not 6 <= self.fontsize <= 24:
            raise ValueError(f"fontsize must be within [6, 24], got {self.fontsize}")
        if not 6 <= self.legend_fontsize <= 11:
            raise ValueError(f"legend_fontsize must be within [6, 11], got {self.legend_fontsize}")
        if self.dendrogram_linewidth <= 0:
            raise ValueError("dendrogram_linewidth must be positive")
        for name in ("outer_padding", "inner_padding"):
            value = getattr(self, name)
            if not 0 <= value < 1:
                raise ValueError(f"{name} must be within [0, 1), got {value}")
        if len(self.figsize) != 2 or min(self.figsize) <= 0:
            raise ValueError("figsize must be a (width, height) pair of positive inches")
        return self
