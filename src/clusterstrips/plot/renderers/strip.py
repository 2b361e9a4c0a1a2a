"""
clusterstrips/plot/renderers/strip
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage


def palette_colormap(palette: np.ndarray) -> tuple[ListedColormap, BoundaryNorm]:
    """
    Builds an indexed colormap: integer value i is drawn with palette row i.

    Args:
        palette (np.ndarray): (P, 3) palette, P >= 1.

    Returns:
        tuple[ListedColormap, BoundaryNorm]: Colormap and its normalization.
    """
    n_colors = palette.shape[0]
    cmap = ListedColormap(palette, name="annotation_palette")
    norm = BoundaryNorm(np.arange(n_colors + 1) - 0.5, n_colors)
    return cmap, norm


class StripRenderer:
    """
    Class for rendering one annotation layer as a one-row indexed-colour strip.
    """

    def __init__(self, palette: np.ndarray) -> None:
        """
        Initializes the StripRenderer instance.

        Args:
            palette (np.ndarray): (P, 3) palette shared by all strips.
        """
        self.palette = np.asarray(palette, dtype=float)
        self.cmap, self.norm = palette_colormap(self.palette)

    def render(
        self,
        ax: plt.Axes,
        sample_indices: np.ndarray,
        midpoint: float,
        half_extent: float,
    ) -> AxesImage:
        """
        Draws palette indices (clustering order) as cells aligned to the heatmap columns.

        Args:
            ax (plt.Axes): Strip axis, sharing the heatmap's horizontal extent.
            sample_indices (np.ndarray): Palette index per clustering position.
            midpoint (float): Vertical centre of the strip.
            half_extent (float): Half the strip height.

        Returns:
            AxesImage: The strip image.
        """
        n_samples = len(sample_indices)
        image = ax.imshow(
            np.asarray(sample_indices, dtype=int).reshape(1, -1),
            cmap=self.cmap,
            norm=self.norm,
            aspect="auto",
            interpolation="nearest",
            origin="upper",
            extent=(-0.5, n_samples - 0.5, midpoint - half_extent, midpoint + half_extent),
        )
        ax.set_xlim(-0.5, n_samples - 0.5)
        return image
