"""
clusterstrips/plot/renderers/matrix
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Optional, Tuple, Union, TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import Colormap, Normalize, TwoSlopeNorm
from matplotlib.image import AxesImage

if TYPE_CHECKING:
    from ..style import StyleConfig


def _resolve_color_normalization(
    data: np.ndarray,
    *,
    center: Optional[float] = None,
    vmin: Optional[float] = None,
    vmax: Optional[float] = None,
) -> Tuple[Optional[Normalize], Optional[float], Optional[float]]:
    """
    Resolves color normalization for heatmap rendering.

    Args:
        data (np.ndarray): Matrix data.

    Kwargs:
        center (Optional[float]): Center value for diverging normalization. Defaults to None.
        vmin (Optional[float]): Minimum value override. Defaults to None.
        vmax (Optional[float]): Maximum value override. Defaults to None.

    Returns:
        Tuple[Optional[Normalize], Optional[float], Optional[float]]:
            (norm, imshow_vmin, imshow_vmax)
    """
    if center is not None:
        vmin_ = np.nanmin(data) if vmin is None else vmin
        vmax_ = np.nanmax(data) if vmax is None else vmax
        # TwoSlopeNorm needs vmin < center < vmax
        if not vmin_ < center < vmax_:
            return Normalize(vmin=vmin_, vmax=vmax_), None, None
        norm = TwoSlopeNorm(vmin=vmin_, vcenter=center, vmax=vmax_)
        return norm, None, None

    return None, vmin, vmax


class MatrixRenderer:
    """
    Class for rendering the clustered heatmap.
    """

    def __init__(
        self,
        *,
        cmap: Optional[Union[str, Colormap]] = None,
        center: Optional[float] = None,
        vmin: Optional[float] = None,
        vmax: Optional[float] = None,
    ) -> None:
        """
        Initializes the MatrixRenderer instance.

        Kwargs:
            cmap (Optional[Union[str, Colormap]]): Colormap. Defaults to the style heatmap_cmap.
            center (Optional[float]): Center value for diverging normalization. Defaults to None.
            vmin (Optional[float]): Minimum value override. Defaults to None.
            vmax (Optional[float]): Maximum value override. Defaults to None.
        """
        self.cmap = cmap
        self.center = center
        self.vmin = vmin
        self.vmax = vmax

    def render(self, ax: plt.Axes, data: np.ndarray, style: StyleConfig) -> AxesImage:
        """
        Renders `data` (already in clustering order) with one cell per row and column.

        Args:
            ax (plt.Axes): Target axis.
            data (np.ndarray): 2-D array in display order.
            style (StyleConfig): Style configuration.

        Returns:
            AxesImage: The heatmap image (colour bar source).
        """
        n_rows, n_cols = data.shape
        norm, imshow_vmin, imshow_vmax = _resolve_color_normalization(
            data,
            center=self.center,
            vmin=self.vmin,
            vmax=self.vmax,
        )
        image = ax.imshow(
            data,
            cmap=self.cmap if self.cmap is not None else style["heatmap_cmap"],
            norm=norm,
            vmin=imshow_vmin,
            vmax=imshow_vmax,
            aspect="auto",
            interpolation="nearest",
            origin="upper",
            extent=(-0.5, n_cols - 0.5, n_rows - 0.5, -0.5),
        )
        ax.set_xlim(-0.5, n_cols - 0.5)
        ax.set_ylim(n_rows - 0.5, -0.5)
        outer_lw = style["heatmap_outer_lw"]
        for spine in ax.spines.values():
            spine.set_visible(outer_lw is not None and outer_lw > 0)
            if outer_lw:
                spine.set_linewidth(outer_lw)
                spine.set_color(style["heatmap_outer_color"])
        return image
