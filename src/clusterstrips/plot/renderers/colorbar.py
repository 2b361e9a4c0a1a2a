"""
clusterstrips/plot/renderers/colorbar
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Optional, Sequence, TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.image import AxesImage
from matplotlib.ticker import FuncFormatter

if TYPE_CHECKING:
    from ..style import StyleConfig


def _max_decimal_formatter(max_decimals: int) -> FuncFormatter:
    """
    Creates a formatter that caps decimal precision and trims trailing zeros.

    Args:
        max_decimals (int): Maximum number of decimal places.

    Returns:
        FuncFormatter: Matplotlib tick formatter.
    """

    def _format_value(value: float, _pos: int) -> str:
        text = f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")
        return "0" if text == "-0" else text

    return FuncFormatter(_format_value)


def _colorbar_box(heatmap_ax: plt.Axes, style: StyleConfig) -> Sequence[float]:
    """
    Computes the colour bar box: a thin vertical bar at the figure's left edge, spanning
    the heatmap rows.

    Args:
        heatmap_ax (plt.Axes): Heatmap axis.
        style (StyleConfig): Style configuration.

    Returns:
        Sequence[float]: [x0, y0, width, height] in figure fractions.
    """
    bbox = heatmap_ax.get_position()
    return [style["colorbar_x"], bbox.y0, style["colorbar_width"], bbox.height]


class ColorbarRenderer:
    """
    Class for rendering the heatmap value colour bar.
    """

    def __init__(self, *, fontsize: Optional[float] = None, tick_decimals: Optional[int] = 2) -> None:
        """
        Initializes the ColorbarRenderer instance.

        Kwargs:
            fontsize (Optional[float]): Tick label font size. Defaults to the style tick_fontsize.
            tick_decimals (Optional[int]): Maximum decimals in tick labels. Defaults to 2.
        """
        self.fontsize = fontsize
        self.tick_decimals = tick_decimals

    def render(
        self,
        fig: plt.Figure,
        heatmap_ax: plt.Axes,
        image: AxesImage,
        style: StyleConfig,
    ) -> plt.Axes:
        """
        Renders a colour bar for `image` next to the heatmap rows.

        Args:
            fig (plt.Figure): Matplotlib Figure.
            heatmap_ax (plt.Axes): Heatmap axis; its current position sets the bar height.
            image (AxesImage): Heatmap image providing the colormap and normalization.
            style (StyleConfig): Style configuration.

        Returns:
            plt.Axes: The colour bar axis.
        """
        ax_cb = fig.add_axes(_colorbar_box(heatmap_ax, style), frameon=True)
        cbar = fig.colorbar(image, cax=ax_cb, orientation="vertical")
        if self.tick_decimals is not None:
            cbar.formatter = _max_decimal_formatter(int(self.tick_decimals))
            cbar.update_ticks()
        cbar.outline.set_edgecolor(style["colorbar_border_color"])
        cbar.outline.set_linewidth(style["colorbar_border_width"])
        # Ticks face away from the dendrogram
        ax_cb.yaxis.set_ticks_position("left")
        ax_cb.yaxis.set_label_position("left")
        ax_cb.tick_params(
            axis="y",
            labelsize=self.fontsize if self.fontsize is not None else style["tick_fontsize"],
            colors=style["text_color"],
        )
        return ax_cb
