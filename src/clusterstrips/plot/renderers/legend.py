"""
clusterstrips/plot/renderers/legend
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import List, Optional, Sequence, TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.text import Text

from ...text.formatting import to_mathtext

if TYPE_CHECKING:
    from ..style import StyleConfig


class LegendRenderer:
    """
    Class for rendering annotation legends (marker plus category text) and strip
    descriptions.
    """

    def __init__(self, fontsize: float) -> None:
        """
        Initializes the LegendRenderer instance.

        Args:
            fontsize (float): Font size of legend entries and descriptions.
        """
        self.fontsize = fontsize

    def render_entries(
        self,
        ax: plt.Axes,
        categories: Sequence[str],
        colors: Sequence[Sequence[float]],
        y_positions: Sequence[float],
        style: StyleConfig,
    ) -> List[Text]:
        """
        Draws one legend row per category.

        Args:
            ax (plt.Axes): Legend axis.
            categories (Sequence[str]): Category names, top to bottom.
            colors (Sequence[Sequence[float]]): RGB colour per category.
            y_positions (Sequence[float]): y coordinate per category.
            style (StyleConfig): Style configuration.

        Returns:
            List[Text]: The category text artists.
        """
        texts = []
        for category, color, y in zip(categories, colors, y_positions):
            rgb = tuple(float(c) for c in color)
            ax.plot(
                0.0,
                y,
                linestyle="none",
                marker=style["legend_marker"],
                markersize=style["legend_marker_size"],
                markerfacecolor=rgb,
                markeredgecolor=rgb,
            )
            texts.append(
                ax.text(
                    style["legend_text_x"],
                    y,
                    category,
                    fontsize=self.fontsize,
                    color=style["text_color"],
                    ha="left",
                    va="center",
                )
            )
        return texts

    def render_description(
        self,
        ax: plt.Axes,
        description: str,
        y: float,
        style: StyleConfig,
    ) -> Optional[Text]:
        """
        Draws a strip description, left aligned and vertically centred at `y`.

        Args:
            ax (plt.Axes): Description axis.
            description (str): Description, possibly wrapped and with italic markup.
            y (float): Vertical centre.
            style (StyleConfig): Style configuration.

        Returns:
            Optional[Text]: The text artist, or None for an empty description.
        """
        if not description:
            return None
        return ax.text(
            0.0,
            y,
            to_mathtext(description),
            fontsize=self.fontsize,
            color=style["text_color"],
            ha="left",
            va="center",
        )
