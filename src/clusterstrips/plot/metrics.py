"""
clusterstrips/plot/metrics
~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import NamedTuple, Protocol

import matplotlib.pyplot as plt


class TextExtent(NamedTuple):
    """
    Rendered text size as fractions of the figure width and height.
    """

    width: float
    height: float


class TextMetrics(Protocol):
    """
    Measures rendered text. Implementations must be deterministic for a fixed
    (text, font size, canvas) triple.
    """

    def measure(self, text: str, fontsize: float, *, fontstyle: str = "normal") -> TextExtent:
        """
        Measures `text` at `fontsize`.

        Args:
            text (str): Text to measure; may contain line breaks.
            fontsize (float): Font size in points.

        Kwargs:
            fontstyle (str): Matplotlib font style. Defaults to "normal".

        Returns:
            TextExtent: Size in figure-fraction units.
        """
        ...


class FigureTextMetrics:
    """
    Measures text with the renderer of a Matplotlib figure, in that figure's units.
    """

    def __init__(self, fig: plt.Figure) -> None:
        """
        Initializes the FigureTextMetrics instance.

        Args:
            fig (plt.Figure): Figure whose canvas and size define the measurement.
        """
        self.fig = fig

    def measure(self, text: str, fontsize: float, *, fontstyle: str = "normal") -> TextExtent:
        """
        Measures `text` by drawing a temporary text artist on the figure. The figure
        resolves its own renderer, so any canvas backend works.

        Args:
            text (str): Text to measure; mathtext is laid out as it will be drawn.
            fontsize (float): Font size in points.

        Kwargs:
            fontstyle (str): Matplotlib font style. Defaults to "normal".

        Returns:
            TextExtent: Size in figure-fraction units; (0, 0) for empty text.
        """
        if not text:
            return TextExtent(0.0, 0.0)
        artist = self.fig.text(0.0, 0.0, text, fontsize=fontsize, fontstyle=fontstyle)
        try:
            bbox = artist.get_window_extent()
        finally:
            artist.remove()
        fig_bbox = self.fig.bbox
        return TextExtent(bbox.width / fig_bbox.width, bbox.height / fig_bbox.height)
