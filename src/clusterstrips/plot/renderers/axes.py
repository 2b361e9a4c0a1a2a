"""Heatmap tick and title renderers."""

from __future__ import annotations

from typing import Any, Sequence

import matplotlib.pyplot as plt
import numpy as np


class AxesRenderer:
    """
    Class for rendering heatmap tick labels and the clustergram title.
    """

    def __init__(self, kind: str, **kwargs: Any) -> None:
        """
        Initializes the AxesRenderer instance.
        """
        self.kind = kind
        self.kwargs = dict(kwargs)

    def render(self, ax: plt.Axes, style: Any) -> None:
        if self.kind == "row_ticks":
            self._render_row_ticks(ax, style)
            return
        if self.kind == "col_ticks":
            self._render_col_ticks(ax, style)
            return
        if self.kind == "title":
            self._render_title(ax, style)
            return
        raise NotImplementedError(f"Unknown axes layer: {self.kind}")

    def _render_row_ticks(self, ax: plt.Axes, style: Any) -> None:
        labels: Sequence[str] = self.kwargs["labels"]
        font_size = self.kwargs.get("fontsize", style.get("tick_fontsize", 9))
        italic = self.kwargs.get("italic", False)

        ax.set_yticks(np.arange(len(labels)))
        ax.set_yticklabels(
            list(labels),
            fontsize=font_size,
            fontstyle="italic" if italic else "normal",
            color=style.get("text_color", "black"),
        )
        # Row labels sit on the right, opposite the row dendrogram
        ax.tick_params(
            axis="y",
            which="both",
            left=False,
            right=False,
            labelleft=False,
            labelright=True,
        )

    def _render_col_ticks(self, ax: plt.Axes, style: Any) -> None:
        labels: Sequence[str] = self.kwargs["labels"]
        font_size = self.kwargs.get("fontsize", style.get("tick_fontsize", 9))
        rotation = self.kwargs.get("rotation", style.get("col_tick_rotation", 90))

        ax.set_xticks(np.arange(len(labels)))
        ax.set_xticklabels(
            list(labels),
            fontsize=font_size,
            rotation=rotation,
            color=style.get("text_color", "black"),
        )
        ax.tick_params(
            axis="x",
            which="both",
            top=False,
            bottom=False,
            labeltop=False,
            labelbottom=True,
        )

    def _render_title(self, ax: plt.Axes, style: Any) -> None:
        ax.set_axis_off()
        title = self.kwargs.get("title")
        if not title:
            return
        ax.text(
            0.5,
            0.5,
            title,
            transform=ax.transAxes,
            ha="center",
            va="center",
            fontsize=self.kwargs.get("fontsize", style.get("title_fontsize", 12)),
            color=self.kwargs.get("color", style.get("text_color", "black")),
        )
