"""
clusterstrips/plot/style
~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence, TypeAlias, TypedDict, Union

from matplotlib.colors import Colormap

# Type alias for style values
StyleValue: TypeAlias = Union[
    str,
    float,
    int,
    bool,
    None,
    Sequence[float],
    Sequence[str],
    Mapping[str, float],
    Colormap,
]


class StyleDefaults(TypedDict):
    """
    Type class for clustergram style defaults.
    """

    figsize: tuple[float, float]
    title_axes: Sequence[float]
    col_dendro_axes: Sequence[float]
    row_dendro_axes: Sequence[float]
    heatmap_axes: Sequence[float]
    dendro_color: str
    dendro_lw: float
    dendro_data_pad: float
    heatmap_cmap: Union[str, Colormap]
    heatmap_outer_lw: float
    heatmap_outer_color: str
    tick_fontsize: float
    col_tick_rotation: float
    title_fontsize: float
    text_color: str
    background: str
    colorbar_x: float
    colorbar_width: float
    colorbar_border_color: str
    colorbar_border_width: float
    legend_marker: str
    legend_marker_size: float
    legend_text_x: float
    legend_xlim: Sequence[float]


DEFAULT_STYLE: StyleDefaults = {
    # Figure size (inches) for a new clustergram
    "figsize": (6.0, 5.0),
    # Initial axes boxes [x0, y0, w, h] in figure fractions
    "title_axes": [0.0, 0.90, 1.0, 0.10],
    "col_dendro_axes": [0.25, 0.72, 0.55, 0.15],
    "row_dendro_axes": [0.10, 0.12, 0.15, 0.60],
    "heatmap_axes": [0.25, 0.12, 0.55, 0.60],
    # Dendrograms
    "dendro_color": "#222222",
    "dendro_lw": 1.0,
    "dendro_data_pad": 0.02,
    # Heatmap
    "heatmap_cmap": "RdBu_r",
    "heatmap_outer_lw": 0.0,
    "heatmap_outer_color": "black",
    "tick_fontsize": 9,
    "col_tick_rotation": 90,
    # Text
    "title_fontsize": 12,
    "text_color": "black",
    # Figure background after modification
    "background": "white",
    # Colour bar, placed at the figure's left edge alongside the heatmap rows
    "colorbar_x": 0.01,
    "colorbar_width": 0.02,
    "colorbar_border_color": "black",
    "colorbar_border_width": 0.8,
    # Legend entries: marker at x=0, text at legend_text_x (legend data coordinates)
    "legend_marker": "o",
    "legend_marker_size": 5,
    "legend_text_x": 0.1,
    "legend_xlim": (-0.1, 1.0),
}


class StyleConfig:
    """
    Class for storing plot style defaults and overrides.
    """

    def __init__(self, defaults: Optional[Mapping[str, StyleValue]] = None) -> None:
        """
        Initializes the StyleConfig instance.

        Args:
            defaults (Optional[Mapping[str, StyleValue]]): Base style defaults. Defaults to None.
        """
        if defaults is None:
            defaults = DEFAULT_STYLE
        self._defaults: Dict[str, StyleValue] = dict(defaults)
        self._overrides: Dict[str, StyleValue] = {}

    def get(self, key: str, default: Optional[StyleValue] = None) -> StyleValue:
        """
        Gets a style value with override priority.

        Args:
            key (str): Style key.
            default (Optional[StyleValue]): Default value if key not found. Defaults to None.

        Returns:
            StyleValue: Resolved style value.
        """
        if key in self._overrides:
            return self._overrides[key]
        return self._defaults.get(key, default)

    def set(self, key: str, value: StyleValue) -> None:
        """
        Overrides a style value.

        Args:
            key (str): Style key.
            value (StyleValue): Style value to set.
        """
        self._overrides[key] = value

    def update(self, overrides: Mapping[str, StyleValue]) -> None:
        """
        Applies multiple overrides at once.

        Args:
            overrides (Mapping[str, StyleValue]): Mapping of style keys to values.
        """
        for key, value in overrides.items():
            self._overrides[key] = value

    def as_dict(self) -> Dict[str, StyleValue]:
        """
        Returns a merged view of defaults and overrides.

        Returns:
            Dict[str, StyleValue]: Merged style dictionary.
        """
        merged = dict(self._defaults)
        merged.update(self._overrides)
        return merged

    def __getitem__(self, key: str) -> StyleValue:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._overrides or key in self._defaults


def resolve_style(style: Union[StyleConfig, Mapping[str, StyleValue], None]) -> StyleConfig:
    """
    Returns a StyleConfig from a StyleConfig, a mapping of overrides, or None.

    Args:
        style (Union[StyleConfig, Mapping[str, StyleValue], None]): Style or overrides.

    Returns:
        StyleConfig: Resolved style.
    """
    if isinstance(style, StyleConfig):
        return style
    resolved = StyleConfig()
    if style:
        resolved.update(style)
    return resolved
