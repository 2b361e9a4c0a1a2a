"""Clustergram and annotation renderers."""

from .axes import AxesRenderer
from .colorbar import ColorbarRenderer
from .dendrogram import DendrogramRenderer
from .legend import LegendRenderer
from .matrix import MatrixRenderer
from .strip import StripRenderer, palette_colormap

__all__ = [
    "AxesRenderer",
    "ColorbarRenderer",
    "DendrogramRenderer",
    "LegendRenderer",
    "MatrixRenderer",
    "StripRenderer",
    "palette_colormap",
]
