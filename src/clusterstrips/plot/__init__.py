"""
clusterstrips/plot
~~~~~~~~~~~~~~~~~~
"""

from .applier import LayoutApplier
from .clustergram import Clustergram
from .metrics import FigureTextMetrics, TextExtent, TextMetrics
from .style import DEFAULT_STYLE, StyleConfig

__all__ = [
    "Clustergram",
    "DEFAULT_STYLE",
    "FigureTextMetrics",
    "LayoutApplier",
    "StyleConfig",
    "TextExtent",
    "TextMetrics",
]
