"""
clusterstrips
~~~~~~~~~~~~~

Categorical colour-annotation strips for clustered heatmaps.
"""

from .api import ModificationResult, modify_clustergram
from .core.config import LayoutConfig
from .core.errors import (
    CardinalityError,
    ClustergramError,
    ColorFormatError,
    LabelMismatchError,
    OrderMismatchError,
    OrderRequiredError,
    SchemaError,
    UnknownColorError,
)
from .core.layers import AnnotationLayer
from .core.matrix import Matrix
from .core.transform import minmax_standardize
from .plot.clustergram import Clustergram
from .util.warnings import TruncationWarning

__all__ = [
    "AnnotationLayer",
    "CardinalityError",
    "Clustergram",
    "ClustergramError",
    "ColorFormatError",
    "LabelMismatchError",
    "LayoutConfig",
    "Matrix",
    "ModificationResult",
    "OrderMismatchError",
    "OrderRequiredError",
    "SchemaError",
    "TruncationWarning",
    "UnknownColorError",
    "minmax_standardize",
    "modify_clustergram",
]

__version__ = "0.1.0"
