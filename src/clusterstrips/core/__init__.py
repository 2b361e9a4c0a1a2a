"""
clusterstrips/core
~~~~~~~~~~~~~~~~~~
"""

from .clustering import ClusterOrder, cluster_matrix, compute_linkage
from .config import LayoutConfig
from .errors import (
    CardinalityError,
    ClustergramError,
    ColorFormatError,
    LabelMismatchError,
    OrderMismatchError,
    OrderRequiredError,
    SchemaError,
    UnknownColorError,
)
from .geometry import PanelGeometry, legend_entry_count, plan_geometry, plan_heights, plan_widths
from .layers import AnnotationLayer
from .matrix import Matrix
from .palette import ColorPalette, LayerColors, assign_colors, build_palette, category_index
from .transform import minmax_standardize
from .validation import validate_column_order, validate_layers, validate_sample_count

__all__ = [
    "AnnotationLayer",
    "CardinalityError",
    "ClusterOrder",
    "ClustergramError",
    "ColorFormatError",
    "ColorPalette",
    "LabelMismatchError",
    "LayerColors",
    "LayoutConfig",
    "Matrix",
    "OrderMismatchError",
    "OrderRequiredError",
    "PanelGeometry",
    "SchemaError",
    "UnknownColorError",
    "assign_colors",
    "build_palette",
    "category_index",
    "cluster_matrix",
    "compute_linkage",
    "legend_entry_count",
    "minmax_standardize",
    "plan_geometry",
    "plan_heights",
    "plan_widths",
    "validate_column_order",
    "validate_layers",
    "validate_sample_count",
]
