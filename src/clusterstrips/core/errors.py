"""
clusterstrips/core/errors
~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Optional


class ClustergramError(Exception):
    """
    Base class for annotation and layout errors. Carries the offending layer index when known.
    """

    def __init__(self, message: str, *, layer: Optional[int] = None) -> None:
        """
        Initializes the ClustergramError instance.

        Args:
            message (str): Error description.

        Kwargs:
            layer (Optional[int]): Zero-based index of the offending annotation layer.
                Defaults to None.
        """
        self.layer = layer
        if layer is not None:
            message = f"{message} (layer {layer})"
        super().__init__(message)


class SchemaError(ClustergramError, ValueError):
    """A layer record is missing a required field."""


class CardinalityError(ClustergramError, ValueError):
    """Colours, categories, labels, or descriptions have inconsistent counts."""


class ColorFormatError(ClustergramError, TypeError):
    """Colours are non-numeric, wrongly shaped, or out of range."""


class LabelMismatchError(ClustergramError, ValueError):
    """Categories do not match the distinct per-sample labels."""


class OrderRequiredError(ClustergramError, ValueError):
    """Column labels are required to recover the sample order but were not given."""


class OrderMismatchError(ClustergramError, ValueError):
    """Given column labels differ from the clustergram's column labels."""


class UnknownColorError(ClustergramError, LookupError):
    """A category colour is absent from the global palette."""
