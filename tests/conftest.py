"""
tests/conftest
~~~~~~~~~~~~~~
"""

import re

import matplotlib

# Non-interactive backend for headless testing
matplotlib.use("Agg", force=True)

import matplotlib.pyplot as plt
import numpy as np
import pytest

from clusterstrips import AnnotationLayer, Clustergram
from clusterstrips.plot.metrics import TextExtent
from clusterstrips.text.formatting import visible_text

SUBTYPE_LABELS = ["A", "A", "B", "B", "B", "A", "A", "B", "B", "A"]
RED = [1.0, 0.0, 0.0]
GREEN = [0.0, 1.0, 0.0]
BLUE = [0.0, 0.0, 1.0]


def _plain(line):
    """Displayed characters of a line that may hold italic markup or mathtext."""
    line = re.sub(r"\$\\mathit\{(.*?)\}\$", r"\1", line).replace("\\ ", " ")
    return visible_text(line)


class FakeTextMetrics:
    """
    Deterministic text metrics: width grows with the longest line, height with the
    number of lines, both linear in font size.
    """

    char_width = 0.005
    line_height = 0.03

    def __init__(self):
        self.calls = []

    def measure(self, text, fontsize, *, fontstyle="normal"):
        self.calls.append((text, fontsize, fontstyle))
        if not text:
            return TextExtent(0.0, 0.0)
        lines = [_plain(line) for line in text.split("\n")]
        scale = fontsize / 10.0
        return TextExtent(
            self.char_width * max(len(line) for line in lines) * scale,
            self.line_height * len(lines) * scale,
        )


@pytest.fixture
def fake_metrics():
    """
    Returns deterministic text metrics.

    Returns:
        FakeTextMetrics: Metrics independent of any canvas.
    """
    return FakeTextMetrics()


@pytest.fixture
def subtype_layer():
    """
    Returns a two-category layer over ten samples.

    Returns:
        AnnotationLayer: Red "A" / green "B" layer.
    """
    return AnnotationLayer(
        labels=SUBTYPE_LABELS,
        categories=["A", "B"],
        colors=[RED, GREEN],
        description="Subtype",
        name="subtype",
    )


@pytest.fixture
def batch_layer():
    """
    Returns a second layer sharing the colour green with `subtype_layer`.

    Returns:
        AnnotationLayer: Green "x" / blue "y" layer.
    """
    return AnnotationLayer(
        labels=["x", "y"] * 5,
        categories=["x", "y"],
        colors=[GREEN, BLUE],
        description="Batch",
        name="batch",
    )


@pytest.fixture
def toy_values():
    """
    Returns a reproducible 6 x 10 feature-by-sample matrix.

    Returns:
        np.ndarray: Random normal values.
    """
    rng = np.random.default_rng(0)
    return rng.normal(size=(6, 10))


@pytest.fixture
def clustergram(toy_values):
    """
    Returns a titled clustergram over the toy matrix, with default column labels "1".."10".

    Args:
        toy_values (np.ndarray): Toy matrix.

    Yields:
        Clustergram: Clustergram instance; its figure is closed afterwards.
    """
    cg = Clustergram(toy_values, title="Toy clustergram")
    yield cg
    cg.close()


@pytest.fixture(autouse=True)
def _close_figures():
    """
    Closes all figures after each test.
    """
    yield
    plt.close("all")
