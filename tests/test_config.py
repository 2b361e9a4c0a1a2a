"""
tests/test_config
~~~~~~~~~~~~~~~~~
"""

import pytest

from clusterstrips import LayoutConfig


@pytest.mark.api
def test_defaults_validate():
    """
    Ensures the default configuration is valid.
    """
    config = LayoutConfig()
    assert config.validate() is config
    assert config.column_labels == ()


@pytest.mark.api
@pytest.mark.parametrize(
    "options",
    [
        {"fontsize": 5},
        {"fontsize": 25},
        {"legend_fontsize": 12},
        {"dendrogram_linewidth": 0},
        {"outer_padding": 1.0},
        {"inner_padding": -0.1},
        {"figsize": (0, 4)},
    ],
)
def test_out_of_range_options_raise(options):
    """
    Ensures options outside their allowed range raise ValueError.
    """
    with pytest.raises(ValueError):
        LayoutConfig(**options).validate()


@pytest.mark.unit
def test_column_labels_become_strings():
    """
    Ensures column labels are stored as a tuple of strings.
    """
    config = LayoutConfig(column_labels=[3, 1, 2])
    assert config.column_labels == ("3", "1", "2")
