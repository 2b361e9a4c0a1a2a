"""Label truncation and description wrapping for annotation strips."""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence

from ..core.layers import AnnotationLayer
from ..util.warnings import TruncationWarning, warn

MAX_LABEL_LENGTH = 15
DESCRIPTION_BREAK = 15
ITALIC_TOKEN = r"{\it"

_ITALIC_RUN = re.compile(r"\{\\it\s?([^{}]*)\}")
_WHITESPACE = re.compile(r"\s")
# Characters with a meaning inside mathtext, mapped to literal glyphs
_MATHTEXT_ESCAPES = str.maketrans(
    {
        "\\": r"\backslash{}",
        "_": r"\_",
        "%": r"\%",
        "$": r"\$",
        "#": r"\#",
        "{": r"\{",
        "}": r"\}",
        "^": "ˆ",
        "~": "˜",
        " ": r"\ ",
    }
)


def _visible_positions(text: str) -> List[int]:
    """
    Indices of the characters of `text` that are displayed, i.e. not italic markup.

    Args:
        text (str): Text possibly containing `{\\it ...}` runs.

    Returns:
        List[int]: Indices into `text` of visible characters, in order.
    """
    hidden = set()
    for match in _ITALIC_RUN.finditer(text):
        hidden.update(range(match.start(), match.start(1)))
        hidden.add(match.end() - 1)
    # Unterminated markup tokens are hidden too
    for match in re.finditer(re.escape(ITALIC_TOKEN), text):
        hidden.update(range(match.start(), match.end()))
    return [i for i in range(len(text)) if i not in hidden]


def visible_text(text: str) -> str:
    """
    Returns `text` without italic markup.

    Args:
        text (str): Text possibly containing `{\\it ...}` runs.

    Returns:
        str: Displayed characters only.
    """
    return "".join(text[i] for i in _visible_positions(text))


def longest_line(text: str, *, keep_markup: bool = False) -> str:
    """
    Returns the visibly longest line of a (possibly wrapped) text. Ties keep the first line.

    Args:
        text (str): Text possibly containing line breaks and italic markup.

    Kwargs:
        keep_markup (bool): Whether to return the line with its italic markup.
            Defaults to False.

    Returns:
        str: Longest line, with markup removed unless `keep_markup` is set.
    """
    lines = text.split("\n")
    best = max(lines, key=lambda line: len(visible_text(line)))
    return best if keep_markup else visible_text(best)


def longest_text(strings: Iterable[str]) -> str:
    """
    Returns the longest string; ties keep the first occurrence.

    Args:
        strings (Iterable[str]): Candidate strings in enumeration order.

    Returns:
        str: Longest string, or "" if there are none.
    """
    best = ""
    for s in strings:
        if len(s) > len(best):
            best = s
    return best


def truncate_text(text: str, max_length: int = MAX_LABEL_LENGTH) -> str:
    """Cuts `text` to `max_length` characters."""
    return text[:max_length]


def truncate_category(
    layer: AnnotationLayer,
    category: str,
    *,
    max_length: int = MAX_LABEL_LENGTH,
) -> AnnotationLayer:
    """
    Truncates one category of a layer and rewrites the matching per-sample labels.

    Labels equal to the original category (case-insensitive) are replaced by the
    truncated category so that labels and categories stay consistent. Categories
    already within the limit are returned unchanged, so the operation is idempotent.

    Args:
        layer (AnnotationLayer): Layer holding the category.
        category (str): Category to truncate.

    Kwargs:
        max_length (int): Maximum category length. Defaults to 15.

    Returns:
        AnnotationLayer: Layer with the category, its labels, and any legend exclusion
            rewritten.
    """
    if len(category) <= max_length:
        return layer
    short = truncate_text(category, max_length)
    key = category.casefold()

    def _rewrite(values: Sequence[str]) -> tuple:
        return tuple(short if v.casefold() == key else v for v in values)

    warn(
        f"Label {category!r} of annotation layer {layer.display_name} is too long, "
        f"truncating to {max_length} characters: {short!r}",
        TruncationWarning,
        stacklevel=3,
    )
    return layer.evolve(
        labels=_rewrite(layer.labels),
        categories=_rewrite(layer.categories),
        exclude_from_legend=_rewrite(layer.exclude_from_legend),
    )


def wrap_description(description: str, *, width: int = DESCRIPTION_BREAK) -> str:
    """
    Breaks a long description into two lines.

    The break replaces the first whitespace at or after the `width`-th visible
    character (italic markup is not counted). The text is then clipped so that it
    ends at twice the break position, which keeps the second line no longer than
    twice the first. Descriptions that already contain a line break, or that have
    no whitespace after the break position, are returned unchanged.

    Args:
        description (str): Description text.

    Kwargs:
        width (int): Visible length above which the description is wrapped. Defaults to 15.

    Returns:
        str: Wrapped description.
    """
    if "\n" in description:
        return description
    positions = _visible_positions(description)
    visible = "".join(description[i] for i in positions)
    if len(visible) <= width:
        return description
    match = _WHITESPACE.search(visible, width - 1)
    if match is None:
        return description

    k = match.start()
    end = min(2 * (k + 1), len(visible))
    raw_break = positions[k]
    raw_end = positions[end - 1] + 1 if end > k + 1 else raw_break + 1
    wrapped = description[:raw_break] + "\n" + description[raw_break + 1 : raw_end]
    # Re-close an italic run cut by the clip
    if wrapped.count(ITALIC_TOKEN) > wrapped.count("}"):
        wrapped += "}"
    return wrapped


def format_layer(layer: AnnotationLayer) -> AnnotationLayer:
    """
    Applies the display policy to a validated layer: long categories are truncated and
    the description is wrapped.

    Args:
        layer (AnnotationLayer): Validated layer.

    Returns:
        AnnotationLayer: Display-ready layer.
    """
    for category in layer.categories:
        layer = truncate_category(layer, category)
    return layer.evolve(description=wrap_description(layer.description_text))


def truncate_row_labels(
    labels: Sequence[str],
    *,
    max_length: int = MAX_LABEL_LENGTH,
) -> List[str]:
    """
    Truncates heatmap row labels longer than `max_length`, emitting a notice for each.

    Args:
        labels (Sequence[str]): Row labels.

    Kwargs:
        max_length (int): Maximum label length. Defaults to 15.

    Returns:
        List[str]: Truncated labels.
    """
    out = []
    for label in labels:
        label = str(label)
        if len(label) > max_length:
            warn(
                f"Row label {label!r} is too long, truncating to {max_length} characters",
                TruncationWarning,
                stacklevel=3,
            )
            label = truncate_text(label, max_length)
        out.append(label)
    return out


def to_mathtext(text: str) -> str:
    """
    Converts `{\\it ...}` runs to Matplotlib mathtext italics so they render as such.

    Args:
        text (str): Text possibly containing italic markup.

    Returns:
        str: Text suitable for `Axes.text`.
    """

    def _italic(match: re.Match) -> str:
        body = match.group(1).translate(_MATHTEXT_ESCAPES)
        return rf"$\mathit{{{body}}}$" if body else ""

    lines = [_ITALIC_RUN.sub(_italic, line).replace(ITALIC_TOKEN, "") for line in text.split("\n")]
    return "\n".join(lines)
