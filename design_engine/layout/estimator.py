"""
Content height estimation.

No text is measured: the number of lines is approximated from the character
count, assuming every character is half the font size wide.

Two call sites estimate heights with different line-height fallbacks. The
document conversion pass (``ContentHeightEstimator``) uses ``fontSize * 1.4``
and falls back to 22px; the flat sibling layout pass
(``estimate_content_height``) uses ``fontSize * 1.2`` and falls back to
19.2px. Both are kept as they are.
"""

import math
from typing import Any, Mapping, Optional

from ..css.values import parse_pixel_value, parse_spacing

DEFAULT_FONT_SIZE = 16
CHAR_WIDTH_FACTOR = 0.5
DEFAULT_CONTAINER_WIDTH = 1000

LINE_HEIGHT_FACTOR = 1.4
FALLBACK_LINE_HEIGHT = 22

FLOW_LINE_HEIGHT_FACTOR = 1.2
FLOW_FALLBACK_LINE_HEIGHT = 19.2


def _line_height(styles: Mapping[str, Any], factor: float, fallback: float) -> float:
    return (parse_pixel_value(styles.get('lineHeight'))
            or parse_pixel_value(styles.get('fontSize')) * factor
            or fallback)


def estimate_text_lines(text: Optional[str], styles: Mapping[str, Any]) -> int:
    """
    Approximate how many lines a run of text wraps to.

    The container width is the element's explicit ``width`` in pixels, or
    1000px when there is none.
    """
    if not text:
        return 1

    font_size = parse_pixel_value(styles.get('fontSize')) or DEFAULT_FONT_SIZE
    char_width = font_size * CHAR_WIDTH_FACTOR
    container_width = parse_pixel_value(styles.get('width')) or DEFAULT_CONTAINER_WIDTH

    # A container narrower than one character still holds one per line
    chars_per_line = max(1, math.floor(container_width / char_width))
    return max(1, math.ceil(len(text) / chars_per_line))


class ContentHeightEstimator:
    """Estimates element heights for the document conversion pass."""

    def line_height(self, styles: Mapping[str, Any]) -> float:
        return _line_height(styles, LINE_HEIGHT_FACTOR, FALLBACK_LINE_HEIGHT)

    def estimate_height(self, element, styles: Mapping[str, Any]) -> float:
        """
        Estimate the outer height of an element without an explicit height.

        Args:
            element: Element exposing ``direct_text`` and
                ``child_element_count``
            styles: The element's effective style

        Returns:
            Estimated content height plus vertical padding
        """
        padding = parse_spacing(styles.get('padding'))
        line_height = self.line_height(styles)

        text = getattr(element, 'direct_text', None)
        child_count = getattr(element, 'child_element_count', 0)

        if text:
            content_height = estimate_text_lines(text, styles) * line_height
        elif child_count > 0:
            # One line per child; not a real flow computation
            content_height = max(line_height, child_count * line_height)
        else:
            content_height = line_height

        return content_height + padding.top + padding.bottom


def estimate_content_height(element: Mapping[str, Any], styles: Mapping[str, Any]) -> float:
    """
    Estimate a height for the flat layout pass.

    Args:
        element: Flat element record with an optional ``text_content``
        styles: The element's computed styles

    Returns:
        Estimated content height plus vertical padding
    """
    padding = parse_spacing(styles.get('padding'))
    line_height = _line_height(styles, FLOW_LINE_HEIGHT_FACTOR, FLOW_FALLBACK_LINE_HEIGHT)

    text = element.get('text_content')
    if text:
        content_height = estimate_text_lines(text, styles) * line_height
    else:
        content_height = line_height

    return content_height + padding.top + padding.bottom
