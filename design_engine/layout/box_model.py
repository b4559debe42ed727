"""
Simplified CSS box model.

Widths and heights are resolved from the effective style without a
constraint solver; missing heights are estimated from content.
"""

import logging
import math
from typing import Any, Mapping, Optional

from ..css.values import parse_border, parse_float, parse_pixel_value, parse_spacing
from .box_metrics import BoxMetrics, LayoutBox
from .estimator import ContentHeightEstimator

logger = logging.getLogger(__name__)

# Estimated intrinsic width of an auto-width inline element
INLINE_FALLBACK_WIDTH = 100

INLINE_LEVEL_DISPLAYS = {'inline', 'inline-block', 'inline-flex', 'inline-grid', 'inline-table'}


def is_inline_level(styles: Mapping[str, Any]) -> bool:
    return styles.get('display') in INLINE_LEVEL_DISPLAYS


def _is_auto(value: Any) -> bool:
    return not value or value == 'auto'


class BoxModelCalculator:
    """Computes layout boxes from effective styles."""

    def __init__(self, estimator: Optional[ContentHeightEstimator] = None):
        self.estimator = estimator or ContentHeightEstimator()

    def resolve_width(self, styles: Mapping[str, Any], parent_content_width: float) -> float:
        """
        Resolve the outer width of an element.

        An explicit length wins, then a percentage of the parent content
        width. Auto (or unusable) widths fill the parent minus horizontal
        margins for block-level elements and fall back to a fixed estimate
        for inline-level ones.
        """
        width = styles.get('width')

        if not _is_auto(width):
            text = str(width).strip()
            if text.endswith('%'):
                percent = parse_float(text)
                if not math.isnan(percent):
                    return percent / 100 * parent_content_width
            else:
                explicit = parse_pixel_value(text)
                if explicit:
                    return explicit

        if is_inline_level(styles):
            return INLINE_FALLBACK_WIDTH

        margin = parse_spacing(styles.get('margin'))
        return parent_content_width - margin.left - margin.right

    def resolve_height(self, element, styles: Mapping[str, Any]) -> float:
        height = styles.get('height')
        if not _is_auto(height):
            explicit = parse_pixel_value(height)
            if explicit:
                return explicit
        return self.estimator.estimate_height(element, styles)

    def compute_metrics(self, element, styles: Mapping[str, Any], parent_content_width: float,
                        offset_x: float, offset_y: float) -> BoxMetrics:
        """
        Compute unrounded box metrics.

        Args:
            element: Source element (used for content-height estimation)
            styles: Effective style
            parent_content_width: Content width of the containing element
            offset_x: Absolute x where the margin box starts
            offset_y: Absolute y where the margin box starts

        Returns:
            BoxMetrics in root viewport coordinates
        """
        margin = parse_spacing(styles.get('margin'))
        padding = parse_spacing(styles.get('padding'))
        border = parse_border(styles.get('border'))

        return BoxMetrics(
            x=offset_x + margin.left,
            y=offset_y + margin.top,
            width=self.resolve_width(styles, parent_content_width),
            height=self.resolve_height(element, styles),
            margin=margin,
            padding=padding,
            border=border,
        )

    def compute_box(self, element, styles: Mapping[str, Any], parent_content_width: float,
                    offset_x: float, offset_y: float) -> LayoutBox:
        """Compute the rounded layout box (with its content box) of an element."""
        return self.compute_metrics(element, styles, parent_content_width, offset_x, offset_y).to_layout_box()
