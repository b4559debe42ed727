"""
Layout for the design engine.
This package implements the simplified box model, content height estimation,
the flat sibling layout pass and flex repositioning.
"""

from .box_metrics import LayoutBox, BoxMetrics
from .box_model import BoxModelCalculator, INLINE_FALLBACK_WIDTH
from .estimator import ContentHeightEstimator, estimate_content_height, estimate_text_lines
from .flex import apply_flex_layout
from .flow import (
    DEFAULT_VIEWPORT, LayoutContext, build_layout_tree, compute_element_layout, compute_height,
    compute_layout, compute_width, flatten_document
)

__all__ = [
    'LayoutBox', 'BoxMetrics', 'BoxModelCalculator', 'INLINE_FALLBACK_WIDTH',
    'ContentHeightEstimator', 'estimate_content_height', 'estimate_text_lines',
    'apply_flex_layout', 'DEFAULT_VIEWPORT', 'LayoutContext', 'build_layout_tree',
    'compute_element_layout', 'compute_height', 'compute_layout', 'compute_width',
    'flatten_document'
]
