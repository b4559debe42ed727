"""
Flat sibling layout pass.

Lays out a flat list of element records (as produced by
``flatten_document``) by stacking block elements vertically. This pass is
independent of the tree assembler and keeps its own height estimation
(``estimate_content_height``, 1.2 line-height factor).
"""

import logging
import math
from collections import deque
from typing import Any, Dict, List, Mapping, Optional

from ..dom.node import NodeType
from ..css.values import parse_border, parse_float, parse_pixel_value, parse_spacing, round_half_up
from .box_model import INLINE_FALLBACK_WIDTH
from .estimator import estimate_content_height

logger = logging.getLogger(__name__)

DEFAULT_VIEWPORT = {'width': 1200, 'height': 800}

SKIP_TAGS = {'script', 'style', 'noscript', 'meta', 'link'}


class LayoutContext:
    """Running state of one flat layout pass."""

    def __init__(self, viewport: Optional[Mapping[str, int]] = None):
        self.viewport = dict(viewport or DEFAULT_VIEWPORT)
        self.current_y = 0.0
        # Entries: {'x', 'padding_left', 'current_y'}
        self.parent_stack: List[Dict[str, float]] = []


def _styles(element: Mapping[str, Any]) -> Mapping[str, Any]:
    return element.get('computed_styles') or {}


def compute_width(styles: Mapping[str, Any], parent_width: float) -> float:
    """
    Width of an element in the flat pass.

    Auto widths fill the parent (minus margins) only for ``display: block``
    or a missing display; every other display gets the inline estimate.
    """
    width = styles.get('width')

    if not width or width == 'auto':
        display = styles.get('display')
        if display == 'block' or not display:
            margin = parse_spacing(styles.get('margin'))
            return parent_width - margin.left - margin.right
        return INLINE_FALLBACK_WIDTH

    if isinstance(width, str) and width.endswith('%'):
        percent = parse_float(width)
        return 0 if math.isnan(percent) else percent / 100 * parent_width

    return parse_pixel_value(width)


def compute_height(styles: Mapping[str, Any], element: Mapping[str, Any]) -> float:
    height = styles.get('height')
    if not height or height == 'auto':
        return estimate_content_height(element, styles)
    return parse_pixel_value(height)


def compute_element_layout(element: Mapping[str, Any], context: LayoutContext) -> Dict[str, Any]:
    """
    Lay out one element and advance the context.

    Args:
        element: Flat element record
        context: Pass state; ``current_y`` moves below block elements

    Returns:
        Layout dictionary with ``x``, ``y``, ``w``, ``h`` and ``contentBox``
    """
    styles = _styles(element)

    width = compute_width(styles, context.viewport['width'])
    height = compute_height(styles, element)

    margin = parse_spacing(styles.get('margin'))
    padding = parse_spacing(styles.get('padding'))
    border = parse_border(styles.get('border') or styles.get('borderWidth'))

    display = styles.get('display') or 'block'
    x = margin.left
    y = context.current_y + margin.top

    if context.parent_stack:
        parent = context.parent_stack[-1]
        x += parent['x'] + parent['padding_left']
        y = parent['current_y'] + margin.top

    content_width = width - padding.left - padding.right - border.width * 2
    content_height = height - padding.top - padding.bottom - border.width * 2

    if display == 'block':
        context.current_y = y + height + margin.bottom

    return {
        'x': round_half_up(x),
        'y': round_half_up(y),
        'w': round_half_up(width),
        'h': round_half_up(height),
        'contentBox': {
            'x': round_half_up(x + padding.left + border.width),
            'y': round_half_up(y + padding.top + border.width),
            'w': round_half_up(content_width),
            'h': round_half_up(content_height),
        }
    }


def compute_layout(elements: List[Mapping[str, Any]],
                   viewport: Optional[Mapping[str, int]] = None) -> List[Dict[str, Any]]:
    """Attach a ``layout`` to every element of a flat list."""
    context = LayoutContext(viewport)

    laid_out = []
    for element in elements:
        record = dict(element)
        record['layout'] = compute_element_layout(element, context)
        laid_out.append(record)

    return laid_out


def build_layout_tree(elements: List[Mapping[str, Any]],
                      viewport: Optional[Mapping[str, int]] = None) -> Optional[Dict[str, Any]]:
    """
    Build a two-level tree from a flat list.

    The first element becomes a viewport-sized root; every following element
    is stacked vertically below the previous one as a direct child of it.

    Returns:
        The root record, or None for an empty list
    """
    if not elements:
        return None

    viewport = dict(viewport or DEFAULT_VIEWPORT)

    root = dict(elements[0])
    root['layout'] = {'x': 0, 'y': 0, 'w': viewport['width'], 'h': viewport['height']}
    root['children'] = []

    current_y = 0.0
    for element in elements[1:]:
        styles = _styles(element)

        width = compute_width(styles, root['layout']['w'])
        height = compute_height(styles, element)
        margin = parse_spacing(styles.get('margin'))

        x = root['layout']['x'] + margin.left
        y = current_y + margin.top
        current_y = y + height + margin.bottom

        node = dict(element)
        node['layout'] = {
            'x': round_half_up(x),
            'y': round_half_up(y),
            'w': round_half_up(width),
            'h': round_half_up(height),
        }
        node['children'] = []
        root['children'].append(node)

    return root


def flatten_document(document, css_rules, resolver) -> List[Dict[str, Any]]:
    """
    Collect the elements under ``body`` breadth-first as flat records.

    Args:
        document: A DocumentSnapshot
        css_rules: Rules passed to the resolver
        resolver: StyleResolver computing each element's styles

    Returns:
        Records with ``tag_name``, ``id``, ``class_list``, ``attributes``,
        ``text_content`` (only for elements whose single child is text),
        ``depth`` and ``computed_styles``
    """
    body = document.body
    if body is None:
        return []

    records = []
    queue = deque([(body, 0)])

    while queue:
        element, depth = queue.popleft()

        if element.tag_name not in SKIP_TAGS:
            child_nodes = element.child_nodes
            text_content = None
            if len(child_nodes) == 1 and child_nodes[0].node_type == NodeType.TEXT_NODE:
                text_content = child_nodes[0].text_content.strip()

            records.append({
                'tag_name': element.tag_name,
                'id': element.id,
                'class_list': element.class_list,
                'attributes': element.attributes,
                'text_content': text_content,
                'depth': depth,
                'computed_styles': dict(resolver.resolve(element, css_rules)),
            })

        for child in element.children:
            queue.append((child, depth + 1))

    logger.debug(f"Flattened {len(records)} elements")
    return records
