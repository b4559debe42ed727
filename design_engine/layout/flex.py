"""
Flex repositioning.

A post-processing step that rearranges the already laid out children of a
flex container along its main and cross axes. It is never applied
automatically while the design tree is built; callers invoke it on the
containers they want arranged.
"""

import logging
from typing import Any, Dict, List, Mapping

from ..css.values import SpacingQuad, parse_pixel_value, parse_spacing, round_half_up

logger = logging.getLogger(__name__)


def _container_styles(container: Mapping[str, Any]) -> Mapping[str, Any]:
    # Flat layout records carry raw styles, design nodes the projected ones
    return container.get('computed_styles') or container.get('style') or {}


def _padding(value: Any) -> SpacingQuad:
    if isinstance(value, Mapping):
        return SpacingQuad(value.get('top', 0), value.get('right', 0),
                           value.get('bottom', 0), value.get('left', 0))
    return parse_spacing(value)


def cross_axis_position(child_size: float, container_start: float, available_size: float,
                        align_items: str) -> float:
    """Cross-axis start of a flex item for an ``align-items`` value."""
    if align_items == 'center':
        return container_start + (available_size - child_size) / 2
    if align_items == 'flex-end':
        return container_start + available_size - child_size
    # flex-start, stretch and anything unknown
    return container_start


def apply_flex_layout(container: Mapping[str, Any], children: List[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Reposition the children of a flex container.

    Args:
        container: Design node (or flat layout record) with a ``layout`` box
        children: Child nodes with ``layout`` boxes, in document order

    Returns:
        New child nodes with updated layouts. The inputs are not modified.
        For ``row-reverse``/``column-reverse`` the returned list is in
        reversed order.
    """
    if not children:
        return []

    styles = _container_styles(container)
    box = container['layout']

    flex_direction = styles.get('flexDirection') or 'row'
    justify_content = styles.get('justifyContent') or 'flex-start'
    align_items = styles.get('alignItems') or 'stretch'
    gap = parse_pixel_value(styles.get('gap')) or 0

    is_row = flex_direction in ('row', 'row-reverse')
    is_reverse = flex_direction in ('row-reverse', 'column-reverse')

    padding = _padding(styles.get('padding'))
    available_width = box['w'] - padding.left - padding.right
    available_height = box['h'] - padding.top - padding.bottom

    count = len(children)
    total_child_size = sum(child['layout']['w'] if is_row else child['layout']['h'] for child in children)
    total_child_size += gap * (count - 1)

    available_space = (available_width if is_row else available_height) - total_child_size

    position = 0.0
    if justify_content == 'center':
        position = available_space / 2
    elif justify_content == 'flex-end':
        position = available_space
    elif justify_content == 'space-around':
        position = available_space / (count * 2)
    elif justify_content == 'space-evenly':
        position = available_space / (count + 1)

    space_between = 0.0
    if justify_content == 'space-between' and count > 1:
        space_between = available_space / (count - 1)

    positioned = []
    for child in children:
        layout = dict(child['layout'])

        if is_row:
            layout['x'] = round_half_up(box['x'] + padding.left + position)
            layout['y'] = round_half_up(cross_axis_position(
                layout['h'], box['y'] + padding.top, available_height, align_items))
            position += layout['w'] + gap + space_between
        else:
            layout['x'] = round_half_up(cross_axis_position(
                layout['w'], box['x'] + padding.left, available_width, align_items))
            layout['y'] = round_half_up(box['y'] + padding.top + position)
            position += layout['h'] + gap + space_between

        repositioned = dict(child)
        repositioned['layout'] = layout
        positioned.append(repositioned)

    if is_reverse:
        positioned.reverse()

    logger.debug(f"Flex layout ({flex_direction}, {justify_content}) applied to {count} children")
    return positioned
