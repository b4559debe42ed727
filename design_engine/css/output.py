"""
Projection of an effective style onto the design-node ``style`` record.

Default values are omitted rather than changed; spacing and border shorthands
are expanded into structured records.
"""

import math
from typing import Any, Dict, Mapping

from .values import parse_border, parse_float, parse_pixel_value, parse_spacing


def build_style_output(computed: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build the design-node style object.

    Args:
        computed: Effective style (camelCase property names)

    Returns:
        JSON-serializable style dictionary
    """
    style: Dict[str, Any] = {}

    # Background
    background = computed.get('background')
    background_color = computed.get('backgroundColor')
    if background and background != 'transparent':
        style['background'] = background
    elif background_color and background_color != 'transparent':
        style['background'] = background_color

    # Text
    if computed.get('color') and computed['color'] != 'inherit':
        style['color'] = computed['color']
    if computed.get('fontSize'):
        style['fontSize'] = computed['fontSize']
    if computed.get('fontFamily') and computed['fontFamily'] != 'inherit':
        style['fontFamily'] = computed['fontFamily']
    if computed.get('fontWeight') and computed['fontWeight'] != 'normal':
        style['fontWeight'] = computed['fontWeight']
    if computed.get('textAlign') and computed['textAlign'] != 'left':
        style['textAlign'] = computed['textAlign']

    # Spacing
    padding = parse_spacing(computed.get('padding'))
    if not padding.is_zero():
        style['padding'] = padding.to_dict()

    margin = parse_spacing(computed.get('margin'))
    if not margin.is_zero():
        style['margin'] = margin.to_dict()

    # Border
    border = parse_border(computed.get('border'))
    if border.width > 0:
        style['border'] = border.to_dict()
    if computed.get('borderRadius'):
        style.setdefault('border', {})['radius'] = parse_pixel_value(computed['borderRadius'])

    # Display and flex
    if computed.get('display') and computed['display'] != 'block':
        style['display'] = computed['display']
    for name in ('flexDirection', 'justifyContent', 'alignItems'):
        if computed.get(name):
            style[name] = computed[name]
    if computed.get('gap'):
        style['gap'] = parse_pixel_value(computed['gap'])

    # Opacity
    opacity = computed.get('opacity')
    if opacity and opacity != '1':
        value = parse_float(opacity)
        if not math.isnan(value):
            style['opacity'] = value

    return style
