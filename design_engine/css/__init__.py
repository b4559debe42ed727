"""
CSS support for the design engine.
This package parses stylesheets and CSS values and resolves effective styles.
"""

from .values import (
    SpacingQuad, BorderSpec, parse_pixel_value, parse_spacing, parse_border, camel_case, kebab_case
)
from .parser import CSSParser, CSSRule
from .style import EffectiveStyle, StyleResolver, get_default_styles
from .output import build_style_output

__all__ = [
    'SpacingQuad', 'BorderSpec', 'parse_pixel_value', 'parse_spacing', 'parse_border',
    'camel_case', 'kebab_case', 'CSSParser', 'CSSRule', 'EffectiveStyle', 'StyleResolver',
    'get_default_styles', 'build_style_output'
]
