"""
CSS value parsers.

Converts textual CSS values into pixels and small structured records. None of
these functions raise: unparseable input degrades to documented defaults.
"""

import math
import re
from typing import Any, Dict, Union

Number = Union[int, float]

# Root font size used for em/rem; not configurable
ROOT_FONT_SIZE = 16

BORDER_STYLES = {
    'solid', 'dashed', 'dotted', 'double', 'none',
    'groove', 'ridge', 'inset', 'outset', 'hidden'
}

_LEADING_NUMBER = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
_DIGITS = re.compile(r'^\d+$')
_KEBAB = re.compile(r'-([a-z])')
_CAMEL = re.compile(r'([A-Z])')


class SpacingQuad:
    """Per-side spacing in pixels (margin, padding)."""

    __slots__ = ('top', 'right', 'bottom', 'left')

    def __init__(self, top: float = 0, right: float = 0, bottom: float = 0, left: float = 0):
        self.top = top
        self.right = right
        self.bottom = bottom
        self.left = left

    def is_zero(self) -> bool:
        return not (self.top or self.right or self.bottom or self.left)

    def to_dict(self) -> Dict[str, float]:
        return {'top': self.top, 'right': self.right, 'bottom': self.bottom, 'left': self.left}

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SpacingQuad):
            return self.to_dict() == other.to_dict()
        if isinstance(other, dict):
            return self.to_dict() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"SpacingQuad(top={self.top}, right={self.right}, bottom={self.bottom}, left={self.left})"


class BorderSpec:
    """Parsed border shorthand."""

    __slots__ = ('width', 'style', 'color', 'radius')

    def __init__(self, width: float = 0, style: str = 'none', color: str = 'transparent', radius: float = 0):
        self.width = width
        self.style = style
        self.color = color
        self.radius = radius

    def to_dict(self) -> Dict[str, Union[float, str]]:
        return {'width': self.width, 'style': self.style, 'color': self.color, 'radius': self.radius}

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, BorderSpec):
            return self.to_dict() == other.to_dict()
        if isinstance(other, dict):
            return self.to_dict() == other
        return NotImplemented

    def __repr__(self) -> str:
        return (f"BorderSpec(width={self.width}, style={self.style!r}, "
                f"color={self.color!r}, radius={self.radius})")


def _as_number(value: float) -> Number:
    # Whole numbers serialize as 4, not 4.0
    return int(value) if value.is_integer() else value


def parse_float(value: Any) -> Number:
    """
    Parse the leading number of a string, ignoring any trailing unit.

    ``"12.5px"`` -> 12.5, ``"4px"`` -> 4, ``"abc"`` -> nan.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _as_number(float(value))
    match = _LEADING_NUMBER.match(str(value).strip())
    if not match:
        return math.nan
    return _as_number(float(match.group(0)))


def parse_pixel_value(value: Any) -> Number:
    """
    Convert a CSS length to pixels.

    Args:
        value: CSS value such as ``"12px"``, ``"1.5em"``, ``"2rem"``, ``"50%"``
            or a bare number

    Returns:
        Pixels. Percentages are not resolved here and yield 0; missing or
        unparseable input yields 0.
    """
    if not value:
        return 0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _as_number(float(value))

    text = str(value).strip()

    if text.endswith('px'):
        number = parse_float(text)
    elif text.endswith('em'):
        # Covers rem as well
        number = parse_float(text) * ROOT_FONT_SIZE
    elif text.endswith('%'):
        return 0
    else:
        number = parse_float(text)

    return 0 if math.isnan(number) else _as_number(float(number))


def parse_spacing(value: Any) -> SpacingQuad:
    """
    Parse a margin/padding shorthand.

    1 value applies to all sides, 2 are vertical/horizontal, 3 are
    top/horizontal/bottom and 4 are top/right/bottom/left.
    """
    if not value or value == 'auto':
        return SpacingQuad()

    parts = [parse_pixel_value(token) for token in str(value).split()]

    if len(parts) == 1:
        return SpacingQuad(parts[0], parts[0], parts[0], parts[0])
    if len(parts) == 2:
        return SpacingQuad(parts[0], parts[1], parts[0], parts[1])
    if len(parts) == 3:
        return SpacingQuad(parts[0], parts[1], parts[2], parts[1])
    if len(parts) == 4:
        return SpacingQuad(parts[0], parts[1], parts[2], parts[3])
    return SpacingQuad()


def parse_border(value: Any) -> BorderSpec:
    """
    Parse a border shorthand such as ``"1px solid #ccc"``.

    A token ending in ``px`` or made of digits is the width, a border-style
    keyword is the style and anything else is the color (the last such token
    wins, so multi-word colors are not supported).
    """
    result = BorderSpec()

    if not value or value == 'none':
        return result

    for part in str(value).split():
        if part.endswith('px') or _DIGITS.match(part):
            result.width = parse_pixel_value(part)
        elif part in BORDER_STYLES:
            result.style = part
        else:
            result.color = part

    return result


def camel_case(name: str) -> str:
    """``background-color`` -> ``backgroundColor``."""
    return _KEBAB.sub(lambda m: m.group(1).upper(), name)


def kebab_case(name: str) -> str:
    """``backgroundColor`` -> ``background-color``."""
    return _CAMEL.sub(r'-\1', name).lower()


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward (``2.5`` -> 3, ``-2.5`` -> -2)."""
    return int(math.floor(value + 0.5))
