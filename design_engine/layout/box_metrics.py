from typing import Dict, Optional

from ..css.values import BorderSpec, SpacingQuad, round_half_up


class LayoutBox:
    """
    An integer rectangle in root viewport coordinates.

    ``content_box`` is the same rectangle with padding and border removed,
    when it has been computed.
    """

    __slots__ = ('x', 'y', 'w', 'h', 'content_box')

    def __init__(self, x: int, y: int, w: int, h: int, content_box: Optional['LayoutBox'] = None):
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.content_box = content_box

    def to_dict(self, include_content_box: bool = False) -> Dict:
        result = {'x': self.x, 'y': self.y, 'w': self.w, 'h': self.h}
        if include_content_box and self.content_box is not None:
            result['contentBox'] = self.content_box.to_dict()
        return result

    def __eq__(self, other) -> bool:
        if isinstance(other, LayoutBox):
            return (self.x, self.y, self.w, self.h) == (other.x, other.y, other.w, other.h)
        if isinstance(other, dict):
            return self.to_dict() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"LayoutBox(x={self.x}, y={self.y}, w={self.w}, h={self.h})"


class BoxMetrics:
    """
    Floating point box model measurements for one element.

    Holds the outer box (border edge) position and size together with the
    margin, border and padding that surround the content.
    """

    def __init__(self, x: float, y: float, width: float, height: float,
                 margin: SpacingQuad, padding: SpacingQuad, border: BorderSpec):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.margin = margin
        self.padding = padding
        self.border = border

    @property
    def content_x(self) -> float:
        return self.x + self.padding.left + self.border.width

    @property
    def content_y(self) -> float:
        return self.y + self.padding.top + self.border.width

    @property
    def content_width(self) -> float:
        return self.width - self.padding.left - self.padding.right - self.border.width * 2

    @property
    def content_height(self) -> float:
        return self.height - self.padding.top - self.padding.bottom - self.border.width * 2

    def to_layout_box(self) -> LayoutBox:
        content = LayoutBox(
            round_half_up(self.content_x),
            round_half_up(self.content_y),
            round_half_up(self.content_width),
            round_half_up(self.content_height),
        )
        return LayoutBox(
            round_half_up(self.x),
            round_half_up(self.y),
            round_half_up(self.width),
            round_half_up(self.height),
            content,
        )
