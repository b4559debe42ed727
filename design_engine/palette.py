"""
Color palette extraction from a design tree.
"""

from typing import Any, Dict, List, Mapping


def extract_color_palette(tree: Mapping[str, Any]) -> List[str]:
    """
    Collect the unique colors used in a design tree.

    Visits nodes in pre-order and reads ``style.background``, ``style.color``
    and ``style.border.color``, keeping the first occurrence of each value.

    Args:
        tree: Root design node

    Returns:
        Color strings in first-seen order
    """
    colors: Dict[str, None] = {}
    stack = [tree]

    while stack:
        node = stack.pop()
        style = node.get('style') or {}

        for color in (style.get('background'), style.get('color'), (style.get('border') or {}).get('color')):
            if color:
                colors.setdefault(color, None)

        # Reversed so the leftmost child is visited next
        stack.extend(reversed(node.get('children') or []))

    return list(colors)
