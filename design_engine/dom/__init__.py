"""
DOM snapshots for the design engine.
This package captures parsed HTML as an immutable element arena with CSS
selector matching.
"""

from .node import NodeType, ElementSnapshot, TextSnapshot
from .document import DocumentSnapshot, parse_html
from .selector_engine import SelectorEngine

__all__ = [
    'NodeType', 'ElementSnapshot', 'TextSnapshot', 'DocumentSnapshot', 'parse_html', 'SelectorEngine'
]
