"""
Design tree assembly.

Walks element snapshots depth first, resolves styles, computes boxes and
emits nested design nodes in absolute viewport coordinates.
"""

import logging
import urllib.parse
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .css.output import build_style_output
from .css.parser import CSSRule
from .css.style import StyleResolver
from .layout.box_metrics import LayoutBox
from .layout.box_model import BoxModelCalculator

logger = logging.getLogger(__name__)

# Elements that never render
SKIP_TAGS = {'script', 'style', 'noscript', 'meta', 'link', 'head'}

TEXT_TAGS = {'p', 'span', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'a', 'label', 'li'}
IMAGE_TAGS = {'img', 'picture'}
SVG_TAGS = {'svg'}


def get_element_type(tag_name: str) -> str:
    """
    Design node type for a tag name.

    The type depends on the tag alone, never on computed style.
    """
    if tag_name in TEXT_TAGS:
        return 'text'
    if tag_name in IMAGE_TAGS:
        return 'image'
    if tag_name in SVG_TAGS:
        return 'svg'
    return 'frame'


def is_hidden(styles: Mapping[str, Any]) -> bool:
    return styles.get('display') == 'none' or styles.get('visibility') == 'hidden'


class TreeAssembler:
    """
    Builds design nodes from element snapshots.

    The walk is recursive and assumes an acyclic element tree, which
    snapshots always are.
    """

    def __init__(self, resolver: Optional[StyleResolver] = None,
                 calculator: Optional[BoxModelCalculator] = None):
        self.resolver = resolver or StyleResolver()
        self.calculator = calculator or BoxModelCalculator()

    def build_node(self, element, css_rules: Iterable[CSSRule], viewport: Mapping[str, int],
                   offset_x: float = 0, offset_y: float = 0,
                   parent_content_width: Optional[float] = None) -> Optional[Dict[str, Any]]:
        """
        Build the design node for an element and its subtree.

        Args:
            element: The element snapshot
            css_rules: Stylesheet rules in source order
            viewport: ``{'width', 'height'}`` of the root viewport
            offset_x: Absolute x of the containing block
            offset_y: Absolute y where this element's margin box starts
            parent_content_width: Content width of the parent; the viewport
                width for the root

        Returns:
            The design node, or None when the element is not rendered
        """
        tag_name = (element.tag_name or 'div').lower()

        if tag_name in SKIP_TAGS:
            return None

        css_rules = css_rules if isinstance(css_rules, (list, tuple)) else list(css_rules)
        styles = self.resolver.resolve(element, css_rules)

        if is_hidden(styles):
            logger.debug(f"Skipping hidden <{tag_name}> and its subtree")
            return None

        if parent_content_width is None:
            parent_content_width = viewport['width']

        node_type = get_element_type(tag_name)
        layout = self.calculator.compute_box(element, styles, parent_content_width, offset_x, offset_y)

        node: Dict[str, Any] = {
            'type': node_type,
            'name': tag_name,
            'layout': layout.to_dict(),
            'style': build_style_output(styles),
        }

        if node_type == 'text':
            text = element.direct_text
            if text:
                node['text'] = text

        if node_type == 'image':
            src = self._resolve_src(element)
            if src:
                node['src'] = src

        if element.id:
            node['id'] = element.id
        if element.class_list:
            node['classes'] = list(element.class_list)

        children = self.build_children(element, css_rules, viewport, layout)
        if children:
            node['children'] = children

        return node

    def build_children(self, parent, css_rules: List[CSSRule], viewport: Mapping[str, int],
                       parent_layout: LayoutBox) -> List[Dict[str, Any]]:
        """
        Build child nodes, stacking them vertically from the parent's top.

        Skipped children do not move the cursor.
        """
        children = []
        current_y = parent_layout.y
        content_width = parent_layout.content_box.w if parent_layout.content_box else parent_layout.w

        for child in parent.children:
            node = self.build_node(child, css_rules, viewport, parent_layout.x, current_y, content_width)
            if node is not None:
                children.append(node)
                current_y = node['layout']['y'] + node['layout']['h']

        return children

    @staticmethod
    def _resolve_src(element) -> Optional[str]:
        src = element.src
        if not src:
            return None
        document = getattr(element, 'owner_document', None)
        base_url = getattr(document, 'url', None)
        return urllib.parse.urljoin(base_url, src) if base_url else src
