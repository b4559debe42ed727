"""
CSS selector matching over element snapshots.

Selectors are parsed with cssselect and the resulting trees are matched
directly against ElementSnapshot records.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Optional

import cssselect
from cssselect import parser as css_parser

if TYPE_CHECKING:
    from .node import ElementSnapshot

logger = logging.getLogger(__name__)

# Interactive states never apply to a static snapshot
DYNAMIC_PSEUDO_CLASSES = {
    'hover', 'focus', 'active', 'visited', 'focus-within', 'focus-visible', 'target'
}


class SelectorEngine:
    """
    CSS selector engine for snapshot elements.

    Parsed selectors are cached per engine; one engine belongs to one
    document snapshot.
    """

    def __init__(self):
        self._selector_cache: Dict[str, List[css_parser.Selector]] = {}

    def matches(self, element: 'ElementSnapshot', selector: str) -> bool:
        """
        Check if an element matches a CSS selector (or selector list).

        Args:
            element: The element to check
            selector: The CSS selector

        Returns:
            True if any selector in the list matches

        Raises:
            cssselect.SelectorError: If the selector cannot be parsed
        """
        for parsed in self._get_parsed_selector(selector):
            # Pseudo-element rules style generated content, not the element
            if parsed.pseudo_element is not None:
                continue
            if self._matches_tree(element, parsed.parsed_tree):
                return True
        return False

    def select(self, selector: str, root: 'ElementSnapshot') -> List['ElementSnapshot']:
        """All descendants of ``root`` (and root itself) matching ``selector``."""
        candidates = [root]
        candidates.extend(root.iter_descendants())
        return [element for element in candidates if self.matches(element, selector)]

    def _get_parsed_selector(self, selector: str) -> List[css_parser.Selector]:
        if selector not in self._selector_cache:
            # Let SelectorError propagate; callers decide how to skip the rule
            self._selector_cache[selector] = cssselect.parse(selector)
        return self._selector_cache[selector]

    def _matches_tree(self, element: Optional['ElementSnapshot'], tree) -> bool:
        """
        Match an element against a cssselect parse tree.

        Compound selectors are chained through ``tree.selector``, so every
        node checks its own condition and then recurses into the rest.
        """
        if element is None:
            return False

        if isinstance(tree, css_parser.Element):
            tag = tree.element
            return tag is None or element.tag_name == tag.lower()

        if isinstance(tree, css_parser.Hash):
            return element.id == tree.id and self._matches_tree(element, tree.selector)

        if isinstance(tree, css_parser.Class):
            return tree.class_name in element.class_list and self._matches_tree(element, tree.selector)

        if isinstance(tree, css_parser.Attrib):
            return self._matches_attrib(element, tree) and self._matches_tree(element, tree.selector)

        if isinstance(tree, css_parser.Pseudo):
            return self._matches_pseudo(element, tree.ident) and self._matches_tree(element, tree.selector)

        if isinstance(tree, css_parser.Function):
            return self._matches_function(element, tree) and self._matches_tree(element, tree.selector)

        if isinstance(tree, css_parser.Negation):
            return (not self._matches_tree(element, tree.subselector)
                    and self._matches_tree(element, tree.selector))

        if isinstance(tree, (css_parser.Matching, css_parser.SpecificityAdjustment)):
            return (any(self._matches_tree(element, sub) for sub in tree.selector_list)
                    and self._matches_tree(element, tree.selector))

        if isinstance(tree, css_parser.CombinedSelector):
            return self._matches_combined(element, tree)

        logger.debug(f"Unsupported selector node: {type(tree).__name__}")
        return False

    def _matches_combined(self, element: 'ElementSnapshot', tree: css_parser.CombinedSelector) -> bool:
        # The right-hand side applies to the element itself
        if not self._matches_tree(element, tree.subselector):
            return False

        combinator = tree.combinator
        left = tree.selector

        if combinator == ' ':
            ancestor = element.parent_node
            while ancestor is not None:
                if self._matches_tree(ancestor, left):
                    return True
                ancestor = ancestor.parent_node
            return False

        if combinator == '>':
            return self._matches_tree(element.parent_node, left)

        if combinator == '+':
            return self._matches_tree(element.previous_element_sibling, left)

        if combinator == '~':
            sibling = element.previous_element_sibling
            while sibling is not None:
                if self._matches_tree(sibling, left):
                    return True
                sibling = sibling.previous_element_sibling
            return False

        logger.debug(f"Unknown combinator: {combinator!r}")
        return False

    def _matches_attrib(self, element: 'ElementSnapshot', tree: css_parser.Attrib) -> bool:
        actual = element.get_attribute(tree.attrib)
        if actual is None:
            return False

        operator = tree.operator
        if operator == 'exists':
            return True

        expected = tree.value.value if tree.value is not None else ''

        if operator == '=':
            return actual == expected
        if operator == '~=':
            return expected in actual.split()
        if operator == '|=':
            return actual == expected or actual.startswith(f"{expected}-")
        if operator == '^=':
            return bool(expected) and actual.startswith(expected)
        if operator == '$=':
            return bool(expected) and actual.endswith(expected)
        if operator == '*=':
            return bool(expected) and expected in actual
        if operator == '!=':
            return actual != expected
        return False

    def _matches_pseudo(self, element: 'ElementSnapshot', name: str) -> bool:
        siblings = element.element_siblings
        same_type = [s for s in siblings if s.tag_name == element.tag_name]

        if name == 'first-child':
            return siblings[0].index == element.index
        if name == 'last-child':
            return siblings[-1].index == element.index
        if name == 'only-child':
            return len(siblings) == 1
        if name == 'first-of-type':
            return same_type[0].index == element.index
        if name == 'last-of-type':
            return same_type[-1].index == element.index
        if name == 'only-of-type':
            return len(same_type) == 1
        if name == 'empty':
            return not element.child_nodes
        if name == 'root':
            return element.parent_node is None
        if name in ('link', 'any-link'):
            return element.tag_name in ('a', 'area') and element.has_attribute('href')
        if name == 'checked':
            return element.has_attribute('checked') or element.has_attribute('selected')
        if name == 'disabled':
            return element.has_attribute('disabled')
        if name in DYNAMIC_PSEUDO_CLASSES:
            return False

        logger.debug(f"Unsupported pseudo-class: {name}")
        return False

    def _matches_function(self, element: 'ElementSnapshot', tree: css_parser.Function) -> bool:
        name = tree.name
        if name not in ('nth-child', 'nth-last-child', 'nth-of-type', 'nth-last-of-type'):
            logger.debug(f"Unsupported functional pseudo-class: {name}")
            return False

        siblings = element.element_siblings
        if name.endswith('of-type'):
            siblings = [s for s in siblings if s.tag_name == element.tag_name]
        if name.startswith('nth-last'):
            siblings = list(reversed(siblings))

        position = [s.index for s in siblings].index(element.index) + 1
        a, b = css_parser.parse_series(tree.arguments)

        if a == 0:
            return position == b
        n, remainder = divmod(position - b, a)
        return remainder == 0 and n >= 0
