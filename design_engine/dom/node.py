"""
Immutable node snapshots.

A document is captured once into an arena of element records addressed by
index; elements refer to their parent and children by index instead of
holding live references, so layout code can never mutate the tree it walks.
"""

from enum import IntEnum
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple, Union

if TYPE_CHECKING:
    from .document import DocumentSnapshot


class NodeType(IntEnum):
    """DOM node type constants."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3


class TextSnapshot:
    """A text node captured from the source document."""

    __slots__ = ('data',)

    node_type = NodeType.TEXT_NODE

    def __init__(self, data: str):
        self.data = data

    @property
    def text_content(self) -> str:
        return self.data

    def __repr__(self) -> str:
        return f"TextSnapshot({self.data!r})"


ChildRef = Union[int, TextSnapshot]


class ElementSnapshot:
    """
    An element in a DocumentSnapshot arena.

    Child elements are stored as arena indices; text children are stored
    inline. Everything is fixed at construction.
    """

    __slots__ = ('_document', 'index', 'tag_name', '_attributes', 'parent_index', '_child_refs')

    node_type = NodeType.ELEMENT_NODE

    def __init__(self, document: 'DocumentSnapshot', index: int, tag_name: str,
                 attributes: Dict[str, str], parent_index: Optional[int],
                 child_refs: Tuple[ChildRef, ...]):
        """
        Args:
            document: Owning snapshot
            index: Position of this element in the arena
            tag_name: Lowercase tag name
            attributes: Attribute values (``class`` joined with spaces)
            parent_index: Arena index of the parent element, None for the root
            child_refs: Children in document order, element indices or text
        """
        self._document = document
        self.index = index
        self.tag_name = tag_name
        self._attributes = tuple(attributes.items())
        self.parent_index = parent_index
        self._child_refs = child_refs

    # Attributes

    @property
    def attributes(self) -> Dict[str, str]:
        """A copy of the element's attributes."""
        return dict(self._attributes)

    def get_attribute(self, name: str) -> Optional[str]:
        name = name.lower()
        for key, value in self._attributes:
            if key == name:
                return value
        return None

    def has_attribute(self, name: str) -> bool:
        return self.get_attribute(name) is not None

    @property
    def id(self) -> Optional[str]:
        return self.get_attribute('id') or None

    @property
    def class_list(self) -> List[str]:
        return (self.get_attribute('class') or '').split()

    @property
    def src(self) -> Optional[str]:
        return self.get_attribute('src') or None

    # Tree navigation

    @property
    def owner_document(self) -> 'DocumentSnapshot':
        return self._document

    @property
    def parent_node(self) -> Optional['ElementSnapshot']:
        if self.parent_index is None:
            return None
        return self._document.element(self.parent_index)

    @property
    def child_indices(self) -> Tuple[int, ...]:
        return tuple(ref for ref in self._child_refs if isinstance(ref, int))

    @property
    def children(self) -> List['ElementSnapshot']:
        """Child elements in document order."""
        return [self._document.element(i) for i in self.child_indices]

    @property
    def child_nodes(self) -> List[Union['ElementSnapshot', TextSnapshot]]:
        """All children, elements and text, in document order."""
        return [self._document.element(ref) if isinstance(ref, int) else ref
                for ref in self._child_refs]

    @property
    def child_element_count(self) -> int:
        return len(self.child_indices)

    def _siblings(self) -> Tuple[int, ...]:
        parent = self.parent_node
        return parent.child_indices if parent is not None else (self.index,)

    @property
    def previous_element_sibling(self) -> Optional['ElementSnapshot']:
        siblings = self._siblings()
        position = siblings.index(self.index)
        return self._document.element(siblings[position - 1]) if position > 0 else None

    @property
    def element_siblings(self) -> List['ElementSnapshot']:
        """Elements sharing this element's parent, including itself."""
        return [self._document.element(i) for i in self._siblings()]

    def iter_descendants(self) -> Iterator['ElementSnapshot']:
        """Descendant elements in document order."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    # Text

    @property
    def direct_text(self) -> Optional[str]:
        """Concatenated text of direct text children, trimmed; None if empty."""
        text = ''.join(ref.data for ref in self._child_refs if isinstance(ref, TextSnapshot))
        return text.strip() or None

    @property
    def text_content(self) -> str:
        """Text of this element and all its descendants."""
        parts = []
        for node in self.child_nodes:
            parts.append(node.text_content)
        return ''.join(parts)

    # Selectors

    def matches(self, selector: str) -> bool:
        """
        Check whether this element matches a CSS selector.

        Raises:
            cssselect.SelectorError: If the selector cannot be parsed
        """
        return self._document.selector_engine.matches(self, selector)

    def __repr__(self) -> str:
        return f"<ElementSnapshot {self.index} {self.tag_name}>"
