"""
Document snapshots.

Parses HTML with BeautifulSoup's html5lib tree builder and captures the
result as an immutable arena of ElementSnapshot records.
"""

import logging
from typing import Dict, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .node import ChildRef, ElementSnapshot, TextSnapshot
from .selector_engine import SelectorEngine

logger = logging.getLogger(__name__)


class DocumentSnapshot:
    """
    An immutable, index-addressed copy of a parsed HTML document.

    Elements live in ``elements`` in document (pre-order) order; element 0 is
    the root (normally ``html``).
    """

    def __init__(self, url: Optional[str] = None):
        self.url = url
        self.selector_engine = SelectorEngine()
        self._elements: Tuple[ElementSnapshot, ...] = ()

    @classmethod
    def from_html(cls, html_content: str, url: Optional[str] = None) -> 'DocumentSnapshot':
        """
        Parse HTML into a snapshot.

        Args:
            html_content: The HTML source
            url: Optional URL the document was loaded from

        Returns:
            The document snapshot
        """
        soup = BeautifulSoup(html_content or '', 'html5lib')
        return cls.from_soup(soup, url)

    @classmethod
    def from_soup(cls, soup: Union[BeautifulSoup, Tag], url: Optional[str] = None) -> 'DocumentSnapshot':
        """
        Capture an already parsed BeautifulSoup tree.

        Documents parsed with a lenient builder (e.g. ``html.parser``) may have
        no ``html`` or ``body`` element; top-level tags are then roots of their
        own.
        """
        document = cls(url)
        records: List[Optional[ElementSnapshot]] = []

        def capture(tag: Tag, parent_index: Optional[int]) -> int:
            index = len(records)
            records.append(None)

            refs: List[ChildRef] = []
            for child in tag.children:
                if isinstance(child, Tag):
                    refs.append(capture(child, index))
                elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                    refs.append(TextSnapshot(str(child)))

            records[index] = ElementSnapshot(
                document, index, tag.name.lower(), _attributes(tag), parent_index, tuple(refs)
            )
            return index

        if isinstance(soup, BeautifulSoup):
            for top in soup.children:
                if isinstance(top, Tag):
                    capture(top, None)
        else:
            capture(soup, None)

        document._elements = tuple(records)
        logger.debug(f"Captured document snapshot with {len(records)} elements")
        return document

    @property
    def elements(self) -> Tuple[ElementSnapshot, ...]:
        return self._elements

    def element(self, index: int) -> ElementSnapshot:
        return self._elements[index]

    @property
    def document_element(self) -> Optional[ElementSnapshot]:
        return self._elements[0] if self._elements else None

    @property
    def roots(self) -> List[ElementSnapshot]:
        return [element for element in self._elements if element.parent_index is None]

    @property
    def head(self) -> Optional[ElementSnapshot]:
        return self._first_structural('head')

    @property
    def body(self) -> Optional[ElementSnapshot]:
        return self._first_structural('body')

    def _first_structural(self, tag_name: str) -> Optional[ElementSnapshot]:
        # body/head are roots or children of the html root, never nested deeper
        for root in self.roots:
            if root.tag_name == tag_name:
                return root
            if root.tag_name == 'html':
                for child in root.children:
                    if child.tag_name == tag_name:
                        return child
        return None

    def get_elements_by_tag_name(self, tag_name: str) -> List[ElementSnapshot]:
        tag_name = tag_name.lower()
        return [element for element in self._elements if element.tag_name == tag_name]

    def get_element_by_id(self, element_id: str) -> Optional[ElementSnapshot]:
        for element in self._elements:
            if element.id == element_id:
                return element
        return None

    def query_selector_all(self, selector: str) -> List[ElementSnapshot]:
        return [element for element in self._elements if element.matches(selector)]

    def style_sheets(self) -> List[str]:
        """Text of every ``<style>`` element, in document order."""
        return [element.text_content for element in self.get_elements_by_tag_name('style')]

    def __len__(self) -> int:
        return len(self._elements)


def _attributes(tag: Tag) -> Dict[str, str]:
    attributes = {}
    for name, value in tag.attrs.items():
        # bs4 returns multi-valued attributes (class, rel, ...) as lists
        if isinstance(value, (list, tuple)):
            value = ' '.join(value)
        attributes[name.lower()] = str(value)
    return attributes


def parse_html(html_content: str, url: Optional[str] = None) -> DocumentSnapshot:
    """Parse HTML text into a DocumentSnapshot."""
    return DocumentSnapshot.from_html(html_content, url)
