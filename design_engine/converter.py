"""
HTML to design tree conversion.

This module ties together document parsing, stylesheet collection, style
resolution, layout and tree assembly.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from .assembler import TreeAssembler
from .css.parser import CSSParser
from .css.style import StyleResolver
from .dom.document import DocumentSnapshot
from .exceptions import DesignTreeError
from .layout.box_model import BoxModelCalculator
from .layout.flow import flatten_document
from .network.loader import DocumentLoader
from .palette import extract_color_palette
from .utils.config import Config
from .utils.logging import PerformanceLogger

logger = logging.getLogger(__name__)

DEFAULT_VIEWPORT = {'width': 1200, 'height': 800}


def normalize_viewport(viewport: Optional[Mapping[str, Any]], default: Optional[Mapping[str, int]] = None) -> Dict[str, int]:
    """Fill a partial or missing viewport from the default one."""
    default = default or DEFAULT_VIEWPORT
    viewport = viewport or {}
    return {
        'width': int(viewport.get('width') or default['width']),
        'height': int(viewport.get('height') or default['height']),
    }


def create_empty_design_tree(viewport: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    The tree produced for a document with nothing to show.

    Returns:
        A ``body`` frame covering the viewport with a white background
    """
    viewport = normalize_viewport(viewport)
    return {
        'type': 'frame',
        'name': 'body',
        'layout': {'x': 0, 'y': 0, 'w': viewport['width'], 'h': viewport['height']},
        'style': {'background': 'rgb(255, 255, 255)'},
        'children': [],
    }


class DesignTreeConverter:
    """
    Converts HTML documents into design trees.

    The converter holds no per-document state; every conversion works on a
    fresh snapshot and returns a fresh tree. A document loader for URLs is
    created on first use and released by ``close()``.
    """

    def __init__(self, config: Optional[Config] = None, loader: Optional[DocumentLoader] = None):
        """
        Args:
            config: Configuration (default viewport, network settings)
            loader: Loader used for URL conversions
        """
        self.config = config or Config()
        self.css_parser = CSSParser()
        self.resolver = StyleResolver(self.css_parser)
        self.assembler = TreeAssembler(self.resolver, BoxModelCalculator())
        self._loader = loader
        self._owns_loader = loader is None
        self.perf = PerformanceLogger(logger, "DesignTreeConverter")

        logger.debug("Design tree converter initialized")

    @property
    def loader(self) -> DocumentLoader:
        if self._loader is None:
            self._loader = DocumentLoader(self.config)
        return self._loader

    def default_viewport(self) -> Dict[str, int]:
        return self.config.get_viewport()

    def html_to_design_tree(self, html: str, viewport: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Convert an HTML string.

        Args:
            html: HTML source
            viewport: Optional ``{'width', 'height'}``

        Returns:
            The design tree
        """
        with self.perf.measure("parse"):
            document = DocumentSnapshot.from_html(html)
        return self.document_to_design_tree(document, viewport)

    def url_to_design_tree(self, url: str, viewport: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Fetch a URL and convert the document.

        Raises:
            DocumentLoadError: If the document cannot be fetched
        """
        with self.perf.measure("fetch"):
            document = self.loader.load(url)
        return self.document_to_design_tree(document, viewport)

    def document_to_design_tree(self, document: Optional[DocumentSnapshot],
                                viewport: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Convert a document snapshot.

        Args:
            document: The parsed document
            viewport: Optional viewport, defaults to the configured one

        Returns:
            The design tree; an empty viewport frame if the document has no
            body or nothing visible

        Raises:
            DesignTreeError: If no document is given
        """
        if document is None:
            raise DesignTreeError("No document to convert")

        viewport = normalize_viewport(viewport, self.default_viewport())

        body = document.body
        if body is None:
            logger.info("Document has no body; returning empty design tree")
            return create_empty_design_tree(viewport)

        with self.perf.measure("convert"):
            css_rules = self.css_parser.collect_stylesheets(document)
            logger.debug(f"Collected {len(css_rules)} CSS rules")
            tree = self.assembler.build_node(body, css_rules, viewport, 0, 0)

        if tree is None:
            logger.info("Body is not rendered; returning empty design tree")
            return create_empty_design_tree(viewport)

        return tree

    def flatten(self, document: DocumentSnapshot) -> List[Dict[str, Any]]:
        """Flat element records of a document, for the flat layout pass."""
        return flatten_document(document, self.css_parser.collect_stylesheets(document), self.resolver)

    def close(self) -> None:
        if self._owns_loader and self._loader is not None:
            self._loader.close()
            self._loader = None

    def __enter__(self) -> 'DesignTreeConverter':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def html_to_design_tree(html: str, viewport: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Convert an HTML string to a design tree."""
    return DesignTreeConverter().html_to_design_tree(html, viewport)


def url_to_design_tree(url: str, viewport: Optional[Mapping[str, Any]] = None,
                       loader: Optional[DocumentLoader] = None) -> Dict[str, Any]:
    """Fetch a URL and convert it to a design tree."""
    with DesignTreeConverter(loader=loader) as converter:
        return converter.url_to_design_tree(url, viewport)


def document_to_design_tree(document: Optional[DocumentSnapshot],
                            viewport: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Convert an already parsed document to a design tree."""
    return DesignTreeConverter().document_to_design_tree(document, viewport)


__all__ = [
    'DEFAULT_VIEWPORT', 'DesignTreeConverter', 'create_empty_design_tree', 'document_to_design_tree',
    'extract_color_palette', 'html_to_design_tree', 'normalize_viewport', 'url_to_design_tree'
]
