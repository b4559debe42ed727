"""
CSS parsing.

Both ``<style>`` blocks and inline ``style`` attributes are tokenized with
tinycss2 and values are kept exactly as written. Property names are
normalized to camelCase (``background-color`` -> ``backgroundColor``);
custom properties (``--name``) are not kept.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import tinycss2

from .values import camel_case

logger = logging.getLogger(__name__)


class CSSRule:
    """A style rule: a selector plus its declarations in source order."""

    __slots__ = ('selector_text', 'declarations')

    def __init__(self, selector_text: str, declarations: Iterable[Tuple[str, str]]):
        self.selector_text = selector_text
        self.declarations: Tuple[Tuple[str, str], ...] = tuple(declarations)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self.declarations)

    def __repr__(self) -> str:
        return f"CSSRule({self.selector_text!r}, {len(self.declarations)} declarations)"


class CSSParser:
    """
    Parses stylesheet text and inline declarations into normalized records.

    Only top-level style rules are kept; ``@media``, ``@import`` and other
    at-rules are ignored and external stylesheets are never fetched.
    """

    def parse(self, css_content: str) -> List[CSSRule]:
        """
        Parse CSS text into style rules.

        Args:
            css_content: CSS source

        Returns:
            Style rules in source order. Malformed rules and declarations are
            logged and skipped.
        """
        if not css_content or not css_content.strip():
            return []

        rules = []
        for node in tinycss2.parse_stylesheet(css_content, skip_comments=True, skip_whitespace=True):
            if node.type == 'error':
                logger.warning(f"Skipping malformed CSS rule: {node.message}")
                continue
            if node.type != 'qualified-rule':
                continue

            selector_text = tinycss2.serialize(node.prelude).strip()
            if not selector_text:
                continue

            rules.append(CSSRule(selector_text, self._declarations(node.content)))

        logger.debug(f"Parsed {len(rules)} style rules")
        return rules

    def parse_inline_styles(self, style_attr: Optional[str]) -> Dict[str, str]:
        """
        Parse an inline ``style`` attribute.

        Args:
            style_attr: Attribute value, e.g. ``"color: red; margin: 0 4px"``

        Returns:
            Dictionary of camelCase property names to values. Later
            declarations of the same property win.
        """
        if not style_attr:
            return {}
        return dict(self._declarations(style_attr))

    def _declarations(self, content) -> List[Tuple[str, str]]:
        """Declarations of a rule body or style attribute, in source order."""
        declarations = []
        for node in tinycss2.parse_declaration_list(content, skip_comments=True, skip_whitespace=True):
            if node.type == 'error':
                logger.warning(f"Skipping invalid CSS declaration: {node.message}")
                continue
            if node.type != 'declaration' or node.name.startswith('--'):
                continue

            value = tinycss2.serialize(node.value).strip()
            if value:
                declarations.append((camel_case(node.lower_name), value))

        return declarations

    def collect_stylesheets(self, document) -> List[CSSRule]:
        """
        Collect the style rules of every ``<style>`` block in a document.

        Args:
            document: A DocumentSnapshot

        Returns:
            All rules, in document order
        """
        rules: List[CSSRule] = []
        for css_text in document.style_sheets():
            rules.extend(self.parse(css_text))
        return rules
