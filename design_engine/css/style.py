"""
Style resolution.

The effective style of an element is built in three layers: built-in element
defaults, then every matching stylesheet rule in source order, then the inline
``style`` attribute. The last matching rule wins; selector specificity is not
considered.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .parser import CSSParser, CSSRule

logger = logging.getLogger(__name__)

INLINE_TAGS = {'span', 'a', 'strong', 'em', 'b', 'i', 'label'}

HEADING_DEFAULTS = {
    'h1': {'fontSize': '32px', 'fontWeight': 'bold', 'margin': '0.67em 0'},
    'h2': {'fontSize': '24px', 'fontWeight': 'bold', 'margin': '0.83em 0'},
    'h3': {'fontSize': '18.72px', 'fontWeight': 'bold', 'margin': '1em 0'},
    'h4': {'fontSize': '16px', 'fontWeight': 'bold', 'margin': '1.33em 0'},
    'h5': {'fontSize': '13.28px', 'fontWeight': 'bold', 'margin': '1.67em 0'},
    'h6': {'fontSize': '10.72px', 'fontWeight': 'bold', 'margin': '2.33em 0'},
}


class EffectiveStyle(Mapping):
    """
    Read-only mapping of camelCase property names to values.

    ``apply`` returns a new style with the given declarations overlaid, so a
    style is never shared or modified once built.
    """

    __slots__ = ('_values',)

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(values or {})

    def apply(self, declarations: Iterable[Tuple[str, str]]) -> 'EffectiveStyle':
        values = dict(self._values)
        for name, value in declarations:
            values[name] = value
        return EffectiveStyle(values)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"EffectiveStyle({self._values!r})"


def get_default_styles(tag_name: Optional[str]) -> Dict[str, str]:
    """
    Built-in styles for an element, following browser UA defaults.

    Args:
        tag_name: Lowercase tag name

    Returns:
        A fresh dictionary of default properties
    """
    defaults = {
        'display': 'block',
        'position': 'static',
        'margin': '0',
        'padding': '0',
        'border': 'none',
        'background': 'transparent',
        'color': 'inherit',
        'fontSize': '16px',
        'fontFamily': 'inherit',
        'fontWeight': 'normal',
        'lineHeight': 'normal',
        'textAlign': 'left',
        'width': 'auto',
        'height': 'auto',
    }

    if tag_name in INLINE_TAGS:
        defaults['display'] = 'inline'

    if tag_name in HEADING_DEFAULTS:
        defaults.update(HEADING_DEFAULTS[tag_name])

    if tag_name == 'p':
        defaults['margin'] = '1em 0'

    if tag_name == 'body':
        defaults.update({
            'margin': '8px',
            'background': 'rgb(255, 255, 255)',
            'color': 'rgb(0, 0, 0)',
        })

    return defaults


class StyleResolver:
    """Computes the effective style of an element."""

    def __init__(self, css_parser: Optional[CSSParser] = None):
        """
        Args:
            css_parser: Parser used for inline ``style`` attributes
        """
        self.css_parser = css_parser or CSSParser()

    def resolve(self, element, css_rules: Iterable[CSSRule]) -> EffectiveStyle:
        """
        Resolve the effective style of an element.

        Args:
            element: An element exposing ``tag_name``, ``get_attribute`` and
                (optionally) ``matches``
            css_rules: Candidate rules in source order

        Returns:
            The merged EffectiveStyle
        """
        tag_name = (getattr(element, 'tag_name', None) or '').lower()
        style = EffectiveStyle(get_default_styles(tag_name))

        for rule in css_rules:
            if not rule.selector_text or not rule.declarations:
                continue
            if self.matches(element, rule.selector_text):
                style = style.apply(rule.items())

        get_attribute = getattr(element, 'get_attribute', None)
        inline = self.css_parser.parse_inline_styles(get_attribute('style') if get_attribute else None)
        if inline:
            style = style.apply(inline.items())

        return style

    @staticmethod
    def matches(element, selector: str) -> bool:
        """
        Test a selector through the element's ``matches`` capability.

        A missing capability or a failing selector counts as no match.
        """
        matcher = getattr(element, 'matches', None)
        if matcher is None:
            return False
        try:
            return bool(matcher(selector))
        except Exception as e:
            logger.warning(f"Skipping rule with selector '{selector}': {e}")
            return False
