import pytest

from design_engine.css.parser import CSSParser
from design_engine.css.style import StyleResolver
from design_engine.dom.document import DocumentSnapshot


class FakeElement:
    """Minimal element for box model and estimator tests."""

    def __init__(self, direct_text=None, child_element_count=0):
        self.direct_text = direct_text
        self.child_element_count = child_element_count


@pytest.fixture
def fake_element():
    return FakeElement


@pytest.fixture
def css_parser():
    return CSSParser()


@pytest.fixture
def resolver(css_parser):
    return StyleResolver(css_parser)


@pytest.fixture
def make_document():
    def make(html, url=None):
        return DocumentSnapshot.from_html(html, url=url)
    return make


@pytest.fixture
def viewport():
    return {'width': 1200, 'height': 800}
