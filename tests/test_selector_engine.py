import pytest
from cssselect import SelectorError

from design_engine.dom.document import parse_html


HTML = (
    '<div id="main" class="box wide">'
    '<p>One</p><p class="x">Two</p><span data-role="nav-item" lang="en-US">S</span>'
    '</div>'
    '<ul><li>a</li><li>b</li><li>c</li></ul>'
    '<a href="/home">Home</a><a>Anchor</a>'
)


@pytest.fixture
def document():
    return parse_html(HTML)


def paragraphs(document):
    return document.get_elements_by_tag_name('p')


def test_simple_selectors(document):
    first, second = paragraphs(document)

    assert first.matches('p')
    assert first.matches('*')
    assert second.matches('.x')
    assert second.matches('p.x')
    assert not first.matches('.x')
    assert document.get_element_by_id('main').matches('div#main.box.wide')


def test_descendant_and_child(document):
    first = paragraphs(document)[0]

    assert first.matches('div p')
    assert first.matches('body p')
    assert first.matches('div > p')
    assert first.matches('#main > p')
    assert not first.matches('body > p')
    assert not first.matches('ul p')


def test_sibling_combinators(document):
    second = paragraphs(document)[1]
    span = document.get_elements_by_tag_name('span')[0]

    assert second.matches('p + p')
    assert span.matches('p + span')
    assert span.matches('p ~ span')
    assert not paragraphs(document)[0].matches('p + p')


def test_attribute_selectors(document):
    span = document.get_elements_by_tag_name('span')[0]

    assert span.matches('[data-role]')
    assert span.matches('[data-role="nav-item"]')
    assert span.matches('[data-role^="nav"]')
    assert span.matches('[data-role$="item"]')
    assert span.matches('[data-role*="v-i"]')
    assert span.matches('[lang|="en"]')
    assert not span.matches('[data-role="nav"]')
    assert document.get_element_by_id('main').matches('[class~="wide"]')


def test_structural_pseudo_classes(document):
    items = document.get_elements_by_tag_name('li')

    assert items[0].matches('li:first-child')
    assert items[2].matches('li:last-child')
    assert not items[1].matches('li:first-child')
    assert items[1].matches('li:nth-child(2)')
    assert [item.matches('li:nth-child(odd)') for item in items] == [True, False, True]
    assert items[0].matches('li:nth-last-child(3)')
    assert paragraphs(document)[1].matches('p:last-of-type')
    assert document.get_elements_by_tag_name('span')[0].matches('span:only-of-type')
    assert document.document_element.matches(':root')


def test_negation(document):
    first, second = paragraphs(document)

    assert first.matches('p:not(.x)')
    assert not second.matches('p:not(.x)')


def test_links_and_dynamic_states(document):
    link, anchor = document.get_elements_by_tag_name('a')

    assert link.matches('a:link')
    assert not anchor.matches('a:link')
    assert not link.matches('a:hover')


def test_selector_lists(document):
    first = paragraphs(document)[0]
    assert first.matches('ul, div > p')


def test_pseudo_elements_never_match(document):
    assert not paragraphs(document)[0].matches('p::before')


def test_invalid_selector_raises(document):
    with pytest.raises(SelectorError):
        paragraphs(document)[0].matches('p[')


def test_query_selector_all(document):
    assert [element.tag_name for element in document.query_selector_all('#main > *')] == ['p', 'p', 'span']


def test_select_from_root(document):
    engine = document.selector_engine
    found = engine.select('li', document.get_elements_by_tag_name('ul')[0])
    assert [item.direct_text for item in found] == ['a', 'b', 'c']
