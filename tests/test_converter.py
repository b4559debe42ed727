from unittest import mock

import pytest
from bs4 import BeautifulSoup

from design_engine.converter import (
    DesignTreeConverter, create_empty_design_tree, document_to_design_tree, html_to_design_tree,
    normalize_viewport, url_to_design_tree
)
from design_engine.dom.document import DocumentSnapshot
from design_engine.exceptions import DesignTreeError
from design_engine.utils.config import Config


def walk(node):
    yield node
    for child in node.get('children', []):
        yield from walk(child)


class TestEndToEnd:
    def test_heading_and_paragraph(self):
        tree = html_to_design_tree('<body><h1>Hi</h1><p style="color:red">Hello world</p></body>')

        assert tree['type'] == 'frame'
        assert tree['name'] == 'body'

        h1, p = tree['children']
        assert h1['type'] == 'text'
        assert h1['name'] == 'h1'
        assert h1['text'] == 'Hi'
        assert h1['style']['fontWeight'] == 'bold'
        assert h1['style']['fontSize'] == '32px'

        assert p['type'] == 'text'
        assert p['name'] == 'p'
        assert p['text'] == 'Hello world'
        assert p['style']['color'] == 'red'
        assert p['layout']['y'] >= h1['layout']['y'] + h1['layout']['h']

    def test_heading_and_paragraph_geometry(self):
        tree = html_to_design_tree('<body><h1>Hi</h1><p style="color:red">Hello world</p></body>')
        h1, p = tree['children']

        assert tree['layout']['x'] == 8
        assert tree['layout']['y'] == 8
        assert tree['layout']['w'] == 1184
        assert h1['layout'] == {'x': 8, 'y': 19, 'w': 1184, 'h': 45}
        assert p['layout']['y'] == 80

    def test_transparent_background_is_never_emitted(self):
        tree = html_to_design_tree(
            '<body><div style="background:transparent"><p style="background: transparent">x</p></div></body>'
        )
        div = tree['children'][0]

        assert 'background' not in div['style']
        assert 'background' not in div['children'][0]['style']

    def test_hidden_subtree_produces_no_nodes(self):
        tree = html_to_design_tree(
            '<body><p>Before</p><div style="display:none"><section><p>Inner</p></section></div><p>After</p></body>'
        )
        texts = [node.get('text') for node in walk(tree)]

        assert 'Inner' not in texts
        assert [child['name'] for child in tree['children']] == ['p', 'p']

    def test_tree_is_json_serializable(self):
        import json

        tree = html_to_design_tree('<body style="opacity: 0.9"><div style="border: 1px solid red"></div></body>')
        assert json.loads(json.dumps(tree)) == tree


class TestEmptyTree:
    def test_create_empty_design_tree(self):
        assert create_empty_design_tree({'width': 640, 'height': 480}) == {
            'type': 'frame',
            'name': 'body',
            'layout': {'x': 0, 'y': 0, 'w': 640, 'h': 480},
            'style': {'background': 'rgb(255, 255, 255)'},
            'children': [],
        }

    def test_document_without_body(self):
        document = DocumentSnapshot.from_soup(BeautifulSoup("<div></div>", "html.parser"))
        tree = document_to_design_tree(document, {'width': 800, 'height': 600})

        assert tree == create_empty_design_tree({'width': 800, 'height': 600})

    def test_hidden_body(self):
        tree = html_to_design_tree('<body style="display:none"><p>x</p></body>')
        assert tree == create_empty_design_tree()

    def test_missing_document_raises(self):
        with pytest.raises(DesignTreeError):
            document_to_design_tree(None, {'width': 800, 'height': 600})


class TestViewport:
    def test_normalize_viewport(self):
        assert normalize_viewport(None) == {'width': 1200, 'height': 800}
        assert normalize_viewport({'width': 500}) == {'width': 500, 'height': 800}

    def test_custom_viewport(self):
        tree = html_to_design_tree('<body></body>', {'width': 400, 'height': 300})
        assert tree['layout']['w'] == 384

    def test_configured_default_viewport(self):
        config = Config()
        config.set('viewport.width', 1000)

        with DesignTreeConverter(config) as converter:
            tree = converter.html_to_design_tree('<body></body>')

        assert tree['layout']['w'] == 984


class TestConverter:
    def test_url_conversion_uses_loader(self):
        loader = mock.Mock()
        loader.load.return_value = DocumentSnapshot.from_html('<p>Remote</p>', url='https://example.com/')

        tree = url_to_design_tree('https://example.com/', loader=loader)

        loader.load.assert_called_once_with('https://example.com/')
        assert tree['children'][0]['text'] == 'Remote'
        loader.close.assert_not_called()

    def test_close_releases_owned_loader(self):
        converter = DesignTreeConverter()
        loader = converter.loader
        with mock.patch.object(loader, 'close') as close:
            converter.close()

        close.assert_called_once_with()
        assert converter._loader is None

    def test_conversions_are_timed(self, caplog):
        caplog.set_level('DEBUG', logger='design_engine')
        DesignTreeConverter().html_to_design_tree('<p>x</p>')

        assert 'DesignTreeConverter convert took' in caplog.text

    def test_flatten(self):
        converter = DesignTreeConverter()
        records = converter.flatten(DocumentSnapshot.from_html('<style>p { color: red }</style><p>x</p>'))

        assert [r['tag_name'] for r in records] == ['body', 'p']
        assert records[1]['computed_styles']['color'] == 'red'


def test_stylesheet_values_reach_the_tree():
    tree = html_to_design_tree(
        '<style>p { color: #ff000080 } div { background: rgb(255 0 0 / 50%) }</style>'
        '<body><p>x</p><div></div></body>'
    )
    p, div = tree['children']

    assert p['style']['color'] == '#ff000080'
    assert div['style']['background'] == 'rgb(255 0 0 / 50%)'
