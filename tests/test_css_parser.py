from design_engine.css.parser import CSSParser, CSSRule


class TestStylesheetParsing:
    def test_declarations_are_camel_cased(self, css_parser):
        rules = css_parser.parse("p { color: red; margin-top: 4px }")

        assert len(rules) == 1
        assert rules[0].selector_text == "p"
        assert list(rules[0].items()) == [('color', 'red'), ('marginTop', '4px')]

    def test_rules_keep_source_order(self, css_parser):
        rules = css_parser.parse("h1 { color: blue } .note { color: green }")
        assert [rule.selector_text for rule in rules] == ["h1", ".note"]

    def test_at_rules_are_ignored(self, css_parser):
        rules = css_parser.parse("@media screen { p { color: red } } div { color: blue }")
        assert [rule.selector_text for rule in rules] == ["div"]

    def test_empty_input(self, css_parser):
        assert css_parser.parse("") == []
        assert css_parser.parse("   \n") == []

    def test_collect_stylesheets(self, css_parser, make_document):
        document = make_document(
            "<html><head><style>p { color: red }</style></head>"
            "<body><style>div { color: blue }</style></body></html>"
        )
        rules = css_parser.collect_stylesheets(document)
        assert [rule.selector_text for rule in rules] == ["p", "div"]


class TestInlineStyles:
    def test_basic(self, css_parser):
        styles = css_parser.parse_inline_styles("color: red; background-color: #fff; margin: 0 4px")
        assert styles == {'color': 'red', 'backgroundColor': '#fff', 'margin': '0 4px'}

    def test_later_declaration_wins(self, css_parser):
        assert css_parser.parse_inline_styles("color: red; color: blue") == {'color': 'blue'}

    def test_invalid_declarations_are_skipped(self, css_parser):
        styles = css_parser.parse_inline_styles("color red; font-size: 12px")
        assert styles == {'fontSize': '12px'}

    def test_custom_properties_are_skipped(self, css_parser):
        assert css_parser.parse_inline_styles("--accent: red; color: blue") == {'color': 'blue'}

    def test_missing(self, css_parser):
        assert css_parser.parse_inline_styles(None) == {}
        assert css_parser.parse_inline_styles("") == {}


def test_css_rule_declarations_are_frozen():
    declarations = [('color', 'red')]
    rule = CSSRule("p", declarations)
    declarations.append(('margin', '0'))

    assert list(rule.items()) == [('color', 'red')]


class TestStylesheetValues:
    def test_values_are_kept_as_written(self, css_parser):
        rules = css_parser.parse(
            "p { color: #ff000080; background: RGB(255,0,0); border-color: rgb(255 0 0 / 50%) }"
        )

        assert list(rules[0].items()) == [
            ('color', '#ff000080'),
            ('background', 'RGB(255,0,0)'),
            ('borderColor', 'rgb(255 0 0 / 50%)'),
        ]

    def test_colors_are_not_normalized(self, css_parser):
        rules = css_parser.parse("div { background-color: #FFFFFF; color: #aabbcc }")
        assert list(rules[0].items()) == [('backgroundColor', '#FFFFFF'), ('color', '#aabbcc')]

        # A second parser sees the same text
        other = CSSParser().parse("div { color: #aabbcc }")
        assert list(other[0].items()) == [('color', '#aabbcc')]

    def test_stylesheet_custom_properties_are_skipped(self, css_parser):
        rules = css_parser.parse(":root { --brand-color: red; color: blue }")
        assert list(rules[0].items()) == [('color', 'blue')]

    def test_selector_lists(self, css_parser):
        rules = css_parser.parse("h1, .note > em { color: blue }")
        assert rules[0].selector_text == "h1, .note > em"

    def test_invalid_declaration_is_logged_and_skipped(self, css_parser, caplog):
        rules = css_parser.parse("p { color red; margin: 0 }")

        assert list(rules[0].items()) == [('margin', '0')]
        assert "Skipping invalid CSS declaration" in caplog.text

    def test_important_flag_is_dropped(self, css_parser):
        rules = css_parser.parse("p { color: red !important }")
        assert list(rules[0].items()) == [('color', 'red')]
