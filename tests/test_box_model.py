import pytest

from design_engine.layout.box_model import INLINE_FALLBACK_WIDTH, BoxModelCalculator


@pytest.fixture
def calculator():
    return BoxModelCalculator()


class TestResolveWidth:
    def test_auto_block_fills_parent(self, calculator):
        assert calculator.resolve_width({'display': 'block', 'width': 'auto', 'margin': '0'}, 1200) == 1200

    def test_auto_block_subtracts_margins(self, calculator):
        assert calculator.resolve_width({'width': 'auto', 'margin': '0 10px 0 30px'}, 1000) == 960

    def test_auto_inline_level_uses_estimate(self, calculator):
        for display in ('inline', 'inline-block', 'inline-flex'):
            assert calculator.resolve_width({'display': display, 'width': 'auto'}, 1000) == INLINE_FALLBACK_WIDTH

    def test_explicit_length(self, calculator):
        assert calculator.resolve_width({'width': '200px'}, 1000) == 200
        assert calculator.resolve_width({'width': '10em', 'display': 'inline'}, 1000) == 160

    def test_percentage_of_parent_content_width(self, calculator):
        assert calculator.resolve_width({'width': '50%'}, 800) == 400

    def test_zero_width_counts_as_auto(self, calculator):
        assert calculator.resolve_width({'width': '0'}, 1000) == 1000


class TestResolveHeight:
    def test_explicit(self, calculator, fake_element):
        assert calculator.resolve_height(fake_element(), {'height': '50px'}) == 50

    def test_estimated(self, calculator, fake_element):
        assert calculator.resolve_height(fake_element(), {'height': 'auto', 'fontSize': '20px'}) == pytest.approx(28)


class TestComputeBox:
    def test_box_with_padding_border_and_margin(self, calculator, fake_element):
        styles = {
            'width': '200px', 'height': '100px', 'margin': '5px',
            'padding': '10px', 'border': '2px solid #000',
        }
        box = calculator.compute_box(fake_element(), styles, 1000, 20, 30)

        assert box == {'x': 25, 'y': 35, 'w': 200, 'h': 100}
        assert box.content_box == {'x': 37, 'y': 47, 'w': 176, 'h': 76}

    def test_values_are_rounded(self, calculator, fake_element):
        styles = {'margin': '0.67em 0', 'fontSize': '32px'}
        box = calculator.compute_box(fake_element(direct_text='Hi'), styles, 1184, 8, 8)

        # 8 + 10.72 and 32 * 1.4
        assert box.y == 19
        assert box.h == 45
        assert box.w == 1184

    def test_to_dict(self, calculator, fake_element):
        box = calculator.compute_box(fake_element(), {'height': '10px'}, 100, 0, 0)

        assert box.to_dict() == {'x': 0, 'y': 0, 'w': 100, 'h': 10}
        assert box.to_dict(include_content_box=True)['contentBox'] == {'x': 0, 'y': 0, 'w': 100, 'h': 10}
