from design_engine.layout.flex import apply_flex_layout, cross_axis_position


def node(name, x, y, w, h):
    return {'name': name, 'layout': {'x': x, 'y': y, 'w': w, 'h': h}}


def container(w=300, h=100, **style):
    return {'layout': {'x': 0, 'y': 0, 'w': w, 'h': h}, 'style': style}


def positions(children, axis='x'):
    return [child['layout'][axis] for child in children]


def children():
    return [node('a', 0, 0, 50, 20), node('b', 0, 20, 50, 40), node('c', 0, 60, 50, 20)]


def test_no_children():
    assert apply_flex_layout(container(), []) == []


def test_row_flex_start():
    result = apply_flex_layout(container(), children())
    assert positions(result) == [0, 50, 100]
    assert positions(result, 'y') == [0, 0, 0]


def test_row_with_gap():
    assert positions(apply_flex_layout(container(gap='10px'), children())) == [0, 60, 120]


def test_justify_center_and_end():
    assert positions(apply_flex_layout(container(justifyContent='center'), children())) == [75, 125, 175]
    assert positions(apply_flex_layout(container(justifyContent='flex-end'), children())) == [150, 200, 250]


def test_space_between():
    assert positions(apply_flex_layout(container(justifyContent='space-between'), children())) == [0, 125, 250]


def test_space_around_and_evenly():
    around = apply_flex_layout(container(justifyContent='space-around'), children())
    assert positions(around) == [25, 75, 125]

    evenly = apply_flex_layout(container(justifyContent='space-evenly'), children())
    assert positions(evenly) == [38, 88, 138]


def test_align_items():
    centered = apply_flex_layout(container(alignItems='center'), children())
    assert positions(centered, 'y') == [40, 30, 40]

    end = apply_flex_layout(container(alignItems='flex-end'), children())
    assert positions(end, 'y') == [80, 60, 80]


def test_column_direction():
    result = apply_flex_layout(container(h=200, flexDirection='column'), children())
    assert positions(result, 'y') == [0, 20, 60]
    assert positions(result) == [0, 0, 0]


def test_reverse_reverses_order():
    result = apply_flex_layout(container(flexDirection='row-reverse'), children())
    assert [child['name'] for child in result] == ['c', 'b', 'a']


def test_container_padding():
    result = apply_flex_layout(container(padding={'top': 5, 'right': 0, 'bottom': 5, 'left': 10}), children())
    assert positions(result) == [10, 60, 110]
    assert positions(result, 'y') == [5, 5, 5]


def test_flat_records_use_computed_styles():
    flat = {'layout': {'x': 0, 'y': 0, 'w': 300, 'h': 100},
            'computed_styles': {'justifyContent': 'flex-end', 'padding': '0 10px'}}
    assert positions(apply_flex_layout(flat, children())) == [140, 190, 240]


def test_inputs_are_not_mutated():
    original = children()
    apply_flex_layout(container(justifyContent='center'), original)
    assert positions(original) == [0, 0, 0]


def test_cross_axis_position():
    assert cross_axis_position(20, 10, 100, 'stretch') == 10
    assert cross_axis_position(20, 10, 100, 'center') == 50
    assert cross_axis_position(20, 10, 100, 'flex-end') == 90
