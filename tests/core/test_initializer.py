import math

import pytest

from reactparser.core.error_handling import UnevaluableInitializerError
from reactparser.core.extractors.initializer import evaluate_literal, get_component_state, parse_number
from reactparser.models.component import StateEntry


def test_state_entries_keep_source_order(first_node):
    node = first_node("const s = {a: 1, b: \"x\"};", 'object')
    assert get_component_state(node) == [StateEntry(name='a', value=1), StateEntry(name='b', value='x')]


def test_nested_literals(first_node):
    code = """
const s = {
  items: [1, 2.5, -3, +4],
  flags: {on: true, off: false},
  none: null,
  nothing: undefined,
  'quoted key': 'v',
  42: 'answer',
  // comments are ignored
  empty: [],
};
"""
    assert evaluate_literal(first_node(code, 'object')) == {
        'items': [1, 2.5, -3, 4],
        'flags': {'on': True, 'off': False},
        'none': None,
        'nothing': None,
        'quoted key': 'v',
        '42': 'answer',
        'empty': [],
    }


def test_string_escapes(first_node):
    code = r"""const s = {a: 'line\nbreak', b: "A\x42\u{43}", c: 'it\'s', d: '\\'};"""
    assert evaluate_literal(first_node(code, 'object')) == {
        'a': 'line\nbreak',
        'b': 'ABC',
        'c': "it's",
        'd': '\\',
    }


def test_surrogate_pairs_are_joined(first_node):
    node = first_node(r"const s = {smile: '\uD83D\uDE00'};", 'object')
    assert evaluate_literal(node) == {'smile': '\U0001F600'}


def test_global_constants(first_node):
    value = evaluate_literal(first_node("const s = {big: Infinity, low: -Infinity, bad: NaN};", 'object'))
    assert value['big'] == math.inf
    assert value['low'] == -math.inf
    assert math.isnan(value['bad'])


def test_parenthesized_initializer(first_node):
    node = first_node("const s = ({ open: false });", 'parenthesized_expression')
    assert get_component_state(node) == [StateEntry(name='open', value=False)]


@pytest.mark.parametrize('text, expected', [
    ('0', 0),
    ('42', 42),
    ('1_000', 1000),
    ('0x1F', 31),
    ('0o17', 15),
    ('0b101', 5),
    ('017', 15),
    ('1.5e3', 1500.0),
    ('.5', 0.5),
    ('10n', 10),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize('code, node_type', [
    ("const s = {a: compute()};", 'call_expression'),
    ("const s = {a: other};", 'identifier'),
    ("const s = {a: `tpl`};", 'template_string'),
    ("const s = {...rest};", 'spread_element'),
    ("const s = {[key]: 1};", 'computed_property_name'),
    ("const s = {shorthand};", 'shorthand_property_identifier'),
    ("const s = {method() { return 1; }};", 'method_definition'),
    ("const s = {a: this.props.a};", 'member_expression'),
    ("const s = {a: !true};", 'unary_expression'),
])
def test_non_literal_values_are_rejected(first_node, code, node_type):
    with pytest.raises(UnevaluableInitializerError) as excinfo:
        get_component_state(first_node(code, 'object'))
    assert excinfo.value.node_type == node_type
    assert excinfo.value.line == 1


def test_state_must_be_an_object(first_node):
    with pytest.raises(UnevaluableInitializerError):
        get_component_state(first_node("const s = [1, 2];", 'array'))
