import pytest

from reactparser import extract_factory_component
from reactparser.core.config import config
from reactparser.core.error_handling import MalformedNodeError, UnevaluableInitializerError


def test_factory_component_scenario(react_parser):
    code = """
var Foo = React.createClass({
  getInitialState: function() {
    return {count: 0};
  },
  render: function() {
    return <div id="x"><Bar/></div>;
  }
});
"""
    descriptor = extract_factory_component(react_parser.parse(code))
    assert descriptor.to_dict() == {
        'name': 'Foo',
        'state': [{'name': 'count', 'value': 0}],
        'props': [{'name': 'id'}],
        'children': [{'name': 'Bar', 'props': [], 'children': [], 'state': []}],
    }


@pytest.mark.parametrize('binding', ['Foo', 'TodoApp', 'x'])
def test_name_is_taken_from_the_binding(react_parser, binding):
    code = f"const {binding} = React.createClass({{ render() {{ return <p />; }} }});"
    assert extract_factory_component(react_parser.parse(code)).name == binding


def test_create_react_class_with_method_supplier(react_parser):
    code = """
const createReactClass = require('create-react-class');
const Counter = createReactClass({
  getInitialState() {
    return { n: 1, labels: ['a', 'b'] };
  },
  render() {
    return (
      <section className="counter">
        <Display value={this.state.n} />
      </section>
    );
  }
});
"""
    descriptor = extract_factory_component(react_parser.parse(code))
    assert descriptor.name == 'Counter'
    assert descriptor.state_dict == {'n': 1, 'labels': ['a', 'b']}
    assert descriptor.prop_names == ['className']
    assert [child.name for child in descriptor.children] == ['Display']
    assert descriptor.children[0].prop_names == ['value']


def test_arrow_supplier_and_quoted_key(react_parser):
    code = """
var Menu = React.createClass({
  'getInitialState': () => ({ open: false }),
  render: function() { return <ul />; }
});
"""
    descriptor = extract_factory_component(react_parser.parse(code))
    assert descriptor.state_dict == {'open': False}


def test_factory_call_without_binding_has_no_name(react_parser):
    code = """
var unrelated = 1;
React.createClass({ render: function() { return <div title="t" />; } });
"""
    descriptor = extract_factory_component(react_parser.parse(code))
    assert descriptor.name == ''
    assert descriptor.prop_names == ['title']


def test_module_exports_assignment_has_no_name(react_parser):
    code = "module.exports = React.createClass({ render: function() { return <div />; } });"
    assert extract_factory_component(react_parser.parse(code)).name == ''


def test_plain_assignment_provides_name(react_parser):
    code = "var Foo;\nFoo = React.createClass({ render: function() { return <div />; } });"
    assert extract_factory_component(react_parser.parse(code)).name == 'Foo'


def test_nearest_enclosing_binding_wins(react_parser):
    code = """
var Connected = connect(mapState)(React.createClass({
  render: function() { var inner = 1; return <div />; }
}));
"""
    assert extract_factory_component(react_parser.parse(code)).name == 'Connected'


def test_first_factory_call_wins(react_parser):
    code = """
var First = React.createClass({
  getInitialState: function() { return {first: true}; },
  render: function() { return <div a="1"><One /></div>; }
});
var Second = React.createClass({
  getInitialState: function() { return {second: true}; },
  render: function() { return <div b="2"><Two /></div>; }
});
"""
    descriptor = extract_factory_component(react_parser.parse(code))
    assert descriptor.name == 'First'
    assert descriptor.state_dict == {'first': True}
    assert descriptor.prop_names == ['a']
    assert [child.name for child in descriptor.children] == ['One']


def test_source_without_factory_call(react_parser):
    descriptor = extract_factory_component(react_parser.parse("var a = 1;\n"))
    assert descriptor.to_dict() == {'name': '', 'state': [], 'props': [], 'children': []}


def test_non_literal_state_fails_closed(react_parser):
    code = """
var Foo = React.createClass({
  getInitialState: function() { return {items: this.props.items}; },
  render: function() { return <div />; }
});
"""
    with pytest.raises(UnevaluableInitializerError):
        extract_factory_component(react_parser.parse(code))


def test_supplier_without_return_is_malformed(react_parser):
    code = """
var Foo = React.createClass({
  getInitialState: function() { console.log('no state'); },
  render: function() { return <div />; }
});
"""
    with pytest.raises(MalformedNodeError):
        extract_factory_component(react_parser.parse(code))


def test_configured_state_supplier(react_parser):
    config.set('extraction', 'state_supplier', 'initialState')
    code = """
var Foo = React.createClass({
  initialState: function() { return {ready: false}; },
  render: function() { return <div />; }
});
"""
    assert extract_factory_component(react_parser.parse(code)).state_dict == {'ready': False}


def test_javascript_dialect(js_parser):
    code = """
var Foo = React.createClass({
  getInitialState: function() { return {count: 0}; },
  render: function() { return <div id="x"><Bar/></div>; }
});
"""
    descriptor = extract_factory_component(js_parser.parse(code))
    assert descriptor.name == 'Foo'
    assert descriptor.state_dict == {'count': 0}
    assert [child.name for child in descriptor.children] == ['Bar']
