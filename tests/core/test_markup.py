import pytest

from reactparser.core.markup import (
    HTML_ELEMENTS,
    get_child_components,
    get_props,
    get_tag_name,
    is_markup_tag,
)


@pytest.fixture
def root_element(first_node):
    """Returns the outermost JSX element rendered by ``code``."""
    def _root_element(code):
        element = first_node(code, 'jsx_element')
        return element
    return _root_element


def test_props_preserve_source_order(root_element):
    element = root_element("const el = <div id='x' className={cls} data-role='main' disabled>text</div>;")
    assert [prop.name for prop in get_props(element)] == ['id', 'className', 'data-role', 'disabled']


def test_element_without_attributes_has_no_props(root_element):
    assert get_props(root_element("const el = <div><Foo /></div>;")) == []


def test_spread_attributes_are_skipped(first_node):
    element = first_node("const el = <Foo {...rest} x='1' />;", 'jsx_self_closing_element')
    assert [prop.name for prop in get_props(element)] == ['x']


def test_markup_wrappers_are_transparent(root_element):
    code = """
const el = (
  <div>
    <section><Foo a="1" b={2} /></section>
    <p>
      <Bar>
        <span><Baz /></span>
      </Bar>
    </p>
  </div>
);
"""
    children = get_child_components(root_element(code))
    assert [child.name for child in children] == ['Foo', 'Bar']
    assert [prop.name for prop in children[0].props] == ['a', 'b']
    assert [grandchild.name for grandchild in children[1].children] == ['Baz']
    assert all(child.state == [] for child in children)


def test_text_and_expression_children_are_ignored(root_element):
    children = get_child_components(root_element("const el = <div>hello {name}<Foo /></div>;"))
    assert [child.name for child in children] == ['Foo']


def test_fragments_are_transparent(root_element):
    element = root_element("const el = <><Foo /><Bar /></>;")
    assert get_tag_name(element) is None
    assert [child.name for child in get_child_components(element)] == ['Foo', 'Bar']


def test_member_expression_tags(root_element):
    children = get_child_components(root_element("const el = <div><UI.Button kind='primary' /></div>;"))
    assert [child.name for child in children] == ['UI.Button']
    assert [prop.name for prop in children[0].props] == ['kind']


def test_self_closing_root_has_no_children(first_node):
    element = first_node("const el = <Foo a='1' />;", 'jsx_self_closing_element')
    assert get_child_components(element) == []


def test_is_markup_tag():
    assert is_markup_tag('div')
    assert is_markup_tag(None)
    assert not is_markup_tag('Div')
    assert not is_markup_tag('TodoList')


@pytest.mark.parametrize('tag', sorted(HTML_ELEMENTS))
def test_markup_tags_never_reported_as_children(root_element, tag):
    code = f"const el = <main><{tag} title='t'><Inner /></{tag}></main>;"
    children = get_child_components(root_element(code))
    assert [child.name for child in children] == ['Inner'], f"<{tag}> should be elided but searched"
