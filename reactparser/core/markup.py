"""
JSX markup helpers.

Separates structural HTML elements from user-defined components and reads
props and child components off rendered JSX elements.
"""
import logging
from typing import List, Optional

from tree_sitter import Node

from reactparser.models.component import ComponentDescriptor, PropDescriptor

logger = logging.getLogger(__name__)

HTML_ELEMENTS = frozenset({
    'a', 'abbr', 'address', 'area', 'article', 'aside', 'audio', 'b', 'bdi', 'bdo',
    'blockquote', 'body', 'br', 'button', 'canvas', 'caption', 'cite', 'code', 'col',
    'colgroup', 'data', 'datalist', 'dd', 'del', 'details', 'dfn', 'dialog', 'div', 'dl',
    'dt', 'em', 'embed', 'fieldset', 'figcaption', 'figure', 'font', 'footer', 'form',
    'frame', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'head', 'header', 'hr', 'html', 'i',
    'iframe', 'img', 'input', 'ins', 'kbd', 'label', 'legend', 'li', 'link', 'main', 'map',
    'mark', 'meta', 'meter', 'nav', 'noscript', 'object', 'ol', 'optgroup', 'option',
    'output', 'p', 'param', 'picture', 'pre', 'progress', 'q', 'rb', 'rp', 'rt', 'ruby',
    's', 'samp', 'script', 'section', 'select', 'small', 'source', 'span', 'strong',
    'style', 'sub', 'summary', 'sup', 'svg', 'table', 'tbody', 'td', 'template',
    'textarea', 'tfoot', 'th', 'thead', 'time', 'title', 'tr', 'track', 'u', 'ul', 'var',
    'video', 'wbr',
})

JSX_ELEMENT_TYPES = frozenset({'jsx_element', 'jsx_self_closing_element'})


def is_jsx_element(node: Node) -> bool:
    return node.type in JSX_ELEMENT_TYPES


def _opening_tag(element: Node) -> Node:
    """The node holding the tag name and attributes of ``element``."""
    if element.type == 'jsx_self_closing_element':
        return element
    opening = element.child_by_field_name('open_tag')
    if opening is not None:
        return opening
    for child in element.named_children:
        if child.type == 'jsx_opening_element':
            return child
    return element


def get_tag_name(element: Node) -> Optional[str]:
    """
    Return the tag name of a JSX element.

    Member and namespaced names keep their dotted or colon form
    (``Foo.Bar``, ``svg:rect``). Fragments (``<>``) have no name.
    """
    name_node = _opening_tag(element).child_by_field_name('name')
    if name_node is None:
        return None
    return name_node.text.decode('utf8')


def is_markup_tag(tag_name: Optional[str]) -> bool:
    """True for HTML tags and fragments, which are never reported as components."""
    return tag_name is None or tag_name in HTML_ELEMENTS


def get_props(element: Node) -> List[PropDescriptor]:
    """
    Returns the props declared on the opening tag of ``element``, in source order.

    Spread attributes (``{...rest}``) have no name and are skipped.
    """
    props = []
    for attribute in _opening_tag(element).named_children:
        if attribute.type != 'jsx_attribute' or not attribute.named_children:
            continue
        props.append(PropDescriptor(name=attribute.named_children[0].text.decode('utf8')))
    return props


def _element_children(element: Node) -> List[Node]:
    if element.type == 'jsx_self_closing_element':
        return []
    return [child for child in element.named_children if is_jsx_element(child)]


def get_child_components(element: Node) -> List[ComponentDescriptor]:
    """
    Returns the user-defined components rendered inside ``element``.

    Markup children are elided but searched, so components wrapped in HTML
    tags are reported as children of the nearest enclosing component.
    Child descriptors never carry state.
    """
    components = []
    for child in _element_children(element):
        tag_name = get_tag_name(child)
        if is_markup_tag(tag_name):
            components.extend(get_child_components(child))
            continue
        logger.debug(f"Found child component <{tag_name}>")
        components.append(ComponentDescriptor(
            name=tag_name,
            props=get_props(child),
            children=get_child_components(child),
            state=[],
        ))
    return components
