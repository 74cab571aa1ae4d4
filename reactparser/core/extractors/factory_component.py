"""
Extraction of components declared with a factory call.

Recognizes ``var Foo = React.createClass({...})`` and
``var Foo = createReactClass({...})``. The component is named after the
binding that encloses the first factory call, its state comes from the
``getInitialState`` supplier of the configuration object, and its props and
children come from the first JSX element in the tree.
"""
import logging
from typing import Any, Dict, Iterable, Optional

from tree_sitter import Node

from reactparser.core.config import config
from reactparser.core.engine.ast_handler import ASTHandler
from reactparser.core.engine.walker import Continuation, Handler
from reactparser.core.error_handling import MalformedNodeError, UnevaluableInitializerError, log_extraction_errors
from reactparser.core.extractors.base import ComponentVisitor
from reactparser.core.extractors.initializer import decode_string, get_component_state
from reactparser.models.component import ComponentDescriptor
from reactparser.models.enums import ComponentPattern

logger = logging.getLogger(__name__)

FUNCTION_TYPES = frozenset({'function_expression', 'function', 'arrow_function', 'method_definition'})


def _key_name(key: Optional[Node]) -> Optional[str]:
    if key is None:
        return None
    if key.type == 'string':
        return decode_string(key)
    if key.type == 'property_identifier':
        return key.text.decode('utf8')
    return None


def _first_argument(call: Node) -> Optional[Node]:
    arguments = call.child_by_field_name('arguments')
    if arguments is None or arguments.type != 'arguments':
        return None
    for argument in arguments.named_children:
        if argument.type != 'comment':
            return argument
    return None


def _returned_expression(function: Node) -> Node:
    """The expression a state supplier returns."""
    if function.type not in FUNCTION_TYPES:
        raise UnevaluableInitializerError(function.type, 'state supplier must be a function',
                                          line=function.start_point[0] + 1,
                                          column=function.start_point[1])
    body = ASTHandler.require_field(function, 'body')
    if body.type != 'statement_block':
        return body
    for statement in body.named_children:
        if statement.type == 'return_statement':
            values = [child for child in statement.named_children if child.type != 'comment']
            if not values:
                raise MalformedNodeError('return_statement', 'argument', line=statement.start_point[0] + 1)
            return values[0]
    raise MalformedNodeError(function.type, 'return', line=function.start_point[0] + 1)


class FactoryComponentVisitor(ComponentVisitor):
    """Single-use visitor assembling a factory-pattern component."""

    pattern = ComponentPattern.FACTORY

    def __init__(self, factory_callees: Optional[Iterable[str]] = None,
                 state_supplier: Optional[str] = None):
        super().__init__()
        self.factory_callees = frozenset(
            factory_callees or config.get('extraction', 'factory_callees', ['createClass']))
        self.state_supplier = state_supplier or config.get('extraction', 'state_supplier', 'getInitialState')

    def handlers(self) -> Dict[str, Handler]:
        return {
            'variable_declarator': self.visit_variable_declarator,
            'assignment_expression': self.visit_assignment_expression,
            'call_expression': self.visit_call_expression,
            'jsx_element': self.visit_jsx_element,
            'jsx_self_closing_element': self.visit_jsx_element,
        }

    def is_factory_call(self, call: Node) -> bool:
        callee = ASTHandler.require_field(call, 'function')
        if callee.type == 'member_expression':
            prop = callee.child_by_field_name('property')
            return prop is not None and prop.text.decode('utf8') in self.factory_callees
        if callee.type == 'identifier':
            return callee.text.decode('utf8') in self.factory_callees
        return False

    def visit_call_expression(self, node: Node, visit_children: Continuation) -> None:
        if not self.name_found and self.is_factory_call(node):
            self.record_name(self.enclosing_binding)
            spec_object = _first_argument(node)
            if spec_object is not None and spec_object.type == 'object':
                self.read_state_supplier(spec_object)
            else:
                logger.warning(f"Factory call at line {node.start_point[0] + 1} has no configuration object")
        visit_children()

    def read_state_supplier(self, spec_object: Node) -> None:
        """Evaluate the state supplier of a factory configuration object, if any."""
        for member in spec_object.named_children:
            if member.type == 'pair':
                if _key_name(member.child_by_field_name('key')) != self.state_supplier:
                    continue
                supplier = ASTHandler.require_field(member, 'value')
            elif member.type == 'method_definition':
                if _key_name(member.child_by_field_name('name')) != self.state_supplier:
                    continue
                supplier = member
            else:
                continue
            if not self.state_found:
                self.record_state(get_component_state(_returned_expression(supplier)))
            return


@log_extraction_errors
def extract_factory_component(tree: Any) -> ComponentDescriptor:
    """
    Extract the factory-pattern component declared in ``tree``.

    Args:
        tree: Parsed ``Tree`` or its root ``Node``

    Returns:
        Descriptor of the component; ``name`` is empty when no factory call
        is enclosed by a named binding

    Raises:
        MalformedNodeError: If a node lacks a field the pattern requires
        UnevaluableInitializerError: If the initial state is not literal data
    """
    return FactoryComponentVisitor().extract(tree)
