"""
Extraction of components declared as classes extending a base component.
"""
import logging
from typing import Any, Dict, Iterable, Optional

from tree_sitter import Node

from reactparser.core.config import config
from reactparser.core.engine.ast_handler import ASTHandler
from reactparser.core.engine.walker import Continuation, ExitCallback, Handler
from reactparser.core.error_handling import log_extraction_errors
from reactparser.core.extractors.base import ComponentVisitor
from reactparser.core.extractors.initializer import get_component_state
from reactparser.models.component import ComponentDescriptor
from reactparser.models.enums import ComponentPattern

logger = logging.getLogger(__name__)

STATE_FIELD = 'state'


def get_superclass(class_node: Node) -> Optional[Node]:
    """
    Return the expression a class extends, or None for classes without one.

    Raises:
        MalformedNodeError: If an ``extends`` clause has no value
    """
    heritage = next((child for child in class_node.named_children if child.type == 'class_heritage'), None)
    if heritage is None:
        return None
    clauses = [child for child in heritage.named_children if child.type != 'comment']
    extends_clause = next((child for child in clauses if child.type == 'extends_clause'), None)
    if extends_clause is not None:
        return ASTHandler.require_field(extends_clause, 'value')
    # The JavaScript grammar puts the superclass expression directly under
    # the heritage node; TypeScript wraps it in an extends clause.
    if not clauses or clauses[0].type == 'implements_clause':
        return None
    return clauses[0]


def _is_this_state(target: Node) -> bool:
    if target.type != 'member_expression':
        return False
    obj = target.child_by_field_name('object')
    prop = target.child_by_field_name('property')
    return (obj is not None and obj.type == 'this'
            and prop is not None and prop.text.decode('utf8') == STATE_FIELD)


class ClassComponentVisitor(ComponentVisitor):
    """Single-use visitor assembling a class-pattern component."""

    pattern = ComponentPattern.CLASS

    def __init__(self, base_components: Optional[Iterable[str]] = None):
        super().__init__()
        self.base_components = frozenset(
            base_components or config.get('extraction', 'base_components', ['Component']))
        self.in_component = False

    def handlers(self) -> Dict[str, Handler]:
        return {
            'class_declaration': self.visit_class,
            'class': self.visit_class,
            'variable_declarator': self.visit_variable_declarator,
            'assignment_expression': self.visit_assignment_expression,
            'field_definition': self.visit_field_definition,
            'public_field_definition': self.visit_field_definition,
            'jsx_element': self.visit_jsx_element,
            'jsx_self_closing_element': self.visit_jsx_element,
        }

    def is_component_class(self, class_node: Node) -> bool:
        superclass = get_superclass(class_node)
        if superclass is None:
            return False
        if superclass.type == 'member_expression':
            prop = superclass.child_by_field_name('property')
            return prop is not None and prop.text.decode('utf8') in self.base_components
        return superclass.text.decode('utf8') in self.base_components

    def visit_class(self, node: Node, visit_children: Continuation) -> Optional[ExitCallback]:
        if self.name_found or not self.is_component_class(node):
            return None
        if node.type == 'class_declaration':
            name = ASTHandler.require_field(node, 'name').text.decode('utf8')
        else:
            name_node = node.child_by_field_name('name')
            name = name_node.text.decode('utf8') if name_node is not None else self.enclosing_binding
        self.record_name(name)
        self.in_component = True
        visit_children()
        return self._leave_component

    def _leave_component(self) -> None:
        self.in_component = False

    def visit_assignment_expression(self, node: Node, visit_children: Continuation) -> ExitCallback:
        target = ASTHandler.require_field(node, 'left')
        if self.in_component and not self.state_found and _is_this_state(target):
            self.record_state(get_component_state(ASTHandler.require_field(node, 'right')))
        return super().visit_assignment_expression(node, visit_children)

    def visit_field_definition(self, node: Node, visit_children: Continuation) -> None:
        name = node.child_by_field_name('property') or node.child_by_field_name('name')
        value = node.child_by_field_name('value')
        if (self.in_component and not self.state_found and value is not None
                and name is not None and name.text.decode('utf8') == STATE_FIELD):
            self.record_state(get_component_state(value))
        visit_children()

    def visit_jsx_element(self, node: Node, visit_children: Continuation) -> None:
        if self.in_component:
            super().visit_jsx_element(node, visit_children)


@log_extraction_errors
def extract_class_component(tree: Any) -> ComponentDescriptor:
    """
    Extract the class-pattern component declared in ``tree``.

    Args:
        tree: Parsed ``Tree`` or its root ``Node``

    Returns:
        Descriptor of the first class extending a base component; ``name``
        is empty when no such class exists

    Raises:
        MalformedNodeError: If a node lacks a field the pattern requires
        UnevaluableInitializerError: If the state initializer is not literal data
    """
    return ClassComponentVisitor().extract(tree)
