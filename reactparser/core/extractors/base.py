"""
Shared machinery for the component pattern extractors.

Each extraction call creates its own visitor. The visitor owns the descriptor
being assembled and the stack of bindings enclosing the current node, and
hands its handler table to a ``TreeWalker``.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from tree_sitter import Node

from reactparser.core.engine.ast_handler import ASTHandler
from reactparser.core.engine.walker import Continuation, ExitCallback, Handler, TreeWalker
from reactparser.core.markup import get_child_components, get_props, get_tag_name
from reactparser.models.component import ComponentDescriptor, StateEntry
from reactparser.models.enums import ComponentPattern

logger = logging.getLogger(__name__)


def as_root_node(tree: Any) -> Node:
    """Accept either a ``Tree`` or a ``Node``."""
    return tree.root_node if hasattr(tree, 'root_node') else tree


class ComponentVisitor(ABC):
    """Base class for single-use component visitors."""

    pattern: ComponentPattern

    def __init__(self):
        self.descriptor = ComponentDescriptor()
        self.name_found = False
        self.state_found = False
        self.markup_found = False
        self._bindings: List[Optional[str]] = []

    @abstractmethod
    def handlers(self) -> Dict[str, Handler]:
        """Node kind to handler table used for the walk."""
        pass

    def extract(self, tree: Any) -> ComponentDescriptor:
        root = as_root_node(tree)
        logger.debug(f"Starting {self.pattern.value} component extraction")
        TreeWalker(self.handlers()).walk(root)
        logger.debug(f"Extracted {self.pattern.value} component '{self.descriptor.name}'")
        return self.descriptor

    @property
    def enclosing_binding(self) -> Optional[str]:
        """Name bound by the nearest enclosing declaration or assignment."""
        return self._bindings[-1] if self._bindings else None

    def _with_binding(self, target: Node, visit_children: Continuation) -> ExitCallback:
        name = target.text.decode('utf8') if target.type == 'identifier' else None
        self._bindings.append(name)
        visit_children()
        return self._bindings.pop

    def visit_variable_declarator(self, node: Node, visit_children: Continuation) -> ExitCallback:
        return self._with_binding(ASTHandler.require_field(node, 'name'), visit_children)

    def visit_assignment_expression(self, node: Node, visit_children: Continuation) -> ExitCallback:
        return self._with_binding(ASTHandler.require_field(node, 'left'), visit_children)

    def record_name(self, name: Optional[str]) -> None:
        self.name_found = True
        self.descriptor.name = name or ''
        logger.debug(f"Recognized {self.pattern.value} component '{self.descriptor.name}'")

    def record_state(self, state: List[StateEntry]) -> None:
        self.state_found = True
        self.descriptor.state = state

    def record_markup(self, element: Node) -> None:
        """Populate props and children from the root rendered element."""
        self.markup_found = True
        self.descriptor.props = get_props(element)
        self.descriptor.children = get_child_components(element)
        logger.debug(f"Root element <{get_tag_name(element) or ''}> has "
                     f"{len(self.descriptor.props)} props and {len(self.descriptor.children)} child components")

    def visit_jsx_element(self, node: Node, visit_children: Continuation) -> None:
        if not self.markup_found:
            self.record_markup(node)
