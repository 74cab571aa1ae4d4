from tree_sitter import Node

from reactparser.core.engine.ast_handler import ASTHandler
from reactparser.models.enums import ComponentPattern

CLASS_DECLARATION_TYPES = frozenset({'class_declaration', 'abstract_class_declaration'})


def is_default_export(statement: Node) -> bool:
    return statement.type == 'export_statement' and any(
        child.type == 'default' for child in statement.children)


def has_component_declaration(root: Node) -> bool:
    """True when any top-level statement is a class declaration or a default export."""
    for statement in ASTHandler.top_level_statements(root):
        if statement.type in CLASS_DECLARATION_TYPES or is_default_export(statement):
            return True
    return False


def detect_pattern(root: Node) -> ComponentPattern:
    """Pick the extraction pattern a parsed program most likely uses."""
    if has_component_declaration(root):
        return ComponentPattern.CLASS
    return ComponentPattern.FACTORY
