import logging
import os
from typing import Optional, Union

from tree_sitter import Node

from .core.detector import detect_pattern, has_component_declaration
from .core.engine.ast_handler import ASTHandler
from .core.extractors.class_component import extract_class_component
from .core.extractors.factory_component import extract_factory_component
from .models.component import ComponentDescriptor
from .models.enums import ComponentPattern, Dialect

logger = logging.getLogger(__name__)

_EXTRACTORS = {
    ComponentPattern.FACTORY: extract_factory_component,
    ComponentPattern.CLASS: extract_class_component,
}


class ReactParser:
    """
    Main entry point for reactparser.
    Parses JavaScript/TypeScript source and extracts the component it declares.
    """

    def __init__(self, dialect: Union[Dialect, str, None] = None, strict: Optional[bool] = None):
        """
        Initialize the parser for a dialect.

        Args:
            dialect: 'javascript', 'typescript' or 'tsx'; defaults to the
                configured dialect
            strict: Reject sources with syntax errors; defaults to the
                configured value

        Raises:
            UnsupportedDialectError: If the dialect has no grammar
        """
        if isinstance(dialect, Dialect):
            dialect = dialect.value
        self.ast_handler = ASTHandler(dialect, strict)

    @property
    def dialect(self) -> str:
        return self.ast_handler.dialect

    @classmethod
    def from_file_path(cls, file_path: str, strict: Optional[bool] = None) -> "ReactParser":
        """Create a parser whose dialect matches the file extension."""
        dialect = Dialect.for_extension(os.path.splitext(file_path)[1])
        return cls(dialect, strict)

    @staticmethod
    def load_file(file_path: str) -> str:
        with open(file_path, 'r', encoding='utf8') as f:
            return f.read()

    def parse(self, code: str, jsx: Optional[bool] = None) -> Node:
        """
        Parse ``code`` into a syntax tree.

        Raises:
            ParseError: If the code has syntax errors or no statements
        """
        return self.ast_handler.parse(code, jsx=jsx)

    @staticmethod
    def has_component_declaration(root: Node) -> bool:
        return has_component_declaration(root)

    @staticmethod
    def extract_factory_component(root: Node) -> ComponentDescriptor:
        return extract_factory_component(root)

    @staticmethod
    def extract_class_component(root: Node) -> ComponentDescriptor:
        return extract_class_component(root)

    def extract(self, code: str,
                pattern: Union[ComponentPattern, str, None] = None) -> ComponentDescriptor:
        """
        Parse ``code`` and extract its component.

        Args:
            code: Source code
            pattern: Declaration idiom to look for. When omitted the idiom is
                detected from the top-level statements, and the other idiom is
                tried if the detected one finds no component.

        Returns:
            ComponentDescriptor of the declared component
        """
        root = self.parse(code)
        if pattern is not None:
            return _EXTRACTORS[ComponentPattern(pattern)](root)
        detected = detect_pattern(root)
        descriptor = _EXTRACTORS[detected](root)
        if descriptor.name:
            return descriptor
        fallback = ComponentPattern.FACTORY if detected == ComponentPattern.CLASS else ComponentPattern.CLASS
        logger.debug(f"No {detected.value} component found, trying the {fallback.value} pattern")
        fallback_descriptor = _EXTRACTORS[fallback](root)
        return fallback_descriptor if fallback_descriptor.name else descriptor

    def extract_file(self, file_path: str,
                     pattern: Union[ComponentPattern, str, None] = None) -> ComponentDescriptor:
        return self.extract(self.load_file(file_path), pattern)
