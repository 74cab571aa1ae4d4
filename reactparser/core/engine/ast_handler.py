"""
AST Handler for reactparser providing a unified interface for tree-sitter operations.
"""
import logging
from functools import lru_cache
from typing import List, Optional, Tuple

from tree_sitter import Node

from reactparser.core.config import config
from reactparser.core.engine.languages import get_parser, resolve_dialect
from reactparser.core.error_handling import (
    EmptyProgramError,
    InvalidConfigurationError,
    InvalidSyntaxError,
    InvalidTypeError,
    MalformedNodeError,
)
from reactparser.core.utils.hashing import sha1_code

logger = logging.getLogger(__name__)

NON_STATEMENT_TYPES = frozenset({'comment', 'hash_bang_line'})


class ASTHandler:
    """
    Handles syntax tree operations using tree-sitter.
    Parses JavaScript/TypeScript source and provides strict accessors used by
    the component extractors.
    """

    def __init__(self, dialect: Optional[str] = None, strict: Optional[bool] = None):
        """
        Initialize the AST handler.

        Args:
            dialect: Grammar to use ('javascript', 'typescript' or 'tsx');
                defaults to the configured dialect
            strict: Reject sources containing syntax errors; defaults to the
                configured value
        """
        self.dialect = dialect or config.get('parsing', 'dialect', 'tsx')
        self.strict = config.get('parsing', 'strict', True) if strict is None else strict
        resolve_dialect(self.dialect)
        self._parsers = {}
        cache_size = config.get('parsing', 'cache_size', 128)
        if cache_size is not None and (not isinstance(cache_size, int) or cache_size < 0):
            raise InvalidConfigurationError('parsing.cache_size', cache_size, 'expected a non-negative integer or None')
        self._parse_cached = lru_cache(maxsize=cache_size)(self._parse_uncached)

    def _parser_for(self, grammar: str):
        parser = self._parsers.get(grammar)
        if parser is None:
            parser = get_parser(grammar)
            self._parsers[grammar] = parser
        return parser

    def _parse_uncached(self, code_hash: str, code: str, grammar: str) -> Node:
        """Internal cached parse implementation."""
        tree = self._parser_for(grammar).parse(code.encode('utf8'))
        return tree.root_node

    def parse(self, code: str, jsx: Optional[bool] = None) -> Node:
        """
        Parse source code into a syntax tree. Results are cached using an LRU
        cache keyed by the SHA1 hash of ``code``.

        Args:
            code: Source code as string
            jsx: Force embedded markup (JSX) syntax on or off; None uses the
                dialect's own grammar

        Returns:
            The ``program`` root node

        Raises:
            InvalidTypeError: If ``code`` is not a string
            InvalidSyntaxError: If strict parsing is on and the tree has errors
            EmptyProgramError: If the program has no top-level statements
        """
        if not isinstance(code, str):
            raise InvalidTypeError('code', code, str)
        grammar = resolve_dialect(self.dialect, jsx)
        root = self._parse_cached(sha1_code(code), code, grammar)
        if self.strict and root.has_error:
            error_node = self.find_error_node(root)
            line, column = self.get_node_position(error_node or root)
            snippet = self.get_node_text(error_node)[:80] if error_node else None
            logger.error(f"Syntax error in {grammar} source at line {line}, column {column}")
            raise InvalidSyntaxError('Source contains syntax errors', dialect=grammar,
                                     code_snippet=snippet, line=line, column=column)
        if not self.top_level_statements(root):
            raise EmptyProgramError()
        logger.debug(f"Parsed {len(code)} characters with the {grammar} grammar")
        return root

    @staticmethod
    def top_level_statements(root: Node) -> List[Node]:
        """Return the statements of a program, skipping comments."""
        return [child for child in root.named_children if child.type not in NON_STATEMENT_TYPES]

    def find_error_node(self, node: Node) -> Optional[Node]:
        """
        Find the first ERROR or MISSING node in document order.

        Args:
            node: Node to search from

        Returns:
            The offending node or None if the subtree is clean
        """
        stack = [node]
        while stack:
            current = stack.pop()
            if current.is_error or current.is_missing:
                return current
            stack.extend(child for child in reversed(current.children)
                         if child.has_error or child.is_missing)
        return None

    @staticmethod
    def get_node_text(node: Node) -> str:
        """Get the text content of a node."""
        return node.text.decode('utf8')

    @staticmethod
    def get_node_position(node: Node) -> Tuple[int, int]:
        """
        Get the start position of a node.

        Returns:
            Tuple of (line, column), line 1-indexed and column 0-indexed
        """
        return (node.start_point[0] + 1, node.start_point[1])

    @staticmethod
    def require_field(node: Node, field_name: str) -> Node:
        """
        Return the child stored under ``field_name`` or fail.

        Raises:
            MalformedNodeError: If the field is absent or was inserted by
                error recovery
        """
        child = node.child_by_field_name(field_name)
        if child is None or child.is_missing:
            raise MalformedNodeError(node.type, field_name, line=node.start_point[0] + 1)
        return child
