"""
Error handling utilities for reactparser.

This module provides the exception hierarchy used throughout the package.
Every error carries an optional context dictionary that is rendered into its
string form, so a failed extraction reports where in the tree it stopped.
Extraction never recovers from these errors: a call either returns a complete
descriptor or raises one of them.
"""
import functools
import logging
from typing import Any, Callable, Optional, Tuple, Type, Union

logger = logging.getLogger('reactparser')

class ReactParserError(Exception):
    """Base class for all reactparser exceptions."""
    def __init__(self, message: str, **kwargs):
        self.message = message
        self.context = dict(kwargs.get('context') or {})

        for key, value in kwargs.items():
            if key != 'context' and value is not None:
                self.context[key] = value

        super().__init__(message)

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context information to the exception.

        Args:
            key: The context key
            value: The context value
        """
        self.context[key] = value

    def __str__(self) -> str:
        if not self.context:
            return self.message

        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} [Context: {context_str}]"

# ===== Validation Errors =====

class ValidationError(ReactParserError):
    """Exception raised for input validation failures."""
    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Optional[Any] = None, expected: Optional[str] = None, **kwargs):
        super().__init__(message, parameter=parameter, expected=expected, **kwargs)
        self.parameter = parameter
        self.value = value
        self.expected = expected

class InvalidTypeError(ValidationError):
    """Exception raised when a parameter has an incorrect type."""
    def __init__(self, parameter: str, value: Any, expected_type: Union[Type, Tuple[Type, ...], str], **kwargs):
        if isinstance(expected_type, str):
            expected_type_str = expected_type
        elif isinstance(expected_type, tuple):
            expected_type_str = ', '.join(t.__name__ for t in expected_type)
        else:
            expected_type_str = expected_type.__name__
        message = f"Invalid type for parameter '{parameter}': {type(value).__name__}. Expected: {expected_type_str}"
        super().__init__(message, parameter=parameter, value=value, expected=expected_type_str, **kwargs)

# ===== Configuration Errors =====

class ConfigurationError(ReactParserError):
    """Exception raised for issues with configuration settings."""
    pass

class InvalidConfigurationError(ConfigurationError):
    """Exception raised when a configuration setting has an invalid value."""
    def __init__(self, setting: str, value: Any, reason: str, **kwargs):
        message = f"Invalid configuration setting '{setting}': {value}. Reason: {reason}"
        super().__init__(message, setting=setting, reason=reason, **kwargs)
        self.setting = setting
        self.value = value
        self.reason = reason

class UnsupportedDialectError(ReactParserError):
    """Exception raised when no grammar is available for a dialect."""
    def __init__(self, dialect: str, **kwargs):
        message = f"Unsupported dialect: '{dialect}'"
        super().__init__(message, dialect=dialect, **kwargs)
        self.dialect = dialect

# ===== Parsing Errors =====

class ParseError(ReactParserError):
    """Exception raised when source code cannot be turned into a usable tree."""
    def __init__(self, message: str, code_snippet: Optional[str] = None,
                 position: Optional[Tuple[int, int]] = None, **kwargs):
        super().__init__(message, position=position, **kwargs)
        self.code_snippet = code_snippet
        self.position = position

class InvalidSyntaxError(ParseError):
    """Exception raised when the parser reports an error or missing node."""
    def __init__(self, message: str, dialect: str, code_snippet: Optional[str] = None,
                 line: Optional[int] = None, column: Optional[int] = None, **kwargs):
        position = (line, column) if line is not None and column is not None else None
        super().__init__(message, code_snippet=code_snippet, position=position,
                         dialect=dialect, **kwargs)
        self.dialect = dialect
        self.line = line
        self.column = column

class EmptyProgramError(ParseError):
    """Exception raised when a program has no top-level statements."""
    def __init__(self, **kwargs):
        super().__init__("Empty AST input: program has no top-level statements", **kwargs)

# ===== AST Navigation Errors =====

class ASTNavigationError(ReactParserError):
    """Exception raised for problems navigating the syntax tree."""
    pass

class MalformedNodeError(ASTNavigationError):
    """Exception raised when a visited node lacks a field its pattern requires."""
    def __init__(self, node_type: str, field: str, line: Optional[int] = None, **kwargs):
        message = f"Node of type '{node_type}' is missing required field '{field}'"
        super().__init__(message, node_type=node_type, field=field, line=line, **kwargs)
        self.node_type = node_type
        self.field = field
        self.line = line

# ===== Extraction Errors =====

class ExtractionError(ReactParserError):
    """Exception raised for errors during component extraction."""
    pass

class UnevaluableInitializerError(ExtractionError):
    """Exception raised when a state initializer is not plain literal data."""
    def __init__(self, node_type: str, reason: str, line: Optional[int] = None,
                 column: Optional[int] = None, **kwargs):
        message = f"Cannot evaluate '{node_type}' as literal state: {reason}"
        super().__init__(message, node_type=node_type, line=line, column=column, **kwargs)
        self.node_type = node_type
        self.reason = reason
        self.line = line
        self.column = column

# ===== Utility Decorators =====

def log_extraction_errors(func: Callable) -> Callable:
    """
    Decorator that logs extraction failures and re-raises them unchanged.

    Args:
        func: The function to wrap

    Returns:
        Wrapped function
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ReactParserError as e:
            logger.error(f"{func.__name__} failed: {e}")
            raise
        except Exception as e:
            logger.exception(f"Unexpected error during {func.__name__}: {str(e)}")
            raise

    return wrapper
