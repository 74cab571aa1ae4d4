"""
Core components for reactparser.
"""
from .config import config
from .error_handling import (
    ReactParserError, ParseError, EmptyProgramError, MalformedNodeError,
    UnevaluableInitializerError, log_extraction_errors
)
