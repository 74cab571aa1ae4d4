from .models.enums import ComponentPattern, Dialect
from .models.component import ComponentDescriptor, PropDescriptor, StateEntry
from .main import ReactParser
from .core.detector import has_component_declaration
from .core.extractors.class_component import extract_class_component
from .core.extractors.factory_component import extract_factory_component
from .core.error_handling import (
    EmptyProgramError,
    MalformedNodeError,
    ParseError,
    ReactParserError,
    UnevaluableInitializerError,
)

__version__ = "1.0.0"
__all__ = [
    "ReactParser",
    "ComponentPattern",
    "Dialect",
    "ComponentDescriptor",
    "PropDescriptor",
    "StateEntry",
    "has_component_declaration",
    "extract_class_component",
    "extract_factory_component",
    "ReactParserError",
    "ParseError",
    "EmptyProgramError",
    "MalformedNodeError",
    "UnevaluableInitializerError",
]
