from .class_component import ClassComponentVisitor, extract_class_component
from .factory_component import FactoryComponentVisitor, extract_factory_component
from .initializer import evaluate_literal, get_component_state

__all__ = [
    'ClassComponentVisitor',
    'FactoryComponentVisitor',
    'evaluate_literal',
    'extract_class_component',
    'extract_factory_component',
    'get_component_state',
]
