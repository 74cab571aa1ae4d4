"""
Literal evaluation of state initializers.

State initializers are reduced to Python values by interpreting the syntax
tree directly. Only literal data is accepted: objects, arrays, strings,
numbers, booleans, ``null``/``undefined``, ``NaN``/``Infinity`` and signed
numbers. Calls, references to bindings, template strings, spreads, computed
keys and methods raise ``UnevaluableInitializerError``; no source code is
ever executed.
"""
import logging
import re
from typing import Any, Dict, List, Union

from tree_sitter import Node

from reactparser.core.error_handling import UnevaluableInitializerError
from reactparser.models.component import StateEntry

logger = logging.getLogger(__name__)

_SIMPLE_ESCAPES = {
    'n': '\n', 't': '\t', 'r': '\r', 'b': '\b', 'f': '\f', 'v': '\v', '0': '\0',
}
_LEGACY_OCTAL = re.compile(r'0[0-7]+')
_TRANSPARENT_TYPES = frozenset({'parenthesized_expression', 'as_expression', 'satisfies_expression'})
_IGNORED_TYPES = frozenset({'comment'})
_GLOBAL_CONSTANTS = {
    'undefined': None,
    'NaN': float('nan'),
    'Infinity': float('inf'),
}


def _reject(node: Node, reason: str) -> UnevaluableInitializerError:
    return UnevaluableInitializerError(
        node.type, reason, line=node.start_point[0] + 1, column=node.start_point[1]
    )


def _text(node: Node) -> str:
    return node.text.decode('utf8')


def _decode_escape(sequence: str) -> str:
    body = sequence[1:]
    if not body or body[0] in '\r\n\u2028\u2029':
        return ''
    head = body[0]
    if head in _SIMPLE_ESCAPES and len(body) == 1:
        return _SIMPLE_ESCAPES[head]
    if head == 'x':
        return chr(int(body[1:], 16))
    if head == 'u':
        digits = body[1:].strip('{}')
        return chr(int(digits, 16))
    if all(ch in '01234567' for ch in body):
        return chr(int(body, 8))
    return body


def decode_string(node: Node) -> str:
    """Decode a string literal, resolving escape sequences."""
    parts = []
    for child in node.named_children:
        if child.type == 'escape_sequence':
            parts.append(_decode_escape(_text(child)))
        elif child.type == 'string_fragment':
            parts.append(_text(child))
        elif child.type == 'html_character_reference':
            raise _reject(child, 'character references are not supported in state')
    value = ''.join(parts)
    try:
        return value.encode('utf-16', 'surrogatepass').decode('utf-16')
    except UnicodeDecodeError:
        return value


def parse_number(text: str) -> Union[int, float]:
    """Convert a JavaScript numeric literal to ``int`` or ``float``."""
    cleaned = text.replace('_', '')
    if cleaned.endswith('n'):
        return int(cleaned[:-1], 0)
    lowered = cleaned.lower()
    if lowered.startswith(('0x', '0o', '0b')):
        return int(lowered, 0)
    if _LEGACY_OCTAL.fullmatch(cleaned):
        return int(cleaned, 8)
    if '.' in lowered or 'e' in lowered:
        return float(cleaned)
    return int(cleaned)


def _property_key(key: Node) -> str:
    if key.type == 'property_identifier':
        return _text(key)
    if key.type == 'string':
        return decode_string(key)
    if key.type == 'number':
        number = parse_number(_text(key))
        if isinstance(number, float) and number.is_integer():
            number = int(number)
        return str(number)
    raise _reject(key, 'only identifier, string and number keys are literal')


def _evaluate_object(node: Node) -> Dict[str, Any]:
    result = {}
    for member in node.named_children:
        if member.type in _IGNORED_TYPES:
            continue
        if member.type != 'pair':
            raise _reject(member, 'only key/value pairs are literal')
        key = member.child_by_field_name('key')
        value = member.child_by_field_name('value')
        if key is None or value is None:
            raise _reject(member, 'incomplete property')
        result[_property_key(key)] = evaluate_literal(value)
    return result


def _evaluate_array(node: Node) -> List[Any]:
    return [evaluate_literal(item) for item in node.named_children if item.type not in _IGNORED_TYPES]


def _evaluate_unary(node: Node) -> Union[int, float]:
    operator = node.child_by_field_name('operator')
    argument = node.child_by_field_name('argument')
    if operator is None or argument is None or _text(operator) not in ('-', '+'):
        raise _reject(node, 'only numeric sign operators are literal')
    value = evaluate_literal(argument)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _reject(node, 'sign operators only apply to numbers')
    return -value if _text(operator) == '-' else value


def evaluate_literal(node: Node) -> Any:
    """
    Reduce a literal expression node to a Python value.

    Args:
        node: Expression node from a tree-sitter JavaScript/TypeScript tree

    Returns:
        ``dict`` (insertion ordered), ``list``, ``str``, ``int``, ``float``,
        ``bool`` or ``None``

    Raises:
        UnevaluableInitializerError: If the expression is not literal data
    """
    kind = node.type
    if kind == 'object':
        return _evaluate_object(node)
    if kind == 'array':
        return _evaluate_array(node)
    if kind == 'string':
        return decode_string(node)
    if kind == 'number':
        return parse_number(_text(node))
    if kind == 'true':
        return True
    if kind == 'false':
        return False
    if kind in ('null', 'undefined'):
        return None
    if kind == 'identifier' and _text(node) in _GLOBAL_CONSTANTS:
        return _GLOBAL_CONSTANTS[_text(node)]
    if kind == 'unary_expression':
        return _evaluate_unary(node)
    if kind in _TRANSPARENT_TYPES:
        inner = [child for child in node.named_children if child.type not in _IGNORED_TYPES]
        if not inner:
            raise _reject(node, 'empty expression')
        return evaluate_literal(inner[0])
    if kind == 'identifier':
        raise _reject(node, f"reference to binding '{_text(node)}'")
    if kind == 'template_string':
        raise _reject(node, 'template strings are not literal')
    raise _reject(node, 'expression is not literal data')


def get_component_state(node: Node) -> List[StateEntry]:
    """
    Evaluate an object-literal state initializer into ordered state entries.

    Raises:
        UnevaluableInitializerError: If ``node`` is not an object literal or
            contains non-literal values
    """
    while node.type in _TRANSPARENT_TYPES and node.named_children:
        node = node.named_children[0]
    if node.type != 'object':
        raise _reject(node, 'state initializer must be an object literal')
    values = _evaluate_object(node)
    logger.debug(f"Evaluated state initializer with keys {list(values)}")
    return [StateEntry(name=name, value=value) for name, value in values.items()]
