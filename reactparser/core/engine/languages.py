"""
Tree-sitter grammars available to reactparser.
"""
import logging
from typing import Dict, Optional

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Parser

from reactparser.core.error_handling import UnsupportedDialectError

logger = logging.getLogger(__name__)

JS_LANGUAGE = Language(tree_sitter_javascript.language())
TS_LANGUAGE = Language(tree_sitter_typescript.language_typescript())
TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())

LANGUAGES: Dict[str, Language] = {
    'javascript': JS_LANGUAGE,
    'typescript': TS_LANGUAGE,
    'tsx': TSX_LANGUAGE,
}


def resolve_dialect(dialect: str, jsx: Optional[bool] = None) -> str:
    """
    Resolve the grammar name used for ``dialect``.

    With ``jsx`` left as None each dialect uses its own grammar, so `.ts`
    sources keep angle-bracket type assertions. Plain TypeScript cannot contain
    JSX, so ``jsx=True`` upgrades it to TSX and ``jsx=False`` downgrades TSX to
    TypeScript. The JavaScript grammar always accepts JSX.
    """
    if dialect not in LANGUAGES:
        raise UnsupportedDialectError(dialect)
    if dialect == 'typescript' and jsx:
        return 'tsx'
    if dialect == 'tsx' and jsx is False:
        return 'typescript'
    return dialect


def get_parser(dialect: str) -> Parser:
    """Create a parser for ``dialect``."""
    language = LANGUAGES.get(dialect)
    if language is None:
        raise UnsupportedDialectError(dialect)
    logger.debug(f"Creating tree-sitter parser for {dialect}")
    return Parser(language)
