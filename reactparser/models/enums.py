"""
Enumerations shared across reactparser.
"""
from enum import Enum

class ComponentPattern(str, Enum):
    """Component declaration idioms that can be extracted"""
    FACTORY = 'factory'
    CLASS = 'class'

class Dialect(str, Enum):
    """Grammars available to the parser"""
    JAVASCRIPT = 'javascript'
    TYPESCRIPT = 'typescript'
    TSX = 'tsx'

    @classmethod
    def for_extension(cls, extension: str) -> 'Dialect':
        """Pick a dialect from a file extension; unknown extensions fall back to TSX."""
        ext = extension.lower()
        if ext in ('.js', '.jsx', '.mjs', '.cjs'):
            return cls.JAVASCRIPT
        if ext == '.ts':
            return cls.TYPESCRIPT
        return cls.TSX
