"""
Backtrace grammars.

This package provides the grammar interface, the built-in grammars for each
stack trace convention and the registry the parser selects them from.
"""

from crashframe.grammars.base import FrameGrammar, RegexGrammar
from crashframe.grammars.patterns import (
    DATABASE_GRAMMAR,
    EMBEDDED_VM_GRAMMAR,
    GENERIC_GRAMMAR,
    NATIVE_GRAMMAR,
    TRANSPILED_SCRIPT_GRAMMAR,
)
from crashframe.grammars.registry import (
    GrammarNotRegisteredError,
    GrammarRegistry,
    create_default_registry,
)

__all__ = [
    'FrameGrammar',
    'RegexGrammar',
    'NATIVE_GRAMMAR',
    'EMBEDDED_VM_GRAMMAR',
    'DATABASE_GRAMMAR',
    'TRANSPILED_SCRIPT_GRAMMAR',
    'GENERIC_GRAMMAR',
    'GrammarRegistry',
    'GrammarNotRegisteredError',
    'create_default_registry',
]
