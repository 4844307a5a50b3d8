"""
Registry of backtrace grammars.

This module maps each FormatPattern tag to the grammar that parses it.
"""

from typing import Dict, Iterable, List, Optional

from crashframe.grammars.base import FrameGrammar
from crashframe.grammars.patterns import ALL_GRAMMARS
from crashframe.models.frame import FormatPattern
from crashframe.utils.logging import get_logger

logger = get_logger(__name__)


class GrammarNotRegisteredError(LookupError):
    """Raised when no grammar is registered for a FormatPattern."""
    pass


class GrammarRegistry:
    """Manages grammar registration and lookup by tag."""
    
    def __init__(self, grammars: Optional[Iterable[FrameGrammar]] = None):
        self._grammars: Dict[FormatPattern, FrameGrammar] = {}
        for grammar in grammars or []:
            self.register(grammar)
    
    def register(self, grammar: FrameGrammar) -> None:
        """
        Register a grammar under its own tag.
        
        Args:
            grammar: FrameGrammar instance to register
        """
        pattern = grammar.pattern
        
        if pattern in self._grammars:
            logger.warning(f"Grammar for '{pattern.value}' already registered, overwriting")
        
        self._grammars[pattern] = grammar
        logger.debug(f"Registered grammar for '{pattern.value}'")
    
    def get(self, pattern: FormatPattern) -> FrameGrammar:
        """
        Get the grammar registered for a tag.
        
        Args:
            pattern: FormatPattern to look up
            
        Returns:
            The registered FrameGrammar
            
        Raises:
            GrammarNotRegisteredError: If no grammar is registered for the tag
        """
        try:
            return self._grammars[pattern]
        except KeyError:
            raise GrammarNotRegisteredError(
                f"No grammar registered for '{pattern.value}'"
            ) from None
    
    def list_patterns(self) -> List[FormatPattern]:
        """List all tags with a registered grammar."""
        return list(self._grammars.keys())


def create_default_registry() -> GrammarRegistry:
    """Create a registry holding the built-in grammars."""
    return GrammarRegistry(ALL_GRAMMARS)
