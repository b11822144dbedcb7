"""Text parsing utilities for consistent text processing across the application."""

import re
import unicodedata


class TextParser:
    """
    Centralized text parsing utilities.
    
    Single source of truth for phrase cleanup and the character-level
    transforms used by answer comparison.
    """
    
    # Anything that is neither a word character nor whitespace
    PUNCTUATION_PATTERN = re.compile(r'[^\w\s]')
    
    @classmethod
    def normalize_unicode(cls, text: str) -> str:
        """
        Normalize text to NFC form for consistent Unicode handling.
        
        Prevents issues with characters like é being represented as
        either a single codepoint (NFC) or base + combining accent (NFD).
        
        Args:
            text: Input text
            
        Returns:
            NFC-normalized text
        """
        if not text:
            return ""
        return unicodedata.normalize('NFC', str(text))
    
    @classmethod
    def clean_phrase(cls, text: str) -> str:
        """
        Trim and NFC-normalize a phrase before it is stored.
        
        Args:
            text: Raw user input
            
        Returns:
            Cleaned phrase (empty string for None)
        """
        if text is None:
            return ""
        return cls.normalize_unicode(str(text).strip())
    
    @classmethod
    def strip_diacritics(cls, text: str) -> str:
        """
        Decompose text (NFD) and drop all combining marks.
        
        "café" -> "cafe", "Ångström" -> "Angstrom".
        """
        if not text:
            return ""
        decomposed = unicodedata.normalize('NFD', str(text))
        return "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    
    @classmethod
    def strip_punctuation(cls, text: str) -> str:
        """Remove every character that is not a word character or whitespace."""
        if not text:
            return ""
        return cls.PUNCTUATION_PATTERN.sub('', str(text))
