"""Phonetic hint derivation for Mandarin phrases."""

import logging

from pypinyin import Style, pinyin

logger = logging.getLogger(__name__)


def generate_phonetic_hint(text: str) -> str:
    """
    Generate tone-marked pinyin for Mandarin text.
    
    Characters without a reading (latin letters, digits, punctuation) are
    passed through as-is. Never raises.
    
    Args:
        text: Source phrase
        
    Returns:
        Space-separated pinyin like "nǐ hǎo", or "" on failure
    """
    if not text or not text.strip():
        return ""
    
    try:
        syllables = pinyin(text.strip(), style=Style.TONE, heteronym=False)
        return " ".join(s[0] for s in syllables if s and s[0].strip())
    except Exception as e:
        logger.debug("Phonetic hint failed for %r: %s", text, e)
        return ""
