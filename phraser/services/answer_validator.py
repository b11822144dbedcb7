"""
Answer Validator - free-text answer checking for active-input review.

Comparison ignores case, diacritics and punctuation, so "DON'T", "dont"
and "don't" match, as do "café"/"cafe" and "hello, world!"/"hello world".
"""

from ..utils.parsing import TextParser


def normalize(text: str) -> str:
    """
    Canonicalize text for comparison.
    
    Decomposes (NFD) and drops combining marks, removes every character that
    is not a word character or whitespace, lowercases, then trims.
    """
    if not text:
        return ""
    text = TextParser.strip_diacritics(text)
    text = TextParser.strip_punctuation(text)
    return text.lower().strip()


def compare(first: str, second: str) -> bool:
    """True if both strings normalize identically."""
    return normalize(first) == normalize(second)


def validate(user_input: str, correct_answer: str) -> bool:
    """
    Check a typed answer against the canonical one.
    
    Empty (or whitespace-only) input is always wrong, even against an
    empty answer.
    
    Args:
        user_input: Text typed by the user
        correct_answer: Expected answer
        
    Returns:
        True if the answer matches after normalization
    """
    if not user_input or not user_input.strip():
        return False
    return compare(user_input, correct_answer or "")
