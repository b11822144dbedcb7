"""Utils module."""

from .helpers import generate_item_id
from .parsing import TextParser
from .phonetics import generate_phonetic_hint
from .logger import setup_logger

__all__ = [
    'generate_item_id',
    'TextParser',
    'generate_phonetic_hint',
    'setup_logger',
]
