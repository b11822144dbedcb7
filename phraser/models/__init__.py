"""Data models for Phraser."""

from .item import VocabularyItem
from .settings import ReviewSettings

__all__ = ['VocabularyItem', 'ReviewSettings']
