"""Phraser - adaptive vocabulary flashcards"""

__version__ = "1.0.0"
__author__ = "Phraser Team"

from .config import Config, SettingsRepository
from .exceptions import PhraserError, StorageError, ValidationError
from .models import ReviewSettings, VocabularyItem
from .services import (
    ItemRepository,
    RecordStore,
    ScoringTracker,
    WeightedSelector,
    create_store,
    validate,
)

__all__ = [
    'Config',
    'SettingsRepository',
    'PhraserError',
    'StorageError',
    'ValidationError',
    'ReviewSettings',
    'VocabularyItem',
    'ItemRepository',
    'RecordStore',
    'ScoringTracker',
    'WeightedSelector',
    'create_store',
    'validate',
]
