"""Configuration module for Phraser."""

from .settings import Config
from .review_settings import SettingsRepository, parse_bool

__all__ = [
    'Config',
    'SettingsRepository',
    'parse_bool',
]
