"""Persistent review settings stored alongside the item collection."""

import logging
from dataclasses import replace
from typing import Any

from ..exceptions import ValidationError
from ..models import ReviewSettings

logger = logging.getLogger(__name__)

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


def parse_bool(value: Any) -> bool:
    """
    Parse a flag value given as bool, int or text.

    Args:
        value: True/False, 1/0, or one of "true/1/yes/on", "false/0/no/off"

    Returns:
        Parsed boolean

    Raises:
        ValidationError: If the value is not recognizable as a flag
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
    raise ValidationError(f"Not a boolean setting value: {value!r}")


class SettingsRepository:
    """
    Manages the review settings singleton.

    Stored values are merged over the defaults on every read, so a missing,
    partial or corrupt record still yields a complete ReviewSettings.
    Changes are immediately persisted.

    Usage:
        settings = SettingsRepository(store)
        if settings.get().active_input:
            ...
        settings.update("reverse_mode", True)
    """

    def __init__(self, store):
        """
        Initialize the settings repository.

        Args:
            store: RecordStore holding the settings record
        """
        # Imported here: services imports config at module load
        from ..services.store import StorageKeys

        self.store = store
        self.key = StorageKeys.SETTINGS

    def get(self) -> ReviewSettings:
        """
        Read the current settings.

        Returns:
            Stored settings merged over defaults
        """
        return ReviewSettings.from_record(self.store.get(self.key))

    def save(self, settings: ReviewSettings) -> None:
        """Persist the full settings record. Write failures are logged, not raised."""
        if not self.store.set(self.key, settings.to_record()):
            logger.error("Settings were not persisted")

    def update(self, name: str, value: Any) -> ReviewSettings:
        """
        Change a single setting.

        Args:
            name: One of ReviewSettings.names()
            value: New value (bool or flag text such as "on")

        Returns:
            The updated settings

        Raises:
            ValidationError: For an unknown name or unparseable value
        """
        if name not in ReviewSettings.names():
            raise ValidationError(
                f"Unknown setting {name!r}; expected one of {', '.join(ReviewSettings.names())}"
            )

        settings = replace(self.get(), **{name: parse_bool(value)})
        self.save(settings)
        return settings

    def reset(self) -> ReviewSettings:
        """Reset settings to defaults."""
        settings = ReviewSettings()
        self.save(settings)
        return settings
