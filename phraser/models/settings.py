"""Review settings model."""

from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass
class ReviewSettings:
    """Process-wide review preferences."""
    
    # Type answers instead of passively revealing them
    active_input: bool = False
    # Prompt with the target text and expect the source text
    reverse_mode: bool = False
    # Show correct and incorrect answers in green and red
    color_coded_feedback: bool = False
    
    RECORD_FIELDS = {
        "active_input": "activeInputEnabled",
        "reverse_mode": "reverseModeEnabled",
        "color_coded_feedback": "colorCodedFeedbackEnabled",
    }
    
    @classmethod
    def names(cls) -> list:
        """Setting names in declaration order."""
        return [f.name for f in fields(cls)]
    
    def to_record(self) -> Dict[str, bool]:
        return {
            self.RECORD_FIELDS[name]: bool(getattr(self, name))
            for name in self.names()
        }
    
    @classmethod
    def from_record(cls, record: Any) -> "ReviewSettings":
        """Merge a stored record over the defaults, ignoring unknown or non-bool values."""
        settings = cls()
        if not isinstance(record, dict):
            return settings
        
        for name, key in cls.RECORD_FIELDS.items():
            value = record.get(key)
            if isinstance(value, bool):
                setattr(settings, name, value)
        return settings
