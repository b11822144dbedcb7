"""Vocabulary item model."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class VocabularyItem:
    """A source/target phrase pair with its review statistics."""
    
    id: str
    source_text: str
    target_text: str
    phonetic_hint: str = ""
    
    # Review statistics
    correct_count: int = 0
    incorrect_count: int = 0
    
    # Persisted record field names
    RECORD_FIELDS = {
        "id": "id",
        "source_text": "sourceText",
        "target_text": "targetText",
        "phonetic_hint": "phoneticHint",
        "correct_count": "correctCount",
        "incorrect_count": "incorrectCount",
    }
    
    @property
    def total_attempts(self) -> int:
        """Number of scored reviews for this item."""
        return self.correct_count + self.incorrect_count
    
    def to_record(self) -> Dict[str, Any]:
        """Convert to the persisted record layout."""
        return {
            self.RECORD_FIELDS[name]: value
            for name, value in asdict(self).items()
        }
    
    @classmethod
    def from_record(cls, record: Any) -> Optional["VocabularyItem"]:
        """
        Build an item from a persisted record.
        
        Returns None when the record is not a mapping or is missing its
        id or either phrase. Missing or malformed counters default to 0.
        
        Args:
            record: Decoded record from the store
            
        Returns:
            VocabularyItem or None
        """
        if not isinstance(record, dict):
            return None
        
        item_id = record.get("id")
        source = record.get("sourceText")
        target = record.get("targetText")
        if not all(isinstance(v, str) and v.strip() for v in (item_id, source, target)):
            return None
        
        hint = record.get("phoneticHint")
        return cls(
            id=item_id,
            source_text=source,
            target_text=target,
            phonetic_hint=hint if isinstance(hint, str) else "",
            correct_count=_as_count(record.get("correctCount")),
            incorrect_count=_as_count(record.get("incorrectCount")),
        )


def _as_count(value: Any) -> int:
    """Coerce a stored counter to a non-negative int."""
    if isinstance(value, bool):
        return 0
    try:
        return max(0, int(value))
    except (TypeError, ValueError, OverflowError):
        return 0
