"""Scoring Tracker - records review outcomes against items."""

import logging

from .item_repository import ItemRepository

logger = logging.getLogger(__name__)


class ScoringTracker:
    """
    Increments per-item correct/incorrect counters.
    
    Each call is a read-modify-write of the full collection through the
    repository; only the counter changes, never the phrases or hint.
    """
    
    def __init__(self, repository: ItemRepository):
        self.repository = repository
    
    def record_correct(self, item_id: str) -> bool:
        """
        Record a correct answer.
        
        Args:
            item_id: Reviewed item
            
        Returns:
            False if no item has that id
        """
        return self._increment(item_id, correct=True)
    
    def record_incorrect(self, item_id: str) -> bool:
        """
        Record an incorrect answer.
        
        Args:
            item_id: Reviewed item
            
        Returns:
            False if no item has that id
        """
        return self._increment(item_id, correct=False)
    
    def record(self, item_id: str, correct: bool) -> bool:
        """Record a scored review outcome."""
        return self._increment(item_id, correct=bool(correct))
    
    def _increment(self, item_id: str, correct: bool) -> bool:
        def change(item) -> None:
            if correct:
                item.correct_count += 1
            else:
                item.incorrect_count += 1
        
        found = self.repository.mutate(item_id, change)
        if not found:
            logger.info("Ignoring review outcome for unknown item %r", item_id)
        return found
