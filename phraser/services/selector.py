"""
Weighted Selector - adaptive choice of the next review item.

Weight model:
- success_rate = correct / (correct + incorrect), or 0.5 with no attempts
- weight = 1 / (success_rate + 0.1), ranging from 10.0 (0% success) to ~0.91 (100%)
- items with no attempts get NEW_ITEM_WEIGHT (10.0) directly, i.e. they are
  drawn as often as the worst-performing items rather than at the
  formula's 1.67 for a neutral 0.5 rate

Selection is cumulative-weight roulette over the collection order.
"""

import random
from typing import Callable, Optional, Sequence

from ..models import VocabularyItem

NEW_ITEM_SUCCESS_RATE = 0.5
NEW_ITEM_WEIGHT = 10.0
WEIGHT_OFFSET = 0.1


def success_rate(item: VocabularyItem) -> float:
    """
    Fraction of past reviews answered correctly.
    
    Returns:
        Value in [0, 1]; exactly 0.5 for an item never reviewed
    """
    total = item.correct_count + item.incorrect_count
    if total == 0:
        return NEW_ITEM_SUCCESS_RATE
    return item.correct_count / total


def calculate_weight(item: VocabularyItem) -> float:
    """
    Relative draw likelihood for an item; lower success means higher weight.
    
    Examples:
    - never reviewed -> 10.0
    - 0 / 5 correct  -> 1 / 0.1 = 10.0
    - 5 / 10 correct -> 1 / 0.6 = 1.67
    - 10 / 10 correct -> 1 / 1.1 = 0.91
    """
    if item.correct_count + item.incorrect_count == 0:
        return NEW_ITEM_WEIGHT
    return 1 / (success_rate(item) + WEIGHT_OFFSET)


class WeightedSelector:
    """
    Draws the next review item with probability proportional to its weight.
    
    Usage:
        selector = WeightedSelector()
        item = selector.select_next(repository.list())
        
        # Deterministic draws in tests
        selector = WeightedSelector(random_source=iter([0.0, 0.99]).__next__)
    """
    
    def __init__(self, random_source: Optional[Callable[[], float]] = None):
        """
        Initialize selector.
        
        Args:
            random_source: Zero-argument callable returning a uniform float in [0, 1)
        """
        self._random = random_source or random.random
    
    def select_next(self, items: Sequence[VocabularyItem]) -> Optional[VocabularyItem]:
        """
        Pick one item, biased toward items the user struggles with.
        
        Args:
            items: Current collection (as returned by ItemRepository.list())
            
        Returns:
            Selected item, or None for an empty collection
        """
        if not items:
            return None
        
        weights = [calculate_weight(item) for item in items]
        remaining = self._random() * sum(weights)
        
        for item, weight in zip(items, weights):
            remaining -= weight
            if remaining <= 0:
                return item
        
        # Rounding residue left remaining > 0
        return items[-1]
