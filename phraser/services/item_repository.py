"""
Item Repository - CRUD operations for vocabulary items.

The repository is the only in-process writer of the item collection. It
keeps no cache: every call reads the collection from the record store and
every mutation writes the whole collection back, so the store always holds
the latest state.
"""

import logging
from collections import abc
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import ValidationError
from ..models import VocabularyItem
from ..utils.helpers import generate_item_id
from ..utils.parsing import TextParser
from ..utils.phonetics import generate_phonetic_hint
from .store import RecordStore, StorageKeys

logger = logging.getLogger(__name__)


class ItemRepository:
    """
    Repository for vocabulary items.

    Provides CRUD operations, batch import, search and statistics over the
    collection persisted under StorageKeys.ITEMS.

    Usage:
        repo = ItemRepository(create_store())
        item = repo.create("你好", "hello")
        repo.update(item.id, "你好吗", "how are you")
        items = repo.list()
    """

    def __init__(
        self,
        store: RecordStore,
        phonetic: Callable[[str], str] = generate_phonetic_hint,
        id_factory: Callable[..., str] = generate_item_id
    ):
        """
        Initialize item repository.

        Args:
            store: Record store holding the collection
            phonetic: Derives the phonetic hint from a source phrase
            id_factory: Generates a fresh id; receives the set of ids in use
        """
        self.store = store
        self._phonetic = phonetic
        self._id_factory = id_factory
        self._change_callbacks: List[Callable[[], None]] = []

    def on_change(self, callback: Callable[[], None]) -> None:
        """
        Register a callback for data changes.

        Args:
            callback: Function to call after each persisted mutation
        """
        self._change_callbacks.append(callback)

    def _notify_change(self) -> None:
        """Notify all registered callbacks of data change."""
        for callback in self._change_callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Change callback %r failed", callback)

    # ==================== Persistence path ====================

    def _load(self) -> List[VocabularyItem]:
        """Read the collection, dropping records that cannot form a valid item."""
        records = self.store.get(StorageKeys.ITEMS)
        if records is None:
            return []
        if not isinstance(records, list):
            logger.warning("Item collection is not a list; treating as empty")
            return []

        items: List[VocabularyItem] = []
        seen = set()
        for record in records:
            item = VocabularyItem.from_record(record)
            if item is None:
                logger.warning("Skipping malformed item record: %r", record)
                continue
            if item.id in seen:
                logger.warning("Skipping duplicate item id %r", item.id)
                continue
            seen.add(item.id)
            items.append(item)
        return items

    def _save(self, items: Sequence[VocabularyItem]) -> None:
        """Write the full collection. Failures are logged by the store, never raised."""
        if not self.store.set(StorageKeys.ITEMS, [item.to_record() for item in items]):
            logger.error("Item collection was not persisted (%d items)", len(items))
        self._notify_change()

    def mutate(self, item_id: str, change: Callable[[VocabularyItem], None]) -> bool:
        """
        Apply change to the item with item_id and persist the collection.

        Args:
            item_id: Target item id
            change: Mutates the item in place

        Returns:
            False if no item has that id
        """
        items = self._load()
        for item in items:
            if item.id == item_id:
                change(item)
                self._save(items)
                return True
        return False

    def _clean_pair(self, source_text: Any, target_text: Any) -> Tuple[str, str]:
        """Trim and normalize both phrases, raising ValidationError if either is empty."""
        source = TextParser.clean_phrase(source_text)
        target = TextParser.clean_phrase(target_text)
        if not source:
            raise ValidationError("Source text must not be empty")
        if not target:
            raise ValidationError("Target text must not be empty")
        return source, target

    def _derive_hint(self, source: str) -> str:
        try:
            return self._phonetic(source) or ""
        except Exception as e:
            logger.debug("Phonetic hint failed for %r: %s", source, e)
            return ""

    def _build_item(self, source_text: Any, target_text: Any, used_ids: set) -> VocabularyItem:
        source, target = self._clean_pair(source_text, target_text)
        item = VocabularyItem(
            id=self._id_factory(used_ids),
            source_text=source,
            target_text=target,
            phonetic_hint=self._derive_hint(source),
        )
        used_ids.add(item.id)
        return item

    # ==================== CRUD ====================

    def list(self) -> List[VocabularyItem]:
        """
        Get all items in insertion order.

        Returns:
            Items (empty if the store is unreadable or corrupt)
        """
        return self._load()

    def get(self, item_id: str) -> Optional[VocabularyItem]:
        """Get a single item by id, or None."""
        for item in self._load():
            if item.id == item_id:
                return item
        return None

    def count(self) -> int:
        """Get total item count."""
        return len(self._load())

    def create(self, source_text: str, target_text: str) -> VocabularyItem:
        """
        Create, persist and return a new item.

        Args:
            source_text: Phrase in the source language
            target_text: Translation

        Returns:
            The created item with zeroed counters

        Raises:
            ValidationError: If either phrase is empty after trimming
        """
        items = self._load()
        item = self._build_item(source_text, target_text, {i.id for i in items})
        items.append(item)
        self._save(items)
        return item

    def create_batch(self, entries: Iterable[Tuple[str, str]]) -> List[VocabularyItem]:
        """
        Create many items with a single write.

        Entries that fail validation are skipped rather than aborting the batch.

        Args:
            entries: (source_text, target_text) pairs

        Returns:
            The items that were created, in input order
        """
        items = self._load()
        used_ids = {i.id for i in items}
        created: List[VocabularyItem] = []

        for position, entry in enumerate(entries):
            if isinstance(entry, (str, bytes)) or not isinstance(entry, abc.Sequence):
                logger.info("Skipping batch entry %d: not a (source, target) pair", position)
                continue
            try:
                source_text, target_text = entry
                created.append(self._build_item(source_text, target_text, used_ids))
            except (ValidationError, TypeError, ValueError) as e:
                logger.info("Skipping batch entry %d: %s", position, e)

        if created:
            items.extend(created)
            self._save(items)
        return created

    def update(self, item_id: str, source_text: str, target_text: str) -> bool:
        """
        Replace an item's phrases and re-derive its hint, keeping its counters.

        Args:
            item_id: Item id
            source_text: New source phrase
            target_text: New translation

        Returns:
            False if no item has that id

        Raises:
            ValidationError: If either phrase is empty after trimming
        """
        items = self._load()
        item = next((i for i in items if i.id == item_id), None)
        if item is None:
            return False

        source, target = self._clean_pair(source_text, target_text)
        item.source_text = source
        item.target_text = target
        item.phonetic_hint = self._derive_hint(source)
        self._save(items)
        return True

    def delete(self, item_id: str) -> bool:
        """
        Delete an item.

        Returns:
            False if no item has that id
        """
        items = self._load()
        remaining = [i for i in items if i.id != item_id]
        if len(remaining) == len(items):
            return False

        self._save(remaining)
        return True

    def reset_all(self) -> None:
        """Delete every item. Irreversible."""
        self._save([])

    # ==================== Queries ====================

    def search(self, query: str) -> List[VocabularyItem]:
        """
        Search items by text query.

        Args:
            query: Case-insensitive substring matched against both phrases and the hint

        Returns:
            Matching items in collection order
        """
        if not query or not query.strip():
            return []

        needle = TextParser.normalize_unicode(query.strip()).lower()
        return [
            item for item in self._load()
            if any(needle in field.lower() for field in (item.source_text, item.target_text, item.phonetic_hint))
        ]

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get collection statistics.

        Returns:
            Dictionary with stats
        """
        items = self._load()
        total_correct = sum(i.correct_count for i in items)
        total_incorrect = sum(i.incorrect_count for i in items)
        total_reviews = total_correct + total_incorrect
        reviewed = sum(1 for i in items if i.total_attempts > 0)

        return {
            "total_items": len(items),
            "reviewed_items": reviewed,
            "new_items": len(items) - reviewed,
            "total_correct": total_correct,
            "total_incorrect": total_incorrect,
            "overall_success_rate": total_correct / total_reviews if total_reviews else None,
        }
