"""Services layer: persistence, item management, scoring and selection."""

from .store import (
    RecordStore,
    JSONFileStore,
    SQLiteStore,
    MemoryStore,
    StorageKeys,
    create_store,
)
from .item_repository import ItemRepository
from .scoring import ScoringTracker
from .selector import WeightedSelector, calculate_weight, success_rate
from .answer_validator import compare, normalize, validate
from .csv_transfer import (
    export_items_to_csv,
    parse_csv_entries,
    read_csv_file,
    write_csv_file,
)

__all__ = [
    "RecordStore",
    "JSONFileStore",
    "SQLiteStore",
    "MemoryStore",
    "StorageKeys",
    "create_store",
    "ItemRepository",
    "ScoringTracker",
    "WeightedSelector",
    "calculate_weight",
    "success_rate",
    "compare",
    "normalize",
    "validate",
    "export_items_to_csv",
    "parse_csv_entries",
    "read_csv_file",
    "write_csv_file",
]
