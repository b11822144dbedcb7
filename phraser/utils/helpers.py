"""Utility functions."""

import random
import string
import time
from typing import Container, Optional

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_SUFFIX_LENGTH = 9


def generate_item_id(existing: Optional[Container[str]] = None) -> str:
    """
    Generate an opaque item id: millisecond timestamp + random base-36 suffix.
    
    Args:
        existing: Ids already in use; a colliding candidate is regenerated
        
    Returns:
        Id string like "1760659200000k3j9x0q2a"
    """
    while True:
        stamp = str(int(time.time() * 1000))
        suffix = "".join(random.choices(_ID_ALPHABET, k=_ID_SUFFIX_LENGTH))
        candidate = stamp + suffix
        if existing is None or candidate not in existing:
            return candidate
