"""Exception types raised by the phraser core."""


class PhraserError(Exception):
    """Base class for all phraser errors."""


class ValidationError(PhraserError, ValueError):
    """Raised when user-supplied text fails validation (e.g. empty phrase)."""


class StorageError(PhraserError):
    """
    Raised inside a record store when the backing medium cannot be read or written.
    
    Stores catch this at their public boundary and report it through logging,
    so it never reaches repository callers.
    """
