"""Exceptions for the redirect service.

Two families: data-existence errors that the HTTP layer turns into
404 responses, and fatal errors that mean the store can no longer be trusted.
"""


class RedirectServiceError(Exception):
    """Base exception for all service-level errors."""
    pass


class EntryNotFoundError(RedirectServiceError):
    """No entry is registered for the requested code or id."""
    pass


class FatalInvariantViolation(RedirectServiceError):
    """The store is in an inconsistent state. Not recoverable in-process."""
    pass


class StorePoisonedError(FatalInvariantViolation):
    """A lock was left poisoned by a failure inside its critical section."""

    def __init__(self, lock_name: str):
        self.lock_name = lock_name
        super().__init__(f"Lock '{lock_name}' is poisoned; store state cannot be trusted")
