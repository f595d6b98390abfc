class ListError(Exception):
    """Base class for every error raised by the list and its iterator."""


class NullElementError(ListError, ValueError):
    def __init__(self, message="Element must not be None"):
        super().__init__(message)


class ListIndexError(ListError, IndexError):
    def __init__(self, message="Index out of range"):
        super().__init__(message)


class EmptyListError(ListError, LookupError):
    def __init__(self, message="List is empty"):
        super().__init__(message)


class StaleIteratorError(ListError, RuntimeError):
    """Raised when an iterator outlives the chain it was created from."""

    def __init__(self, message="List was modified during iteration"):
        super().__init__(message)
