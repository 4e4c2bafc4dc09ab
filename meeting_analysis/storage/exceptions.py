class StorageError(Exception):
    """Raised when the persistent store cannot be read or written."""
