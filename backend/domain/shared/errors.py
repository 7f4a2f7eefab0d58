"""Shared domain errors."""


class RepositoryError(Exception):
    """A persistence operation failed.

    This is the only storage failure the service exposes. Callers turn it into
    a generic server error; the underlying cause stays in the logs.
    """

    def __init__(self, operation: str, collection: str, cause: Exception | None = None):
        """Initialize with the failed operation and its collection.

        Args:
            operation: Repository operation name (e.g. "find_many")
            collection: MongoDB collection the operation targeted
            cause: Original driver exception, if any
        """
        self.operation = operation
        self.collection = collection
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{operation} failed on '{collection}'{detail}")
