"""
Exceptions raised by the link store.

These never leave the service layer; services translate them into
LinkServiceError subclasses.
"""


class StorageError(Exception):
    """The database could not serve the request."""


class DuplicateLinkError(StorageError):
    """
    An insert violated one of the unique constraints.
    
    Raised when another request stored the same URL or code between the
    service's pre-check and its insert.
    
    Attributes:
        field: "original_url" or "short_code"
    """

    def __init__(self, field: str, message: str = ""):
        self.field = field
        super().__init__(message or f"Duplicate value for {field}")
