"""Domain exceptions raised by the partner and ledger services.

Each carries the HTTP status the API layer answers with.
"""
from fastapi import status


class PartnerServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PartnerServiceError):
    """Missing required field or malformed input."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(PartnerServiceError):
    """Referenced partner does not exist."""
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(PartnerServiceError):
    """The datastore rejected or failed a write."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
