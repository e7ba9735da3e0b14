"""
Error handling utilities for Tensor actions.

This module defines the closed set of error kinds a request can end in and the
exception classes that carry them to the route boundary.
"""

from enum import Enum
from typing import Any, Dict, Optional

from fastapi import status
from pydantic import BaseModel

# Status for errors the caller can correct (unknown or unlisted NFT)
USER_ERROR_STATUS = 422


class ActionErrorKind(str, Enum):
    """Error kinds a request handler step can produce."""

    NOT_FOUND = "NOT_FOUND"
    NOT_LISTED = "NOT_LISTED"
    COLLECTION_MISSING = "COLLECTION_MISSING"
    TRANSACTION_BUILD_FAILED = "TRANSACTION_BUILD_FAILED"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    MARKETPLACE_UNAVAILABLE = "MARKETPLACE_UNAVAILABLE"
    UNEXPECTED = "UNEXPECTED"

    @property
    def user_correctable(self) -> bool:
        """Whether the caller is shown the specific message for this kind."""
        return self in (ActionErrorKind.NOT_FOUND, ActionErrorKind.NOT_LISTED)


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    message: str


class ActionError(Exception):
    """Base exception for all Tensor actions errors."""

    kind: ActionErrorKind = ActionErrorKind.UNEXPECTED

    def __init__(
        self,
        message: str,
        kind: Optional[ActionErrorKind] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize a new action error.

        Args:
            message: Error message
            kind: Error kind, defaults to the class kind
            details: Additional error details, logged but never returned
        """
        self.message = message
        if kind is not None:
            self.kind = kind
        self.details = details or {}
        super().__init__(message)

    @property
    def status_code(self) -> int:
        """HTTP status the route boundary reports for this error."""
        if self.kind.user_correctable:
            return USER_ERROR_STATUS
        return status.HTTP_500_INTERNAL_SERVER_ERROR


class NftNotFoundError(ActionError):
    """The mint does not resolve to an NFT."""

    kind = ActionErrorKind.NOT_FOUND

    def __init__(self, mint: str):
        super().__init__(f"NFT {mint} not found", details={"mint": mint})
        self.mint = mint


class NftNotListedError(ActionError):
    """The NFT exists but has no active listing."""

    kind = ActionErrorKind.NOT_LISTED

    def __init__(self, mint: str):
        super().__init__(f"NFT {mint} is not listed", details={"mint": mint})
        self.mint = mint


class CollectionMissingError(ActionError):
    """The NFT's collection could not be resolved."""

    kind = ActionErrorKind.COLLECTION_MISSING

    def __init__(self, slug: str):
        super().__init__(f"Collection {slug} not found", details={"slug": slug})
        self.slug = slug


class TransactionBuildError(ActionError):
    """The transaction builder produced no transaction."""

    kind = ActionErrorKind.TRANSACTION_BUILD_FAILED

    def __init__(self, message: str = "Failed to create transaction",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class InvalidAmountError(ActionError):
    """The amount could not be parsed as a finite decimal."""

    kind = ActionErrorKind.INVALID_AMOUNT

    def __init__(self, amount: str):
        super().__init__(f"Invalid amount: {amount!r}", details={"amount": amount})
        self.amount = amount


class MarketplaceApiError(ActionError):
    """The marketplace API failed or answered with errors."""

    kind = ActionErrorKind.MARKETPLACE_UNAVAILABLE

    def __init__(self, message: str, operation: str,
                 details: Optional[Dict[str, Any]] = None):
        error_details = details or {}
        error_details["operation"] = operation
        super().__init__(message, details=error_details)
        self.operation = operation
