"""Data models for the Tensor actions API."""

from tensor_actions.models.actions import (
    Action,
    ActionGetResponse,
    ActionLinks,
    ActionParameter,
    ActionPostRequest,
    ActionPostResponse,
    LinkedAction,
    ParameterizedAction,
)
from tensor_actions.models.marketplace import Collection, Listing, NftInfo

__all__ = [
    "Action",
    "ActionGetResponse",
    "ActionLinks",
    "ActionParameter",
    "ActionPostRequest",
    "ActionPostResponse",
    "Collection",
    "LinkedAction",
    "Listing",
    "NftInfo",
    "ParameterizedAction",
]
