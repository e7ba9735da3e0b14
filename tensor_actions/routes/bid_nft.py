"""
Tensor Bid NFT action routes.

GET routes describe the NFT and the actions available for it, POST routes
return an unsigned transaction for the wallet to sign. Routes are declared in
`ROUTE_TABLE` and registered by `build_router`.
"""

from dataclasses import dataclass
from typing import Annotated, Any, Callable, Dict, Optional, Tuple, Type

from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel

from tensor_actions.constants import (
    EXAMPLE_AMOUNT,
    EXAMPLE_NFT_MINT,
    METADATA_FAILED_MESSAGE,
    OPENAPI_TAG,
    TRANSACTION_FAILED_MESSAGE,
)
from tensor_actions.dependencies import get_bid_nft_service
from tensor_actions.models.actions import ActionGetResponse, ActionPostRequest, ActionPostResponse
from tensor_actions.services.bid_nft_service import BidNftService
from tensor_actions.utils.api_response import handle_action_errors
from tensor_actions.utils.errors import ErrorResponse

NftMint = Annotated[str, Path(
    alias="nftMint",
    description="Mint address of the NFT",
    examples=[EXAMPLE_NFT_MINT],
)]
OfferAmount = Annotated[str, Path(
    description="Offer amount in SOL",
    examples=[EXAMPLE_AMOUNT],
)]

ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    422: {"model": ErrorResponse, "description": "NFT not found or not listed"},
    500: {"model": ErrorResponse, "description": "Internal failure"},
}


@handle_action_errors(operation="discover", failure_message=METADATA_FAILED_MESSAGE)
async def get_nft_actions(
    nft_mint: NftMint,
    service: BidNftService = Depends(get_bid_nft_service),
):
    """
    Describe an NFT and the actions available for it.

    Offers "Buy Now" at the list price when the NFT is listed, and always
    offers "Make Offer" with a custom SOL amount.
    """
    return await service.get_discovery(nft_mint)


@handle_action_errors(operation="offer metadata", failure_message=METADATA_FAILED_MESSAGE)
async def get_offer_metadata(
    nft_mint: NftMint,
    amount: OfferAmount,
    service: BidNftService = Depends(get_bid_nft_service),
):
    """Describe an NFT once an offer amount has been chosen."""
    return await service.get_amount_metadata(nft_mint, amount)


@handle_action_errors(operation="bid", failure_message=TRANSACTION_FAILED_MESSAGE)
async def post_bid_transaction(
    nft_mint: NftMint,
    amount: OfferAmount,
    payload: ActionPostRequest,
    service: BidNftService = Depends(get_bid_nft_service),
):
    """Build an unsigned transaction placing an offer of `amount` SOL."""
    return await service.create_bid_transaction(nft_mint, amount, payload.account)


@handle_action_errors(operation="buy", failure_message=TRANSACTION_FAILED_MESSAGE)
async def post_buy_transaction(
    nft_mint: NftMint,
    payload: ActionPostRequest,
    service: BidNftService = Depends(get_bid_nft_service),
):
    """Build an unsigned transaction buying the NFT at its list price."""
    return await service.create_buy_transaction(nft_mint, payload.account)


@dataclass(frozen=True)
class RouteSpec:
    """One entry of the route table."""

    method: str
    path: str
    endpoint: Callable[..., Any]
    response_model: Type[BaseModel]
    summary: str


ROUTE_TABLE: Tuple[RouteSpec, ...] = (
    RouteSpec("GET", "/{nftMint}", get_nft_actions, ActionGetResponse,
              "Get buy and offer actions for an NFT"),
    RouteSpec("GET", "/{nftMint}/{amount}", get_offer_metadata, ActionGetResponse,
              "Get offer metadata for an amount"),
    RouteSpec("POST", "/{nftMint}/{amount}", post_bid_transaction, ActionPostResponse,
              "Build an offer transaction"),
    RouteSpec("POST", "/{nftMint}", post_buy_transaction, ActionPostResponse,
              "Build a buy transaction"),
)


def build_router(prefix: str, routes: Optional[Tuple[RouteSpec, ...]] = None) -> APIRouter:
    """Create the router for the action routes.

    Args:
        prefix: Route prefix, e.g. "/api/tensor/bid-nft"
        routes: Route table, defaults to `ROUTE_TABLE`

    Returns:
        A router with one route per table entry
    """
    router = APIRouter(prefix=prefix, tags=[OPENAPI_TAG])
    for route in routes or ROUTE_TABLE:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            response_model=route.response_model,
            response_model_exclude_none=True,
            responses=ERROR_RESPONSES,
            summary=route.summary,
        )
    return router
