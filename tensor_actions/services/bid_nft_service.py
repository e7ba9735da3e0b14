"""
Buy and bid actions for a single Tensor NFT.

Every operation resolves marketplace state fresh, then either shapes an
Actions metadata response or asks the transaction builder for a transaction.
Failures are raised as `ActionError` subclasses; the route layer decides how
they are reported.
"""

from typing import Optional, Tuple

from tensor_actions.clients.interfaces import MarketplaceDataProvider, TransactionBuilder
from tensor_actions.config import ActionsConfig, get_actions_config
from tensor_actions.constants import (
    AMOUNT_PARAMETER_LABEL,
    AMOUNT_PARAMETER_NAME,
    BUY_NOW_LABEL,
    CURRENCY_SYMBOL,
    MAKE_OFFER_LABEL,
)
from tensor_actions.logging_config import get_logger
from tensor_actions.models.actions import (
    Action,
    ActionGetResponse,
    ActionLinks,
    ActionParameter,
    ActionPostResponse,
    LinkedAction,
    ParameterizedAction,
)
from tensor_actions.models.marketplace import Collection, Listing, NftInfo
from tensor_actions.utils.amounts import format_token_amount, lamports_to_sol, sol_to_lamports
from tensor_actions.utils.errors import (
    CollectionMissingError,
    NftNotFoundError,
    NftNotListedError,
    TransactionBuildError,
)

logger = get_logger(__name__)


def buy_now_label(price: str) -> str:
    """Label for the buy action, e.g. "Buy Now (1.5 SOL)"."""
    ui_price = format_token_amount(lamports_to_sol(price))
    return f"{BUY_NOW_LABEL} ({ui_price} {CURRENCY_SYMBOL})"


def decide_actions(nft: NftInfo, base_path: str) -> Tuple[Action, ...]:
    """Decide which actions the discovery response offers.

    "Make Offer" is always offered. "Buy Now" is offered only while the NFT
    has a priced listing, and always comes first.

    Args:
        nft: The resolved NFT
        base_path: Route prefix the action hrefs point at

    Returns:
        Actions in display order
    """
    make_offer = ParameterizedAction(
        href=f"{base_path}/{nft.mint}/{{{AMOUNT_PARAMETER_NAME}}}",
        label=MAKE_OFFER_LABEL,
        parameters=(
            ActionParameter(name=AMOUNT_PARAMETER_NAME, label=AMOUNT_PARAMETER_LABEL),
        ),
    )

    if not nft.is_listed:
        return (make_offer,)

    buy_now = LinkedAction(
        href=f"{base_path}/{nft.mint}",
        label=buy_now_label(nft.listing.price),
    )
    return (buy_now, make_offer)


class BidNftService:
    """Resolves NFT state and shapes buy/bid action responses."""

    def __init__(
        self,
        marketplace: MarketplaceDataProvider,
        transaction_builder: TransactionBuilder,
        config: Optional[ActionsConfig] = None,
    ):
        self.marketplace = marketplace
        self.transaction_builder = transaction_builder
        self.config = config or get_actions_config()

    async def resolve_nft(self, mint: str) -> NftInfo:
        """Fetch the NFT for a mint.

        Raises:
            NftNotFoundError: If the mint does not resolve
        """
        nft = await self.marketplace.fetch_nft_info(mint)
        if nft is None:
            raise NftNotFoundError(mint)
        return nft

    @staticmethod
    def require_listing(nft: NftInfo) -> Listing:
        """Return the NFT's priced listing.

        Raises:
            NftNotListedError: If the NFT has no listing or the listing has no price
        """
        if not nft.is_listed:
            raise NftNotListedError(nft.mint)
        return nft.listing

    async def resolve_collection(self, nft: NftInfo) -> Collection:
        """Fetch the collection an NFT belongs to.

        Raises:
            CollectionMissingError: If the display slug does not resolve
        """
        collection = await self.marketplace.fetch_collection_by_slug(nft.slug_display)
        if collection is None:
            raise CollectionMissingError(nft.slug_display)
        return collection

    async def get_discovery(self, mint: str) -> ActionGetResponse:
        """Build the metadata response listing the offerable actions."""
        nft = await self.resolve_nft(mint)
        collection = await self.resolve_collection(nft)

        return ActionGetResponse(
            icon=nft.image_uri,
            label=self.config.label,
            title=nft.name,
            description=collection.description,
            links=ActionLinks(actions=decide_actions(nft, self.config.base_path)),
        )

    async def get_amount_metadata(self, mint: str, amount: str) -> ActionGetResponse:
        """Build the metadata response shown once an offer amount is chosen.

        The label repeats the amount text as given, and no further actions are
        linked.
        """
        nft = await self.resolve_nft(mint)
        collection = await self.resolve_collection(nft)

        return ActionGetResponse(
            icon=nft.image_uri,
            label=f"{amount} {CURRENCY_SYMBOL}",
            title=nft.name,
            description=collection.description,
        )

    async def create_bid_transaction(self, mint: str, amount: str, account: str) -> ActionPostResponse:
        """Build an unsigned transaction bidding `amount` SOL on the NFT.

        Raises:
            NftNotFoundError: If the mint does not resolve
            NftNotListedError: If the NFT is not listed
            CollectionMissingError: If the collection does not resolve
            InvalidAmountError: If the amount is not a finite decimal
            TransactionBuildError: If the builder produced no transaction
        """
        nft = await self.resolve_nft(mint)
        self.require_listing(nft)
        collection = await self.resolve_collection(nft)

        lamports = sol_to_lamports(amount)
        logger.debug("Building bid transaction", mint=mint, lamports=lamports)
        transaction = await self.transaction_builder.build_bid_transaction(
            mint, account, lamports, collection.sell_royalty_fee_bps
        )
        if not transaction:
            raise TransactionBuildError(details={"mint": mint, "operation": "bid"})

        return ActionPostResponse(transaction=transaction)

    async def create_buy_transaction(self, mint: str, account: str) -> ActionPostResponse:
        """Build an unsigned transaction buying the NFT at its list price.

        Raises:
            NftNotFoundError: If the mint does not resolve
            NftNotListedError: If the NFT is not listed
            CollectionMissingError: If the collection does not resolve
            TransactionBuildError: If the builder produced no transaction
        """
        nft = await self.resolve_nft(mint)
        listing = self.require_listing(nft)
        collection = await self.resolve_collection(nft)

        logger.debug("Building buy transaction", mint=mint, price=listing.price)
        transaction = await self.transaction_builder.build_buy_transaction(
            mint, account, listing.seller, collection.sell_royalty_fee_bps, listing.price
        )
        if not transaction:
            raise TransactionBuildError(details={"mint": mint, "operation": "buy"})

        return ActionPostResponse(transaction=transaction)
