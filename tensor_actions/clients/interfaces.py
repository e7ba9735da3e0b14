"""Interfaces for the collaborators the action handlers depend on."""

from abc import ABC, abstractmethod
from typing import Optional

from tensor_actions.models.marketplace import Collection, NftInfo


class MarketplaceDataProvider(ABC):
    """Read-only access to NFT and collection state."""

    @abstractmethod
    async def fetch_nft_info(self, mint: str) -> Optional[NftInfo]:
        """Return the NFT for a mint, or None if it does not exist."""

    @abstractmethod
    async def fetch_collection_by_slug(self, slug_display: str) -> Optional[Collection]:
        """Return the collection for a display slug, or None if it does not exist."""


class TransactionBuilder(ABC):
    """Builds unsigned marketplace transactions.

    Both methods return a base64 serialized transaction, or None when the
    marketplace produced no transaction.
    """

    @abstractmethod
    async def build_bid_transaction(
        self,
        mint: str,
        account: str,
        lamports: int,
        royalty_bps: int,
    ) -> Optional[str]:
        """Build a transaction placing a bid of `lamports` on `mint`."""

    @abstractmethod
    async def build_buy_transaction(
        self,
        mint: str,
        account: str,
        seller: str,
        royalty_bps: int,
        price: str,
    ) -> Optional[str]:
        """Build a transaction buying the listed `mint` at `price` lamports."""
