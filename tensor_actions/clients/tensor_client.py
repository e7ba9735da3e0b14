"""Tensor marketplace client.

Implements both collaborator interfaces on top of the Tensor REST API: NFT and
collection lookups, and buy/bid transaction construction.
"""

import base64
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import ValidationError
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solders.transaction import Transaction, VersionedTransaction

from tensor_actions.clients.base_client import BaseTensorClient
from tensor_actions.clients.interfaces import MarketplaceDataProvider, TransactionBuilder
from tensor_actions.config import SolanaConfig, TensorConfig, get_solana_config
from tensor_actions.constants import BPS_PER_PERCENT
from tensor_actions.logging_config import get_logger
from tensor_actions.models.marketplace import Collection, NftInfo
from tensor_actions.utils.errors import MarketplaceApiError

# Get logger
logger = get_logger(__name__)

MINT_PATH = "/api/v1/mint"
FIND_COLLECTION_PATH = "/api/v1/collections/find_collection"
BUY_TX_PATH = "/api/v1/tx/buy"
BID_TX_PATH = "/api/v1/tx/bid"


def royalty_pct(royalty_bps: int) -> str:
    """Convert basis points to the percent string Tensor expects (500 -> "5")."""
    pct = Decimal(royalty_bps) / BPS_PER_PERCENT
    return format(pct.normalize(), "f")


def decode_transaction_bytes(payload: Union[Dict[str, Any], str, None]) -> Optional[bytes]:
    """Decode a transaction field from a Tensor response.

    Tensor returns serialized transactions either as a Node Buffer
    (`{"type": "Buffer", "data": [...]}`) or as a base64 string.
    """
    if payload is None:
        return None
    if isinstance(payload, str):
        return base64.b64decode(payload)
    data = payload.get("data")
    if not data:
        return None
    return bytes(data)


def serialize_for_client(raw: bytes) -> str:
    """Check that `raw` parses as a Solana transaction and base64 encode it.

    Raises:
        ValueError: If the bytes are neither a versioned nor a legacy transaction
    """
    try:
        VersionedTransaction.from_bytes(raw)
    except Exception:
        try:
            Transaction.from_bytes(raw)
        except Exception as e:
            raise ValueError(f"Not a serialized Solana transaction: {str(e)}") from e
    return base64.b64encode(raw).decode("ascii")


class TensorClient(BaseTensorClient, MarketplaceDataProvider, TransactionBuilder):
    """Client for Tensor NFT data and transaction construction."""

    def __init__(self, config: Optional[TensorConfig] = None,
                 http_client: Optional[httpx.AsyncClient] = None,
                 solana_config: Optional[SolanaConfig] = None,
                 rpc_client: Optional[AsyncClient] = None):
        """Initialize the Tensor client.

        Args:
            config: Tensor configuration
            http_client: Optional shared HTTP client
            solana_config: Solana RPC configuration used for blockhash lookups
            rpc_client: Optional Solana RPC client, created lazily otherwise
        """
        super().__init__(config=config, http_client=http_client)
        self.solana_config = solana_config or get_solana_config()
        self._rpc_client = rpc_client
        self._owns_rpc_client = rpc_client is None

    def _get_rpc_client(self) -> AsyncClient:
        if self._rpc_client is None:
            self._rpc_client = AsyncClient(
                self.solana_config.rpc_url,
                timeout=self.solana_config.timeout,
            )
        return self._rpc_client

    async def fetch_nft_info(self, mint: str) -> Optional[NftInfo]:
        """Fetch NFT metadata and listing state for a mint.

        Returns:
            The NFT, or None if Tensor does not know the mint
        """
        body = await self._get(
            MINT_PATH, {"mints": mint}, operation="fetch_nft_info", allow_not_found=True
        )
        if not body:
            return None

        record = body[0] if isinstance(body, list) else body
        if not record:
            return None

        record = dict(record)
        record.setdefault("mint", record.get("onchainId", mint))
        try:
            return NftInfo.model_validate(record)
        except ValidationError as e:
            raise MarketplaceApiError(
                "Tensor returned an unexpected NFT record",
                operation="fetch_nft_info",
                details={"mint": mint, "errors": e.errors()},
            ) from e

    async def fetch_collection_by_slug(self, slug_display: str) -> Optional[Collection]:
        """Fetch collection metadata and royalty terms by display slug.

        Returns:
            The collection, or None if no collection has this slug
        """
        body = await self._get(
            FIND_COLLECTION_PATH,
            {"slugDisplay": slug_display},
            operation="fetch_collection_by_slug",
            allow_not_found=True,
        )
        if not body:
            return None

        try:
            return Collection.model_validate(body)
        except ValidationError as e:
            raise MarketplaceApiError(
                "Tensor returned an unexpected collection record",
                operation="fetch_collection_by_slug",
                details={"slug": slug_display, "errors": e.errors()},
            ) from e

    async def build_buy_transaction(
        self,
        mint: str,
        account: str,
        seller: str,
        royalty_bps: int,
        price: str,
    ) -> Optional[str]:
        """Build a transaction buying a listed NFT at its list price."""
        params = {
            "buyer": account,
            "mint": mint,
            "owner": seller,
            "maxPrice": price,
            "optionalRoyaltyPct": royalty_pct(royalty_bps),
            "blockhash": await self._get_latest_blockhash(),
        }
        body = await self._get(BUY_TX_PATH, params, operation="build_buy_transaction")
        return self._first_transaction(body, operation="build_buy_transaction")

    async def build_bid_transaction(
        self,
        mint: str,
        account: str,
        lamports: int,
        royalty_bps: int,
    ) -> Optional[str]:
        """Build a transaction placing a single-mint bid."""
        params = {
            "owner": account,
            "mint": mint,
            "price": str(lamports),
            "royaltyPct": royalty_pct(royalty_bps),
            "blockhash": await self._get_latest_blockhash(),
        }
        body = await self._get(BID_TX_PATH, params, operation="build_bid_transaction")
        return self._first_transaction(body, operation="build_bid_transaction")

    async def _get_latest_blockhash(self) -> str:
        response = await self._get_rpc_client().get_latest_blockhash(
            Commitment(self.solana_config.commitment)
        )
        return str(response.value.blockhash)

    def _first_transaction(self, body: Optional[Dict[str, Any]], operation: str) -> Optional[str]:
        """Pick the first transaction from a Tensor tx response, preferring v0."""
        txs: List[Dict[str, Any]] = (body or {}).get("txs") or []
        if not txs:
            logger.info("Tensor returned no transactions", operation=operation)
            return None

        first = txs[0]
        raw = decode_transaction_bytes(first.get("txV0")) or decode_transaction_bytes(first.get("tx"))
        if raw is None:
            return None
        return serialize_for_client(raw)

    async def close(self) -> None:
        """Close the HTTP and RPC clients owned by this instance."""
        await super().close()
        if self._rpc_client is not None and self._owns_rpc_client:
            await self._rpc_client.close()
            self._rpc_client = None
