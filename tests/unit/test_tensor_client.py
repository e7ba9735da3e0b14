"""Unit tests for the Tensor REST client."""

import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock

import httpx
import pytest
from solders.message import Message
from solders.pubkey import Pubkey
from solders.transaction import Transaction

from tensor_actions.clients.tensor_client import (
    TensorClient,
    decode_transaction_bytes,
    royalty_pct,
)
from tensor_actions.config import SolanaConfig, TensorConfig
from tensor_actions.utils.errors import ActionErrorKind, MarketplaceApiError
from tests.fixtures.common import BUYER, SELLER

MINT = "DL4pWLrfh2wXiovZLtbjeXDYMoo6zoa7wFCVJX8qUpxw"
BLOCKHASH = "EkSnNWid2cvwEVnVx9aBqawnmiCNiDgp3gUdkDPTKN1N"


def unsigned_transaction_bytes() -> bytes:
    """Serialize an empty unsigned legacy transaction."""
    payer = Pubkey.from_string(BUYER)
    return bytes(Transaction.new_unsigned(Message([], payer)))


def make_client(handler) -> TensorClient:
    """Create a TensorClient whose HTTP and RPC calls are served locally."""
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        base_url="https://tensor.test",
    )
    rpc_client = AsyncMock()
    rpc_client.get_latest_blockhash.return_value = SimpleNamespace(
        value=SimpleNamespace(blockhash=BLOCKHASH)
    )
    return TensorClient(
        config=TensorConfig(api_url="https://tensor.test", api_key="secret"),
        http_client=http_client,
        solana_config=SolanaConfig(rpc_url="https://rpc.test"),
        rpc_client=rpc_client,
    )


def test_royalty_pct():
    assert royalty_pct(500) == "5"
    assert royalty_pct(250) == "2.5"
    assert royalty_pct(1000) == "10"
    assert royalty_pct(0) == "0"


def test_decode_transaction_bytes():
    assert decode_transaction_bytes({"type": "Buffer", "data": [1, 2, 3]}) == b"\x01\x02\x03"
    assert decode_transaction_bytes(base64.b64encode(b"abc").decode()) == b"abc"
    assert decode_transaction_bytes(None) is None
    assert decode_transaction_bytes({"type": "Buffer", "data": []}) is None


@pytest.mark.asyncio
async def test_fetch_nft_info():
    """Test mapping a Tensor mint record to NftInfo."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["mints"] = request.url.params["mints"]
        seen["api_key"] = request.headers.get("X-TENSOR-API-KEY")
        return httpx.Response(200, json=[{
            "onchainId": MINT,
            "name": "Foo",
            "imageUri": "https://example.com/foo.png",
            "slug": "a1b2c3",
            "slugDisplay": "foo_collection",
            "listing": {"price": "1500000000", "seller": SELLER, "source": "TENSORSWAP"},
        }])

    client = make_client(handler)
    nft = await client.fetch_nft_info(MINT)

    assert seen == {"path": "/api/v1/mint", "mints": MINT, "api_key": "secret"}
    assert nft.mint == MINT
    assert nft.slug_display == "foo_collection"
    assert nft.listing.price == "1500000000"
    assert nft.listing.seller == SELLER
    assert nft.is_listed


@pytest.mark.asyncio
async def test_fetch_nft_info_unknown_mint():
    client = make_client(lambda request: httpx.Response(200, json=[]))

    assert await client.fetch_nft_info(MINT) is None


@pytest.mark.asyncio
async def test_fetch_nft_info_server_error():
    """A failed lookup is reported once, without retrying."""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503, text="unavailable")

    client = make_client(handler)

    with pytest.raises(MarketplaceApiError) as exc_info:
        await client.fetch_nft_info(MINT)

    assert exc_info.value.kind == ActionErrorKind.MARKETPLACE_UNAVAILABLE
    assert exc_info.value.details["status_code"] == 503
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_fetch_nft_info_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)

    with pytest.raises(MarketplaceApiError) as exc_info:
        await client.fetch_nft_info(MINT)

    assert exc_info.value.operation == "fetch_nft_info"


@pytest.mark.asyncio
async def test_fetch_collection_by_slug():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/v1/collections/find_collection"
        assert request.url.params["slugDisplay"] == "foo_collection"
        return httpx.Response(200, json={
            "slugDisplay": "foo_collection",
            "name": "Foo Collection",
            "description": None,
            "sellRoyaltyFeeBPS": 500,
        })

    client = make_client(handler)
    collection = await client.fetch_collection_by_slug("foo_collection")

    assert collection.sell_royalty_fee_bps == 500
    assert collection.description == ""


@pytest.mark.asyncio
async def test_fetch_collection_not_found():
    client = make_client(lambda request: httpx.Response(404, json={"error": "not found"}))

    assert await client.fetch_collection_by_slug("missing") is None


@pytest.mark.asyncio
async def test_build_buy_transaction():
    raw = unsigned_transaction_bytes()
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={
            "txs": [{"tx": {"type": "Buffer", "data": list(raw)}, "txV0": None}]
        })

    client = make_client(handler)
    transaction = await client.build_buy_transaction(MINT, BUYER, SELLER, 500, "1500000000")

    assert transaction == base64.b64encode(raw).decode()
    assert seen["path"] == "/api/v1/tx/buy"
    assert seen["params"] == {
        "buyer": BUYER,
        "mint": MINT,
        "owner": SELLER,
        "maxPrice": "1500000000",
        "optionalRoyaltyPct": "5",
        "blockhash": BLOCKHASH,
    }


@pytest.mark.asyncio
async def test_build_bid_transaction():
    raw = unsigned_transaction_bytes()
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"txs": [{"txV0": {"type": "Buffer", "data": list(raw)}}]})

    client = make_client(handler)
    transaction = await client.build_bid_transaction(MINT, BUYER, 1_350_000_000, 250)

    assert base64.b64decode(transaction) == raw
    assert seen["path"] == "/api/v1/tx/bid"
    assert seen["params"]["price"] == "1350000000"
    assert seen["params"]["royaltyPct"] == "2.5"
    assert seen["params"]["owner"] == BUYER


@pytest.mark.asyncio
async def test_build_transaction_without_txs():
    client = make_client(lambda request: httpx.Response(200, json={"txs": []}))

    assert await client.build_bid_transaction(MINT, BUYER, 1, 0) is None


@pytest.mark.asyncio
async def test_build_transaction_rejects_garbage_bytes():
    client = make_client(
        lambda request: httpx.Response(200, json={"txs": [{"tx": {"type": "Buffer", "data": [1, 2, 3]}}]})
    )

    with pytest.raises(ValueError):
        await client.build_buy_transaction(MINT, BUYER, SELLER, 0, "1")
