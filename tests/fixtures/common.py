"""Common test fixtures for Tensor actions tests.

This module provides fixtures that can be reused across different test modules.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from tensor_actions.app import create_application
from tensor_actions.clients.interfaces import MarketplaceDataProvider, TransactionBuilder
from tensor_actions.config import ActionsConfig, AppConfig, ServerConfig, SolanaConfig, TensorConfig
from tensor_actions.dependencies import get_marketplace, get_transaction_builder
from tensor_actions.models.marketplace import Collection, Listing, NftInfo
from tensor_actions.services.bid_nft_service import BidNftService

BASE_PATH = "/api/tensor/bid-nft"
MINT = "M1"
SELLER = "So11111111111111111111111111111111111111112"
BUYER = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
SLUG_DISPLAY = "foo_collection"


@pytest.fixture
def listed_nft():
    """An NFT listed for 1 SOL."""
    return NftInfo(
        mint=MINT,
        name="Foo",
        image_uri="https://example.com/foo.png",
        slug_display=SLUG_DISPLAY,
        listing=Listing(price="1000000000", seller=SELLER),
    )


@pytest.fixture
def unlisted_nft(listed_nft):
    """The same NFT without a listing."""
    return listed_nft.model_copy(update={"listing": None})


@pytest.fixture
def collection():
    """Collection with a 5% royalty."""
    return Collection(slug_display=SLUG_DISPLAY, description="D", sell_royalty_fee_bps=500)


@pytest.fixture
def mock_marketplace(listed_nft, collection):
    """Create a mock marketplace data provider."""
    marketplace = AsyncMock(spec=MarketplaceDataProvider)
    marketplace.fetch_nft_info.return_value = listed_nft
    marketplace.fetch_collection_by_slug.return_value = collection
    return marketplace


@pytest.fixture
def mock_transaction_builder():
    """Create a mock transaction builder."""
    builder = AsyncMock(spec=TransactionBuilder)
    builder.build_buy_transaction.return_value = "txBase64"
    builder.build_bid_transaction.return_value = "bidTxBase64"
    return builder


@pytest.fixture
def actions_config():
    return ActionsConfig(base_path=BASE_PATH, label="Tensor Trade", cors_origins=["*"])


@pytest.fixture
def app_config(actions_config):
    """Application config that does not read the environment."""
    return AppConfig(
        tensor=TensorConfig(api_url="https://tensor.test", api_key="test-key"),
        solana=SolanaConfig(rpc_url="https://rpc.test"),
        server=ServerConfig(environment="testing"),
        actions=actions_config,
    )


@pytest.fixture
def bid_nft_service(mock_marketplace, mock_transaction_builder, actions_config):
    """Create a BidNftService with mock collaborators."""
    return BidNftService(mock_marketplace, mock_transaction_builder, actions_config)


@pytest.fixture
def app(app_config, mock_marketplace, mock_transaction_builder):
    """Application with the marketplace and builder replaced by mocks."""
    application = create_application(config=app_config)
    application.dependency_overrides[get_marketplace] = lambda: mock_marketplace
    application.dependency_overrides[get_transaction_builder] = lambda: mock_transaction_builder
    return application


@pytest.fixture
def client(app):
    """Test client for the application."""
    return TestClient(app)
