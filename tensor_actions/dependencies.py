"""FastAPI dependency providers.

Route handlers receive their collaborators through these functions, so tests
can swap them with `app.dependency_overrides`.
"""

from fastapi import Depends, Request

from tensor_actions.clients.interfaces import MarketplaceDataProvider, TransactionBuilder
from tensor_actions.clients.tensor_client import TensorClient
from tensor_actions.config import ActionsConfig, get_actions_config
from tensor_actions.services.bid_nft_service import BidNftService
from tensor_actions.utils.errors import ActionError


def get_tensor_client(request: Request) -> TensorClient:
    """Return the Tensor client created by the application lifespan.

    Raises:
        ActionError: If the application was started without a client
    """
    client = getattr(request.app.state, "tensor_client", None)
    if client is None:
        raise ActionError("Tensor client is not initialized")
    return client


def get_app_actions_config(request: Request) -> ActionsConfig:
    """Return the action settings the application was built with."""
    return getattr(request.app.state, "actions_config", None) or get_actions_config()


def get_marketplace(client: TensorClient = Depends(get_tensor_client)) -> MarketplaceDataProvider:
    """Provide the marketplace data provider."""
    return client


def get_transaction_builder(client: TensorClient = Depends(get_tensor_client)) -> TransactionBuilder:
    """Provide the transaction builder."""
    return client


def get_bid_nft_service(
    marketplace: MarketplaceDataProvider = Depends(get_marketplace),
    transaction_builder: TransactionBuilder = Depends(get_transaction_builder),
    config: ActionsConfig = Depends(get_app_actions_config),
) -> BidNftService:
    """Provide a request-scoped BidNftService."""
    return BidNftService(marketplace, transaction_builder, config)
