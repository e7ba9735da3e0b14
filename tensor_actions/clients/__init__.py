"""Marketplace clients for Tensor actions."""

from tensor_actions.clients.interfaces import MarketplaceDataProvider, TransactionBuilder
from tensor_actions.clients.tensor_client import TensorClient

__all__ = [
    "MarketplaceDataProvider",
    "TensorClient",
    "TransactionBuilder",
]
