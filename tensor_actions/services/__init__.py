"""Service layer for Tensor actions."""

from tensor_actions.services.bid_nft_service import BidNftService, decide_actions

__all__ = ["BidNftService", "decide_actions"]
