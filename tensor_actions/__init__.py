"""Tensor Bid NFT Actions.

This package serves Solana Actions that let a wallet buy a listed NFT or place
an offer on it through the Tensor marketplace.
"""

__version__ = "0.1.0"
__author__ = "Tensor Actions Contributors"
__email__ = "dev@tensor-actions.example"
