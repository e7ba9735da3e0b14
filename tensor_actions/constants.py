"""Constants used throughout the Tensor actions service.

This module defines common constants to avoid duplication and ensure consistency.
"""

from decimal import Decimal

# Native currency
LAMPORTS_PER_SOL = 1_000_000_000
CURRENCY_SYMBOL = "SOL"

# Action labels
DEFAULT_ACTION_LABEL = "Tensor Trade"
MAKE_OFFER_LABEL = "Make Offer"
BUY_NOW_LABEL = "Buy Now"
AMOUNT_PARAMETER_NAME = "amount"
AMOUNT_PARAMETER_LABEL = "Enter a custom SOL amount"

# Route defaults
DEFAULT_ACTIONS_BASE_PATH = "/api/tensor/bid-nft"
OPENAPI_TAG = "Tensor Bid NFT"
EXAMPLE_NFT_MINT = "DL4pWLrfh2wXiovZLtbjeXDYMoo6zoa7wFCVJX8qUpxw"
EXAMPLE_AMOUNT = "1.35"

# Generic failure messages shown to callers
TRANSACTION_FAILED_MESSAGE = "Failed to prepare transaction"
METADATA_FAILED_MESSAGE = "Failed to load NFT details"

# Headers required by Solana Actions clients
ACTIONS_CORS_METHODS = ["GET", "POST", "PUT", "OPTIONS"]
ACTIONS_CORS_HEADERS = [
    "Content-Type",
    "Authorization",
    "Content-Encoding",
    "Accept-Encoding",
]

# Tensor marketplace
TENSOR_API_URL = "https://api.mainnet.tensordev.io"
SOLANA_MAINNET_RPC_URL = "https://api.mainnet-beta.solana.com"
TENSOR_API_KEY_HEADER = "X-TENSOR-API-KEY"
BPS_PER_PERCENT = Decimal(100)
