"""Test configuration for pytest.

This module imports fixtures that should be available to all tests.
"""

# Import fixtures
from tests.fixtures.common import (  # noqa
    listed_nft,
    unlisted_nft,
    collection,
    mock_marketplace,
    mock_transaction_builder,
    actions_config,
    app_config,
    bid_nft_service,
    app,
    client,
)
