"""
Main application entry point for the Tensor actions API.

This module is a wrapper around the main application defined in tensor_actions.app.
It provides a convenient entry point for running the API server.
"""

import uvicorn

# Import the main application
from tensor_actions.app import app as tensor_actions_app
from tensor_actions.config import get_server_config

# Re-export the application
app = tensor_actions_app

if __name__ == "__main__":
    # Get server configuration
    server_config = get_server_config()

    # Run the application directly when script is executed
    uvicorn.run(
        "tensor_actions.app:app",
        host=server_config.host,
        port=server_config.port,
        log_level=server_config.log_level.lower(),
        reload=server_config.debug
    )
