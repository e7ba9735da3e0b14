"""Command-line entry point for the Tensor actions server."""

import uvicorn

from tensor_actions.config import get_server_config


def main():
    """Run the Tensor actions server."""
    server_config = get_server_config()
    uvicorn.run(
        "tensor_actions.app:app",
        host=server_config.host,
        port=server_config.port,
        log_level=server_config.log_level.lower(),
        reload=server_config.debug
    )


if __name__ == "__main__":
    main()
