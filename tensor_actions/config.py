"""Configuration module for the Tensor actions server."""

# Standard library imports
import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, List, Optional

# Third-party library imports
from dotenv import load_dotenv

from tensor_actions.constants import (
    DEFAULT_ACTION_LABEL,
    DEFAULT_ACTIONS_BASE_PATH,
    SOLANA_MAINNET_RPC_URL,
    TENSOR_API_URL,
)

# Load environment variables from .env file
load_dotenv()


def get_env_var(key: str, default: Any = None, required: bool = False,
                validator: Optional[Callable[[str], Any]] = None) -> Any:
    """Get and validate environment variable.

    Args:
        key: Environment variable name
        default: Default value if not present
        required: If True, raises ValueError when not found
        validator: Optional validation function

    Returns:
        The environment variable value or default

    Raises:
        ValueError: If required and not found, or fails validation
    """
    value = os.environ.get(key)

    if value is None:
        if required:
            raise ValueError(f"Required environment variable '{key}' not found")
        return default

    if validator is not None:
        try:
            return validator(value)
        except Exception as e:
            raise ValueError(f"Invalid value for environment variable '{key}': {str(e)}")

    return value


def bool_validator(value: str) -> bool:
    """Validate and convert string to boolean."""
    return value.lower() in ("true", "1", "yes", "y", "on")


def int_validator(value: str) -> int:
    """Validate and convert string to integer.

    Raises:
        ValueError: If not a valid integer
    """
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid integer")


def url_validator(value: str) -> str:
    """Validate URL format.

    Args:
        value: URL to validate

    Returns:
        The validated URL

    Raises:
        ValueError: If not a valid URL format
    """
    url_pattern = re.compile(
        r'^(https?):\/\/'  # http:// or https://
        r'(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+(?:[A-Z]{2,6}\.?|[A-Z0-9-]{2,}\.?)|'  # domain
        r'localhost|'  # localhost
        r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})'  # or IPv4
        r'(?::\d+)?'  # optional port
        r'(?:/?|[/?]\S+)$', re.IGNORECASE)

    if not url_pattern.match(value):
        raise ValueError(f"'{value}' is not a valid URL")
    return value


def commitment_validator(value: str) -> str:
    """Validate Solana commitment level.

    Raises:
        ValueError: If not a valid commitment level
    """
    valid_commitments = ("processed", "confirmed", "finalized")
    if value.lower() not in valid_commitments:
        raise ValueError(f"Commitment must be one of: {', '.join(valid_commitments)}")
    return value.lower()


def log_level_validator(value: str) -> str:
    """Validate log level.

    Raises:
        ValueError: If not a valid log level
    """
    valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    upper_value = value.upper()
    if upper_value not in valid_levels:
        raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
    return upper_value


def environment_validator(value: str) -> str:
    """Validate environment name.

    Raises:
        ValueError: If not a valid environment name
    """
    valid_environments = ("development", "testing", "staging", "production")
    if value.lower() not in valid_environments:
        raise ValueError(f"Environment must be one of: {', '.join(valid_environments)}")
    return value.lower()


def base_path_validator(value: str) -> str:
    """Normalize a route prefix to a leading slash and no trailing slash.

    Raises:
        ValueError: If the prefix is empty or contains whitespace
    """
    stripped = value.strip().strip("/")
    if not stripped or any(ch.isspace() for ch in stripped):
        raise ValueError(f"'{value}' is not a valid route prefix")
    return f"/{stripped}"


@dataclass
class TensorConfig:
    """Configuration for the Tensor REST API."""

    api_url: str = TENSOR_API_URL
    api_key: Optional[str] = None
    timeout: int = 30  # seconds

    @property
    def has_api_key(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.api_key)


@lru_cache()
def get_tensor_config() -> TensorConfig:
    """Get Tensor configuration from environment variables.

    Raises:
        ValueError: If environment variables fail validation
    """
    return TensorConfig(
        api_url=get_env_var("TENSOR_API_URL", TENSOR_API_URL,
                            validator=url_validator),
        api_key=get_env_var("TENSOR_API_KEY"),
        timeout=get_env_var("TENSOR_TIMEOUT", 30, validator=int_validator),
    )


@dataclass
class SolanaConfig:
    """Configuration for the Solana RPC connection used to fetch blockhashes."""

    rpc_url: str = SOLANA_MAINNET_RPC_URL
    commitment: str = "confirmed"
    timeout: int = 30  # seconds


@lru_cache()
def get_solana_config() -> SolanaConfig:
    """Get Solana configuration from environment variables.

    Raises:
        ValueError: If environment variables fail validation
    """
    return SolanaConfig(
        rpc_url=get_env_var("SOLANA_RPC_URL", SOLANA_MAINNET_RPC_URL,
                            validator=url_validator),
        commitment=get_env_var("SOLANA_COMMITMENT", "confirmed",
                               validator=commitment_validator),
        timeout=get_env_var("SOLANA_TIMEOUT", 30, validator=int_validator),
    )


@dataclass
class ServerConfig:
    """Configuration for the server."""

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.environment not in ("development", "testing", "staging", "production"):
            raise ValueError(f"Invalid environment: {self.environment}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log_level: {self.log_level}")


@lru_cache()
def get_server_config() -> ServerConfig:
    """Get server configuration from environment variables.

    Returns:
        ServerConfig instance

    Raises:
        ValueError: If environment variables fail validation
    """
    return ServerConfig(
        host=get_env_var("HOST", "0.0.0.0"),
        port=get_env_var("PORT", 8000, validator=int_validator),
        debug=get_env_var("DEBUG", False, validator=bool_validator),
        environment=get_env_var("ENVIRONMENT", "development", validator=environment_validator),
        log_level=get_env_var("LOG_LEVEL", "INFO", validator=log_level_validator),
    )


@dataclass
class ActionsConfig:
    """Configuration for the action endpoints."""

    base_path: str = DEFAULT_ACTIONS_BASE_PATH
    label: str = DEFAULT_ACTION_LABEL
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


@lru_cache()
def get_actions_config() -> ActionsConfig:
    """Get action endpoint configuration from environment variables."""
    return ActionsConfig(
        base_path=get_env_var("ACTIONS_BASE_PATH", DEFAULT_ACTIONS_BASE_PATH,
                              validator=base_path_validator),
        label=get_env_var("ACTIONS_LABEL", DEFAULT_ACTION_LABEL),
        cors_origins=get_env_var("CORS_ORIGINS", "*").split(","),
    )


@dataclass
class AppConfig:
    """Comprehensive application configuration."""

    tensor: TensorConfig = field(default_factory=get_tensor_config)
    solana: SolanaConfig = field(default_factory=get_solana_config)
    server: ServerConfig = field(default_factory=get_server_config)
    actions: ActionsConfig = field(default_factory=get_actions_config)


def get_app_config() -> AppConfig:
    """Get the comprehensive application configuration."""
    return AppConfig()
