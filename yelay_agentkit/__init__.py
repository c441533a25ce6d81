"""Yelay vault actions for EVM AI agents."""

from yelay_agentkit.actions import Action, ActionProvider, supports_network, yelay_action_provider
from yelay_agentkit.environment import ChainConfig, get_environment
from yelay_agentkit.errors import (
    BackendUnavailableError,
    InvalidConfigurationError,
    UnsupportedChainError,
    YelayError,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionProvider",
    "BackendUnavailableError",
    "ChainConfig",
    "InvalidConfigurationError",
    "UnsupportedChainError",
    "YelayError",
    "get_environment",
    "supports_network",
    "yelay_action_provider",
]
