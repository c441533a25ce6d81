"""Agent actions exposed by this package."""

from yelay_agentkit.actions.registry import Action, ActionProvider
from yelay_agentkit.actions.yelay import YelayActions, supports_network, yelay_action_provider

__all__ = ["Action", "ActionProvider", "YelayActions", "supports_network", "yelay_action_provider"]
