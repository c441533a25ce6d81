"""Plain action registry exposed to the host agent framework."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional

from pydantic import BaseModel, ValidationError

from yelay_agentkit.onchain.network import Network
from yelay_agentkit.onchain.wallet import EvmWalletProvider

logger = logging.getLogger(__name__)

ActionHandler = Callable[[EvmWalletProvider, BaseModel], Awaitable[str]]


@dataclass(frozen=True)
class Action:
    name: str
    description: str
    schema: type[BaseModel]
    handler: ActionHandler


@dataclass
class ActionProvider:
    name: str
    supports_network: Callable[[Network], bool]
    actions: dict[str, Action] = field(default_factory=dict)

    def register(self, action: Action) -> None:
        if action.name in self.actions:
            raise ValueError(f"Action {action.name} already registered on {self.name}")
        self.actions[action.name] = action

    def get_actions(self) -> list[Action]:
        return list(self.actions.values())

    def get_action(self, name: str) -> Action:
        try:
            return self.actions[name]
        except KeyError:
            raise KeyError(f"Unknown action {name} for provider {self.name}") from None

    async def invoke(
        self,
        name: str,
        wallet: Optional[EvmWalletProvider],
        args: Optional[dict[str, Any]] = None,
    ) -> str:
        action = self.get_action(name)
        try:
            parsed = action.schema.model_validate(args or {})
        except ValidationError as exc:
            logger.warning("Rejected %s input: %s", name, exc)
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}"
                for err in exc.errors()
            )
            return f"Error: invalid input for {name}: {details}"
        return await action.handler(wallet, parsed)
