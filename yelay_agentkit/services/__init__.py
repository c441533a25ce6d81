"""Yelay backend services."""

from yelay_agentkit.services.backend import YelayBackendClient
from yelay_agentkit.services.vaults import get_vaults

__all__ = ["YelayBackendClient", "get_vaults"]
