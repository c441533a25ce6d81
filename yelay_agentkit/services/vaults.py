"""Vault listing joined with the backend APY feed."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from yelay_agentkit.constants import BACKEND_UNAVAILABLE_MESSAGE
from yelay_agentkit.models.backend import ApyRecord, VaultDetails
from yelay_agentkit.services.backend import YelayBackendClient

logger = logging.getLogger(__name__)


def _find_apy(vault: VaultDetails, apys: list[ApyRecord]) -> Optional[str]:
    # Exact match on the address string as returned by the backend
    for record in apys:
        if record.vault == vault.address:
            return record.apy
    return None


def merge_vault_apys(
    vaults: list[VaultDetails], apys: list[ApyRecord]
) -> list[tuple[VaultDetails, Optional[str]]]:
    return [(vault, _find_apy(vault, apys)) for vault in vaults]


def format_vaults(merged: list[tuple[VaultDetails, Optional[str]]]) -> str:
    return "\n".join(f"{vault.name}: APY {apy or ''}%" for vault, apy in merged)


async def get_vaults(client: YelayBackendClient, chain_id: int) -> str:
    """Return one ``"<name>: APY <apy>%"`` line per vault.

    Both backend requests run concurrently. Any failure yields
    ``BACKEND_UNAVAILABLE_MESSAGE`` instead of an exception.
    """
    try:
        vaults, apys = await asyncio.gather(
            client.fetch_vaults(chain_id),
            client.fetch_apys(chain_id),
        )
    except Exception as exc:
        logger.error("Error fetching vault data: %s", exc)
        return BACKEND_UNAVAILABLE_MESSAGE
    return format_vaults(merge_vault_apys(vaults, apys))
