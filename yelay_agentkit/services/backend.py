"""HTTP client for the Yelay lite backend."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import aiohttp
from pydantic import TypeAdapter, ValidationError

from yelay_agentkit.config import settings
from yelay_agentkit.errors import BackendUnavailableError
from yelay_agentkit.models.backend import (
    APY_LIST,
    CLAIM_PROOF_LIST,
    VAULT_LIST,
    ApyRecord,
    ClaimProofEntry,
    VaultDetails,
)

logger = logging.getLogger(__name__)


class YelayBackendClient:
    def __init__(self, base_url: str, timeout: Optional[float] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else settings.backend_timeout_seconds

    def __repr__(self) -> str:
        return f"YelayBackendClient(base_url={self.base_url})"

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        try:
            async with aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            ) as session:
                async with session.get(url, params=params) as resp:
                    if not 200 <= resp.status < 300:
                        raise BackendUnavailableError(
                            f"GET {path} failed: {resp.status} {resp.reason}",
                            status=resp.status,
                        )
                    return await resp.json()
        except BackendUnavailableError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise BackendUnavailableError(f"GET {path} failed: {exc}") from exc

    async def _get_list(self, path: str, params: dict[str, Any], adapter: TypeAdapter) -> list:
        data = await self._get_json(path, params)
        try:
            return adapter.validate_python(data)
        except ValidationError as exc:
            raise BackendUnavailableError(
                f"GET {path} returned an invalid body: {exc.error_count()} validation errors"
            ) from exc

    async def fetch_vaults(self, chain_id: int) -> list[VaultDetails]:
        return await self._get_list("/vaults", {"chainId": chain_id}, VAULT_LIST)

    async def fetch_apys(self, chain_id: int) -> list[ApyRecord]:
        return await self._get_list("/interest/vaults", {"chainId": chain_id}, APY_LIST)

    async def fetch_claim_proof(
        self,
        chain_id: int,
        user: str,
        pool_id: int,
        vault_address: str,
    ) -> list[ClaimProofEntry]:
        params = {"chainId": chain_id, "u": user, "p": pool_id, "v": vault_address}
        proofs = await self._get_list("/claim-proof", params, CLAIM_PROOF_LIST)
        logger.debug("Fetched %s claim proofs for %s in %s", len(proofs), user, vault_address)
        return proofs
