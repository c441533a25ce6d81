from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class VaultDetails(BaseModel):
    """Vault entry from GET /vaults."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    address: str
    name: str
    symbol: str
    balance: str
    decimals: int

    @field_validator("balance", mode="before")
    @classmethod
    def stringify_balance(cls, value):
        if isinstance(value, int):
            return str(value)
        return value


class ApyRecord(BaseModel):
    """Vault interest entry from GET /interest/vaults."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    vault: str
    startBlock: int = Field(validation_alias=AliasChoices("startBlock", "start_block"))
    finishBlock: int = Field(validation_alias=AliasChoices("finishBlock", "finish_block"))
    startTimestamp: int = Field(
        validation_alias=AliasChoices("startTimestamp", "start_timestamp")
    )
    finishTimestamp: int = Field(
        validation_alias=AliasChoices("finishTimestamp", "finish_timestamp")
    )
    yield_: str = Field(validation_alias=AliasChoices("yield", "yield_"))
    apy: str

    @field_validator("yield_", "apy", mode="before")
    @classmethod
    def stringify_number(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ClaimProofEntry(BaseModel):
    """Merkle claim proof from GET /claim-proof."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    vault_address: str = Field(
        validation_alias=AliasChoices("yelayLiteVault", "vaultAddress", "vault_address")
    )
    pool_id: int = Field(validation_alias=AliasChoices("projectId", "pool", "poolId", "pool_id"))
    cycle: int
    yield_shares_total: str = Field(
        validation_alias=AliasChoices("yieldSharesTotal", "yield_shares_total")
    )
    block_number: int = Field(
        default=0, validation_alias=AliasChoices("blockNumber", "block_number")
    )
    proof: List[str] = []

    @field_validator("yield_shares_total", mode="before")
    @classmethod
    def stringify_total(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("yield_shares_total")
    @classmethod
    def validate_total(cls, value: str) -> str:
        if not value.isdigit():
            raise ValueError("yieldSharesTotal must be a non-negative integer string")
        return value


VAULT_LIST = TypeAdapter(List[VaultDetails])
APY_LIST = TypeAdapter(List[ApyRecord])
CLAIM_PROOF_LIST = TypeAdapter(List[ClaimProofEntry])
