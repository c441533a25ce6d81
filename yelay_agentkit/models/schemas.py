"""Input schemas for the Yelay actions."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"
DECIMAL_AMOUNT_PATTERN = r"^\d+(\.\d+)?$"
WHOLE_AMOUNT_PATTERN = r"^\d+$"


class VaultsDetailsSchema(BaseModel):
    """Vaults details query schema."""

    model_config = ConfigDict(extra="ignore")

    chainId: Optional[int] = Field(
        default=None,
        description="The chain ID of the network. Defaults to the provider's chain.",
    )


class YelayDepositSchema(BaseModel):
    """Input schema for Yelay Vault deposit action."""

    model_config = ConfigDict(extra="ignore")

    assets: str = Field(
        pattern=DECIMAL_AMOUNT_PATTERN,
        description="The quantity of assets to deposit, in whole units",
    )
    receiver: str = Field(
        pattern=ADDRESS_PATTERN,
        description="The address of the Yelay Vault to deposit to",
    )


class YelayRedeemSchema(BaseModel):
    """Input schema for Yelay Vault redeem action."""

    model_config = ConfigDict(extra="ignore")

    assets: str = Field(
        pattern=WHOLE_AMOUNT_PATTERN,
        description="The amount of assets to redeem in atomic units e.g. 1",
    )
    receiver: str = Field(
        pattern=ADDRESS_PATTERN,
        description="The address of the Yelay Vault to redeem from",
    )


class YelayClaimSchema(BaseModel):
    """Input schema for Yelay Vault claim action."""

    model_config = ConfigDict(extra="ignore")

    vaultAddress: str = Field(
        pattern=ADDRESS_PATTERN,
        description="The address of the Yelay Vault to claim yield from",
    )


class YelayBalanceSchema(BaseModel):
    """Input schema for Yelay Vault balance action."""

    model_config = ConfigDict(extra="ignore")

    vaultAddress: str = Field(
        pattern=ADDRESS_PATTERN,
        description="The address of the Yelay Vault to get balance from",
    )
