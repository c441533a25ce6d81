"""Pydantic models for action inputs and Yelay backend records."""

from yelay_agentkit.models.backend import ApyRecord, ClaimProofEntry, VaultDetails
from yelay_agentkit.models.schemas import (
    VaultsDetailsSchema,
    YelayBalanceSchema,
    YelayClaimSchema,
    YelayDepositSchema,
    YelayRedeemSchema,
)

__all__ = [
    "ApyRecord",
    "ClaimProofEntry",
    "VaultDetails",
    "VaultsDetailsSchema",
    "YelayBalanceSchema",
    "YelayClaimSchema",
    "YelayDepositSchema",
    "YelayRedeemSchema",
]
