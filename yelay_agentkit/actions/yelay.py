"""Yelay vault actions: list vaults, deposit, redeem, claim yield and read balances."""
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Sequence

from web3 import Web3

from yelay_agentkit.actions.registry import Action, ActionProvider
from yelay_agentkit.config import settings
from yelay_agentkit.constants import (
    ERC20_DECIMALS_ABI,
    RETAIL_POOL_ID,
    SUPPORTED_NETWORKS,
    YELAY_VAULT_ABI,
    YIELD_EXTRACTOR_ABI,
)
from yelay_agentkit.environment import ChainConfig, get_environment
from yelay_agentkit.models.backend import ClaimProofEntry
from yelay_agentkit.models.schemas import (
    VaultsDetailsSchema,
    YelayBalanceSchema,
    YelayClaimSchema,
    YelayDepositSchema,
    YelayRedeemSchema,
)
from yelay_agentkit.onchain.network import Network
from yelay_agentkit.onchain.units import parse_units, to_uint256
from yelay_agentkit.onchain.wallet import EvmWalletProvider, render_receipt
from yelay_agentkit.services.backend import YelayBackendClient
from yelay_agentkit.services.vaults import get_vaults

logger = logging.getLogger(__name__)

NON_POSITIVE_ASSETS_MESSAGE = "Error: Assets amount must be greater than 0"

GET_VAULTS_DESCRIPTION = """
This tool lists the Yelay vaults available on the configured network together with
their most recent APY.

It takes no required inputs. The result has one line per vault in the form
"<vault name>: APY <apy>%".
"""

DEPOSIT_DESCRIPTION = """
This tool deposits assets into a specified Yelay Vault.

It takes:
- assets: The amount of assets to deposit in whole units
  Examples for WETH:
  - 1 WETH
  - 0.1 WETH
  - 0.01 WETH
- receiver: The address of the Yelay Vault to deposit to

Important notes:
- Make sure to use the exact amount provided. Do not convert units for assets for this action.
"""

REDEEM_DESCRIPTION = """
This tool redeems assets from a Yelay Vault.

It takes:
- assets: The amount of assets to redeem in atomic units (wei)
- receiver: The address of the Yelay Vault to redeem from
"""

CLAIM_DESCRIPTION = """
This tool claims the yield generated for the wallet in a Yelay Vault.

It takes:
- vaultAddress: The address of the Yelay Vault to claim yield from
"""

GET_BALANCE_DESCRIPTION = """
This tool reads the wallet's position in a Yelay Vault, including generated and
already claimed yield shares when available.

It takes:
- vaultAddress: The address of the Yelay Vault to get balance from
"""


def supports_network(network: Network) -> bool:
    if network.protocol_family != "evm" or network.chain_id is None:
        return False
    return str(network.chain_id) in SUPPORTED_NETWORKS


def encode_call(abi: list[dict], function_name: str, args: Sequence[Any]) -> str:
    contract = Web3().eth.contract(abi=abi)
    return contract.encode_abi(function_name, args=list(args))


def _claim_request(entry: ClaimProofEntry) -> tuple:
    return (
        Web3.to_checksum_address(entry.vault_address),
        entry.pool_id,
        entry.cycle,
        to_uint256(entry.yield_shares_total),
        [Web3.to_bytes(hexstr=node) for node in entry.proof],
    )


class YelayActions:
    def __init__(
        self,
        chain_id: Optional[int] = None,
        is_test: Optional[bool] = None,
        backend: Optional[YelayBackendClient] = None,
    ) -> None:
        self.chain_id = chain_id if chain_id is not None else settings.yelay_chain_id
        self.is_test = is_test if is_test is not None else settings.yelay_test_mode
        self.config: ChainConfig = get_environment(self.chain_id, self.is_test)
        self.backend = backend or YelayBackendClient(self.config.backend_url)

    def __repr__(self) -> str:
        return f"YelayActions(chain_id={self.chain_id}, is_test={self.is_test})"

    async def get_vaults(
        self,
        wallet: Optional[EvmWalletProvider] = None,
        args: Optional[VaultsDetailsSchema] = None,
    ) -> str:
        return await get_vaults(self.backend, self.chain_id)

    async def deposit(self, wallet: EvmWalletProvider, args: YelayDepositSchema) -> str:
        try:
            amount = Decimal(args.assets)
        except InvalidOperation:
            return f"Error: Invalid assets amount {args.assets}"
        if amount <= 0:
            return NON_POSITIVE_ASSETS_MESSAGE

        try:
            decimals = wallet.read_contract(
                self.config.vault_wrapper, ERC20_DECIMALS_ABI, "decimals", []
            )
            atomic_assets = parse_units(args.assets, int(decimals))
            data = encode_call(
                YELAY_VAULT_ABI,
                "deposit",
                [atomic_assets, RETAIL_POOL_ID, Web3.to_checksum_address(args.receiver)],
            )
            tx_hash = wallet.send_transaction({"to": self.config.vault_wrapper, "data": data})
            receipt = await wallet.wait_for_transaction_receipt(tx_hash)
        except Exception as exc:
            logger.error("Deposit to %s failed: %s", args.receiver, exc)
            return f"Error depositing to Yelay Vault: {exc}"

        return (
            f"Deposited {args.assets} to Yelay Vault {args.receiver} with transaction hash: {tx_hash}\n"
            f"Transaction receipt: {render_receipt(receipt)}"
        )

    async def redeem(self, wallet: EvmWalletProvider, args: YelayRedeemSchema) -> str:
        try:
            shares = to_uint256(args.assets)
        except ValueError as exc:
            return f"Error: {exc}"
        if shares <= 0:
            return NON_POSITIVE_ASSETS_MESSAGE

        try:
            data = encode_call(
                YELAY_VAULT_ABI,
                "redeem",
                [shares, RETAIL_POOL_ID, Web3.to_checksum_address(args.receiver)],
            )
            tx_hash = wallet.send_transaction({"to": self.config.vault_wrapper, "data": data})
            receipt = await wallet.wait_for_transaction_receipt(tx_hash)
        except Exception as exc:
            logger.error("Redeem from %s failed: %s", args.receiver, exc)
            return f"Error redeeming from Yelay Vault: {exc}"

        return (
            f"Redeemed {args.assets} from Yelay Vault {args.receiver} with transaction hash: {tx_hash}\n"
            f"Transaction receipt: {render_receipt(receipt)}"
        )

    async def claim(self, wallet: EvmWalletProvider, args: YelayClaimSchema) -> str:
        try:
            claim_requests = await self.backend.fetch_claim_proof(
                self.chain_id, wallet.get_address(), RETAIL_POOL_ID, args.vaultAddress
            )
        except Exception as exc:
            logger.error("Claim proof lookup for %s failed: %s", args.vaultAddress, exc)
            return f"Error obtaining proof for yield to claim from Yelay Vault: {exc}"

        if not claim_requests:
            return f"No yield to claim from Yelay Vault {args.vaultAddress}"

        try:
            data = encode_call(
                YIELD_EXTRACTOR_ABI,
                "claim",
                [[_claim_request(entry) for entry in claim_requests]],
            )
            tx_hash = wallet.send_transaction({"to": self.config.yield_extractor, "data": data})
            receipt = await wallet.wait_for_transaction_receipt(tx_hash)
        except Exception as exc:
            logger.error("Claim from %s failed: %s", args.vaultAddress, exc)
            return f"Error claiming yield from Yelay Vault: {exc}"

        rendered = render_receipt(receipt)
        return "\n".join(
            f"Claimed {entry.yield_shares_total} yield shares from Yelay Vault {args.vaultAddress} "
            f"with transaction hash: {tx_hash}, transaction receipt: {rendered}"
            for entry in claim_requests
        )

    async def get_balance(self, wallet: EvmWalletProvider, args: YelayBalanceSchema) -> str:
        try:
            user = Web3.to_checksum_address(wallet.get_address())
            vault = Web3.to_checksum_address(args.vaultAddress)
            balance = wallet.read_contract(vault, YELAY_VAULT_ABI, "balanceOf", [user, RETAIL_POOL_ID])
            proofs = await self.backend.fetch_claim_proof(
                self.chain_id, user, RETAIL_POOL_ID, args.vaultAddress
            )
            message = f"User balance from Yelay Vault {args.vaultAddress}: {balance}"
            if not proofs:
                return message
            latest = max(proofs, key=lambda entry: entry.cycle)
            claimed = wallet.read_contract(
                self.config.yield_extractor,
                YIELD_EXTRACTOR_ABI,
                "yieldSharesClaimed",
                [user, vault, RETAIL_POOL_ID],
            )
        except Exception as exc:
            logger.error("Balance lookup for %s failed: %s", args.vaultAddress, exc)
            return f"Error getting balance from Yelay Vault: {exc}"

        return (
            f"{message}\n"
            f"Generated yield shares: {latest.yield_shares_total}\n"
            f"Claimed yield shares: {claimed}"
        )


def yelay_action_provider(
    chain_id: Optional[int] = None,
    is_test: Optional[bool] = None,
    backend: Optional[YelayBackendClient] = None,
) -> ActionProvider:
    """Build the ``yelay`` provider with its five actions registered."""
    actions = YelayActions(chain_id=chain_id, is_test=is_test, backend=backend)
    provider = ActionProvider(name="yelay", supports_network=supports_network)
    provider.register(
        Action("get_vaults", GET_VAULTS_DESCRIPTION, VaultsDetailsSchema, actions.get_vaults)
    )
    provider.register(Action("deposit", DEPOSIT_DESCRIPTION, YelayDepositSchema, actions.deposit))
    provider.register(Action("redeem", REDEEM_DESCRIPTION, YelayRedeemSchema, actions.redeem))
    provider.register(Action("claim", CLAIM_DESCRIPTION, YelayClaimSchema, actions.claim))
    provider.register(
        Action("get_balance", GET_BALANCE_DESCRIPTION, YelayBalanceSchema, actions.get_balance)
    )
    logger.debug("Registered %s Yelay actions for chain %s", len(provider.actions), actions.chain_id)
    return provider
