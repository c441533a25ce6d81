"""EVM wallet used by the Yelay actions to read contracts and send transactions."""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Optional, Protocol, Sequence

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.exceptions import TransactionNotFound

from yelay_agentkit.config import settings
from yelay_agentkit.onchain.network import Network

logger = logging.getLogger(__name__)


class EvmWalletProvider(Protocol):
    def get_address(self) -> str: ...

    def get_network(self) -> Network: ...

    def read_contract(
        self, address: str, abi: list[dict], function_name: str, args: Sequence[Any] = ()
    ) -> Any: ...

    def send_transaction(self, tx: dict) -> str: ...

    async def wait_for_transaction_receipt(self, tx_hash: str) -> Any: ...


def render_receipt(receipt: Any) -> str:
    """JSON rendering of a receipt; handles HexBytes and AttributeDict values."""
    if isinstance(receipt, str):
        return receipt
    return Web3.to_json(receipt)


class Web3WalletProvider:
    def __init__(
        self,
        web3: Optional[Web3] = None,
        private_key: Optional[str] = None,
        receipt_timeout: Optional[int] = None,
        poll_interval: Optional[float] = None,
    ) -> None:
        self.web3 = web3 or Web3(Web3.HTTPProvider(settings.rpc_url))
        key = private_key or settings.wallet_private_key
        if not key:
            raise ValueError("Missing WALLET_PRIVATE_KEY")
        key = key.strip()
        raw = key[2:] if key.startswith("0x") else key
        if len(raw) != 64 or any(c not in "0123456789abcdefABCDEF" for c in raw):
            raise ValueError("Invalid private key")
        try:
            self._account: LocalAccount = Account.from_key(f"0x{raw}")
        except Exception as exc:
            raise ValueError("Invalid private key") from exc
        self.receipt_timeout = (
            receipt_timeout if receipt_timeout is not None else settings.receipt_timeout_seconds
        )
        self.poll_interval = (
            poll_interval if poll_interval is not None else settings.receipt_poll_seconds
        )
        self._chain_id: Optional[int] = None

    @property
    def address(self) -> str:
        return self._account.address

    def __repr__(self) -> str:
        return f"Web3WalletProvider(address={self.address})"

    def get_address(self) -> str:
        return self.address

    @property
    def chain_id(self) -> int:
        if self._chain_id is None:
            self._chain_id = int(self.web3.eth.chain_id)
        return self._chain_id

    def get_network(self) -> Network:
        return Network.evm(self.chain_id)

    def read_contract(
        self, address: str, abi: list[dict], function_name: str, args: Sequence[Any] = ()
    ) -> Any:
        if not Web3.is_address(address):
            raise ValueError(f"Invalid contract address: {address}")
        contract = self.web3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)
        return getattr(contract.functions, function_name)(*args).call()

    def send_transaction(self, tx: dict) -> str:
        tx = dict(tx)
        tx["to"] = Web3.to_checksum_address(tx["to"])
        tx.setdefault("from", self.address)
        tx.setdefault("value", 0)
        if "chainId" not in tx:
            tx["chainId"] = self.chain_id
        if "nonce" not in tx:
            tx["nonce"] = self.web3.eth.get_transaction_count(self.address)
        if "gas" not in tx:
            try:
                tx["gas"] = int(self.web3.eth.estimate_gas(tx) * 1.2)
            except Exception as exc:
                if "execution reverted" in str(exc):
                    raise RuntimeError(f"Transaction will revert on-chain: {exc}") from exc
                logger.warning("Gas estimation failed, using default: %s", exc)
                tx["gas"] = 500000
        if "gasPrice" not in tx and "maxFeePerGas" not in tx:
            tx["gasPrice"] = self.web3.eth.gas_price
        tx.pop("from", None)
        signed = self._account.sign_transaction(tx)
        raw_tx = getattr(signed, "raw_transaction", None) or getattr(signed, "rawTransaction", None)
        tx_hash = self.web3.eth.send_raw_transaction(raw_tx)
        hex_hash = tx_hash.hex() if not isinstance(tx_hash, str) else tx_hash
        hex_hash = hex_hash if hex_hash.startswith("0x") else f"0x{hex_hash}"
        logger.info("Sent transaction %s to %s", hex_hash, tx["to"])
        return hex_hash

    async def wait_for_transaction_receipt(self, tx_hash: str) -> Any:
        start = time.monotonic()
        while (time.monotonic() - start) < self.receipt_timeout:
            try:
                receipt = self.web3.eth.get_transaction_receipt(tx_hash)
            except TransactionNotFound:
                receipt = None
            if receipt:
                if receipt["status"] == 0:
                    raise RuntimeError(f"Transaction reverted: {tx_hash}")
                return receipt
            await asyncio.sleep(self.poll_interval)
        raise TimeoutError(
            f"Transaction confirmation timeout after {self.receipt_timeout}s: {tx_hash}"
        )
