import json

import pytest
from hexbytes import HexBytes
from web3.exceptions import TransactionNotFound

from yelay_agentkit.onchain.wallet import Web3WalletProvider, render_receipt


class DummyCall:
    def __init__(self, value):
        self._value = value

    def call(self):
        return self._value


class DummyFunctions:
    def decimals(self):
        return DummyCall(6)

    def balanceOf(self, account, pool_id):
        return DummyCall(1000 + pool_id)


class DummyContract:
    functions = DummyFunctions()


class DummyEth:
    def __init__(self):
        self.chain_id = 8453
        self.gas_price = 10**9
        self.nonce = 7
        self.estimate_error = None
        self.sent_raw = []
        self.receipts = []
        self.contracts = []

    def get_transaction_count(self, _addr):
        return self.nonce

    def estimate_gas(self, _tx):
        if self.estimate_error is not None:
            raise self.estimate_error
        return 100000

    def send_raw_transaction(self, raw_tx):
        self.sent_raw.append(raw_tx)
        return HexBytes("0x" + "12" * 32)

    def get_transaction_receipt(self, tx_hash):
        result = self.receipts.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def contract(self, address=None, abi=None):
        self.contracts.append(address)
        return DummyContract()


class DummyWeb3:
    def __init__(self):
        self.eth = DummyEth()


def _wallet(key="0x" + "a" * 64, **kwargs):
    return Web3WalletProvider(web3=DummyWeb3(), private_key=key, **kwargs)


def test_loads_from_settings(monkeypatch):
    import yelay_agentkit.onchain.wallet as wallet_module

    monkeypatch.setattr(wallet_module.settings, "wallet_private_key", "0x" + "a" * 64)
    wallet = Web3WalletProvider(web3=DummyWeb3())
    assert wallet.get_address().startswith("0x")


def test_rejects_missing_key(monkeypatch):
    import yelay_agentkit.onchain.wallet as wallet_module

    monkeypatch.setattr(wallet_module.settings, "wallet_private_key", "")
    with pytest.raises(ValueError):
        Web3WalletProvider(web3=DummyWeb3())


def test_invalid_key_error_does_not_leak_key():
    bad_key = "0x" + "g" * 64
    with pytest.raises(ValueError) as excinfo:
        _wallet(bad_key)
    assert bad_key not in str(excinfo.value)


def test_private_key_not_in_repr():
    wallet = _wallet("0x" + "b" * 64)
    assert "b" * 10 not in repr(wallet)


def test_get_network_reads_chain_id():
    network = _wallet().get_network()
    assert network.protocol_family == "evm"
    assert network.chain_id == "8453"


def test_read_contract_calls_function():
    wallet = _wallet()
    address = "0x1234567890123456789012345678901234567890"
    assert wallet.read_contract(address, [], "decimals") == 6
    assert wallet.read_contract(address, [], "balanceOf", [address, 10]) == 1010
    assert wallet.web3.eth.contracts[0] == "0x1234567890123456789012345678901234567890"


def test_read_contract_rejects_bad_address():
    with pytest.raises(ValueError):
        _wallet().read_contract("not-an-address", [], "decimals")


def test_send_transaction_signs_and_returns_hash():
    wallet = _wallet()
    tx_hash = wallet.send_transaction(
        {"to": "0x1234567890123456789012345678901234567890", "data": "0x"}
    )
    assert tx_hash == "0x" + "12" * 32
    assert len(wallet.web3.eth.sent_raw) == 1


def test_send_transaction_falls_back_to_default_gas():
    wallet = _wallet()
    wallet.web3.eth.estimate_error = RuntimeError("rpc timeout")
    wallet.send_transaction({"to": "0x1234567890123456789012345678901234567890", "data": "0x"})
    assert len(wallet.web3.eth.sent_raw) == 1


def test_send_transaction_refuses_reverting_call():
    wallet = _wallet()
    wallet.web3.eth.estimate_error = RuntimeError("execution reverted: ERC20: insufficient allowance")
    with pytest.raises(RuntimeError) as excinfo:
        wallet.send_transaction({"to": "0x1234567890123456789012345678901234567890", "data": "0x"})
    assert "will revert" in str(excinfo.value)
    assert wallet.web3.eth.sent_raw == []


@pytest.mark.asyncio
async def test_wait_for_receipt_polls_until_mined():
    wallet = _wallet(poll_interval=0)
    receipt = {"status": 1, "blockNumber": 10}
    wallet.web3.eth.receipts = [TransactionNotFound("pending"), receipt]
    assert await wallet.wait_for_transaction_receipt("0xabc") == receipt


@pytest.mark.asyncio
async def test_wait_for_receipt_raises_on_revert():
    wallet = _wallet(poll_interval=0)
    wallet.web3.eth.receipts = [{"status": 0}]
    with pytest.raises(RuntimeError):
        await wallet.wait_for_transaction_receipt("0xabc")


@pytest.mark.asyncio
async def test_wait_for_receipt_times_out():
    wallet = _wallet(receipt_timeout=0, poll_interval=0)
    with pytest.raises(TimeoutError):
        await wallet.wait_for_transaction_receipt("0xabc")


def test_render_receipt_handles_hexbytes():
    rendered = render_receipt({"status": 1, "transactionHash": HexBytes("0x" + "34" * 32)})
    assert json.loads(rendered)["transactionHash"] == "0x" + "34" * 32
    assert render_receipt({"status": 1, "blockNumber": 5}) == json.dumps({"status": 1, "blockNumber": 5})
