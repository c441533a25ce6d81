import pytest

from yelay_agentkit.errors import BackendUnavailableError
from yelay_agentkit.onchain.network import Network

MOCK_VAULT_ADDRESS = "0x1234567890123456789012345678901234567890"
MOCK_USER_ADDRESS = "0x9876543210987654321098765432109876543210"
MOCK_TX_HASH = "0xabcdef1234567890"
MOCK_RECEIPT = {"status": 1, "blockNumber": 1234567}


class DummyWallet:
    def __init__(self):
        self.address = MOCK_USER_ADDRESS
        self.read_values = {"decimals": 18, "balanceOf": 0, "yieldSharesClaimed": 0}
        self.send_error = None
        self.reads = []
        self.sent = []
        self.waited = []

    def get_address(self):
        return self.address

    def get_network(self):
        return Network.evm(8453)

    def read_contract(self, address, abi, function_name, args=()):
        self.reads.append((address, function_name, list(args)))
        return self.read_values[function_name]

    def send_transaction(self, tx):
        self.sent.append(tx)
        if self.send_error is not None:
            raise self.send_error
        return MOCK_TX_HASH

    async def wait_for_transaction_receipt(self, tx_hash):
        self.waited.append(tx_hash)
        return MOCK_RECEIPT


class DummyBackend:
    def __init__(self):
        self.vaults = []
        self.apys = []
        self.claim_proofs = []
        self.claim_error = None
        self.claim_calls = []

    async def fetch_vaults(self, chain_id):
        return self.vaults

    async def fetch_apys(self, chain_id):
        return self.apys

    async def fetch_claim_proof(self, chain_id, user, pool_id, vault_address):
        self.claim_calls.append((chain_id, user, pool_id, vault_address))
        if self.claim_error is not None:
            raise self.claim_error
        return self.claim_proofs


@pytest.fixture()
def wallet() -> DummyWallet:
    return DummyWallet()


@pytest.fixture()
def backend() -> DummyBackend:
    return DummyBackend()


@pytest.fixture()
def backend_down() -> BackendUnavailableError:
    return BackendUnavailableError("GET /claim-proof failed: 503 Service Unavailable", status=503)
