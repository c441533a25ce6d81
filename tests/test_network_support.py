import pytest

from yelay_agentkit.actions.yelay import supports_network
from yelay_agentkit.onchain.network import Network


def test_supports_evm_family():
    assert supports_network(Network(protocol_family="evm", chain_id="8453")) is True


@pytest.mark.parametrize("chain_id", ["1", "146", "8453"])
def test_supports_mainnet_sonic_and_base(chain_id):
    assert supports_network(Network(protocol_family="evm", chain_id=chain_id)) is True


@pytest.mark.parametrize("chain_id", ["10", "42161", "84532", ""])
def test_rejects_other_chains(chain_id):
    assert supports_network(Network(protocol_family="evm", chain_id=chain_id)) is False


def test_rejects_missing_chain_id():
    assert supports_network(Network(protocol_family="evm")) is False


@pytest.mark.parametrize("family", ["svm", "other-protocol-family"])
def test_rejects_other_protocol_families(family):
    assert supports_network(Network(protocol_family=family, chain_id="8453")) is False


def test_evm_network_helper():
    network = Network.evm(146)
    assert network.chain_id == "146"
    assert network.network_id == "sonic-mainnet"
    assert supports_network(network) is True
