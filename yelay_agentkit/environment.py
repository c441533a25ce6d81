"""Per-chain Yelay contract addresses and backend endpoints."""
from __future__ import annotations

from dataclasses import dataclass

from yelay_agentkit.constants import SUPPORTED_CHAIN_IDS
from yelay_agentkit.errors import InvalidConfigurationError, UnsupportedChainError

BACKEND_URL = "https://lite.api.yelay.io/v2"
TEST_BACKEND_URL = "https://lite.dev.yelay.io/v2"
TEST_CHAIN_ID = 8453


@dataclass(frozen=True)
class ChainConfig:
    backend_url: str
    vault_wrapper: str
    yield_extractor: str


CHAIN_CONFIGS: dict[int, ChainConfig] = {
    1: ChainConfig(
        backend_url=BACKEND_URL,
        vault_wrapper="0xf65d02700915259602D9105b66401513D1CB61ff",
        yield_extractor="0x226239384EB7d78Cdf279BA6Fb458E2A4945E275",
    ),
    146: ChainConfig(
        backend_url=BACKEND_URL,
        vault_wrapper="0x0872e8391662D4e53D6649c8dE5d4bF581Bd778C",
        yield_extractor="0xB84B621D3da3E5e47A1927883C685455Ad731D7C",
    ),
    8453: ChainConfig(
        backend_url=BACKEND_URL,
        vault_wrapper="0xdccf337ea77b687a4daca5586351b08f8927c825",
        yield_extractor="0x4d6a89dc55d8bacc0cbc3824bd7e44fa051c3958",
    ),
}

TEST_CHAIN_CONFIG = ChainConfig(
    backend_url=TEST_BACKEND_URL,
    vault_wrapper="0xE252b5c05a18140F15E1941dD2Df8a95bDa8A20b",
    yield_extractor="0xf3b5e160898cfd8b89476e77887050abb377c277",
)


def get_environment(chain_id: int, testing: bool = False) -> ChainConfig:
    if chain_id not in SUPPORTED_CHAIN_IDS:
        raise UnsupportedChainError(chain_id)
    if testing:
        if chain_id != TEST_CHAIN_ID:
            raise InvalidConfigurationError("Test environment is only supported for Base")
        return TEST_CHAIN_CONFIG
    return CHAIN_CONFIGS[chain_id]
