from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

NETWORK_IDS = {
    "1": "ethereum-mainnet",
    "146": "sonic-mainnet",
    "8453": "base-mainnet",
}


@dataclass(frozen=True)
class Network:
    protocol_family: str
    chain_id: Optional[str] = None
    network_id: Optional[str] = None

    @classmethod
    def evm(cls, chain_id: int | str) -> "Network":
        chain = str(chain_id)
        return cls(protocol_family="evm", chain_id=chain, network_id=NETWORK_IDS.get(chain))
