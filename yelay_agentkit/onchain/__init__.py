"""On-chain integration helpers."""

from yelay_agentkit.onchain.network import Network
from yelay_agentkit.onchain.wallet import EvmWalletProvider, Web3WalletProvider, render_receipt

__all__ = ["EvmWalletProvider", "Network", "Web3WalletProvider", "render_receipt"]
