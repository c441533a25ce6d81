"""Yelay protocol constants and contract ABIs."""
from __future__ import annotations

# Retail cohort used for every deposit, redeem and claim
RETAIL_POOL_ID = 10

SUPPORTED_CHAIN_IDS = (1, 146, 8453)  # Mainnet, Sonic, Base
SUPPORTED_NETWORKS = tuple(str(chain_id) for chain_id in SUPPORTED_CHAIN_IDS)

BACKEND_UNAVAILABLE_MESSAGE = "Yield backend is currently unavailable. Please try again later."

YELAY_VAULT_ABI = [
    {
        "inputs": [
            {"internalType": "uint256", "name": "assets", "type": "uint256"},
            {"internalType": "uint256", "name": "projectId", "type": "uint256"},
            {"internalType": "address", "name": "receiver", "type": "address"},
        ],
        "name": "deposit",
        "outputs": [{"internalType": "uint256", "name": "shares", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "uint256", "name": "shares", "type": "uint256"},
            {"internalType": "uint256", "name": "projectId", "type": "uint256"},
            {"internalType": "address", "name": "receiver", "type": "address"},
        ],
        "name": "redeem",
        "outputs": [{"internalType": "uint256", "name": "assets", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "account", "type": "address"},
            {"internalType": "uint256", "name": "id", "type": "uint256"},
        ],
        "name": "balanceOf",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

YIELD_EXTRACTOR_ABI = [
    {
        "inputs": [
            {
                "components": [
                    {"internalType": "address", "name": "yelayLiteVault", "type": "address"},
                    {"internalType": "uint256", "name": "projectId", "type": "uint256"},
                    {"internalType": "uint256", "name": "cycle", "type": "uint256"},
                    {"internalType": "uint256", "name": "yieldSharesTotal", "type": "uint256"},
                    {"internalType": "bytes32[]", "name": "proof", "type": "bytes32[]"},
                ],
                "internalType": "struct YieldExtractor.ClaimRequest[]",
                "name": "data",
                "type": "tuple[]",
            }
        ],
        "name": "claim",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "", "type": "address"},
            {"internalType": "address", "name": "", "type": "address"},
            {"internalType": "uint256", "name": "", "type": "uint256"},
        ],
        "name": "yieldSharesClaimed",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

ERC20_DECIMALS_ABI = [
    {
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    }
]
