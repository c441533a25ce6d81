#!/usr/bin/env python3
"""Run a single Yelay action from the command line."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from yelay_agentkit.actions.yelay import yelay_action_provider
from yelay_agentkit.config import settings
from yelay_agentkit.errors import YelayError
from yelay_agentkit.onchain.wallet import Web3WalletProvider

ACTION_NAMES = ("get_vaults", "deposit", "redeem", "claim", "get_balance")


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a Yelay vault action")
    parser.add_argument("action", choices=ACTION_NAMES)
    parser.add_argument(
        "--args",
        dest="action_args",
        default="{}",
        help='Action input as JSON, e.g. \'{"assets": "1", "receiver": "0x..."}\'',
    )
    parser.add_argument("--chain-id", type=int, default=None, help="Defaults to YELAY_CHAIN_ID")
    parser.add_argument("--test", action="store_true", help="Use the Base test environment")
    return parser.parse_args(argv)


async def run(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        action_args = json.loads(args.action_args)
    except json.JSONDecodeError as exc:
        print(f"Invalid --args JSON: {exc}")
        return 1
    if not isinstance(action_args, dict):
        print("--args must be a JSON object")
        return 1

    try:
        provider = yelay_action_provider(chain_id=args.chain_id, is_test=args.test or None)
    except YelayError as exc:
        print(f"Configuration error: {exc}")
        return 1

    wallet = None
    if args.action != "get_vaults":
        try:
            wallet = Web3WalletProvider()
        except ValueError as exc:
            print(f"Wallet error: {exc}")
            return 1

    result = await provider.invoke(args.action, wallet, action_args)
    print(result)
    return 1 if result.startswith("Error") else 0


def main() -> int:
    configure_logging()
    return asyncio.run(run())


if __name__ == "__main__":
    sys.exit(main())
