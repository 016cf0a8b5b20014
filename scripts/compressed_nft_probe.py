# flake8: noqa E402
# Run via uv so project deps are loaded, e.g.:
# uv run scripts/compressed_nft_probe.py --mint <address> --network devnet
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Ensure the src directory is importable when the script is invoked via uv/python directly.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from clients.compressed_nft import CompressedNftClient
from config import shyft_config
from domain.nft import Network


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Look up compressed NFTs through the Shyft API.")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--mint", help="Address of a single compressed NFT to read.")
    target.add_argument("--wallet", help="Wallet address whose compressed NFTs should be listed.")
    parser.add_argument(
        "--network",
        choices=[network.value for network in Network],
        help="Network to query (default: SHYFT_NETWORK from the environment).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log outgoing requests.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    client = CompressedNftClient(shyft_config())
    result: Any
    if args.mint:
        result = client.read(mint=args.mint, network=args.network)
    else:
        result = client.read_all(wallet_address=args.wallet, network=args.network)
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
