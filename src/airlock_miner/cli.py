"""Command-line interface for the Airlock address miner."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from eth_abi.exceptions import EncodingError
from eth_utils import to_checksum_address

from airlock_miner.core.constants import LIMIT
from airlock_miner.core.exceptions import MiningError
from airlock_miner.core.types import DeploymentParameters, ProtocolAddresses, parse_address
from airlock_miner.factory.bytecode import load_bytecode
from airlock_miner.factory.create_params import build_create_params
from airlock_miner.miner.address_miner import AddressMiner
from airlock_miner.miner.init_code import InitCodeHashBuilder
from airlock_miner.miner.parallel import mine_parallel

logger = logging.getLogger("airlock_miner")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="airlock-miner",
        description="Mine CREATE2 salts for Doppler hook / DERC20 token pairs",
    )
    parser.add_argument(
        "--params",
        type=Path,
        required=True,
        help="JSON file with deployment parameters",
    )
    parser.add_argument(
        "--hook-bytecode",
        type=Path,
        required=True,
        help="Doppler hook creation bytecode (hex file or compiler artifact)",
    )
    parser.add_argument(
        "--token-bytecode",
        type=Path,
        required=True,
        help="DERC20 creation bytecode (hex file or compiler artifact)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=LIMIT,
        help=f"Number of salts to try (default: {LIMIT})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes for the search (default: 1)",
    )
    parser.add_argument(
        "--create-params",
        action="store_true",
        help="Emit the full Airlock.create argument bundle (needs 'addresses' in params)",
    )
    parser.add_argument(
        "--integrator",
        type=str,
        default=None,
        help="Integrator address for --create-params (overrides params file)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def run(args: argparse.Namespace) -> dict:
    with open(args.params) as f:
        data = json.load(f)
    params = DeploymentParameters.from_json(data)

    builder = InitCodeHashBuilder(
        hook_bytecode=load_bytecode(args.hook_bytecode),
        token_bytecode=load_bytecode(args.token_bytecode),
    )
    miner = AddressMiner(builder, limit=args.limit)

    if args.create_params:
        if "addresses" not in data:
            raise ValueError("--create-params requires an 'addresses' section in the params file")
        integrator = args.integrator or data.get("integrator")
        if integrator is None:
            raise ValueError("--create-params requires an integrator address")
        create_params = build_create_params(
            miner,
            params,
            ProtocolAddresses.from_json(data["addresses"]),
            integrator=parse_address(integrator),
            workers=args.workers,
        )
        return create_params.to_json()

    if args.workers > 1:
        result = mine_parallel(miner, params, workers=args.workers)
    else:
        result = miner.mine(params)
    logger.info(
        "Found salt %d: hook=%s token=%s",
        result.salt_int,
        to_checksum_address(result.hook_address),
        to_checksum_address(result.token_address),
    )
    return result.to_json()


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        output = run(args)
    except FileNotFoundError as e:
        logger.error("File not found: %s", e.filename)
        return 1
    except EncodingError as e:
        logger.error("Invalid parameter value: %s", e)
        return 1
    except (MiningError, ValueError, KeyError) as e:
        logger.error("Mining failed: %s", e)
        return 1

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
