"""
Assembly of the ``Airlock.create`` argument bundle.

Wraps the miner with the sanity checks and governance payload the Airlock
expects, and refuses parameter sets whose addresses disagree with the
protocol deployment (a mismatch silently invalidates the mined salt).
"""

from __future__ import annotations

import logging
from typing import Optional

from eth_abi import encode
from eth_utils import to_checksum_address

from airlock_miner.core.constants import (
    DEFAULT_INITIAL_PROPOSAL_THRESHOLD,
    DEFAULT_INITIAL_VOTING_DELAY,
    DEFAULT_INITIAL_VOTING_PERIOD,
)
from airlock_miner.core.exceptions import InvalidCreateParams
from airlock_miner.core.types import CreateParams, DeploymentParameters, ProtocolAddresses
from airlock_miner.miner.address_miner import AddressMiner
from airlock_miner.miner.parallel import mine_parallel

logger = logging.getLogger(__name__)

GOVERNANCE_FACTORY_TYPES = ["string", "uint48", "uint32", "uint256"]


def encode_governance_factory_data(
    name: str,
    voting_delay: int = DEFAULT_INITIAL_VOTING_DELAY,
    voting_period: int = DEFAULT_INITIAL_VOTING_PERIOD,
    proposal_threshold: int = DEFAULT_INITIAL_PROPOSAL_THRESHOLD,
) -> bytes:
    return encode(
        GOVERNANCE_FACTORY_TYPES,
        [name, voting_delay, voting_period, proposal_threshold],
    )


def validate_deployment(params: DeploymentParameters) -> None:
    """Reject parameter sets the Airlock or the hook would revert on."""
    hook, token = params.hook, params.token

    if not token.name or not token.symbol:
        raise InvalidCreateParams("Name and symbol are required")
    if token.initial_supply <= 0:
        raise InvalidCreateParams("Total supply must be positive")
    if hook.num_tokens_to_sell <= 0:
        raise InvalidCreateParams("Number of tokens to sell must be positive")
    if hook.epoch_length <= 0:
        raise InvalidCreateParams("Epoch length must be positive")
    if hook.tick_spacing <= 0:
        raise InvalidCreateParams("Tick spacing must be positive")
    if hook.ending_time <= hook.starting_time:
        raise InvalidCreateParams("Ending time must be after starting time")
    if (hook.ending_time - hook.starting_time) % hook.epoch_length != 0:
        raise InvalidCreateParams("Epoch length must divide total duration evenly")
    if hook.gamma % hook.tick_spacing != 0:
        raise InvalidCreateParams("Gamma must be divisible by tick spacing")


def _check_addresses(params: DeploymentParameters, addresses: ProtocolAddresses) -> None:
    pairs = [
        ("hook deployer", params.hook_deployer, addresses.hook_deployer),
        ("token factory", params.token_factory, addresses.token_factory),
        ("pool initializer", params.hook.pool_initializer, addresses.pool_initializer),
        ("pool manager", params.hook.pool_manager, addresses.pool_manager),
        ("airlock", params.token.airlock, addresses.airlock),
    ]
    for label, given, expected in pairs:
        if given != expected:
            raise InvalidCreateParams(
                f"{label} {to_checksum_address(given)} does not match "
                f"deployment address {to_checksum_address(expected)}"
            )


def build_create_params(
    miner: AddressMiner,
    params: DeploymentParameters,
    addresses: ProtocolAddresses,
    integrator: bytes,
    workers: Optional[int] = None,
) -> CreateParams:
    """Validate, mine and bundle everything ``Airlock.create`` takes.

    ``workers`` > 1 runs the search across processes; the result is the same.
    """
    validate_deployment(params)
    _check_addresses(params, addresses)

    if workers is not None and workers > 1:
        result = mine_parallel(miner, params, workers=workers)
    else:
        result = miner.mine(params)

    logger.info(
        "Mined salt %d for %s: hook=%s token=%s",
        result.salt_int,
        params.token.symbol,
        to_checksum_address(result.hook_address),
        to_checksum_address(result.token_address),
    )

    return CreateParams(
        initial_supply=params.token.initial_supply,
        num_tokens_to_sell=params.hook.num_tokens_to_sell,
        numeraire=params.numeraire,
        token_factory=addresses.token_factory,
        token_factory_data=result.token_factory_data,
        governance_factory=addresses.governance_factory,
        governance_factory_data=encode_governance_factory_data(params.token.name),
        pool_initializer=addresses.pool_initializer,
        pool_initializer_data=result.hook_init_code_params,
        liquidity_migrator=addresses.migrator,
        integrator=integrator,
        salt=result.salt,
        hook=result.hook_address,
        token=result.token_address,
    )
