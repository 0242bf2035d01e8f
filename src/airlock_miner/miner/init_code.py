"""
Init code construction for the Doppler hook and the DERC20 token.

The init code of a contract is its creation bytecode followed by the
ABI-encoded constructor arguments. CREATE2 only needs the keccak256 hash of
that blob, so the builder exposes both the encoded argument payloads and
the resulting hashes.

Field order in every tuple below must match the deployed contracts exactly:
any reordering yields a different init code hash and a mined address that
the protocol will never produce.
"""

from __future__ import annotations

import logging

from eth_abi import encode

from airlock_miner.core.crypto import keccak256
from airlock_miner.core.exceptions import InvalidVestingSchedule
from airlock_miner.core.types import HookConfig, TokenConfig

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# ABI layouts
# ---------------------------------------------------------------------------

HOOK_INIT_TYPES = [
    "address",  # poolManager
    "uint256",  # numTokensToSell
    "uint256",  # minimumProceeds
    "uint256",  # maximumProceeds
    "uint256",  # startingTime
    "uint256",  # endingTime
    "int24",    # startingTick
    "int24",    # endingTick
    "uint256",  # epochLength
    "int24",    # gamma
    "bool",     # isToken0
    "uint256",  # numPDSlugs
    "address",  # poolInitializer
    "uint24",   # fee
]

POOL_INITIALIZER_TYPES = [
    "uint160",  # initialPrice
    "uint256",  # minimumProceeds
    "uint256",  # maximumProceeds
    "uint256",  # startingTime
    "uint256",  # endingTime
    "int24",    # startingTick
    "int24",    # endingTick
    "uint256",  # epochLength
    "int24",    # gamma
    "bool",     # isToken0
    "uint256",  # numPDSlugs
    "uint24",   # fee
    "int24",    # tickSpacing
]

TOKEN_INIT_TYPES = [
    "string",     # name
    "string",     # symbol
    "uint256",    # initialSupply
    "address",    # airlock
    "address",    # owner (always the airlock)
    "uint256",    # yearlyMintRate
    "uint256",    # vestingDuration
    "address[]",  # recipients
    "uint256[]",  # amounts
    "string",     # tokenURI
]

TOKEN_FACTORY_TYPES = [
    "string",     # name
    "string",     # symbol
    "uint256",    # yearlyMintRate
    "uint256",    # vestingDuration
    "address[]",  # recipients
    "uint256[]",  # amounts
    "string",     # tokenURI
]


def _abi_address(address: bytes) -> str:
    return "0x" + address.hex()


def validate_vesting_schedule(token: TokenConfig) -> None:
    if len(token.recipients) != len(token.amounts):
        raise InvalidVestingSchedule(len(token.recipients), len(token.amounts))


def encode_hook_init_data(hook: HookConfig, is_token0: bool) -> bytes:
    return encode(
        HOOK_INIT_TYPES,
        [
            _abi_address(hook.pool_manager),
            hook.num_tokens_to_sell,
            hook.minimum_proceeds,
            hook.maximum_proceeds,
            hook.starting_time,
            hook.ending_time,
            hook.starting_tick,
            hook.ending_tick,
            hook.epoch_length,
            hook.gamma,
            is_token0,
            hook.num_pd_slugs,
            _abi_address(hook.pool_initializer),
            hook.fee,
        ],
    )


def encode_pool_initializer_data(hook: HookConfig, is_token0: bool) -> bytes:
    """Encode the payload handed to the v4 pool initializer."""
    return encode(
        POOL_INITIALIZER_TYPES,
        [
            hook.initial_price,
            hook.minimum_proceeds,
            hook.maximum_proceeds,
            hook.starting_time,
            hook.ending_time,
            hook.starting_tick,
            hook.ending_tick,
            hook.epoch_length,
            hook.gamma,
            is_token0,
            hook.num_pd_slugs,
            hook.fee,
            hook.tick_spacing,
        ],
    )


def encode_token_init_data(token: TokenConfig) -> bytes:
    validate_vesting_schedule(token)
    return encode(
        TOKEN_INIT_TYPES,
        [
            token.name,
            token.symbol,
            token.initial_supply,
            _abi_address(token.airlock),
            _abi_address(token.airlock),
            token.yearly_mint_rate,
            token.vesting_duration,
            [_abi_address(r) for r in token.recipients],
            list(token.amounts),
            token.token_uri,
        ],
    )


def encode_token_factory_data(token: TokenConfig) -> bytes:
    """Encode the payload handed to the token factory's ``create``."""
    validate_vesting_schedule(token)
    return encode(
        TOKEN_FACTORY_TYPES,
        [
            token.name,
            token.symbol,
            token.yearly_mint_rate,
            token.vesting_duration,
            [_abi_address(r) for r in token.recipients],
            list(token.amounts),
            token.token_uri,
        ],
    )


class InitCodeHashBuilder:
    """Hashes hook and token init code for a fixed pair of creation bytecodes."""

    def __init__(self, hook_bytecode: bytes, token_bytecode: bytes) -> None:
        if not hook_bytecode:
            raise ValueError("Hook bytecode must not be empty")
        if not token_bytecode:
            raise ValueError("Token bytecode must not be empty")
        self.hook_bytecode = bytes(hook_bytecode)
        self.token_bytecode = bytes(token_bytecode)

    def build_hook_init_code_hash(self, hook: HookConfig, is_token0: bool) -> bytes:
        return keccak256(self.hook_bytecode + encode_hook_init_data(hook, is_token0))

    def build_token_init_code_hash(self, token: TokenConfig) -> bytes:
        init_hash = keccak256(self.token_bytecode + encode_token_init_data(token))
        logger.debug("Token init code hash for %s: %s", token.symbol, init_hash.hex())
        return init_hash
