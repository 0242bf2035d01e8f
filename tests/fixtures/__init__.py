"""Test fixtures for address-mining tests."""

from .addresses import (
    AIRLOCK,
    ALICE_ADDRESS,
    BOB_ADDRESS,
    HOOK_DEPLOYER,
    INTEGRATOR,
    TOKEN_FACTORY,
    WETH_ADDRESS,
    ZERO_ADDRESS,
)
from .contracts import HOOK_BYTECODE, TOKEN_BYTECODE
from .params import (
    GOLDEN_HOOK,
    GOLDEN_PROTOCOL_ADDRESSES,
    GOLDEN_TOKEN,
    golden_params,
    golden_params_json,
)

__all__ = [
    # Addresses
    "AIRLOCK",
    "ALICE_ADDRESS",
    "BOB_ADDRESS",
    "HOOK_DEPLOYER",
    "INTEGRATOR",
    "TOKEN_FACTORY",
    "WETH_ADDRESS",
    "ZERO_ADDRESS",
    # Contracts
    "HOOK_BYTECODE",
    "TOKEN_BYTECODE",
    # Parameters
    "GOLDEN_HOOK",
    "GOLDEN_TOKEN",
    "GOLDEN_PROTOCOL_ADDRESSES",
    "golden_params",
    "golden_params_json",
]
