"""Pytest configuration and shared fixtures for all tests."""

import json

import pytest

from airlock_miner.miner.address_miner import AddressMiner
from airlock_miner.miner.init_code import InitCodeHashBuilder

from tests.fixtures.addresses import WETH_ADDRESS
from tests.fixtures.contracts import HOOK_BYTECODE, TOKEN_BYTECODE
from tests.fixtures.params import golden_params, golden_params_json


# =============================================================================
# Builders and miners
# =============================================================================

@pytest.fixture
def builder():
    """Init code hash builder over the stand-in bytecodes."""
    return InitCodeHashBuilder(HOOK_BYTECODE, TOKEN_BYTECODE)


@pytest.fixture
def miner(builder):
    """Miner with the protocol flags and the default search limit."""
    return AddressMiner(builder)


# =============================================================================
# Deployment parameters
# =============================================================================

@pytest.fixture
def native_params():
    """Golden parameters against the native asset (isToken0 = False)."""
    return golden_params()


@pytest.fixture
def weth_params():
    """Golden parameters against WETH (isToken0 = True)."""
    return golden_params(numeraire=WETH_ADDRESS)


# =============================================================================
# CLI inputs
# =============================================================================

@pytest.fixture
def bytecode_files(tmp_path):
    """Hook bytecode as a raw hex file, token bytecode as a Foundry artifact."""
    hook_path = tmp_path / "Doppler.hex"
    hook_path.write_text("0x" + HOOK_BYTECODE.hex() + "\n")

    token_path = tmp_path / "DERC20.json"
    token_path.write_text(json.dumps({"bytecode": {"object": "0x" + TOKEN_BYTECODE.hex()}}))
    return hook_path, token_path


@pytest.fixture
def params_file(tmp_path):
    """Golden parameters written as a CLI params file."""
    path = tmp_path / "params.json"
    path.write_text(json.dumps(golden_params_json()))
    return path
