"""Tests for CREATE2 address computation (EIP-1014)."""

import pytest
from eth_utils import keccak

from airlock_miner.core.create2 import (
    compute_create2_address,
    salt_to_bytes,
)
from tests.fixtures.contracts import HOOK_BYTECODE


class TestCREATE2AddressComputation:
    """Test CREATE2 address computation (EIP-1014)."""

    def test_compute_create2_address_basic(self):
        """Address is 20 raw bytes."""
        address = compute_create2_address(bytes.fromhex("deadbeef" * 5), bytes(32), keccak(HOOK_BYTECODE))

        assert isinstance(address, bytes)
        assert len(address) == 20

    def test_compute_create2_address_deterministic(self):
        """Same inputs give the same address."""
        deployer = bytes.fromhex("deadbeef" * 5)
        init_code_hash = keccak(HOOK_BYTECODE)

        address1 = compute_create2_address(deployer, bytes(32), init_code_hash)
        address2 = compute_create2_address(deployer, bytes(32), init_code_hash)

        assert address1 == address2

    def test_compute_create2_address_different_deployer(self):
        """Different deployers produce different addresses."""
        init_code_hash = keccak(HOOK_BYTECODE)

        address1 = compute_create2_address(bytes.fromhex("deadbeef" * 5), bytes(32), init_code_hash)
        address2 = compute_create2_address(bytes.fromhex("beefdead" * 5), bytes(32), init_code_hash)

        assert address1 != address2

    def test_compute_create2_address_different_salt(self):
        """Different salts produce different addresses."""
        deployer = bytes.fromhex("deadbeef" * 5)
        init_code_hash = keccak(HOOK_BYTECODE)

        address1 = compute_create2_address(deployer, bytes(32), init_code_hash)
        address2 = compute_create2_address(deployer, bytes(31) + b"\x01", init_code_hash)

        assert address1 != address2

    def test_compute_create2_address_different_init_code_hash(self):
        """Different init code produces different addresses."""
        deployer = bytes.fromhex("deadbeef" * 5)

        address1 = compute_create2_address(deployer, bytes(32), keccak(HOOK_BYTECODE))
        address2 = compute_create2_address(deployer, bytes(32), keccak(HOOK_BYTECODE + b"\x00"))

        assert address1 != address2

    def test_compute_create2_address_eip1014_vector(self):
        """Test against EIP-1014 example 0.

          address: 0x0000000000000000000000000000000000000000
          salt: 0x00...00
          initCode: 0x00
          result: 0x4D1A2e2bB4F88F0250f26Ffff098B0b30B26BF38
        """
        address = compute_create2_address(bytes(20), bytes(32), keccak(b"\x00"))

        assert address == bytes.fromhex("4d1a2e2bb4f88f0250f26ffff098b0b30b26bf38")

    def test_compute_create2_address_eip1014_vector_with_salt(self):
        """Test against EIP-1014 example 3.

          address: 0xdeadbeef00000000000000000000000000000000
          salt: 0x000000000000000000000000feed000000000000000000000000000000000000
          initCode: 0x00
          result: 0xD04116cDd17beBE565EB2422F2497E06cC1C9833
        """
        deployer = bytes.fromhex("deadbeef00000000000000000000000000000000")
        salt = bytes.fromhex("000000000000000000000000feed000000000000000000000000000000000000")

        address = compute_create2_address(deployer, salt, keccak(b"\x00"))

        assert address == bytes.fromhex("d04116cdd17bebe565eb2422f2497e06cc1c9833")

    def test_compute_create2_address_invalid_deployer_length(self):
        """Short deployer is rejected."""
        with pytest.raises(ValueError, match="Deployer must be 20 bytes"):
            compute_create2_address(bytes(19), bytes(32), bytes(32))

    def test_compute_create2_address_invalid_salt_length(self):
        """Short salt is rejected."""
        with pytest.raises(ValueError, match="Salt must be 32 bytes"):
            compute_create2_address(bytes(20), bytes(31), bytes(32))

    def test_compute_create2_address_invalid_init_code_hash_length(self):
        """Init code passed where its hash is expected is rejected."""
        with pytest.raises(ValueError, match="Init code hash must be 32 bytes"):
            compute_create2_address(bytes(20), bytes(32), HOOK_BYTECODE)


class TestSaltEncoding:
    """Test integer salt to bytes32 conversion."""

    def test_zero(self):
        assert salt_to_bytes(0) == bytes(32)

    def test_big_endian(self):
        """Salt 15050 = 0x3aca sits in the last two bytes."""
        assert salt_to_bytes(15050) == bytes(30) + b"\x3a\xca"

    def test_max(self):
        assert salt_to_bytes(2**256 - 1) == b"\xff" * 32

    def test_too_large(self):
        with pytest.raises(ValueError, match="does not fit"):
            salt_to_bytes(2**256)

    def test_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            salt_to_bytes(-1)
