"""CREATE2 address computation (EIP-1014).

The deployed address is fully determined by the deployer, a 32-byte salt and
the hash of the init code:

    address = keccak256(0xff ++ deployer ++ salt ++ init_code_hash)[12:]

Reference: https://eips.ethereum.org/EIPS/eip-1014
"""

from eth_utils import keccak

CREATE2_PREFIX = b"\xff"
SALT_SIZE = 32


def _require_length(name: str, value: bytes, size: int) -> None:
    if len(value) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(value)}")


def salt_to_bytes(salt: int) -> bytes:
    """Encode a non-negative integer salt as a 32-byte big-endian word.

    Raises:
        ValueError: If the salt is negative or does not fit in 256 bits
    """
    if salt < 0:
        raise ValueError(f"Salt must be non-negative, got {salt}")
    if salt.bit_length() > SALT_SIZE * 8:
        raise ValueError("Salt does not fit in 32 bytes")
    return salt.to_bytes(SALT_SIZE, "big")


def compute_create2_address(
    deployer: bytes,
    salt: bytes,
    init_code_hash: bytes,
) -> bytes:
    """
    Compute a CREATE2 contract address from a pre-computed init code hash.

    Args:
        deployer: 20-byte address of the contract executing CREATE2
        salt: 32-byte salt
        init_code_hash: 32-byte keccak256 hash of the init code

    Returns:
        20-byte predicted contract address

    Raises:
        ValueError: If any component has the wrong length

    Example:
        >>> addr = compute_create2_address(bytes(20), bytes(32), keccak(b"\\x00"))
        >>> addr.hex()
        '4d1a2e2bb4f88f0250f26ffff098b0b30b26bf38'
    """
    _require_length("Deployer", deployer, 20)
    _require_length("Salt", salt, SALT_SIZE)
    _require_length("Init code hash", init_code_hash, 32)

    return keccak(CREATE2_PREFIX + deployer + salt + init_code_hash)[12:]
