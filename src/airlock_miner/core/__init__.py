"""Core types, constants and primitives."""

from .constants import FLAG_MASK, FLAGS, LIMIT, ZERO_ADDRESS
from .create2 import compute_create2_address, salt_to_bytes
from .crypto import keccak256
from .exceptions import (
    InvalidCreateParams,
    InvalidVestingSchedule,
    MiningError,
    SaltSpaceExhausted,
)
from .types import (
    CreateParams,
    DeploymentParameters,
    HookConfig,
    MiningResult,
    ProtocolAddresses,
    TokenConfig,
)

__all__ = [
    "FLAG_MASK",
    "FLAGS",
    "LIMIT",
    "ZERO_ADDRESS",
    "compute_create2_address",
    "salt_to_bytes",
    "keccak256",
    "MiningError",
    "InvalidVestingSchedule",
    "SaltSpaceExhausted",
    "InvalidCreateParams",
    "CreateParams",
    "DeploymentParameters",
    "HookConfig",
    "MiningResult",
    "ProtocolAddresses",
    "TokenConfig",
]
