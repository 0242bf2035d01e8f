"""
airlock-miner: CREATE2 salt mining for Doppler hook / DERC20 token deployments
"""

from importlib.metadata import PackageNotFoundError, version

from .core import (
    FLAG_MASK,
    FLAGS,
    LIMIT,
    DeploymentParameters,
    HookConfig,
    InvalidCreateParams,
    InvalidVestingSchedule,
    MiningError,
    MiningResult,
    SaltSpaceExhausted,
    TokenConfig,
)
from .miner import AddressMiner, InitCodeHashBuilder, mine, mine_parallel

try:
    __version__ = version("airlock-miner")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "AddressMiner",
    "InitCodeHashBuilder",
    "mine",
    "mine_parallel",
    "DeploymentParameters",
    "HookConfig",
    "TokenConfig",
    "MiningResult",
    "FLAG_MASK",
    "FLAGS",
    "LIMIT",
    "MiningError",
    "InvalidVestingSchedule",
    "SaltSpaceExhausted",
    "InvalidCreateParams",
]
