"""Deployment parameter and result types.

Addresses are stored in canonical form (20 raw bytes). The ``from_json``
helpers accept the hex/decimal strings a JSON parameter file carries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from eth_utils import (
    is_address,
    is_checksum_address,
    is_checksum_formatted_address,
    to_canonical_address,
    to_checksum_address,
)

from .constants import DEFAULT_PD_SLUGS, ZERO_ADDRESS


def parse_address(value: Union[str, bytes]) -> bytes:
    """Return the canonical 20-byte form of a hex or raw address."""
    if isinstance(value, bytes):
        if len(value) != 20:
            raise ValueError(f"Address must be 20 bytes, got {len(value)}")
        return value
    if not is_address(value):
        raise ValueError(f"Invalid address: {value!r}")
    # mixed case must carry a valid EIP-55 checksum
    if is_checksum_formatted_address(value) and not is_checksum_address(value):
        raise ValueError(f"Invalid address checksum: {value!r}")
    return to_canonical_address(value)


def parse_int(value: Union[str, int]) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    value = value.strip()
    if value.startswith(("0x", "0X")):
        return int(value, 16)
    return int(value)


def _hex(data: bytes) -> str:
    return "0x" + data.hex()


@dataclass(frozen=True)
class HookConfig:
    """Doppler auction/pool economics embedded in the hook init code."""

    pool_manager: bytes
    num_tokens_to_sell: int
    minimum_proceeds: int
    maximum_proceeds: int
    starting_time: int
    ending_time: int
    starting_tick: int
    ending_tick: int
    epoch_length: int
    gamma: int
    num_pd_slugs: int
    pool_initializer: bytes
    fee: int
    initial_price: int = 0
    tick_spacing: int = 0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "HookConfig":
        return cls(
            pool_manager=parse_address(data["poolManager"]),
            num_tokens_to_sell=parse_int(data["numTokensToSell"]),
            minimum_proceeds=parse_int(data["minimumProceeds"]),
            maximum_proceeds=parse_int(data["maximumProceeds"]),
            starting_time=parse_int(data["startingTime"]),
            ending_time=parse_int(data["endingTime"]),
            starting_tick=parse_int(data["startingTick"]),
            ending_tick=parse_int(data["endingTick"]),
            epoch_length=parse_int(data["epochLength"]),
            gamma=parse_int(data["gamma"]),
            num_pd_slugs=parse_int(data.get("numPDSlugs", DEFAULT_PD_SLUGS)),
            pool_initializer=parse_address(data["poolInitializer"]),
            fee=parse_int(data["fee"]),
            initial_price=parse_int(data.get("initialPrice", 0)),
            tick_spacing=parse_int(data.get("tickSpacing", 0)),
        )


@dataclass(frozen=True)
class TokenConfig:
    """DERC20 constructor arguments."""

    name: str
    symbol: str
    initial_supply: int
    airlock: bytes
    yearly_mint_rate: int
    vesting_duration: int
    recipients: tuple[bytes, ...] = ()
    amounts: tuple[int, ...] = ()
    token_uri: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "TokenConfig":
        return cls(
            name=data["name"],
            symbol=data["symbol"],
            initial_supply=parse_int(data["initialSupply"]),
            airlock=parse_address(data["airlock"]),
            yearly_mint_rate=parse_int(data.get("yearlyMintRate", 0)),
            vesting_duration=parse_int(data.get("vestingDuration", 0)),
            recipients=tuple(parse_address(r) for r in data.get("recipients", [])),
            amounts=tuple(parse_int(a) for a in data.get("amounts", [])),
            token_uri=data.get("tokenURI", ""),
        )


@dataclass(frozen=True)
class DeploymentParameters:
    """Everything needed to mine a hook/token address pair."""

    hook_deployer: bytes
    token_factory: bytes
    numeraire: bytes
    hook: HookConfig
    token: TokenConfig

    @property
    def is_token0(self) -> bool:
        # The native-asset sentinel sorts below every token, so the token
        # can only be currency0 against an ERC20 numeraire.
        return self.numeraire != ZERO_ADDRESS

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "DeploymentParameters":
        return cls(
            hook_deployer=parse_address(data["hookDeployer"]),
            token_factory=parse_address(data["tokenFactory"]),
            numeraire=parse_address(data.get("numeraire", ZERO_ADDRESS)),
            hook=HookConfig.from_json(data["hook"]),
            token=TokenConfig.from_json(data["token"]),
        )


@dataclass(frozen=True)
class MiningResult:
    salt: bytes
    hook_address: bytes
    token_address: bytes
    hook_init_code_params: bytes
    token_factory_data: bytes

    @property
    def salt_int(self) -> int:
        return int.from_bytes(self.salt, "big")

    def __iter__(self):
        yield from (
            self.salt,
            self.hook_address,
            self.token_address,
            self.hook_init_code_params,
            self.token_factory_data,
        )

    def to_json(self) -> dict[str, str]:
        return {
            "salt": _hex(self.salt),
            "hook": to_checksum_address(self.hook_address),
            "token": to_checksum_address(self.token_address),
            "poolInitializerData": _hex(self.hook_init_code_params),
            "tokenFactoryData": _hex(self.token_factory_data),
        }


@dataclass(frozen=True)
class ProtocolAddresses:
    """Airlock deployment addresses on a given chain."""

    airlock: bytes
    token_factory: bytes
    hook_deployer: bytes
    pool_initializer: bytes
    pool_manager: bytes
    migrator: bytes
    governance_factory: bytes

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "ProtocolAddresses":
        return cls(
            airlock=parse_address(data["airlock"]),
            token_factory=parse_address(data["tokenFactory"]),
            hook_deployer=parse_address(data["dopplerDeployer"]),
            pool_initializer=parse_address(data["v4Initializer"]),
            pool_manager=parse_address(data["poolManager"]),
            migrator=parse_address(data["migrator"]),
            governance_factory=parse_address(data["governanceFactory"]),
        )


@dataclass(frozen=True)
class CreateParams:
    """Argument bundle for ``Airlock.create`` plus the predicted addresses."""

    initial_supply: int
    num_tokens_to_sell: int
    numeraire: bytes
    token_factory: bytes
    token_factory_data: bytes
    governance_factory: bytes
    governance_factory_data: bytes
    pool_initializer: bytes
    pool_initializer_data: bytes
    liquidity_migrator: bytes
    integrator: bytes
    salt: bytes
    hook: bytes
    token: bytes
    liquidity_migrator_data: bytes = field(default=b"")

    def to_json(self) -> dict[str, Any]:
        return {
            "initialSupply": str(self.initial_supply),
            "numTokensToSell": str(self.num_tokens_to_sell),
            "numeraire": to_checksum_address(self.numeraire),
            "tokenFactory": to_checksum_address(self.token_factory),
            "tokenFactoryData": _hex(self.token_factory_data),
            "governanceFactory": to_checksum_address(self.governance_factory),
            "governanceFactoryData": _hex(self.governance_factory_data),
            "poolInitializer": to_checksum_address(self.pool_initializer),
            "poolInitializerData": _hex(self.pool_initializer_data),
            "liquidityMigrator": to_checksum_address(self.liquidity_migrator),
            "liquidityMigratorData": _hex(self.liquidity_migrator_data),
            "integrator": to_checksum_address(self.integrator),
            "salt": _hex(self.salt),
            "hook": to_checksum_address(self.hook),
            "token": to_checksum_address(self.token),
        }
