"""
Salt search for Doppler hook / DERC20 token address pairs.

For each salt in ``[0, limit)`` the miner derives the CREATE2 address of the
hook (deployed by the hook deployer) and of the token (deployed by the token
factory) and accepts the first salt where:

  1. ``hook & flag_mask == flags`` so the pool manager reads the right hook
     permissions from the address, and
  2. the token sorts on the correct side of the numeraire: below it when the
     token is currency0, above it otherwise.

Salts are tried in ascending order, so the result is the smallest matching
salt and identical inputs always produce an identical result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from airlock_miner.core.constants import FLAG_MASK, FLAGS, LIMIT
from airlock_miner.core.create2 import compute_create2_address, salt_to_bytes
from airlock_miner.core.exceptions import SaltSpaceExhausted
from airlock_miner.core.types import DeploymentParameters, MiningResult
from airlock_miner.miner.init_code import (
    InitCodeHashBuilder,
    encode_pool_initializer_data,
    encode_token_factory_data,
    validate_vesting_schedule,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MiningJob:
    """Immutable inputs of one search, computed once before the loop."""

    hook_deployer: bytes
    token_factory: bytes
    numeraire: int
    is_token0: bool
    hook_init_code_hash: bytes
    token_init_code_hash: bytes
    hook_init_code_params: bytes
    token_factory_data: bytes
    flags: int
    flag_mask: int
    limit: int


@dataclass(frozen=True)
class Candidate:
    salt: bytes
    hook_address: bytes
    token_address: bytes


def check_salt(job: MiningJob, salt: int) -> Optional[Candidate]:
    """Return the candidate for ``salt`` if it satisfies both predicates."""
    salt_bytes = salt_to_bytes(salt)

    hook = compute_create2_address(job.hook_deployer, salt_bytes, job.hook_init_code_hash)
    if int.from_bytes(hook, "big") & job.flag_mask != job.flags:
        return None

    token = compute_create2_address(job.token_factory, salt_bytes, job.token_init_code_hash)
    token_value = int.from_bytes(token, "big")
    if job.is_token0:
        ordered = token_value < job.numeraire
    else:
        ordered = token_value > job.numeraire
    if not ordered:
        return None

    return Candidate(salt=salt_bytes, hook_address=hook, token_address=token)


def scan_range(job: MiningJob, start: int, stop: int) -> Optional[Candidate]:
    """Scan ``[start, stop)`` in ascending order; first match wins.

    Module-level so it can be shipped to worker processes.
    """
    for salt in range(start, stop):
        candidate = check_salt(job, salt)
        if candidate is not None:
            return candidate
    return None


class AddressMiner:
    """Finds the lowest salt giving a valid hook/token address pair.

    ``flags``, ``flag_mask`` and ``limit`` default to the protocol constants;
    overriding them is an explicit policy decision made by the caller.
    """

    def __init__(
        self,
        builder: InitCodeHashBuilder,
        limit: int = LIMIT,
        flags: int = FLAGS,
        flag_mask: int = FLAG_MASK,
    ) -> None:
        if limit < 0:
            raise ValueError(f"Search limit must be non-negative, got {limit}")
        self.builder = builder
        self.limit = limit
        self.flags = flags
        self.flag_mask = flag_mask

    def prepare(self, params: DeploymentParameters) -> MiningJob:
        """Validate inputs and compute everything the search loop needs."""
        validate_vesting_schedule(params.token)

        is_token0 = params.is_token0
        return MiningJob(
            hook_deployer=params.hook_deployer,
            token_factory=params.token_factory,
            numeraire=int.from_bytes(params.numeraire, "big"),
            is_token0=is_token0,
            hook_init_code_hash=self.builder.build_hook_init_code_hash(params.hook, is_token0),
            token_init_code_hash=self.builder.build_token_init_code_hash(params.token),
            hook_init_code_params=encode_pool_initializer_data(params.hook, is_token0),
            token_factory_data=encode_token_factory_data(params.token),
            flags=self.flags,
            flag_mask=self.flag_mask,
            limit=self.limit,
        )

    @staticmethod
    def to_result(job: MiningJob, candidate: Candidate) -> MiningResult:
        return MiningResult(
            salt=candidate.salt,
            hook_address=candidate.hook_address,
            token_address=candidate.token_address,
            hook_init_code_params=job.hook_init_code_params,
            token_factory_data=job.token_factory_data,
        )

    def mine(self, params: DeploymentParameters) -> MiningResult:
        """Run the search.

        Raises:
            InvalidVestingSchedule: recipients and amounts differ in length
            SaltSpaceExhausted: no salt in ``[0, limit)`` matches
        """
        job = self.prepare(params)
        logger.debug(
            "Mining salts [0, %d) for flags=0x%04x mask=0x%04x isToken0=%s",
            job.limit, job.flags, job.flag_mask, job.is_token0,
        )

        candidate = scan_range(job, 0, job.limit)
        if candidate is None:
            raise SaltSpaceExhausted(job.limit)

        logger.debug(
            "Found salt %d: hook=0x%s token=0x%s",
            int.from_bytes(candidate.salt, "big"),
            candidate.hook_address.hex(),
            candidate.token_address.hex(),
        )
        return self.to_result(job, candidate)


def mine(
    params: DeploymentParameters,
    builder: InitCodeHashBuilder,
    *,
    limit: int = LIMIT,
    flags: int = FLAGS,
    flag_mask: int = FLAG_MASK,
) -> MiningResult:
    """Mine a salt for ``params`` with a one-off :class:`AddressMiner`."""
    return AddressMiner(builder, limit=limit, flags=flags, flag_mask=flag_mask).mine(params)
