"""Exception classes raised while building and mining deployments."""


class MiningError(Exception):
    """Base exception for address-mining errors."""

    pass


class InvalidVestingSchedule(MiningError, ValueError):
    """Raised when recipients and amounts differ in length."""

    def __init__(self, recipients: int, amounts: int) -> None:
        self.recipients = recipients
        self.amounts = amounts
        super().__init__(
            f"Vesting schedule has {recipients} recipients but {amounts} amounts"
        )


class SaltSpaceExhausted(MiningError, RuntimeError):
    """Raised when no salt below the search limit satisfies both predicates."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"AirlockMiner: could not find salt in [0, {limit})")


class InvalidCreateParams(MiningError, ValueError):
    """Raised when deployment parameters fail pre-mining validation."""

    pass
