"""Init code hashing and salt search."""

from .address_miner import AddressMiner, mine
from .init_code import InitCodeHashBuilder
from .parallel import mine_parallel

__all__ = ["AddressMiner", "InitCodeHashBuilder", "mine", "mine_parallel"]
