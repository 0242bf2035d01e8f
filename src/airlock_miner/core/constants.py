"""Protocol constants for hook address mining."""

ZERO_ADDRESS = b"\x00" * 20
ZERO_HASH = b"\x00" * 32

# ---------------------------------------------------------------------------
# Uniswap v4 hook permission bits (low 14 bits of the hook address)
# ---------------------------------------------------------------------------

BEFORE_INITIALIZE_FLAG = 1 << 13
AFTER_INITIALIZE_FLAG = 1 << 12
BEFORE_ADD_LIQUIDITY_FLAG = 1 << 11
AFTER_ADD_LIQUIDITY_FLAG = 1 << 10
BEFORE_REMOVE_LIQUIDITY_FLAG = 1 << 9
AFTER_REMOVE_LIQUIDITY_FLAG = 1 << 8
BEFORE_SWAP_FLAG = 1 << 7
AFTER_SWAP_FLAG = 1 << 6
BEFORE_DONATE_FLAG = 1 << 5
AFTER_DONATE_FLAG = 1 << 4
BEFORE_SWAP_RETURNS_DELTA_FLAG = 1 << 3
AFTER_SWAP_RETURNS_DELTA_FLAG = 1 << 2
AFTER_ADD_LIQUIDITY_RETURNS_DELTA_FLAG = 1 << 1
AFTER_REMOVE_LIQUIDITY_RETURNS_DELTA_FLAG = 1 << 0

FLAG_MASK = 0x3FFF

# Permissions declared by the Doppler hook
FLAGS = (
    BEFORE_INITIALIZE_FLAG
    | AFTER_INITIALIZE_FLAG
    | BEFORE_ADD_LIQUIDITY_FLAG
    | BEFORE_SWAP_FLAG
    | AFTER_SWAP_FLAG
    | BEFORE_DONATE_FLAG
)

# ---------------------------------------------------------------------------
# Search bound
# ---------------------------------------------------------------------------

LIMIT = 1_000_000

# ---------------------------------------------------------------------------
# Governance defaults (Airlock governance factory)
# ---------------------------------------------------------------------------

DEFAULT_INITIAL_VOTING_DELAY = 7200
DEFAULT_INITIAL_VOTING_PERIOD = 50400
DEFAULT_INITIAL_PROPOSAL_THRESHOLD = 0

DEFAULT_PD_SLUGS = 5
