# Router conventions shared by the domain and the adapters.

U256_MAX = (1 << 256) - 1
U160_MAX = (1 << 160) - 1
U48_MAX = (1 << 48) - 1
U24_MAX = (1 << 24) - 1

# marker recipients understood by the router
MSG_SENDER = "0x0000000000000000000000000000000000000001"
ADDRESS_THIS = "0x0000000000000000000000000000000000000002"

# token address the router uses for the chain's native asset
NATIVE_ADDRESS = "0x0000000000000000000000000000000000000000"

# amountIn flag meaning "spend whatever the router currently holds"
CONTRACT_BALANCE = 1 << 255

BIPS_BASE = 10_000
