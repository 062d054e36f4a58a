from typing import Dict, List, Sequence

from eth_abi import encode

from ..core.domain.entities.command import RouterCommand
from ..core.domain.enums.trade_enums import CommandType

# ---- router command input layouts (abi.encode of each tuple) ----
PERMIT_SINGLE = "((address,uint160,uint48,uint48),address,uint256)"

COMMAND_ABI: Dict[CommandType, List[str]] = {
    # recipient, amountIn, amountOutMin, path, payerIsUser
    CommandType.V3_SWAP_EXACT_IN: ["address", "uint256", "uint256", "bytes", "bool"],
    # recipient, amountOut, amountInMax, path, payerIsUser
    CommandType.V3_SWAP_EXACT_OUT: ["address", "uint256", "uint256", "bytes", "bool"],
    # token, recipient, amountMin
    CommandType.SWEEP: ["address", "address", "uint256"],
    # token, recipient, bips
    CommandType.PAY_PORTION: ["address", "address", "uint256"],
    CommandType.V2_SWAP_EXACT_IN: ["address", "uint256", "uint256", "address[]", "bool"],
    CommandType.V2_SWAP_EXACT_OUT: ["address", "uint256", "uint256", "address[]", "bool"],
    # PermitSingle, signature
    CommandType.PERMIT2_PERMIT: [PERMIT_SINGLE, "bytes"],
    # recipient, amountMin
    CommandType.WRAP_ETH: ["address", "uint256"],
    CommandType.UNWRAP_WETH: ["address", "uint256"],
}

EXECUTE_ARGS = ["bytes", "bytes[]"]
EXECUTE_WITH_DEADLINE_ARGS = ["bytes", "bytes[]", "uint256"]


def encode_command(command: CommandType, args: Sequence) -> RouterCommand:
    """ABI-encode `args` with the layout registered for `command`."""
    return RouterCommand(command, encode(COMMAND_ABI[command], list(args)))
