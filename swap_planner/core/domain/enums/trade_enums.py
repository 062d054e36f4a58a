# swap_planner/core/domain/enums/trade_enums.py

from enum import Enum


class TradeType(str, Enum):
    """
    Which side of the trade is fixed.
    """
    EXACT_INPUT = "EXACT_INPUT"     # input fixed, output is the quoted expectation
    EXACT_OUTPUT = "EXACT_OUTPUT"   # output fixed, input is the quoted expectation


class Protocol(str, Enum):
    """
    Route variant tag. Every route class carries one, so the aggregator
    can pick an encoder without inspecting types.
    """
    V2 = "V2"
    V3 = "V3"
    MIXED = "MIXED"


class CommandType(str, Enum):
    """
    Router commands this planner knows how to emit.

    The byte each one maps to on-chain lives in RouterConfig.command_codes,
    not here, so a different deployment can remap them.
    """
    V3_SWAP_EXACT_IN = "V3_SWAP_EXACT_IN"
    V3_SWAP_EXACT_OUT = "V3_SWAP_EXACT_OUT"
    SWEEP = "SWEEP"
    PAY_PORTION = "PAY_PORTION"
    V2_SWAP_EXACT_IN = "V2_SWAP_EXACT_IN"
    V2_SWAP_EXACT_OUT = "V2_SWAP_EXACT_OUT"
    PERMIT2_PERMIT = "PERMIT2_PERMIT"
    WRAP_ETH = "WRAP_ETH"
    UNWRAP_WETH = "UNWRAP_WETH"
