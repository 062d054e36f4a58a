from .config import RouterConfig, Settings, get_router_config, get_settings
from .core.domain.entities import (
    Currency,
    CurrencyAmount,
    FeeOptions,
    MethodParameters,
    MixedRoute,
    NativeCurrency,
    Permit2Permit,
    PermitDetails,
    PoolLeg,
    RouterTrade,
    RouteTrade,
    SwapOptions,
    Token,
    V2Pair,
    V2Route,
    V3Pool,
    V3Route,
)
from .core.domain.enums import CommandType, Protocol, TradeType
from .core.exceptions import (
    ConfigurationError,
    InvalidTradeError,
    SwapPlannerError,
    UnsupportedProtocolError,
    ValidationError,
)
from .core.services.command_parser import CommandParser, ParsedCall, ParsedCommand
from .core.usecases.encode_swap_use_case import SwapRouter, swap_call_parameters

__all__ = [
    "CommandParser",
    "CommandType",
    "ConfigurationError",
    "Currency",
    "CurrencyAmount",
    "FeeOptions",
    "InvalidTradeError",
    "MethodParameters",
    "MixedRoute",
    "NativeCurrency",
    "ParsedCall",
    "ParsedCommand",
    "Permit2Permit",
    "PermitDetails",
    "PoolLeg",
    "Protocol",
    "RouteTrade",
    "RouterConfig",
    "RouterTrade",
    "Settings",
    "SwapOptions",
    "SwapPlannerError",
    "SwapRouter",
    "Token",
    "TradeType",
    "UnsupportedProtocolError",
    "V2Pair",
    "V2Route",
    "V3Pool",
    "V3Route",
    "ValidationError",
    "get_router_config",
    "get_settings",
    "swap_call_parameters",
]
