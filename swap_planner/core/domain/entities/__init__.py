from .command import RouterCommand
from .currency import Currency, CurrencyAmount, NativeCurrency, Token
from .method_parameters import MethodParameters
from .options import FeeOptions, Permit2Permit, PermitDetails, SwapOptions
from .plan import AggregatedTrade, PlannedRoute
from .pools import PoolLeg, V2Pair, V3Pool
from .route import MixedRoute, Route, V2Route, V3Route
from .trade import RouterTrade, RouteTrade

__all__ = [
    "AggregatedTrade",
    "Currency",
    "CurrencyAmount",
    "FeeOptions",
    "MethodParameters",
    "MixedRoute",
    "NativeCurrency",
    "Permit2Permit",
    "PermitDetails",
    "PlannedRoute",
    "PoolLeg",
    "RouterCommand",
    "Route",
    "RouteTrade",
    "RouterTrade",
    "SwapOptions",
    "Token",
    "V2Pair",
    "V2Route",
    "V3Pool",
    "V3Route",
]
