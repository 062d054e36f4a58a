# swap_planner/core/domain/entities/plan.py

from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple

from ..enums.trade_enums import Protocol, TradeType
from .currency import Currency
from .route import Route
from .trade import RouteTrade


@dataclass(frozen=True)
class PlannedRoute:
    """
    A route trade with its slippage bounds already applied.

    amount_in:  exact input (EXACT_INPUT) or maximum input (EXACT_OUTPUT)
    amount_out: minimum output (EXACT_INPUT) or exact output (EXACT_OUTPUT)
    share:      this route's part of the aggregate fixed amount, for diagnostics
    """

    protocol: Protocol
    trade: RouteTrade
    amount_in: int
    amount_out: int
    share: Fraction

    @property
    def route(self) -> Route:
        return self.trade.route

    @property
    def trade_type(self) -> TradeType:
        return self.trade.trade_type


@dataclass(frozen=True)
class AggregatedTrade:
    trade_type: TradeType
    input_currency: Currency
    output_currency: Currency
    routes: Tuple[PlannedRoute, ...]

    @property
    def total_amount_in(self) -> int:
        return sum(r.amount_in for r in self.routes)

    @property
    def total_amount_out(self) -> int:
        return sum(r.amount_out for r in self.routes)
