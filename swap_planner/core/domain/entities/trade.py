# swap_planner/core/domain/entities/trade.py

from dataclasses import dataclass
from typing import Tuple

from ...exceptions import ConfigurationError, InvalidTradeError
from ..enums.trade_enums import Protocol, TradeType
from .currency import Currency, CurrencyAmount
from .route import MixedRoute, Route, V2Route, V3Route


@dataclass(frozen=True)
class RouteTrade:
    """
    One route with its quoted amounts.

    For EXACT_INPUT `input_amount` is what gets spent and `output_amount`
    the expected result; for EXACT_OUTPUT it is the other way round.
    """

    route: Route
    input_amount: CurrencyAmount
    output_amount: CurrencyAmount
    trade_type: TradeType

    def __post_init__(self):
        if not isinstance(self.trade_type, TradeType):
            raise ConfigurationError(f"unknown trade type {self.trade_type!r}")
        if self.input_amount.currency != self.route.input_currency:
            raise InvalidTradeError("input amount currency does not match the route input")
        if self.output_amount.currency != self.route.output_currency:
            raise InvalidTradeError("output amount currency does not match the route output")

    @property
    def protocol(self):
        return self.route.protocol

    @property
    def nominal_amount(self) -> CurrencyAmount:
        """The side that is quoted rather than fixed."""
        if self.trade_type == TradeType.EXACT_INPUT:
            return self.output_amount
        return self.input_amount


@dataclass(frozen=True)
class RouterTrade:
    """
    Several routes executed atomically, grouped by protocol variant.

    Every route shares one trade type and the same overall input and
    output currencies; construction fails otherwise.
    """

    v2_routes: Tuple[RouteTrade, ...] = ()
    v3_routes: Tuple[RouteTrade, ...] = ()
    mixed_routes: Tuple[RouteTrade, ...] = ()

    def __post_init__(self):
        for name in ("v2_routes", "v3_routes", "mixed_routes"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        self.validate()

    @classmethod
    def from_route_trades(cls, trades) -> "RouterTrade":
        """Sort a flat list of route trades into their protocol groups."""
        groups = {protocol: [] for protocol in Protocol}
        for t in trades:
            groups[t.route.protocol].append(t)
        return cls(
            v2_routes=tuple(groups[Protocol.V2]),
            v3_routes=tuple(groups[Protocol.V3]),
            mixed_routes=tuple(groups[Protocol.MIXED]),
        )

    @property
    def routes(self) -> Tuple[RouteTrade, ...]:
        return self.v2_routes + self.v3_routes + self.mixed_routes

    @property
    def trade_type(self) -> TradeType:
        return self.routes[0].trade_type

    @property
    def input_currency(self) -> Currency:
        return self.routes[0].route.input_currency

    @property
    def output_currency(self) -> Currency:
        return self.routes[0].route.output_currency

    def validate(self) -> None:
        groups = (
            (self.v2_routes, V2Route),
            (self.v3_routes, V3Route),
            (self.mixed_routes, MixedRoute),
        )
        for trades, route_cls in groups:
            for t in trades:
                if type(t.route) is not route_cls:
                    raise ConfigurationError(
                        f"{type(t.route).__name__} placed in the {route_cls.protocol.value} group"
                    )

        routes = self.routes
        if not routes:
            raise InvalidTradeError("RouterTrade needs at least one route")

        first = routes[0]
        for t in routes[1:]:
            if t.trade_type != first.trade_type:
                raise ConfigurationError(
                    f"mixed trade types: {first.trade_type.value} and {t.trade_type.value}"
                )
            if t.route.input_currency != first.route.input_currency:
                raise ConfigurationError(
                    f"routes start at different currencies: {first.route.input_currency} and {t.route.input_currency}"
                )
            if t.route.output_currency != first.route.output_currency:
                raise ConfigurationError(
                    f"routes end at different currencies: {first.route.output_currency} and {t.route.output_currency}"
                )
