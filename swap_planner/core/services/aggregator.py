import logging
from fractions import Fraction
from typing import Optional

from ..domain.constants import CONTRACT_BALANCE, U256_MAX
from ..domain.entities.plan import AggregatedTrade, PlannedRoute
from ..domain.entities.trade import RouterTrade
from ..domain.enums.trade_enums import TradeType
from ..exceptions import ValidationError
from .slippage import AmountSlippageCalculator


class RouteAggregator:
    """
    Validates a RouterTrade and turns each of its routes into a PlannedRoute
    carrying its own slippage bounds.

    Protection is computed per route. The aggregate share of each route is
    reported for diagnostics only and never feeds into the bounds.
    """

    def __init__(
        self,
        slippage: Optional[AmountSlippageCalculator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._slippage = slippage or AmountSlippageCalculator()
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    def aggregate(self, trade: RouterTrade, slippage_tolerance: Fraction) -> AggregatedTrade:
        """
        :param trade: Routes grouped by protocol.
        :param slippage_tolerance: Accepted deviation in [0, 1).
        :return: AggregatedTrade with routes in V2, V3, mixed order.
        :raises InvalidTradeError: no routes.
        :raises ConfigurationError: routes disagree on trade type or currencies.
        :raises ValidationError: tolerance out of range, or an amount or total
                                 that does not fit a uint256 router argument.
        """
        trade.validate()
        self._slippage.validate_tolerance(slippage_tolerance)

        route_trades = trade.routes
        if trade.trade_type == TradeType.EXACT_INPUT:
            fixed = [t.input_amount.raw for t in route_trades]
        else:
            fixed = [t.output_amount.raw for t in route_trades]
        total = sum(fixed)

        planned = []
        for t, fixed_amount in zip(route_trades, fixed):
            amount_in, amount_out = self._slippage.bounds(t, slippage_tolerance)
            planned.append(
                PlannedRoute(
                    protocol=t.route.protocol,
                    trade=t,
                    amount_in=amount_in,
                    amount_out=amount_out,
                    share=Fraction(fixed_amount, total) if total else Fraction(0),
                )
            )

        self._check_amounts(planned)

        self._logger.debug(
            "Aggregated %d routes: type=%s in=%s out=%s v2=%d v3=%d mixed=%d",
            len(planned), trade.trade_type.value, trade.input_currency, trade.output_currency,
            len(trade.v2_routes), len(trade.v3_routes), len(trade.mixed_routes),
        )
        return AggregatedTrade(
            trade_type=trade.trade_type,
            input_currency=trade.input_currency,
            output_currency=trade.output_currency,
            routes=tuple(planned),
        )

    @staticmethod
    def _check_amounts(planned) -> None:
        """Every amount and total the commands carry must fit in a uint256."""
        for p in planned:
            if p.amount_in > U256_MAX or p.amount_out > U256_MAX:
                raise ValidationError(f"route amounts in={p.amount_in} out={p.amount_out} exceed uint256")
            if p.amount_in == CONTRACT_BALANCE:
                raise ValidationError("an input of 2**255 would be read as the router's whole balance")
        for name, total in (
            ("input", sum(p.amount_in for p in planned)),
            ("output", sum(p.amount_out for p in planned)),
        ):
            if total > U256_MAX:
                raise ValidationError(f"total {name} {total} exceeds uint256")
