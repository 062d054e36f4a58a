from fractions import Fraction
from math import ceil, floor

from ..domain.entities.trade import RouteTrade
from ..domain.enums.trade_enums import TradeType
from ..exceptions import ValidationError


class AmountSlippageCalculator:
    """
    Stateless helper turning a quoted amount into the bound the router enforces.

    Rounding always favours the trader: the minimum output is rounded down
    and the maximum input rounded up, both on exact rationals.
    """

    @staticmethod
    def validate_tolerance(slippage_tolerance: Fraction) -> Fraction:
        if not isinstance(slippage_tolerance, Fraction):
            raise ValidationError(f"slippage tolerance must be a Fraction, got {type(slippage_tolerance).__name__}")
        if slippage_tolerance < 0 or slippage_tolerance >= 1:
            raise ValidationError(f"slippage tolerance {slippage_tolerance} outside [0, 1)")
        return slippage_tolerance

    def minimum_amount_out(self, amount_out: int, slippage_tolerance: Fraction) -> int:
        """amount_out - floor(amount_out * tolerance)"""
        tol = self.validate_tolerance(slippage_tolerance)
        return amount_out - floor(amount_out * tol)

    def maximum_amount_in(self, amount_in: int, slippage_tolerance: Fraction) -> int:
        """amount_in + ceil(amount_in * tolerance)"""
        tol = self.validate_tolerance(slippage_tolerance)
        return amount_in + ceil(amount_in * tol)

    def bounds(self, trade: RouteTrade, slippage_tolerance: Fraction) -> tuple[int, int]:
        """
        Return (amount_in, amount_out) as the router should receive them
        for this single route.

        :param trade: The route trade with its quoted amounts.
        :param slippage_tolerance: Accepted deviation in [0, 1).
        :return: (exact in, minimum out) for EXACT_INPUT,
                 (maximum in, exact out) for EXACT_OUTPUT.
        """
        if trade.trade_type == TradeType.EXACT_INPUT:
            return (
                trade.input_amount.raw,
                self.minimum_amount_out(trade.output_amount.raw, slippage_tolerance),
            )
        return (
            self.maximum_amount_in(trade.input_amount.raw, slippage_tolerance),
            trade.output_amount.raw,
        )
