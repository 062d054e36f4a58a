import logging
from typing import List, Optional

from ...adapters.abi import encode_command
from ...config import RouterConfig
from ..domain.constants import BIPS_BASE
from ..domain.entities.command import RouterCommand
from ..domain.entities.options import FeeOptions, SwapOptions
from ..domain.entities.plan import AggregatedTrade
from ..domain.enums.trade_enums import CommandType, TradeType
from ..exceptions import ValidationError


class OutputSweeper:
    """
    Pays out whatever the router holds at the end of the routes: an optional
    interface fee portion, then the rest to the recipient.

    Only used when the router custodies the output (native output or a fee).
    """

    def __init__(self, config: RouterConfig, logger: Optional[logging.Logger] = None):
        self.config = config
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    @staticmethod
    def fee_bips(fee: FeeOptions) -> int:
        bips = fee.fee * BIPS_BASE
        if bips.denominator != 1 or not 0 < bips < BIPS_BASE:
            raise ValidationError(f"fee {fee.fee} must be a whole number of bips in (0, {BIPS_BASE})")
        return int(bips)

    def validate(self, aggregated: AggregatedTrade, options: SwapOptions) -> None:
        if options.fee is None:
            return
        if aggregated.trade_type != TradeType.EXACT_INPUT:
            raise ValidationError("an interface fee is only supported on exact input trades")
        self.fee_bips(options.fee)

    def must_custody(self, aggregated: AggregatedTrade, options: SwapOptions) -> bool:
        return aggregated.output_currency.is_native or options.fee is not None

    def settle(self, aggregated: AggregatedTrade, options: SwapOptions) -> List[RouterCommand]:
        if not self.must_custody(aggregated, options):
            return []
        output = aggregated.output_currency
        token = self.config.native_address if output.is_native else output.address
        minimum = aggregated.total_amount_out

        commands: List[RouterCommand] = []
        if options.fee is not None:
            bips = self.fee_bips(options.fee)
            commands.append(encode_command(CommandType.PAY_PORTION, [token, options.fee.recipient, bips]))
            minimum = minimum * (BIPS_BASE - bips) // BIPS_BASE
            self._logger.debug("Fee portion %d bips of %s to %s", bips, output, options.fee.recipient)

        commands.append(encode_command(CommandType.SWEEP, [token, options.recipient, minimum]))
        return commands
