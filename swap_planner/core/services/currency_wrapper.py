import logging
from typing import List, Optional, Tuple

from ...adapters.abi import encode_command
from ...config import RouterConfig
from ..domain.entities.command import RouterCommand
from ..domain.entities.plan import AggregatedTrade
from ..domain.enums.trade_enums import CommandType


class CurrencyWrapper:
    """
    Native asset handling for the whole trade, done once no matter how many
    routes start or end in it.

    - native input:  wrap the summed route inputs into the router up front,
                     attach that sum as value, refund leftovers at the end
    - native output: routes pay the router, which unwraps the summed outputs
    """

    def __init__(self, config: RouterConfig, logger: Optional[logging.Logger] = None):
        self.config = config
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    @staticmethod
    def input_is_native(aggregated: AggregatedTrade) -> bool:
        return aggregated.input_currency.is_native

    @staticmethod
    def output_is_native(aggregated: AggregatedTrade) -> bool:
        return aggregated.output_currency.is_native

    def wrap(self, aggregated: AggregatedTrade) -> Tuple[List[RouterCommand], int]:
        """
        :return: (commands to run before the routes, native value to attach).
                 The amount is the exact input for EXACT_INPUT routes and
                 the per-route maximum input for EXACT_OUTPUT routes.
        """
        if not self.input_is_native(aggregated):
            return [], 0
        value = aggregated.total_amount_in
        self._logger.debug("Wrapping %s native for %d routes", value, len(aggregated.routes))
        return [encode_command(CommandType.WRAP_ETH, [self.config.address_this, value])], value

    def unwrap(self, aggregated: AggregatedTrade) -> List[RouterCommand]:
        """Unwrap everything the routes delivered; the sweep that follows pays the recipient."""
        if not self.output_is_native(aggregated):
            return []
        return [encode_command(
            CommandType.UNWRAP_WETH,
            [self.config.address_this, aggregated.total_amount_out],
        )]

    def refund(self, aggregated: AggregatedTrade, recipient: str) -> List[RouterCommand]:
        """Return any wrapped input the routes did not consume, as native."""
        if not self.input_is_native(aggregated):
            return []
        return [encode_command(CommandType.UNWRAP_WETH, [recipient, 0])]
