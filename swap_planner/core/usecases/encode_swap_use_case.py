import logging
from typing import List, Optional

from ...adapters.base import EncodeContext
from ...adapters.registry import encoder_for
from ...config import RouterConfig, get_router_config
from ..domain.entities.command import RouterCommand
from ..domain.entities.method_parameters import MethodParameters
from ..domain.entities.options import SwapOptions
from ..domain.entities.trade import RouterTrade
from ..domain.enums.trade_enums import Protocol
from ..services.aggregator import RouteAggregator
from ..services.currency_wrapper import CurrencyWrapper
from ..services.multicall_composer import MulticallComposer
from ..services.output_sweeper import OutputSweeper
from ..services.permit_injector import PermitInjector


class SwapRouter:
    """
    Plans the router call for an already-routed trade.

    Pure and synchronous: the same (trade, options) always produce the same
    bytes, and every validation runs before any calldata is assembled.
    """

    def __init__(self, config: Optional[RouterConfig] = None, logger: Optional[logging.Logger] = None):
        """
        :param config: Router deployment (command codes, selectors, addresses).
                       Defaults to the one built from environment settings.
        :param logger: Optional logger.
        """
        self.config = config or get_router_config()
        self._logger = logger or logging.getLogger(self.__class__.__name__)
        self._aggregator = RouteAggregator()
        self._wrapper = CurrencyWrapper(self.config)
        self._permits = PermitInjector(self.config)
        self._sweeper = OutputSweeper(self.config)
        self._composer = MulticallComposer(self.config)
        self._encoders = {protocol: encoder_for(protocol, self.config) for protocol in Protocol}

    def swap_call_parameters(self, trade: RouterTrade, options: SwapOptions) -> MethodParameters:
        """
        Build calldata and value for executing `trade` with `options`.

        :raises ValidationError: slippage, fee or permit out of range.
        :raises ConfigurationError: routes disagree on trade type or currencies.
        :raises InvalidTradeError: no routes.
        :raises UnsupportedProtocolError: a route shape the router cannot express.
        """
        aggregated = self._aggregator.aggregate(trade, options.slippage_tolerance)
        self._sweeper.validate(aggregated, options)

        permit = self._permits.inject(aggregated, options)
        wrap, value = self._wrapper.wrap(aggregated)

        custody = self._sweeper.must_custody(aggregated, options)
        ctx = EncodeContext(
            recipient=self.config.address_this if custody else options.recipient,
            payer_is_user=not self._wrapper.input_is_native(aggregated),
        )
        routes: List[RouterCommand] = []
        for planned in aggregated.routes:
            routes.extend(self._encoders[planned.protocol].encode(planned, ctx))

        params = self._composer.compose(
            permit=permit,
            wrap=wrap,
            routes=routes,
            unwrap=self._wrapper.unwrap(aggregated),
            sweeps=self._sweeper.settle(aggregated, options),
            refund=self._wrapper.refund(aggregated, options.recipient),
            value=value,
            deadline=options.deadline,
        )
        self._logger.debug(
            "Planned %s swap: routes=%d commands=%d value=%s",
            aggregated.trade_type.value, len(aggregated.routes), len(routes), params.value,
        )
        return params


def swap_call_parameters(
    trade: RouterTrade,
    options: SwapOptions,
    config: Optional[RouterConfig] = None,
) -> MethodParameters:
    """Shortcut for SwapRouter(config).swap_call_parameters(trade, options)."""
    return SwapRouter(config).swap_call_parameters(trade, options)
