import logging
from typing import List, Optional

from ...adapters.abi import encode_command
from ...config import RouterConfig
from ..domain.entities.command import RouterCommand
from ..domain.entities.options import SwapOptions
from ..domain.entities.plan import AggregatedTrade
from ..domain.enums.trade_enums import CommandType
from ..exceptions import ValidationError


class PermitInjector:
    """
    Emits the Permit2 approval that lets the router pull the caller's input
    token inside the same transaction.

    The signature is not checked here; a bad one only fails on-chain.
    """

    def __init__(self, config: RouterConfig, logger: Optional[logging.Logger] = None):
        self.config = config
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    def inject(self, aggregated: AggregatedTrade, options: SwapOptions) -> List[RouterCommand]:
        permit = options.input_token_permit
        if permit is None:
            return []

        input_currency = aggregated.input_currency
        if input_currency.is_native:
            raise ValidationError("a token permit was supplied but the trade spends the native asset")
        if permit.details.token != input_currency.address:
            raise ValidationError(
                f"permit is for {permit.details.token}, trade input is {input_currency.address}"
            )
        if self.config.router_address and permit.spender != self.config.router_address:
            raise ValidationError(
                f"permit spender {permit.spender} is not the router {self.config.router_address}"
            )

        details = permit.details
        permit_single = (
            (details.token, details.amount, details.expiration, details.nonce),
            permit.spender,
            permit.sig_deadline,
        )
        self._logger.debug("Permit2 permit for %s amount=%s nonce=%s", details.token, details.amount, details.nonce)
        return [encode_command(CommandType.PERMIT2_PERMIT, [permit_single, permit.signature])]
