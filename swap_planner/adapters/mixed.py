from typing import List

from ..core.domain.entities.command import RouterCommand
from ..core.domain.entities.plan import PlannedRoute
from ..core.domain.entities.pools import V2Pair, V3Pool
from ..core.domain.enums.trade_enums import CommandType, Protocol, TradeType
from ..core.exceptions import UnsupportedProtocolError
from .abi import encode_command
from .base import EncodeContext, ProtocolEncoder
from .uniswap_v2 import v2_path
from .uniswap_v3 import encode_v3_path


class MixedRouteEncoder(ProtocolEncoder):
    """
    Walks a mixed route leg by leg, emitting one single-hop exact-input
    command per leg in route order.

    Intermediate legs send their output to the router with no minimum, and
    the next leg spends the router's whole balance of it. Only the first
    leg may pull from the caller and only the last leg carries the route's
    minimum output and the real recipient.
    """

    protocol = Protocol.MIXED

    def encode_route(self, planned: PlannedRoute, ctx: EncodeContext) -> List[RouterCommand]:
        if planned.trade_type != TradeType.EXACT_INPUT:
            raise UnsupportedProtocolError("mixed routes only support exact input")

        legs = planned.route.legs
        for leg in legs:
            if not isinstance(leg, (V2Pair, V3Pool)):
                raise UnsupportedProtocolError(
                    f"mixed route leg {type(leg).__name__} has no router command", leg=leg
                )

        path = planned.route.path
        last = len(legs) - 1
        commands: List[RouterCommand] = []
        for i, leg in enumerate(legs):
            recipient = ctx.recipient if i == last else self.config.address_this
            amount_in = planned.amount_in if i == 0 else self.config.contract_balance
            min_out = planned.amount_out if i == last else 0
            payer_is_user = ctx.payer_is_user and i == 0
            hop = path[i:i + 2]

            if isinstance(leg, V3Pool):
                commands.append(encode_command(
                    CommandType.V3_SWAP_EXACT_IN,
                    [recipient, amount_in, min_out, encode_v3_path(hop, [leg.fee]), payer_is_user],
                ))
            else:
                commands.append(encode_command(
                    CommandType.V2_SWAP_EXACT_IN,
                    [recipient, amount_in, min_out, v2_path(hop), payer_is_user],
                ))
        return commands
