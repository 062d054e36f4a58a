from typing import List, Sequence

from ..core.domain.entities.command import RouterCommand
from ..core.domain.entities.currency import Token
from ..core.domain.entities.plan import PlannedRoute
from ..core.domain.enums.trade_enums import CommandType, Protocol, TradeType
from .abi import encode_command
from .base import EncodeContext, ProtocolEncoder


def v2_path(tokens: Sequence[Token]) -> List[str]:
    """V2 swaps take the plain token path; the router derives each pair from it."""
    return [t.address for t in tokens]


class V2RouteEncoder(ProtocolEncoder):
    """A whole V2 route is a single swap command over its token path."""

    protocol = Protocol.V2

    def encode_route(self, planned: PlannedRoute, ctx: EncodeContext) -> List[RouterCommand]:
        path = v2_path(planned.route.path)
        if planned.trade_type == TradeType.EXACT_INPUT:
            return [encode_command(
                CommandType.V2_SWAP_EXACT_IN,
                [ctx.recipient, planned.amount_in, planned.amount_out, path, ctx.payer_is_user],
            )]
        return [encode_command(
            CommandType.V2_SWAP_EXACT_OUT,
            [ctx.recipient, planned.amount_out, planned.amount_in, path, ctx.payer_is_user],
        )]
