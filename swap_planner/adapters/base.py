from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, List

from ..config import RouterConfig
from ..core.domain.entities.command import RouterCommand
from ..core.domain.entities.plan import PlannedRoute
from ..core.domain.enums.trade_enums import Protocol
from ..core.exceptions import UnsupportedProtocolError


@dataclass(frozen=True)
class EncodeContext:
    """
    Per-route settings decided by the planner, not by the encoder.

    recipient:     who receives the output of the route's last leg
                   (the router itself when it must custody the output)
    payer_is_user: True when the first leg pulls funds from the caller
                   through Permit2, False when the router already holds them
    """

    recipient: str
    payer_is_user: bool


class ProtocolEncoder(ABC):
    """
    Turns one planned route into router commands for its venue generation.
    One instance per deployment config; encoders keep no state between calls.
    """

    protocol: ClassVar[Protocol]

    def __init__(self, config: RouterConfig):
        self.config = config

    def encode(self, planned: PlannedRoute, ctx: EncodeContext) -> List[RouterCommand]:
        if planned.protocol != self.protocol:
            raise UnsupportedProtocolError(
                f"{type(self).__name__} cannot encode a {planned.protocol.value} route"
            )
        return self.encode_route(planned, ctx)

    @abstractmethod
    def encode_route(self, planned: PlannedRoute, ctx: EncodeContext) -> List[RouterCommand]:
        """Return the ordered commands executing this route."""
        ...
