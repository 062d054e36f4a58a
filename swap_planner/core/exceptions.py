class SwapPlannerError(Exception):
    """Base class for every error raised while planning a router call."""


class ValidationError(SwapPlannerError):
    """
    Raised when an option is outside its accepted range
    (slippage tolerance, fee, permit target).
    """


class ConfigurationError(SwapPlannerError):
    """
    Raised when the routes of one RouterTrade disagree with each other:
    different trade types or different input/output currencies.
    """


class InvalidTradeError(SwapPlannerError):
    """Raised for structurally broken trades (no routes, empty or disconnected route)."""


class UnsupportedProtocolError(SwapPlannerError):
    """
    Raised when an encoder meets a leg or trade shape it cannot express
    with the router commands it knows about.
    """
    def __init__(self, msg: str, leg: object = None):
        super().__init__(msg)
        self.msg = msg
        self.leg = leg
