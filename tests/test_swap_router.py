"""End-to-end planning: RouterTrade + SwapOptions -> execute calldata and value."""

from fractions import Fraction

import pytest
from eth_utils import function_signature_to_4byte_selector

from swap_planner import (
    CommandType,
    ConfigurationError,
    InvalidTradeError,
    RouterTrade,
    SwapOptions,
    SwapRouter,
    TradeType,
    UnsupportedProtocolError,
    ValidationError,
    swap_call_parameters,
)
from swap_planner.core.domain.constants import ADDRESS_THIS, CONTRACT_BALANCE, MSG_SENDER, NATIVE_ADDRESS

from factories import (
    DAI,
    ETHER,
    RECIPIENT,
    USDC,
    USDC_DAI_V2,
    USDC_DAI_V3,
    USDC_PER_ETH,
    WETH_USDC_V2,
    WETH_USDC_V3,
    WETH_USDC_V3_LOW_FEE,
    build_trade,
    ether,
    mixed,
    swap_options,
    usdc,
    v2,
    v3,
)

C = CommandType


def commands(parser, params):
    return parser.parse(params.calldata).command_types


class TestV2:
    def test_exact_input_eth_for_usdc(self, router, parser):
        trade = build_trade(v2([WETH_USDC_V2], ETHER, USDC, ether(1), USDC_PER_ETH))
        params = router.swap_call_parameters(trade, swap_options())

        assert params.value == ether(1)
        parsed = parser.parse(params.calldata)
        assert parsed.command_types == (C.WRAP_ETH, C.V2_SWAP_EXACT_IN, C.UNWRAP_WETH)
        wrap, swap, refund = parsed.commands
        assert wrap.args == (ADDRESS_THIS, ether(1))
        assert swap.args[0] == RECIPIENT
        assert swap.args[1] == ether(1)
        assert swap.args[4] is False
        assert refund.args == (RECIPIENT, 0)

    def test_exact_input_eth_for_dai_two_hops(self, router):
        trade = build_trade(v2([WETH_USDC_V2, USDC_DAI_V2], ETHER, DAI, ether(1), 1_200 * 10**18))
        assert router.swap_call_parameters(trade, swap_options()).value == ether(1)

    def test_exact_input_usdc_for_eth(self, router, parser):
        trade = build_trade(v2([WETH_USDC_V2], USDC, ETHER, usdc(1_000), ether(1)))
        params = router.swap_call_parameters(trade, swap_options())

        assert params.value == 0
        parsed = parser.parse(params.calldata)
        assert parsed.command_types == (C.V2_SWAP_EXACT_IN, C.UNWRAP_WETH, C.SWEEP)
        swap, unwrap, sweep = parsed.commands
        min_out = ether(1) * 95 // 100
        assert swap.args[0] == ADDRESS_THIS
        assert swap.args[2] == min_out
        assert swap.args[4] is True
        assert unwrap.args == (ADDRESS_THIS, min_out)
        assert sweep.args == (NATIVE_ADDRESS, RECIPIENT, min_out)

    def test_exact_input_dai_for_eth_two_hops(self, router):
        trade = build_trade(v2([USDC_DAI_V2, WETH_USDC_V2], DAI, ETHER, 10 * 10**18, 8 * 10**15))
        assert router.swap_call_parameters(trade, swap_options()).value == 0

    def test_exact_output_eth_for_usdc(self, router, parser):
        trade = build_trade(
            v2([WETH_USDC_V2], ETHER, USDC, ether(1), usdc(1_000), TradeType.EXACT_OUTPUT)
        )
        params = router.swap_call_parameters(trade, swap_options())

        assert params.value == ether(1) * 105 // 100
        assert commands(parser, params) == (C.WRAP_ETH, C.V2_SWAP_EXACT_OUT, C.UNWRAP_WETH)

    def test_exact_output_usdc_for_eth(self, router, parser):
        trade = build_trade(
            v2([WETH_USDC_V2], USDC, ETHER, usdc(1_300), ether(1), TradeType.EXACT_OUTPUT)
        )
        params = router.swap_call_parameters(trade, swap_options())

        assert params.value == 0
        parsed = parser.parse(params.calldata)
        assert parsed.command_types == (C.V2_SWAP_EXACT_OUT, C.UNWRAP_WETH, C.SWEEP)
        assert parsed.commands[1].args == (ADDRESS_THIS, ether(1))
        assert parsed.commands[2].args == (NATIVE_ADDRESS, RECIPIENT, ether(1))


class TestV3:
    def test_exact_input_eth_for_usdc(self, router, parser):
        trade = build_trade(v3([WETH_USDC_V3], ETHER, USDC, ether(1), USDC_PER_ETH))
        params = router.swap_call_parameters(trade, swap_options())
        assert params.value == ether(1)
        assert commands(parser, params) == (C.WRAP_ETH, C.V3_SWAP_EXACT_IN, C.UNWRAP_WETH)

    def test_exact_input_usdc_for_eth(self, router, parser):
        trade = build_trade(v3([WETH_USDC_V3], USDC, ETHER, usdc(1_000), ether(1)))
        params = router.swap_call_parameters(trade, swap_options())
        assert params.value == 0
        assert commands(parser, params) == (C.V3_SWAP_EXACT_IN, C.UNWRAP_WETH, C.SWEEP)

    def test_exact_input_eth_for_dai_two_hops(self, router):
        trade = build_trade(v3([WETH_USDC_V3, USDC_DAI_V3], ETHER, DAI, ether(1), 1_200 * 10**18))
        assert router.swap_call_parameters(trade, swap_options()).value == ether(1)

    def test_exact_output_eth_for_usdc(self, router):
        trade = build_trade(
            v3([WETH_USDC_V3], ETHER, USDC, ether(1), usdc(1_000), TradeType.EXACT_OUTPUT)
        )
        assert router.swap_call_parameters(trade, swap_options()).value != 0

    def test_exact_output_eth_for_dai_two_hops(self, router):
        trade = build_trade(
            v3([WETH_USDC_V3, USDC_DAI_V3], ETHER, DAI, ether(1), 1_000 * 10**18, TradeType.EXACT_OUTPUT)
        )
        assert router.swap_call_parameters(trade, swap_options()).value == ether(1) * 105 // 100

    @pytest.mark.parametrize("legs,cin", [
        ([WETH_USDC_V3], USDC),
        ([USDC_DAI_V3, WETH_USDC_V3], DAI),
    ])
    def test_exact_output_for_eth(self, router, legs, cin):
        trade = build_trade(v3(legs, cin, ETHER, 10**21, ether(1), TradeType.EXACT_OUTPUT))
        assert router.swap_call_parameters(trade, swap_options()).value == 0


class TestMixed:
    @pytest.mark.parametrize("legs", [
        [WETH_USDC_V3, USDC_DAI_V2],
        [WETH_USDC_V2, USDC_DAI_V3],
        [WETH_USDC_V2, USDC_DAI_V2],
        [WETH_USDC_V3, USDC_DAI_V3],
    ])
    def test_exact_input_eth_for_dai(self, router, legs):
        trade = build_trade(mixed(legs, ETHER, DAI, ether(1), 1_200 * 10**18))
        assert router.swap_call_parameters(trade, swap_options()).value == ether(1)

    def test_interleaved_commands(self, router, parser):
        trade = build_trade(mixed([WETH_USDC_V3, USDC_DAI_V2], ETHER, DAI, ether(1), 1_200 * 10**18))
        parsed = parser.parse(router.swap_call_parameters(trade, swap_options()).calldata)

        assert parsed.command_types == (C.WRAP_ETH, C.V3_SWAP_EXACT_IN, C.V2_SWAP_EXACT_IN, C.UNWRAP_WETH)
        first, second = parsed.commands[1], parsed.commands[2]
        assert first.args[0] == ADDRESS_THIS
        assert second.args[0] == RECIPIENT
        assert second.args[1] == CONTRACT_BALANCE

    def test_exact_input_dai_for_eth(self, router, parser):
        trade = build_trade(mixed([USDC_DAI_V2, WETH_USDC_V3], DAI, ETHER, 1_000 * 10**18, 8 * 10**17))
        params = router.swap_call_parameters(trade, swap_options())
        assert params.value == 0
        parsed = parser.parse(params.calldata)
        assert parsed.command_types == (C.V2_SWAP_EXACT_IN, C.V3_SWAP_EXACT_IN, C.UNWRAP_WETH, C.SWEEP)
        # the last leg delivers to the router so it can unwrap
        assert parsed.commands[1].args[0] == ADDRESS_THIS


class TestMultiRoute:
    def test_two_routes_eth_to_usdc(self, router, parser):
        trade = build_trade(
            v2([WETH_USDC_V2], ETHER, USDC, ether(1), USDC_PER_ETH),
            v3([WETH_USDC_V3], ETHER, USDC, ether(1), USDC_PER_ETH),
        )
        params = router.swap_call_parameters(trade, swap_options())
        assert params.value == ether(2)
        parsed = parser.parse(params.calldata)
        assert parsed.command_types == (C.WRAP_ETH, C.V2_SWAP_EXACT_IN, C.V3_SWAP_EXACT_IN, C.UNWRAP_WETH)
        assert parsed.commands[0].args == (ADDRESS_THIS, ether(2))

    def test_three_routes_eth_to_usdc(self, router, parser):
        trade = build_trade(
            v2([WETH_USDC_V2], ETHER, USDC, ether(1), USDC_PER_ETH),
            v3([WETH_USDC_V3], ETHER, USDC, ether(1), USDC_PER_ETH),
            v3([WETH_USDC_V3_LOW_FEE], ETHER, USDC, ether(1), USDC_PER_ETH),
        )
        params = router.swap_call_parameters(trade, swap_options())
        assert params.value == ether(3)
        # one wrap for all routes
        assert commands(parser, params).count(C.WRAP_ETH) == 1

    def test_exact_output_value_sums_route_maximums(self, router):
        trade = build_trade(
            v2([WETH_USDC_V2], ETHER, USDC, 19, usdc(1), TradeType.EXACT_OUTPUT),
            v3([WETH_USDC_V3], ETHER, USDC, 21, usdc(1), TradeType.EXACT_OUTPUT),
        )
        assert router.swap_call_parameters(trade, swap_options()).value == 20 + 23

    def test_native_output_unwraps_once(self, router, parser):
        trade = build_trade(
            v2([WETH_USDC_V2], USDC, ETHER, usdc(1_000), 19),
            v3([WETH_USDC_V3], USDC, ETHER, usdc(1_000), 21),
        )
        parsed = parser.parse(router.swap_call_parameters(trade, swap_options()).calldata)
        assert parsed.command_types == (C.V2_SWAP_EXACT_IN, C.V3_SWAP_EXACT_IN, C.UNWRAP_WETH, C.SWEEP)
        assert parsed.commands[2].args == (ADDRESS_THIS, 39)
        assert parsed.commands[3].args == (NATIVE_ADDRESS, RECIPIENT, 39)


class TestValueProperties:
    def test_token_input_never_attaches_value(self, router):
        trade = build_trade(v3([USDC_DAI_V3], USDC, DAI, usdc(1_000), 999 * 10**18))
        params = router.swap_call_parameters(trade, swap_options())
        assert params.value == 0

    def test_token_to_token_goes_straight_to_recipient(self, router, parser):
        trade = build_trade(v3([USDC_DAI_V3], USDC, DAI, usdc(1_000), 999 * 10**18))
        parsed = parser.parse(router.swap_call_parameters(trade, swap_options()).calldata)
        assert parsed.command_types == (C.V3_SWAP_EXACT_IN,)
        assert parsed.commands[0].args[0] == RECIPIENT

    def test_exact_output_without_slippage_attaches_nominal_input(self, router):
        trade = build_trade(
            v3([WETH_USDC_V3], ETHER, USDC, ether(1), usdc(1_000), TradeType.EXACT_OUTPUT)
        )
        params = router.swap_call_parameters(trade, swap_options(slippage_tolerance=Fraction(0)))
        assert params.value == ether(1)

    def test_exact_output_with_slippage_attaches_more(self, router):
        trade = build_trade(
            v3([WETH_USDC_V3], ETHER, USDC, 3, usdc(1_000), TradeType.EXACT_OUTPUT)
        )
        params = router.swap_call_parameters(trade, swap_options(slippage_tolerance=Fraction(1, 10**6)))
        assert params.value == 4


class TestDeterminism:
    def test_same_input_same_bytes(self, router):
        trade = build_trade(
            v2([WETH_USDC_V2], ETHER, USDC, ether(1), USDC_PER_ETH),
            mixed([WETH_USDC_V3_LOW_FEE], ETHER, USDC, ether(1), USDC_PER_ETH),
        )
        first = router.swap_call_parameters(trade, swap_options())
        second = router.swap_call_parameters(trade, swap_options())
        assert first == second
        assert bytes(first.calldata) == bytes(second.calldata)

    def test_independent_routers_agree(self, config):
        trade = build_trade(v3([WETH_USDC_V3, USDC_DAI_V3], ETHER, DAI, ether(1), 1_200 * 10**18))
        a = SwapRouter(config).swap_call_parameters(trade, swap_options())
        b = swap_call_parameters(trade, swap_options(), config)
        assert a == b

    def test_route_group_order_does_not_depend_on_input_order(self, router):
        x = v2([WETH_USDC_V2], ETHER, USDC, ether(1), USDC_PER_ETH)
        y = v3([WETH_USDC_V3], ETHER, USDC, ether(1), USDC_PER_ETH)
        a = router.swap_call_parameters(build_trade(x, y), swap_options())
        b = router.swap_call_parameters(build_trade(y, x), swap_options())
        assert a == b


class TestEnvelope:
    def test_selector_without_deadline(self, router, parser):
        trade = build_trade(v2([WETH_USDC_V2], ETHER, USDC, ether(1), USDC_PER_ETH))
        params = router.swap_call_parameters(trade, swap_options())
        assert params.calldata[:4] == function_signature_to_4byte_selector("execute(bytes,bytes[])")
        assert parser.parse(params.calldata).deadline is None

    def test_selector_with_deadline(self, router, parser):
        trade = build_trade(v2([WETH_USDC_V2], ETHER, USDC, ether(1), USDC_PER_ETH))
        params = router.swap_call_parameters(trade, swap_options(deadline=1_700_000_000))
        assert params.calldata[:4] == function_signature_to_4byte_selector("execute(bytes,bytes[],uint256)")
        assert parser.parse(params.calldata).deadline == 1_700_000_000

    def test_to_dict_is_hex(self, router):
        trade = build_trade(v2([WETH_USDC_V2], ETHER, USDC, ether(1), USDC_PER_ETH))
        out = router.swap_call_parameters(trade, swap_options()).to_dict()
        assert out["value"] == hex(ether(1))
        selector = function_signature_to_4byte_selector("execute(bytes,bytes[])")
        assert out["calldata"].startswith("0x" + selector.hex())


class TestErrors:
    def test_mixed_trade_types_fail_before_any_output(self, router):
        with pytest.raises(ConfigurationError):
            trade = build_trade(
                v2([WETH_USDC_V2], ETHER, USDC, ether(1), USDC_PER_ETH),
                v3([WETH_USDC_V3], ETHER, USDC, ether(1), USDC_PER_ETH, TradeType.EXACT_OUTPUT),
            )
            router.swap_call_parameters(trade, swap_options())

    def test_empty_trade(self):
        with pytest.raises(InvalidTradeError):
            RouterTrade()

    def test_slippage_out_of_range(self, router):
        trade = build_trade(v2([WETH_USDC_V2], ETHER, USDC, ether(1), USDC_PER_ETH))
        with pytest.raises(ValidationError):
            router.swap_call_parameters(trade, swap_options(slippage_tolerance=Fraction(1)))

    def test_mixed_exact_output(self, router):
        trade = build_trade(
            mixed([WETH_USDC_V3, USDC_DAI_V2], ETHER, DAI, ether(1), 10**21, TradeType.EXACT_OUTPUT)
        )
        with pytest.raises(UnsupportedProtocolError):
            router.swap_call_parameters(trade, swap_options())


def test_default_recipient_is_the_caller(router, parser):
    trade = build_trade(v3([USDC_DAI_V3], USDC, DAI, usdc(1_000), 999 * 10**18))
    params = router.swap_call_parameters(trade, SwapOptions(slippage_tolerance=Fraction(1, 100)))
    assert parser.parse(params.calldata).commands[0].args[0] == MSG_SENDER
