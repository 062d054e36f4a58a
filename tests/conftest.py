import pytest

from swap_planner import CommandParser, SwapRouter

from factories import router_config


@pytest.fixture
def config():
    return router_config()


@pytest.fixture
def router(config):
    return SwapRouter(config)


@pytest.fixture
def parser(config):
    return CommandParser(config)
