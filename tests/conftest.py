" generic fixtures "
import logging
from unittest.mock import Mock

import pytest

from pointsdispatch.context import CommandContext
from pointsdispatch.messages import LocaleMessenger
from testtools import RecordingSender


def pytest_configure():
    "Runs once before all"
    from pointsdispatch.logging_setup import init_logger

    init_logger(force_debug=True)


@pytest.fixture
def test_logger():
    "A logger whose calls can be inspected"
    return Mock(spec=logging.Logger)


@pytest.fixture
def context(test_logger):
    "A context with a mocked messenger"
    return CommandContext(messenger=Mock(), log=test_logger, root_command="points")


@pytest.fixture
def real_context(test_logger):
    "A context with an uncolored LocaleMessenger"
    return CommandContext(messenger=LocaleMessenger(logger=test_logger), log=test_logger, root_command="points")


@pytest.fixture
def sender():
    "A sender holding every permission"
    return RecordingSender()


@pytest.fixture
def guest():
    "A sender without any permission"
    return RecordingSender("guest", permissions=[])
