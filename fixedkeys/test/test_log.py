import io
import logging

import pytest

from fixedkeys import FixedKeyMap, get_logger, setup_logging


@pytest.fixture
def package_logger():
    logger = get_logger()
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def test_setup_logging_writes_to_stream(package_logger):
    stream = io.StringIO()

    setup_logging('DEBUG', stream)
    FixedKeyMap(['a', ''])

    lines = stream.getvalue().splitlines()
    assert lines[0].startswith("DEBUG :: ")
    assert lines[0].endswith(": Discarding invalid key '' for FixedKeyMap")


def test_setup_logging_replaces_its_handler(package_logger):
    setup_logging('INFO', io.StringIO())
    setup_logging('WARNING', io.StringIO())

    ours = [h for h in package_logger.handlers if getattr(h, '_fixedkeys', False)]
    assert len(ours) == 1
    assert package_logger.level == logging.WARNING


def test_construction_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger='fixedkeys'):
        FixedKeyMap(['a', None, 'b'])

    messages = [record.getMessage() for record in caplog.records]
    assert "Discarding invalid key None for FixedKeyMap" in messages
    assert "Created FixedKeyMap with keys ['a', 'b']" in messages
