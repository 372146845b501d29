import logging
import sys

LOG_FORMAT = '%(levelname)s :: %(asctime)s : %(message)s'

logger = logging.getLogger('fixedkeys')


def setup_logging(level='INFO', stream=None):
    """ Attach a stream handler to the package logger.

    Handlers added by an earlier call are replaced, so calling this twice
    does not duplicate records.
    """
    for handler in list(logger.handlers):
        if getattr(handler, '_fixedkeys', False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._fixedkeys = True
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def get_logger():
    return logger
