from fixedkeys.cursor import KeyCursor
from fixedkeys.datatypes import FixedKeyMap, setter
from fixedkeys.errors import FixedKeyMapError, InvalidArgumentError, KeyNotFoundError
from fixedkeys.log import get_logger, setup_logging

__version__ = '0.1.0'

__all__ = [
    'FixedKeyMap',
    'FixedKeyMapError',
    'InvalidArgumentError',
    'KeyCursor',
    'KeyNotFoundError',
    'get_logger',
    'setter',
    'setup_logging',
]
