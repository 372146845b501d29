""" Exceptions raised by fixed key containers.

Every error inherits from :class:`FixedKeyMapError` as well as the builtin it
specialises, so callers may catch either.
"""


class FixedKeyMapError(Exception):
    """ Base class for all fixedkeys errors. """


class InvalidArgumentError(FixedKeyMapError, ValueError):
    """ Raised when a container is constructed without a single valid key. """


class KeyNotFoundError(FixedKeyMapError, KeyError):
    """ Raised when a key outside the fixed key set is accessed.

    :param key:
        The offending key.
    :param owner:
        Name of the container class, used in the message.
    """
    def __init__(self, key, owner='FixedKeyMap'):
        super().__init__(key)
        self.key = key
        self.owner = owner

    def __str__(self):
        return f'{self.key} not found within {self.owner}.'
