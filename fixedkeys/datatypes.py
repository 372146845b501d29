import logging
from collections.abc import Mapping, MutableMapping
from types import SimpleNamespace

from fixedkeys.cursor import KeyCursor
from fixedkeys.errors import InvalidArgumentError, KeyNotFoundError

logger = logging.getLogger(__name__)


def setter(key):
    """ Declare the decorated method as the specialised setter for `key`.

    The method is called as ``method(self, value)`` whenever `key` is set and
    is responsible for storing the value itself, normally through
    :meth:`FixedKeyMap.store`.
    """
    def decorator(func):
        func._fixedkeys_setter = key
        return func
    return decorator


class FixedKeyMap(MutableMapping):
    """ A dictionary whose keys are fixed at construction.

    Features:

    * keys are non-empty strings given at construction, or in the KEYS class member
    * every key starts out at the null sentinel (`default`, None unless given)
    * values can be replaced, keys can never be added or removed
    * keys can be accessed as attributes
    * a key can have a specialised setter which decides what gets stored
    * order of items(), keys(), etc. is the order in which the keys were declared

    Limitation:

    * attribute access only reaches keys that don't clash with method names
      or with the internal _data, _default and _setters attributes; item
      access always works

    Usage:

        class UserData(FixedKeyMap):
            KEYS = ['id', 'user_name', 'is_admin']

            @setter('is_admin')
            def _set_is_admin(self, value):
                self.store('is_admin', bool(value))

        user = UserData()
        user.mass_update({'id': 1337, 'is_admin': 1, 'password': 'x'})
        assert user['is_admin'] is True

        frozen = FixedKeyMap.freeze({'id': 1337, 'user_name': 'H.Finch'})
        empty = FixedKeyMap.mirror({'id': 1337, 'user_name': 'H.Finch'})

    """
    KEYS = ()

    _class_setters = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # key -> method name, resolved per instance so plain overrides win
        table = dict(cls._class_setters)
        for name, attr in vars(cls).items():
            key = getattr(attr, '_fixedkeys_setter', None)
            if key is not None:
                table[key] = name
        cls._class_setters = table

    def __init__(self, keys=None, default=None, setters=None):
        """
        :param keys:
            An iterable of key names. Empty and non-string entries are
            discarded and duplicates collapse. Defaults to KEYS.
        :param default:
            The null sentinel every key starts at and returns to on reset.
        :param setters:
            A mapping of key to callable ``f(fkm, value)``, overriding any
            setter declared on the class for the same key.
        """
        if keys is None:
            keys = self.KEYS
        if isinstance(keys, str):
            raise InvalidArgumentError(f'Expected an iterable of keys, got the string {keys!r}.')

        data = {}
        for key in keys:
            if isinstance(key, str) and key:
                data.setdefault(key, default)
            else:
                logger.debug('Discarding invalid key %r for %s', key, self.__class__.__name__)

        if not data:
            raise InvalidArgumentError(f'Keys passed to {self.__class__.__name__!r} contain 0 valid elements.')

        table = {key: getattr(self.__class__, name) for key, name in self._class_setters.items()}
        if setters:
            table.update(setters)

        # keys may start with an underscore, so bypass __setattr__
        object.__setattr__(self, '_data', data)
        object.__setattr__(self, '_default', default)
        object.__setattr__(self, '_setters', table)

        logger.debug('Created %s with keys %s', self.__class__.__name__, list(data))

    @classmethod
    def freeze(cls, source: Mapping):
        """ Create a map with the keys and the values of `source`. """
        obj = cls(list(source.keys()))
        obj.mass_update(source)
        return obj

    @classmethod
    def mirror(cls, source: Mapping):
        """ Create a map with the keys of `source`, all values at the null sentinel. """
        return cls(list(source.keys()))

    def _check(self, key):
        if not self.has(key):
            raise KeyNotFoundError(key, self.__class__.__name__)

    def __getitem__(self, key):
        self._check(key)
        return self._data[key]

    def __setitem__(self, key, value):
        self._check(key)
        func = self._setters.get(key)
        if func is None:
            self._data[key] = value
        else:
            func(self, value)

    def __delitem__(self, key):
        raise TypeError(f'Objects of type {self.__class__.__name__!r} do not support deletion, use reset().')

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __contains__(self, key):
        return self.has(key)

    def _is_key(self, name):
        # _data is missing while copying or unpickling
        return name in self.__dict__.get('_data', ())

    def __getattr__(self, name):
        # only called when normal lookup fails
        if name.startswith('_') and not self._is_key(name):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyNotFoundError as e:
            raise AttributeError(str(e)) from e

    def __setattr__(self, name, value):
        if name.startswith('_') and not self._is_key(name):
            object.__setattr__(self, name, value)
        else:
            self[name] = value

    def __delattr__(self, name):
        if name.startswith('_') and not self._is_key(name):
            object.__delattr__(self, name)
        else:
            del self[name]

    def store(self, key, value):
        """ Store `value` under `key` verbatim, bypassing any specialised setter. """
        self._check(key)
        self._data[key] = value

    def has(self, key) -> bool:
        """ True if `key` is one of the fixed keys, whatever its value. """
        try:
            return key in self._data
        except TypeError:
            # unhashable, so never a key
            return False

    def is_set(self, key) -> bool:
        """ True if `key` is one of the fixed keys and holds something other than the null sentinel. """
        return self.has(key) and self._data[key] is not self._default

    def reset(self, key):
        self._check(key)
        self._data[key] = self._default

    def clear(self):
        for key in self._data:
            self._data[key] = self._default

    def mass_update(self, source) -> dict:
        """ Set every key of `source` that is part of this map.

        Keys unknown to this map are ignored. A failing set, typically raised
        by a specialised setter, doesn't stop the update: it is logged and
        returned together with the other failures.

        :param source:
            A mapping, or an iterable of (key, value) pairs.
        :return: dict
            Maps each key that could not be set to the exception it raised.
        """
        pairs = source.items() if isinstance(source, Mapping) else source

        failures = {}
        for key, value in pairs:
            if not self.has(key):
                continue
            try:
                self[key] = value
            except Exception as e:
                logger.warning('Could not set %r on %s: %s', key, self.__class__.__name__, e)
                failures[key] = e

        return failures

    def cursor(self) -> KeyCursor:
        return KeyCursor(self)

    def to_dict(self) -> dict:
        return dict(self._data)

    def to_object(self) -> SimpleNamespace:
        return SimpleNamespace(**self._data)

    def to_display_string(self) -> str:
        return ', '.join('' if value is None else str(value) for value in self._data.values())

    def copy(self):
        """ A new map of the same type with the same keys, setters and values. """
        obj = self.__class__.__new__(self.__class__)
        object.__setattr__(obj, '_data', dict(self._data))
        object.__setattr__(obj, '_default', self._default)
        object.__setattr__(obj, '_setters', dict(self._setters))
        return obj

    __copy__ = copy

    def __str__(self):
        return self.to_display_string()

    def __repr__(self):
        return f'{self.__class__.__name__}({self._data!r})'
