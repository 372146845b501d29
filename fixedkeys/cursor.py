class KeyCursor:
    """ A bidirectional cursor over the entries of a fixed key map.

    The cursor keeps its own position, so any number of cursors may walk the
    same map independently. Keys are taken from the map's fixed key order and
    values are read live, so assignments made while walking are visible.

    Once the cursor is moved past either end it stays invalid until
    :meth:`rewind` is called.

    Usage:

        cursor = fkm.cursor()
        while cursor.valid():
            print(cursor.key(), cursor.current())
            cursor.next()

    """
    def __init__(self, mapping):
        self._mapping = mapping
        self._keys = tuple(mapping)
        self._position = 0

    def rewind(self):
        self._position = 0

    def valid(self) -> bool:
        return self._position is not None and 0 <= self._position < len(self._keys)

    def key(self):
        """ The key under the cursor, or None when the cursor is invalid. """
        if not self.valid():
            return None
        return self._keys[self._position]

    def current(self):
        """ The value under the cursor, or None when the cursor is invalid. """
        if not self.valid():
            return None
        return self._mapping[self._keys[self._position]]

    def next(self):
        self._step(1)

    def prev(self):
        self._step(-1)

    def _step(self, offset):
        if not self.valid():
            return
        self._position += offset
        if not self.valid():
            self._position = None

    def __iter__(self):
        while self.valid():
            yield self.key(), self.current()
            self.next()

    def __repr__(self):
        return f'{self.__class__.__name__}(key={self.key()!r}, valid={self.valid()})'
