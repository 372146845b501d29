import pytest

from fixedkeys import FixedKeyMap, KeyCursor


@pytest.fixture
def fkm():
    return FixedKeyMap.freeze({'a': 1, 'b': 2, 'c': 3})


class TestKeyCursor:

    def test_walk_forward(self, fkm):
        cursor = fkm.cursor()
        pairs = []

        while cursor.valid():
            pairs.append((cursor.key(), cursor.current()))
            cursor.next()

        assert pairs == [('a', 1), ('b', 2), ('c', 3)]
        assert cursor.key() is None
        assert cursor.current() is None

    def test_walk_backward(self, fkm):
        cursor = fkm.cursor()
        cursor.next()
        cursor.next()

        keys = []
        while cursor.valid():
            keys.append(cursor.key())
            cursor.prev()

        assert keys == ['c', 'b', 'a']

    def test_stays_invalid_until_rewind(self, fkm):
        cursor = fkm.cursor()
        cursor.prev()
        assert not cursor.valid()

        cursor.next()
        assert not cursor.valid()

        cursor.rewind()
        assert cursor.valid()
        assert cursor.key() == 'a'

    def test_rewind_repeats_sequence(self, fkm):
        cursor = fkm.cursor()

        first = list(cursor)
        cursor.rewind()
        second = list(cursor)

        assert first == second == list(fkm.items())
        assert len(first) == len(fkm)

    def test_iterates_from_current_position(self, fkm):
        cursor = fkm.cursor()
        cursor.next()

        assert list(cursor) == [('b', 2), ('c', 3)]
        assert not cursor.valid()

    def test_values_are_live(self, fkm):
        cursor = fkm.cursor()

        fkm['a'] = 'changed'

        assert cursor.current() == 'changed'

    def test_cursors_are_independent(self, fkm):
        first = fkm.cursor()
        second = fkm.cursor()

        first.next()

        assert first.key() == 'b'
        assert second.key() == 'a'
        assert isinstance(first, KeyCursor)

    def test_repr(self, fkm):
        assert repr(fkm.cursor()) == "KeyCursor(key='a', valid=True)"
