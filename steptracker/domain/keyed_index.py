# steptracker/domain/keyed_index.py
"""
Sorted, key-unique in-memory index.

Items are kept in a list ordered by a key taken from each item with the
extractor passed at construction. Lookups use binary search over a parallel
list of keys, so the structure behaves like the leaf level of a B+ tree
without any of the on-disk machinery.

Example usage:
    people = KeyedIndex[Individual, int](lambda ind: ind.id)
    people.insert(Individual(id=2, ...))
    people.insert(Individual(id=1, ...))
    people.search(1)          # -> Individual(id=1, ...)
    people.range(1, 5)        # -> [Individual(id=1), Individual(id=2)]
"""
from bisect import bisect_left, bisect_right
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class KeyedIndex(Generic[T, K]):
    """
    Ordered collection of items, unique by extracted key.

    Attributes:
        key_of: callable returning the key of an item
    """

    def __init__(self, key_of: Callable[[T], K], items: Optional[List[T]] = None):
        self.key_of = key_of
        self._items: List[T] = []
        self._keys: List[K] = []
        for item in items or []:
            self.insert(item)

    def _position(self, key: K) -> int:
        return bisect_left(self._keys, key)

    def insert(self, item: T) -> bool:
        """
        Insert item at its sorted position.
        An existing key is left untouched and False is returned; callers that
        must report duplicates check with search() first.
        """
        key = self.key_of(item)
        pos = self._position(key)
        if pos < len(self._keys) and self._keys[pos] == key:
            return False
        self._keys.insert(pos, key)
        self._items.insert(pos, item)
        return True

    def search(self, key: K) -> Optional[T]:
        """Return the stored item for key (the live object, not a copy) or None."""
        pos = self._position(key)
        if pos < len(self._keys) and self._keys[pos] == key:
            return self._items[pos]
        return None

    def remove(self, key: K) -> bool:
        pos = self._position(key)
        if pos < len(self._keys) and self._keys[pos] == key:
            del self._keys[pos]
            del self._items[pos]
            return True
        return False

    def range(self, start_key: K, end_key: K) -> List[T]:
        """Items with start_key <= key <= end_key, ascending. Returns a new list."""
        if end_key < start_key:
            return []
        lo = bisect_left(self._keys, start_key)
        hi = bisect_right(self._keys, end_key)
        return self._items[lo:hi]

    def all_values(self) -> List[T]:
        """
        The backing list in key order.
        Items may be mutated in place; the list itself must not be reordered
        and item keys must not change.
        """
        return self._items

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: K) -> bool:
        return self.search(key) is not None
