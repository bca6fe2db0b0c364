from .types import *


class ItemIterator(Generic[T]):
    """
    external iterator over a fixed collection.
    the items are copied on construction, so each iterator owns its own position
    and never touches the source.
    """

    def __init__(self, items: Iterable[T]):
        self._items: Tuple[T, ...] = tuple(items)
        self._pos = 0

    def next(self, default: Optional[T] = None) -> Optional[T]:
        """next element, or default once exhausted (exhaustion is sticky)"""
        if self._pos >= len(self._items):
            return default
        value = self._items[self._pos]
        self._pos += 1
        return value

    @property
    def pos(self) -> int: return self._pos

    @property
    def remaining(self) -> int: return len(self._items) - self._pos

    @property
    def exhausted(self) -> bool: return self._pos == len(self._items)

    # python iterator protocol, for use in for-loops
    def __iter__(self) -> 'ItemIterator[T]':
        return self

    def __next__(self) -> T:
        if self.exhausted:
            raise StopIteration
        return self.next()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ItemIterator(pos={self._pos}, length={len(self._items)})"
