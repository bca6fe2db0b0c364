from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Sequence, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]

# element form: (existing elements, target index) -> new element
ElementFunc = Callable[[Sequence[T], int], T]
# fill form: (append-only buffer, target index) -> None
FillFunc = Callable[['FillBuffer[T]', int], None]


# --- error conditions ---

class IndexOverflow(OverflowError):
    """requested index is beyond what the generator is allowed to address"""

    def __init__(self, index: int, max_index: int):
        super().__init__(f"index {index} exceeds the maximum addressable index {max_index}")
        self.index = index
        self.max_index = max_index


class MalformedRule(RuntimeError):
    """a computation rule broke its contract (read ahead, skipped a slot, or was non-deterministic)"""
    pass


# --- search states ---

class Searching:
    """search still in progress over the half-open span [lo, hi)"""

    def __init__(self, lo: int, hi: int):
        self.lo = lo
        self.hi = hi

    @property
    def span(self) -> int: return self.hi - self.lo

    def __eq__(self, other) -> bool:
        return isinstance(other, Searching) and (self.lo, self.hi) == (other.lo, other.hi)

    def __repr__(self) -> str:
        return f"Searching(lo={self.lo}, hi={self.hi})"


class Found:
    """terminal state: target located at index"""

    def __init__(self, index: int):
        self.index = index

    def __eq__(self, other) -> bool:
        return isinstance(other, Found) and self.index == other.index

    def __repr__(self) -> str:
        return f"Found(index={self.index})"


class _NotFound:
    """terminal state: target absent"""

    def __repr__(self) -> str:
        return "NotFound"


NotFound = _NotFound()

SearchState = Union[Searching, Found, _NotFound]


# --- cache storage ---

class CacheStore(Generic[T]):
    """
    append-only, zero-indexed store of computed elements.
    values can be added at the end and read back; nothing is ever overwritten or removed.
    """

    def __init__(self, seed: Iterable[T] = ()):
        self._items: List[T] = list(seed)

    def append(self, value: T) -> None:
        self._items.append(value)

    def extend(self, values: Iterable[T]) -> None:
        self._items.extend(values)

    def snapshot(self) -> Tuple[T, ...]:
        """immutable copy of everything computed so far"""
        return tuple(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CacheStore(length={len(self._items)})"


class CacheView(Sequence[T]):
    """
    read-only window over the first `limit` elements of a cache.
    handed to rules so that reading at or past the slot being computed is caught.
    negative indices count back from the limit, like a list.
    """

    def __init__(self, store: CacheStore[T], limit: int):
        self._store = store
        self._limit = limit

    def _resolve(self, index: int) -> int:
        resolved = index + self._limit if index < 0 else index
        if resolved >= self._limit:
            raise MalformedRule(f"rule read index {resolved} while only indices below {self._limit} are computed")
        if resolved < 0:
            raise MalformedRule(f"rule read index {index} before the start of the cache (length {self._limit})")
        return resolved

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._store[i] for i in range(*index.indices(self._limit))]
        return self._store[self._resolve(index)]

    def __len__(self) -> int:
        return self._limit

    def __iter__(self) -> Iterator[T]:
        for index in range(self._limit):
            yield self[index]

    def __repr__(self) -> str:
        return f"CacheView(limit={self._limit})"


class FillBuffer(CacheView[T]):
    """
    append-only buffer for fill-form rules. appended values are staged and only reach
    the store once the whole fill succeeds. reads cover the store plus whatever is staged.
    """

    def __init__(self, store: CacheStore[T], target_index: int):
        super().__init__(store, len(store))
        self._base = len(store)
        self._target_index = target_index
        self.staged: List[T] = []

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(self._limit))]
        resolved = self._resolve(index)
        if resolved < self._base:
            return self._store[resolved]
        return self.staged[resolved - self._base]

    def append(self, value: T) -> None:
        if self._limit > self._target_index:
            raise MalformedRule(f"rule appended past its target index {self._target_index}")
        self.staged.append(value)
        self._limit += 1

    @property
    def complete(self) -> bool:
        """true once every slot up to the target index is filled"""
        return self._limit > self._target_index

    def __repr__(self) -> str:
        return f"FillBuffer(length={self._limit}, target={self._target_index})"
