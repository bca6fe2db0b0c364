from __future__ import annotations

import logging
import operator
import threading
from contextlib import nullcontext
import itertools
from .types import *
from .config import EngineConfig, DEFAULT_CONFIG
from .rules import ComputationRule, as_rule
from .iterator import ItemIterator
from .search import binary_search

logger = logging.getLogger(__name__)


class SequenceGenerator(Generic[T]):
    """
    lazily computed, memoized infinite sequence.
    composes an append-only cache with a computation rule: asking for an index fills
    every missing slot below it once, and every later request for those slots is a plain read.
    """

    def __init__(self, seed: Iterable[T] = (),
                 rule: Union[ComputationRule[T], ElementFunc[T]] = None,
                 config: Optional[EngineConfig] = None):
        if rule is None:
            raise TypeError("a sequence generator needs a computation rule")
        self._cache: CacheStore[T] = CacheStore(seed)
        self._rule = as_rule(rule)
        self.config = config or DEFAULT_CONFIG
        self._lock = threading.RLock() if self.config.thread_safe else nullcontext()
        self._filling = False

    # --- element access ---

    def get(self, index: int) -> T:
        """element at index, computing and caching any missing prefix first"""
        index = self._check_index(index)
        # cached reads skip the lock; the cache only ever grows
        if index < len(self._cache):
            return self._cache[index]
        with self._lock:
            if index >= len(self._cache):
                self._fill_to(index)
            return self._cache[index]

    def get_or_default(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """like get(), but returns default when the index overflows"""
        try:
            return self.get(index)
        except IndexOverflow:
            return default

    def __getitem__(self, index):
        if isinstance(index, slice):
            if index.step is not None and index.step < 0:
                # walking backwards starts from the highest index, so that one bounds the fill
                if index.start is None or index.start < 0:
                    raise ValueError("backward slices of an infinite sequence need a non-negative start")
                if index.stop is not None and index.stop < 0:
                    raise ValueError("slices of an infinite sequence need a non-negative stop")
                self.get(index.start)
                return [self._cache[i] for i in range(*index.indices(index.start + 1))]
            if index.stop is None or index.stop < 0:
                raise ValueError("slices of an infinite sequence need a non-negative stop")
            if (index.start or 0) < 0:
                raise ValueError("slices of an infinite sequence need a non-negative start")
            if index.stop > 0:
                self.get(index.stop - 1)
            return [self._cache[i] for i in range(*index.indices(index.stop))]
        return self.get(index)

    def __iter__(self) -> Iterator[T]:
        """endless iteration over the sequence; pair with islice or take()"""
        for index in itertools.count():
            yield self.get(index)

    # --- cache inspection ---

    @property
    def rule(self) -> ComputationRule[T]:
        return self._rule

    @property
    def cache_length(self) -> int:
        return len(self._cache)

    def cached(self) -> Tuple[T, ...]:
        """snapshot of every element computed so far"""
        return self._cache.snapshot()

    # --- views ---

    def take(self, count: int) -> 'Enumerable[T]':
        """lazy view of the first `count` elements"""
        from .enumerable import Enumerable
        if count < 0:
            raise ValueError("count must be non-negative")
        return Enumerable(lambda: self[0:count])

    def take_while(self, predicate: Predicate[T], limit: Optional[int] = None) -> 'Enumerable[T]':
        """
        lazy view of the leading run of elements satisfying predicate.
        `limit` caps how many elements are examined, defaulting to config.max_scan.
        """
        from .enumerable import Enumerable
        scan = self._scan_limit(limit)
        def take_while_data():
            result = []
            for index in range(scan):
                value = self.get(index)
                if not predicate(value):
                    break
                result.append(value)
            return result
        return Enumerable(take_while_data)

    def materialized(self) -> 'Enumerable[T]':
        """view of what is cached at the time the view is evaluated"""
        from .enumerable import Enumerable
        return Enumerable(lambda: list(self._cache.snapshot()))

    def iterator(self, count: int) -> ItemIterator[T]:
        """external iterator over the first `count` elements"""
        return ItemIterator(self[0:count])

    def index_of(self, value: T, limit: Optional[int] = None) -> Optional[int]:
        """
        position of value in a non-decreasing sequence, or None.
        grows the cache until the last element reaches value (or `limit` elements exist,
        config.max_scan when not given), then binary searches the materialized prefix.
        """
        scan = self._scan_limit(limit)
        examined = 0
        while examined < scan:
            examined += 1
            if self.get(examined - 1) >= value:
                break
        return binary_search(value, self[0:examined])

    # --- internals ---

    def _check_index(self, index: int) -> int:
        if isinstance(index, bool):
            raise TypeError("sequence index must be an integer, not bool")
        try:
            index = operator.index(index)
        except TypeError:
            raise TypeError(f"sequence index must be an integer, not {type(index).__name__}") from None
        if index < 0:
            raise IndexError("sequence index must be non-negative")
        if index > self.config.max_index:
            raise IndexOverflow(index, self.config.max_index)
        return index

    def _scan_limit(self, limit: Optional[int]) -> int:
        """how many leading elements a scan may examine; never past max_index"""
        scan = self.config.max_scan if limit is None else limit
        return max(0, min(scan, self.config.max_index + 1))

    def _fill_to(self, index: int) -> None:
        """run the rule for the gap [len(cache), index]; caller holds the lock"""
        if self._filling:
            raise MalformedRule(f"rule {self._rule!r} re-entered its own generator for uncomputed index {index}")
        start = len(self._cache)
        logger.debug(f"filling {self._rule!r} from index {start} to {index}")
        self._filling = True
        try:
            if self.config.check_rules:
                self._checked_fill(index)
            else:
                self._rule.fill(self._cache, index, guarded=False)
                if len(self._cache) <= index:
                    raise MalformedRule(f"rule {self._rule!r} stopped at length {len(self._cache)} before index {index}")
        except MalformedRule as e:
            logger.error(f"malformed rule {self._rule!r} while filling index {index}: {e}")
            raise
        finally:
            self._filling = False
        logger.debug(f"cache grew from {start} to {len(self._cache)}")

    def _checked_fill(self, index: int) -> None:
        buffer = FillBuffer(self._cache, index)
        self._rule.fill(buffer, index, guarded=True)
        if not buffer.complete:
            raise MalformedRule(f"rule {self._rule!r} stopped at length {len(buffer)} before index {index}")

        if self.config.verify_determinism:
            repeat = FillBuffer(self._cache, index)
            self._rule.fill(repeat, index, guarded=True)
            if not repeat.complete or len(repeat.staged) != len(buffer.staged):
                raise MalformedRule(
                    f"rule {self._rule!r} is not deterministic: filled {len(buffer.staged)} elements, "
                    f"then {len(repeat.staged)} on the repeat")
            for offset, (a, b) in enumerate(zip(buffer.staged, repeat.staged)):
                if a != b:
                    raise MalformedRule(
                        f"rule {self._rule!r} is not deterministic: index {len(self._cache) + offset} gave {a!r} and {b!r}")

        self._cache.extend(buffer.staged)

    def __repr__(self) -> str:
        return f"SequenceGenerator(rule={self._rule!r}, cached={len(self._cache)})"
