from __future__ import annotations
import typing
from itertools import takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """keep elements matching predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: [x for x in self._get_data() if predicate(x)])

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """map each element"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: [selector(x) for x in self._get_data()])

    def select_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], U]) -> 'Enumerable[U]':
        """map each element together with its position"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: [selector(item, index) for index, item in enumerate(self._get_data())])

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """first `count` elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._get_data()[:max(count, 0)])

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """everything after the first `count` elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._get_data()[max(count, 0):])

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """leading run of elements matching predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(takewhile(predicate, self._get_data())))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """drop the leading run of elements matching predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(dropwhile(predicate, self._get_data())))

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(reversed(self._get_data())))

    def order_by(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None,
                 descending: bool = False) -> 'Enumerable[T]':
        """
        stable sort by key. ascending order is what the search accessor expects;
        a descending result should not be searched.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: sorted(self._get_data(), key=key_selector, reverse=descending))
