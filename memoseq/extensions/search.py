from __future__ import annotations
import typing
from ..types import *
from ..search import binary_search, search_states
from ..iterator import ItemIterator

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class SearchAccessor(Generic[T]):
    """searching and cursor access; index_of and contains assume ascending order"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def index_of(self, target: Any, key: Optional[KeySelector[T, K]] = None) -> Optional[int]:
        """binary search for target (compared against key(element) when given)"""
        return binary_search(target, self._enumerable._get_data(), key)

    def contains(self, target: Any, key: Optional[KeySelector[T, K]] = None) -> bool:
        return self.index_of(target, key) is not None

    def trace(self, target: Any, key: Optional[KeySelector[T, K]] = None) -> List[SearchState]:
        """every state the search visits, for debugging a lookup"""
        return list(search_states(target, self._enumerable._get_data(), key))

    def iterator(self) -> ItemIterator[T]:
        """independent external iterator over the elements"""
        return ItemIterator(self._enumerable._get_data())
