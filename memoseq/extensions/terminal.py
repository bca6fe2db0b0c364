from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """copy of the elements as a list"""
        return list(self._enumerable._get_data())

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._enumerable._get_data())

    def array(self, dtype: Any = None) -> np.ndarray:
        """elements as a numpy array"""
        return np.array(self._enumerable._get_data(), dtype=dtype)

    def pandas(self, name: Optional[str] = None) -> pd.Series:
        """elements as a pandas series indexed by position"""
        return pd.Series(self._enumerable._get_data(), name=name)

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        if predicate is None: return len(self._enumerable._get_data())
        return sum(1 for x in self._enumerable._get_data() if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        data = self._enumerable._get_data()
        if predicate is None: return len(data) > 0
        return any(predicate(x) for x in data)

    def all(self, predicate: Predicate[T]) -> bool:
        return all(predicate(x) for x in self._enumerable._get_data())

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """first element (matching predicate); raises ValueError if there is none"""
        data = self._enumerable._get_data()
        if predicate is None:
            if not data: raise ValueError("sequence contains no elements")
            return data[0]
        for item in data:
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        try: return self.first(predicate)
        except ValueError: return default

    def last(self) -> T:
        data = self._enumerable._get_data()
        if not data: raise ValueError("sequence contains no elements")
        return data[-1]

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """fold the sequence left to right"""
        data = self._enumerable._get_data()
        if not data and seed is None: raise ValueError("cannot aggregate empty sequence without seed")
        return reduce(accumulator, data, seed) if seed is not None else reduce(accumulator, data)
