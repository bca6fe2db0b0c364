"""
computation rules: the "what to compute" half of a sequence generator.

a rule fills every missing slot of a cache, in order, up to a target index.
rules come in two shapes:

- element form, func(existing, index) -> value, called once per missing index.
- fill form, func(buffer, target_index) -> None, called once and expected to
  append every missing element itself.
"""
from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from enum import Enum
from .types import *


class ComputationRule(ABC, Generic[T]):
    @abstractmethod
    def fill(self, cache, target_index: int, guarded: bool = True) -> None:
        """
        append every element from len(cache) up to and including target_index.
        `cache` supports len(), indexing and append(). when `guarded` is set the rule
        should only read through views that reject indices it has not computed yet.
        """
        pass


class ElementRule(ComputationRule[T]):
    """computes one element at a time from the elements before it"""

    def __init__(self, func: ElementFunc[T], name: Optional[str] = None):
        self._func = func
        self.name = name or getattr(func, '__name__', 'element_rule')

    def fill(self, cache, target_index: int, guarded: bool = True) -> None:
        for index in range(len(cache), target_index + 1):
            existing = CacheView(cache, index) if guarded else cache
            cache.append(self._func(existing, index))

    def __repr__(self) -> str:
        return f"ElementRule({self.name})"


class FillRule(ComputationRule[T]):
    """hands the whole gap to a function that appends the missing elements itself"""

    def __init__(self, func: FillFunc[T], name: Optional[str] = None):
        self._func = func
        self.name = name or getattr(func, '__name__', 'fill_rule')

    def fill(self, cache, target_index: int, guarded: bool = True) -> None:
        self._func(cache, target_index)

    def __repr__(self) -> str:
        return f"FillRule({self.name})"


def as_rule(rule: Union[ComputationRule[T], ElementFunc[T]]) -> ComputationRule[T]:
    """accept a rule object or a bare element-form callable"""
    if isinstance(rule, ComputationRule):
        return rule
    if callable(rule):
        return ElementRule(rule)
    raise TypeError(f"expected a ComputationRule or callable, got {type(rule).__name__}")


# --- rule builders ---

def recurrence(order: int, combine: Callable[..., T], name: Optional[str] = None) -> ElementRule[T]:
    """
    element i is combine(x[i-order], ..., x[i-1]).
    the seed has to supply the first `order` elements.
    """
    if order < 1:
        raise ValueError("recurrence order must be at least 1")

    def compute(existing: Sequence[T], index: int) -> T:
        if index < order:
            raise MalformedRule(f"recurrence of order {order} has no seed value for index {index}")
        return combine(*existing[index - order:index])

    return ElementRule(compute, name or f"recurrence({order})")


def fibonacci_rule() -> ElementRule:
    """each element is the sum of the two before it"""
    return recurrence(2, operator.add, 'fibonacci')


def fibonacci_fill_rule() -> FillRule:
    """fill-form fibonacci: extends the buffer in one pass"""
    def fill_fibs(buffer, target_index: int) -> None:
        if len(buffer) < 2:
            raise MalformedRule("fibonacci needs a seed of at least two elements")
        for _ in range(len(buffer), target_index + 1):
            buffer.append(buffer[-2] + buffer[-1])

    return FillRule(fill_fibs, 'fibonacci_fill')


def repeat_last_rule() -> ElementRule:
    """every new element copies the one before it"""
    return recurrence(1, lambda previous: previous, 'repeat_last')


def counter_rule(step: Any = 1) -> ElementRule:
    """each element is the previous one plus step"""
    return recurrence(1, lambda previous: previous + step, f"counter({step})")


def chain_rule(transform: Callable[[T], T]) -> ElementRule[T]:
    """each element is transform(previous); e.g. a chain of string rewrites"""
    return recurrence(1, transform, f"chain({getattr(transform, '__name__', 'transform')})")


# --- typed registry ---

class RuleKind(Enum):
    FIBONACCI = 'fibonacci'
    REPEAT_LAST = 'repeat_last'
    COUNTER = 'counter'
    CHAIN = 'chain'


_BUILDERS: Dict[RuleKind, Callable[..., ComputationRule]] = {
    RuleKind.FIBONACCI: fibonacci_rule,
    RuleKind.REPEAT_LAST: repeat_last_rule,
    RuleKind.COUNTER: counter_rule,
    RuleKind.CHAIN: chain_rule,
}


def rule_for(kind: RuleKind, **options) -> ComputationRule:
    """build a built-in rule; options go to the builder (step for COUNTER, transform for CHAIN)"""
    if not isinstance(kind, RuleKind):
        raise TypeError(f"rule kind must be a RuleKind, got {kind!r}")
    return _BUILDERS[kind](**options)


def check_deterministic(seed: Iterable[T], rule: Union[ComputationRule[T], ElementFunc[T]],
                        upto: int) -> Tuple[T, ...]:
    """
    runs the rule in two independent generators and compares indices 0..upto.
    raises MalformedRule at the first disagreement, otherwise returns the verified prefix.
    """
    from .generator import SequenceGenerator
    seed = list(seed)
    rule = as_rule(rule)
    first = SequenceGenerator(seed, rule)
    second = SequenceGenerator(seed, rule)
    for index in range(upto + 1):
        a, b = first.get(index), second.get(index)
        if a != b:
            raise MalformedRule(f"rule {rule!r} is not deterministic: index {index} gave {a!r} and {b!r}")
    return first.cached()[:upto + 1]
