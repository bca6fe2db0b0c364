import typing
from .types import *
from .config import EngineConfig
from .rules import ComputationRule, RuleKind, rule_for, fibonacci_rule, repeat_last_rule, counter_rule
from .generator import SequenceGenerator
from .iterator import ItemIterator

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

# --- enumerable factories ---

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: list(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: list(range(start, start + count)))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [])

# --- generator factories ---

def generate(seed: Iterable[T], rule: Union[ComputationRule[T], ElementFunc[T]],
             config: Optional[EngineConfig] = None) -> SequenceGenerator[T]:
    """memoized sequence from a seed and a rule"""
    return SequenceGenerator(seed, rule, config)

def from_kind(kind: RuleKind, seed: Iterable[Any], config: Optional[EngineConfig] = None,
              **options) -> SequenceGenerator:
    """memoized sequence driven by a built-in rule"""
    return SequenceGenerator(seed, rule_for(kind, **options), config)

def fibonacci(config: Optional[EngineConfig] = None) -> SequenceGenerator[int]:
    """0, 1, 1, 2, 3, 5, ..."""
    return SequenceGenerator([0, 1], fibonacci_rule(), config)

def constant(value: T, config: Optional[EngineConfig] = None) -> SequenceGenerator[T]:
    """value, value, value, ..."""
    return SequenceGenerator([value], repeat_last_rule(), config)

def counter(start: int = 0, step: int = 1, config: Optional[EngineConfig] = None) -> SequenceGenerator[int]:
    """start, start + step, start + 2 * step, ..."""
    return SequenceGenerator([start], counter_rule(step), config)

# --- iterator factory ---

def make_iterator(*items: T) -> ItemIterator[T]:
    """external iterator over the given items"""
    return ItemIterator(items)

# --- aliases ---
seq = from_iterable
S = from_iterable
