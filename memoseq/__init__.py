r"""
'    _ __ ___   ___ _ __ ___   ___  ___  ___  __ _
'   | '_ ` _ \ / _ \ '_ ` _ \ / _ \/ __|/ _ \/ _` |
'   | | | | | |  __/ | | | | | (_) \__ \  __/ (_| |
'   |_| |_| |_|\___|_| |_| |_|\___/|___/\___|\__, |
'                                               |_|
"""

# expose the main classes
from .generator import SequenceGenerator
from .iterator import ItemIterator
from .enumerable import Enumerable
from .config import EngineConfig

# expose rules
from .rules import (
    ComputationRule,
    ElementRule,
    FillRule,
    RuleKind,
    rule_for,
    recurrence,
    fibonacci_rule,
    fibonacci_fill_rule,
    repeat_last_rule,
    counter_rule,
    chain_rule,
    check_deterministic
)

# expose search
from .search import (
    binary_search,
    binary_search_recursive,
    binary_search_trampolined,
    search_states,
    midpoint,
    trampoline,
    bounce,
    land
)

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    empty,
    generate,
    from_kind,
    fibonacci,
    constant,
    counter,
    make_iterator,
    seq,
    S
)

# expose supporting data classes and errors
from .types import (
    CacheStore,
    CacheView,
    FillBuffer,
    Searching,
    Found,
    NotFound,
    IndexOverflow,
    MalformedRule
)

# define what `import *` does
__all__ = [
    "SequenceGenerator",
    "ItemIterator",
    "Enumerable",
    "EngineConfig",
    "ComputationRule",
    "ElementRule",
    "FillRule",
    "RuleKind",
    "rule_for",
    "recurrence",
    "fibonacci_rule",
    "fibonacci_fill_rule",
    "repeat_last_rule",
    "counter_rule",
    "chain_rule",
    "check_deterministic",
    "binary_search",
    "binary_search_recursive",
    "binary_search_trampolined",
    "search_states",
    "midpoint",
    "trampoline",
    "bounce",
    "land",
    "from_iterable",
    "from_range",
    "empty",
    "generate",
    "from_kind",
    "fibonacci",
    "constant",
    "counter",
    "make_iterator",
    "seq",
    "S",
    "CacheStore",
    "CacheView",
    "FillBuffer",
    "Searching",
    "Found",
    "NotFound",
    "IndexOverflow",
    "MalformedRule"
]
