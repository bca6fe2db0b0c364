"""
divide-and-conquer search over a non-decreasing sequence.

the search is a small state machine: Searching(lo, hi) narrows until it becomes
Found(index) or NotFound. three drivers run the same machine and must agree:

- binary_search_recursive: one call frame per step, the reference version.
- binary_search: the same steps as a loop that reassigns lo/hi in place.
- binary_search_trampolined: the recursive version with its tail calls
  bounced through trampoline(), which any recursive chain can reuse.

the input must already be sorted. that is not checked (doing so costs o(n));
unsorted input gives an undefined answer, possibly a false negative.
"""
from .types import *


def midpoint(lo: int, hi: int) -> int:
    """lower middle of [lo, hi): lo + floor(n/2 - 0.5) for n = hi - lo elements"""
    return lo + (hi - lo - 1) // 2


def _key_at(seq: Sequence[T], index: int, key: Optional[KeySelector[T, K]]):
    item = seq[index]
    return key(item) if key is not None else item


def step(target: Any, seq: Sequence[T], state: Searching,
         key: Optional[KeySelector[T, K]] = None) -> SearchState:
    """one transition of the search state machine"""
    lo, hi = state.lo, state.hi
    if hi <= lo:
        return NotFound
    mid = midpoint(lo, hi)
    item = _key_at(seq, mid, key)
    if item == target:
        return Found(mid)
    if hi - lo == 1:
        return NotFound
    if target < item:
        return Searching(lo, mid)
    return Searching(mid + 1, hi)


def search_states(target: Any, seq: Sequence[T],
                  key: Optional[KeySelector[T, K]] = None) -> Iterator[SearchState]:
    """yield every state the search passes through, ending with Found or NotFound"""
    state = Searching(0, len(seq))
    yield state
    while isinstance(state, Searching):
        state = step(target, seq, state, key)
        yield state


# --- recursive reference ---

def binary_search_recursive(target: Any, seq: Sequence[T],
                            key: Optional[KeySelector[T, K]] = None) -> Optional[int]:
    """index of target in sorted seq, or None. one call frame per halving."""

    def search(lo: int, hi: int) -> Optional[int]:
        # break recursion with no elements to search
        if hi <= lo:
            return None
        mid = midpoint(lo, hi)
        item = _key_at(seq, mid, key)
        if item == target:
            return mid
        if hi - lo == 1:
            return None
        if target < item:
            return search(lo, mid)
        return search(mid + 1, hi)

    return search(0, len(seq))


# --- tail-call eliminated ---

def binary_search(target: Any, seq: Sequence[T],
                  key: Optional[KeySelector[T, K]] = None) -> Optional[int]:
    """index of target in sorted seq, or None. constant stack depth."""
    lo, hi = 0, len(seq)
    while lo < hi:
        mid = midpoint(lo, hi)
        item = _key_at(seq, mid, key)
        if item == target:
            return mid
        if hi - lo == 1:
            return None
        # the recursive version's tail calls become parameter updates
        if target < item:
            hi = mid
        else:
            lo = mid + 1
    return None


# --- trampoline ---

def trampoline(func: Callable[..., tuple], *args) -> Any:
    """
    run func(*args) until it lands. func returns either bounce(next_func, *next_args),
    which is called next without growing the stack, or land(value), whose value is returned.
    """
    while True:
        ret = func(*args)
        if len(ret) == 2:
            func, args = ret
        elif len(ret) == 1:
            return ret[0]
        else:
            raise RuntimeError(f"trampolined function returned {ret!r}; use bounce() or land()")


def bounce(func: Callable[..., tuple], *args) -> tuple:
    """schedule func(*args) as the next step of a trampoline"""
    return func, args


def land(value: Any) -> tuple:
    """finish a trampoline with value"""
    return (value,)


def _search_step(target, seq, key, lo, hi) -> tuple:
    state = step(target, seq, Searching(lo, hi), key)
    if isinstance(state, Searching):
        return bounce(_search_step, target, seq, key, state.lo, state.hi)
    return land(state.index if isinstance(state, Found) else None)


def binary_search_trampolined(target: Any, seq: Sequence[T],
                              key: Optional[KeySelector[T, K]] = None) -> Optional[int]:
    """index of target in sorted seq, or None; recursive steps driven by trampoline()"""
    return trampoline(_search_step, target, seq, key, 0, len(seq))
