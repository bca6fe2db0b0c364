import time
import traceback
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Iterator, Type

import numpy as np

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- custom exception for assertions ---

class TestAssertionError(AssertionError):
    """raised by the suite's own assertions, so failures read differently from crashes."""
    pass

# --- registration and assertions ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case. the function stays callable (and pytest-collectable)."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        _suite_state['tests'].append({'func': wrapper, 'description': description})
        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "") -> None:
    if actual != expected:
        prefix = f"{message}: " if message else ""
        raise TestAssertionError(f"{prefix}expected {expected!r}, got {actual!r}")


@contextmanager
def assert_raises(error_type: Type[BaseException], message: str = "") -> Iterator[Dict[str, Any]]:
    """
    the block must raise error_type. the yielded dict receives the caught exception
    under 'error' so the test can inspect it afterwards.
    """
    caught: Dict[str, Any] = {}
    try:
        yield caught
    except error_type as e:
        caught['error'] = e
        return
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")


def cases(count: int = 50, seed: int = 0) -> Iterator[np.random.Generator]:
    """
    seeded random number generators for property checks: each yielded generator
    drives one case, and the fixed seed keeps runs reproducible.
    """
    root = np.random.default_rng(seed)
    for child_seed in root.integers(0, 2**32, size=count):
        yield np.random.default_rng(int(child_seed))


def sorted_ints(rng: np.random.Generator, max_len: int = 40, low: int = -100, high: int = 100) -> List[int]:
    """random non-decreasing list of python ints (may contain duplicates, may be empty)"""
    size = int(rng.integers(0, max_len + 1))
    return sorted(int(x) for x in rng.integers(low, high, size=size))

# --- running ---

def run(title: str = "test run", verbose_errors: bool = False) -> bool:
    """executes all registered tests, prints a report, and returns true when everything passed."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        func = test_item['func']
        description = test_item['description']

        passed = False
        error = None

        try:
            func()
            passed = True
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose_errors:
                traceback.print_exc()

        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    all_passed = _print_summary(start_time)

    # clear tests so several suites can run from one script
    _suite_state['tests'] = []
    return all_passed


def _print_summary(start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count == 0
