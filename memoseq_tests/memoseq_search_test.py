import numpy as np

import suite
from suite import assert_that, assert_equal, assert_raises, cases, sorted_ints
from memoseq import (
    binary_search, binary_search_recursive, binary_search_trampolined, search_states,
    midpoint, trampoline, bounce, land, Searching, Found, NotFound
)

SAMPLE = [1, 5, 6, 19, 48, 77, 997]
SEARCHES = (binary_search, binary_search_recursive, binary_search_trampolined)


@suite.test("7 is absent and 77 sits at index 5")
def test_search_scenario():
    for search in SEARCHES:
        assert_equal(search(7, SAMPLE), None, search.__name__)
        assert_equal(search(77, SAMPLE), 5, search.__name__)


@suite.test("every element of the sample is found at its index")
def test_search_finds_all_sample_elements():
    for search in SEARCHES:
        for index, value in enumerate(SAMPLE):
            assert_equal(search(value, SAMPLE), index, f"{search.__name__}({value})")


@suite.test("values below, between and above the sample are absent")
def test_search_absent_values():
    for search in SEARCHES:
        for value in (0, 2, 20, 76, 78, 998, 10**6):
            assert_equal(search(value, SAMPLE), None, f"{search.__name__}({value})")


@suite.test("empty and single-element inputs")
def test_search_small_inputs():
    for search in SEARCHES:
        assert_equal(search(1, []), None)
        assert_equal(search(4, [4]), 0)
        assert_equal(search(3, [4]), None)
        assert_equal(search(5, [4]), None)


@suite.test("midpoint picks the lower middle on even spans")
def test_midpoint_rule():
    for n in range(1, 60):
        assert_equal(midpoint(0, n), int(n / 2 - 0.5), f"span of {n}")
    assert_equal(midpoint(0, 2), 0)
    assert_equal(midpoint(0, 4), 1)
    assert_equal(midpoint(0, 3), 1)
    assert_equal(midpoint(10, 14), 11)


@suite.test("state trace for a hit")
def test_search_states_found():
    states = list(search_states(77, SAMPLE))
    assert_equal(states, [Searching(0, 7), Searching(4, 7), Found(5)])


@suite.test("state trace for a miss ends in NotFound")
def test_search_states_not_found():
    states = list(search_states(7, SAMPLE))
    assert_equal(states, [Searching(0, 7), Searching(0, 3), Searching(2, 3), NotFound])
    assert_equal(list(search_states(1, [])), [Searching(0, 0), NotFound])


@suite.test("every searching state strictly shrinks the span")
def test_search_states_shrink():
    for rng in cases(count=30, seed=5):
        data = sorted_ints(rng)
        target = int(rng.integers(-110, 110))
        spans = [s.span for s in search_states(target, data) if isinstance(s, Searching)]
        assert_that(all(a > b for a, b in zip(spans, spans[1:])), f"spans must shrink: {spans}")


@suite.test("search is correct on random sorted data")
def test_search_correctness_property():
    for rng in cases(count=60, seed=1):
        data = sorted_ints(rng)
        present = set(data)
        for value in present:
            index = binary_search(value, data)
            assert_that(index is not None and data[index] == value, f"{value} in {data} -> {index}")
        for value in range(-105, 105):
            if value not in present:
                assert_equal(binary_search(value, data), None, f"{value} absent from {data}")


@suite.test("recursive, looping and trampolined searches agree")
def test_search_equivalence_property():
    for rng in cases(count=60, seed=2):
        data = sorted_ints(rng)
        for target in range(-105, 105, 3):
            expected = binary_search_recursive(target, data)
            assert_equal(binary_search(target, data), expected, f"loop, {target} in {data}")
            assert_equal(binary_search_trampolined(target, data), expected, f"trampoline, {target} in {data}")


@suite.test("duplicates return some matching index")
def test_search_duplicates():
    data = [1, 2, 2, 2, 2, 3]
    for search in SEARCHES:
        index = search(2, data)
        assert_that(index in (1, 2, 3, 4), f"{search.__name__} gave {index}")


@suite.test("key= compares a projection of each element")
def test_search_with_key():
    people = [('ana', 19), ('bo', 25), ('cy', 31), ('di', 40)]
    for search in SEARCHES:
        assert_equal(search(31, people, key=lambda p: p[1]), 2)
        assert_equal(search(30, people, key=lambda p: p[1]), None)


@suite.test("large inputs stay well inside the stack")
def test_search_large_input():
    data = range(0, 2_000_000, 2)
    for search in SEARCHES:
        assert_equal(search(1_234_566, data), 617_283)
        assert_equal(search(1_234_567, data), None)


@suite.test("numpy arrays can be searched")
def test_search_numpy_array():
    data = np.array(SAMPLE)
    for search in SEARCHES:
        assert_equal(search(48, data), 4)
        assert_equal(search(49, data), None)


@suite.test("unsorted input gives an answer, not a crash")
def test_search_unsorted_input():
    data = [9, 1, 7, 3, 5]
    for search in SEARCHES:
        result = search(1, data)
        assert_that(result is None or data[result] == 1, f"{search.__name__} gave {result}")


@suite.test("trampoline runs bounces far past the recursion limit")
def test_trampoline_deep_chain():
    def countdown(n, total):
        if n == 0:
            return land(total)
        return bounce(countdown, n - 1, total + n)

    assert_equal(trampoline(countdown, 100_000, 0), 100_000 * 100_001 // 2)


@suite.test("trampoline rejects malformed steps")
def test_trampoline_bad_return():
    with assert_raises(RuntimeError):
        trampoline(lambda: (1, 2, 3))


if __name__ == "__main__":
    suite.run(title="memoseq search test suite")
