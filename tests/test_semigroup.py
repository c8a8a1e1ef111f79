from __future__ import annotations

import pytest

from lawful import CommutativeSemigroup, Semigroup, laws, semigroup
from lawful import task as tasks

from samples import COMMUTATIVE_SEMIGROUPS, INTS, SEMIGROUPS, STRINGS, pairs, triples


@pytest.mark.parametrize(
    "instance, values",
    [pytest.param(s, v, id=name) for name, s, v in SEMIGROUPS],
)
def test_semigroup_is_associative(instance, values) -> None:
    for a, b, c in triples(values):
        assert laws.is_associative(instance, a, b, c), (a, b, c)


@pytest.mark.parametrize(
    "instance, values",
    [pytest.param(s, v, id=name) for name, s, v in COMMUTATIVE_SEMIGROUPS],
)
def test_commutative_semigroup_commutes(instance, values) -> None:
    assert isinstance(instance, CommutativeSemigroup)
    for a, b in pairs(values):
        assert laws.is_commutative(instance, a, b), (a, b)


def test_commutative_is_a_wrapper_not_a_subtype() -> None:
    assert not isinstance(semigroup.additive, Semigroup)
    assert isinstance(semigroup.additive.semigroup, Semigroup)
    tagged = semigroup.commutative(semigroup.from_associative_op(max))
    assert isinstance(tagged, CommutativeSemigroup)
    assert tagged.prepend(2, 9) == 9


def test_first_present_value_wins() -> None:
    assert semigroup.first.prepend(None, 5) == 5
    assert semigroup.first.prepend(3, 5) == 3
    assert semigroup.first.prepend(None, None) is None
    assert semigroup.first.prepend(0, 5) == 0


def test_last_present_value_wins() -> None:
    assert semigroup.last.prepend(3, None) == 3
    assert semigroup.last.prepend(3, 5) == 5


def test_numeric_sum_scenario() -> None:
    s = semigroup.additive
    assert s.prepend(s.prepend(1, 2), 3) == s.prepend(1, s.prepend(2, 3)) == 6


def test_string_is_not_commutative() -> None:
    assert semigroup.string.prepend("ab", "cd") == "abcd"
    assert not laws.is_commutative(semigroup.string, "ab", "cd")


def test_set_difference_removes_right_operand_from_left() -> None:
    s = semigroup.set_difference
    assert s.prepend(frozenset({1, 2}), frozenset({2})) == frozenset({1})
    assert s.prepend(frozenset({2}), frozenset({1, 2})) == frozenset()


def test_set_difference_is_not_associative() -> None:
    x, y, z = frozenset({1, 2, 3}), frozenset({2, 3}), frozenset({3})
    assert not laws.is_associative(semigroup.set_difference, x, y, z)


def test_composition_applies_right_operand_first() -> None:
    composed = semigroup.composition.prepend(lambda x: x + 1, lambda x: x * 10)
    assert composed(2) == 21


def test_composition_is_associative_pointwise() -> None:
    f, g, h = (lambda x: x + 1), (lambda x: x * 10), (lambda x: x - 3)
    prepend = semigroup.composition.prepend
    left = prepend(prepend(f, g), h)
    right = prepend(f, prepend(g, h))
    for x in INTS:
        assert left(x) == right(x)


def test_concat_operation_uses_concat_on_two_elements() -> None:
    calls = []

    def concat(xs):
        calls.append(list(xs))
        return "".join(xs)

    s = semigroup.concat_operation(concat)
    assert s.prepend("a", "b") == "ab"
    assert calls == [["a", "b"]]


def test_modular_addition() -> None:
    s = semigroup.modular(7)
    assert s.prepend(5, 4) == 2
    assert s.prepend(6, 1) == 0


@pytest.mark.parametrize("n", [0, -3])
def test_modular_rejects_non_positive_modulus(n: int) -> None:
    with pytest.raises(ValueError):
        semigroup.modular(n)


@pytest.mark.parametrize("n", range(1, 12))
def test_repeat_matches_repeated_prepend(n: int) -> None:
    expected = "ab"
    for _ in range(n - 1):
        expected = semigroup.string.prepend(expected, "ab")
    assert semigroup.string.repeat("ab", n) == expected
    assert semigroup.additive.repeat(3, n) == 3 * n


def test_repeat_rejects_zero() -> None:
    with pytest.raises(ValueError):
        semigroup.string.repeat("ab", 0)


def test_sconcat_folds_from_the_left() -> None:
    assert semigroup.string.sconcat("a", ["b", "c"]) == "abc"
    assert semigroup.string.sconcat("a") == "a"
    assert semigroup.first.sconcat(None, [None, 4, 5]) == 4


def test_dual_flips_operands() -> None:
    assert semigroup.string.dual().prepend("a", "b") == "ba"


def test_product_combines_component_wise() -> None:
    s = semigroup.product(semigroup.additive, semigroup.string)
    assert s.prepend((1, "a"), (2, "b")) == (3, "ab")


class TestMap:
    """Carrying a semigroup across a bijection."""

    def test_map_converts_operands_and_result(self) -> None:
        as_text = semigroup.additive.semigroup.map(str, int)
        assert as_text.prepend("2", "3") == "5"

    def test_map_preserves_associativity(self) -> None:
        texts = [str(x) for x in INTS]
        for a in INTS:
            assert laws.round_trips(str, int, a)
        mapped = semigroup.string.map(list, "".join)
        values = [list(s) for s in STRINGS]
        for a, b, c in triples(values):
            assert laws.is_associative(mapped, a, b, c)
        as_text = semigroup.additive.semigroup.map(str, int)
        for a, b, c in triples(texts):
            assert laws.is_associative(as_text, a, b, c)

    def test_commutative_map_keeps_tag(self) -> None:
        mapped = semigroup.additive.map(str, int)
        assert isinstance(mapped, CommutativeSemigroup)
        for a, b in pairs([str(x) for x in INTS]):
            assert laws.is_commutative(mapped, a, b)


@pytest.mark.asyncio
async def test_task_semigroup_combines_results_in_order() -> None:
    s = semigroup.task(semigroup.string)
    combined = s.prepend(tasks.pure("ab"), tasks.pure("cd"))
    assert await combined() == "abcd"
    # A Task is re-runnable.
    assert await combined() == "abcd"


@pytest.mark.asyncio
async def test_task_semigroup_is_associative_on_results() -> None:
    s = semigroup.task(semigroup.string)
    a, b, c = tasks.pure("a"), tasks.pure("b"), tasks.pure("c")
    assert await s.prepend(s.prepend(a, b), c)() == await s.prepend(a, s.prepend(b, c))()
