"""Law predicates for semigroups, monoids, groups and rings.

The records cannot inspect the functions they hold, so the laws are never
enforced at construction. These predicates check one instance of a law on
concrete values; tests run them over sample values.

Laws:

1. Associativity: prepend(prepend(a, b), c) == prepend(a, prepend(b, c))
2. Commutativity: prepend(a, b) == prepend(b, a)
3. Identity: prepend(identity, a) == a == prepend(a, identity)
4. Concat agrees with the fold: concat(xs) == reduce(prepend, xs, identity)
5. Inverse: prepend(a, inverse(a)) == identity == prepend(inverse(a), a)
6. Distributivity: a * (b + c) == a*b + a*c and (a + b) * c == a*c + b*c
7. Round trip: b_to_a(a_to_b(x)) == x, the precondition of every ``map``
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import reduce
from typing import Any, TypeVar

A = TypeVar("A")
B = TypeVar("B")


def is_associative(semigroup: Any, a: A, b: A, c: A) -> bool:
    prepend = semigroup.prepend
    return prepend(prepend(a, b), c) == prepend(a, prepend(b, c))


def is_commutative(semigroup: Any, a: A, b: A) -> bool:
    return semigroup.prepend(a, b) == semigroup.prepend(b, a)


def has_identity(monoid: Any, a: A) -> bool:
    return (
        monoid.prepend(monoid.identity, a) == a
        and monoid.prepend(a, monoid.identity) == a
    )


def concat_agrees(monoid: Any, xs: Sequence[A]) -> bool:
    return monoid.concat(xs) == reduce(monoid.prepend, xs, monoid.identity)


def has_inverse(group: Any, a: A) -> bool:
    inverse = group.inverse(a)
    return (
        group.prepend(a, inverse) == group.identity
        and group.prepend(inverse, a) == group.identity
    )


def is_left_distributive(ring: Any, a: A, b: A, c: A) -> bool:
    add = ring.addition.monoid.prepend
    mul = ring.multiplication.prepend
    return mul(a, add(b, c)) == add(mul(a, b), mul(a, c))


def is_right_distributive(ring: Any, a: A, b: A, c: A) -> bool:
    add = ring.addition.monoid.prepend
    mul = ring.multiplication.prepend
    return mul(add(a, b), c) == add(mul(a, c), mul(b, c))


def round_trips(a_to_b: Callable[[A], B], b_to_a: Callable[[B], A], x: A) -> bool:
    return b_to_a(a_to_b(x)) == x
