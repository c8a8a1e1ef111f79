"""Monoid - a semigroup with an identity element and a bulk ``concat``."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import reduce
from itertools import chain
from typing import Any, Generic, TypeVar

from lawful import semigroup as semigroups
from lawful import task as tasks
from lawful.effect import Effects
from lawful.semigroup import CommutativeSemigroup, Semigroup
from lawful.task import Task

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Monoid(Generic[A]):
    """A semigroup together with its identity element.

    Laws (caller obligation, never checked):
        prepend(identity, x) == x == prepend(x, identity)
        concat(xs) == reduce(prepend, xs, identity)

    ``concat`` may be implemented independently of ``prepend`` (``str.join``
    instead of a loop of ``+``) as long as it agrees with the fold.

    Attributes:
        semigroup: The underlying operation
        identity: Two-sided identity for ``semigroup.prepend``
        concat: Folds an ordered sequence into one value
    """

    semigroup: Semigroup[A]
    identity: A
    concat: Callable[[Sequence[A]], A]

    def prepend(self, x: A, y: A) -> A:
        return self.semigroup.prepend(x, y)

    def power(self, x: A, n: int) -> A:
        """Combine ``x`` with itself ``n`` times; ``power(x, 0)`` is the identity."""
        return _power(self.semigroup, self.identity, x, n)

    def dual(self) -> Monoid[A]:
        """The same monoid with operands flipped."""
        concat = self.concat
        return Monoid(
            semigroup=self.semigroup.dual(),
            identity=self.identity,
            concat=lambda xs: concat(list(xs)[::-1]),
        )

    def map(self, a_to_b: Callable[[A], B], b_to_a: Callable[[B], A]) -> Monoid[B]:
        """Carry this monoid over to ``B`` through a bijection.

        Maps the semigroup, sends the identity through ``a_to_b`` and keeps
        this monoid's ``concat`` by converting the elements and the result.
        """
        return Monoid(
            semigroup=self.semigroup.map(a_to_b, b_to_a),
            identity=a_to_b(self.identity),
            concat=_map_concat(self.concat, a_to_b, b_to_a),
        )


@dataclass(frozen=True)
class CommutativeMonoid(Generic[A]):
    """A monoid built over a commutative semigroup."""

    semigroup: CommutativeSemigroup[A]
    identity: A
    concat: Callable[[Sequence[A]], A]

    def prepend(self, x: A, y: A) -> A:
        return self.semigroup.prepend(x, y)

    def power(self, x: A, n: int) -> A:
        return _power(self.semigroup.semigroup, self.identity, x, n)

    @property
    def monoid(self) -> Monoid[A]:
        """This monoid with the commutativity tag dropped."""
        return Monoid(self.semigroup.semigroup, self.identity, self.concat)

    def map(
        self, a_to_b: Callable[[A], B], b_to_a: Callable[[B], A]
    ) -> CommutativeMonoid[B]:
        return CommutativeMonoid(
            semigroup=self.semigroup.map(a_to_b, b_to_a),
            identity=a_to_b(self.identity),
            concat=_map_concat(self.concat, a_to_b, b_to_a),
        )


def _power(semigroup: Semigroup[A], identity: A, x: A, n: int) -> A:
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return identity
    return semigroup.repeat(x, n)


def _map_concat(
    concat: Callable[[Sequence[A]], A],
    a_to_b: Callable[[A], B],
    b_to_a: Callable[[B], A],
) -> Callable[[Sequence[B]], B]:
    def _concat(xs: Sequence[B]) -> B:
        return a_to_b(concat([b_to_a(x) for x in xs]))

    return _concat


def from_identity_and_concat(identity: A, concat_fn: Callable[[Sequence[A]], A]) -> Monoid[A]:
    """Build a monoid from its identity and ``concat``; ``prepend`` is ``concat_fn([x, y])``."""
    return Monoid(semigroups.concat_operation(concat_fn), identity, concat_fn)


def from_semigroup_and_identity(semigroup: Semigroup[A], identity: A) -> Monoid[A]:
    """Build a monoid whose ``concat`` is a left fold seeded with ``identity``.

    One ``prepend`` call per element.
    """
    def _concat(xs: Sequence[A]) -> A:
        return reduce(semigroup.prepend, xs, identity)

    return Monoid(semigroup, identity, _concat)


def from_commutative_semigroup_and_identity(
    semigroup: CommutativeSemigroup[A], identity: A
) -> CommutativeMonoid[A]:
    def _concat(xs: Sequence[A]) -> A:
        return reduce(semigroup.prepend, xs, identity)

    return CommutativeMonoid(semigroup, identity, _concat)


def for_appendable(empty: A) -> Monoid[A]:
    """Monoid for a type whose ``+`` appends (str, bytes, tuple, list).

    ``concat`` uses ``join`` for text and bytes, and a single chained copy
    for tuples and lists, so it stays linear in the total length.

    Args:
        empty: The empty value of the type, used as the identity.
    """
    if isinstance(empty, (str, bytes)):
        join = empty.join

        def _concat(xs: Sequence[A]) -> A:
            return join(xs)
    elif isinstance(empty, (tuple, list)):
        kind = type(empty)

        def _concat(xs: Sequence[A]) -> A:
            return kind(chain(empty, *xs))
    else:
        def _concat(xs: Sequence[A]) -> A:
            return reduce(lambda x, y: x + y, xs, empty)

    return Monoid(semigroups.from_associative_op(lambda x, y: x + y), empty, _concat)


def product(
    first: Monoid[A] | CommutativeMonoid[A],
    second: Monoid[B] | CommutativeMonoid[B],
) -> Monoid[tuple[A, B]]:
    """Monoid on pairs, component-wise."""
    def _concat(xs: Sequence[tuple[A, B]]) -> tuple[A, B]:
        pairs = list(xs)
        return first.concat([p[0] for p in pairs]), second.concat([p[1] for p in pairs])

    return Monoid(
        semigroups.product(first.semigroup, second.semigroup),
        (first.identity, second.identity),
        _concat,
    )


def task(inner: Monoid[A] | CommutativeMonoid[A]) -> Monoid[Task[A]]:
    """Sequence asynchronous computations under ``inner``.

    Semantics:
        - ``concat`` runs every Task to completion with asyncio.gather
        - The results are then combined, in argument order, by ``inner.concat``
        - The identity completes immediately with ``inner.identity``
    """
    def _concat(xs: Sequence[Task[A]]) -> Task[A]:
        return tasks.combine(xs, inner.concat)

    return Monoid(semigroups.task(inner.semigroup), tasks.pure(inner.identity), _concat)


def modular(n: int) -> CommutativeMonoid[int]:
    """Addition modulo ``n`` with identity 0."""
    semigroup = semigroups.modular(n)
    return CommutativeMonoid(semigroup, 0, lambda xs: sum(xs) % n)


def minimum(top: A) -> CommutativeMonoid[A]:
    """Smallest value; ``top`` must compare greater or equal to every value."""
    return CommutativeMonoid(semigroups.minimum, top, lambda xs: min(chain((top,), xs)))


def maximum(bottom: A) -> CommutativeMonoid[A]:
    """Largest value; ``bottom`` must compare less or equal to every value."""
    return CommutativeMonoid(semigroups.maximum, bottom, lambda xs: max(chain((bottom,), xs)))


def _first(xs: Sequence[Any]) -> Any:
    return next((x for x in xs if x is not None), None)


def _last(xs: Sequence[Any]) -> Any:
    return next((x for x in reversed(list(xs)) if x is not None), None)


def _identity(x: A) -> A:
    return x


# Left fold; the builtin sum rounds floats differently on 3.12+.
additive: CommutativeMonoid[Any] = from_commutative_semigroup_and_identity(semigroups.additive, 0)
multiplicative: CommutativeMonoid[Any] = CommutativeMonoid(semigroups.multiplicative, 1, math.prod)

string: Monoid[str] = for_appendable("")
# Tuples, so the shared identity cannot be mutated.
list_append: Monoid[tuple[Any, ...]] = for_appendable(())

first: Monoid[Any] = Monoid(semigroups.first, None, _first)
last: Monoid[Any] = Monoid(semigroups.last, None, _last)

set_union: CommutativeMonoid[frozenset[Any]] = CommutativeMonoid(
    semigroups.set_union, frozenset(), lambda xs: frozenset().union(*xs)
)
# Kept for compatibility. The empty set is only a right identity here and the
# operation is not associative; see semigroup.set_difference.
set_difference: Monoid[frozenset[Any]] = from_semigroup_and_identity(
    semigroups.set_difference, frozenset()
)

effects: Monoid[Effects] = from_identity_and_concat(Effects.none(), Effects.batch)

conjunction: CommutativeMonoid[bool] = CommutativeMonoid(semigroups.conjunction, True, all)
disjunction: CommutativeMonoid[bool] = CommutativeMonoid(semigroups.disjunction, False, any)
xor: CommutativeMonoid[bool] = from_commutative_semigroup_and_identity(semigroups.xor, False)

composition: Monoid[Callable[[Any], Any]] = from_semigroup_and_identity(
    semigroups.composition, _identity
)

unit: CommutativeMonoid[None] = CommutativeMonoid(semigroups.unit, None, lambda xs: None)
