"""Group and AbelianGroup - monoids in which every element has an inverse."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, overload

from lawful import monoid as monoids
from lawful.monoid import CommutativeMonoid, Monoid

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Group(Generic[A]):
    """A monoid plus an inverse.

    Law (caller obligation, never checked):
        prepend(x, inverse(x)) == identity == prepend(inverse(x), x)

    Attributes:
        monoid: The underlying monoid
        inverse: Sends each element to its inverse
    """

    monoid: Monoid[A]
    inverse: Callable[[A], A]

    @property
    def identity(self) -> A:
        return self.monoid.identity

    def prepend(self, x: A, y: A) -> A:
        return self.monoid.prepend(x, y)

    def concat(self, xs: Sequence[A]) -> A:
        return self.monoid.concat(xs)

    def subtract(self, x: A, y: A) -> A:
        """``x`` combined with the inverse of ``y``."""
        return self.monoid.prepend(x, self.inverse(y))

    def power(self, x: A, n: int) -> A:
        """``x`` combined with itself ``n`` times; negative ``n`` repeats the inverse."""
        if n < 0:
            return self.monoid.power(self.inverse(x), -n)
        return self.monoid.power(x, n)

    def map(self, a_to_b: Callable[[A], B], b_to_a: Callable[[B], A]) -> Group[B]:
        """Carry this group over to ``B``; the inverse is conjugated by the bijection."""
        return Group(
            monoid=self.monoid.map(a_to_b, b_to_a),
            inverse=_map_inverse(self.inverse, a_to_b, b_to_a),
        )


@dataclass(frozen=True)
class AbelianGroup(Generic[A]):
    """A group over a commutative monoid."""

    monoid: CommutativeMonoid[A]
    inverse: Callable[[A], A]

    @property
    def identity(self) -> A:
        return self.monoid.identity

    @property
    def group(self) -> Group[A]:
        """This group with the commutativity tag dropped."""
        return Group(self.monoid.monoid, self.inverse)

    def prepend(self, x: A, y: A) -> A:
        return self.monoid.prepend(x, y)

    def concat(self, xs: Sequence[A]) -> A:
        return self.monoid.concat(xs)

    def subtract(self, x: A, y: A) -> A:
        return self.monoid.prepend(x, self.inverse(y))

    def power(self, x: A, n: int) -> A:
        return self.group.power(x, n)

    def map(self, a_to_b: Callable[[A], B], b_to_a: Callable[[B], A]) -> AbelianGroup[B]:
        return AbelianGroup(
            monoid=self.monoid.map(a_to_b, b_to_a),
            inverse=_map_inverse(self.inverse, a_to_b, b_to_a),
        )


def _map_inverse(
    inverse: Callable[[A], A],
    a_to_b: Callable[[A], B],
    b_to_a: Callable[[B], A],
) -> Callable[[B], B]:
    def _inverse(x: B) -> B:
        return a_to_b(inverse(b_to_a(x)))

    return _inverse


@overload
def from_monoid_and_inverse(
    monoid: CommutativeMonoid[A], inverse: Callable[[A], A]
) -> AbelianGroup[A]: ...


@overload
def from_monoid_and_inverse(monoid: Monoid[A], inverse: Callable[[A], A]) -> Group[A]: ...


def from_monoid_and_inverse(
    monoid: Monoid[A] | CommutativeMonoid[A], inverse: Callable[[A], A]
) -> Group[A] | AbelianGroup[A]:
    """Pair a monoid with its inverse.

    A commutative monoid gives an AbelianGroup, any other monoid a Group.
    """
    if isinstance(monoid, CommutativeMonoid):
        return AbelianGroup(monoid, inverse)
    return Group(monoid, inverse)


def abelian(monoid: CommutativeMonoid[A], inverse: Callable[[A], A]) -> AbelianGroup[A]:
    return AbelianGroup(monoid, inverse)


def modular(n: int) -> AbelianGroup[int]:
    """Integers modulo ``n`` under addition."""
    return abelian(monoids.modular(n), lambda x: -x % n)


def _self_inverse(x: A) -> A:
    return x


additive: AbelianGroup[Any] = abelian(monoids.additive, operator.neg)
# Every boolean is its own inverse under exclusive-or.
xor: AbelianGroup[bool] = abelian(monoids.xor, _self_inverse)
unit: AbelianGroup[None] = abelian(monoids.unit, lambda x: None)
