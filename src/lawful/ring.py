"""Ring - an additive abelian group paired with a multiplicative monoid."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, overload

from lawful import group as groups
from lawful import monoid as monoids
from lawful import semigroup as semigroups
from lawful.group import AbelianGroup
from lawful.monoid import CommutativeMonoid, Monoid

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Ring(Generic[A]):
    """A named pairing of addition and multiplication over ``A``.

    Laws (caller obligation, never checked):
        multiply(a, add(b, c)) == add(multiply(a, b), multiply(a, c))
        multiply(add(a, b), c) == add(multiply(a, c), multiply(b, c))

    Attributes:
        addition: The additive abelian group
        multiplication: The multiplicative monoid
    """

    addition: AbelianGroup[A]
    multiplication: Monoid[A]

    @property
    def zero(self) -> A:
        return self.addition.identity

    @property
    def one(self) -> A:
        return self.multiplication.identity

    def add(self, x: A, y: A) -> A:
        return self.addition.prepend(x, y)

    def multiply(self, x: A, y: A) -> A:
        return self.multiplication.prepend(x, y)

    def negate(self, x: A) -> A:
        return self.addition.inverse(x)

    def subtract(self, x: A, y: A) -> A:
        return self.addition.subtract(x, y)

    def map(self, a_to_b: Callable[[A], B], b_to_a: Callable[[B], A]) -> Ring[B]:
        """Carry both operations over to ``B`` through a bijection."""
        return Ring(
            addition=self.addition.map(a_to_b, b_to_a),
            multiplication=self.multiplication.map(a_to_b, b_to_a),
        )


@dataclass(frozen=True)
class CommutativeRing(Generic[A]):
    """A ring whose multiplication commutes."""

    addition: AbelianGroup[A]
    multiplication: CommutativeMonoid[A]

    @property
    def zero(self) -> A:
        return self.addition.identity

    @property
    def one(self) -> A:
        return self.multiplication.identity

    @property
    def ring(self) -> Ring[A]:
        """This ring with the commutativity tag dropped."""
        return Ring(self.addition, self.multiplication.monoid)

    def add(self, x: A, y: A) -> A:
        return self.addition.prepend(x, y)

    def multiply(self, x: A, y: A) -> A:
        return self.multiplication.prepend(x, y)

    def negate(self, x: A) -> A:
        return self.addition.inverse(x)

    def subtract(self, x: A, y: A) -> A:
        return self.addition.subtract(x, y)

    def map(self, a_to_b: Callable[[A], B], b_to_a: Callable[[B], A]) -> CommutativeRing[B]:
        return CommutativeRing(
            addition=self.addition.map(a_to_b, b_to_a),
            multiplication=self.multiplication.map(a_to_b, b_to_a),
        )


@overload
def from_addition_and_multiplication(
    addition: AbelianGroup[A], multiplication: CommutativeMonoid[A]
) -> CommutativeRing[A]: ...


@overload
def from_addition_and_multiplication(
    addition: AbelianGroup[A], multiplication: Monoid[A]
) -> Ring[A]: ...


def from_addition_and_multiplication(
    addition: AbelianGroup[A], multiplication: Monoid[A] | CommutativeMonoid[A]
) -> Ring[A] | CommutativeRing[A]:
    """Pair an abelian group with a monoid over the same type.

    Nothing new is asserted and nothing is checked: choosing two structures
    where multiplication distributes over addition is up to the caller.
    """
    if isinstance(multiplication, CommutativeMonoid):
        return CommutativeRing(addition, multiplication)
    return Ring(addition, multiplication)


def modular(n: int) -> CommutativeRing[int]:
    """Integers modulo ``n``; for ``n == 1`` this is the zero ring."""
    addition = groups.modular(n)
    multiplication = monoids.from_commutative_semigroup_and_identity(
        semigroups.from_commutative_op(lambda x, y: x * y % n), 1 % n
    )
    return CommutativeRing(addition, multiplication)


numeric: CommutativeRing[Any] = from_addition_and_multiplication(
    groups.additive, monoids.multiplicative
)
unit: CommutativeRing[None] = from_addition_and_multiplication(groups.unit, monoids.unit)
# The Boolean ring: exclusive-or is addition, logical and is multiplication.
xor: CommutativeRing[bool] = from_addition_and_multiplication(groups.xor, monoids.conjunction)
