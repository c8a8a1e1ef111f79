"""Semigroup - a type with one associative binary operation.

Instances are plain values. A ``Semigroup[A]`` is a record holding
``prepend``; nothing is resolved through the type of ``A``, so two different
semigroups over the same type (sum and product over numbers) live side by side.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from functools import reduce
from typing import Any, Generic, TypeVar

from lawful import task as tasks
from lawful.task import Task

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Semigroup(Generic[A]):
    """A record holding one binary operation over ``A``.

    Law (caller obligation, never checked):
        prepend(prepend(x, y), z) == prepend(x, prepend(y, z))

    Attributes:
        prepend: The associative operation.
    """

    prepend: Callable[[A, A], A]

    def sconcat(self, first: A, rest: Iterable[A] = ()) -> A:
        """Fold a non-empty sequence, given as head and tail, from the left."""
        return reduce(self.prepend, rest, first)

    def repeat(self, x: A, n: int) -> A:
        """Combine ``x`` with itself ``n`` times.

        Uses repeated doubling, so it takes O(log n) calls to ``prepend``.

        Args:
            x: The value to repeat
            n: Number of copies (must be > 0)

        Returns:
            ``x`` prepended to itself ``n - 1`` times
        """
        if n < 1:
            raise ValueError("n must be positive")

        result = base = x
        n -= 1
        while n:
            if n & 1:
                result = self.prepend(result, base)
            n >>= 1
            if n:
                base = self.prepend(base, base)
        return result

    def dual(self) -> Semigroup[A]:
        """The same operation with its operands flipped."""
        prepend = self.prepend
        return Semigroup(lambda x, y: prepend(y, x))

    def map(self, a_to_b: Callable[[A], B], b_to_a: Callable[[B], A]) -> Semigroup[B]:
        """Carry this semigroup over to ``B`` through a bijection.

        ``prepend`` on ``B`` converts both operands back to ``A``, combines
        them there, and converts the result forward. Associativity on ``B``
        only holds if ``b_to_a(a_to_b(x)) == x`` for all x; that is not checked.
        """
        prepend = self.prepend

        def _prepend(x: B, y: B) -> B:
            return a_to_b(prepend(b_to_a(x), b_to_a(y)))

        return Semigroup(_prepend)


@dataclass(frozen=True)
class CommutativeSemigroup(Generic[A]):
    """A semigroup whose operation also commutes.

    Law (caller obligation, never checked):
        prepend(x, y) == prepend(y, x)

    This wraps a ``Semigroup`` rather than extending it, so code that needs
    commutativity can ask for this type and a merely associative instance
    does not satisfy it.
    """

    semigroup: Semigroup[A]

    def prepend(self, x: A, y: A) -> A:
        return self.semigroup.prepend(x, y)

    def sconcat(self, first: A, rest: Iterable[A] = ()) -> A:
        return self.semigroup.sconcat(first, rest)

    def repeat(self, x: A, n: int) -> A:
        return self.semigroup.repeat(x, n)

    def map(
        self, a_to_b: Callable[[A], B], b_to_a: Callable[[B], A]
    ) -> CommutativeSemigroup[B]:
        return CommutativeSemigroup(self.semigroup.map(a_to_b, b_to_a))


def from_associative_op(op: Callable[[A, A], A]) -> Semigroup[A]:
    """Wrap a binary function the caller promises is associative."""
    return Semigroup(op)


def from_commutative_op(op: Callable[[A, A], A]) -> CommutativeSemigroup[A]:
    """Wrap a binary function the caller promises is associative and commutative."""
    return CommutativeSemigroup(Semigroup(op))


def commutative(semigroup: Semigroup[A]) -> CommutativeSemigroup[A]:
    """Tag an existing semigroup as commutative."""
    return CommutativeSemigroup(semigroup)


def concat_operation(concat_fn: Callable[[Sequence[A]], A]) -> Semigroup[A]:
    """Derive ``prepend(x, y)`` as ``concat_fn([x, y])``.

    For structures that are naturally defined over whole sequences.
    """
    def _prepend(x: A, y: A) -> A:
        return concat_fn([x, y])

    return Semigroup(_prepend)


def product(
    first: Semigroup[A] | CommutativeSemigroup[A],
    second: Semigroup[B] | CommutativeSemigroup[B],
) -> Semigroup[tuple[A, B]]:
    """Semigroup on pairs, combining each component with its own semigroup."""
    def _prepend(x: tuple[A, B], y: tuple[A, B]) -> tuple[A, B]:
        return first.prepend(x[0], y[0]), second.prepend(x[1], y[1])

    return Semigroup(_prepend)


def task(inner: Semigroup[A] | CommutativeSemigroup[A]) -> Semigroup[Task[A]]:
    """Compose two asynchronous computations into one.

    The combined Task runs both through asyncio.gather and prepends their
    results with ``inner``, left operand first.
    """
    def _prepend(x: Task[A], y: Task[A]) -> Task[A]:
        return tasks.combine((x, y), lambda results: inner.prepend(results[0], results[1]))

    return Semigroup(_prepend)


def modular(n: int) -> CommutativeSemigroup[int]:
    """Addition modulo ``n``.

    Raises:
        ValueError: If n is less than 1
    """
    if n < 1:
        raise ValueError("modulus must be positive")
    return from_commutative_op(lambda x, y: (x + y) % n)


def _first(x: A | None, y: A | None) -> A | None:
    return y if x is None else x


def _last(x: A | None, y: A | None) -> A | None:
    return x if y is None else y


def _compose(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    def inner(x: A) -> C:
        return f(g(x))

    return inner


def _unit(x: None, y: None) -> None:
    return None


additive: CommutativeSemigroup[Any] = from_commutative_op(operator.add)
multiplicative: CommutativeSemigroup[Any] = from_commutative_op(operator.mul)
minimum: CommutativeSemigroup[Any] = from_commutative_op(min)
maximum: CommutativeSemigroup[Any] = from_commutative_op(max)

string: Semigroup[str] = from_associative_op(operator.add)
list_append: Semigroup[list[Any]] = from_associative_op(operator.add)

# Optional values: None is absent. The left present value wins.
first: Semigroup[Any] = from_associative_op(_first)
last: Semigroup[Any] = from_associative_op(_last)

set_union: CommutativeSemigroup[frozenset[Any]] = from_commutative_op(operator.or_)
# prepend(x, y) == x - y: x is the outer set, y is removed from it.
# NOT associative: (x - y) - z == x - (y | z), while x - (y - z) keeps y & z.
set_difference: Semigroup[frozenset[Any]] = from_associative_op(operator.sub)

conjunction: CommutativeSemigroup[bool] = from_commutative_op(operator.and_)
disjunction: CommutativeSemigroup[bool] = from_commutative_op(operator.or_)
xor: CommutativeSemigroup[bool] = from_commutative_op(operator.xor)

# prepend(f, g) is f after g.
composition: Semigroup[Callable[[Any], Any]] = from_associative_op(_compose)

unit: CommutativeSemigroup[None] = from_commutative_op(_unit)
