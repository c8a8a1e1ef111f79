from . import group, laws, monoid, ring, semigroup, task
from .effect import Command, Effects
from .group import AbelianGroup, Group
from .monoid import CommutativeMonoid, Monoid
from .ring import CommutativeRing, Ring
from .semigroup import CommutativeSemigroup, Semigroup
from .task import Task

__all__ = [
    # Structures
    "Semigroup",
    "CommutativeSemigroup",
    "Monoid",
    "CommutativeMonoid",
    "Group",
    "AbelianGroup",
    "Ring",
    "CommutativeRing",
    # Host collaborators
    "Command",
    "Effects",
    "Task",
    # Modules with constructors and instances
    "semigroup",
    "monoid",
    "group",
    "ring",
    "task",
    "laws",
]
