"""Effect descriptors - pure data describing side effects for a host to run."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from itertools import chain
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, field_validator


class Command(BaseModel):
    """One side effect, by name and arguments.

    ``args`` accepts a mapping and is stored as key-sorted pairs, so equal
    commands hash equally whenever their argument values are hashable.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    args: tuple[tuple[str, Any], ...] = ()

    @field_validator("args", mode="before")
    @classmethod
    def _freeze_args(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(sorted(value.items()))
        return value

    def kwargs(self) -> dict[str, Any]:
        """The arguments as a fresh dict."""
        return dict(self.args)


class Effects(BaseModel):
    """An ordered batch of commands.

    Nothing here runs a command. A batch is an opaque value the host
    interprets; the library only builds and joins them.
    """

    model_config = ConfigDict(frozen=True)

    commands: tuple[Command, ...] = ()

    @classmethod
    def none(cls) -> Self:
        """The empty batch: performing it does nothing."""
        return cls()

    @classmethod
    def of(cls, name: str, **args: Any) -> Self:
        return cls(commands=(Command(name=name, args=args),))

    @classmethod
    def batch(cls, batches: Iterable[Effects]) -> Self:
        """Join batches into one, keeping command order."""
        return cls(commands=tuple(chain.from_iterable(b.commands for b in batches)))

    def is_empty(self) -> bool:
        return not self.commands
