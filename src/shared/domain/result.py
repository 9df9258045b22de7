"""Tagged result primitive for service-layer use cases.

A use case that can fail for a *business* reason returns either
``Ok(value)`` or ``Err(error)`` instead of raising, so callers have to
look at both outcomes.  ``error`` is always an exception instance: the
caller may inspect it, or call ``unwrap()`` to re-enter the exception
channel.

Programming errors are never wrapped; they propagate as usual.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying the domain ``error``."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Ok[T], Err[E]]
