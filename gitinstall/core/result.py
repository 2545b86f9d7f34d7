# SPDX-License-Identifier: MIT
"""Minimal Result type for expected failures.

Services return ``Ok(value)`` or ``Err(error)`` instead of raising, and callers
pattern-match on the variant:

    match service.run(config):
        case Ok(outcome): ...
        case Err(e): ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["Err", "Ok", "Result"]

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


Result = Ok[T] | Err[E]
