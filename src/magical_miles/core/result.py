"""Explicit success/failure results for calls to unreliable external services.

External capabilities (routing, AI text generation) fail routinely. Their
adapters convert the failures they know about into a ``Failure`` so callers
branch on the outcome instead of wrapping every call in ``try``/``except``.
Anything unexpected still raises.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    reason: str
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return False


Result = Success[T] | Failure
