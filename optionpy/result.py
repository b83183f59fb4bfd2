from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .option import Option, NONE, from_nullable

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")


class Result(Generic[E, A]):
    """Typed outcome of a checked extraction: ``Ok(value)`` or ``Err(error)``."""

    def is_ok(self) -> bool: raise NotImplementedError
    def is_err(self) -> bool: return not self.is_ok()

    def map(self, f: Callable[[A], B]) -> "Result[E, B]":
        if self.is_ok():
            return Ok(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_err(self, f: Callable[[E], B]) -> "Result[B, A]":
        if self.is_err():
            return Err(f(self.error))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def and_then(self, f: Callable[[A], "Result[E, B]"]) -> "Result[E, B]":
        if self.is_ok():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_ok() else default  # type: ignore[attr-defined]

    def unwrap(self) -> A:
        if self.is_ok():
            return self.value  # type: ignore[attr-defined]
        err = self.error  # type: ignore[attr-defined]
        if isinstance(err, BaseException):
            raise err
        raise ValueError(err)

    def to_option(self) -> "Option[A]":
        if self.is_ok():
            return from_nullable(self.value)  # type: ignore[attr-defined]
        return NONE  # type: ignore[return-value]


@dataclass(frozen=True, repr=False)
class Ok(Result[E, A]):
    value: A
    def is_ok(self) -> bool: return True
    def __repr__(self) -> str: return f"Ok({self.value!r})"


@dataclass(frozen=True, repr=False)
class Err(Result[E, A]):
    error: E
    def is_ok(self) -> bool: return False
    def __repr__(self) -> str: return f"Err({self.error!r})"
