from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

from .errors import EmptyAccess
from .logger import get_logger

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(Generic[T]):
    """A value that is either present (``Some(value)``) or absent (``NONE``).

    Operations dispatch on ``is_some()``; there are exactly two variants and
    both are immutable, so every transform returns a new option.
    """

    __slots__ = ()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def map(self, f: Callable[[T], Optional[U]]) -> "Option[U]":
        """Apply ``f`` to a present value. A ``None`` result becomes ``NONE``."""
        if self.is_some():
            return from_nullable(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        """Apply ``f`` to a present value and return its option unchanged."""
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE

    def and_then(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        # alias, always goes through flat_map
        return self.flat_map(f)

    def and_(self, other: "Option[U]") -> "Option[U]":
        if self.is_some():
            return other
        return NONE

    def unwrap(self) -> T:
        """Return the value, or raise :class:`EmptyAccess` when absent."""
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        get_logger().debug("unwrap on empty option")
        raise EmptyAccess().annotate("op=unwrap")

    get = unwrap

    def unwrap_or(self, default: U) -> T | U:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    or_ = unwrap_or
    get_or_else = unwrap_or

    def try_unwrap(self) -> Result[EmptyAccess, T]:
        if self.is_some():
            return Ok(self.value)  # type: ignore[attr-defined]
        return Err(EmptyAccess().annotate("op=try_unwrap"))

    def ok_or(self, error: E) -> Result[E, T]:
        if self.is_some():
            return Ok(self.value)  # type: ignore[attr-defined]
        return Err(error)


@dataclass(frozen=True, repr=False)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True
    def __repr__(self) -> str: return f"Some({self.value!r})"


class _None(Option[Any]):
    __slots__ = ()
    _instance: Optional["_None"] = None

    def __new__(cls) -> "_None":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "None"
    def is_some(self) -> bool: return False

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"cannot set {name!r} on None")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"cannot delete {name!r} on None")

    def __copy__(self) -> "_None": return self
    def __deepcopy__(self, memo: dict) -> "_None": return self
    def __reduce__(self) -> str: return "NONE"


NONE: Option[Any] = _None()


def none() -> Option[Any]:
    return NONE


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE


from_unsafe = from_nullable


def all_present(items: Iterable[Option[T]]) -> Option[List[T]]:
    """Collect the values of ``items`` into ``Some(list)``.

    The first absent item makes the whole result ``NONE``; the rest of the
    iterable is not consumed.
    """
    values: List[T] = []
    for i, item in enumerate(items):
        if item.is_none():
            get_logger().debug("all_present short-circuited", index=i)
            return NONE
        values.append(item.unwrap())
    return Some(values)


# imported last: result.py needs Option, NONE and from_nullable from this module
from .result import Result, Ok, Err
