from __future__ import annotations
from typing import Optional


class OptionError(Exception):
    """Base class for errors raised by optionpy."""


class EmptyAccess(OptionError, LookupError):
    """Raised when the value of an absent option is read."""

    def __init__(self, message: str = "Cannot get value of None", annotations: Optional[list[str]] = None):
        super().__init__(message); self.message = message; self.annotations = list(annotations or [])

    def annotate(self, note: str) -> "EmptyAccess":
        return EmptyAccess(self.message, self.annotations + [note])

    def render(self, indent: str = "") -> str:
        out = "".join(indent + "@ " + n + "\n" for n in self.annotations)
        return out + indent + f"EmptyAccess({self.message!r})\n"
