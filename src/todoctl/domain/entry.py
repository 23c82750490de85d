"""Entry: the todo value type.

Two entries are equal when their ``text`` is equal; identity never
matters.  The model is frozen so a stored entry can't drift from the
key it was stored under.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel


class Entry(BaseModel):
    """A single todo item.

    No validation beyond the type of ``text`` happens here.  Rejecting
    blank input is the caller's job before construction.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    text: str

    @classmethod
    def create(cls, text: str) -> Self:
        """Positional constructor: ``Entry.create("Buy milk")``."""
        return cls(text=text)

    def equals(self, other: object) -> bool:
        """Value comparison, spelled out for callers that prefer a method."""
        return isinstance(other, Entry) and self.text == other.text

    def __str__(self) -> str:
        return self.text
