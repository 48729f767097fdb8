"""
The contract between the selection flow and whatever asks the user questions.

Every prompt returns either ``Choice(value)`` or ``Cancelled()``; the flow
checks each result explicitly instead of relying on exceptions to unwind.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Choice(Generic[T]):
    value: T


@dataclass(frozen=True)
class Cancelled:
    pass


class Prompter(Protocol):
    """Interactive prompts used by the selection flow."""

    def select(
        self, message: str, labels: Sequence[str], default: int = 0
    ) -> "Choice[int] | Cancelled":
        """Single choice; returns the index of the chosen label."""
        ...

    def select_many(
        self, message: str, labels: Sequence[str]
    ) -> "Choice[list[int]] | Cancelled":
        """Multiple choice; returns the chosen indexes, possibly none."""
        ...

    def text(self, message: str, default: str = "") -> "Choice[str] | Cancelled":
        ...

    def confirm(self, message: str, default: bool) -> "Choice[bool] | Cancelled":
        ...
