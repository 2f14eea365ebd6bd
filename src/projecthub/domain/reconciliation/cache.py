"""Process-wide snapshot of the contributions no project claimed."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from projecthub.domain.model import Contribution


class UnassignedContributionCache:
    """Holds the unassigned set of the last completed pass.

    Writers build a complete tuple and swap the reference; the tuple itself is
    never mutated, so readers always see one pass's full result.
    """

    __slots__ = ("_snapshot",)

    def __init__(self) -> None:
        self._snapshot: tuple[Contribution, ...] = ()

    def publish(self, contributions: Iterable[Contribution]) -> None:
        self._snapshot = tuple(contributions)

    def snapshot(self) -> tuple[Contribution, ...]:
        return self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)
