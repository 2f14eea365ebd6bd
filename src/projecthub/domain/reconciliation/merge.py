"""Merge policy for a project's stored contributions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from projecthub.domain.model import Contribution


def merge_contributions(
    existing: Iterable[Contribution] | None,
    batch: Iterable[Contribution],
) -> list[Contribution]:
    """Return the contributions a project should hold after a pass.

    The latest feed batch is the source of truth: ``batch`` (already filtered to
    the project's patterns by the caller) replaces ``existing`` outright, so
    entries missing from the latest fetch are dropped.
    """

    _ = existing
    return list(batch)
