"""Reconciliation of upstream contributions against the project catalog.

Flow of one pass:
1) fetch the full contribution batch from the feed port
2) read the project catalog
3) partition the batch by repository pattern matching
4) merge each project's filtered batch into its stored contributions
5) publish the unassigned remainder to the in-process cache
"""

from __future__ import annotations

from .cache import UnassignedContributionCache
from .engine import ReconciliationEngine, ReconciliationResult
from .matching import matches_repository, normalize_repository_url
from .merge import merge_contributions
from .partition import ContributionPartition, partition_contributions

__all__ = [
    "ContributionPartition",
    "ReconciliationEngine",
    "ReconciliationResult",
    "UnassignedContributionCache",
    "matches_repository",
    "merge_contributions",
    "normalize_repository_url",
    "partition_contributions",
]
