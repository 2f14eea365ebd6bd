"""Repository URL normalization and pattern matching.

Patterns are either literal repository references or globs where ``*`` stands
for any run of characters. Both the queried URL and every pattern go through
:func:`normalize_repository_url` before comparison. Literal patterns are checked
first and short-circuit glob evaluation.
"""

from __future__ import annotations

import re
from functools import cache
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

WILDCARD: Final[str] = "*"

_SCHEME_RE: Final[re.Pattern[str]] = re.compile(r"^https?://", re.IGNORECASE)


def normalize_repository_url(value: str) -> str:
    """Return the canonical comparison form of a repository URL or pattern."""

    normalized = value.lower().strip()
    normalized = _SCHEME_RE.sub("", normalized, count=1)
    if normalized.endswith("/"):
        normalized = normalized[:-1]
    return normalized


@cache
def compile_glob(normalized_pattern: str) -> re.Pattern[str]:
    """Compile a normalized glob into an anchored regular expression."""

    literal_parts = (re.escape(part) for part in normalized_pattern.split(WILDCARD))
    return re.compile(".*".join(literal_parts), re.DOTALL)


def is_glob(pattern: str) -> bool:
    return WILDCARD in pattern


def matches_repository(repository_url: str, patterns: Iterable[str] | None) -> bool:
    """Return whether ``repository_url`` is claimed by any of ``patterns``."""

    if not patterns:
        return False

    normalized_patterns = [normalize_repository_url(pattern) for pattern in patterns]
    if not normalized_patterns:
        return False

    query = normalize_repository_url(repository_url)

    if any(query == pattern for pattern in normalized_patterns if not is_glob(pattern)):
        return True

    return any(
        compile_glob(pattern).fullmatch(query) is not None
        for pattern in normalized_patterns
        if is_glob(pattern)
    )


__all__ = ["compile_glob", "is_glob", "matches_repository", "normalize_repository_url"]
