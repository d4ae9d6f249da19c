"""
In-process search predicate shared by every resource.

``matches`` decides whether one stored record satisfies a set of optional
criteria.  It is pure and total: a record with a missing or non-numeric
field fails the corresponding check instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class SearchCriteria:
    """Optional constraints, all of which must hold.

    ``contains`` maps a field path to a case-insensitive substring.
    ``at_least`` maps a field path to an inclusive numeric lower bound.
    Paths may be dotted to reach nested records (``category.name``).
    """

    contains: Mapping[str, Optional[str]] = field(default_factory=dict)
    at_least: Mapping[str, Optional[float]] = field(default_factory=dict)

    @property
    def name_hint(self) -> Optional[str]:
        return self.contains.get("name") or None


def _lookup(item: Mapping[str, Any], path: str) -> Any:
    value: Any = item
    for part in path.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(part)
    return value


def _contains(value: Any, needle: str) -> bool:
    if value is None:
        return False
    return needle.casefold() in str(value).casefold()


def _at_least(value: Any, bound: float) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return float(value) >= bound
    except (TypeError, ValueError):
        return False


def matches(item: Mapping[str, Any], criteria: SearchCriteria) -> bool:
    for path, needle in criteria.contains.items():
        if needle and not _contains(_lookup(item, path), needle):
            return False
    for path, bound in criteria.at_least.items():
        if bound and not _at_least(_lookup(item, path), bound):
            return False
    return True
