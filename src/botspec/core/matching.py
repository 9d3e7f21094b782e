"""Regex matching and group aggregation logic (core domain).

Every assertion in botspec ends up here. Matching is always
case-insensitive and uses search semantics, so a pattern may match anywhere
in the value. Values that are None never match; patterns that are None are a
caller error.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Callable, Iterable, List, Optional, TypeVar

from botspec.core.errors import require

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

Accessor = Callable[[T], Optional[str]]


@dataclass(frozen=True)
class MatchOutcome:
    """Result of one match attempt.

    ``groups`` is None when no group pattern was given or when it captured
    nothing; an empty list means it matched but held no capturing groups.
    """

    matched: bool
    groups: Optional[List[str]] = None


NO_MATCH = MatchOutcome(matched=False)


def _search(value: str, pattern: str) -> bool:
    return re.search(pattern, value, re.IGNORECASE) is not None


def extract_groups(value: str, group_pattern: str) -> Optional[List[str]]:
    """Collect every capturing group of every occurrence of ``group_pattern``.

    Occurrences are scanned left to right and never overlap. Groups that did
    not take part in an occurrence are skipped. Returns None when the
    pattern does not occur at all.
    """

    occurrences = list(re.finditer(group_pattern, value, re.IGNORECASE))
    if not occurrences:
        return None

    groups: List[str] = []
    for occurrence in occurrences:
        groups.extend(group for group in occurrence.groups() if group is not None)
    return groups


def is_match(value: Optional[str], pattern: Optional[str]) -> bool:
    """Return True when ``value`` matches ``pattern``."""

    pattern = require("regex", pattern)
    if value is None:
        return False
    return _search(value, pattern)


def match_with_groups(
    value: Optional[str], pattern: Optional[str], group_pattern: Optional[str]
) -> MatchOutcome:
    """Match ``value`` and, on success, capture groups with ``group_pattern``."""

    pattern = require("regex", pattern)
    group_pattern = require("group_regex", group_pattern)
    if value is None or not _search(value, pattern):
        return NO_MATCH
    return MatchOutcome(matched=True, groups=extract_groups(value, group_pattern))


def aggregate_groups(outcomes: Iterable[MatchOutcome]) -> Optional[List[str]]:
    """Concatenate captured groups in iteration order.

    Returns None when no outcome carried groups, so callers can tell
    "nothing captured" from "captured an empty list".
    """

    aggregated: Optional[List[str]] = None
    for outcome in outcomes:
        if outcome.groups is None:
            continue
        if aggregated is None:
            aggregated = []
        aggregated.extend(outcome.groups)
    return aggregated


def match_any(candidates: Iterable[T], accessor: Accessor, pattern: Optional[str]) -> bool:
    """Return True when at least one candidate's value matches ``pattern``.

    Candidates whose value is None are skipped and never count as a match.
    """

    pattern = require("regex", pattern)
    matched = False
    for candidate in candidates:
        value = accessor(candidate)
        if value is None:
            LOGGER.debug("Skipping candidate without a value: %r", candidate)
            continue
        # No short-circuit: every candidate is evaluated.
        matched = is_match(value, pattern) or matched
    return matched


def match_any_with_groups(
    candidates: Iterable[T],
    accessor: Accessor,
    pattern: Optional[str],
    group_pattern: Optional[str],
) -> MatchOutcome:
    """Match every candidate and aggregate groups from all that matched."""

    pattern = require("regex", pattern)
    group_pattern = require("group_regex", group_pattern)

    outcomes: List[MatchOutcome] = []
    for candidate in candidates:
        value = accessor(candidate)
        if value is None:
            LOGGER.debug("Skipping candidate without a value: %r", candidate)
            continue
        outcomes.append(match_with_groups(value, pattern, group_pattern))

    if not any(outcome.matched for outcome in outcomes):
        return NO_MATCH
    return MatchOutcome(matched=True, groups=aggregate_groups(outcomes))
