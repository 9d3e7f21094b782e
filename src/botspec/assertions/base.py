"""Shared plumbing for the fluent assertion classes.

Each concrete assertion class only picks a property and a failure type; the
matching itself always goes through ``botspec.core.matching``.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Type

from botspec.core import matching
from botspec.core.errors import AssertionFailedError, InvalidArgumentError, failure_factory, require


class ObjectAssertions:
    """Assertions over the string properties of one object."""

    error_type: Type[AssertionFailedError] = AssertionFailedError

    def __init__(self, subject: Any, argument_name: str = "subject") -> None:
        if subject is None:
            raise InvalidArgumentError(argument_name)
        self._subject = subject

    def _matching(self, property_name: str, value: Optional[str], regex: Optional[str]):
        regex = require("regex", regex)
        if not matching.is_match(value, regex):
            raise failure_factory(self.error_type, property_name, regex)()
        return self

    def _matching_groups(
        self,
        property_name: str,
        value: Optional[str],
        regex: Optional[str],
        group_regex: Optional[str],
    ) -> Optional[List[str]]:
        regex = require("regex", regex)
        group_regex = require("group_regex", group_regex)
        outcome = matching.match_with_groups(value, regex, group_regex)
        if not outcome.matched:
            raise failure_factory(self.error_type, property_name, regex)()
        return outcome.groups


class SetAssertions:
    """Assertions that pass when at least one element of a set matches."""

    error_type: Type[AssertionFailedError] = AssertionFailedError

    def __init__(self, items: Optional[Iterable[Any]], argument_name: str = "items") -> None:
        if items is None:
            raise InvalidArgumentError(argument_name)
        self._items = [item for item in items if item is not None]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def _matching(self, property_name: str, accessor: Callable[[Any], Optional[str]], regex: Optional[str]):
        regex = require("regex", regex)
        if not matching.match_any(self._items, accessor, regex):
            raise failure_factory(self.error_type, property_name, regex)()
        return self

    def _matching_groups(
        self,
        property_name: str,
        accessor: Callable[[Any], Optional[str]],
        regex: Optional[str],
        group_regex: Optional[str],
    ) -> Optional[List[str]]:
        regex = require("regex", regex)
        group_regex = require("group_regex", group_regex)
        outcome = matching.match_any_with_groups(self._items, accessor, regex, group_regex)
        if not outcome.matched:
            raise failure_factory(self.error_type, property_name, regex)()
        return outcome.groups


def tap_actions(items: Iterable[Any]) -> List[Any]:
    """Collect the ``tap`` action of every item that has one."""

    return [item.tap for item in items if getattr(item, "tap", None) is not None]


def flatten(items: Iterable[Any], attribute: str) -> List[Any]:
    """Concatenate a sequence attribute across ``items``, in order."""

    flattened: List[Any] = []
    for item in items:
        flattened.extend(getattr(item, attribute, None) or ())
    return flattened
