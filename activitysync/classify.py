"""Classification of events into categories and tags by rules."""

from __future__ import annotations

import dataclasses
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from activitysync.models import Event

UNCATEGORIZED = "Uncategorized"


class Rule(ABC):
    """A condition an event either matches or not."""

    @abstractmethod
    def matches(self, event: Event) -> bool:
        """Return True when ``event`` satisfies the rule."""


class NoRule(Rule):
    """A rule that matches nothing."""

    def matches(self, event: Event) -> bool:
        return False


class RegexRule(Rule):
    """A rule matching events where any string value in the data matches a regex."""

    def __init__(self, regex: str | re.Pattern[str], ignore_case: bool = False) -> None:
        if isinstance(regex, re.Pattern):
            pattern = regex.pattern
            flags = regex.flags | (re.IGNORECASE if ignore_case else 0)
            self.regex = re.compile(pattern, flags) if ignore_case else regex
        else:
            self.regex = re.compile(regex, re.IGNORECASE if ignore_case else 0)

    def matches(self, event: Event) -> bool:
        return any(
            self.regex.search(value) is not None
            for value in event.data.values()
            if isinstance(value, str)
        )


def _pick_highest_ranking_category(current: list[str], candidate: Sequence[str]) -> list[str]:
    # A category at least as deep as the current one replaces it.
    if len(candidate) >= len(current):
        return list(candidate)
    return current


def _categorize_one(event: Event, rules: Sequence[tuple[Sequence[str], Rule]]) -> Event:
    category = [UNCATEGORIZED]
    for cat, rule in rules:
        if rule.matches(event):
            category = _pick_highest_ranking_category(category, cat)
    return dataclasses.replace(event, data={**event.data, "$category": category})


def categorize(
    events: Iterable[Event], rules: Sequence[tuple[Sequence[str], Rule]]
) -> list[Event]:
    """Give each event the deepest matching category under ``$category``.

    Among equally deep matches the later rule wins. Events matching no rule
    get ``["Uncategorized"]``.
    """
    return [_categorize_one(event, rules) for event in events]


def _tag_one(event: Event, rules: Sequence[tuple[str, Rule]]) -> Event:
    tags = sorted({name for name, rule in rules if rule.matches(event)})
    return dataclasses.replace(event, data={**event.data, "$tags": tags})


def tag(events: Iterable[Event], rules: Sequence[tuple[str, Rule]]) -> list[Event]:
    """Put the sorted, distinct names of all matching rules under ``$tags``."""
    return [_tag_one(event, rules) for event in events]