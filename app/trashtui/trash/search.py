"""Filtered, ranked projection of the catalog for a search query.

The projection is recomputed from the live entry list on every render and
never mutates the catalog.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from trashtui.trash.fuzzy import NO_MATCH_SCORE, FuzzyMatch, fuzzy_match
from trashtui.trash.models import TrashEntry

Matcher = Callable[[str, str], FuzzyMatch]


@dataclass(frozen=True, slots=True)
class FilteredRow:
    """One row of the filtered view.

    Attributes:
        entry: The catalog entry shown in this row.
        ranges: Matched character ranges in the display name for
            highlighting, or None when no query is active.
    """

    entry: TrashEntry
    ranges: list[tuple[int, int]] | None = None


def filter_entries(
    entries: Sequence[TrashEntry],
    query: str,
    matcher: Matcher = fuzzy_match,
) -> list[FilteredRow]:
    """Project entries through a fuzzy query.

    An empty query returns every entry in its original order without
    highlight ranges. Otherwise entries scoring NO_MATCH_SCORE or worse
    are dropped and the rest are ordered best match first.

    Args:
        entries: Entries in catalog order.
        query: Current search query.
        matcher: Scoring function (text, query) -> FuzzyMatch.

    Returns:
        Rows of the filtered view.
    """
    if not query:
        return [FilteredRow(entry=entry) for entry in entries]

    scored: list[tuple[float, FilteredRow]] = []
    for entry in entries:
        result = matcher(entry.display_name, query)
        if result.score >= NO_MATCH_SCORE:
            continue
        scored.append((result.score, FilteredRow(entry=entry, ranges=list(result.ranges))))

    scored.sort(key=lambda item: item[0])
    return [row for _, row in scored]
