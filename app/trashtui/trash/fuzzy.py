"""Fuzzy matching of a query against a display name.

Scores follow the convention the search filter relies on: 0.0 is a perfect
match, larger is worse, and NO_MATCH_SCORE (1.0) means no match at all.
"""

from dataclasses import dataclass, field

NO_MATCH_SCORE = 1.0

# Weight of match compactness vs. how much of the text the query covers
COMPACTNESS_WEIGHT = 0.75
COVERAGE_WEIGHT = 0.25


@dataclass(frozen=True, slots=True)
class FuzzyMatch:
    """Result of matching a query against a text.

    Attributes:
        score: Similarity score in [0.0, 1.0], lower is better.
        ranges: Half-open (start, end) character ranges of matched text.
    """

    score: float
    ranges: list[tuple[int, int]] = field(default_factory=list)

    @property
    def is_match(self) -> bool:
        return self.score < NO_MATCH_SCORE


def _match_from(text: str, needle: list[str], start: int) -> list[int] | None:
    positions: list[int] = []
    i = start
    for ch in needle:
        while i < len(text) and text[i].lower() != ch:
            i += 1
        if i == len(text):
            return None
        positions.append(i)
        i += 1
    return positions


def _to_ranges(positions: list[int]) -> list[tuple[int, int]]:
    ranges: list[tuple[int, int]] = []
    for pos in positions:
        if ranges and ranges[-1][1] == pos:
            ranges[-1] = (ranges[-1][0], pos + 1)
        else:
            ranges.append((pos, pos + 1))
    return ranges


def fuzzy_match(text: str, pattern: str) -> FuzzyMatch:
    """Match pattern characters in order against text, case-insensitively.

    Every occurrence of the first pattern character is tried as a starting
    point and the tightest window wins.

    Args:
        text: Text to search in.
        pattern: Query typed by the user.

    Returns:
        FuzzyMatch with the score and matched ranges. Unmatched texts get
        NO_MATCH_SCORE and no ranges.
    """
    if not pattern:
        return FuzzyMatch(score=0.0)

    needle = [ch.lower() for ch in pattern]
    best: list[int] | None = None

    for start, ch in enumerate(text):
        if ch.lower() != needle[0]:
            continue
        positions = _match_from(text, needle, start)
        if positions is None:
            # No later start can succeed either
            break
        if best is None or positions[-1] - positions[0] < best[-1] - best[0]:
            best = positions
        if best[-1] - best[0] + 1 == len(needle):
            break

    if best is None:
        return FuzzyMatch(score=NO_MATCH_SCORE)

    span = best[-1] - best[0] + 1
    compactness = len(needle) / span
    coverage = len(needle) / len(text)
    score = 1.0 - (COMPACTNESS_WEIGHT * compactness + COVERAGE_WEIGHT * coverage)
    return FuzzyMatch(score=max(0.0, score), ranges=_to_ranges(best))
