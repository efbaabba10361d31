"""Fuzzy title matching.

A query matches a title when its characters appear in the title in order,
ignoring case. Matches score higher when matched characters sit next to each
other and when they start words.
"""

MATCH_SCORE = 16
CONSECUTIVE_BONUS = 8
WORD_START_BONUS = 10
GAP_PENALTY = 1
MIN_MATCH_SCORE = 1


def _is_word_start(title: str, index: int) -> bool:
    if index == 0:
        return True
    prev, char = title[index - 1], title[index]
    return not prev.isalnum() or (prev.islower() and char.isupper())


def score(title: str, query: str) -> int | None:
    """Score ``query`` against ``title``.

    Returns None when the query is not a case-insensitive subsequence of the
    title. A match never scores below ``MIN_MATCH_SCORE``, however long its
    gaps. An empty query matches everything with score 0.
    """
    if not query:
        return 0
    haystack = [c.lower() for c in title]
    needle = query.lower()

    # best[j]: best score with the current query character matched at title[j]
    best: list[int | None] = [None] * len(haystack)
    for i, char in enumerate(needle):
        current: list[int | None] = [None] * len(haystack)
        for j, candidate in enumerate(haystack):
            if candidate != char:
                continue
            gained = MATCH_SCORE + (WORD_START_BONUS if _is_word_start(title, j) else 0)
            if i == 0:
                current[j] = gained
                continue
            previous = [
                prev_score + (CONSECUTIVE_BONUS if k == j - 1 else -GAP_PENALTY * (j - k - 1))
                for k, prev_score in enumerate(best[:j])
                if prev_score is not None
            ]
            if previous:
                current[j] = gained + max(previous)
        best = current

    scores = [s for s in best if s is not None]
    return max(max(scores), MIN_MATCH_SCORE) if scores else None
