from __future__ import annotations

from typing import List, Sequence

from .scoring import ScoredSentence


def rank_sentences(scored: Sequence[ScoredSentence]) -> List[int]:
    """Sentence indices, best first. Equal scores keep document order."""

    return [s.index for s in sorted(scored, key=lambda s: (-s.score, s.index))]


def select_top_n(scored: Sequence[ScoredSentence], n: int) -> List[int]:
    """Indices of the `n` best sentences, returned in document order."""

    return sorted(rank_sentences(scored)[:n])


def select_by_length(ranking: Sequence[int], lengths: Sequence[int], budget: int) -> List[int]:
    """Take ranked sentences until their combined length would exceed `budget`.

    Each sentence costs its length plus one separator. At least one sentence is
    kept when there is any. Returns indices in document order.
    """

    if not ranking:
        return []

    total = 0
    keep: List[int] = []
    for i in ranking:
        total += lengths[i] + 1
        if total > budget:
            break
        keep.append(i)

    if not keep:
        keep.append(ranking[0])
    return sorted(keep)
