from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .frequency import FrequencyTable


@dataclass(frozen=True)
class ScoredSentence:
    index: int
    score: float


def score_sentence(tokens: Sequence[str], table: FrequencyTable) -> float:
    """Average document frequency of the sentence's tokens.

    Averaging (instead of summing) keeps long sentences from winning by length alone.
    A sentence without tokens scores 0.
    """

    if not tokens:
        return 0.0
    return sum(table.get(t) for t in tokens) / float(len(tokens))


def score_sentences(token_lists: Sequence[Sequence[str]], table: FrequencyTable) -> List[ScoredSentence]:
    return [ScoredSentence(index=i, score=score_sentence(toks, table)) for i, toks in enumerate(token_lists)]
