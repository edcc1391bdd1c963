from __future__ import annotations

import logging
import math
import numbers
import operator
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .errors import InvalidSummaryLength, InvalidSummaryRatio
from .frequency import FrequencyTable, build_frequency_table
from .languages import Language, LanguageProfile, get_profile, language_agnostic_profile
from .scoring import ScoredSentence, score_sentences
from .selection import rank_sentences, select_by_length, select_top_n
from .sentence_segmenter import Sentence, segment_sentences
from .text_utils import sentence_tokens


logger = logging.getLogger(__name__)


def as_summary_length(n: object) -> int:
    """Validate a requested sentence count; raises InvalidSummaryLength unless it is an int > 0."""

    if isinstance(n, bool):
        raise InvalidSummaryLength(n)
    try:
        value = operator.index(n)  # type: ignore[arg-type]
    except TypeError as e:
        raise InvalidSummaryLength(n) from e
    if value <= 0:
        raise InvalidSummaryLength(n)
    return value


def as_summary_ratio(ratio: object) -> float:
    if isinstance(ratio, bool) or not isinstance(ratio, numbers.Real):
        raise InvalidSummaryRatio(ratio)
    value = float(ratio)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidSummaryRatio(ratio)
    return value


@dataclass(frozen=True)
class _Analysis:
    sentences: List[Sentence]
    tokens: List[List[str]]
    table: FrequencyTable
    scored: List[ScoredSentence]


@dataclass(frozen=True)
class SummaryDebug:
    summary: str
    sentences: List[str]
    sentence_scores: List[Tuple[int, float, str]]  # (idx, score, sentence)
    selected_indices: List[int]
    top_terms: List[Tuple[str, int]]
    language: str


class Summarizer:
    """Frequency-based extractive summarizer for one language.

    Holds nothing but a read-only language profile, so one instance can serve
    concurrent calls from several threads.
    """

    def __init__(self, language: Union[Language, str, LanguageProfile]):
        if isinstance(language, LanguageProfile):
            self._profile = language
        else:
            self._profile = get_profile(language)

    @classmethod
    def language_agnostic(cls) -> "Summarizer":
        """Summarizer without stop words or abbreviation rules."""

        return cls(language_agnostic_profile())

    @property
    def profile(self) -> LanguageProfile:
        return self._profile

    @property
    def language(self) -> Language | None:
        return self._profile.language

    def __repr__(self) -> str:
        return f"Summarizer(language={self._profile.name!r})"

    def _analyze(self, text: str) -> _Analysis:
        profile = self._profile
        sentences = segment_sentences(text, profile)
        tokens = [sentence_tokens(s.span, profile) for s in sentences]
        table = build_frequency_table(tokens)
        scored = score_sentences(tokens, table)
        return _Analysis(sentences=sentences, tokens=tokens, table=table, scored=scored)

    def _select_ratio(self, text: str, analysis: _Analysis, ratio: float) -> List[int]:
        budget = int(ratio * len(text) + 0.5)
        lengths = [len(s.text) for s in analysis.sentences]
        keep = select_by_length(rank_sentences(analysis.scored), lengths, budget)
        logger.debug(
            "Selected %d of %d sentences for ratio %.3f (budget=%d chars)",
            len(keep), len(analysis.sentences), ratio, budget,
        )
        return keep

    def summarize_sentences(self, text: str, n: int) -> List[str]:
        """Return the `n` most representative sentences of `text`, in document order.

        Sentences come back verbatim from the input with surrounding whitespace
        stripped. Fewer than `n` sentences in the text means all of them.
        """

        n = as_summary_length(n)
        analysis = self._analyze(text)
        if not analysis.sentences:
            return []

        keep = select_top_n(analysis.scored, n)
        logger.debug(
            "Selected %d of %d sentences (language=%s, vocabulary=%d)",
            len(keep), len(analysis.sentences), self._profile.name, len(analysis.table),
        )
        return [analysis.sentences[i].text for i in keep]

    def summarize_ratio(self, text: str, ratio: float) -> List[str]:
        """Summarize `text` down to about `ratio` of its length in characters.

        Sentences are taken best first for as long as the summary stays within the
        target; a non-empty text always yields at least one sentence.
        """

        ratio = as_summary_ratio(ratio)
        analysis = self._analyze(text)
        if not analysis.sentences:
            return []
        return [analysis.sentences[i].text for i in self._select_ratio(text, analysis, ratio)]

    def summarize_debug(
        self,
        text: str,
        n: Optional[int] = None,
        *,
        ratio: Optional[float] = None,
        top_k: int = 20,
    ) -> SummaryDebug:
        """Summarize by count (`n`) or by `ratio`, and report every score and the top terms."""

        if ratio is not None:
            ratio = as_summary_ratio(ratio)
        else:
            n = as_summary_length(n)
        analysis = self._analyze(text)
        sents = [s.text for s in analysis.sentences]

        if not sents:
            keep: List[int] = []
        elif ratio is not None:
            keep = self._select_ratio(text, analysis, ratio)
        else:
            keep = select_top_n(analysis.scored, n)  # type: ignore[arg-type]

        return SummaryDebug(
            summary=" ".join(sents[i] for i in keep),
            sentences=sents,
            sentence_scores=[(s.index, float(s.score), sents[s.index]) for s in analysis.scored],
            selected_indices=keep,
            top_terms=analysis.table.most_common(top_k),
            language=self._profile.name,
        )


def new_summarizer(language: Union[Language, str]) -> Summarizer:
    return Summarizer(language)


def summarize_sentences(summarizer: Summarizer, text: str, n: int) -> List[str]:
    return summarizer.summarize_sentences(text, n)
