from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .languages import LanguageProfile


@dataclass(frozen=True)
class Sentence:
    """One sentence span of a document.

    `span` is `document[start:end]` verbatim, trailing whitespace included, so the
    spans of a document concatenate back to the original text. `text` is what a
    summary returns: the span without surrounding whitespace.
    """

    index: int
    start: int
    end: int
    span: str

    @property
    def text(self) -> str:
        return self.span.strip()


def _span_end(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def segment_sentences(text: str, profile: LanguageProfile) -> List[Sentence]:
    """Split `text` into contiguous sentence spans using the profile's boundary rules.

    - a run of terminators ("?!", "...") is a single candidate boundary
    - closing quotes/brackets right after the run belong to the sentence
    - the candidate must be followed by whitespace or the end of the text,
      unless it ends in one of the profile's spaceless terminators ("。")
    """

    if not text.strip():
        return []

    sentences: List[Sentence] = []
    n = len(text)
    start = 0
    i = 0

    while i < n:
        if not profile.is_terminator(text[i]):
            i += 1
            continue

        run_end = i
        while run_end < n and profile.is_terminator(text[run_end]):
            run_end += 1
        after = run_end
        while after < n and text[after] in profile.closing_marks:
            after += 1

        spaced = after == n or text[after].isspace() or text[run_end - 1] in profile.spaceless_terminators
        if spaced and profile.is_boundary(text, i, run_end):
            end = _span_end(text, after)
            sentences.append(Sentence(index=len(sentences), start=start, end=end, span=text[start:end]))
            start = end
        i = after

    if start < n:
        sentences.append(Sentence(index=len(sentences), start=start, end=n, span=text[start:]))

    return sentences


def split_sentences(text: str, profile: LanguageProfile) -> List[str]:
    return [s.text for s in segment_sentences(text, profile)]
