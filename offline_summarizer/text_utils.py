from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Iterable, List

from .languages import LanguageProfile


def _is_punct(ch: str) -> bool:
    # Unicode punctuation (P*) and symbols (S*)
    return unicodedata.category(ch)[0] in "PS"


def split_words(text: str, profile: LanguageProfile) -> List[str]:
    """Split on whitespace and punctuation, keeping the profile's intra-word marks."""

    keep = profile.intra_word_marks
    words: List[str] = []
    buff: List[str] = []
    for ch in text:
        if ch.isspace() or (_is_punct(ch) and ch not in keep):
            if buff:
                words.append("".join(buff))
                buff = []
        else:
            buff.append(ch)
    if buff:
        words.append("".join(buff))
    return words


def normalize_word(word: str) -> str:
    """Case-fold, unify apostrophes and strip edge punctuation ("'tis" -> "tis", "--" -> "")."""

    w = word.casefold().replace("’", "'")
    start, end = 0, len(w)
    while start < end and _is_punct(w[start]):
        start += 1
    while end > start and _is_punct(w[end - 1]):
        end -= 1
    return w[start:end]


def tokenize_words(text: str, profile: LanguageProfile) -> List[str]:
    out: List[str] = []
    for raw in split_words(text, profile):
        w = normalize_word(raw)
        if w:
            out.append(w)
    return out


def remove_stopwords(words: Iterable[str], profile: LanguageProfile) -> List[str]:
    return [w for w in words if not profile.is_stop_word(w)]


def sentence_tokens(text: str, profile: LanguageProfile) -> List[str]:
    """Tokens of one sentence as counted and scored: normalized, stop words removed."""

    return remove_stopwords(tokenize_words(text, profile), profile)


@dataclass(frozen=True)
class CleanOptions:
    collapse_whitespace: bool = True
    dehyphenate: bool = True
    strip_null_bytes: bool = True


def clean_text(text: str, opts: CleanOptions | None = None) -> str:
    """Tidy extracted document text before summarizing it."""

    if opts is None:
        opts = CleanOptions()

    if opts.strip_null_bytes:
        text = text.replace("\x00", "")

    if opts.dehyphenate:
        # Join words split across line breaks: "inter-\nnational" -> "international"
        text = re.sub(r"(\w)-\n(\w)", r"\1\2", text)

    if opts.collapse_whitespace:
        text = re.sub(r"[ \t]+", " ", text)
        text = re.sub(r"\n{3,}", "\n\n", text)

    return text.strip()
