from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Dict, FrozenSet, List, Optional, Union

import stopwordsiso

from .errors import UnsupportedLanguage
from .stopwords import ABBREVIATIONS, NON_FINAL_ABBREVIATIONS, STOP_WORDS


class Language(str, Enum):
    AFRIKAANS = "afrikaans"
    ARABIC = "arabic"
    ARMENIAN = "armenian"
    BASQUE = "basque"
    BENGALI = "bengali"
    BRETON = "breton"
    BULGARIAN = "bulgarian"
    CATALAN = "catalan"
    CHINESE = "chinese"
    CROATIAN = "croatian"
    CZECH = "czech"
    DANISH = "danish"
    DUTCH = "dutch"
    ENGLISH = "english"
    ESPERANTO = "esperanto"
    ESTONIAN = "estonian"
    FINNISH = "finnish"
    FRENCH = "french"
    GALICIAN = "galician"
    GERMAN = "german"
    GREEK = "greek"
    GUJARATI = "gujarati"
    HAUSA = "hausa"
    HEBREW = "hebrew"
    HINDI = "hindi"
    HUNGARIAN = "hungarian"
    INDONESIAN = "indonesian"
    IRISH = "irish"
    ITALIAN = "italian"
    JAPANESE = "japanese"
    KOREAN = "korean"
    KURDISH = "kurdish"
    LATIN = "latin"
    LATVIAN = "latvian"
    LITHUANIAN = "lithuanian"
    MALAY = "malay"
    MARATHI = "marathi"
    NORWEGIAN = "norwegian"
    PERSIAN = "persian"
    POLISH = "polish"
    PORTUGUESE = "portuguese"
    ROMANIAN = "romanian"
    RUSSIAN = "russian"
    SLOVAK = "slovak"
    SLOVENIAN = "slovenian"
    SOMALI = "somali"
    SOTHO = "sotho"
    SPANISH = "spanish"
    SWAHILI = "swahili"
    SWEDISH = "swedish"
    TAGALOG = "tagalog"
    TAMIL = "tamil"
    THAI = "thai"
    TURKISH = "turkish"
    UKRAINIAN = "ukrainian"
    URDU = "urdu"
    VIETNAMESE = "vietnamese"
    YORUBA = "yoruba"
    ZULU = "zulu"

    @property
    def code(self) -> str:
        return _ISO_CODES[self]

    @classmethod
    def parse(cls, value: Union["Language", str]) -> "Language":
        """Resolve an enum member, its value/name (any case) or its ISO 639-1 code."""

        if isinstance(value, Language):
            return value
        if isinstance(value, str):
            key = value.strip().casefold()
            for lang in cls:
                if key in (lang.value, lang.code):
                    return lang
        raise UnsupportedLanguage(value)


_ISO_CODES: Dict[Language, str] = {
    Language.AFRIKAANS: "af",
    Language.ARABIC: "ar",
    Language.ARMENIAN: "hy",
    Language.BASQUE: "eu",
    Language.BENGALI: "bn",
    Language.BRETON: "br",
    Language.BULGARIAN: "bg",
    Language.CATALAN: "ca",
    Language.CHINESE: "zh",
    Language.CROATIAN: "hr",
    Language.CZECH: "cs",
    Language.DANISH: "da",
    Language.DUTCH: "nl",
    Language.ENGLISH: "en",
    Language.ESPERANTO: "eo",
    Language.ESTONIAN: "et",
    Language.FINNISH: "fi",
    Language.FRENCH: "fr",
    Language.GALICIAN: "gl",
    Language.GERMAN: "de",
    Language.GREEK: "el",
    Language.GUJARATI: "gu",
    Language.HAUSA: "ha",
    Language.HEBREW: "he",
    Language.HINDI: "hi",
    Language.HUNGARIAN: "hu",
    Language.INDONESIAN: "id",
    Language.IRISH: "ga",
    Language.ITALIAN: "it",
    Language.JAPANESE: "ja",
    Language.KOREAN: "ko",
    Language.KURDISH: "ku",
    Language.LATIN: "la",
    Language.LATVIAN: "lv",
    Language.LITHUANIAN: "lt",
    Language.MALAY: "ms",
    Language.MARATHI: "mr",
    Language.NORWEGIAN: "no",
    Language.PERSIAN: "fa",
    Language.POLISH: "pl",
    Language.PORTUGUESE: "pt",
    Language.ROMANIAN: "ro",
    Language.RUSSIAN: "ru",
    Language.SLOVAK: "sk",
    Language.SLOVENIAN: "sl",
    Language.SOMALI: "so",
    Language.SOTHO: "st",
    Language.SPANISH: "es",
    Language.SWAHILI: "sw",
    Language.SWEDISH: "sv",
    Language.TAGALOG: "tl",
    Language.TAMIL: "ta",
    Language.THAI: "th",
    Language.TURKISH: "tr",
    Language.UKRAINIAN: "uk",
    Language.URDU: "ur",
    Language.VIETNAMESE: "vi",
    Language.YORUBA: "yo",
    Language.ZULU: "zu",
}


DEFAULT_TERMINATORS = ".!?…"
DEFAULT_CLOSING_MARKS = "\"'”’»›)]}"
DEFAULT_INTRA_WORD_MARKS = "'’-"

_OPENING_MARKS = "\"'“‘„«‹([{¿¡"
_PERIODS = ".…"


def _word_before(text: str, pos: int) -> str:
    i = pos
    while i > 0 and not text[i - 1].isspace():
        i -= 1
    return text[i:pos].lstrip(_OPENING_MARKS)


def _next_is_upper(text: str, pos: int, skip: str) -> bool:
    i = pos
    while i < len(text) and (text[i].isspace() or text[i] in skip):
        i += 1
    if i == len(text):
        return True
    return text[i].isupper()


def _is_initial(word: str) -> bool:
    return len(word) == 1 and word.isalpha() and word.isupper()


@dataclass(frozen=True)
class LanguageProfile:
    """Read-only per-language resources used by the segmenter and the tokenizer.

    `non_final_abbreviations` (titles, "e.g.") never end a sentence.
    `abbreviations` ("etc.", "p.m.") end one only when an upper-case letter follows.
    Terminators in `spaceless_terminators` ("。") end a sentence even when no
    whitespace follows them.
    """

    language: Optional[Language]
    stop_words: FrozenSet[str] = frozenset()
    abbreviations: FrozenSet[str] = frozenset()
    non_final_abbreviations: FrozenSet[str] = frozenset()
    terminators: str = DEFAULT_TERMINATORS
    spaceless_terminators: str = ""
    closing_marks: str = DEFAULT_CLOSING_MARKS
    intra_word_marks: str = DEFAULT_INTRA_WORD_MARKS

    @property
    def name(self) -> str:
        return self.language.value if self.language is not None else "agnostic"

    def is_stop_word(self, word: str) -> bool:
        return word.casefold() in self.stop_words

    def is_terminator(self, ch: str) -> bool:
        return ch in self.terminators

    def is_boundary(self, text: str, start: int, end: int) -> bool:
        """Decide whether the terminator run `text[start:end]` ends a sentence.

        The caller has already checked that the run (plus any closing marks) is
        followed by whitespace or the end of the text, so decimal points such as
        "3.50" never reach this check.
        """

        run = text[start:end]
        skip = self.closing_marks + _OPENING_MARKS
        if any(ch not in _PERIODS for ch in run):
            # "!", "?", "?!" and language-specific marks
            return True

        if len(run) > 1 or run == "…":
            # ellipsis: only ends the sentence when a new one visibly starts
            return _next_is_upper(text, end, skip)

        word = _word_before(text, start)
        if not word:
            return True
        key = word.casefold()
        if key in self.non_final_abbreviations:
            return False
        if key in self.abbreviations:
            return _next_is_upper(text, end, skip)
        if _is_initial(word):
            return self._initial_ends_sentence(text, start - len(word), end, skip)
        return True

    def _initial_ends_sentence(self, text: str, word_start: int, end: int, skip: str) -> bool:
        # "J. R. R. Tolkien": an initial next to another initial, or one that
        # opens a sentence, is part of a name. "Plan B. Then" ends a sentence.
        i = _skip_forward(text, end, skip)
        if i + 1 < len(text) and _is_initial(text[i]) and text[i + 1] == ".":
            return False

        j = word_start
        while j > 0 and (text[j - 1].isspace() or text[j - 1] in _OPENING_MARKS):
            j -= 1
        if j == 0 or text[j - 1] in self.terminators or text[j - 1] in self.closing_marks:
            return False
        return _next_is_upper(text, end, skip)


def _skip_forward(text: str, pos: int, skip: str) -> int:
    while pos < len(text) and (text[pos].isspace() or text[pos] in skip):
        pos += 1
    return pos


_INTRA_WORD_MARKS: Dict[Language, str] = {
    # elision: l'homme, dell'anno
    Language.FRENCH: "-",
    Language.ITALIAN: "-",
    # punt volat: col·lecció
    Language.CATALAN: "-·",
}

_CJK_TERMINATORS = "。！？"

_TERMINATORS: Dict[Language, str] = {
    # ";" and U+037E are the Greek question mark
    Language.GREEK: DEFAULT_TERMINATORS + ";\u037e",
    Language.CHINESE: DEFAULT_TERMINATORS + _CJK_TERMINATORS,
    Language.JAPANESE: DEFAULT_TERMINATORS + _CJK_TERMINATORS,
    Language.ARABIC: DEFAULT_TERMINATORS + "؟",
    Language.PERSIAN: DEFAULT_TERMINATORS + "؟",
    Language.URDU: DEFAULT_TERMINATORS + "؟۔",
    # danda
    Language.HINDI: DEFAULT_TERMINATORS + "।॥",
    Language.MARATHI: DEFAULT_TERMINATORS + "।॥",
    Language.BENGALI: DEFAULT_TERMINATORS + "।॥",
    # U+0589 is the Armenian full stop
    Language.ARMENIAN: DEFAULT_TERMINATORS + "։",
}

_SPACELESS_TERMINATORS: Dict[Language, str] = {
    Language.CHINESE: _CJK_TERMINATORS,
    Language.JAPANESE: _CJK_TERMINATORS,
}

_CLOSING_MARKS: Dict[Language, str] = {
    Language.GERMAN: DEFAULT_CLOSING_MARKS + "“‘",
    Language.CHINESE: DEFAULT_CLOSING_MARKS + "」』）”",
    Language.JAPANESE: DEFAULT_CLOSING_MARKS + "」』）",
}

# stopwordsiso has no list for these
_NO_STOP_WORDS = frozenset({Language.TAMIL})


def _stop_words(lang: Language) -> FrozenSet[str]:
    if lang.value in STOP_WORDS:
        words = STOP_WORDS[lang.value]
    elif lang in _NO_STOP_WORDS:
        words = frozenset()
    else:
        words = stopwordsiso.stopwords(lang.code)
    return frozenset(w.casefold() for w in words)


@lru_cache(maxsize=None)
def _build_profile(lang: Language) -> LanguageProfile:
    return LanguageProfile(
        language=lang,
        stop_words=_stop_words(lang),
        abbreviations=frozenset(a.casefold() for a in ABBREVIATIONS.get(lang.value, ())),
        non_final_abbreviations=frozenset(a.casefold() for a in NON_FINAL_ABBREVIATIONS.get(lang.value, ())),
        terminators=_TERMINATORS.get(lang, DEFAULT_TERMINATORS),
        spaceless_terminators=_SPACELESS_TERMINATORS.get(lang, ""),
        closing_marks=_CLOSING_MARKS.get(lang, DEFAULT_CLOSING_MARKS),
        intra_word_marks=_INTRA_WORD_MARKS.get(lang, DEFAULT_INTRA_WORD_MARKS),
    )


_AGNOSTIC_PROFILE = LanguageProfile(language=None)


def get_profile(language: Union[Language, str]) -> LanguageProfile:
    """Return the shared profile for `language`; raises UnsupportedLanguage.

    Profiles are built on first use and reused afterwards.
    """

    return _build_profile(Language.parse(language))


def language_agnostic_profile() -> LanguageProfile:
    """Profile with no stop words and no abbreviations."""

    return _AGNOSTIC_PROFILE


def supported_languages() -> List[Language]:
    return list(Language)
