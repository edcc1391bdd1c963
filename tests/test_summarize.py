import math
from concurrent.futures import ThreadPoolExecutor

import pytest

import offline_summarizer.summarize as summarize_mod
from offline_summarizer import (
    InvalidSummaryLength,
    InvalidSummaryRatio,
    Language,
    Summarizer,
    UnsupportedLanguage,
    get_profile,
    language_agnostic_profile,
    new_summarizer,
    summarize_sentences,
)
from offline_summarizer.sentence_segmenter import split_sentences


ARTICLE = (
    "Solar panels convert sunlight into electricity. "
    "The panels are made of silicon cells. "
    "Silicon cells absorb sunlight and release electrons. "
    "Many homes now install solar panels on their roofs. "
    "Electricity from solar panels can be stored in batteries. "
    "Batteries let homes use solar electricity at night. "
    "The weather was nice yesterday."
)


def test_spot_example(summarizer, spot_text):
    assert summarizer.summarize_sentences(spot_text, 2) == ["See Spot run.", "Run Spot, run!"]
    assert summarizer.summarize_sentences(spot_text, 1) == ["Run Spot, run!"]


@pytest.mark.parametrize("n", [3, 4, 100])
def test_n_at_least_sentence_count_returns_everything(summarizer, spot_text, n):
    assert summarizer.summarize_sentences(spot_text, n) == ["See Spot.", "See Spot run.", "Run Spot, run!"]


@pytest.mark.parametrize("n", range(1, 10))
def test_output_length_and_order(summarizer, english, n):
    all_sents = split_sentences(ARTICLE, english)
    out = summarizer.summarize_sentences(ARTICLE, n)

    assert len(out) == min(n, len(all_sents))
    positions = [all_sents.index(s) for s in out]
    assert positions == sorted(positions)
    assert all(s in ARTICLE for s in out)


def test_increasing_n_never_drops_a_sentence(summarizer):
    previous: set = set()
    for n in range(1, 8):
        current = set(summarizer.summarize_sentences(ARTICLE, n))
        assert previous <= current
        previous = current


def test_resummarizing_the_summary_is_stable(summarizer):
    out = summarizer.summarize_sentences(ARTICLE, 3)
    again = summarizer.summarize_sentences(" ".join(out), 3)
    assert again == out


def test_off_topic_sentence_is_dropped(summarizer):
    out = summarizer.summarize_sentences(ARTICLE, 6)
    assert "The weather was nice yesterday." not in out


def test_deterministic(summarizer):
    first = summarizer.summarize_sentences(ARTICLE, 3)
    for _ in range(5):
        assert summarizer.summarize_sentences(ARTICLE, 3) == first
    assert Summarizer("english").summarize_sentences(ARTICLE, 3) == first


@pytest.mark.parametrize("text", ["", "   \n\t"])
def test_empty_text(summarizer, text):
    assert summarizer.summarize_sentences(text, 3) == []


@pytest.mark.parametrize("n", [0, -1, 1.5, "2", True, None])
def test_invalid_summary_length(summarizer, spot_text, n):
    with pytest.raises(InvalidSummaryLength):
        summarizer.summarize_sentences(spot_text, n)


def test_summary_length_is_checked_before_segmentation(summarizer, monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("segmentation should not run")

    monkeypatch.setattr(summarize_mod, "segment_sentences", boom)
    with pytest.raises(InvalidSummaryLength):
        summarizer.summarize_sentences("Some text. More text.", 0)


def test_unsupported_language():
    with pytest.raises(UnsupportedLanguage):
        Summarizer("klingon")
    with pytest.raises(UnsupportedLanguage):
        new_summarizer("xx")


def test_functional_api(spot_text):
    s = new_summarizer(Language.ENGLISH)
    assert s.language is Language.ENGLISH
    assert summarize_sentences(s, spot_text, 2) == s.summarize_sentences(spot_text, 2)
    assert repr(s) == "Summarizer(language='english')"


def test_stop_word_only_sentence_scores_zero(summarizer):
    text = "The cat sat on the mat. It was there. The mat was red."
    assert summarizer.summarize_sentences(text, 2) == ["The cat sat on the mat.", "The mat was red."]
    assert summarizer.summarize_sentences(text, 3) == [
        "The cat sat on the mat.",
        "It was there.",
        "The mat was red.",
    ]


def test_long_sentences_are_not_favoured(summarizer):
    text = "Cats purr. Cats purr loudly when happy and fed and warm and comfortable at home."
    assert summarizer.summarize_sentences(text, 1) == ["Cats purr."]


def test_whitespace_is_trimmed_but_inner_text_kept(summarizer):
    text = "First point here.\n\n  Second point\nhere.  "
    assert summarizer.summarize_sentences(text, 2) == ["First point here.", "Second point\nhere."]


def test_language_agnostic_counts_stop_words():
    text = "the the the. cat."
    assert Summarizer.language_agnostic().summarize_sentences(text, 1) == ["the the the."]
    assert Summarizer("english").summarize_sentences(text, 1) == ["cat."]
    assert Summarizer.language_agnostic().language is None


def test_other_languages():
    text = (
        "Le chat dort sur le canapé. "
        "Le chat aime le canapé rouge. "
        "Il pleut à Paris."
    )
    out = Summarizer("fr").summarize_sentences(text, 2)
    assert out == ["Le chat dort sur le canapé.", "Le chat aime le canapé rouge."]


def test_non_european_languages():
    text = "Katten sover i soffan. Katten älskar soffan. Det regnar i Stockholm."
    assert Summarizer("sv").summarize_sentences(text, 2) == ["Katten sover i soffan.", "Katten älskar soffan."]

    text = "我喜欢猫。猫很可爱！今天下雨。"
    assert len(Summarizer(Language.CHINESE).summarize_sentences(text, 2)) == 2


def test_summarizer_from_profile(spot_text):
    profile = get_profile("fr")
    s = Summarizer(profile)
    assert s.profile is profile
    assert s.language is Language.FRENCH

    agnostic = Summarizer(language_agnostic_profile())
    assert agnostic.language is None
    assert agnostic.summarize_sentences(spot_text, 1) == Summarizer.language_agnostic().summarize_sentences(spot_text, 1)


def test_shared_across_threads(summarizer):
    texts = [ARTICLE, "See Spot. See Spot run. Run Spot, run!", ""] * 10
    expected = [summarizer.summarize_sentences(t, 2) for t in texts]
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda t: summarizer.summarize_sentences(t, 2), texts))
    assert results == expected


def test_summarize_ratio(summarizer, spot_text):
    # 38 chars; ranking is sentence 2, 1, 0
    assert summarizer.summarize_ratio(spot_text, 0.5) == ["Run Spot, run!"]
    assert summarizer.summarize_ratio(spot_text, 1.0) == ["See Spot run.", "Run Spot, run!"]
    assert summarizer.summarize_ratio(spot_text, 0.0) == ["Run Spot, run!"]
    assert summarizer.summarize_ratio("", 0.5) == []


@pytest.mark.parametrize("ratio", [-0.1, 1.5, math.nan, "0.5", True, None])
def test_invalid_ratio(summarizer, spot_text, ratio):
    with pytest.raises(InvalidSummaryRatio):
        summarizer.summarize_ratio(spot_text, ratio)


def test_summarize_debug(summarizer, spot_text):
    debug = summarizer.summarize_debug(spot_text, 2)
    assert debug.summary == "See Spot run. Run Spot, run!"
    assert debug.selected_indices == [1, 2]
    assert debug.sentences == ["See Spot.", "See Spot run.", "Run Spot, run!"]
    assert debug.sentence_scores[0] == (0, pytest.approx(2.5), "See Spot.")
    assert debug.top_terms == [("run", 3), ("spot", 3), ("see", 2)]
    assert debug.language == "english"


def test_summarize_debug_by_ratio(summarizer, spot_text):
    assert summarizer.summarize_debug(spot_text, ratio=0.5).selected_indices == [2]


def test_summarize_debug_needs_a_length(summarizer, spot_text):
    with pytest.raises(InvalidSummaryLength):
        summarizer.summarize_debug(spot_text)


def test_summarize_debug_empty(summarizer):
    debug = summarizer.summarize_debug("", 3)
    assert debug.summary == ""
    assert debug.selected_indices == []
    assert debug.top_terms == []


def test_ratio_counts_characters_not_bytes():
    # 30 characters but 36 UTF-8 bytes; the budget is 15 characters
    text = "αβ αβ αβ. x y." + " " * 16
    s = Summarizer.language_agnostic()
    assert s.summarize_ratio(text, 0.5) == ["αβ αβ αβ.", "x y."]
    assert s.summarize_debug(text, ratio=0.5).selected_indices == [0, 1]
