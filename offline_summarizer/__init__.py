"""Offline extractive summarizer.

This package provides:
- Language profiles (stop words + sentence-boundary rules) for a fixed set of languages
- Rule-based sentence segmentation
- Word-frequency sentence scoring and top-N / ratio selection
- A small document pipeline (txt/pdf in, summary + score table out)
"""
import logging

from .errors import (
    DocumentReadError,
    InvalidSummaryLength,
    InvalidSummaryRatio,
    PDFExtractionError,
    SummarizerError,
    UnsupportedLanguage,
)
from .languages import Language, LanguageProfile, get_profile, language_agnostic_profile
from .summarize import SummaryDebug, Summarizer, new_summarizer, summarize_sentences

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DocumentReadError",
    "InvalidSummaryLength",
    "InvalidSummaryRatio",
    "Language",
    "LanguageProfile",
    "PDFExtractionError",
    "SummarizerError",
    "SummaryDebug",
    "Summarizer",
    "UnsupportedLanguage",
    "get_profile",
    "language_agnostic_profile",
    "new_summarizer",
    "summarize_sentences",
]
