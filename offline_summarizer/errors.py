from __future__ import annotations


class SummarizerError(Exception):
    """Base class for every error raised by offline_summarizer."""


class UnsupportedLanguage(SummarizerError, ValueError):
    def __init__(self, language: object):
        self.language = language
        super().__init__(f"Unsupported language: {language!r}")


class InvalidSummaryLength(SummarizerError, ValueError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Summary length must be a positive integer, got {value!r}")


class InvalidSummaryRatio(SummarizerError, ValueError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Summary ratio must be within [0.0, 1.0], got {value!r}")


class DocumentReadError(SummarizerError):
    pass


class PDFExtractionError(DocumentReadError):
    pass
