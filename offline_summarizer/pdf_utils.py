from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PyPDF2 import PdfReader

from .errors import PDFExtractionError


logger = logging.getLogger(__name__)


def extract_pages_from_pdf(pdf_path: str | Path, max_pages: Optional[int] = None) -> list[str]:
    """Extract the embedded text of each page."""

    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise FileNotFoundError(str(pdf_path))

    page_texts: list[str] = []
    try:
        reader = PdfReader(str(pdf_path))
        pages = reader.pages[:max_pages] if max_pages else reader.pages
        for page in pages:
            page_texts.append(page.extract_text() or "")
    except Exception as e:
        raise PDFExtractionError(f"PyPDF2 failed to read PDF: {e}") from e

    if not "".join(page_texts).strip():
        # scanned documents carry no text layer
        logger.warning("No embedded text found in %s", pdf_path)
    return page_texts


def extract_text_from_pdf(pdf_path: str | Path, max_pages: Optional[int] = None) -> str:
    pages = extract_pages_from_pdf(pdf_path, max_pages=max_pages)
    return "\n".join(pages).strip()
