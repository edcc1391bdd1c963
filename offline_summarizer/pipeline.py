from __future__ import annotations

import csv
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import DocumentReadError
from .pdf_utils import extract_text_from_pdf
from .summarize import Summarizer, as_summary_length, as_summary_ratio
from .text_utils import clean_text


logger = logging.getLogger(__name__)

TEXT_SUFFIXES = (".txt", ".md", ".text")


@dataclass
class PipelineOptions:
    language: str = "english"
    summary_sentences: int = 5
    # when set, summarize by length ratio instead of sentence count
    ratio: Optional[float] = None
    max_pages: Optional[int] = None
    clean_input: bool = True
    top_terms: int = 20


@dataclass
class PipelineOutputs:
    extracted_text_path: str
    summary_path: str
    sentence_scores_csv_path: str
    analysis_json_path: str


def read_document(path: str | Path, max_pages: Optional[int] = None) -> str:
    """Load the text of a .txt/.md or .pdf file."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(str(path))

    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return extract_text_from_pdf(path, max_pages=max_pages)
    if suffix in TEXT_SUFFIXES:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentReadError(f"{path.name} is not valid UTF-8 text: {e}") from e
    raise DocumentReadError(f"Unsupported document type: {path.suffix or path.name}")


def run_pipeline(input_path: str | Path, out_dir: str | Path, opts: PipelineOptions | None = None) -> PipelineOutputs:
    if opts is None:
        opts = PipelineOptions()

    # fail on bad options before touching any file
    summarizer = Summarizer(opts.language)
    n = as_summary_length(opts.summary_sentences)
    ratio = as_summary_ratio(opts.ratio) if opts.ratio is not None else None

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    # 1) Read + clean
    text = read_document(input_path, max_pages=opts.max_pages)
    if opts.clean_input:
        text = clean_text(text)
    logger.info("Loaded %s (%d chars)", Path(input_path).name, len(text))

    extracted_path = out_dir / "extracted_text.txt"
    extracted_path.write_text(text, encoding="utf-8")

    # 2) Summary (+ debug)
    debug = summarizer.summarize_debug(text, n, ratio=ratio, top_k=opts.top_terms)
    summary_sents = [debug.sentences[i] for i in debug.selected_indices]
    selected = debug.selected_indices

    summary_path = out_dir / "summary.txt"
    # one sentence per paragraph; sentences may span several lines
    summary_path.write_text("\n\n".join(summary_sents), encoding="utf-8")

    # 3) Analysis artifacts
    analysis = {
        "options": {
            "language": summarizer.profile.name,
            "summary_sentences": n,
            "ratio": ratio,
            "max_pages": opts.max_pages,
            "clean_input": opts.clean_input,
        },
        "summarizer": {
            "algorithm": "word_frequency",
            "sentences_total": len(debug.sentences),
            "selected_indices": selected,
            "summary_sentences": summary_sents,
            "top_terms": [{"term": t, "count": c} for t, c in debug.top_terms],
        },
        "evaluation": {
            "compression_ratio": (len(" ".join(summary_sents)) / len(text)) if text else 0.0,
        },
    }
    analysis_json_path = out_dir / "analysis.json"
    analysis_json_path.write_text(json.dumps(analysis, ensure_ascii=False, indent=2), encoding="utf-8")

    sentence_scores_csv_path = out_dir / "sentence_scores.csv"
    chosen = set(selected)
    with open(sentence_scores_csv_path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["sentence_index", "score", "selected", "sentence"])
        for idx, score, sentence in debug.sentence_scores:
            w.writerow([idx, f"{score:.6f}", idx in chosen, sentence])

    logger.info("Wrote summary of %d/%d sentences to %s", len(summary_sents), len(debug.sentences), out_dir)

    return PipelineOutputs(
        extracted_text_path=str(extracted_path),
        summary_path=str(summary_path),
        sentence_scores_csv_path=str(sentence_scores_csv_path),
        analysis_json_path=str(analysis_json_path),
    )
