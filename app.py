from __future__ import annotations

import csv
import io
import json
import tempfile
import zipfile
from pathlib import Path

import streamlit as st

from offline_summarizer import SummarizerError
from offline_summarizer.languages import supported_languages
from offline_summarizer.log import setup_logger
from offline_summarizer.pipeline import PipelineOptions, run_pipeline


setup_logger()

st.set_page_config(page_title="Offline Summarizer", layout="wide")

st.title("Offline Summarizer")
st.write("Picks the most representative sentences of a document. Runs locally; nothing is rewritten.")

with st.sidebar:
    st.header("Options")
    languages = [lang.value for lang in supported_languages()]
    language = st.selectbox("Language", languages, index=languages.index("english"))
    mode = st.radio("Summary length", ["sentences", "ratio"], index=0, horizontal=True)
    if mode == "sentences":
        summary_sentences = st.slider("Sentences", 1, 20, 5, 1)
        ratio = None
    else:
        summary_sentences = 1
        ratio = st.slider("Ratio of original length", 0.05, 1.0, 0.25, 0.05)

    st.divider()
    st.subheader("Input")
    clean_input = st.checkbox("Clean extracted text", value=True)
    max_pages = st.number_input("Max PDF pages (0 = all)", min_value=0, max_value=500, value=0, step=1)

uploaded = st.file_uploader("Upload a document", type=["txt", "md", "pdf"])
pasted = st.text_area("…or paste text", height=220)

if uploaded is None and not pasted.strip():
    st.stop()

run = st.button("Summarize")

if not run:
    st.stop()

with st.status("Processing…", expanded=True) as status:
    with tempfile.TemporaryDirectory() as tmp:
        tmp_path = Path(tmp)
        if uploaded is not None:
            in_file = tmp_path / ("input" + Path(uploaded.name).suffix.lower())
            in_file.write_bytes(uploaded.getvalue())
        else:
            in_file = tmp_path / "input.txt"
            in_file.write_text(pasted, encoding="utf-8")

        status.write("Extracting + summarizing…")
        opts = PipelineOptions(
            language=language,
            summary_sentences=int(summary_sentences),
            ratio=(None if ratio is None else float(ratio)),
            max_pages=(None if int(max_pages) == 0 else int(max_pages)),
            clean_input=bool(clean_input),
        )

        out_dir = tmp_path / "outputs"
        try:
            outputs = run_pipeline(in_file, out_dir, opts=opts)
        except SummarizerError as e:
            status.update(label="Failed", state="error")
            st.error(str(e))
            st.stop()

        status.write("Preparing downloads…")

        col1, col2 = st.columns(2)

        with col1:
            st.subheader("Summary")
            analysis = json.loads(Path(outputs.analysis_json_path).read_text(encoding="utf-8"))
            summ = analysis.get("summarizer", {})
            evalm = analysis.get("evaluation", {})

            for sentence in summ.get("summary_sentences") or []:
                st.markdown("- " + " ".join(sentence.split()))

            c1, c2 = st.columns(2)
            with c1:
                st.metric("Sentences kept", f"{len(summ.get('selected_indices') or [])} / {summ.get('sentences_total', 0)}")
            with c2:
                st.metric("Compression ratio", f"{evalm.get('compression_ratio', 0.0):.3f}")

            st.subheader("Introspection")
            st.caption("Top terms")
            st.write([t.get("term") for t in (summ.get("top_terms") or [])[:12]])

        with col2:
            st.subheader("Sentence scores")
            with open(outputs.sentence_scores_csv_path, newline="", encoding="utf-8") as f:
                rows = list(csv.DictReader(f))
            st.dataframe(rows, use_container_width=True)

            st.subheader("Downloads")
            bundle = io.BytesIO()
            with zipfile.ZipFile(bundle, mode="w", compression=zipfile.ZIP_DEFLATED) as z:
                z.write(outputs.extracted_text_path, arcname="extracted_text.txt")
                z.write(outputs.summary_path, arcname="summary.txt")
                z.write(outputs.analysis_json_path, arcname="analysis.json")
                z.write(outputs.sentence_scores_csv_path, arcname="sentence_scores.csv")

            bundle.seek(0)
            st.download_button(
                "Download ALL outputs (ZIP)",
                data=bundle.getvalue(),
                file_name="summary_outputs.zip",
                mime="application/zip",
            )
            st.download_button(
                "Download summary",
                data=Path(outputs.summary_path).read_bytes(),
                file_name="summary.txt",
            )

        status.update(label="Done", state="complete", expanded=False)
