import sys
from pathlib import Path
import json

import streamlit as st

# Make project root importable (so annotator/ works)
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from annotator.config import AnnotatorConfig, load_config
from annotator.models import Link
from annotator.pipeline import annotate_spans
from annotator.validators import is_lossless


def run_rows(annotated) -> list:
    rows = []
    for a in annotated:
        rows.append(
            {
                "kind": a.run.kind,
                "start": a.span.start,
                "end": a.span.end,
                "content": a.run.content,
                "href": a.run.href if isinstance(a.run, Link) else "",
            }
        )
    return rows


st.set_page_config(
    page_title="Chat Annotator",
    layout="wide",
)

st.title("💬 Chat Annotator Playground")
st.caption("Mentions • Self-mentions • Links")

# --------------------------------------------------------------------
# Sidebar configuration
# --------------------------------------------------------------------
st.sidebar.header("Settings")

config_path = st.sidebar.text_input(
    "Config file path",
    value="configs/annotator.yaml",
    help="Path to the YAML annotator config. Defaults are used if it is missing.",
)

config = AnnotatorConfig()
if Path(config_path).exists():
    try:
        config = load_config(config_path)
    except (OSError, ValueError) as e:
        st.sidebar.error(f"Failed to load config: {e}")

current_user = st.sidebar.text_input(
    "Viewing user",
    value="Alice",
    help="Mentions of exactly this name are shown as self-mentions.",
)

operation_mode = st.sidebar.radio(
    "Processing mode",
    options=["Single message", "Chat log"],
    index=0,
    help="Single message: type one message.\nChat log: upload a .txt file, one message per line.",
)

# --------------------------------------------------------------------
# SINGLE MESSAGE MODE
# --------------------------------------------------------------------
if operation_mode == "Single message":
    st.subheader("Single message")

    default_text = "Hi @Alice, @Bob shared www.example.com/path and http://example.org!"
    user_text = st.text_area("Message", value=default_text, height=120)

    annotated = annotate_spans(user_text, current_user or None, config)
    runs = [a.run for a in annotated]

    if is_lossless(user_text, runs):
        st.success(f"{len(runs)} run(s); content rebuilds the message exactly.")
    else:
        st.error("Runs do not rebuild the message.")

    st.dataframe(run_rows(annotated), use_container_width=True)

# --------------------------------------------------------------------
# CHAT LOG MODE
# --------------------------------------------------------------------
else:
    st.subheader("Chat log")

    uploaded = st.file_uploader("Upload a .txt chat log", type=["txt"])

    if uploaded is None:
        st.info("Upload a .txt file to get started.")
    else:
        raw = uploaded.read().decode("utf-8", errors="ignore")
        results = []
        for line_no, line in enumerate(raw.splitlines(), start=1):
            annotated = annotate_spans(line, current_user or None, config)
            by_kind = {}
            for a in annotated:
                by_kind[a.run.kind] = by_kind.get(a.run.kind, 0) + 1
            results.append(
                {
                    "line": line_no,
                    "message": line,
                    "mentions": by_kind.get("mention", 0),
                    "self_mentions": by_kind.get("self_mention", 0),
                    "links": by_kind.get("link", 0),
                    "runs": run_rows(annotated),
                }
            )

        st.markdown("### Summary")
        st.dataframe(
            [{k: v for k, v in r.items() if k != "runs"} for r in results],
            use_container_width=True,
        )

        st.download_button(
            label="⬇️ Download runs (JSON)",
            data=json.dumps(results, ensure_ascii=False, indent=2),
            file_name="annotated.json",
            mime="application/json",
        )
