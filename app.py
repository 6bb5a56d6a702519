import logging
import re
import streamlit as st

# Must be first Streamlit call
st.set_page_config(page_title="Taste Balance", layout="centered")

# ----------------------------
# Imports (engine)
# ----------------------------
from taste_engine.labels import ATTRIBUTES, TASTE_LABELS
from taste_engine.phrasing import compute_phrase
from taste_engine.pdf_report import build_tasting_record, write_tasting_report
from taste_engine.profiles import get_all_profiles

REPORTS_DIR = "reports"

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# ----------------------------
# Session state
# ----------------------------
for name in ATTRIBUTES:
    if f"dev_{name}" not in st.session_state:
        st.session_state[f"dev_{name}"] = 0.0


def section_title(title: str, subtitle: str = ""):
    st.markdown(f"### {title}")
    if subtitle:
        st.caption(subtitle)


def report_filename(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "_", (title or "").lower()).strip("_")
    return f"tasting_{slug or 'untitled'}.pdf"


ALL_PROFILES = get_all_profiles()

st.title("Taste Balance")

title = st.text_input("Shot title", placeholder="e.g. Ethiopia Guji, 18g in / 36g out")
profile_id = st.selectbox(
    "Scoring profile",
    options=list(ALL_PROFILES.keys()),
    format_func=lambda k: ALL_PROFILES[k].profile_name,
)
profile = ALL_PROFILES[profile_id]

section_title("Balance", "0 is the sweet spot, ±1 the extreme of either pole.")
for name in ATTRIBUTES:
    low, _center, high = TASTE_LABELS[name]
    value = st.slider(
        f"{name.title()} ({low} ↔ {high})",
        min_value=-1.0,
        max_value=1.0,
        step=0.05,
        key=f"dev_{name}",
    )
    st.caption(compute_phrase(value, TASTE_LABELS[name]))

deviations = {name: st.session_state[f"dev_{name}"] for name in ATTRIBUTES}
record = build_tasting_record(deviations, title=title, profile=profile)

section_title("Result")
st.metric("Overall score", f"{record['score']} / 10")
st.write("**Summary:**", record["summary"])

dominant = record["explanation"]["dominant_attributes"]
if dominant:
    st.caption("Most influential: " + ", ".join(d.title() for d in dominant))

if st.button("Generate PDF report"):
    path = write_tasting_report(f"{REPORTS_DIR}/{report_filename(title)}", record)
    st.success("PDF generated.")
    with open(path, "rb") as f:
        st.download_button(
            "Download PDF",
            data=f.read(),
            file_name=report_filename(title),
            mime="application/pdf",
        )
