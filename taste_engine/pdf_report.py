from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas
from reportlab.lib.units import cm
from datetime import datetime, timezone
from typing import Dict, Mapping, Optional
import logging
import os

from .explain import explain_tasting
from .labels import ATTRIBUTES
from .phrasing import compute_summary
from .profiles import BUILTIN_PROFILES, ScoringProfile
from .scoring import ENGINE_VERSION

logger = logging.getLogger(__name__)


def safe_text(x: str) -> str:
    return (x or "").replace("\n", " ").strip()


def build_tasting_record(
    deviations: Mapping[str, float],
    title: str = "",
    profile: Optional[ScoringProfile] = None,
) -> Dict[str, object]:
    profile = profile or BUILTIN_PROFILES["standard"]
    return {
        "title": title,
        "engine_version": ENGINE_VERSION,
        "profile_id": profile.profile_id,
        "profile_name": profile.profile_name,
        "exponent": profile.exponent,
        "weights": profile.weights.as_dict(),
        "deviations": {name: deviations.get(name, 0.0) for name in ATTRIBUTES},
        "score": profile.score(deviations),
        "summary": compute_summary(deviations),
        "explanation": explain_tasting(deviations, weights=profile.weights, exponent=profile.exponent),
    }


def write_tasting_report(output_path: str, record: dict) -> str:
    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    c = canvas.Canvas(output_path, pagesize=A4)
    width, height = A4

    y = height - 2 * cm

    def line(text: str, font: str = "Helvetica", size: int = 11, step: float = 0.55):
        nonlocal y
        if y < 3 * cm:
            c.showPage()
            y = height - 2 * cm
        c.setFont(font, size)
        c.drawString(2 * cm, y, text)
        y -= step * cm

    def heading(text: str):
        nonlocal y
        y -= 0.3 * cm
        line(text, font="Helvetica-Bold", size=12, step=0.8)

    # Header
    line("Taste Balance Report", font="Helvetica-Bold", size=18, step=1.0)
    line(
        f"Generated: {datetime.now(timezone.utc).isoformat(timespec='seconds')}",
        size=10,
        step=1.2,
    )

    heading("Overview")
    for text in [
        f"Title: {safe_text(record.get('title')) or 'Untitled'}",
        f"Profile: {safe_text(record.get('profile_name'))} (exponent {record.get('exponent')})",
        f"Engine Version: {safe_text(str(record.get('engine_version', '—')))}",
        f"Score: {record.get('score')} / 10",
    ]:
        line(text, step=0.6)
    for chunk in split_text(f"Summary: {safe_text(record.get('summary'))}", 95):
        line(chunk)

    exp = record.get("explanation") or {}

    heading("Attributes")
    for it in exp.get("attributes", []):
        text = (
            f"- {str(it.get('attribute')).title()}: {it.get('value'):+.2f} "
            f"({it.get('phrase')}) | share {it.get('share')} | contribution {it.get('contribution')}"
        )
        for chunk in split_text(text, 95):
            line(chunk)

    heading("Dominant attributes")
    dominant = exp.get("dominant_attributes") or []
    if dominant:
        for name in dominant:
            line(f"- {str(name).title()}")
    else:
        line("None recorded.")

    c.showPage()
    c.save()
    logger.info("Wrote tasting report to %s", output_path)
    return output_path


def split_text(text: str, max_len: int):
    words = text.split()
    if not words:
        return []
    lines = []
    line = ""
    for w in words:
        if len(line) + len(w) + 1 <= max_len:
            line = (line + " " + w).strip()
        else:
            lines.append(line)
            line = w
    if line:
        lines.append(line)
    return lines
