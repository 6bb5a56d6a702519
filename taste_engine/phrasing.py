import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .labels import BALANCED_OVERALL, FALLBACK_LABEL, SUMMARY_ORDER, TASTE_LABELS, LabelTriple

EPS = 0.08  # near-zero cutoff, below it the attribute sits in the sweet spot


@dataclass(frozen=True)
class Band:
    name: str
    adverb: str
    upper: float  # inclusive


# Scanned in ascending order; the first band whose upper bound holds wins
BANDS: Tuple[Band, ...] = (
    Band("slight", "Slightly", 0.25),
    Band("moderate", "Moderately", 0.60),
    Band("strong", "Strongly", 0.90),
    Band("extreme", "Extremely", math.inf),
)

SEVERITY_ORDER: Tuple[Band, ...] = tuple(reversed(BANDS))


def _is_number(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return not value.is_nan()
    if not isinstance(value, numbers.Real):
        return False
    return not math.isnan(value)


def _is_triple(labels) -> bool:
    if not isinstance(labels, (list, tuple)) or len(labels) != 3:
        return False
    return all(isinstance(x, str) for x in labels)


def band_of(value) -> Optional[Band]:
    """Severity band for a deviation, None when within tolerance or not a number."""
    if not _is_number(value):
        return None
    magnitude = abs(float(value))
    if magnitude < EPS:
        return None
    for band in BANDS:
        if magnitude <= band.upper:
            return band
    return BANDS[-1]


def _adjective(value: float, labels: LabelTriple) -> str:
    low, _center, high = labels
    return (high if value > 0 else low).lower()


def compute_phrase(value, labels: Sequence[str]) -> str:
    """
    value: -1..1 (larger magnitudes read as extreme)
    labels: [low, center, high]
    The center label comes back as is; the poles get an adverb and are lower-cased.
    """
    if not _is_number(value):
        center = labels[1] if isinstance(labels, (list, tuple)) and len(labels) > 1 else None
        return center or FALLBACK_LABEL
    if not _is_triple(labels):
        return FALLBACK_LABEL

    band = band_of(value)
    if band is None:
        return labels[1]
    return f"{band.adverb} {_adjective(value, labels)}"


def compute_summary(
    deviations: Mapping[str, float],
    labels: Optional[Mapping[str, LabelTriple]] = None,
) -> str:
    """
    One phrase for the whole tasting, most severe band first.

    Adjectives sharing a band share one adverb:
    {"acidity": 0.8, "bitterness": 0.75} -> "Strongly bitter, sharp"
    """
    labels = TASTE_LABELS if labels is None else labels
    values = {name: deviations.get(name, 0.0) for name in SUMMARY_ORDER}

    if all(not _is_number(v) or abs(float(v)) < EPS for v in values.values()):
        return BALANCED_OVERALL

    groups: Dict[str, List[str]] = {}
    for name in SUMMARY_ORDER:
        value = values[name]
        band = band_of(value)
        triple = labels.get(name)
        if band is None or not _is_triple(triple):
            continue
        members = groups.setdefault(band.name, [])
        adjective = _adjective(value, triple)
        if adjective not in members:
            members.append(adjective)

    parts = [
        f"{band.adverb} {', '.join(groups[band.name])}"
        for band in SEVERITY_ORDER
        if groups.get(band.name)
    ]
    return ", ".join(parts) if parts else BALANCED_OVERALL
