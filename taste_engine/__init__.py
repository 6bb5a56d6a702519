from .labels import ATTRIBUTES, TASTE_LABELS
from .phrasing import EPS, band_of, compute_phrase, compute_summary
from .scoring import DEFAULT_WEIGHTS, ENGINE_VERSION, Weights, compute_score

__all__ = [
    "ATTRIBUTES",
    "DEFAULT_WEIGHTS",
    "ENGINE_VERSION",
    "EPS",
    "TASTE_LABELS",
    "Weights",
    "band_of",
    "compute_phrase",
    "compute_score",
    "compute_summary",
]
