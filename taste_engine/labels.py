from types import MappingProxyType
from typing import Mapping, Tuple

# (low pole adjective, center label, high pole adjective)
LabelTriple = Tuple[str, str, str]

ATTRIBUTES: Tuple[str, ...] = ("acidity", "bitterness", "body", "aftertaste")

# First-seen order of adjectives inside one summary band
SUMMARY_ORDER: Tuple[str, ...] = ("bitterness", "acidity", "aftertaste", "body")

TASTE_LABELS: Mapping[str, LabelTriple] = MappingProxyType({
    "acidity": ("Flat", "Balanced", "Sharp"),
    "bitterness": ("Flat", "Balanced", "Bitter"),
    "body": ("Watery", "Balanced", "Heavy"),
    "aftertaste": ("Faint", "Balanced", "Harsh"),
})

FALLBACK_LABEL = "Unknown"
BALANCED_OVERALL = "Balanced overall"
