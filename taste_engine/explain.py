from typing import Dict, List, Mapping, Optional, Union

from .labels import ATTRIBUTES, TASTE_LABELS, LabelTriple
from .phrasing import band_of, compute_phrase
from .scoring import DEFAULT_EXPONENT, DEFAULT_WEIGHTS, Weights, clamp_deviation, powered_deviation


def explain_tasting(
    deviations: Mapping[str, float],
    weights: Union[Weights, Mapping[str, float], None] = None,
    labels: Optional[Mapping[str, LabelTriple]] = None,
    exponent: Optional[float] = None,
) -> Dict[str, object]:
    """
    Returns:
    - attributes: one entry per attribute (clamped value, band, phrase, weight, share, contribution)
    - dominant_attributes (2) by weighted contribution

    contribution is share * |value| ** exponent, the attribute's term in the score's power mean.
    """
    labels = TASTE_LABELS if labels is None else labels
    w = DEFAULT_WEIGHTS.merged(weights)
    p = DEFAULT_EXPONENT if exponent is None else float(exponent)
    weight_sum = w.total()

    items: List[Dict[str, object]] = []
    raw: List[float] = []  # unrounded contributions, for ranking
    for name in ATTRIBUTES:
        value = clamp_deviation(deviations.get(name, 0.0))
        weight = getattr(w, name)
        share = weight / weight_sum if weight_sum else 0.0
        contribution = share * powered_deviation(abs(value), p) if value else 0.0
        band = band_of(value)
        raw.append(contribution)
        items.append({
            "attribute": name,
            "value": value,
            "band": band.name if band else None,
            "phrase": compute_phrase(value, labels.get(name)),
            "weight": weight,
            "share": round(share, 3),
            "contribution": round(contribution, 3),
        })

    # Stable sort keeps ATTRIBUTES order between equal contributions
    ranked = sorted((i for i, c in enumerate(raw) if c > 0), key=lambda i: -raw[i])

    return {
        "attributes": items,
        "dominant_attributes": [items[i]["attribute"] for i in ranked[:2]],
    }
