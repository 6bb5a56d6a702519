# taste_engine/scoring.py

ENGINE_VERSION = "0.1.0"

import math
from dataclasses import asdict, dataclass, replace
from typing import Dict, Mapping, Optional, Union

from .labels import ATTRIBUTES

DEFAULT_EXPONENT = 2.0  # 2 -> root mean square


@dataclass(frozen=True)
class Weights:
    # bitterness/aftertaste weigh heavier, body lighter
    acidity: float = 0.30
    bitterness: float = 0.35
    body: float = 0.15
    aftertaste: float = 0.20

    def merged(self, overrides: Union["Weights", Mapping[str, float], None] = None) -> "Weights":
        """Override per attribute; attributes the caller leaves out keep this set's weight."""
        if overrides is None:
            return self
        if isinstance(overrides, Weights):
            return overrides
        known = {k: float(v) for k, v in overrides.items() if k in ATTRIBUTES and v is not None}
        return replace(self, **known)

    def total(self) -> float:
        return sum(getattr(self, name) for name in ATTRIBUTES)

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


DEFAULT_WEIGHTS = Weights()


def clamp_deviation(value: float) -> float:
    value = float(value)
    if math.isnan(value):
        return value
    return max(-1.0, min(1.0, value))


def powered_deviation(magnitude: float, p: float) -> float:
    if magnitude == 0.0 and p < 0:
        return math.inf
    return magnitude ** p


def _round_tenth(score: float) -> float:
    # nearest 0.1, halves rounded up
    if not math.isfinite(score):
        return score
    return math.floor(score * 10 + 0.5) / 10


def compute_severity(
    deviations: Mapping[str, float],
    weights: Union[Weights, Mapping[str, float], None] = None,
    exponent: Optional[float] = None,
) -> float:
    """
    Weighted power mean of the absolute deviations, in [0, 1].

    Deviations are clamped to [-1, 1]. An exponent of 0 has no root and
    yields NaN. For positive exponents the largest weighted magnitude is factored
    out before powering so large exponents do not underflow to zero.
    """
    w = DEFAULT_WEIGHTS.merged(weights)
    p = DEFAULT_EXPONENT if exponent is None else float(exponent)
    if p == 0:
        return math.nan

    magnitudes = {name: abs(clamp_deviation(deviations.get(name, 0.0))) for name in ATTRIBUTES}
    weight_sum = w.total()
    if weight_sum == 0 or any(math.isnan(m) for m in magnitudes.values()):
        return math.nan

    scale = 1.0
    if p > 0:
        scale = max((magnitudes[name] for name in ATTRIBUTES if getattr(w, name)), default=0.0)
        if scale == 0:
            return 0.0

    weighted = sum(
        getattr(w, name) * powered_deviation(magnitudes[name] / scale, p)
        for name in ATTRIBUTES if getattr(w, name)
    )
    mean = weighted / weight_sum
    if mean < 0:
        return math.nan
    return scale * mean ** (1.0 / p)


def compute_score(
    acidity: float,
    bitterness: float,
    body: float,
    aftertaste: float,
    weights: Union[Weights, Mapping[str, float], None] = None,
    exponent: Optional[float] = None,
) -> float:
    """Overall quality 0-10 (one decimal); 0 deviation everywhere scores 10."""
    severity = compute_severity(
        {"acidity": acidity, "bitterness": bitterness, "body": body, "aftertaste": aftertaste},
        weights=weights,
        exponent=exponent,
    )
    return _round_tenth(10 * (1 - severity))
