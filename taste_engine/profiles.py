import json
import logging
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from .labels import ATTRIBUTES
from .scoring import DEFAULT_EXPONENT, DEFAULT_WEIGHTS, Weights, compute_score

logger = logging.getLogger(__name__)

PROFILES_PATH_ENV = "TASTE_ENGINE_PROFILES_PATH"
DEFAULT_PROFILES_PATH = "data/scoring_profiles.json"


class ProfileError(ValueError):
    pass


@dataclass(frozen=True)
class ScoringProfile:
    profile_id: str
    profile_name: str
    weights: Weights
    exponent: float

    def score(self, deviations: Mapping[str, float]) -> float:
        return compute_score(
            *(deviations.get(name, 0.0) for name in ATTRIBUTES),
            weights=self.weights,
            exponent=self.exponent,
        )


BUILTIN_PROFILES: Dict[str, ScoringProfile] = {
    "standard": ScoringProfile(
        profile_id="standard",
        profile_name="Standard (RMS)",
        weights=DEFAULT_WEIGHTS,
        exponent=DEFAULT_EXPONENT,
    ),
    "lenient": ScoringProfile(
        profile_id="lenient",
        profile_name="Lenient (linear mean)",
        weights=DEFAULT_WEIGHTS,
        exponent=1.0,
    ),
    "strict": ScoringProfile(
        profile_id="strict",
        profile_name="Strict (worst attribute dominates)",
        weights=DEFAULT_WEIGHTS,
        exponent=4.0,
    ),
}


def profiles_path() -> str:
    return os.environ.get(PROFILES_PATH_ENV, DEFAULT_PROFILES_PATH)


def profile_from_dict(profile_id: str, data: object) -> ScoringProfile:
    """Weights left out of ``data`` fall back to the defaults, as does the exponent."""
    if not isinstance(data, dict):
        raise ProfileError(f"profile '{profile_id}' must be an object")

    raw_weights = data.get("weights") or {}
    if not isinstance(raw_weights, dict):
        raise ProfileError(f"profile '{profile_id}' has weights that are not an object")

    if any(isinstance(v, bool) for v in [*raw_weights.values(), data.get("exponent")]):
        raise ProfileError(f"profile '{profile_id}' has a boolean weight or exponent")

    try:
        weights = DEFAULT_WEIGHTS.merged(raw_weights)
        exponent = float(data.get("exponent", DEFAULT_EXPONENT))
    except (TypeError, ValueError) as exc:
        raise ProfileError(f"profile '{profile_id}' has a non-numeric weight or exponent") from exc

    return ScoringProfile(
        profile_id=profile_id,
        profile_name=str(data.get("profile_name") or profile_id),
        weights=weights,
        exponent=exponent,
    )


def profile_to_dict(profile: ScoringProfile) -> Dict[str, object]:
    return {
        "profile_name": profile.profile_name,
        "weights": profile.weights.as_dict(),
        "exponent": profile.exponent,
    }


def load_custom_profiles(path: Optional[str] = None) -> Dict[str, ScoringProfile]:
    path = path or profiles_path()
    if not os.path.exists(path):
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read scoring profiles from %s: %s", path, exc)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected an object keyed by profile id", path)
        return {}

    out: Dict[str, ScoringProfile] = {}
    for k, v in data.items():
        try:
            out[k] = profile_from_dict(k, v)
        except ProfileError as exc:
            logger.warning("Skipping scoring profile: %s", exc)
    return out


def save_custom_profiles(profiles: Mapping[str, ScoringProfile], path: Optional[str] = None) -> None:
    path = path or profiles_path()
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    payload = {k: profile_to_dict(p) for k, p in profiles.items()}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    logger.info("Saved %d scoring profile(s) to %s", len(payload), path)


def get_all_profiles(path: Optional[str] = None) -> Dict[str, ScoringProfile]:
    merged = dict(BUILTIN_PROFILES)
    merged.update(load_custom_profiles(path))
    return merged
