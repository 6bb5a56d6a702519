from __future__ import annotations

import pytest

from taste_engine.explain import explain_tasting


def test_breakdown_covers_every_attribute_in_order() -> None:
    exp = explain_tasting({"acidity": 0.3, "bitterness": -0.7, "body": 0.0, "aftertaste": 2})
    rows = exp["attributes"]
    assert [r["attribute"] for r in rows] == ["acidity", "bitterness", "body", "aftertaste"]
    assert [r["band"] for r in rows] == ["moderate", "strong", None, "extreme"]
    assert [r["phrase"] for r in rows] == ["Moderately sharp", "Strongly flat", "Balanced", "Extremely harsh"]
    assert rows[3]["value"] == 1.0


def test_contributions_use_normalized_weights() -> None:
    exp = explain_tasting({"acidity": 0.5, "bitterness": 0.5, "body": 0.5, "aftertaste": 0.5})
    rows = {r["attribute"]: r for r in exp["attributes"]}
    assert sum(r["share"] for r in rows.values()) == pytest.approx(1.0)
    # 0.35 * 0.5 ** 2
    assert rows["bitterness"]["contribution"] == pytest.approx(0.0875, abs=1e-3)
    assert exp["dominant_attributes"] == ["bitterness", "acidity"]


def test_custom_weights_change_dominance() -> None:
    exp = explain_tasting({"acidity": 0.2, "body": 0.2}, weights={"body": 3.0})
    assert exp["dominant_attributes"] == ["body", "acidity"]


def test_no_deviation_has_no_dominant_attribute() -> None:
    exp = explain_tasting({})
    assert exp["dominant_attributes"] == []
    assert all(r["contribution"] == 0 for r in exp["attributes"])


def test_exponent_shapes_dominance() -> None:
    shot = {"acidity": 0.5, "body": 0.95}
    assert explain_tasting(shot, exponent=1)["dominant_attributes"] == ["acidity", "body"]
    assert explain_tasting(shot, exponent=4)["dominant_attributes"] == ["body", "acidity"]


def test_tiny_contributions_still_rank() -> None:
    exp = explain_tasting({"acidity": 0.1, "body": 0.15}, exponent=4)
    assert all(r["contribution"] == 0 for r in exp["attributes"])
    assert exp["dominant_attributes"] == ["body", "acidity"]
