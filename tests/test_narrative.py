"""Narrative and risk-alert read-outs."""

import pytest

from bcd.config import AlertConfig
from bcd.engine.modes import ModeScore
from bcd.engine.synthesis import CognitiveState
from bcd.narrative import build_narrative, detect_risk_alert, dominant_mode


def make_state(**overrides) -> CognitiveState:
    values = dict(
        attention=60.0, cognitive_load=62.4, emotional_valence=45.5,
        stress=40.0, engagement=50.0, deception_risk=20.0,
    )
    values.update(overrides)
    return CognitiveState(**values)


class TestNarrative:

    def test_full_sentence(self):
        text = build_narrative(make_state(stress=80.0, deception_risk=40.0), "Rational")
        assert text == (
            "Dominant mode: Rational. heightened stress response detected; "
            "moderate engagement patterns; monitor for strategic responses. "
            "Emotional valence at 46% balancing cognitive load 62%."
        )

    def test_calm_sentence(self):
        text = build_narrative(make_state(engagement=90.0), "Deliberate")
        assert text.startswith(
            "Dominant mode: Deliberate. stress within adaptive range; "
            "high sustained engagement; low deception indicators."
        )

    @pytest.mark.parametrize("field,value,phrase", [
        ("stress", 70.0, "stress within adaptive range"),
        ("stress", 70.01, "heightened stress response detected"),
        ("engagement", 75.0, "moderate engagement patterns"),
        ("engagement", 75.5, "high sustained engagement"),
        ("deception_risk", 35.0, "low deception indicators"),
        ("deception_risk", 60.0, "monitor for strategic responses"),
        ("deception_risk", 60.5, "possible intentional obfuscation"),
    ])
    def test_thresholds_are_strict(self, field, value, phrase):
        assert phrase in build_narrative(make_state(**{field: value}), "Rational")


class TestDominantMode:

    def test_highest_score(self):
        dist = [ModeScore("Rational", 18, (10, 26)), ModeScore("Emotional", 30, (20, 40))]
        assert dominant_mode(dist).mode == "Emotional"

    def test_earliest_wins_ties(self):
        dist = [
            ModeScore("Rational", 21, (10, 33)),
            ModeScore("Emotional", 16, (3, 28)),
            ModeScore("Deceptive", 21, (9, 33)),
        ]
        assert dominant_mode(dist).mode == "Rational"

    def test_empty(self):
        assert dominant_mode([]) is None


class TestRiskAlert:

    def test_quiet_state(self):
        assert detect_risk_alert(make_state()) is None

    def test_thresholds_are_strict(self):
        assert detect_risk_alert(make_state(stress=82.0, deception_risk=70.0)) is None

    def test_stress_surge(self):
        alert = detect_risk_alert(make_state(stress=90.0, deception_risk=10.0), step=21)
        assert alert.title == "Risk spike"
        assert alert.message == "Stress surge detected; monitoring engagement countermeasures."
        assert alert.tone == "danger"
        assert alert.step == 21

    def test_deception_cues(self):
        alert = detect_risk_alert(make_state(stress=50.0, deception_risk=75.0))
        assert alert.message == "Deception cues elevated; cross-checking modalities."

    def test_tie_reports_deception(self):
        alert = detect_risk_alert(make_state(stress=90.0, deception_risk=90.0))
        assert alert.message.startswith("Deception")

    def test_custom_thresholds(self):
        thresholds = AlertConfig(stress_threshold=30.0, deception_threshold=90.0)
        alert = detect_risk_alert(make_state(stress=40.0), thresholds)
        assert alert is not None
        assert alert.to_dict()["title"] == "Risk spike"
