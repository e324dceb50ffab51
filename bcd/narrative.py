"""Narrative helpers - plain-language read-outs of a snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .config import AlertConfig
from .engine.modes import ModeScore
from .engine.numeric import js_round
from .engine.synthesis import CognitiveState


@dataclass(frozen=True)
class RiskAlert:
    """A risk spike worth surfacing to the operator."""
    title: str
    message: str
    tone: str = "danger"
    step: int = 0

    def to_dict(self):
        return {"title": self.title, "message": self.message, "tone": self.tone, "step": self.step}


def dominant_mode(distribution: Sequence[ModeScore]) -> Optional[ModeScore]:
    """Highest-scoring mode; the earliest entry wins ties."""
    best: Optional[ModeScore] = None
    for entry in distribution:
        if best is None or entry.score > best.score:
            best = entry
    return best


def build_narrative(state: CognitiveState, mode: str) -> str:
    if state.stress > 70:
        stress_tone = "heightened stress response detected"
    else:
        stress_tone = "stress within adaptive range"

    if state.engagement > 75:
        engagement_tone = "high sustained engagement"
    else:
        engagement_tone = "moderate engagement patterns"

    if state.deception_risk > 60:
        deception_tone = "possible intentional obfuscation"
    elif state.deception_risk > 35:
        deception_tone = "monitor for strategic responses"
    else:
        deception_tone = "low deception indicators"

    return (
        f"Dominant mode: {mode}. {stress_tone}; {engagement_tone}; {deception_tone}. "
        f"Emotional valence at {js_round(state.emotional_valence)}% "
        f"balancing cognitive load {js_round(state.cognitive_load)}%."
    )


def detect_risk_alert(
    state: CognitiveState,
    thresholds: Optional[AlertConfig] = None,
    step: int = 0,
) -> Optional[RiskAlert]:
    """Return an alert when stress or deception risk crosses its threshold."""
    thresholds = thresholds or AlertConfig()
    if state.stress <= thresholds.stress_threshold and state.deception_risk <= thresholds.deception_threshold:
        return None
    if state.stress > state.deception_risk:
        message = "Stress surge detected; monitoring engagement countermeasures."
    else:
        message = "Deception cues elevated; cross-checking modalities."
    return RiskAlert(title="Risk spike", message=message, step=step)


__all__ = ["RiskAlert", "dominant_mode", "build_narrative", "detect_risk_alert"]
