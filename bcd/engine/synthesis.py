"""
Cognitive State Synthesizer
===========================

Maps cues, fusion statistics and recurrent memory into six bounded
(0-100) metrics. ``sensitivity`` scales attention, cognitive load and
stress only; the other three derive from those or from raw readings.
Every metric is clamped regardless of how extreme the inputs are.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

from .frames import SensorFrame
from .fusion import FusionResult
from .memory import MemorySlot
from .modes import Cues
from .numeric import clamp


DEFAULT_SENSITIVITY = 0.8
SENSITIVITY_RANGE = (0.4, 1.4)


@dataclass(frozen=True)
class CognitiveState:
    attention: float
    cognitive_load: float
    emotional_valence: float
    stress: float
    engagement: float
    deception_risk: float

    def to_dict(self) -> Dict[str, float]:
        return {
            'attention': self.attention,
            'cognitiveLoad': self.cognitive_load,
            'emotionalValence': self.emotional_valence,
            'stress': self.stress,
            'engagement': self.engagement,
            'deceptionRisk': self.deception_risk,
        }

    @property
    def reactivity(self) -> float:
        return clamp(self.emotional_valence + self.stress * 0.35, 0, 100)


def synthesize(
    frame: SensorFrame,
    fusion: FusionResult,
    cues: Cues,
    hidden: Sequence[float],
    sensitivity: float = DEFAULT_SENSITIVITY,
) -> CognitiveState:
    h_attention = float(hidden[MemorySlot.ATTENTION])
    h_load = float(hidden[MemorySlot.LOAD])
    h_stress = float(hidden[MemorySlot.STRESS])

    attention = clamp(
        (fusion.energy * 85 + h_attention * 40 + cues.deliberate_cue * 35) * sensitivity, 0, 100,
    )
    cognitive_load = clamp(
        (fusion.variance * 220 + (1 - cues.deliberate_cue) * 25 + h_load * 70) * sensitivity, 0, 100,
    )
    emotional_valence = clamp(
        (frame.text.sentiment * 0.6 + frame.voice.energy * 0.3 + (1 - cues.stress_signal) * 40) / 1.7, 0, 100,
    )
    stress = clamp(
        (cues.stress_signal * 92 + (1 - fusion.mean) * 25 + h_stress * 50) * sensitivity, 0, 100,
    )
    engagement = clamp(
        (attention * 0.6 + frame.behavior.gaze_stability * 0.4 - stress * 0.35) * 1.05, 0, 100,
    )
    deception_risk = clamp(
        (cues.deception_cue * 85 + stress * 0.25 - engagement * 0.1) * 0.9, 0, 100,
    )
    return CognitiveState(
        attention=attention,
        cognitive_load=cognitive_load,
        emotional_valence=emotional_valence,
        stress=stress,
        engagement=engagement,
        deception_risk=deception_risk,
    )


__all__ = ['DEFAULT_SENSITIVITY', 'SENSITIVITY_RANGE', 'CognitiveState', 'synthesize']
