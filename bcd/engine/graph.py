"""
Modality Graph - Weighted Cross-Modal Signal
============================================

Each modality is collapsed to a single 0-100 sub-score, and the five
sub-scores are combined with fixed edge weights into one graph signal
(roughly 0-1) used by the behavioral fingerprint drift.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .frames import SensorFrame


MODALITY_WEIGHTS: Dict[str, float] = {
    'facial': 0.22,
    'voice': 0.20,
    'text': 0.18,
    'physio': 0.20,
    'behavior': 0.20,
}


@dataclass(frozen=True)
class ModalityScores:
    facial: float
    voice: float
    text: float
    physio: float
    behavior: float


def modality_scores(frame: SensorFrame) -> ModalityScores:
    """Per-modality sub-scores from raw readings."""
    return ModalityScores(
        facial=frame.facial.micro_tension * 0.6 + frame.facial.eye_aspect * 0.4,
        voice=frame.voice.pitch_var * 0.4 + frame.voice.energy * 0.6,
        text=frame.text.sentiment * 0.5 + frame.text.hedging * 0.5,
        physio=frame.physio.eda * 0.5 + (100 - frame.physio.hrv) * 0.5,
        behavior=frame.behavior.cursor_entropy * 0.5 + (100 - frame.behavior.gaze_stability) * 0.5,
    )


def graph_signal(scores: ModalityScores) -> float:
    return (
        scores.facial * MODALITY_WEIGHTS['facial']
        + scores.voice * MODALITY_WEIGHTS['voice']
        + scores.text * MODALITY_WEIGHTS['text']
        + scores.physio * MODALITY_WEIGHTS['physio']
        + scores.behavior * MODALITY_WEIGHTS['behavior']
    ) / 100


__all__ = ['MODALITY_WEIGHTS', 'ModalityScores', 'modality_scores', 'graph_signal']
