"""
Feature Fusion - Frame → Feature Vector + Summary Statistics
============================================================

Flattens a frame into an 11-element vector in a fixed order and
summarizes it. The raw statistics are sums taken left to right so the
numbers line up with the historical dashboard output.

    vector   : raw / 100, clamped to [0, 1]
    mean     : avg(raw) / 100, clamped to [0, 1]
    variance : sample variance of raw values (n - 1)
    energy   : avg(|raw|)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .frames import SensorFrame
from .numeric import clamp


FEATURE_ORDER: Tuple[Tuple[str, str], ...] = (
    ('facial', 'micro_tension'),
    ('facial', 'eye_aspect'),
    ('voice', 'pitch_var'),
    ('voice', 'energy'),
    ('text', 'hedging'),
    ('text', 'assertiveness'),
    ('physio', 'hrv'),
    ('physio', 'eda'),
    ('behavior', 'cursor_entropy'),
    ('behavior', 'gaze_stability'),
    ('behavior', 'keystroke_latency'),
)
FEATURE_DIM = len(FEATURE_ORDER)


@dataclass(frozen=True)
class FusionResult:
    """Fused view of one frame."""
    vector: np.ndarray      # normalized, shape (11,)
    mean: float             # normalized [0, 1]
    variance: float         # raw units
    energy: float           # raw units


def raw_features(frame: SensorFrame) -> List[float]:
    """Raw readings in ``FEATURE_ORDER``."""
    return [float(getattr(getattr(frame, modality), attr)) for modality, attr in FEATURE_ORDER]


def fuse_features(frame: SensorFrame) -> FusionResult:
    """Reduce a frame to its feature vector and statistics."""
    features = raw_features(frame)
    n = len(features)

    total = 0.0
    for v in features:
        total += v
    mean = total / n

    sq = 0.0
    for v in features:
        sq += (v - mean) * (v - mean)
    variance = sq / max(1, n - 1)

    abs_total = 0.0
    for v in features:
        abs_total += abs(v)
    energy = abs_total / n

    vector = np.clip(np.asarray(features, dtype=np.float64) / 100.0, 0.0, 1.0)
    vector.setflags(write=False)
    return FusionResult(
        vector=vector,
        mean=clamp(mean / 100.0),
        variance=variance,
        energy=energy,
    )


__all__ = ['FEATURE_ORDER', 'FEATURE_DIM', 'FusionResult', 'raw_features', 'fuse_features']
