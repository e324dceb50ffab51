"""
Sensor Frames - Synthetic Multi-Modal Readings
==============================================

A frame is one tick's worth of sensor input across the five modalities:

    facial    → microTension, eyeAspect
    voice     → pitchVar, energy
    text      → sentiment, hedging, assertiveness
    physio    → hrv, eda, respiration
    behavior  → cursorEntropy, gazeStability, keystrokeLatency

Nothing here reads real hardware. ``generate_frame`` synthesizes a frame
from the modality descriptor list owned by the dashboard, drawing every
jitter from a ``RandomSource`` so frames are reproducible per seed.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from .numeric import clamp
from .rng import RandomSource


DEFAULT_FACIAL_CONFIDENCE = 60.0


# =============================================================================
# Modality Descriptors
# =============================================================================

@dataclass
class ModalityDescriptor:
    """One input stream as configured by the dashboard."""
    id: str
    name: str = ""
    description: str = ""
    active: bool = True
    confidence: float = 0.0         # 0-100

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'description': self.description,
            'active': self.active,
            'confidence': self.confidence,
            'id': self.id,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'ModalityDescriptor':
        return cls(
            id=str(d['id']),
            name=d.get('name', ''),
            description=d.get('description', ''),
            active=bool(d.get('active', True)),
            confidence=float(d.get('confidence', 0.0)),
        )


def default_modalities() -> List[ModalityDescriptor]:
    """The five streams the dashboard starts with (physio off)."""
    return [
        ModalityDescriptor('facial', 'Facial Micro-expressions',
                           'Action units + blink cadence', True, 86),
        ModalityDescriptor('voice', 'Voice Prosody Analysis',
                           'Pitch, jitter, shimmer, energy', True, 82),
        ModalityDescriptor('text', 'Text & Linguistic Analysis',
                           'Semantics, sentiment, hedging', True, 79),
        ModalityDescriptor('physio', 'Physiological Signals',
                           'HRV, EDA, respiration', False, 71),
        ModalityDescriptor('behavior', 'Behavioral Telemetry',
                           'Cursor, dwell, rhythm', True, 84),
    ]


def count_active(modalities: Sequence[ModalityDescriptor]) -> int:
    """Active stream count, never below 1."""
    return sum(1 for m in modalities if m.active) or 1


# =============================================================================
# Readings
# =============================================================================

@dataclass(frozen=True)
class FacialReading:
    micro_tension: float = 50.0
    eye_aspect: float = 50.0


@dataclass(frozen=True)
class VoiceReading:
    pitch_var: float = 50.0
    energy: float = 50.0


@dataclass(frozen=True)
class TextReading:
    sentiment: float = 50.0
    hedging: float = 50.0
    assertiveness: float = 50.0


@dataclass(frozen=True)
class PhysioReading:
    hrv: float = 50.0
    eda: float = 50.0
    respiration: float = 14.0


@dataclass(frozen=True)
class BehaviorReading:
    cursor_entropy: float = 50.0
    gaze_stability: float = 50.0
    keystroke_latency: float = 50.0


# snake_case attribute -> wire key, per modality
_WIRE_KEYS: Dict[str, Dict[str, str]] = {
    'facial': {'micro_tension': 'microTension', 'eye_aspect': 'eyeAspect'},
    'voice': {'pitch_var': 'pitchVar', 'energy': 'energy'},
    'text': {'sentiment': 'sentiment', 'hedging': 'hedging', 'assertiveness': 'assertiveness'},
    'physio': {'hrv': 'hrv', 'eda': 'eda', 'respiration': 'respiration'},
    'behavior': {
        'cursor_entropy': 'cursorEntropy',
        'gaze_stability': 'gazeStability',
        'keystroke_latency': 'keystrokeLatency',
    },
}

_READING_TYPES = {
    'facial': FacialReading,
    'voice': VoiceReading,
    'text': TextReading,
    'physio': PhysioReading,
    'behavior': BehaviorReading,
}


@dataclass(frozen=True)
class SensorFrame:
    """
    Read-only per-step input to the engine.

    ``active_modalities`` may be 0 when a caller builds a frame by hand;
    the engine treats anything below 1 as 1.
    """
    active_modalities: int = 1
    facial: FacialReading = field(default_factory=FacialReading)
    voice: VoiceReading = field(default_factory=VoiceReading)
    text: TextReading = field(default_factory=TextReading)
    physio: PhysioReading = field(default_factory=PhysioReading)
    behavior: BehaviorReading = field(default_factory=BehaviorReading)

    @classmethod
    def uniform(cls, value: float, active_modalities: int = 5) -> 'SensorFrame':
        """Every reading set to the same value (boundary testing)."""
        readings = {
            modality: reading_type(**{attr: float(value) for attr in _WIRE_KEYS[modality]})
            for modality, reading_type in _READING_TYPES.items()
        }
        return cls(active_modalities=active_modalities, **readings)

    def with_active(self, active_modalities: int) -> 'SensorFrame':
        return replace(self, active_modalities=active_modalities)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {'activeModalities': self.active_modalities}
        for modality, keys in _WIRE_KEYS.items():
            reading = getattr(self, modality)
            out[modality] = {wire: getattr(reading, attr) for attr, wire in keys.items()}
        return out

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'SensorFrame':
        """Build from the camelCase wire form. Missing fields raise KeyError."""
        readings = {}
        for modality, keys in _WIRE_KEYS.items():
            block = d[modality]
            readings[modality] = _READING_TYPES[modality](
                **{attr: float(block[wire]) for attr, wire in keys.items()}
            )
        return cls(active_modalities=int(d.get('activeModalities', 1)), **readings)


# =============================================================================
# Frame Generator
# =============================================================================

def _facial_confidence(modalities: Sequence[ModalityDescriptor]) -> float:
    for m in modalities:
        if m.id == 'facial':
            return m.confidence
    return DEFAULT_FACIAL_CONFIDENCE


def generate_frame(
    modalities: Sequence[ModalityDescriptor],
    rng: Optional[RandomSource] = None,
) -> SensorFrame:
    """
    Synthesize one frame around the documented baselines.

    Draw order is fixed (EDA base first, then fields in declaration order)
    so a seeded source always produces the same frame sequence.
    """
    rng = rng or RandomSource()
    jitter = rng.jitter
    base_stress = 40 + jitter(30)

    facial = FacialReading(
        micro_tension=clamp(55 + jitter(25) + _facial_confidence(modalities) * 0.2, 0, 100),
        eye_aspect=clamp(60 + jitter(20), 0, 100),
    )
    voice = VoiceReading(
        pitch_var=clamp(30 + jitter(35), 5, 95),
        energy=clamp(55 + jitter(30), 0, 100),
    )
    text = TextReading(
        sentiment=clamp(60 + jitter(35), 0, 100),
        hedging=clamp(35 + jitter(30), 0, 100),
        assertiveness=clamp(55 + jitter(35), 0, 100),
    )
    physio = PhysioReading(
        hrv=clamp(68 + jitter(25), 30, 95),
        eda=clamp(base_stress + jitter(20), 5, 95),
        respiration=clamp(14 + jitter(6), 6, 24),
    )
    behavior = BehaviorReading(
        cursor_entropy=clamp(40 + jitter(30), 0, 100),
        gaze_stability=clamp(65 + jitter(25), 0, 100),
        keystroke_latency=clamp(45 + jitter(25), 0, 100),
    )
    return SensorFrame(
        active_modalities=count_active(modalities),
        facial=facial,
        voice=voice,
        text=text,
        physio=physio,
        behavior=behavior,
    )


def random_frame(rng: np.random.Generator) -> SensorFrame:
    """Every reading uniform in [0, 100], 0-5 active streams (soak input)."""
    readings = {
        modality: reading_type(**{attr: float(rng.uniform(0.0, 100.0)) for attr in _WIRE_KEYS[modality]})
        for modality, reading_type in _READING_TYPES.items()
    }
    return SensorFrame(active_modalities=int(rng.integers(0, 6)), **readings)


__all__ = [
    'ModalityDescriptor',
    'default_modalities',
    'count_active',
    'FacialReading',
    'VoiceReading',
    'TextReading',
    'PhysioReading',
    'BehaviorReading',
    'SensorFrame',
    'generate_frame',
    'random_frame',
]
