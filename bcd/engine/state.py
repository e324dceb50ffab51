"""
Engine State & Step Snapshots
=============================

Two kinds of structure live here:

    EngineState  - mutable, owned by exactly one CognitiveEngine
    StepResult   - immutable snapshot handed to consumers

A StepResult never aliases EngineState: it holds only ints, floats,
strings and tuples, and ``to_dict`` produces the camelCase JSON shape the
dashboard exports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .memory import RecurrentMemory
from .modes import ModeScore, ModeTracker
from .personality import FingerprintEntry, PersonalityDrift, TraitScore
from .policy import PolicyAdapter
from .rng import DEFAULT_SEED, RandomSource
from .synthesis import CognitiveState


# =============================================================================
# Engine State
# =============================================================================

@dataclass
class EngineState:
    """
    Everything an engine mutates between steps.

    Replaced wholesale on reinitialization; nothing carries over.
    """
    seed: int = DEFAULT_SEED
    step_count: int = 0
    memory: RecurrentMemory = field(default_factory=RecurrentMemory)
    policy: PolicyAdapter = field(default_factory=PolicyAdapter)
    modes: ModeTracker = field(default_factory=ModeTracker)
    personality: PersonalityDrift = field(default_factory=PersonalityDrift)
    rng: Optional[RandomSource] = None

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = RandomSource(self.seed)

    @classmethod
    def fresh(cls, seed: int = DEFAULT_SEED) -> 'EngineState':
        return cls(seed=seed)

    def to_dict(self) -> Dict[str, Any]:
        """Inspectable dump (debugging / invariant reports)."""
        return {
            'seed': self.seed,
            'step_count': self.step_count,
            'hidden': self.memory.hidden.tolist(),
            'cell': self.memory.cell.tolist(),
            'concentration': self.modes.concentration.tolist(),
            'policy_weights': self.policy.weights.tolist(),
            'personality': self.personality.traits.tolist(),
            'rng_state': self.rng.state,
        }


# =============================================================================
# Snapshot Records
# =============================================================================

@dataclass(frozen=True)
class FeatureImportance:
    label: str
    weight: float
    importance: int

    def to_dict(self) -> Dict[str, Any]:
        return {'label': self.label, 'weight': self.weight, 'importance': self.importance}


@dataclass(frozen=True)
class BiasMetrics:
    parity: float
    opportunity: float
    calibration: float

    def to_dict(self) -> Dict[str, float]:
        return {'parity': self.parity, 'opportunity': self.opportunity, 'calibration': self.calibration}


@dataclass(frozen=True)
class SystemMetrics:
    streams: int
    latency: int
    accuracy: float

    def to_dict(self) -> Dict[str, Any]:
        return {'streams': self.streams, 'latency': self.latency, 'accuracy': self.accuracy}


@dataclass(frozen=True)
class TimelinePoint:
    time: str
    attention: float
    stress: float

    def to_dict(self) -> Dict[str, Any]:
        return {'time': self.time, 'attention': self.attention, 'stress': self.stress}


@dataclass(frozen=True)
class ReactivityPoint:
    time: str
    reactivity: float

    def to_dict(self) -> Dict[str, Any]:
        return {'time': self.time, 'reactivity': self.reactivity}


# =============================================================================
# Step Result
# =============================================================================

@dataclass(frozen=True)
class StepResult:
    """One immutable engine snapshot."""
    cognitive_state: CognitiveState
    mode_distribution: Tuple[ModeScore, ...]
    feature_importance: Tuple[FeatureImportance, ...]
    fingerprint: Tuple[FingerprintEntry, ...]
    bias_metrics: BiasMetrics
    system_metrics: SystemMetrics
    timeline_point: TimelinePoint
    reactivity_point: ReactivityPoint
    personality: Tuple[TraitScore, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'cognitiveState': self.cognitive_state.to_dict(),
            'modeDistribution': [m.to_dict() for m in self.mode_distribution],
            'featureImportance': [f.to_dict() for f in self.feature_importance],
            'fingerprint': [f.to_dict() for f in self.fingerprint],
            'biasMetrics': self.bias_metrics.to_dict(),
            'systemMetrics': self.system_metrics.to_dict(),
            'timelinePoint': self.timeline_point.to_dict(),
            'reactivityPoint': self.reactivity_point.to_dict(),
            'personality': [p.to_dict() for p in self.personality],
        }


__all__ = [
    'EngineState',
    'FeatureImportance',
    'BiasMetrics',
    'SystemMetrics',
    'TimelinePoint',
    'ReactivityPoint',
    'StepResult',
]
