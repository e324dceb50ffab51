"""
Cognitive Engine - Composition Root
===================================

Owns one EngineState and runs the per-step pipeline:

    frame → fuse → memory → graph → reward → policy
          → cues → modes → synthesize → personality → StepResult

``step`` is synchronous and pure CPU. An engine is not thread-safe: at
most one step may be in flight per instance. Consumers only ever see
immutable StepResult snapshots.

Usage:
    engine = CognitiveEngine(seed=7)
    warm = engine.warmup(default_modalities(), steps=12)
    result = engine.step(frame, sensitivity=0.8)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .frames import ModalityDescriptor, SensorFrame, generate_frame
from .fusion import fuse_features
from .graph import graph_signal, modality_scores
from .modes import Cues, derive_cues
from .numeric import clamp, js_round, lerp
from .policy import compute_reward
from .rng import DEFAULT_SEED, RandomSource
from .state import (
    BiasMetrics,
    EngineState,
    FeatureImportance,
    ReactivityPoint,
    StepResult,
    SystemMetrics,
    TimelinePoint,
)
from .synthesis import DEFAULT_SENSITIVITY, CognitiveState, synthesize

logger = logging.getLogger(__name__)


DEFAULT_WARMUP_STEPS = 12
WARMUP_SENSITIVITY = 0.8


@dataclass(frozen=True)
class WarmupResult:
    """Last snapshot plus the series a chart would plot."""
    last: Optional[StepResult]
    timeline: Tuple[TimelinePoint, ...]
    reactivity: Tuple[ReactivityPoint, ...]

    def to_dict(self):
        return {
            'last': self.last.to_dict() if self.last is not None else None,
            'timeline': [p.to_dict() for p in self.timeline],
            'reactivity': [p.to_dict() for p in self.reactivity],
        }


class CognitiveEngine:
    """Stateful behavioral-cognitive simulator."""

    def __init__(self, seed: int = DEFAULT_SEED):
        self.state = EngineState.fresh(seed)

    # Lifecycle -----------------------------------------------------------
    def reinitialize(self, seed: Optional[int] = None) -> None:
        """Drop all state and start over from constructor defaults."""
        seed = self.state.seed if seed is None else seed
        self.state = EngineState.fresh(seed)
        logger.info("Engine reinitialized (seed=%s)", seed)

    @property
    def step_count(self) -> int:
        return self.state.step_count

    @property
    def rng(self) -> RandomSource:
        return self.state.rng

    @property
    def policy_weights(self) -> np.ndarray:
        return self.state.policy.weights.copy()

    @property
    def concentration(self) -> np.ndarray:
        return self.state.modes.concentration.copy()

    @property
    def personality_traits(self) -> np.ndarray:
        return self.state.personality.traits.copy()

    # Core step -----------------------------------------------------------
    def step(self, frame: SensorFrame, sensitivity: float = DEFAULT_SENSITIVITY) -> StepResult:
        state = self.state
        rng = state.rng
        state.step_count += 1

        fusion = fuse_features(frame)
        hidden = state.memory.update(fusion.vector, rng)

        signal = graph_signal(modality_scores(frame))

        reward = compute_reward(frame, fusion)
        state.policy.update(reward)

        cues = derive_cues(frame, fusion)
        state.modes.update(cues, fusion.mean)
        distribution = state.modes.distribution()

        cognitive = synthesize(frame, fusion, cues, hidden, sensitivity)

        state.personality.update(fusion.mean, reward, cues.deception_cue)
        fingerprint = state.personality.fingerprint(hidden, signal)

        importance = self._feature_importance(cues, cognitive, fusion.mean)
        system = SystemMetrics(
            streams=max(1, int(frame.active_modalities)),
            latency=js_round(lerp(48, 92, 1 - fusion.mean) + rng.next() * 6),
            accuracy=clamp(95 - cues.deception_cue * 5 + cues.deliberate_cue * 2, 88, 98),
        )
        bias = BiasMetrics(
            parity=clamp(0.9 + rng.next() * 0.08 - cues.deception_cue * 0.02, 0.82, 0.98),
            opportunity=clamp(0.88 + rng.next() * 0.08 - cues.stress_signal * 0.02, 0.82, 0.98),
            calibration=clamp(0.92 + rng.next() * 0.05 - fusion.variance * 0.04, 0.88, 0.99),
        )

        label = f"T+{state.step_count}s"
        result = StepResult(
            cognitive_state=cognitive,
            mode_distribution=tuple(distribution),
            feature_importance=importance,
            fingerprint=tuple(fingerprint),
            bias_metrics=bias,
            system_metrics=system,
            timeline_point=TimelinePoint(label, cognitive.attention, cognitive.stress),
            reactivity_point=ReactivityPoint(label, cognitive.reactivity),
            personality=tuple(state.personality.display_profile()),
        )
        if logger.isEnabledFor(logging.DEBUG):
            top = max(distribution, key=lambda m: m.score)
            logger.debug("step %d reward=%.3f dominant=%s", state.step_count, reward, top.mode)
        return result

    def warmup(
        self,
        modalities: Sequence[ModalityDescriptor],
        steps: int = DEFAULT_WARMUP_STEPS,
    ) -> WarmupResult:
        """Run ``steps`` self-generated frames through ``step``."""
        timeline: List[TimelinePoint] = []
        reactivity: List[ReactivityPoint] = []
        last: Optional[StepResult] = None
        for _ in range(steps):
            frame = generate_frame(modalities, self.state.rng)
            last = self.step(frame, sensitivity=WARMUP_SENSITIVITY)
            timeline.append(last.timeline_point)
            reactivity.append(last.reactivity_point)
        return WarmupResult(last=last, timeline=tuple(timeline), reactivity=tuple(reactivity))

    # Internal helpers ----------------------------------------------------
    @staticmethod
    def _feature_importance(
        cues: Cues,
        cognitive: CognitiveState,
        fusion_mean: float,
    ) -> Tuple[FeatureImportance, ...]:
        factors = [
            ('Stress variance', cues.stress_signal * 100),
            ('Engagement consistency', cognitive.engagement),
            ('Emotional drift', (1 - fusion_mean) * 100),
            ('Attention stability', cognitive.attention),
            ('Cognitive load', cognitive.cognitive_load),
        ]
        peak = max(weight for _, weight in factors)
        return tuple(
            FeatureImportance(
                label=label,
                weight=weight,
                importance=js_round(weight / peak * 100) if peak > 0 else 0,
            )
            for label, weight in factors
        )


__all__ = ['CognitiveEngine', 'WarmupResult', 'DEFAULT_WARMUP_STEPS', 'WARMUP_SENSITIVITY']
