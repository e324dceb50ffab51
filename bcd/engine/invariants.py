"""
Engine Invariants - Bounds That Must Hold After Every Step
==========================================================

    • every percentage-valued snapshot field ∈ [0, 100]
    • concentration[i] > 0
    • policy weights ∈ [0.05, 0.45]
    • personality traits ∈ [0.35, 0.95]
    • mode CI pairs ordered, mode scores sum to 100 ± 2

Violations are developer-facing. Nothing in the engine calls these on
the hot path; tests and ``bcd soak`` do.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

from .personality import PERSONALITY_MAX, PERSONALITY_MIN
from .policy import POLICY_MAX, POLICY_MIN
from .state import EngineState, StepResult


MODE_SUM_SLACK = 2


class InvariantViolation(AssertionError):
    """A numeric bound was broken."""

    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__("; ".join(self.violations))


def _within(name: str, value: float, lo: float, hi: float, out: List[str]) -> None:
    if not (lo <= value <= hi) or math.isnan(value):
        out.append(f"{name}={value!r} outside [{lo}, {hi}]")


def state_violations(state: EngineState) -> List[str]:
    out: List[str] = []
    for i, a in enumerate(state.modes.concentration):
        if not a > 0:
            out.append(f"concentration[{i}]={a!r} not positive")
    for i, w in enumerate(state.policy.weights):
        _within(f"policy[{i}]", float(w), POLICY_MIN, POLICY_MAX, out)
    for i, p in enumerate(state.personality.traits):
        _within(f"personality[{i}]", float(p), PERSONALITY_MIN, PERSONALITY_MAX, out)
    return out


def _percent_fields(result: StepResult) -> Iterable[Tuple[str, float]]:
    for key, value in result.cognitive_state.to_dict().items():
        yield f"cognitiveState.{key}", value
    for m in result.mode_distribution:
        yield f"mode.{m.mode}.score", m.score
        yield f"mode.{m.mode}.ci[0]", m.ci[0]
        yield f"mode.{m.mode}.ci[1]", m.ci[1]
    for p in result.personality:
        yield f"personality.{p.trait}", p.score
    for f in result.feature_importance:
        yield f"importance.{f.label}", f.importance
    for f in result.fingerprint:
        yield f"fingerprint.{f.trait}.score", f.score
    yield "timeline.attention", result.timeline_point.attention
    yield "timeline.stress", result.timeline_point.stress
    yield "reactivity", result.reactivity_point.reactivity


def result_violations(result: StepResult) -> List[str]:
    out: List[str] = []
    for name, value in _percent_fields(result):
        _within(name, float(value), 0, 100, out)

    total = sum(m.score for m in result.mode_distribution)
    if abs(total - 100) > MODE_SUM_SLACK:
        out.append(f"mode scores sum to {total}")
    for m in result.mode_distribution:
        if m.ci[0] > m.ci[1]:
            out.append(f"mode.{m.mode}.ci unordered {m.ci}")

    bias = result.bias_metrics
    _within("bias.parity", bias.parity, 0.82, 0.98, out)
    _within("bias.opportunity", bias.opportunity, 0.82, 0.98, out)
    _within("bias.calibration", bias.calibration, 0.88, 0.99, out)
    _within("system.accuracy", result.system_metrics.accuracy, 88, 98, out)
    if result.system_metrics.streams < 1:
        out.append(f"system.streams={result.system_metrics.streams} below 1")
    return out


def check_state(state: EngineState) -> None:
    violations = state_violations(state)
    if violations:
        raise InvariantViolation(violations)


def check_result(result: StepResult) -> None:
    violations = result_violations(result)
    if violations:
        raise InvariantViolation(violations)


__all__ = [
    'InvariantViolation',
    'state_violations',
    'result_violations',
    'check_state',
    'check_result',
]
