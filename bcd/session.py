"""
Monitoring Session - Periodic Driver Around One Engine
======================================================

The session is the single logical owner of a CognitiveEngine. It plays
the role the dashboard's timer loop plays:

    every interval_s while monitoring:
        frame  = generate_frame(modalities, driver_rng)
        result = engine.step(frame, sensitivity)
        history ← timeline / reactivity points (bounded)
        modalities drift (confidence jitter, random dropout)
        alert if stress or deception risk spike

Baseline calibration and reset rebuild the engine from scratch and
re-seed the history buffers with a fresh warmup.
"""

from __future__ import annotations

import copy
import logging
import time
from collections import deque
from pathlib import Path
from typing import Callable, Deque, List, Optional, Sequence, Union

from .config import DashboardConfig
from .engine.core import CognitiveEngine, WarmupResult
from .engine.frames import ModalityDescriptor, count_active, generate_frame
from .engine.numeric import clamp
from .engine.rng import RandomSource
from .engine.state import ReactivityPoint, StepResult, TimelinePoint
from .engine.synthesis import SENSITIVITY_RANGE
from .narrative import RiskAlert, build_narrative, detect_risk_alert, dominant_mode
from .schemas import SessionExport

logger = logging.getLogger(__name__)


class MonitoringSession:
    """Owns an engine, its modality list, and the rolling history."""

    def __init__(
        self,
        config: Optional[DashboardConfig] = None,
        modalities: Optional[Sequence[ModalityDescriptor]] = None,
    ):
        self.config = config or DashboardConfig()
        source = modalities if modalities is not None else self.config.modalities
        self._initial_modalities = [copy.copy(m) for m in source]
        self.modalities: List[ModalityDescriptor] = [copy.copy(m) for m in source]

        self.sensitivity = clamp(self.config.engine.sensitivity, *SENSITIVITY_RANGE)
        self.monitoring = True
        self.driver_rng = RandomSource(self.config.session.driver_seed)

        maxlen = self.config.session.history_length
        self.timeline: Deque[TimelinePoint] = deque(maxlen=maxlen)
        self.reactivity: Deque[ReactivityPoint] = deque(maxlen=maxlen)
        self.alerts: Deque[RiskAlert] = deque(maxlen=self.config.session.max_alerts)
        self.last: Optional[StepResult] = None

        self.engine = CognitiveEngine(seed=self.config.engine.seed)
        self._absorb_warmup(self.engine.warmup(self.modalities, self.config.session.startup_warmup_steps))

    # Monitoring control --------------------------------------------------
    def pause(self) -> None:
        self.monitoring = False

    def resume(self) -> None:
        self.monitoring = True

    def toggle_monitoring(self) -> bool:
        self.monitoring = not self.monitoring
        logger.info("Monitoring %s", "resumed" if self.monitoring else "paused")
        return self.monitoring

    def set_sensitivity(self, value: float) -> float:
        self.sensitivity = clamp(float(value), *SENSITIVITY_RANGE)
        return self.sensitivity

    def toggle_modality(self, modality_id: str) -> ModalityDescriptor:
        for m in self.modalities:
            if m.id == modality_id:
                m.active = not m.active
                return m
        raise KeyError(f"Unknown modality: {modality_id}")

    @property
    def active_streams(self) -> int:
        return count_active(self.modalities)

    # Core tick -----------------------------------------------------------
    def tick(self) -> Optional[StepResult]:
        """Run one monitoring cycle. Returns None while paused."""
        if not self.monitoring:
            return None

        frame = generate_frame(self.modalities, self.driver_rng)
        result = self.engine.step(frame, sensitivity=self.sensitivity)
        self.last = result
        self.timeline.append(result.timeline_point)
        self.reactivity.append(result.reactivity_point)
        self._drift_modalities()

        alert = detect_risk_alert(result.cognitive_state, self.config.alerts, step=self.engine.step_count)
        if alert is not None:
            self.alerts.append(alert)
            logger.warning("%s: %s", alert.title, alert.message)
        return result

    def run(
        self,
        ticks: int,
        interval: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
        on_tick: Optional[Callable[[StepResult], None]] = None,
    ) -> int:
        """
        Drive ``tick`` on a fixed cadence.

        Stops early when monitoring is paused or on Ctrl-C; engine state
        stays as last committed. Returns the number of completed ticks.
        """
        interval = self.config.session.interval_s if interval is None else interval
        done = 0
        try:
            for i in range(ticks):
                result = self.tick()
                if result is None:
                    break
                done += 1
                if on_tick is not None:
                    on_tick(result)
                if interval > 0 and i < ticks - 1:
                    sleep(interval)
        except KeyboardInterrupt:
            logger.info("Monitoring interrupted after %d ticks", done)
        return done

    # Lifecycle -----------------------------------------------------------
    def calibrate_baseline(self) -> WarmupResult:
        """Fresh engine state, warmed up on the current modalities."""
        return self._reinitialize()

    def reset(self) -> WarmupResult:
        """Restore the initial modality list, then recalibrate."""
        self.modalities = [copy.copy(m) for m in self._initial_modalities]
        self.alerts.clear()
        return self._reinitialize()

    # Reporting -----------------------------------------------------------
    def narrative(self) -> str:
        if self.last is None:
            return ""
        top = dominant_mode(self.last.mode_distribution)
        return build_narrative(self.last.cognitive_state, top.mode if top else "Rational")

    def snapshot(self) -> SessionExport:
        if self.last is None:
            raise RuntimeError("No snapshot available before the first step")
        payload = self.last.to_dict()
        return SessionExport(
            cognitiveState=payload["cognitiveState"],
            modalities=[m.to_dict() for m in self.modalities],
            personality=payload["personality"],
            timeline=[p.to_dict() for p in self.timeline],
            reactivity=[p.to_dict() for p in self.reactivity],
            fingerprint=payload["fingerprint"],
            modeDistribution=payload["modeDistribution"],
            systemMetrics=payload["systemMetrics"],
        )

    def export_json(self, path: Union[str, Path]) -> Path:
        out = self.snapshot().save(path)
        logger.info("Session exported to %s", out)
        return out

    # Internal helpers ----------------------------------------------------
    def _reinitialize(self) -> WarmupResult:
        self.engine.reinitialize(self.config.engine.seed)
        warm = self.engine.warmup(self.modalities, self.config.engine.warmup_steps)
        self.timeline.clear()
        self.reactivity.clear()
        self._absorb_warmup(warm)
        return warm

    def _absorb_warmup(self, warm: WarmupResult) -> None:
        self.timeline.extend(warm.timeline)
        self.reactivity.extend(warm.reactivity)
        self.last = warm.last

    def _drift_modalities(self) -> None:
        cfg = self.config.session
        lo, hi = cfg.confidence_bounds
        for m in self.modalities:
            if m.active:
                delta = self.driver_rng.uniform(*cfg.active_drift)
            else:
                delta = cfg.inactive_drift
            m.confidence = clamp(m.confidence + delta, lo, hi)
            if m.active and self.driver_rng.next() <= cfg.dropout_probability:
                m.active = False
                logger.info("Modality %s dropped out", m.id)


def load_export(path: Union[str, Path]) -> SessionExport:
    """Read a session export back into a validated model."""
    return SessionExport.load(path)


__all__ = ["MonitoringSession", "RiskAlert", "load_export"]
