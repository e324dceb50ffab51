"""BCD Configuration - Settings for the engine and the monitoring session.

Handles loading and accessing configuration for:
- Engine seed, sensitivity and warmup length
- Session cadence, history buffers and modality drift
- Risk alert thresholds
- The initial modality list
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .engine.frames import ModalityDescriptor, default_modalities
from .engine.rng import DEFAULT_SEED

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Configuration for the simulation engine."""

    seed: int = DEFAULT_SEED
    sensitivity: float = 0.8
    warmup_steps: int = 12


@dataclass
class SessionConfig:
    """Configuration for the periodic monitoring driver."""

    interval_s: float = 2.4
    history_length: int = 14
    startup_warmup_steps: int = 14
    driver_seed: int = 11
    dropout_probability: float = 0.02
    confidence_bounds: Tuple[float, float] = (30.0, 99.0)
    active_drift: Tuple[float, float] = (-3.0, 4.0)
    inactive_drift: float = -1.5
    max_alerts: int = 3


@dataclass
class AlertConfig:
    """Thresholds for risk-spike alerts."""

    stress_threshold: float = 82.0
    deception_threshold: float = 70.0


@dataclass
class DashboardConfig:
    """Complete configuration."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    alerts: AlertConfig = field(default_factory=AlertConfig)
    modalities: List[ModalityDescriptor] = field(default_factory=default_modalities)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "engine": {
                "seed": self.engine.seed,
                "sensitivity": self.engine.sensitivity,
                "warmup_steps": self.engine.warmup_steps,
            },
            "session": {
                "interval_s": self.session.interval_s,
                "history_length": self.session.history_length,
                "startup_warmup_steps": self.session.startup_warmup_steps,
                "driver_seed": self.session.driver_seed,
                "dropout_probability": self.session.dropout_probability,
                "confidence_bounds": list(self.session.confidence_bounds),
                "active_drift": list(self.session.active_drift),
                "inactive_drift": self.session.inactive_drift,
                "max_alerts": self.session.max_alerts,
            },
            "alerts": {
                "stress_threshold": self.alerts.stress_threshold,
                "deception_threshold": self.alerts.deception_threshold,
            },
            "modalities": [m.to_dict() for m in self.modalities],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DashboardConfig":
        """Create from dictionary."""
        config = cls()

        if "engine" in data:
            eng = data["engine"] or {}
            config.engine = EngineConfig(
                seed=int(eng.get("seed", DEFAULT_SEED)),
                sensitivity=float(eng.get("sensitivity", 0.8)),
                warmup_steps=int(eng.get("warmup_steps", 12)),
            )

        if "session" in data:
            ses = data["session"] or {}
            defaults = SessionConfig()
            config.session = SessionConfig(
                interval_s=float(ses.get("interval_s", defaults.interval_s)),
                history_length=int(ses.get("history_length", defaults.history_length)),
                startup_warmup_steps=int(ses.get("startup_warmup_steps", defaults.startup_warmup_steps)),
                driver_seed=int(ses.get("driver_seed", defaults.driver_seed)),
                dropout_probability=float(ses.get("dropout_probability", defaults.dropout_probability)),
                confidence_bounds=tuple(ses.get("confidence_bounds", defaults.confidence_bounds)),
                active_drift=tuple(ses.get("active_drift", defaults.active_drift)),
                inactive_drift=float(ses.get("inactive_drift", defaults.inactive_drift)),
                max_alerts=int(ses.get("max_alerts", defaults.max_alerts)),
            )

        if "alerts" in data:
            al = data["alerts"] or {}
            config.alerts = AlertConfig(
                stress_threshold=float(al.get("stress_threshold", 82.0)),
                deception_threshold=float(al.get("deception_threshold", 70.0)),
            )

        if data.get("modalities"):
            config.modalities = [ModalityDescriptor.from_dict(m) for m in data["modalities"]]

        return config


# =============================================================================
# Loading Functions
# =============================================================================

_default_config: Optional[DashboardConfig] = None
_config_search_paths: List[Path] = [
    Path("bcd.yaml"),
    Path("config/bcd.yaml"),
    Path.home() / ".config" / "bcd" / "bcd.yaml",
]


def load_config(path: Optional[Path] = None) -> DashboardConfig:
    """Load configuration from file.

    Args:
        path: Explicit config path (optional)

    Returns:
        Loaded configuration, or defaults when no usable file is found
    """
    global _default_config

    config_path = Path(path) if path else None
    if not config_path:
        for search_path in _config_search_paths:
            if search_path.exists():
                config_path = search_path
                break

    if config_path and config_path.exists():
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
            config = DashboardConfig.from_dict(data or {})
            logger.info(f"Loaded config from {config_path}")
            _default_config = config
            return config
        except (OSError, yaml.YAMLError, AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
    elif config_path:
        logger.warning(f"Config file {config_path} not found, using defaults")

    config = DashboardConfig()
    _default_config = config
    return config


def get_config() -> DashboardConfig:
    """Get the current configuration, loading it on first use."""
    global _default_config
    if _default_config is None:
        _default_config = load_config()
    return _default_config


def save_config(config: DashboardConfig, path: Path) -> Path:
    """Save configuration as YAML.

    Args:
        config: Configuration to save
        path: Destination file

    Returns:
        The path written
    """
    save_path = Path(path)
    save_path.parent.mkdir(parents=True, exist_ok=True)

    with open(save_path, "w") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

    logger.info(f"Saved config to {save_path}")
    return save_path


__all__ = [
    "EngineConfig",
    "SessionConfig",
    "AlertConfig",
    "DashboardConfig",
    "load_config",
    "get_config",
    "save_config",
]
